# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
# http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.


class ChecksumCombineError(Exception):
    pass


class UnsupportedChecksumError(ChecksumCombineError):
    """Raised when a checksum algorithm has no combine support"""

    def __init__(self, checksum_name, supported):
        msg = 'Unsupported checksum %r, must be one of: %s' % (
            checksum_name, ', '.join(supported))
        super(UnsupportedChecksumError, self).__init__(msg)
        self.checksum_name = checksum_name


class InvalidChecksumError(ChecksumCombineError):
    pass
