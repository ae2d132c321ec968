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
"""Combine CRC-32 checksums of independently hashed byte streams."""
import logging

__author__ = 'Amazon Web Services'
__version__ = '0.1.0'


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


from crc32combine.checksums import combine  # noqa: E402,F401
from crc32combine.checksums import make_table  # noqa: E402,F401
