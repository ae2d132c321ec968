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
import base64
import binascii
import functools
import logging

from botocore.compat import HAS_CRT
from botocore.exceptions import MissingDependencyException
from botocore.httpchecksum import BaseChecksum
from botocore.httpchecksum import Crc32Checksum

from crc32combine.exceptions import InvalidChecksumError
from crc32combine.exceptions import UnsupportedChecksumError
from crc32combine.gf2 import CRC_MASK
from crc32combine.gf2 import INIT_EVEN
from crc32combine.gf2 import INIT_ODD
from crc32combine.gf2 import gf2_matrix_multiply
from crc32combine.gf2 import gf2_matrix_square
from crc32combine.gf2 import new_matrix

if HAS_CRT:
    from botocore.httpchecksum import CrtCrc32cChecksum
else:
    CrtCrc32cChecksum = None


logger = logging.getLogger(__name__)

# Reflected 32-bit polynomials.
IEEE = 0xEDB88320
CASTAGNOLI = 0x82F63B78
KOOPMAN = 0xEB31D82E


@functools.lru_cache(maxsize=None)
def make_table(poly):
    """Build the byte-wise lookup table for a reflected polynomial

    :type poly: int
    :param poly: The polynomial in reflected (bit-reversed) form, for
        example ``IEEE``.

    :rtype: tuple
    :returns: The 256 entry table. Entry ``i`` is the register after
        shifting the byte ``i`` through it.
    """
    poly &= CRC_MASK
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ poly
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


def combine(table, crc1, crc2, length):
    """Combine two CRC values as if their streams were hashed back to back.

    ``table`` must be the reflected lookup table (see ``make_table``) for the
    polynomial that produced both ``crc1`` and ``crc2``. A table built for
    another polynomial, or under the non-reflected convention, silently
    yields a wrong value.

    :type table: sequence
    :param table: The 256 entry lookup table of the polynomial.

    :type crc1: int
    :param crc1: CRC of the first stream.

    :type crc2: int
    :param crc2: CRC of the second stream.

    :type length: int
    :param length: Length in bytes of the second stream. When zero or
        negative ``crc1`` is returned unchanged.

    :rtype: int
    :returns: CRC of the first stream followed by the second stream.
    """
    if length <= 0:
        return crc1

    odd = new_matrix(INIT_ODD)
    even = new_matrix(INIT_EVEN)
    odd[0], odd[1], odd[2], odd[3] = (
        table[1 << 4], table[1 << 5], table[1 << 6], table[1 << 7])
    even[0], even[1] = table[1 << 6], table[1 << 7]

    # The first square turns the four zero bit operator in odd into the
    # one zero byte operator, every later square doubles the byte count.
    while length > 0:
        gf2_matrix_square(even, odd)
        if length & 1:
            crc1 = gf2_matrix_multiply(even, crc1)
        odd, even = even, odd
        length >>= 1

    return (crc1 ^ crc2) & CRC_MASK


def combine_crc32(crc1, crc2, len2):
    """Combine two CRC32 values.

    :type crc1: int
    :param crc1: Current CRC32 integer value.

    :type crc2: int
    :param crc2: Second CRC32 integer value to combine.

    :type len2: int
    :param len2: Length of data that produced `crc2`.

    :rtype: int
    :returns: Combined CRC32 integer value.
    """
    return combine(make_table(IEEE), crc1, crc2, len2)


def combine_crc32c(crc1, crc2, len2):
    """Combine two CRC32C (Castagnoli) values.

    Takes the same arguments as ``combine_crc32``.
    """
    return combine(make_table(CASTAGNOLI), crc1, crc2, len2)


_CRC_CHECKSUM_TO_COMBINE_FUNCTION = {
    "ChecksumCRC32": combine_crc32,
    "ChecksumCRC32C": combine_crc32c,
}

_ALGORITHM_TO_CHECKSUM_NAME = {
    "crc32": "ChecksumCRC32",
    "crc32c": "ChecksumCRC32C",
}


def _resolve_checksum_name(checksum_name):
    if checksum_name in _CRC_CHECKSUM_TO_COMBINE_FUNCTION:
        return checksum_name
    algorithm = str(checksum_name).lower()
    if algorithm in _ALGORITHM_TO_CHECKSUM_NAME:
        return _ALGORITHM_TO_CHECKSUM_NAME[algorithm]
    raise UnsupportedChecksumError(
        checksum_name,
        list(_CRC_CHECKSUM_TO_COMBINE_FUNCTION)
        + list(_ALGORITHM_TO_CHECKSUM_NAME),
    )


def _get_data_checksum_cls(checksum_name):
    if checksum_name == "ChecksumCRC32":
        return Crc32Checksum
    if CrtCrc32cChecksum is None:
        raise MissingDependencyException(
            msg=(
                "Using CRC32C requires an additional dependency. You will "
                "need to pip install botocore[crt] before proceeding."
            )
        )
    return CrtCrc32cChecksum


def _to_int_crc(checksum):
    if isinstance(checksum, bool):
        raise InvalidChecksumError(
            'CRC value %r is not a 32-bit unsigned integer' % checksum
        )
    if isinstance(checksum, int):
        if not 0 <= checksum <= CRC_MASK:
            raise InvalidChecksumError(
                'CRC value %r is not a 32-bit unsigned integer' % checksum
            )
        return checksum
    try:
        raw = base64.b64decode(checksum, validate=True)
    except (binascii.Error, TypeError, ValueError) as e:
        raise InvalidChecksumError(
            'Checksum %r is not valid base64: %s' % (checksum, e)
        )
    if len(raw) != 4:
        raise InvalidChecksumError(
            'Checksum %r decodes to %s bytes, expected 4'
            % (checksum, len(raw))
        )
    return int.from_bytes(raw, byteorder="big")


class FullObjectChecksum(BaseChecksum):
    def __init__(self, checksum_name="ChecksumCRC32"):
        """Accumulates part checksums into the checksum of the whole object

        Parts must be added in the order they appear in the object. Each
        part is either hashed here with ``update()`` or, when its checksum
        is already known (for example from an ``UploadPart`` response),
        folded in with ``add_part()``.

        :param checksum_name: The checksum member name, such as
            ``ChecksumCRC32``, or the algorithm name, such as ``crc32c``.
        """
        self._checksum_name = _resolve_checksum_name(checksum_name)
        self._combine_function = _CRC_CHECKSUM_TO_COMBINE_FUNCTION[
            self._checksum_name
        ]
        self._int_crc = 0
        self._length = 0

    @property
    def checksum_name(self):
        return self._checksum_name

    @property
    def int_crc(self):
        return self._int_crc

    @property
    def length(self):
        return self._length

    def add_part(self, checksum, length):
        """Fold in the checksum of the next part

        :param checksum: The part's CRC, either as an integer or in the
            base64 encoded form S3 returns.

        :type length: int
        :param length: The size of the part in bytes.
        """
        if length < 0:
            raise InvalidChecksumError(
                'Part length must not be negative, got %s' % length
            )
        int_crc = _to_int_crc(checksum)
        logger.debug(
            'Combining %s part of %s bytes at offset %s.',
            self._checksum_name, length, self._length,
        )
        self._int_crc = self._combine_function(self._int_crc, int_crc, length)
        self._length += length

    def update(self, chunk):
        data_checksum = _get_data_checksum_cls(self._checksum_name)()
        data_checksum.update(chunk)
        int_crc = int.from_bytes(data_checksum.digest(), byteorder="big")
        self.add_part(int_crc, len(chunk))

    def digest(self):
        return self._int_crc.to_bytes(4, byteorder="big")


def combine_checksums(checksum_name, parts):
    """Compute the checksum of an object from the checksums of its parts

    :param checksum_name: The checksum member name or algorithm name.

    :param parts: An iterable of ``(checksum, length)`` pairs in object
        order.

    :rtype: str
    :returns: The base64 encoded checksum of the whole object.
    """
    full_object_checksum = FullObjectChecksum(checksum_name)
    for checksum, length in parts:
        full_object_checksum.add_part(checksum, length)
    return full_object_checksum.b64digest()
