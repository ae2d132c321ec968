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
from binascii import crc32

import pytest
from botocore.httpchecksum import Crc32Checksum

from crc32combine.checksums import (
    CASTAGNOLI,
    IEEE,
    KOOPMAN,
    FullObjectChecksum,
    combine,
    make_table,
)
from tests import MB, crc_checksum, seeded_bytes


class TestCombineStreams:
    def test_combine_ieee_megabytes(self):
        data = seeded_bytes(3 * MB)
        data1, data2 = data[:MB], data[MB:]
        sum1 = crc32(data1)
        sum2 = crc32(data2)
        expected = crc32(data1 + data2)
        assert combine(make_table(IEEE), sum1, sum2, len(data2)) == expected

    @pytest.mark.parametrize('poly', [IEEE, CASTAGNOLI, KOOPMAN])
    def test_combine_polynomials(self, poly):
        table = make_table(poly)
        data = seeded_bytes(96 * 1024, seed=poly)
        data1, data2 = data[:32 * 1024], data[32 * 1024:]
        sum1 = crc_checksum(data1, table)
        sum2 = crc_checksum(data2, table)
        expected = crc_checksum(data, table)
        assert combine(table, sum1, sum2, len(data2)) == expected

    @pytest.mark.parametrize('poly', [IEEE, CASTAGNOLI, KOOPMAN])
    def test_chunking_is_associative(self, poly):
        table = make_table(poly)
        data = seeded_bytes(5000, seed=1)
        expected = crc_checksum(data, table)
        for first, second in [(0, 1), (1, 2), (17, 4000), (2500, 2500),
                              (4999, 5000), (0, 5000)]:
            a, b, c = data[:first], data[first:second], data[second:]
            crc_a = crc_checksum(a, table)
            crc_b = crc_checksum(b, table)
            crc_c = crc_checksum(c, table)

            crc_ab = combine(table, crc_a, crc_b, len(b))
            crc_ab_c = combine(table, crc_ab, crc_c, len(c))

            crc_bc = combine(table, crc_b, crc_c, len(c))
            crc_a_bc = combine(table, crc_a, crc_bc, len(b) + len(c))

            assert crc_ab_c == crc_a_bc == expected


class TestFullObjectChecksumParts:
    def test_multipart_object(self):
        body = seeded_bytes(2 * MB + 12345, seed=7)
        part_size = 256 * 1024
        checksum = FullObjectChecksum('ChecksumCRC32')
        for start in range(0, len(body), part_size):
            part = body[start:start + part_size]
            part_checksum = Crc32Checksum()
            part_checksum.update(part)
            checksum.add_part(part_checksum.b64digest(), len(part))
        assert checksum.length == len(body)
        assert checksum.b64digest() == Crc32Checksum().handle(body)
