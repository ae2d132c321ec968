# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the 'License'). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
# http://aws.amazon.com/apache2.0/
#
# or in the 'license' file accompanying this file. This file is
# distributed on an 'AS IS' BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
import random

MB = 1024 * 1024


def crc_checksum(data, table, crc=0):
    """Reference table driven CRC over ``data``

    Matches ``binascii.crc32`` when ``table`` is the IEEE table. Used to get
    checksums for polynomials the standard library does not cover.
    """
    crc = ~crc & 0xFFFFFFFF
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return ~crc & 0xFFFFFFFF


def seeded_bytes(size, seed=0):
    return random.Random(seed).randbytes(size)


def shift_zero_bits(crc, poly, num_bits):
    """Run ``num_bits`` zero bits through a reflected CRC register"""
    for _ in range(num_bits):
        if crc & 1:
            crc = (crc >> 1) ^ poly
        else:
            crc >>= 1
    return crc
