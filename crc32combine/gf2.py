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
"""
Bit-matrix arithmetic over GF(2) for 32-bit CRC registers.

A matrix is a sequence of 32 integers where row ``j`` is the image of input
bit ``j``. Applying a matrix to a vector XORs together the rows selected by
the set bits of the vector.
"""

GF2_DIM = 32
CRC_MASK = 0xFFFFFFFF

# Operator for four zero bits with the four polynomial rows left unseeded.
INIT_ODD = (0, 0, 0, 0) + tuple(1 << n for n in range(GF2_DIM - 4))

# Operator for two zero bits with the two polynomial rows left unseeded.
INIT_EVEN = (0, 0) + tuple(1 << n for n in range(GF2_DIM - 2))


def new_matrix(prototype=None):
    """Return a fresh, mutable matrix

    :param prototype: Rows to copy into the new matrix. When omitted the
        matrix is all zeros.
    """
    if prototype is None:
        return [0] * GF2_DIM
    return list(prototype)


def gf2_matrix_multiply(mat, vec):
    """Multiply a matrix by a vector in GF(2)

    :type mat: list
    :param mat: The 32 row matrix.

    :type vec: int
    :param vec: The 32-bit vector to apply the matrix to.

    :rtype: int
    :returns: The product ``mat * vec``.
    """
    total = 0
    vec &= CRC_MASK
    i = 0
    while vec:
        if vec & 1:
            total ^= mat[i]
        if vec & 2:
            total ^= mat[i + 1]
        if vec & 4:
            total ^= mat[i + 2]
        if vec & 8:
            total ^= mat[i + 3]
        vec >>= 4
        i += 4
    return total


def gf2_matrix_square(square, mat):
    """Square a matrix in GF(2)

    The result is written into ``square``, which must not be ``mat``.

    :returns: The ``square`` matrix.
    """
    for n, row in enumerate(mat):
        square[n] = gf2_matrix_multiply(mat, row)
    return square
