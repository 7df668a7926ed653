################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of stones
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Arithmetic on 2x2, 3x3 and 4x4 matrices

Matrices are represented as row-major tuples. Element (r, c) of an NxN
matrix is stored at ``data[r * N + c]``, so a 3x3 matrix is a tuple of 9
scalars. The size is implied by the function name and is not validated by
the arithmetic operations.

Products accumulate in ascending index order starting from the additive
identity of the element kind.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from typing import TypeVar

from stones.number_traits import one
from stones.number_traits import zero
from stones.number_traits import zero_like
from stones.vector import Vector4


T = TypeVar("T")

Matrix2 = tuple[T, T, T, T]
Matrix2i = tuple[int, int, int, int]
Matrix2f = tuple[float, float, float, float]

# 9 elements
Matrix3 = tuple[T, ...]
Matrix3i = tuple[int, ...]
Matrix3f = tuple[float, ...]

# 16 elements
Matrix4 = tuple[T, ...]
Matrix4i = tuple[int, ...]
Matrix4f = tuple[float, ...]


def _validate_matrix_size(values: Sequence[Any], n: int, name: str) -> None:
    expected: int = n * n
    if len(values) != expected:
        raise ValueError(
            f"{name} must have length {expected} for {n}x{n}, got {len(values)}"
        )


def _identity(n: int, scalar_type: type) -> tuple[Any, ...]:
    z: Any = zero(scalar_type)
    u: Any = one(scalar_type)
    return tuple(u if r == c else z for r in range(n) for c in range(n))


def _add(lhs: Sequence[Any], rhs: Sequence[Any]) -> tuple[Any, ...]:
    return tuple(a + b for a, b in zip(lhs, rhs))


def _sub(lhs: Sequence[Any], rhs: Sequence[Any]) -> tuple[Any, ...]:
    return tuple(a - b for a, b in zip(lhs, rhs))


def _scale(matrix: Sequence[Any], scalar: Any) -> tuple[Any, ...]:
    return tuple(a * scalar for a in matrix)


def _mul(lhs: Sequence[Any], rhs: Sequence[Any], n: int) -> tuple[Any, ...]:
    out: list[Any] = []
    for r in range(n):
        row_base: int = r * n
        for c in range(n):
            total: Any = zero_like(lhs[row_base])
            for k in range(n):
                total = total + lhs[row_base + k] * rhs[k * n + c]
            out.append(total)
    return tuple(out)


def as_matrix2(values: Sequence[T]) -> Matrix2[T]:
    """Coerce a flat row-major sequence of 4 elements to a 2x2 matrix.

    Raises:
        ValueError: If the sequence does not have exactly 4 elements
    """
    _validate_matrix_size(values, 2, "values")
    return (values[0], values[1], values[2], values[3])


def as_matrix3(values: Sequence[T]) -> Matrix3[T]:
    """Coerce a flat row-major sequence of 9 elements to a 3x3 matrix.

    Raises:
        ValueError: If the sequence does not have exactly 9 elements
    """
    _validate_matrix_size(values, 3, "values")
    return tuple(values)


def as_matrix4(values: Sequence[T]) -> Matrix4[T]:
    """Coerce a flat row-major sequence of 16 elements to a 4x4 matrix.

    Raises:
        ValueError: If the sequence does not have exactly 16 elements
    """
    _validate_matrix_size(values, 4, "values")
    return tuple(values)


def mat_get(matrix: Sequence[T], size: int, row: int, col: int) -> T:
    """Read element (row, col) of a 2x2, 3x3 or 4x4 matrix tuple.

    ``size`` is the side length, so ``matrix`` must hold ``size * size``
    scalars and the element is read from ``matrix[row * size + col]``.

    Raises:
        ValueError: If ``matrix`` does not hold ``size * size`` scalars, or
            ``row`` or ``col`` falls outside ``[0, size)``
    """
    _validate_matrix_size(matrix, size, "matrix")
    if row < 0 or row >= size or col < 0 or col >= size:
        raise ValueError("row or column index out of range")
    return matrix[row * size + col]


def mat2_identity(scalar_type: type = float) -> Matrix2[Any]:
    """Return the 2x2 identity matrix.

    Example:
        >>> mat2_identity(int)
        (1, 0, 0, 1)
    """
    return _identity(2, scalar_type)  # type: ignore


def mat3_identity(scalar_type: type = float) -> Matrix3[Any]:
    """Return the 3x3 identity matrix."""
    return _identity(3, scalar_type)


def mat4_identity(scalar_type: type = float) -> Matrix4[Any]:
    """Return the 4x4 identity matrix."""
    return _identity(4, scalar_type)


def mat2_add(lhs: Matrix2[T], rhs: Matrix2[T]) -> Matrix2[T]:
    """Add two 2x2 matrices element-wise."""
    return _add(lhs, rhs)  # type: ignore


def mat3_add(lhs: Matrix3[T], rhs: Matrix3[T]) -> Matrix3[T]:
    """Add two 3x3 matrices element-wise."""
    return _add(lhs, rhs)


def mat4_add(lhs: Matrix4[T], rhs: Matrix4[T]) -> Matrix4[T]:
    """Add two 4x4 matrices element-wise."""
    return _add(lhs, rhs)


def mat2_sub(lhs: Matrix2[T], rhs: Matrix2[T]) -> Matrix2[T]:
    """Subtract ``rhs`` from ``lhs`` element-wise."""
    return _sub(lhs, rhs)  # type: ignore


def mat3_sub(lhs: Matrix3[T], rhs: Matrix3[T]) -> Matrix3[T]:
    """Subtract ``rhs`` from ``lhs`` element-wise."""
    return _sub(lhs, rhs)


def mat4_sub(lhs: Matrix4[T], rhs: Matrix4[T]) -> Matrix4[T]:
    """Subtract ``rhs`` from ``lhs`` element-wise."""
    return _sub(lhs, rhs)


def mat2_scale(matrix: Matrix2[T], scalar: T) -> Matrix2[T]:
    """Multiply every element of a 2x2 matrix by a scalar."""
    return _scale(matrix, scalar)  # type: ignore


def mat3_scale(matrix: Matrix3[T], scalar: T) -> Matrix3[T]:
    """Multiply every element of a 3x3 matrix by a scalar."""
    return _scale(matrix, scalar)


def mat4_scale(matrix: Matrix4[T], scalar: T) -> Matrix4[T]:
    """Multiply every element of a 4x4 matrix by a scalar."""
    return _scale(matrix, scalar)


def mat2_mul(lhs: Matrix2[T], rhs: Matrix2[T]) -> Matrix2[T]:
    """Return the matrix product ``lhs @ rhs`` of two 2x2 matrices.

    Example:
        >>> mat2_mul((1, 2, 3, 4), (5, 6, 7, 8))
        (19, 22, 43, 50)
    """
    return _mul(lhs, rhs, 2)  # type: ignore


def mat3_mul(lhs: Matrix3[T], rhs: Matrix3[T]) -> Matrix3[T]:
    """Return the matrix product ``lhs @ rhs`` of two 3x3 matrices."""
    return _mul(lhs, rhs, 3)


def mat4_mul(lhs: Matrix4[T], rhs: Matrix4[T]) -> Matrix4[T]:
    """Return the matrix product ``lhs @ rhs`` of two 4x4 matrices."""
    return _mul(lhs, rhs, 4)


def mat4_transform_vec(matrix: Matrix4[T], vector: Vector4[T]) -> Vector4[T]:
    """Apply a 4x4 matrix to a column vector.

    Args:
        matrix: 4x4 matrix in row-major form
        vector: 4-component vector

    Returns:
        ``matrix @ vector``

    Example:
        >>> mat4_transform_vec(mat4_identity(int), (5, 7, 2, 3))
        (5, 7, 2, 3)
    """
    out: list[Any] = []
    for r in range(4):
        row_base: int = r * 4
        total: Any = zero_like(matrix[row_base])
        for c in range(4):
            total = total + matrix[row_base + c] * vector[c]
        out.append(total)
    return (out[0], out[1], out[2], out[3])
