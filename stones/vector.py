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
Arithmetic on 2, 3 and 4 component vectors

Vectors are tuples of scalars of a single kind. Every operation returns a new
tuple and leaves its inputs untouched. Lengths are fixed by the function
name, so the operations themselves do not validate them; use the ``as_*``
helpers to coerce untrusted sequences.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from typing import TypeVar

from stones.number_traits import zero_like


T = TypeVar("T")

Vector2 = tuple[T, T]
Vector2i = tuple[int, int]
Vector2f = tuple[float, float]

Vector3 = tuple[T, T, T]
Vector3i = tuple[int, int, int]
Vector3f = tuple[float, float, float]

Vector4 = tuple[T, T, T, T]
Vector4i = tuple[int, int, int, int]
Vector4f = tuple[float, float, float, float]


def _validate_vector_size(values: Sequence[Any], size: int, name: str) -> None:
    if len(values) != size:
        raise ValueError(f"{name} must have length {size}, got {len(values)}")


def _dot_product(lhs: Sequence[Any], rhs: Sequence[Any]) -> Any:
    # Index-ascending accumulation, seeded with the kind's additive identity
    total: Any = zero_like(lhs[0])
    for a, b in zip(lhs, rhs):
        total = total + a * b
    return total


def vec2(x: T, y: T) -> Vector2[T]:
    """Build a 2-component vector."""
    return (x, y)


def vec3(x: T, y: T, z: T) -> Vector3[T]:
    """Build a 3-component vector."""
    return (x, y, z)


def vec4(x: T, y: T, z: T, w: T) -> Vector4[T]:
    """Build a 4-component vector."""
    return (x, y, z, w)


def as_vector2(values: Sequence[T]) -> Vector2[T]:
    """Coerce a sequence of length 2 to a vector.

    Raises:
        ValueError: If the sequence does not have exactly 2 elements
    """
    _validate_vector_size(values, 2, "values")
    return (values[0], values[1])


def as_vector3(values: Sequence[T]) -> Vector3[T]:
    """Coerce a sequence of length 3 to a vector.

    Raises:
        ValueError: If the sequence does not have exactly 3 elements
    """
    _validate_vector_size(values, 3, "values")
    return (values[0], values[1], values[2])


def as_vector4(values: Sequence[T]) -> Vector4[T]:
    """Coerce a sequence of length 4 to a vector.

    Raises:
        ValueError: If the sequence does not have exactly 4 elements
    """
    _validate_vector_size(values, 4, "values")
    return (values[0], values[1], values[2], values[3])


def vec2_add(lhs: Vector2[T], rhs: Vector2[T]) -> Vector2[T]:
    """Add two 2-component vectors.

    Example:
        >>> vec2_add((5, 3), (12, -8))
        (17, -5)
    """
    return (
        lhs[0] + rhs[0],
        lhs[1] + rhs[1],
    )


def vec3_add(lhs: Vector3[T], rhs: Vector3[T]) -> Vector3[T]:
    """Add two 3-component vectors.

    Example:
        >>> vec3_add((5, 3, 7), (12, -8, -2))
        (17, -5, 5)
    """
    return (
        lhs[0] + rhs[0],
        lhs[1] + rhs[1],
        lhs[2] + rhs[2],
    )


def vec4_add(lhs: Vector4[T], rhs: Vector4[T]) -> Vector4[T]:
    """Add two 4-component vectors.

    Example:
        >>> vec4_add((5, 3, 7, 2), (12, -8, -2, 1))
        (17, -5, 5, 3)
    """
    return (
        lhs[0] + rhs[0],
        lhs[1] + rhs[1],
        lhs[2] + rhs[2],
        lhs[3] + rhs[3],
    )


def vec2_sub(lhs: Vector2[T], rhs: Vector2[T]) -> Vector2[T]:
    """Subtract ``rhs`` from ``lhs``.

    Example:
        >>> vec2_sub((5, 3), (12, -8))
        (-7, 11)
    """
    return (
        lhs[0] - rhs[0],
        lhs[1] - rhs[1],
    )


def vec3_sub(lhs: Vector3[T], rhs: Vector3[T]) -> Vector3[T]:
    """Subtract ``rhs`` from ``lhs``.

    Example:
        >>> vec3_sub((5, 3, 7), (12, -8, -2))
        (-7, 11, 9)
    """
    return (
        lhs[0] - rhs[0],
        lhs[1] - rhs[1],
        lhs[2] - rhs[2],
    )


def vec4_sub(lhs: Vector4[T], rhs: Vector4[T]) -> Vector4[T]:
    """Subtract ``rhs`` from ``lhs``.

    Example:
        >>> vec4_sub((5, 3, 7, 2), (12, -8, -2, 1))
        (-7, 11, 9, 1)
    """
    return (
        lhs[0] - rhs[0],
        lhs[1] - rhs[1],
        lhs[2] - rhs[2],
        lhs[3] - rhs[3],
    )


def vec2_mul(vector: Vector2[T], scalar: T) -> Vector2[T]:
    """Multiply every component by a scalar."""
    return (
        vector[0] * scalar,
        vector[1] * scalar,
    )


def vec3_mul(vector: Vector3[T], scalar: T) -> Vector3[T]:
    """Multiply every component by a scalar."""
    return (
        vector[0] * scalar,
        vector[1] * scalar,
        vector[2] * scalar,
    )


def vec4_mul(vector: Vector4[T], scalar: T) -> Vector4[T]:
    """Multiply every component by a scalar.

    Example:
        >>> vec4_mul((5, 3, 7, 2), 2)
        (10, 6, 14, 4)
    """
    return (
        vector[0] * scalar,
        vector[1] * scalar,
        vector[2] * scalar,
        vector[3] * scalar,
    )


def vec2_dot(lhs: Vector2[T], rhs: Vector2[T]) -> T:
    """Return the dot product of two 2-component vectors."""
    return _dot_product(lhs, rhs)


def vec3_dot(lhs: Vector3[T], rhs: Vector3[T]) -> T:
    """Return the dot product of two 3-component vectors."""
    return _dot_product(lhs, rhs)


def vec4_dot(lhs: Vector4[T], rhs: Vector4[T]) -> T:
    """Return the dot product of two 4-component vectors."""
    return _dot_product(lhs, rhs)


def vec3_cross(lhs: Vector3[T], rhs: Vector3[T]) -> Vector3[T]:
    """Return the right-handed cross product ``lhs x rhs``.

    Example:
        >>> vec3_cross((1, 0, 0), (0, 1, 0))
        (0, 0, 1)
    """
    return (
        lhs[1] * rhs[2] - lhs[2] * rhs[1],
        lhs[2] * rhs[0] - lhs[0] * rhs[2],
        lhs[0] * rhs[1] - lhs[1] * rhs[0],
    )
