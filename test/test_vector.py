################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of stones
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import math

import numpy as np
import pytest

from stones.vector import as_vector2
from stones.vector import as_vector3
from stones.vector import as_vector4
from stones.vector import vec2
from stones.vector import vec2_add
from stones.vector import vec2_dot
from stones.vector import vec2_mul
from stones.vector import vec2_sub
from stones.vector import vec3
from stones.vector import vec3_add
from stones.vector import vec3_cross
from stones.vector import vec3_dot
from stones.vector import vec3_mul
from stones.vector import vec3_sub
from stones.vector import vec4
from stones.vector import vec4_add
from stones.vector import vec4_dot
from stones.vector import vec4_mul
from stones.vector import vec4_sub


def test_add_known_values() -> None:
    assert vec2_add((5, 3), (12, -8)) == (17, -5)
    assert vec3_add((5, 3, 7), (12, -8, -2)) == (17, -5, 5)
    assert vec4_add((5, 3, 7, 2), (12, -8, -2, 1)) == (17, -5, 5, 3)


def test_sub_known_values() -> None:
    assert vec2_sub((5, 3), (12, -8)) == (-7, 11)
    assert vec3_sub((5, 3, 7), (12, -8, -2)) == (-7, 11, 9)
    assert vec4_sub((5, 3, 7, 2), (12, -8, -2, 1)) == (-7, 11, 9, 1)


def test_mul_known_values() -> None:
    assert vec2_mul((5, 3), 2) == (10, 6)
    assert vec3_mul((5, 3, 7), 2) == (10, 6, 14)
    assert vec4_mul((5, 3, 7, 2), 2) == (10, 6, 14, 4)


def test_sub_undoes_add() -> None:
    a: tuple[int, int, int, int] = (4, -9, 13, 0)
    b: tuple[int, int, int, int] = (-2, 7, 5, 11)

    assert vec4_sub(vec4_add(a, b), b) == a


def test_operations_return_new_tuples() -> None:
    """Checks inputs are left untouched."""
    a: tuple[float, float, float] = (1.0, 2.0, 3.0)
    b: tuple[float, float, float] = (4.0, 5.0, 6.0)

    result: tuple[float, float, float] = vec3_add(a, b)

    assert isinstance(result, tuple)
    assert result is not a
    assert a == (1.0, 2.0, 3.0)
    assert b == (4.0, 5.0, 6.0)


def test_dot_known_values() -> None:
    assert vec2_dot((0.6, -0.8), (0.0, 1.0)) == -0.8
    assert vec3_dot((0.6, -0.8, 2.0), (0.0, 1.0, 1.0)) == pytest.approx(1.2)
    assert vec4_dot((0.6, -0.8, 2.1, 3.2), (0.0, 1.0, 1.5, 1.9)) == pytest.approx(
        8.43
    )


def test_dot_is_commutative() -> None:
    a: tuple[int, int, int, int] = (3, -1, 4, 1)
    b: tuple[int, int, int, int] = (5, 9, -2, 6)

    assert vec4_dot(a, b) == vec4_dot(b, a)
    assert vec2_dot(a[:2], b[:2]) == vec2_dot(b[:2], a[:2])


def test_dot_accumulates_in_index_order() -> None:
    """Checks float32 rounding matches a left-to-right sum from zero."""
    a: tuple[np.float32, ...] = tuple(
        np.float32(x) for x in (1.0e8, 1.0, -1.0e8, 0.25)
    )
    b: tuple[np.float32, ...] = tuple(np.float32(x) for x in (1.0, 1.0, 1.0, 1.0))

    expected: np.float32 = np.float32(0.0)
    for x, y in zip(a, b):
        expected = expected + x * y

    result: np.float32 = vec4_dot(a, b)  # type: ignore

    assert type(result) is np.float32
    assert result == expected


def test_dot_keeps_integer_kind() -> None:
    v: tuple[np.int32, ...] = (np.int32(1), np.int32(2), np.int32(3))

    result: np.int32 = vec3_dot(v, v)  # type: ignore

    assert result == 14
    assert type(result) is np.int32


def test_cross_basis() -> None:
    assert vec3_cross((1, 0, 0), (0, 1, 0)) == (0, 0, 1)
    assert vec3_cross((0, 1, 0), (0, 0, 1)) == (1, 0, 0)
    assert vec3_cross((0, 0, 1), (1, 0, 0)) == (0, 1, 0)


def test_cross_is_anticommutative() -> None:
    a: tuple[int, int, int] = (2, -3, 7)
    b: tuple[int, int, int] = (-4, 1, 5)

    assert vec3_cross(a, b) == vec3_mul(vec3_cross(b, a), -1)
    assert vec3_cross(a, a) == (0, 0, 0)


def test_cross_is_orthogonal_to_operands() -> None:
    a: tuple[float, float, float] = (0.5, 1.5, -2.0)
    b: tuple[float, float, float] = (3.0, -1.0, 0.25)

    c: tuple[float, float, float] = vec3_cross(a, b)

    assert math.isclose(vec3_dot(a, c), 0.0, abs_tol=1e-12)
    assert math.isclose(vec3_dot(b, c), 0.0, abs_tol=1e-12)


def test_float32_scaling_keeps_kind() -> None:
    v: tuple[np.float32, np.float32] = (np.float32(1.5), np.float32(-2.0))

    scaled: tuple[np.float32, np.float32] = vec2_mul(v, np.float32(2.0))

    assert scaled == (np.float32(3.0), np.float32(-4.0))
    assert all(type(x) is np.float32 for x in scaled)


def test_nan_propagates() -> None:
    """Checks IEEE-754 special values pass through unchanged."""
    result: tuple[float, float] = vec2_add((math.nan, 1.0), (1.0, math.inf))

    assert math.isnan(result[0])
    assert result[1] == math.inf


def test_builders() -> None:
    assert vec2(1, 2) == (1, 2)
    assert vec3(1, 2, 3) == (1, 2, 3)
    assert vec4(1, 2, 3, 4) == (1, 2, 3, 4)


def test_as_vector_coerces_sequences() -> None:
    assert as_vector2([1, 2]) == (1, 2)
    assert as_vector3([1.0, 2.0, 3.0]) == (1.0, 2.0, 3.0)
    assert as_vector4(range(4)) == (0, 1, 2, 3)


def test_as_vector_rejects_wrong_length() -> None:
    with pytest.raises(ValueError, match="length 3"):
        as_vector3([1, 2])
    with pytest.raises(ValueError):
        as_vector2([1, 2, 3])
    with pytest.raises(ValueError):
        as_vector4([])


def test_int32_add_wraps_around() -> None:
    """Checks numpy integer overflow wraps and only warns."""
    lhs: tuple[np.int32, np.int32] = (np.int32(2**31 - 1), np.int32(5))
    rhs: tuple[np.int32, np.int32] = (np.int32(1), np.int32(-5))

    with pytest.warns(RuntimeWarning, match="overflow"):
        result: tuple[np.int32, np.int32] = vec2_add(lhs, rhs)

    assert result == (-(2**31), 0)
    assert all(type(x) is np.int32 for x in result)


def test_int32_dot_wraps_around() -> None:
    lhs: tuple[np.int32, np.int32] = (np.int32(2**31 - 1), np.int32(1))
    rhs: tuple[np.int32, np.int32] = (np.int32(1), np.int32(1))

    with pytest.warns(RuntimeWarning, match="overflow"):
        result: np.int32 = vec2_dot(lhs, rhs)  # type: ignore

    assert result == -(2**31)
    assert type(result) is np.int32
