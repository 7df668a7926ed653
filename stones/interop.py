################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of stones
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversion between stones tuples and numpy arrays."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from stones.number_traits import scalar_kind


def dtype_for(scalar_type: type) -> np.dtype[Any]:
    """Return the numpy dtype of a registered scalar kind.

    Raises:
        UnsupportedScalarError: If the kind is not registered
    """
    return np.dtype(scalar_kind(scalar_type).scalar_type)


def vector_to_array(
    vector: Sequence[Any], scalar_type: type | None = None
) -> NDArray[Any]:
    """Return a vector as an array of shape (N,).

    The dtype follows ``scalar_type`` when given, else numpy's inference.
    """
    if scalar_type is None:
        return np.asarray(vector)
    return np.asarray(vector, dtype=dtype_for(scalar_type))


def matrix_to_array(
    matrix: Sequence[Any], size: int, scalar_type: type | None = None
) -> NDArray[Any]:
    """Return a row-major matrix as an array of shape (size, size).

    Raises:
        ValueError: If the matrix does not have ``size * size`` elements
    """
    if len(matrix) != size * size:
        raise ValueError(f"matrix must have length {size * size} for {size}x{size}")
    flat: NDArray[Any] = vector_to_array(matrix, scalar_type)
    return flat.reshape(size, size)


def vector_from_array(array: NDArray[Any]) -> tuple[Any, ...]:
    """Return a 1-D array of length 2, 3 or 4 as a vector tuple.

    Elements keep their numpy scalar kind.

    Raises:
        ValueError: If the array is not a supported vector shape
    """
    arr: NDArray[Any] = np.asarray(array)
    if arr.ndim != 1 or arr.shape[0] not in (2, 3, 4):
        raise ValueError(f"array must have shape (2,), (3,) or (4,), got {arr.shape}")
    return tuple(arr[i] for i in range(arr.shape[0]))


def matrix_from_array(array: NDArray[Any]) -> tuple[Any, ...]:
    """Return a square 2x2, 3x3 or 4x4 array as a row-major matrix tuple.

    Raises:
        ValueError: If the array is not a supported square shape
    """
    arr: NDArray[Any] = np.asarray(array)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] not in (2, 3, 4):
        raise ValueError(
            f"array must have shape (2, 2), (3, 3) or (4, 4), got {arr.shape}"
        )
    flat: NDArray[Any] = arr.reshape(-1)
    return tuple(flat[i] for i in range(flat.shape[0]))
