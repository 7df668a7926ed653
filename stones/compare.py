################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of stones
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Approximate equality for float vectors and matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from stones.config import DEFAULT_TOLERANCE
from stones.config import ToleranceConfig


def _seq_isclose(
    lhs: Sequence[float], rhs: Sequence[float], config: ToleranceConfig | None
) -> bool:
    tolerance: ToleranceConfig = config if config is not None else DEFAULT_TOLERANCE
    if len(lhs) != len(rhs):
        return False
    return all(
        math.isclose(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)
        for a, b in zip(lhs, rhs)
    )


def vec_isclose(
    lhs: Sequence[float],
    rhs: Sequence[float],
    config: ToleranceConfig | None = None,
) -> bool:
    """Return True when two vectors are equal within tolerance.

    Vectors of different lengths are never close.
    """
    return _seq_isclose(lhs, rhs, config)


def mat_isclose(
    lhs: Sequence[float],
    rhs: Sequence[float],
    config: ToleranceConfig | None = None,
) -> bool:
    """Return True when two row-major matrices are equal within tolerance."""
    return _seq_isclose(lhs, rhs, config)
