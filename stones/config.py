################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of stones
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tolerance configuration for approximate comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import replace
from typing import Any


# Relative tolerance for float comparisons
REL_TOL: float = 1e-9
# Absolute tolerance for float comparisons near zero
ABS_TOL: float = 1e-12


class StonesConfigError(ValueError):
    """Raised when a tolerance configuration is invalid."""


@dataclass(frozen=True)
class ToleranceConfig:
    """Relative and absolute tolerances passed to ``math.isclose``."""

    rel_tol: float = REL_TOL
    abs_tol: float = ABS_TOL

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the tolerances.

        Raises:
            StonesConfigError: If a tolerance is negative or not finite
        """
        for name in ("rel_tol", "abs_tol"):
            value: float = getattr(self, name)
            if not math.isfinite(value):
                raise StonesConfigError(f"{name} must be finite")
            if value < 0.0:
                raise StonesConfigError(f"{name} must be >= 0")

    def with_overrides(self, **overrides: Any) -> ToleranceConfig:
        """Return a copy with the given fields replaced."""
        try:
            return replace(self, **overrides)
        except TypeError as exc:
            raise StonesConfigError(str(exc)) from exc


DEFAULT_TOLERANCE: ToleranceConfig = ToleranceConfig()
