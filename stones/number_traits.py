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
Additive and multiplicative identities for the supported scalar kinds

A scalar kind is a concrete numeric type that can be used as a vector or
matrix element. Each kind supplies a zero and a one so that identity
matrices and running sums keep the element kind instead of falling back to
Python ``int`` or ``float`` literals.

Lookup is keyed on the exact scalar type. Subclasses are not resolved to
their parent kind, so ``bool`` is not accepted where ``int`` is registered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np


_LOG: logging.Logger = logging.getLogger(__name__)


class UnsupportedScalarError(TypeError):
    """Raised when an identity is requested for an unregistered scalar kind."""


@dataclass(frozen=True)
class ScalarKind:
    """Identity elements of one scalar type.

    Attributes:
        scalar_type: Concrete numeric type, e.g. ``numpy.float32``
        zero_value: Value ``z`` such that ``x + z == x``
        one_value: Value ``u`` such that ``x * u == x``
    """

    scalar_type: type
    zero_value: Any
    one_value: Any

    @property
    def name(self) -> str:
        return self.scalar_type.__name__

    def zero(self) -> Any:
        """Return the additive identity."""
        return self.zero_value

    def one(self) -> Any:
        """Return the multiplicative identity."""
        return self.one_value


_REGISTRY: dict[type, ScalarKind] = {}


def register_scalar_kind(
    scalar_type: type, zero_value: Any, one_value: Any
) -> ScalarKind:
    """Register the identities of a scalar kind.

    Registering a type that is already known replaces its identities.

    Args:
        scalar_type: Concrete numeric type
        zero_value: Additive identity of ``scalar_type``
        one_value: Multiplicative identity of ``scalar_type``

    Returns:
        The registered scalar kind
    """
    kind: ScalarKind = ScalarKind(
        scalar_type=scalar_type,
        zero_value=scalar_type(zero_value),
        one_value=scalar_type(one_value),
    )

    if scalar_type in _REGISTRY:
        _LOG.warning("Replacing identities of scalar kind %s", kind.name)
    else:
        _LOG.debug("Registering scalar kind %s", kind.name)

    _REGISTRY[scalar_type] = kind
    return kind


def scalar_kind(scalar_type: type) -> ScalarKind:
    """Return the registered scalar kind for a type.

    A numpy scalar type that is not registered itself, such as
    ``numpy.longlong``, resolves through its dtype to the registered numpy
    kind of equal dtype. The match is registered under the requested type so
    its identities keep that type.

    Raises:
        UnsupportedScalarError: If no registered kind matches the type
    """
    kind: ScalarKind | None = _REGISTRY.get(scalar_type)
    if kind is not None:
        return kind

    if isinstance(scalar_type, type) and issubclass(scalar_type, np.generic):
        dtype: np.dtype[Any] = np.dtype(scalar_type)
        for registered_type, registered in list(_REGISTRY.items()):
            if issubclass(registered_type, np.generic) and (
                np.dtype(registered_type) == dtype
            ):
                return register_scalar_kind(
                    scalar_type, registered.zero_value, registered.one_value
                )

    name: str = getattr(scalar_type, "__name__", repr(scalar_type))
    raise UnsupportedScalarError(f"unsupported scalar kind: {name}")


def supported_scalar_types() -> tuple[type, ...]:
    """Return the registered scalar types in registration order."""
    return tuple(_REGISTRY)


def zero(scalar_type: type = float) -> Any:
    """Return the additive identity of a scalar kind."""
    return scalar_kind(scalar_type).zero()


def one(scalar_type: type = float) -> Any:
    """Return the multiplicative identity of a scalar kind."""
    return scalar_kind(scalar_type).one()


def zero_like(value: Any) -> Any:
    """Return the additive identity of the kind of ``value``."""
    return scalar_kind(type(value)).zero()


def one_like(value: Any) -> Any:
    """Return the multiplicative identity of the kind of ``value``."""
    return scalar_kind(type(value)).one()


# Signed 32/64-bit integers and 32/64-bit floats
register_scalar_kind(np.int32, 0, 1)
register_scalar_kind(np.int64, 0, 1)
register_scalar_kind(np.float32, 0.0, 1.0)
register_scalar_kind(np.float64, 0.0, 1.0)

# Native Python numbers
register_scalar_kind(int, 0, 1)
register_scalar_kind(float, 0.0, 1.0)
