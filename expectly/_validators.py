"""Shared validation helpers for matcher construction."""

from __future__ import annotations

import decimal
import math
import numbers

from .errors import MatcherConfigurationError


def validate_tolerance(tolerance: object) -> None:
    """Ensure *tolerance* is a usable numeric delta."""
    if isinstance(tolerance, bool) or not isinstance(
        tolerance, (numbers.Real, decimal.Decimal)
    ):
        msg = "tolerance must be a real number"
        raise MatcherConfigurationError(msg)

    # Decimal NaN signals on comparison and huge ints overflow float checks.
    if isinstance(tolerance, decimal.Decimal):
        finite = tolerance.is_finite()
    else:
        finite = isinstance(tolerance, numbers.Integral) or math.isfinite(tolerance)
    if not (finite and tolerance >= 0):
        msg = "tolerance must be >= 0 and finite"
        raise MatcherConfigurationError(msg)


def validate_number(value: object, name: str) -> None:
    """Ensure *value* supports numeric subtraction."""
    if isinstance(value, bool) or not isinstance(value, numbers.Number):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise MatcherConfigurationError(msg)


def validate_text(value: object, name: str) -> None:
    """Ensure *value* is a string operand."""
    if not isinstance(value, str):
        msg = f"{name} must be a string, got {type(value).__name__}"
        raise MatcherConfigurationError(msg)


def validate_type(value: object) -> None:
    """Ensure *value* is usable with :func:`isinstance`."""
    if isinstance(value, type):
        return
    if isinstance(value, tuple) and value and all(isinstance(v, type) for v in value):
        return
    msg = f"expected a type or tuple of types, got {value!r}"
    raise MatcherConfigurationError(msg)
