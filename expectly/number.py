"""Ordering and numeric tolerance matchers."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from ._validators import validate_number, validate_tolerance
from .base import BaseMatcher

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .description import Description

_RELATIONS: dict[int, str] = {-1: "less than", 0: "equal to", 1: "greater than"}


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def three_way_compare(actual: object, expected: object) -> int | None:
    """Return -1, 0 or 1 comparing *actual* to *expected*.

    A ``compare_to(other)`` method on *actual* takes precedence and its
    result is reduced to its sign. Otherwise Python's ``<`` and ``>``
    decide, with ``==`` required for a result of ``0``. ``None`` means
    the values cannot be ordered against each other.
    """
    compare_to = getattr(actual, "compare_to", None)
    try:
        if callable(compare_to):
            return _sign(compare_to(expected))
        if actual < expected:  # type: ignore[operator]
            return -1
        if actual > expected:  # type: ignore[operator]
            return 1
        if actual == expected:
            return 0
    except (TypeError, ValueError, ArithmeticError):
        return None
    return None


@dc.dataclass(frozen=True, slots=True)
class OrderingComparison(BaseMatcher[t.Any]):
    """Match values whose comparison with ``expected`` has an accepted sign."""

    expected: object
    accepted: frozenset[int]
    relation: str

    def matches(self, item: object) -> bool:
        return three_way_compare(item, self.expected) in self.accepted

    def describe_to(self, description: Description) -> None:
        description.append_text(f"a value {self.relation} ").append_value(
            self.expected
        )

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Report how *item* actually compared to ``expected``."""
        description.append_text("was ").append_value(item)
        result = three_way_compare(item, self.expected)
        if result is None:
            description.append_text(", which cannot be compared to ")
        else:
            description.append_text(f", which is {_RELATIONS[result]} ")
        description.append_value(self.expected)


def _difference(actual: object, expected: object) -> t.Any | None:
    try:
        return abs(actual - expected)  # type: ignore[operator]
    except (TypeError, ArithmeticError):
        return None


@dc.dataclass(frozen=True, slots=True)
class IsCloseTo(BaseMatcher[t.Any]):
    """Match numbers within ``delta`` of ``value``."""

    value: t.Any
    delta: t.Any

    def __post_init__(self) -> None:
        validate_number(self.value, "value")
        validate_tolerance(self.delta)

    def matches(self, item: object) -> bool:
        """Return ``True`` if ``abs(item - value) <= delta``."""
        difference = _difference(item, self.value)
        if difference is None:
            return False
        try:
            return bool(difference <= self.delta)
        except (TypeError, ValueError, ArithmeticError):
            return False

    def describe_to(self, description: Description) -> None:
        description.append_text("a numeric value within ").append_value(
            self.delta
        ).append_text(" of ").append_value(self.value)

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Report the actual distance from ``value``."""
        description.append_text("was ").append_value(item)
        difference = _difference(item, self.value)
        if difference is not None:
            description.append_text(", which differs by ").append_value(difference)


def greater_than(value: object) -> OrderingComparison:
    """Match values comparing greater than *value*."""
    return OrderingComparison(value, frozenset({1}), "greater than")


def greater_than_or_equal_to(value: object) -> OrderingComparison:
    """Match values comparing greater than or equal to *value*."""
    return OrderingComparison(value, frozenset({0, 1}), "greater than or equal to")


def less_than(value: object) -> OrderingComparison:
    """Match values comparing less than *value*."""
    return OrderingComparison(value, frozenset({-1}), "less than")


def less_than_or_equal_to(value: object) -> OrderingComparison:
    """Match values comparing less than or equal to *value*."""
    return OrderingComparison(value, frozenset({-1, 0}), "less than or equal to")


def compares_equal_to(value: object) -> OrderingComparison:
    """Match values whose three-way comparison with *value* is zero."""
    return OrderingComparison(value, frozenset({0}), "equal to")


def close_to(value: object, delta: object) -> IsCloseTo:
    """Match numbers within *delta* of *value*, inclusive."""
    return IsCloseTo(value, delta)


__all__ = [
    "IsCloseTo",
    "OrderingComparison",
    "close_to",
    "compares_equal_to",
    "greater_than",
    "greater_than_or_equal_to",
    "less_than",
    "less_than_or_equal_to",
    "three_way_compare",
]
