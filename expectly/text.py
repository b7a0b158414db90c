"""String matchers.

Every matcher here only ever matches ``str`` values; anything else is an
ordinary mismatch.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t

from ._validators import validate_text
from .base import BaseMatcher

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .description import Description


@dc.dataclass(frozen=True, slots=True)
class StringContains(BaseMatcher[str]):
    """Match if ``substring`` is found in the value."""

    substring: str

    def __post_init__(self) -> None:
        validate_text(self.substring, "substring")

    def matches(self, item: object) -> bool:
        return isinstance(item, str) and self.substring in item

    def describe_to(self, description: Description) -> None:
        description.append_text("a string containing ").append_value(self.substring)


@dc.dataclass(frozen=True, slots=True)
class StringStartsWith(BaseMatcher[str]):
    """Match if the value begins with ``prefix``."""

    prefix: str

    def __post_init__(self) -> None:
        validate_text(self.prefix, "prefix")

    def matches(self, item: object) -> bool:
        return isinstance(item, str) and item.startswith(self.prefix)

    def describe_to(self, description: Description) -> None:
        description.append_text("a string starting with ").append_value(self.prefix)


@dc.dataclass(frozen=True, slots=True)
class StringEndsWith(BaseMatcher[str]):
    """Match if the value ends with ``suffix``."""

    suffix: str

    def __post_init__(self) -> None:
        validate_text(self.suffix, "suffix")

    def matches(self, item: object) -> bool:
        return isinstance(item, str) and item.endswith(self.suffix)

    def describe_to(self, description: Description) -> None:
        description.append_text("a string ending with ").append_value(self.suffix)


@dc.dataclass(frozen=True, slots=True)
class StringMatchesPattern(BaseMatcher[str]):
    """Match if ``pattern`` is found anywhere in the value."""

    pattern: re.Pattern[str]

    def matches(self, item: object) -> bool:
        """Return ``True`` if the regex matches *item* via :meth:`re.Pattern.search`."""
        return isinstance(item, str) and self.pattern.search(item) is not None

    def describe_to(self, description: Description) -> None:
        description.append_text("a string matching ").append_value(
            self.pattern.pattern
        )


@dc.dataclass(frozen=True, slots=True)
class IsEqualIgnoringCase(BaseMatcher[str]):
    """Match strings equal to ``expected`` under case folding."""

    expected: str

    def __post_init__(self) -> None:
        validate_text(self.expected, "expected")

    def matches(self, item: object) -> bool:
        return isinstance(item, str) and item.casefold() == self.expected.casefold()

    def describe_to(self, description: Description) -> None:
        description.append_value(self.expected).append_text(" ignoring case")


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


@dc.dataclass(frozen=True, slots=True)
class IsEqualIgnoringWhitespace(BaseMatcher[str]):
    """Match strings equal to ``expected`` once whitespace runs are collapsed.

    Leading and trailing whitespace is ignored and every internal run of
    whitespace compares equal to a single space.
    """

    expected: str

    def __post_init__(self) -> None:
        validate_text(self.expected, "expected")

    def matches(self, item: object) -> bool:
        return isinstance(item, str) and _collapse_whitespace(
            item
        ) == _collapse_whitespace(self.expected)

    def describe_to(self, description: Description) -> None:
        description.append_value(self.expected).append_text(" ignoring whitespace")


def contains_string(substring: str) -> StringContains:
    """Match strings containing *substring*."""
    return StringContains(substring)


def starts_with(prefix: str) -> StringStartsWith:
    """Match strings beginning with *prefix*."""
    return StringStartsWith(prefix)


def ends_with(suffix: str) -> StringEndsWith:
    """Match strings ending with *suffix*."""
    return StringEndsWith(suffix)


def matches_regex(pattern: str | re.Pattern[str]) -> StringMatchesPattern:
    """Match strings in which *pattern* can be found.

    Raises :class:`re.error` when *pattern* is malformed.
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    return StringMatchesPattern(compiled)


def equal_to_ignoring_case(expected: str) -> IsEqualIgnoringCase:
    """Match strings equal to *expected* regardless of case."""
    return IsEqualIgnoringCase(expected)


def equal_to_ignoring_whitespace(expected: str) -> IsEqualIgnoringWhitespace:
    """Match strings equal to *expected* ignoring differences in whitespace."""
    return IsEqualIgnoringWhitespace(expected)


__all__ = [
    "IsEqualIgnoringCase",
    "IsEqualIgnoringWhitespace",
    "StringContains",
    "StringEndsWith",
    "StringMatchesPattern",
    "StringStartsWith",
    "contains_string",
    "ends_with",
    "equal_to_ignoring_case",
    "equal_to_ignoring_whitespace",
    "matches_regex",
    "starts_with",
]
