"""Composable matchers for expressive, self-explaining test assertions.

A matcher is a predicate that can describe what it expects and explain
why a given value fell short. :func:`assert_that` evaluates one and
raises :class:`MatcherAssertionError` with that explanation.
"""

from __future__ import annotations

from .assertion import assert_that
from .base import BaseMatcher, Matcher, is_matcher, wrap_matcher
from .collection import (
    contains,
    contains_in_any_order,
    empty,
    every_item,
    has_item,
    has_items,
    has_length,
    is_in,
)
from .core import (
    anything,
    described_as,
    equal_to,
    instance_of,
    is_,
    none,
    not_none,
    same_instance,
    satisfies,
)
from .description import Description, StringDescription, canonical_string
from .errors import ExpectlyError, MatcherAssertionError, MatcherConfigurationError
from .logical import all_of, any_of, both, either, not_
from .mapping import has_entries, has_entry, has_key, has_value
from .number import (
    close_to,
    compares_equal_to,
    greater_than,
    greater_than_or_equal_to,
    less_than,
    less_than_or_equal_to,
)
from .text import (
    contains_string,
    ends_with,
    equal_to_ignoring_case,
    equal_to_ignoring_whitespace,
    matches_regex,
    starts_with,
)

__all__ = [
    "BaseMatcher",
    "Description",
    "ExpectlyError",
    "Matcher",
    "MatcherAssertionError",
    "MatcherConfigurationError",
    "StringDescription",
    "all_of",
    "any_of",
    "anything",
    "assert_that",
    "both",
    "canonical_string",
    "close_to",
    "compares_equal_to",
    "contains",
    "contains_in_any_order",
    "contains_string",
    "described_as",
    "either",
    "empty",
    "ends_with",
    "equal_to",
    "equal_to_ignoring_case",
    "equal_to_ignoring_whitespace",
    "every_item",
    "greater_than",
    "greater_than_or_equal_to",
    "has_entries",
    "has_entry",
    "has_item",
    "has_items",
    "has_key",
    "has_length",
    "has_value",
    "instance_of",
    "is_",
    "is_in",
    "is_matcher",
    "less_than",
    "less_than_or_equal_to",
    "matches_regex",
    "none",
    "not_",
    "not_none",
    "same_instance",
    "satisfies",
    "starts_with",
    "wrap_matcher",
]
