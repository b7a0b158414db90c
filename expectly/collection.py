"""Sequence and container matchers.

Sequence matchers accept re-iterable collections except strings, bytes
and mappings. One-shot iterators such as generators are not sequences:
reading them would change the value under test, so they are reported as
ordinary mismatches.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as t

from .base import BaseMatcher, Matcher, wrap_matcher
from .core import values_equal

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .description import Description

_NOT_SEQUENCES = (str, bytes, bytearray, cabc.Mapping, cabc.Iterator)


def as_sequence(item: object) -> list[object] | None:
    """Return *item* as a list, or ``None`` if it is not a sequence."""
    if isinstance(item, _NOT_SEQUENCES) or not isinstance(item, cabc.Iterable):
        return None
    return list(item)


def _length(item: object) -> int | None:
    if isinstance(item, cabc.Sized):
        return len(item)
    items = as_sequence(item)
    return None if items is None else len(items)


def pair_up(
    matchers: t.Sequence[Matcher[t.Any]], items: t.Sequence[object]
) -> tuple[list[Matcher[t.Any]], list[object]]:
    """Assign each matcher to a distinct item it matches.

    Uses augmenting paths, so an item claimed early is handed over to a
    later matcher whenever its first owner can move to another item.
    Returns the matchers left without an item and the items left without
    a matcher.
    """
    candidates = [
        [index for index, item in enumerate(items) if matcher.matches(item)]
        for matcher in matchers
    ]
    owner: list[int | None] = [None] * len(items)

    def claim(start: int) -> bool:
        # Depth-first search with an explicit stack; path[k] is the item
        # taken by the matcher in frame k.
        seen: set[int] = set()
        stack = [(start, iter(candidates[start]))]
        path: list[int] = []
        while stack:
            _, options = stack[-1]
            item_index = next((i for i in options if i not in seen), None)
            if item_index is None:
                stack.pop()
                if path:
                    path.pop()
                continue
            seen.add(item_index)
            path.append(item_index)
            current = owner[item_index]
            if current is None:
                for (matcher_index, _), taken in zip(stack, path, strict=True):
                    owner[taken] = matcher_index
                return True
            stack.append((current, iter(candidates[current])))
        return False

    unmatched = [
        matcher
        for matcher_index, matcher in enumerate(matchers)
        if not claim(matcher_index)
    ]
    leftovers = [
        item for item, current in zip(items, owner, strict=True) if current is None
    ]
    return unmatched, leftovers


@dc.dataclass(frozen=True, slots=True)
class IsSequenceContainingInOrder(BaseMatcher[t.Any]):
    """Match sequences whose items match ``matchers`` position by position."""

    matchers: tuple[Matcher[t.Any], ...]

    def matches(self, item: object) -> bool:
        items = as_sequence(item)
        if items is None or len(items) != len(self.matchers):
            return False
        return all(
            matcher.matches(value)
            for matcher, value in zip(self.matchers, items, strict=True)
        )

    def describe_to(self, description: Description) -> None:
        description.append_list("a sequence containing [", ", ", "]", self.matchers)

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Pinpoint the first index where length or an item disagrees."""
        items = as_sequence(item)
        if items is None:
            description.append_text("was ").append_value(item)
            return
        for index, matcher in enumerate(self.matchers):
            if index >= len(items):
                description.append_text(
                    f"no item at index {index} for "
                ).append_description_of(matcher)
                return
            if not matcher.matches(items[index]):
                description.append_text(f"item {index}: ")
                matcher.describe_mismatch(items[index], description)
                return
        extra = len(self.matchers)
        if extra < len(items):
            description.append_text("not matched: ").append_value(
                items[extra]
            ).append_text(f" at index {extra}")


@dc.dataclass(frozen=True, slots=True)
class IsSequenceContainingInAnyOrder(BaseMatcher[t.Any]):
    """Match sequences pairing one-to-one with ``matchers`` in any order."""

    matchers: tuple[Matcher[t.Any], ...]

    def matches(self, item: object) -> bool:
        items = as_sequence(item)
        if items is None or len(items) != len(self.matchers):
            return False
        unmatched, leftovers = pair_up(self.matchers, items)
        return not unmatched and not leftovers

    def describe_to(self, description: Description) -> None:
        description.append_list(
            "a sequence over [", ", ", "] in any order", self.matchers
        )

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Report matchers lacking an item, else items lacking a matcher."""
        items = as_sequence(item)
        if items is None:
            description.append_text("was ").append_value(item)
            return
        unmatched, leftovers = pair_up(self.matchers, items)
        if unmatched:
            description.append_list("no item matches: ", ", ", "", unmatched)
            description.append_text(" in ").append_value(items)
        elif leftovers:
            description.append_value_list("not matched: ", ", ", "", leftovers)


@dc.dataclass(frozen=True, slots=True)
class IsSequenceContaining(BaseMatcher[t.Any]):
    """Match sequences with at least one item matching ``matcher``."""

    matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        """Scan until the first matching item."""
        items = as_sequence(item)
        return items is not None and any(self.matcher.matches(i) for i in items)

    def describe_to(self, description: Description) -> None:
        description.append_text("a sequence containing ").append_description_of(
            self.matcher
        )


@dc.dataclass(frozen=True, slots=True)
class IsSequenceContainingEvery(BaseMatcher[t.Any]):
    """Match sequences where each of ``matchers`` finds some matching item."""

    matchers: tuple[Matcher[t.Any], ...]

    def matches(self, item: object) -> bool:
        items = as_sequence(item)
        if items is None:
            return False
        return all(
            any(matcher.matches(value) for value in items) for matcher in self.matchers
        )

    def describe_to(self, description: Description) -> None:
        description.append_list(
            "a sequence containing all of [", ", ", "]", self.matchers
        )

    def describe_mismatch(self, item: object, description: Description) -> None:
        items = as_sequence(item)
        if items is None:
            description.append_text("was ").append_value(item)
            return
        for matcher in self.matchers:
            if not any(matcher.matches(value) for value in items):
                description.append_text("no item matches: ").append_description_of(
                    matcher
                ).append_text(" in ").append_value(items)
                return


@dc.dataclass(frozen=True, slots=True)
class IsEveryItem(BaseMatcher[t.Any]):
    """Match sequences where every item matches ``matcher``."""

    matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        items = as_sequence(item)
        return items is not None and all(self.matcher.matches(i) for i in items)

    def describe_to(self, description: Description) -> None:
        description.append_text("every item is ").append_description_of(self.matcher)

    def describe_mismatch(self, item: object, description: Description) -> None:
        items = as_sequence(item)
        if items is None:
            description.append_text("was ").append_value(item)
            return
        for index, value in enumerate(items):
            if not self.matcher.matches(value):
                description.append_text(f"item {index}: ")
                self.matcher.describe_mismatch(value, description)
                return


@dc.dataclass(frozen=True, slots=True)
class HasLength(BaseMatcher[t.Any]):
    """Match values whose length satisfies ``matcher``."""

    matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        length = _length(item)
        return length is not None and self.matcher.matches(length)

    def describe_to(self, description: Description) -> None:
        description.append_text("an object with length of ").append_description_of(
            self.matcher
        )

    def describe_mismatch(self, item: object, description: Description) -> None:
        description.append_text("was ").append_value(item)
        length = _length(item)
        if length is not None:
            description.append_text(f" with length of {length}")


@dc.dataclass(frozen=True, slots=True)
class IsEmpty(BaseMatcher[t.Any]):
    """Match values of length zero."""

    def matches(self, item: object) -> bool:
        return _length(item) == 0

    def describe_to(self, description: Description) -> None:
        description.append_text("an empty collection")

    def describe_mismatch(self, item: object, description: Description) -> None:
        description.append_text("was ").append_value(item)
        length = _length(item)
        if length is not None:
            description.append_text(f" with length of {length}")


@dc.dataclass(frozen=True, slots=True)
class IsIn(BaseMatcher[t.Any]):
    """Match values equal to one of ``collection``."""

    collection: tuple[object, ...]

    def matches(self, item: object) -> bool:
        return any(values_equal(item, candidate) for candidate in self.collection)

    def describe_to(self, description: Description) -> None:
        description.append_value_list("one of [", ", ", "]", self.collection)


def contains(*matchers: object) -> IsSequenceContainingInOrder:
    """Match sequences whose items match *matchers* exactly, in order."""
    return IsSequenceContainingInOrder(tuple(wrap_matcher(m) for m in matchers))


def contains_in_any_order(*matchers: object) -> IsSequenceContainingInAnyOrder:
    """Match sequences whose items pair off one-to-one with *matchers*."""
    return IsSequenceContainingInAnyOrder(tuple(wrap_matcher(m) for m in matchers))


def has_item(matcher: object) -> IsSequenceContaining:
    """Match sequences containing at least one item matching *matcher*."""
    return IsSequenceContaining(wrap_matcher(matcher))


def has_items(*matchers: object) -> IsSequenceContainingEvery:
    """Match sequences containing a matching item for each of *matchers*."""
    return IsSequenceContainingEvery(tuple(wrap_matcher(m) for m in matchers))


def every_item(matcher: object) -> IsEveryItem:
    """Match sequences whose every item matches *matcher*."""
    return IsEveryItem(wrap_matcher(matcher))


def has_length(length: object) -> HasLength:
    """Match values whose length is, or matches, *length*."""
    return HasLength(wrap_matcher(length))


def empty() -> IsEmpty:
    """Match values with no items."""
    return IsEmpty()


def is_in(collection: t.Iterable[object]) -> IsIn:
    """Match values equal to some member of *collection*."""
    return IsIn(tuple(collection))


__all__ = [
    "HasLength",
    "IsEmpty",
    "IsEveryItem",
    "IsIn",
    "IsSequenceContaining",
    "IsSequenceContainingEvery",
    "IsSequenceContainingInAnyOrder",
    "IsSequenceContainingInOrder",
    "as_sequence",
    "contains",
    "contains_in_any_order",
    "empty",
    "every_item",
    "has_item",
    "has_items",
    "has_length",
    "is_in",
    "pair_up",
]
