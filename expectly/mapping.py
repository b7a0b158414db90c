"""Matchers over :class:`collections.abc.Mapping` values."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as t

from .base import BaseMatcher, Matcher, wrap_matcher

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .description import Description


@dc.dataclass(frozen=True, slots=True)
class IsMappingContaining(BaseMatcher[t.Any]):
    """Match mappings with an entry whose key and value both match."""

    key_matcher: Matcher[t.Any]
    value_matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        if not isinstance(item, cabc.Mapping):
            return False
        return any(
            self.key_matcher.matches(key) and self.value_matcher.matches(value)
            for key, value in item.items()
        )

    def describe_to(self, description: Description) -> None:
        description.append_text("a mapping containing [").append_description_of(
            self.key_matcher
        ).append_text(": ").append_description_of(self.value_matcher).append_text("]")


@dc.dataclass(frozen=True, slots=True)
class IsMappingContainingKey(BaseMatcher[t.Any]):
    """Match mappings with a key matching ``key_matcher``."""

    key_matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        return isinstance(item, cabc.Mapping) and any(
            self.key_matcher.matches(key) for key in item
        )

    def describe_to(self, description: Description) -> None:
        description.append_text("a mapping containing key ").append_description_of(
            self.key_matcher
        )


@dc.dataclass(frozen=True, slots=True)
class IsMappingContainingValue(BaseMatcher[t.Any]):
    """Match mappings with a value matching ``value_matcher``."""

    value_matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        return isinstance(item, cabc.Mapping) and any(
            self.value_matcher.matches(value) for value in item.values()
        )

    def describe_to(self, description: Description) -> None:
        description.append_text("a mapping containing value ").append_description_of(
            self.value_matcher
        )


@dc.dataclass(frozen=True, slots=True)
class IsMappingContainingEntries(BaseMatcher[t.Any]):
    """Match mappings holding every key of ``entries`` with a matching value.

    Keys are looked up directly; extra keys in the examined mapping are
    ignored.
    """

    entries: tuple[tuple[object, Matcher[t.Any]], ...]

    def matches(self, item: object) -> bool:
        if not isinstance(item, cabc.Mapping):
            return False
        return all(
            key in item and matcher.matches(item[key]) for key, matcher in self.entries
        )

    def describe_to(self, description: Description) -> None:
        description.append_text("a mapping containing {")
        for index, (key, matcher) in enumerate(self.entries):
            if index:
                description.append_text(", ")
            description.append_value(key).append_text(": ").append_description_of(
                matcher
            )
        description.append_text("}")

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Report the first missing key or mismatching value."""
        if not isinstance(item, cabc.Mapping):
            description.append_text("was ").append_value(item)
            return
        for key, matcher in self.entries:
            if key not in item:
                description.append_text("no key ").append_value(key).append_text(
                    " in "
                ).append_value(item)
                return
            if not matcher.matches(item[key]):
                description.append_text("value for ").append_value(key).append_text(
                    " "
                )
                matcher.describe_mismatch(item[key], description)
                return


def has_entry(key: object, value: object) -> IsMappingContaining:
    """Match mappings with an entry matching *key* and *value*."""
    return IsMappingContaining(wrap_matcher(key), wrap_matcher(value))


def has_key(key: object) -> IsMappingContainingKey:
    """Match mappings with a key matching *key*."""
    return IsMappingContainingKey(wrap_matcher(key))


def has_value(value: object) -> IsMappingContainingValue:
    """Match mappings with a value matching *value*."""
    return IsMappingContainingValue(wrap_matcher(value))


def has_entries(
    entries: t.Mapping[object, object] | None = None, **kwargs: object
) -> IsMappingContainingEntries:
    """Match mappings holding each key of *entries* and *kwargs*.

    Values may be matchers or bare values compared for equality.
    """
    merged: dict[object, object] = dict(entries or {})
    merged.update(kwargs)
    return IsMappingContainingEntries(
        tuple((key, wrap_matcher(value)) for key, value in merged.items())
    )


__all__ = [
    "IsMappingContaining",
    "IsMappingContainingEntries",
    "IsMappingContainingKey",
    "IsMappingContainingValue",
    "has_entries",
    "has_entry",
    "has_key",
    "has_value",
]
