"""Shared helpers for rendering matcher output in unit tests."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from expectly.description import StringDescription

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from expectly.base import Matcher
    from expectly.description import Description


def description_of(matcher: Matcher[t.Any]) -> str:
    """Return what *matcher* writes from ``describe_to``."""
    return str(StringDescription().append_description_of(matcher))


def mismatch_of(matcher: Matcher[t.Any], item: object) -> str:
    """Return what *matcher* writes from ``describe_mismatch`` for *item*."""
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


@dc.dataclass(slots=True)
class RecordingMatcher:
    """Structural matcher recording every value it is asked about."""

    result: bool
    label: str = "recorded"
    seen: list[object] = dc.field(default_factory=list)

    def matches(self, item: object) -> bool:
        self.seen.append(item)
        return self.result

    def describe_to(self, description: Description) -> None:
        description.append_text(self.label)

    def describe_mismatch(self, item: object, description: Description) -> None:
        description.append_text("rejected ").append_value(item)
