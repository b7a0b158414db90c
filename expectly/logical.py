"""Logical combinators: conjunction, disjunction, negation and chaining."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .base import BaseMatcher, Matcher, wrap_matcher

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .description import Description


def _wrap_all(values: t.Iterable[object]) -> tuple[Matcher[t.Any], ...]:
    """Wrap *values* as matchers, dropping absent (``None``) slots."""
    return tuple(wrap_matcher(value) for value in values if value is not None)


@dc.dataclass(frozen=True, slots=True)
class AllOf(BaseMatcher[t.Any]):
    """Match when every one of ``matchers`` matches.

    Children are evaluated in order and evaluation stops at the first
    failure, which is also the only failure reported as the mismatch. An
    empty conjunction matches everything.
    """

    matchers: tuple[Matcher[t.Any], ...] = ()

    def matches(self, item: object) -> bool:
        return all(matcher.matches(item) for matcher in self.matchers)

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " and ", ")", self.matchers)

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Explain the first child matcher that rejected *item*."""
        for matcher in self.matchers:
            if not matcher.matches(item):
                description.append_description_of(matcher).append_text(" ")
                matcher.describe_mismatch(item, description)
                return
        description.append_text("was ").append_value(item)


@dc.dataclass(frozen=True, slots=True)
class AnyOf(BaseMatcher[t.Any]):
    """Match when at least one of ``matchers`` matches.

    Evaluation stops at the first success. An empty disjunction matches
    nothing.
    """

    matchers: tuple[Matcher[t.Any], ...] = ()

    def matches(self, item: object) -> bool:
        return any(matcher.matches(item) for matcher in self.matchers)

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " or ", ")", self.matchers)


@dc.dataclass(frozen=True, slots=True)
class IsNot(BaseMatcher[t.Any]):
    """Invert ``matcher``."""

    matcher: Matcher[t.Any]

    def matches(self, item: object) -> bool:
        """Return ``True`` if the wrapped matcher rejects *item*."""
        return not self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("not ").append_description_of(self.matcher)

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Report that *item* satisfied the wrapped matcher."""
        description.append_text("was ").append_value(item).append_text(
            ", which matched "
        ).append_description_of(self.matcher)


@dc.dataclass(frozen=True, slots=True)
class CombinableMatcher(BaseMatcher[t.Any]):
    """Fluent builder behind :func:`both` and :func:`either`.

    Each call to :meth:`and_` or :meth:`or_` returns a new matcher that
    combines the current one with the argument, so chains fold to the
    left: ``both(a).and_(b).and_(c)`` is ``all_of(all_of(a, b), c)``.
    """

    matcher: Matcher[t.Any]

    def and_(self, other: object) -> CombinableMatcher:
        """Return a matcher requiring this one and *other*."""
        return CombinableMatcher(AllOf((self.matcher, wrap_matcher(other))))

    def or_(self, other: object) -> CombinableMatcher:
        """Return a matcher accepting this one or *other*."""
        return CombinableMatcher(AnyOf((self.matcher, wrap_matcher(other))))

    def matches(self, item: object) -> bool:
        return self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        self.matcher.describe_to(description)

    def describe_mismatch(self, item: object, description: Description) -> None:
        self.matcher.describe_mismatch(item, description)


def all_of(*matchers: object) -> AllOf:
    """Match when all *matchers* match; bare values are compared for equality."""
    return AllOf(_wrap_all(matchers))


def any_of(*matchers: object) -> AnyOf:
    """Match when any of *matchers* matches; bare values are compared for equality."""
    return AnyOf(_wrap_all(matchers))


def not_(matcher: object) -> IsNot:
    """Match values that *matcher* (or equality with a bare value) rejects."""
    return IsNot(wrap_matcher(matcher))


def both(matcher: object) -> CombinableMatcher:
    """Start an ``and_`` chain with *matcher*."""
    return CombinableMatcher(wrap_matcher(matcher))


def either(matcher: object) -> CombinableMatcher:
    """Start an ``or_`` chain with *matcher*."""
    return CombinableMatcher(wrap_matcher(matcher))


__all__ = [
    "AllOf",
    "AnyOf",
    "CombinableMatcher",
    "IsNot",
    "all_of",
    "any_of",
    "both",
    "either",
    "not_",
]
