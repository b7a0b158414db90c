"""The matcher contract and its shared base class."""

from __future__ import annotations

import typing as t

from typing_extensions import TypeVar

from .description import Description, to_string

T = TypeVar("T", default=t.Any)
T_contra = TypeVar("T_contra", contravariant=True, default=t.Any)


@t.runtime_checkable
class Matcher(t.Protocol[T_contra]):
    """Predicate over values that can explain itself and its failures.

    Any object providing these three methods is a matcher; no inheritance
    from :class:`BaseMatcher` is required.
    """

    def matches(self, item: T_contra) -> bool:
        """Return ``True`` if *item* satisfies this matcher."""
        ...

    def describe_to(self, description: Description) -> None:
        """Append a description of a passing value to *description*."""
        ...

    def describe_mismatch(self, item: T_contra, description: Description) -> None:
        """Append an explanation of why *item* did not match."""
        ...


class BaseMatcher(t.Generic[T]):
    """Convenience base providing the default mismatch and ``str()``."""

    __slots__ = ()

    def matches(self, item: T) -> bool:
        raise NotImplementedError

    def describe_to(self, description: Description) -> None:
        raise NotImplementedError

    def describe_mismatch(self, item: T, description: Description) -> None:
        """Append ``was <item>``."""
        description.append_text("was ").append_value(item)

    def __str__(self) -> str:
        """Return the matcher's description."""
        return to_string(self)


def is_matcher(value: object) -> bool:
    """Return ``True`` when *value* satisfies the :class:`Matcher` protocol."""
    return not isinstance(value, type) and isinstance(value, Matcher)


def wrap_matcher(value: object) -> Matcher[t.Any]:
    """Return *value* if it is a matcher, else an equality matcher for it."""
    if is_matcher(value):
        return t.cast("Matcher[t.Any]", value)
    from .core import equal_to

    return equal_to(value)


__all__ = ["BaseMatcher", "Matcher", "is_matcher", "wrap_matcher"]
