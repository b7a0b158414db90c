"""Primitive matchers: equality, identity, types and description wrappers."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t

from ._validators import validate_type
from .base import BaseMatcher, Matcher, is_matcher, wrap_matcher
from .description import canonical_string
from .errors import MatcherConfigurationError
from .logical import not_

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .description import Description

_PLACEHOLDER = re.compile(r"%(\d+)")


def _is_array(value: object) -> bool:
    return isinstance(value, list | tuple)


def values_equal(actual: object, expected: object) -> bool:
    """Return ``True`` if *actual* equals *expected*.

    Lists and tuples are compared element by element using this same
    rule, so nested arrays compare deeply. Everything else defers to
    ``==``, which tries the actual value's equality first and then the
    expected value's reflected one. An ``==`` that raises, or whose
    result has no truth value, counts as not equal.
    """
    if actual is expected:
        return True
    if _is_array(actual) and _is_array(expected):
        actual_seq = t.cast("t.Sequence[object]", actual)
        expected_seq = t.cast("t.Sequence[object]", expected)
        return len(actual_seq) == len(expected_seq) and all(
            values_equal(a, e) for a, e in zip(actual_seq, expected_seq, strict=True)
        )
    try:
        return bool(actual == expected)
    except Exception:  # noqa: BLE001 - foreign __eq__ or __bool__ may raise
        return False


@dc.dataclass(frozen=True, slots=True)
class IsEqual(BaseMatcher[t.Any]):
    """Match values equal to ``expected``."""

    expected: object

    def matches(self, item: object) -> bool:
        """Return ``True`` if *item* equals ``expected``."""
        return values_equal(item, self.expected)

    def describe_to(self, description: Description) -> None:
        """Describe the expected value."""
        description.append_value(self.expected)


@dc.dataclass(frozen=True, slots=True)
class IsSame(BaseMatcher[t.Any]):
    """Match the very object ``expected``."""

    expected: object

    def matches(self, item: object) -> bool:
        """Return ``True`` if *item* is ``expected``."""
        return item is self.expected

    def describe_to(self, description: Description) -> None:
        """Describe the expected instance."""
        description.append_text("same instance as ").append_value(self.expected)


@dc.dataclass(frozen=True, slots=True)
class IsNone(BaseMatcher[t.Any]):
    """Match ``None``."""

    def matches(self, item: object) -> bool:
        """Return ``True`` if *item* is ``None``."""
        return item is None

    def describe_to(self, description: Description) -> None:
        """Describe the absent value."""
        description.append_value(None)


@dc.dataclass(frozen=True, slots=True)
class IsInstanceOf(BaseMatcher[t.Any]):
    """Match instances of ``typ``."""

    typ: type | tuple[type, ...]

    def __post_init__(self) -> None:
        validate_type(self.typ)

    def matches(self, item: object) -> bool:
        """Return ``True`` if *item* is an instance of ``typ``."""
        return isinstance(item, self.typ)

    def describe_to(self, description: Description) -> None:
        """Describe the expected type."""
        types = self.typ if isinstance(self.typ, tuple) else (self.typ,)
        description.append_text("an instance of ").append_text(
            " or ".join(typ.__name__ for typ in types)
        )

    def describe_mismatch(self, item: object, description: Description) -> None:
        """Report the value and its actual type."""
        description.append_text("was ").append_value(item).append_text(
            f" of type {type(item).__name__}"
        )


@dc.dataclass(frozen=True, slots=True)
class IsAnything(BaseMatcher[t.Any]):
    """Match any value."""

    label: str = "ANYTHING"

    def matches(self, item: object) -> bool:
        """Return ``True`` for any input."""
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text(self.label)


@dc.dataclass(frozen=True, slots=True)
class Predicate(BaseMatcher[t.Any]):
    """Use a custom ``func`` to determine a match."""

    func: t.Callable[[t.Any], object]
    label: str = ""

    def matches(self, item: object) -> bool:
        """Return ``True`` if ``func(item)`` is truthy."""
        return bool(self.func(item))

    def describe_to(self, description: Description) -> None:
        """Describe the predicate by its label or function name."""
        label = self.label or getattr(self.func, "__name__", repr(self.func))
        description.append_text("a value satisfying ").append_text(label)


@dc.dataclass(frozen=True, slots=True)
class DescribedAs(BaseMatcher[t.Any]):
    """Override the description of ``matcher`` with ``template``.

    ``%0``, ``%1`` and so on in the template are replaced by the
    canonical strings of the matching entries of ``values``. Matching and
    mismatch reporting are delegated to ``matcher`` unchanged.
    """

    template: str
    matcher: Matcher[t.Any]
    values: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        for index in _PLACEHOLDER.findall(self.template):
            if int(index) >= len(self.values):
                msg = (
                    f"placeholder %{index} in {self.template!r} has no value; "
                    f"{len(self.values)} supplied"
                )
                raise MatcherConfigurationError(msg)

    def matches(self, item: object) -> bool:
        return self.matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        """Append the template with its placeholders filled in."""
        description.append_text(
            _PLACEHOLDER.sub(
                lambda m: canonical_string(self.values[int(m.group(1))]),
                self.template,
            )
        )

    def describe_mismatch(self, item: object, description: Description) -> None:
        self.matcher.describe_mismatch(item, description)


def equal_to(expected: object) -> IsEqual:
    """Match values equal to *expected*, comparing lists and tuples deeply."""
    return IsEqual(expected)


def is_(value: object) -> Matcher[t.Any]:
    """Return *value* unchanged if it is a matcher, else ``equal_to(value)``."""
    if is_matcher(value):
        return t.cast("Matcher[t.Any]", value)
    return equal_to(value)


def same_instance(expected: object) -> IsSame:
    """Match only the object *expected* itself."""
    return IsSame(expected)


def none() -> IsNone:
    """Match ``None``."""
    return IsNone()


def not_none() -> Matcher[t.Any]:
    """Match anything except ``None``."""
    return not_(none())


def instance_of(typ: type | tuple[type, ...]) -> IsInstanceOf:
    """Match instances of *typ*."""
    return IsInstanceOf(typ)


def anything(description: str = "ANYTHING") -> IsAnything:
    """Match any value, described by *description*."""
    return IsAnything(description)


def satisfies(func: t.Callable[[t.Any], object], description: str = "") -> Predicate:
    """Match values for which *func* returns a truthy result."""
    return Predicate(func, description)


def described_as(template: str, matcher: object, *values: object) -> DescribedAs:
    """Describe *matcher* with *template*, substituting ``%N`` from *values*."""
    return DescribedAs(template, wrap_matcher(matcher), tuple(values))


__all__ = [
    "DescribedAs",
    "IsAnything",
    "IsEqual",
    "IsInstanceOf",
    "IsNone",
    "IsSame",
    "Predicate",
    "anything",
    "described_as",
    "equal_to",
    "instance_of",
    "is_",
    "none",
    "not_none",
    "same_instance",
    "satisfies",
]
