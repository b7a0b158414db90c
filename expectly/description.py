"""Description sinks and the canonical rendering of values."""

from __future__ import annotations

import collections.abc as cabc
import typing as t

from .config import max_repr_length

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_ELLIPSIS = "..."


class SelfDescribing(t.Protocol):
    """Object able to write a description of itself to a sink."""

    def describe_to(self, description: Description) -> None:
        """Append a description of this object to *description*."""
        ...


class Description(t.Protocol):
    """Append-only text target for matcher descriptions."""

    def append_text(self, text: str) -> Description: ...

    def append_description_of(self, value: SelfDescribing) -> Description: ...

    def append_value(self, value: object) -> Description: ...

    def append_value_list(
        self, start: str, separator: str, end: str, values: t.Iterable[object]
    ) -> Description: ...

    def append_list(
        self,
        start: str,
        separator: str,
        end: str,
        items: t.Iterable[SelfDescribing],
    ) -> Description: ...


def _quote(text: str) -> str:
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in text) + '"'


def canonical_string(value: object) -> str:
    """Return the canonical textual form of *value* used in descriptions.

    ``None`` renders as ``null``, strings are double-quoted and escaped,
    lists and tuples render as bracketed lists and mappings as braced
    key/value lists, each of their members rendered recursively. Any
    other value uses :func:`str`.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, list | tuple):
        return "[" + ", ".join(canonical_string(item) for item in value) + "]"
    if isinstance(value, cabc.Mapping):
        entries = (
            f"{canonical_string(key)}: {canonical_string(val)}"
            for key, val in value.items()
        )
        return "{" + ", ".join(entries) + "}"
    return str(value)


def _truncate(text: str, limit: int | None) -> str:
    if limit is None or len(text) <= limit:
        return text
    return text[:limit] + _ELLIPSIS


class StringDescription:
    """In-memory :class:`Description` accumulating text in a list."""

    def __init__(self, *, max_repr: int | None = None) -> None:
        self._parts: list[str] = []
        self._max_repr = max_repr if max_repr is not None else max_repr_length()

    def append_text(self, text: str) -> StringDescription:
        """Append *text* verbatim."""
        self._parts.append(text)
        return self

    def append_description_of(self, value: SelfDescribing) -> StringDescription:
        """Ask *value* to describe itself into this sink."""
        value.describe_to(self)
        return self

    def append_value(self, value: object) -> StringDescription:
        """Append the canonical form of *value*."""
        self._parts.append(_truncate(canonical_string(value), self._max_repr))
        return self

    def append_value_list(
        self, start: str, separator: str, end: str, values: t.Iterable[object]
    ) -> StringDescription:
        """Append *values* in canonical form joined by *separator*."""
        self.append_text(start)
        for index, value in enumerate(values):
            if index:
                self.append_text(separator)
            self.append_value(value)
        return self.append_text(end)

    def append_list(
        self,
        start: str,
        separator: str,
        end: str,
        items: t.Iterable[SelfDescribing],
    ) -> StringDescription:
        """Append the descriptions of *items* joined by *separator*."""
        self.append_text(start)
        for index, item in enumerate(items):
            if index:
                self.append_text(separator)
            self.append_description_of(item)
        return self.append_text(end)

    def __str__(self) -> str:
        """Return the accumulated text."""
        return "".join(self._parts)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"StringDescription({str(self)!r})"


def to_string(value: SelfDescribing) -> str:
    """Return the description of *value* as a string."""
    return str(StringDescription().append_description_of(value))


__all__ = [
    "Description",
    "SelfDescribing",
    "StringDescription",
    "canonical_string",
    "to_string",
]
