"""Exception hierarchy for expectly."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .base import Matcher


class ExpectlyError(Exception):
    """Base class for expectly configuration errors."""


class MatcherConfigurationError(ExpectlyError, ValueError):
    """Raised when a matcher is constructed with invalid arguments."""


class MatcherAssertionError(AssertionError):
    """Raised by :func:`~expectly.assertion.assert_that` when a value fails."""

    def __init__(
        self,
        message: str,
        *,
        actual: object = None,
        matcher: Matcher[t.Any] | None = None,
        reason: str = "",
    ) -> None:
        super().__init__(message)
        self.actual = actual
        self.matcher = matcher
        self.reason = reason


__all__ = [
    "ExpectlyError",
    "MatcherAssertionError",
    "MatcherConfigurationError",
]
