"""The ``assert_that`` entry point."""

from __future__ import annotations

import logging
import typing as t

from .base import wrap_matcher
from .description import StringDescription
from .errors import MatcherAssertionError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .base import Matcher

logger = logging.getLogger(__name__)

DEFAULT_BOOLEAN_MESSAGE = "Assertion failed"


def format_failure(actual: object, matcher: Matcher[t.Any], reason: str = "") -> str:
    """Return the failure text for *actual* rejected by *matcher*.

    The text always has three lines: *reason* (possibly empty), the
    matcher's description after ``Expected:`` and its mismatch
    explanation after ``but:``.
    """
    description = StringDescription()
    description.append_text(reason).append_text("\nExpected: ")
    description.append_description_of(matcher).append_text("\n     but: ")
    matcher.describe_mismatch(actual, description)
    return str(description)


def _assert_match(actual: object, matcher: Matcher[t.Any], reason: str) -> None:
    if matcher.matches(actual):
        return
    message = format_failure(actual, matcher, reason)
    logger.debug("Matcher %r rejected %r", matcher, actual)
    raise MatcherAssertionError(
        message, actual=actual, matcher=matcher, reason=reason
    )


def _assert_bool(actual: object, reason: str) -> None:
    if actual:
        return
    message = reason or DEFAULT_BOOLEAN_MESSAGE
    logger.debug("Boolean assertion failed for %r", actual)
    raise MatcherAssertionError(message, actual=actual, reason=reason)


def assert_that(actual: object, matcher: object = None, reason: str = "") -> None:
    """Raise :class:`MatcherAssertionError` unless *actual* satisfies *matcher*.

    A bare value in place of *matcher* is compared for equality. Without
    a matcher, *actual* itself must be truthy.
    """
    if matcher is None:
        _assert_bool(actual, reason)
        return
    _assert_match(actual, wrap_matcher(matcher), reason)


__all__ = ["DEFAULT_BOOLEAN_MESSAGE", "assert_that", "format_failure"]
