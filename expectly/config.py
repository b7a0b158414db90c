"""Environment-driven settings for expectly."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

EXPECTLY_MAX_REPR_ENV = "EXPECTLY_MAX_REPR"  # truncation length for rendered values


def parse_max_repr(raw: str | None) -> int | None:
    """Return the truncation length encoded in *raw*, or ``None`` if unusable."""
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.debug("Invalid %s value %r; ignoring", EXPECTLY_MAX_REPR_ENV, raw)
        return None
    if value <= 0:
        logger.debug("Non-positive %s value %r; ignoring", EXPECTLY_MAX_REPR_ENV, raw)
        return None
    return value


def max_repr_length() -> int | None:
    """Return the configured maximum length for canonical value strings."""
    return parse_max_repr(os.environ.get(EXPECTLY_MAX_REPR_ENV))


__all__ = ["EXPECTLY_MAX_REPR_ENV", "max_repr_length", "parse_max_repr"]
