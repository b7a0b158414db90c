"""Pytest plugin providing the ``assert_that`` fixture and repr settings."""

from __future__ import annotations

import logging
import os
import typing as t

import pytest

from .assertion import assert_that as _assert_that
from .config import EXPECTLY_MAX_REPR_ENV, parse_max_repr

logger = logging.getLogger(__name__)

_PREVIOUS_MAX_REPR = pytest.StashKey[str | None]()
_MISSING = object()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("expectly")
    group.addoption(
        "--expectly-max-repr",
        action="store",
        dest="expectly_max_repr",
        default=None,
        help=(
            "Truncate values rendered in matcher failure messages to this "
            "many characters. Overrides the pytest.ini setting."
        ),
    )
    parser.addini(
        "expectly_max_repr",
        "Truncate values rendered in matcher failure messages to this many characters.",
        default="",
    )


def _configured_max_repr(config: pytest.Config) -> str | None:
    """Return the raw truncation setting, if any."""
    # Priority order: CLI option > INI setting > existing environment
    cli_value = config.getoption("expectly_max_repr")
    if cli_value is not None:
        return str(cli_value)
    ini_value = config.getini("expectly_max_repr")
    if ini_value:
        return str(ini_value)
    return None


def pytest_configure(config: pytest.Config) -> None:
    """Export the truncation setting to the environment for the session."""
    raw = _configured_max_repr(config)
    if raw is None:
        return
    if parse_max_repr(raw) is None:
        msg = f"expectly_max_repr must be a positive integer, got {raw!r}"
        raise pytest.UsageError(msg)
    config.stash[_PREVIOUS_MAX_REPR] = os.environ.get(EXPECTLY_MAX_REPR_ENV)
    os.environ[EXPECTLY_MAX_REPR_ENV] = raw
    logger.debug("Set %s=%s for this session", EXPECTLY_MAX_REPR_ENV, raw)


def pytest_unconfigure(config: pytest.Config) -> None:
    """Restore the environment captured by :func:`pytest_configure`."""
    previous = config.stash.get(_PREVIOUS_MAX_REPR, _MISSING)
    if previous is _MISSING:
        return
    if previous is None:
        os.environ.pop(EXPECTLY_MAX_REPR_ENV, None)
    else:
        os.environ[EXPECTLY_MAX_REPR_ENV] = t.cast("str", previous)


@pytest.fixture
def assert_that() -> t.Callable[..., None]:
    """Return :func:`expectly.assert_that` for use inside tests."""
    return _assert_that


__all__ = [
    "assert_that",
    "pytest_addoption",
    "pytest_configure",
    "pytest_unconfigure",
]
