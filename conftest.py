"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from expectly.config import EXPECTLY_MAX_REPR_ENV

pytest_plugins = ("pytester",)


@pytest.fixture(autouse=True)
def reset_max_repr(monkeypatch: pytest.MonkeyPatch) -> t.Generator[None, None, None]:
    """Ensure rendered values are not truncated unless a test asks for it."""
    monkeypatch.delenv(EXPECTLY_MAX_REPR_ENV, raising=False)
    yield
