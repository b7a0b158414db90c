"""Tests for the expectly pytest plugin."""

from __future__ import annotations

import os
import textwrap

import pytest

from expectly.config import EXPECTLY_MAX_REPR_ENV

ENV_CHECK = textwrap.dedent(
    """
    import os

    def test_reads_max_repr():
        assert os.environ.get("EXPECTLY_MAX_REPR") == {expected!r}
    """
)


def test_assert_that_fixture_passes(pytester: pytest.Pytester) -> None:
    """The fixture exposes assert_that to test functions."""
    pytester.makepyfile(
        """
        from expectly import equal_to

        def test_uses_fixture(assert_that):
            assert_that(5, equal_to(5))
        """
    )
    result = pytester.runpytest_inprocess()
    result.assert_outcomes(passed=1)


def test_assert_that_fixture_reports_failure(pytester: pytest.Pytester) -> None:
    """A failing assertion surfaces the Expected/but lines in the report."""
    pytester.makepyfile(
        """
        from expectly import equal_to

        def test_uses_fixture(assert_that):
            assert_that(1, equal_to(2), "numbers differ")
        """
    )
    result = pytester.runpytest_inprocess()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        ["*MatcherAssertionError: numbers differ*", "*Expected: 2*", "*but: was 1*"]
    )


def test_cli_option_sets_max_repr(pytester: pytest.Pytester) -> None:
    """--expectly-max-repr exports the limit for the session."""
    pytester.makepyfile(ENV_CHECK.format(expected="4"))
    result = pytester.runpytest_inprocess("--expectly-max-repr=4")
    result.assert_outcomes(passed=1)


def test_ini_option_sets_max_repr(pytester: pytest.Pytester) -> None:
    """The ini setting is used when no CLI option is given."""
    pytester.makeini("[pytest]\nexpectly_max_repr = 7\n")
    pytester.makepyfile(ENV_CHECK.format(expected="7"))
    result = pytester.runpytest_inprocess()
    result.assert_outcomes(passed=1)


def test_cli_option_overrides_ini(pytester: pytest.Pytester) -> None:
    """The CLI option wins over the ini setting."""
    pytester.makeini("[pytest]\nexpectly_max_repr = 7\n")
    pytester.makepyfile(ENV_CHECK.format(expected="9"))
    result = pytester.runpytest_inprocess("--expectly-max-repr=9")
    result.assert_outcomes(passed=1)


def test_invalid_max_repr_is_usage_error(pytester: pytest.Pytester) -> None:
    """A non-integer limit aborts the session."""
    pytester.makepyfile("def test_nothing():\n    pass\n")
    result = pytester.runpytest_inprocess("--expectly-max-repr=abc")
    assert result.ret != pytest.ExitCode.OK
    output = str(result.stdout) + str(result.stderr)
    assert "expectly_max_repr must be a positive integer" in output


def test_environment_restored_after_session(pytester: pytest.Pytester) -> None:
    """The inner session leaves the outer environment untouched."""
    pytester.makepyfile(ENV_CHECK.format(expected="3"))
    result = pytester.runpytest_inprocess("--expectly-max-repr=3")
    result.assert_outcomes(passed=1)
    assert EXPECTLY_MAX_REPR_ENV not in os.environ
