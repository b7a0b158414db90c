"""Unit tests for logical combinators."""

from __future__ import annotations

import pytest

from expectly import (
    all_of,
    any_of,
    both,
    contains_string,
    either,
    ends_with,
    equal_to,
    greater_than,
    less_than,
    not_,
    starts_with,
)
from expectly.logical import AllOf, AnyOf
from expectly.unittests._matcher_helpers import (
    RecordingMatcher,
    description_of,
    mismatch_of,
)

SAMPLE_VALUES: list[object] = [None, 0, 1, -1, "", "a", [], [1], {"k": "v"}]


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_empty_all_of_matches_everything(value: object) -> None:
    """An empty conjunction is vacuously true."""
    assert all_of().matches(value)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_empty_any_of_matches_nothing(value: object) -> None:
    """An empty disjunction is vacuously false."""
    assert not any_of().matches(value)


def test_absent_slots_are_filtered() -> None:
    """``None`` arguments are dropped before evaluation."""
    matcher = all_of(None, 1, None)
    assert matcher.matches(1)
    assert description_of(matcher) == "(1)"
    assert all_of(None, None).matches("anything")
    assert not any_of(None).matches("anything")


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_double_negation(value: object) -> None:
    """not_(not_(m)) agrees with m everywhere."""
    matcher = equal_to(1)
    assert not_(not_(matcher)).matches(value) is matcher.matches(value)


def test_all_of_requires_every_child() -> None:
    """all_of matches only when all children do."""
    matcher = all_of(starts_with("a"), ends_with("z"))
    assert matcher.matches("abcz")
    assert not matcher.matches("abc")
    assert not matcher.matches("xyz")


def test_all_of_description_and_first_mismatch() -> None:
    """Only the first failing child explains the mismatch."""
    matcher = all_of(starts_with("a"), ends_with("z"), contains_string("q"))
    assert description_of(matcher) == (
        '(a string starting with "a" and a string ending with "z" '
        'and a string containing "q")'
    )
    assert mismatch_of(matcher, "abc") == 'a string ending with "z" was "abc"'


def test_all_of_short_circuits() -> None:
    """Evaluation stops at the first failing child."""
    failing = RecordingMatcher(result=False)
    never_reached = RecordingMatcher(result=True)
    assert not all_of(failing, never_reached).matches(1)
    assert failing.seen == [1]
    assert never_reached.seen == []


def test_any_of_short_circuits() -> None:
    """Evaluation stops at the first succeeding child."""
    passing = RecordingMatcher(result=True)
    never_reached = RecordingMatcher(result=False)
    assert any_of(passing, never_reached).matches(1)
    assert never_reached.seen == []


def test_any_of_description_and_mismatch() -> None:
    """any_of joins children with "or" and reports the value."""
    matcher = any_of(1, 2)
    assert matcher.matches(2)
    assert not matcher.matches(3)
    assert description_of(matcher) == "(1 or 2)"
    assert mismatch_of(matcher, 3) == "was 3"


def test_children_can_be_shared() -> None:
    """The same child can sit under several parents."""
    shared = greater_than(0)
    first = all_of(shared, less_than(10))
    second = any_of(shared, equal_to(-5))
    assert first.matches(5)
    assert second.matches(-5)
    assert first.matchers[0] is second.matchers[0]


def test_not_description_and_mismatch() -> None:
    """not_ prefixes its child and reports that the child matched."""
    matcher = not_(contains_string("a"))
    assert matcher.matches("xyz")
    assert not matcher.matches("abc")
    assert description_of(matcher) == 'not a string containing "a"'
    assert mismatch_of(matcher, "abc") == (
        'was "abc", which matched a string containing "a"'
    )


def test_not_wraps_bare_values() -> None:
    """A bare value is negated equality."""
    matcher = not_(5)
    assert matcher.matches(4)
    assert not matcher.matches(5)
    assert description_of(matcher) == "not 5"


def test_both_and() -> None:
    """both(...).and_(...) builds a conjunction."""
    matcher = both(greater_than(1)).and_(less_than(5))
    assert matcher.matches(3)
    assert not matcher.matches(6)
    assert description_of(matcher) == (
        "(a value greater than 1 and a value less than 5)"
    )
    assert mismatch_of(matcher, 6) == "a value less than 5 was 6, which is greater than 5"


def test_either_or() -> None:
    """either(...).or_(...) builds a disjunction over bare values too."""
    matcher = either(1).or_(2)
    assert matcher.matches(1)
    assert matcher.matches(2)
    assert not matcher.matches(3)
    assert description_of(matcher) == "(1 or 2)"


def test_chains_fold_to_the_left() -> None:
    """Each link wraps the chain so far in a new binary matcher."""
    matcher = both(1).and_(2).and_(3)
    outer = matcher.matcher
    assert isinstance(outer, AllOf)
    assert len(outer.matchers) == 2
    assert isinstance(outer.matchers[0], AllOf)
    assert description_of(matcher) == "((1 and 2) and 3)"


def test_mixed_chain() -> None:
    """and_ and or_ may be mixed in one chain."""
    matcher = either(1).or_(2).and_(not_(2))
    assert isinstance(matcher.matcher, AllOf)
    assert isinstance(matcher.matcher.matchers[0], AnyOf)
    assert matcher.matches(1)
    assert not matcher.matches(2)


def test_chaining_does_not_mutate() -> None:
    """Extending a chain leaves the original builder untouched."""
    base = both(greater_than(0))
    extended = base.and_(less_than(3))
    assert base.matches(10)
    assert not extended.matches(10)
