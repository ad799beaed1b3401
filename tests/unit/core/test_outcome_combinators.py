"""Unit tests for the Success/Failure combinators."""

import pytest

from broadcast_periods.core.exceptions import ExtractionError
from broadcast_periods.core.types import (
    ABSENT,
    Failure,
    Success,
    and_then,
    first_success,
    fold,
    is_success,
    map_outcome,
    or_else,
    silence,
)


def _must_not_run():
    raise AssertionError("secondary must not be evaluated")


class TestOrElse:
    @pytest.mark.unit
    def test_success_is_returned_unchanged_and_secondary_is_never_called(self):
        primary = Success(2011)

        result = or_else(primary, _must_not_run)

        assert result is primary

    @pytest.mark.unit
    def test_failure_evaluates_secondary(self):
        calls = []

        def secondary():
            calls.append(1)
            return Success(2011)

        result = or_else(Failure(ExtractionError("year start", "x")), secondary)

        assert result == Success(2011)
        assert calls == [1]

    @pytest.mark.unit
    def test_both_failing_keeps_the_secondary_failure_verbatim(self):
        second = Failure(ExtractionError("single year", "x"))

        result = or_else(Failure(ExtractionError("year start", "x")), lambda: second)

        assert result is second


class TestFirstSuccess:
    @pytest.mark.unit
    def test_first_success_wins_and_later_attempts_are_skipped(self):
        result = first_success(
            lambda: Failure("a"),
            lambda: Success(1),
            _must_not_run,
        )

        assert result == Success(1)

    @pytest.mark.unit
    def test_last_failure_wins_when_nothing_resolves(self):
        result = first_success(lambda: Failure("a"), lambda: Failure("b"))

        assert result == Failure("b")

    @pytest.mark.unit
    def test_requires_at_least_one_attempt(self):
        with pytest.raises(ValueError, match="attempts"):
            first_success()


class TestMapAndBind:
    @pytest.mark.unit
    def test_map_transforms_success(self):
        assert map_outcome(Success(2), lambda v: v * 10) == Success(20)

    @pytest.mark.unit
    def test_map_passes_failure_through(self):
        failure = Failure("nope")
        assert map_outcome(failure, lambda v: v * 10) is failure

    @pytest.mark.unit
    def test_and_then_short_circuits_on_failure(self):
        failure = Failure("nope")
        assert and_then(failure, lambda _v: _must_not_run()) is failure

    @pytest.mark.unit
    def test_and_then_can_fail_from_a_success(self):
        assert and_then(Success(1), lambda _v: Failure("late")) == Failure("late")


class TestFoldAndSilence:
    @pytest.mark.unit
    def test_fold_selects_the_matching_branch(self):
        assert fold(Success(3), lambda e: f"err {e}", lambda v: f"ok {v}") == "ok 3"
        assert fold(Failure("x"), lambda e: f"err {e}", lambda v: f"ok {v}") == "err x"

    @pytest.mark.unit
    def test_silence_drops_the_diagnostic(self):
        silenced = silence(Failure(ExtractionError("title", "raw")))

        assert silenced is ABSENT
        assert silenced.error is None

    @pytest.mark.unit
    def test_silence_leaves_success_alone(self):
        success = Success("ok")
        assert silence(success) is success

    @pytest.mark.unit
    def test_is_success(self):
        assert is_success(Success(None))
        assert not is_success(ABSENT)
