"""
Tests for models and state modules.
"""

import pytest


class TestClassifyStatus:
    """Tests for classify_status function."""

    @pytest.mark.parametrize("status", ["canceled", "infrastructure_fail", "timedout", "failed"])
    def test_failure_statuses(self, status):
        """Test that failure statuses map to FAILURE."""
        from buildwatch.models.status import BuildOutcome, classify_status

        assert classify_status(status) is BuildOutcome.FAILURE

    @pytest.mark.parametrize("status", ["fixed", "success"])
    def test_success_statuses(self, status):
        """Test that success statuses map to SUCCESS."""
        from buildwatch.models.status import BuildOutcome, classify_status

        assert classify_status(status) is BuildOutcome.SUCCESS

    @pytest.mark.parametrize(
        "status",
        ["retried", "not_run", "running", "queued", "scheduled", "not_running", "no_tests",
         "on_hold", "", None, "SUCCESS"],
    )
    def test_other_statuses_pending(self, status):
        """Test that unknown and in-progress statuses keep waiting."""
        from buildwatch.models.status import BuildOutcome, classify_status

        assert classify_status(status) is BuildOutcome.PENDING

    def test_lists_disjoint(self):
        """Test that no status is both success and failure."""
        from buildwatch.models.status import FAILED_STATUSES, SUCCESS_STATUSES

        assert not FAILED_STATUSES & SUCCESS_STATUSES


class TestWatchResult:
    """Tests for WatchResult dataclass."""

    def test_success_exit_code(self):
        """Test that only SUCCESS exits with 0."""
        from buildwatch.models.result import WatchResult
        from buildwatch.state.watch import WatchState

        result = WatchResult(state=WatchState.SUCCESS, iterations=2, build_num=42, status="success")

        assert result.exit_code == 0
        assert result.build_url is None

    @pytest.mark.parametrize("state", ["failure", "exhausted"])
    def test_non_success_exit_code(self, state):
        """Test that failure and exhaustion exit with 1."""
        from buildwatch.models.result import WatchResult
        from buildwatch.state.watch import WatchState

        assert WatchResult(state=WatchState(state), iterations=0).exit_code == 1


class TestWatchState:
    """Tests for WatchState enum."""

    def test_terminal_states(self):
        """Test terminal flags."""
        from buildwatch.state.watch import WatchState

        terminal = {s for s in WatchState if s.is_terminal}

        assert terminal == {WatchState.SUCCESS, WatchState.FAILURE, WatchState.EXHAUSTED}


class TestIterationBudget:
    """Tests for IterationBudget class."""

    def test_exhausted_after_passing_ceiling(self):
        """Test that the budget allows max_iterations + 1 attempts."""
        from buildwatch.state.watch import IterationBudget

        budget = IterationBudget(2)

        for _ in range(2):
            budget.consume()
            assert not budget.exhausted

        budget.consume()
        assert budget.exhausted
        assert budget.used == 3

    def test_zero_budget(self):
        """Test that a zero budget still permits the first attempt."""
        from buildwatch.state.watch import IterationBudget

        budget = IterationBudget(0)

        assert not budget.exhausted
        budget.consume()
        assert budget.exhausted

    def test_negative_budget_rejected(self):
        """Test that a negative ceiling raises ValueError."""
        from buildwatch.state.watch import IterationBudget

        with pytest.raises(ValueError):
            IterationBudget(-1)
