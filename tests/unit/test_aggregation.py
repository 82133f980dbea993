"""
Unit tests for PortfolioAggregator.

Tests cover:
- Element-wise totals across accounts
- Per-account sums of multiple ledgers
- Trailing window that keeps every series aligned
- Length mismatch rejection
"""

import pytest

from networth.core.exceptions import ValidationError
from networth.domain.models import LedgerKey
from networth.services import PortfolioAggregator

from tests.conftest import assert_series_close


class TestAggregate:
    """Tests for summation."""

    def test_scenario_total(self):
        """
        GIVEN account A at [100,..,70] and account B at [120,..,84]
        WHEN aggregated
        THEN the total is [220,220,220,220,220,154]
        """
        valuations = {
            LedgerKey("a", "CHF"): [100.0, 100.0, 100.0, 100.0, 100.0, 70.0],
            LedgerKey("b", "EUR"): [120.0, 120.0, 120.0, 120.0, 120.0, 84.0],
        }

        result = PortfolioAggregator().aggregate(valuations)

        assert_series_close(result.total, [220, 220, 220, 220, 220, 154])
        assert list(result.per_account) == ["a", "b"]
        assert result.offset == 0

    def test_ledgers_of_one_account_are_summed(self):
        valuations = {
            LedgerKey("broker", "USD"): [10.0, 20.0],
            LedgerKey("broker", "AAPL"): [1.0, 2.0],
        }

        result = PortfolioAggregator().aggregate(valuations)

        assert result.per_account == {"broker": [11.0, 22.0]}
        assert result.total == [11.0, 22.0]

    def test_accounts_without_ledgers_get_zero_series(self):
        valuations = {LedgerKey("b", "EUR"): [1.0, 2.0]}

        result = PortfolioAggregator().aggregate(valuations, length=2, account_ids=["a", "b"])

        assert result.per_account == {"a": [0.0, 0.0], "b": [1.0, 2.0]}

    def test_empty_valuations(self):
        result = PortfolioAggregator().aggregate({})
        assert result.total == []
        assert result.per_account == {}

    def test_length_mismatch_raises(self):
        valuations = {
            LedgerKey("a", "CHF"): [1.0, 2.0, 3.0],
            LedgerKey("b", "EUR"): [1.0, 2.0],
        }
        with pytest.raises(ValidationError):
            PortfolioAggregator().aggregate(valuations)


class TestWindow:
    """Tests for the trailing window."""

    def test_window_drops_common_prefix(self):
        """
        GIVEN two five-point series and a window of three
        WHEN aggregated
        THEN every series keeps its last three points
        """
        valuations = {
            LedgerKey("a", "CHF"): [1.0, 2.0, 3.0, 4.0, 5.0],
            LedgerKey("b", "CHF"): [10.0, 20.0, 30.0, 40.0, 50.0],
        }
        aggregator = PortfolioAggregator(window=3)

        result = aggregator.aggregate(valuations)

        assert result.offset == 2
        assert result.per_account == {"a": [3.0, 4.0, 5.0], "b": [30.0, 40.0, 50.0]}
        assert result.total == [33.0, 44.0, 55.0]
        assert aggregator.window_of(["d0", "d1", "d2", "d3", "d4"]) == ["d2", "d3", "d4"]

    def test_short_series_are_untouched(self):
        aggregator = PortfolioAggregator(window=10)
        assert aggregator.window_of([1, 2]) == [1, 2]
        assert aggregator.offset_for(2) == 0

    def test_window_must_be_positive(self):
        with pytest.raises(ValidationError):
            PortfolioAggregator(window=0)
