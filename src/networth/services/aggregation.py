"""Summation of ledger valuations into account and portfolio series."""

from typing import Iterable, Mapping, Optional, Sequence, TypeVar

from networth.core.exceptions import ValidationError
from networth.domain.models import LedgerKey
from networth.domain.views import AggregatedSeries

T = TypeVar("T")


class PortfolioAggregator:
    """
    Sums aligned per-ledger series and cuts them to a trailing window.

    The window discards the same leading samples from every series, so all
    outputs stay aligned with each other and with `window_of(dates)`.
    """

    def __init__(self, window: int = 1095):
        if window <= 0:
            raise ValidationError("Aggregation window must be positive")
        self._window = window

    @property
    def window(self) -> int:
        return self._window

    def offset_for(self, length: int) -> int:
        """Number of leading samples the window drops from a series of `length`."""
        return max(0, length - self._window)

    def window_of(self, seq: Sequence[T]) -> list[T]:
        """Apply the trailing-window cut to any aligned sequence."""
        return list(seq[self.offset_for(len(seq)):])

    def aggregate(
        self,
        valuations: Mapping[LedgerKey, Sequence[float]],
        length: Optional[int] = None,
        account_ids: Optional[Iterable[str]] = None,
    ) -> AggregatedSeries:
        """
        Sum ledger valuations per account and overall.

        Args:
            valuations: Base-currency series keyed by ledger.
            length: Expected series length; inferred from the first series.
            account_ids: Accounts to report, in order. Accounts without
                ledgers get a zero series. Defaults to the valuation order.

        Raises:
            ValidationError: Series lengths differ.
        """
        if length is None:
            length = len(next(iter(valuations.values()), []))

        per_account: dict[str, list[float]] = {}
        for account_id in account_ids or []:
            per_account[account_id] = [0.0] * length

        total = [0.0] * length
        for key, series in valuations.items():
            if len(series) != length:
                raise ValidationError(
                    f"Series for ledger {key} has {len(series)} points, expected {length}"
                )
            account_series = per_account.setdefault(key.account_id, [0.0] * length)
            for i, value in enumerate(series):
                account_series[i] += value
                total[i] += value

        offset = self.offset_for(length)
        return AggregatedSeries(
            per_account={account_id: s[offset:] for account_id, s in per_account.items()},
            total=total[offset:],
            offset=offset,
        )
