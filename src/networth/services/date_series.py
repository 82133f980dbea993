"""Shared daily date axis for every output series."""

from datetime import date, timedelta
from typing import Iterable, Optional

from networth.core.timezone import date_to_timestamp, today_local
from networth.domain.models import Account


def date_range(start: date, end: date) -> list[date]:
    """Every calendar day from start to end, inclusive. Empty if end < start."""
    days = (end - start).days
    return [start + timedelta(days=offset) for offset in range(days + 1)]


def record_bounds(accounts: Iterable[Account]) -> Optional[tuple[date, date]]:
    """(earliest, latest) record date across all ledgers, or None without records."""
    first: Optional[date] = None
    last: Optional[date] = None
    for account in accounts:
        for ledger in account.ledgers:
            if ledger.first_date is None:
                continue
            first = ledger.first_date if first is None else min(first, ledger.first_date)
            last = ledger.last_date if last is None else max(last, ledger.last_date)
    if first is None or last is None:
        return None
    return first, last


def build_date_axis(accounts: Iterable[Account], today: Optional[date] = None) -> list[date]:
    """
    Contiguous daily axis from the earliest record to today.

    Records dated in the future extend the axis to their date. Returns an
    empty list when no account holds a record.
    """
    bounds = record_bounds(accounts)
    if bounds is None:
        return []
    first, last = bounds
    end = max(today or today_local(), last)
    return date_range(first, end)


def future_dates(after: date, count: int) -> list[date]:
    """`count` consecutive days following `after`."""
    return [after + timedelta(days=offset) for offset in range(1, count + 1)]


def to_timestamps(dates: Iterable[date]) -> list[int]:
    """Unix seconds at UTC midnight for each date."""
    return [date_to_timestamp(d) for d in dates]
