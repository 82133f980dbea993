"""Timezone utilities: the local calendar day and date conversions."""

import calendar
from datetime import date, datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured local timezone."""
    from networth.config.settings import get_settings

    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the configured local timezone."""
    return datetime.now(local_tz())


def today_local() -> date:
    """Return the current calendar day in the configured local timezone."""
    return now_local().date()


def parse_date(value, default: Optional[date] = None) -> Optional[date]:
    """
    Parse a date-like value (date, datetime or string) into a date.

    Strings accept anything dateutil understands, e.g. "2024-03-15" or
    "2024-03-15T10:00:00Z". Empty values return the default.
    """
    if value is None or value == "":
        return default
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(str(value)).date()


def date_to_timestamp(d: date) -> int:
    """Unix timestamp (seconds) of midnight UTC on the given day."""
    return calendar.timegm(d.timetuple())
