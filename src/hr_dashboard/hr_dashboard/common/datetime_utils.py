from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Callable

from ..core.constants import ISO_DATE_FORMAT

Clock = Callable[[], date]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_iso(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so services can take it as an injectable clock.
    """
    return date.today()


def days_back(today: date, days: int) -> date:
    return today - timedelta(days=days)


def months_back(today: date, months: int = 1) -> date:
    """Calendar month subtraction.

    The month number goes back by ``months`` (January rolls over into December
    of the previous year) and the day is clamped to the length of the target
    month, so March 31 minus one month is February 28 (29 in leap years).
    """
    index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(today.day, last_day))
