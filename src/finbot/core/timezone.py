"""Timezone and calendar utilities for the configured local wall clock."""

from datetime import datetime

import pytz
from dateutil.relativedelta import relativedelta

from finbot.config.settings import get_settings


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured local timezone."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the configured timezone."""
    return datetime.now(local_tz())


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the configured timezone."""
    tz = local_tz()
    if dt.tzinfo is None:
        # Naive values (e.g. read back from SQLite) are local wall-clock time
        return tz.localize(dt)
    return dt.astimezone(tz)


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """
    Return the half-open range [first instant, first instant of next month).

    Both bounds are localized to the configured timezone.
    """
    tz = local_tz()
    start = datetime(year, month, 1)
    end = start + relativedelta(months=1)
    return tz.localize(start), tz.localize(end)


def format_date_label(dt: datetime) -> str:
    """Format a date the way the id-ID short date form does (d/m/yyyy)."""
    return f"{dt.day}/{dt.month}/{dt.year}"


def to_naive_local(dt: datetime) -> datetime:
    """Return local wall-clock time without tzinfo, as stored in SQLite."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(local_tz()).replace(tzinfo=None)
