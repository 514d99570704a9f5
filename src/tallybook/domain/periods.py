"""Calendar period classification.

All checks use the local clock and naive local datetimes. ``now`` can be
passed to pin the clock; it defaults to ``datetime.now()``.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

DateLike = Union[date, datetime]


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now()


def is_today(value: DateLike, now: Optional[datetime] = None) -> bool:
    """Return True if value falls on the current local calendar day."""
    today = _now(now)
    return (
        value.day == today.day
        and value.month == today.month
        and value.year == today.year
    )


def week_bounds(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """Return the inclusive [Monday 00:00, Sunday 23:59:59.999] range of this week.

    Sunday belongs to the week that started six days earlier.
    """
    today = _now(now)
    # date.weekday() is Monday=0 .. Sunday=6
    monday = datetime.combine(today.date() - timedelta(days=today.weekday()), time.min)
    sunday = datetime.combine((monday + timedelta(days=6)).date(), time(23, 59, 59, 999000))
    return monday, sunday


def is_this_week(value: DateLike, now: Optional[datetime] = None) -> bool:
    """Return True if value falls within the current Monday-start week."""
    start, end = week_bounds(now)
    return start <= _as_datetime(value) <= end


def is_this_month(value: DateLike, now: Optional[datetime] = None) -> bool:
    """Return True if value falls in the current local calendar month."""
    today = _now(now)
    return value.month == today.month and value.year == today.year


def week_of_month(value: DateLike) -> int:
    """Return the 1-based week index of value within its month.

    Weeks here start on Sunday, unlike ``is_this_week``:
    ``(day + weekday_of_first - 1) // 7 + 1`` with Sunday=0 .. Saturday=6.
    """
    first = value.replace(day=1)
    first_weekday = (first.weekday() + 1) % 7
    return (value.day + first_weekday - 1) // 7 + 1
