"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

UNITS = ("week", "month", "year")

RELATIVE_DAYS = {"today": 0, "yesterday": -1, "tomorrow": 1}


def _unit_start(unit: str, today: date, back: int = 0) -> date:
    """First day of the week (Monday), month or year ``back`` units ago."""
    if unit == "week":
        return today - timedelta(days=today.weekday() + 7 * back)
    if unit == "month":
        return today.replace(day=1) - relativedelta(months=back)
    return today.replace(month=1, day=1) - relativedelta(years=back)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Accepts anything dateutil understands ("2026-01-15", "January 15, 2026")
    plus "today", "yesterday", "tomorrow" and "this/last week|month|year",
    which give the first day of that week, month or year.

    Args:
        date_str: Date string
        today: Reference day for relative dates. Defaults to date.today()

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    if text in RELATIVE_DAYS:
        return today + timedelta(days=RELATIVE_DAYS[text])

    which, _, unit = text.partition(" ")
    if which in ("this", "last") and unit in UNITS:
        return _unit_start(unit, today, back=1 if which == "last" else 0)

    try:
        return date_parser.parse(text).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str, now: Optional[datetime] = None) -> datetime:
    """Parse a business date-time for a transaction.

    Relative days ("today", "yesterday", ...) keep the current time of day.
    Absolute values keep their own time, or midnight when none is given.

    Raises:
        ValueError: If the string cannot be parsed
    """
    now = now or datetime.now()
    text = value.strip().lower()
    if text == "now":
        return now
    if text in RELATIVE_DAYS or text.startswith(("last ", "this ")):
        day = parse_date(text, today=now.date())
        return datetime.combine(day, now.time())

    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Return the inclusive (start, end) days of a named period.

    "this-<unit>" runs from the start of the unit up to today; "last-<unit>"
    is the whole previous week, month or year.

    Raises:
        ValueError: If period string is not recognized
    """
    today = today or date.today()
    which, _, unit = period.strip().lower().partition("-")
    if which not in ("this", "last") or unit not in UNITS:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: "
            + ", ".join(f"{w}-{u}" for w in ("this", "last") for u in UNITS)
        )

    current = _unit_start(unit, today)
    if which == "this":
        return current, today
    return _unit_start(unit, today, back=1), current - timedelta(days=1)
