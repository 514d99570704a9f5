"""CLI helpers for date range resolution."""

from datetime import date
from typing import Optional

import click

from tallybook.utils.date_parser import get_date_range, parse_date

PERIOD_OPTIONS = (
    "this-month",
    "this-year",
    "this-week",
    "last-month",
    "last-year",
    "last-week",
)


def period_options(command):
    """Add the --this-month ... --last-week flags to a command."""
    for period in reversed(PERIOD_OPTIONS):
        command = click.option(
            f"--{period}",
            period.replace("-", "_"),
            is_flag=True,
            help=f"Use {period.replace('-', ' ')}",
        )(command)
    return command


def _fail(ctx, message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def resolve_cli_date_range(
    ctx,
    *,
    start_date: Optional[str],
    end_date: Optional[str],
    period_flags: dict[str, bool],
    today: Optional[date] = None,
) -> tuple[Optional[date], Optional[date]]:
    """Turn period flags or explicit dates into an inclusive date range.

    A period flag gives both ends. Explicit dates may leave either end unset,
    which the caller treats as an incomplete range.

    Exits with status 1 if several period flags are set, if a period flag is
    mixed with explicit dates, or if a date does not parse.
    """
    selected = [name for name, is_set in period_flags.items() if is_set]
    flags = ", ".join(f"--{period}" for period in PERIOD_OPTIONS)

    if len(selected) > 1:
        _fail(ctx, f"Only one period option ({flags}) can be specified at a time.")
    if selected and (start_date or end_date):
        _fail(ctx, "Period options cannot be combined with --start-date or --end-date.")

    if selected:
        return get_date_range(selected[0].replace("_", "-"), today=today)

    bounds = []
    for label, value in (("start", start_date), ("end", end_date)):
        if not value:
            bounds.append(None)
            continue
        try:
            bounds.append(parse_date(value, today=today))
        except ValueError as e:
            _fail(ctx, f"Invalid {label} date: {e}")
    return bounds[0], bounds[1]
