"""Tax report command."""

import os
from pathlib import Path

import click

from tallybook.cli.date_filters import period_options, resolve_cli_date_range
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.i18n import format_date, format_money, translate
from tallybook.domain.report import (
    build_report,
    report_filename,
    report_mailto,
    report_to_csv,
)


@click.command("report")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')")
@period_options
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Write the report as CSV to this file or directory (a trailing / creates the directory)",
)
@click.option(
    "--send",
    is_flag=True,
    help="Export the CSV and print a mailto link for sending it",
)
@click.pass_context
def tax_report(
    ctx,
    start_date: str | None,
    end_date: str | None,
    output: str | None,
    send: bool,
    **period_flags: bool,
):
    """Summarize income and expense over a date range.

    Both ends of the range are inclusive.

    Examples:
        tallybook report --start-date 2026-01-01 --end-date 2026-03-31
        tallybook report --last-month --output reports/
        tallybook report --this-year --send
    """
    app, _ = require_user_or_exit(ctx)
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags,
        today=app.clock().date(),
    )

    report = build_report(app.transactions, start, end)
    if report is None:
        click.echo(translate("tax_subtitle", app.language), err=True)
        ctx.exit(1)

    language, currency = app.language, app.currency
    click.echo(
        f"{translate('tax_report', language)}: "
        f"{format_date(report.start, language)} - {format_date(report.end, language)}"
    )
    click.echo("-" * 60)
    click.echo(f"{translate('total_income', language):<40}{format_money(report.total_income, currency):>20}")
    click.echo(f"{translate('total_expense', language):<40}{format_money(report.total_expense, currency):>20}")
    click.echo(f"{translate('balance', language) + ':':<40}{format_money(report.balance, currency):>20}")

    if output is None and not send:
        return

    path = Path(output) if output else Path(report_filename(report))
    if output and (output.endswith(("/", os.sep)) or path.is_dir()):
        path.mkdir(parents=True, exist_ok=True)
        path = path / report_filename(report)
    path.write_text(report_to_csv(report, language), encoding="utf-8")
    click.echo(f"Saved report to {path}")

    if send:
        click.echo(report_mailto(report, language))


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(tax_report)
