"""Category breakdown command."""

import click

from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.breakdown import breakdown
from tallybook.domain.entities import Period, TransactionType
from tallybook.domain.i18n import format_money, translate


@click.command("breakdown")
@click.argument("txn_type", metavar="TYPE", type=click.Choice([t.value for t in TransactionType]))
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period]),
    default=Period.DAILY.value,
    show_default=True,
    help="Period bucket to break down",
)
@click.pass_context
def show_breakdown(ctx, txn_type: str, period: str):
    """Show each category's share of a period total.

    Examples:
        tallybook breakdown income
        tallybook breakdown expense --period monthly
    """
    app, _ = require_user_or_exit(ctx)
    txn_type = TransactionType(txn_type)
    period = Period(period)

    totals = app.aggregates()
    total = totals.total(txn_type, period)
    shares = breakdown(totals.subset(period), total, txn_type)

    click.echo(
        translate(
            f"{txn_type.value}_breakdown",
            app.language,
            period=translate(period.value, app.language),
        )
    )
    click.echo("-" * 60)
    if not shares:
        click.echo("No transactions found.")
        return
    for share in shares:
        click.echo(
            f"{share.category:<30}{format_money(share.amount, app.currency):>15}{share.percentage:>13.1f}%"
        )
    click.echo("-" * 60)
    click.echo(f"{translate('total', app.language):<30}{format_money(total, app.currency):>15}")


def register_commands(cli):
    """Register breakdown command with main CLI."""
    cli.add_command(show_breakdown)
