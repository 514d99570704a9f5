"""Show a page."""

import click

from tallybook.cli.pages import render_view
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.entities import Period, TransactionType
from tallybook.domain.router import Page, View


@click.command("show")
@click.argument(
    "page",
    required=False,
    default=Page.MAIN.value,
    type=click.Choice([p.value for p in Page]),
)
@click.option(
    "--type",
    "txn_type",
    type=click.Choice([t.value for t in TransactionType]),
    help="Transaction type for the detail and history pages",
)
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period]),
    help="Period for the income, expense and detail pages",
)
@click.pass_context
def show(ctx, page: str, txn_type: str | None, period: str | None):
    """Render a page.

    The detail page needs --type and --period, and the history page needs
    --type; without them the main page is shown.

    Examples:
        tallybook show
        tallybook show income --period weekly
        tallybook show detail --type expense --period monthly
        tallybook show history --type income
    """
    app, _ = require_user_or_exit(ctx)
    app.view = View(
        page=Page(page),
        period=Period(period) if period else None,
        transaction_type=TransactionType(txn_type) if txn_type else None,
    )
    click.echo(render_view(app, app.current_view()))


def register_commands(cli):
    """Register show command with main CLI."""
    cli.add_command(show)
