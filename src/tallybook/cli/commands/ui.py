"""Interactive navigation."""

import click

from tallybook.cli.pages import render_view
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.entities import Period, TransactionType
from tallybook.domain.router import (
    Back,
    Navigate,
    OpenPeriod,
    Page,
    SelectPeriod,
    ViewHistory,
)

HELP = (
    "Commands: main, income, expense, settings, tax, profile, "
    "daily, weekly, monthly, open, history, back, quit"
)


def parse_action(command: str, view):
    """Map a typed command to a navigation action, or None if unknown.

    'daily', 'weekly' and 'monthly' switch the period on the income and
    expense pages; 'open' shows the detail page for the selected period.
    """
    command = command.strip().lower()
    if command in (p.value for p in Page) and command not in (Page.DETAIL.value, Page.HISTORY.value):
        return Navigate(Page(command))
    if command in (p.value for p in Period):
        return SelectPeriod(Period(command))
    if command == "open":
        if view.page not in (Page.INCOME, Page.EXPENSE):
            return None
        return OpenPeriod(TransactionType(view.page.value), view.period or Period.DAILY)
    if command == "history":
        return ViewHistory()
    if command == "back":
        return Back()
    return None


@click.command("ui")
@click.pass_context
def ui(ctx):
    """Browse the pages interactively.

    Type a page name to switch pages, a period to switch cards, 'open' to see
    the transactions behind the selected card, and 'quit' to leave.
    """
    app, _ = require_user_or_exit(ctx)
    click.echo(render_view(app, app.current_view()))
    click.echo(HELP)

    while True:
        try:
            command = click.prompt("tallybook", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            break
        if command.strip().lower() in ("quit", "q", "exit"):
            break

        action = parse_action(command, app.current_view())
        if action is None:
            click.echo(HELP)
            continue
        click.echo(render_view(app, app.dispatch(action)))


def register_commands(cli):
    """Register ui command with main CLI."""
    cli.add_command(ui)
