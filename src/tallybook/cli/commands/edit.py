"""Edit transaction command."""

import click

from tallybook.cli.error_handling import handle_domain_error
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.errors import DomainError
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.date_parser import parse_datetime


@click.command("edit")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--category", help="New category")
@click.option("--date", help="New business date (YYYY-MM-DD [HH:MM] or relative like 'yesterday')")
@click.option("--client", "client_name", help="Client name")
@click.option("--email", "client_email", help="Client email")
@click.option("--description", "service_description", help="Service description")
@click.option("--link", "payment_link", help="Payment link")
@click.pass_context
def edit_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    category: str | None,
    date: str | None,
    client_name: str | None,
    client_email: str | None,
    service_description: str | None,
    payment_link: str | None,
) -> None:
    """Edit a transaction.

    Updates only the fields that are provided. The type and document number
    cannot be changed.

    Examples:
        tallybook edit 12 --amount 75
        tallybook edit 12 --category Rent --date 2026-10-01
    """
    app, _ = require_user_or_exit(ctx)

    # Parse amount if provided
    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    # Parse date if provided
    txn_date = None
    if date is not None:
        try:
            txn_date = parse_datetime(date, now=app.clock())
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        app.transaction_service.edit_transaction(
            transaction_id,
            amount=txn_amount,
            category=category,
            date=txn_date,
            client_name=client_name,
            client_email=client_email,
            service_description=service_description,
            payment_link=payment_link,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


def register_commands(cli):
    """Register edit command with main CLI."""
    cli.add_command(edit_transaction)
