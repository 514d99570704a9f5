"""Add transaction commands."""

import click

from tallybook.cli.error_handling import handle_domain_error
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.entities import DocumentType, TransactionType, default_categories
from tallybook.domain.errors import DomainError
from tallybook.domain.i18n import format_datetime, format_money
from tallybook.utils.amount_parser import parse_amount
from tallybook.utils.date_parser import parse_datetime


def transaction_options(command):
    """Options shared by 'add income' and 'add expense'."""
    options = [
        click.argument("amount"),
        click.option("--category", help="Category (defaults to the first suggestion)"),
        click.option(
            "--date",
            help="Business date (YYYY-MM-DD [HH:MM] or relative like 'today', 'yesterday'); defaults to now",
        ),
        click.option(
            "--document",
            "document_type",
            type=click.Choice([d.value for d in DocumentType]),
            help="Issue a receipt or invoice for this transaction",
        ),
        click.option("--client", "client_name", help="Client name"),
        click.option("--email", "client_email", help="Client email"),
        click.option("--description", "service_description", help="Service description"),
        click.option("--link", "payment_link", help="Payment link shown on invoices"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _add(ctx, txn_type: TransactionType, amount: str, date: str | None, **fields):
    app, _ = require_user_or_exit(ctx)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_datetime(date, now=app.clock())
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        txn = app.transaction_service.add_transaction(
            txn_type, txn_amount, date=txn_date, **fields
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added {txn.type.value} {txn.id}")
    click.echo(f"  Date: {format_datetime(txn.date, app.language)}")
    click.echo(f"  Amount: {format_money(txn.amount, app.currency)}")
    click.echo(f"  Category: {txn.category}")
    if txn.document_number:
        click.echo(f"  Document: {txn.document_number}")
    if txn.client_name:
        click.echo(f"  Client: {txn.client_name}")


@click.group("add")
def add_group():
    """Record income or an expense."""
    pass


@add_group.command("income")
@transaction_options
@click.pass_context
def add_income(ctx, amount: str, date: str | None, **fields):
    """Record income.

    Suggested categories: Cash, Card, Bank Transfer, Other.

    Examples:
        tallybook add income 120 --category Card
        tallybook add income 450 --document invoice --client "Acme Ltd" --link https://pay.example.com/1
    """
    _add(ctx, TransactionType.INCOME, amount, date, **fields)


@add_group.command("expense")
@transaction_options
@click.pass_context
def add_expense(ctx, amount: str, date: str | None, **fields):
    """Record an expense.

    Suggested categories: Fuel, Repairs, Insurance, Rent, Phone,
    Subscriptions, Fees & Tolls, Other.

    Examples:
        tallybook add expense 45.50 --category Fuel --date yesterday
    """
    _add(ctx, TransactionType.EXPENSE, amount, date, **fields)


@add_group.command("categories")
@click.argument("txn_type", metavar="TYPE", type=click.Choice([t.value for t in TransactionType]))
def list_categories(txn_type: str):
    """List the suggested categories for income or expense."""
    for category in default_categories(TransactionType(txn_type)):
        click.echo(category)


def register_commands(cli):
    """Register add commands with main CLI."""
    cli.add_command(add_group)
