"""Receipt and invoice command."""

from pathlib import Path

import click

from tallybook.cli.error_handling import handle_domain_error
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.documents import render_document
from tallybook.domain.entities import Profile
from tallybook.domain.errors import DomainError, NotFoundError, transaction_not_found


@click.command("document")
@click.argument("transaction_id", type=int)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the document to a file")
@click.pass_context
def show_document(ctx, transaction_id: int, output: str | None):
    """Print the receipt or invoice of a transaction.

    Examples:
        tallybook document 12
        tallybook document 12 --output invoice.txt
    """
    app, user = require_user_or_exit(ctx)
    profile = app.profile or Profile(id=user.id, email=user.email)

    try:
        txn = app.transaction_service.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        text = render_document(txn, profile, currency=app.currency, language=app.language)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Saved {txn.document_number} to {output}")
    else:
        click.echo(text, nl=False)


def register_commands(cli):
    """Register document command with main CLI."""
    cli.add_command(show_document)
