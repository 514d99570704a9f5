"""CLI error handling helpers."""

import click

from tallybook.domain.errors import AuthError, DomainError
from tallybook.domain.i18n import translate


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Auth errors are shown through their translated message.
    """
    if isinstance(error, AuthError):
        language = ctx.obj["app"].language if ctx.obj and "app" in ctx.obj else "en"
        click.echo(f"Error: {translate(error.key, language)}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def echo_warnings(warnings: list[str]) -> None:
    """Show non-fatal load problems without stopping the command."""
    for warning in warnings:
        click.echo(f"Warning: {warning}", err=True)
