"""Main CLI entry point."""

import logging

import click

from tallybook.app import AppContext
from tallybook.config import API_KEY_ENV, HOME_ENV, STORE_URL_ENV, load_settings
from tallybook.domain.errors import ConfigurationError

# Import and register all commands at module level
from tallybook.cli.commands import (
    add,
    auth,
    breakdown,
    document,
    edit,
    profile,
    report,
    settings,
    show,
    ui,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send tallybook log records to stderr."""
    logger = logging.getLogger("tallybook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def show_configuration_error(error: ConfigurationError) -> None:
    """Print a banner explaining which connection settings are missing."""
    rule = "=" * 60
    click.echo(rule, err=True)
    click.echo("tallybook is not configured", err=True)
    click.echo(rule, err=True)
    click.echo(str(error), err=True)
    click.echo(f"  {STORE_URL_ENV}  SQLAlchemy URL of the store", err=True)
    click.echo(f"  {API_KEY_ENV}    key used to sign sessions", err=True)
    click.echo(rule, err=True)


@click.group()
@click.option(
    "--store-url",
    help="Store URL (overrides TALLYBOOK_STORE_URL environment variable)",
    envvar=STORE_URL_ENV,
)
@click.option(
    "--api-key",
    help="API key (overrides TALLYBOOK_API_KEY environment variable)",
    envvar=API_KEY_ENV,
)
@click.option(
    "--home",
    type=click.Path(file_okay=False),
    help="Directory for preferences and the saved session",
    envvar=HOME_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, store_url: str | None, api_key: str | None, home: str | None, verbose: bool):
    """Tallybook - bookkeeping for sole traders.

    Record income and expenses, issue receipts and invoices, and export
    tax reports for any date range.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Connect only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            settings_ = load_settings(store_url=store_url, api_key=api_key, home=home)
        except ConfigurationError as e:
            show_configuration_error(e)
            ctx.exit(1)
        app = AppContext.from_settings(settings_)
        app.auth.restore()
        ctx.call_on_close(app.db.disconnect)
        ctx.obj["app"] = app


# Register all commands
auth.register_commands(cli)
add.register_commands(cli)
edit.register_commands(cli)
show.register_commands(cli)
ui.register_commands(cli)
breakdown.register_commands(cli)
report.register_commands(cli)
profile.register_commands(cli)
settings.register_commands(cli)
document.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
