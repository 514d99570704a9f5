"""Preference commands."""

import click

from tallybook.cli.error_handling import handle_domain_error
from tallybook.cli.pages import render_settings
from tallybook.domain.errors import DomainError
from tallybook.domain.preferences import GLOBAL_PREFERENCES, USER_PREFERENCES


@click.group("settings")
def settings_group():
    """View and change preferences."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show the current preferences."""
    app = ctx.obj["app"]
    click.echo("\n".join(render_settings(app)))


@settings_group.command("set")
@click.argument(
    "key",
    type=click.Choice(list(GLOBAL_PREFERENCES) + list(USER_PREFERENCES)),
)
@click.argument("value")
@click.pass_context
def set_setting(ctx, key: str, value: str):
    """Change a preference.

    'language' applies to everyone on this machine; theme, font_size and
    currency are kept per signed-in user.

    Examples:
        tallybook settings set language ro
        tallybook settings set currency EUR
    """
    app = ctx.obj["app"]
    try:
        user_id = app.require_user().id if key in USER_PREFERENCES else None
        app.preferences.set(key, value, user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"{key} set to {value}")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group)
