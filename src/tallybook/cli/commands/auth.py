"""Sign-in and account commands."""

import click

from tallybook.cli.error_handling import handle_domain_error
from tallybook.domain.errors import DomainError
from tallybook.domain.i18n import translate


@click.command("signup")
@click.option("--email", prompt=True, help="Email address")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password",
)
@click.option("--full-name", default="", help="Name shown on receipts and invoices")
@click.option("--username", default="", help="Username")
@click.pass_context
def signup(ctx, email: str, password: str, full_name: str, username: str):
    """Create an account.

    When email confirmation is required, sign in after running
    'tallybook confirm EMAIL'.

    Examples:
        tallybook signup --email jane@example.com --full-name "Jane Doe"
    """
    app = ctx.obj["app"]
    try:
        user, session = app.auth.sign_up(
            email, password, full_name=full_name, username=username
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if session is None:
        click.echo(translate("check_email_confirmation", app.language))
    else:
        click.echo(f"Signed up and signed in as {user.email}")


@click.command("login")
@click.option("--email", prompt=True, help="Email address")
@click.option("--password", prompt=True, hide_input=True, help="Password")
@click.pass_context
def login(ctx, email: str, password: str):
    """Sign in and remember the session."""
    app = ctx.obj["app"]
    try:
        session = app.auth.sign_in(email, password)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Signed in as {session.user.email}")


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Sign out and forget the saved session."""
    app = ctx.obj["app"]
    if app.user is None:
        click.echo("Not signed in.")
        return
    app.auth.sign_out()
    click.echo("Signed out.")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the signed-in user."""
    app = ctx.obj["app"]
    if app.user is None:
        click.echo("Not signed in.")
        return
    click.echo(app.user.email)


@click.command("confirm")
@click.argument("email")
@click.pass_context
def confirm(ctx, email: str):
    """Mark an account's email address as confirmed."""
    app = ctx.obj["app"]
    try:
        app.db.confirm_email(email)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Confirmed {email}")


def register_commands(cli):
    """Register auth commands with main CLI."""
    cli.add_command(signup)
    cli.add_command(login)
    cli.add_command(logout)
    cli.add_command(whoami)
    cli.add_command(confirm)
