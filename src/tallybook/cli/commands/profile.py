"""Profile commands."""

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from tallybook.cli.error_handling import handle_domain_error
from tallybook.cli.pages import render_profile
from tallybook.cli.session_resolution import require_user_or_exit
from tallybook.domain.entities import Profile
from tallybook.domain.errors import DomainError

PROFILE_OPTIONS = {
    "full_name": "Display name",
    "username": "Username",
    "phone": "Phone number",
    "company_name": "Company name",
    "business_registration_code": "Business (tax/VAT) registration code",
    "company_registration_number": "Company registration number",
    "address": "Postal address",
}
BANK_OPTIONS = {
    "bank_name": "Bank name",
    "account_holder_name": "Account holder name",
    "account_number": "Account number",
    "sort_code": "Sort code",
    "iban": "IBAN",
}


def _field_options(command):
    for name, help_text in reversed(list({**PROFILE_OPTIONS, **BANK_OPTIONS}.items())):
        command = click.option(f"--{name.replace('_', '-')}", name, help=help_text)(command)
    return command


def _current_profile(app, user) -> Profile:
    return app.profile or Profile(id=user.id, email=user.email)


@click.group("profile")
def profile_group():
    """View and edit your business profile."""
    pass


@profile_group.command("show")
@click.pass_context
def show_profile(ctx):
    """Show the profile used on receipts and invoices."""
    app, _ = require_user_or_exit(ctx)
    click.echo("\n".join(render_profile(app)))


@profile_group.command("update")
@_field_options
@click.option("--vat-rate", help="VAT rate in percent (0 hides the VAT line)")
@click.pass_context
def update_profile(ctx, vat_rate: str | None, **fields: str | None):
    """Update profile fields.

    Only the options given are changed. The email address comes from the
    account and cannot be edited here.

    Examples:
        tallybook profile update --company-name "Doe Consulting" --vat-rate 20
        tallybook profile update --sort-code 12-34-56 --account-number 12345678
    """
    app, user = require_user_or_exit(ctx)
    current = _current_profile(app, user)

    changes = {k: v for k, v in fields.items() if k in PROFILE_OPTIONS and v is not None}
    bank_changes = {k: v for k, v in fields.items() if k in BANK_OPTIONS and v is not None}
    if vat_rate is not None:
        try:
            changes["vat_rate"] = Decimal(vat_rate.strip().rstrip("%"))
        except InvalidOperation:
            click.echo(f"Error: Invalid VAT rate: {vat_rate}", err=True)
            ctx.exit(1)
    if not changes and not bank_changes:
        click.echo("Nothing to update.")
        return

    updated = replace(current, bank=replace(current.bank, **bank_changes), **changes)
    try:
        app.profile_service.update(updated)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Profile updated.")


@profile_group.command("avatar")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def set_avatar(ctx, path: str):
    """Use an image file as the avatar."""
    app, _ = require_user_or_exit(ctx)
    try:
        app.profile_service.set_avatar_from_file(Path(path))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Avatar updated.")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group)
