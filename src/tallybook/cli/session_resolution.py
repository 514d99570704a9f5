"""CLI helpers for commands that need a signed-in user."""

from __future__ import annotations

import click

from tallybook.app import AppContext
from tallybook.cli.error_handling import echo_warnings, handle_domain_error
from tallybook.domain.entities import AuthUser
from tallybook.domain.errors import DomainError


def require_user_or_exit(ctx: click.Context) -> tuple[AppContext, AuthUser]:
    """Return the app and its signed-in user, or exit with a CLI error.

    Load warnings collected when the session started are shown first.
    """
    app: AppContext = ctx.obj["app"]
    try:
        user = app.require_user()
    except DomainError as exc:
        handle_domain_error(ctx, exc)
    echo_warnings(app.warnings)
    return app, user
