"""Backend factory functions."""

from tallybook.config import Settings
from tallybook.database.sqlalchemy_db import SQLAlchemyBackend


def create_backend(settings: Settings) -> SQLAlchemyBackend:
    """Create a backend for the configured store.

    Args:
        settings: Loaded connection settings

    Returns:
        SQLAlchemyBackend connected to ``settings.store_url``
    """
    return SQLAlchemyBackend(
        settings.store_url,
        api_key=settings.api_key,
        require_email_confirmation=settings.require_email_confirmation,
    )


def create_sqlite_backend(database_path: str, api_key: str) -> SQLAlchemyBackend:
    """Create a backend on a local SQLite file."""
    return SQLAlchemyBackend(f"sqlite:///{database_path}", api_key=api_key)
