"""Storage layer for tallybook application."""

from tallybook.database.base import Backend
from tallybook.database.factories import create_backend, create_sqlite_backend

__all__ = ["Backend", "create_backend", "create_sqlite_backend"]
