"""Abstract backend interface.

The backend stands in for a hosted backend-as-a-service: session-based auth,
row-level access to the ``profiles`` and ``transactions`` collections, and
nothing else. Rows cross this boundary as plain dicts keyed by column name;
``tallybook.database.mappers`` turns them into domain entities.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from tallybook.domain.entities import AuthUser, Session


class Backend(ABC):
    """Abstract backend interface for tallybook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    # Auth operations
    @abstractmethod
    def sign_up(
        self, email: str, password: str, profile_seed: dict[str, Any]
    ) -> tuple[AuthUser, Optional[Session]]:
        """Create an identity and its profile row.

        Returns the new user and a session, or None for the session when the
        email address still has to be confirmed.
        """
        pass

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Session:
        """Start a session for valid credentials."""
        pass

    @abstractmethod
    def sign_out(self, token: str) -> None:
        """End a session."""
        pass

    @abstractmethod
    def get_session(self, token: str) -> Optional[Session]:
        """Return the session for a token, or None if it is not valid."""
        pass

    @abstractmethod
    def confirm_email(self, email: str) -> None:
        """Mark an identity's email address as confirmed."""
        pass

    # Profile operations
    @abstractmethod
    def select_profile(self, user_id: str) -> Optional[dict[str, Any]]:
        """Get the profile row of a user."""
        pass

    @abstractmethod
    def update_profile(self, user_id: str, record: dict[str, Any]) -> dict[str, Any]:
        """Replace the editable fields of a profile row. Returns the stored row."""
        pass

    # Transaction operations
    @abstractmethod
    def select_transactions(self, user_id: str) -> list[dict[str, Any]]:
        """List a user's transaction rows ordered by business date, newest first."""
        pass

    @abstractmethod
    def insert_transaction(self, record: dict[str, Any]) -> dict[str, Any]:
        """Insert a transaction row. Returns the stored row."""
        pass

    @abstractmethod
    def update_transaction(
        self, transaction_id: int, record: dict[str, Any]
    ) -> dict[str, Any]:
        """Update a transaction row by ID. Returns the stored row."""
        pass
