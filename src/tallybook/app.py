"""Application context built once at startup."""

import logging
from datetime import datetime
from typing import Callable, Optional

from tallybook.config import Settings
from tallybook.database.base import Backend
from tallybook.database.factories import create_backend
from tallybook.domain.aggregation import PeriodAggregates, aggregate
from tallybook.domain.auth import AuthService
from tallybook.domain.entities import AuthUser, Profile, Session, Transaction
from tallybook.domain.errors import DomainError, NotFoundError, not_signed_in
from tallybook.domain.preferences import (
    USER_PREFERENCES,
    JSONPreferencesStore,
    PreferencesStore,
)
from tallybook.domain.profile import ProfileService
from tallybook.domain.router import MAIN_VIEW, Action, View, reduce, resolve
from tallybook.domain.transaction import TransactionService

logger = logging.getLogger(__name__)


class AppContext:
    """Everything a command needs: backend, auth, preferences and view state.

    Transactions and the profile are loaded whenever a session starts and
    dropped when it ends. Load failures are kept in ``warnings`` rather than
    raised.
    """

    def __init__(
        self,
        db: Backend,
        auth: AuthService,
        preferences: PreferencesStore,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.db = db
        self.auth = auth
        self.preferences = preferences
        self.clock = clock
        self.view: View = MAIN_VIEW
        self.transaction_service: Optional[TransactionService] = None
        self.profile_service: Optional[ProfileService] = None
        self.warnings: list[str] = []
        self.auth.subscribe(self._on_session_change)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        """Wire the context for the configured store and home directory."""
        db = create_backend(settings)
        db.connect()
        auth = AuthService(db, settings.home / "session.json")
        preferences = JSONPreferencesStore(settings.home / "preferences.json")
        return cls(db, auth, preferences)

    def _on_session_change(self, session: Optional[Session]) -> None:
        self.view = MAIN_VIEW
        self.warnings = []
        if session is None:
            self.transaction_service = None
            self.profile_service = None
            return

        self.transaction_service = TransactionService(self.db, session.user.id, clock=self.clock)
        self.profile_service = ProfileService(self.db, session.user)
        try:
            self.profile_service.load()
        except DomainError as e:
            logger.error("Failed to load profile: %s", e)
            self.warnings.append(f"Profile could not be loaded: {e}")
        else:
            if self.profile_service.profile is None:
                self.warnings.append("Profile could not be loaded.")
        try:
            self.transaction_service.load()
        except DomainError as e:
            logger.error("Failed to load transactions: %s", e)
            self.warnings.append(f"Transactions could not be loaded: {e}")
        else:
            skipped = len(self.transaction_service.load_errors)
            if skipped:
                self.warnings.append(
                    f"{skipped} transaction{'s' if skipped != 1 else ''} could not be loaded."
                )

    @property
    def user(self) -> Optional[AuthUser]:
        return self.auth.user

    def require_user(self) -> AuthUser:
        """Return the signed-in user.

        Raises:
            NotFoundError: If nobody is signed in
        """
        if self.auth.user is None:
            raise NotFoundError(not_signed_in())
        return self.auth.user

    @property
    def transactions(self) -> list[Transaction]:
        if self.transaction_service is None:
            return []
        return self.transaction_service.transactions

    @property
    def profile(self) -> Optional[Profile]:
        return self.profile_service.profile if self.profile_service else None

    @property
    def language(self) -> str:
        return self.preferences.get("language")

    def user_preference(self, key: str) -> str:
        """Return a per-user preference, or its default when signed out."""
        user = self.auth.user
        if user is None:
            return USER_PREFERENCES[key][1]
        return self.preferences.get(key, user.id)

    @property
    def currency(self) -> str:
        return self.user_preference("currency")

    def aggregates(self) -> PeriodAggregates:
        """Recompute the period aggregates from the current transactions."""
        return aggregate(self.transactions, now=self.clock())

    def dispatch(self, action: Action) -> View:
        """Apply a navigation action and return the view to render."""
        self.view = reduce(self.view, action)
        return self.current_view()

    def current_view(self) -> View:
        """Return the view to render, after the fallback guard."""
        return resolve(self.view)
