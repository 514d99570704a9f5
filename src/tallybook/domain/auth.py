"""Auth domain service."""

import json
import logging
from pathlib import Path
from typing import Callable, Optional

from tallybook.database.base import Backend
from tallybook.domain.entities import AuthUser, Session
from tallybook.domain.errors import AuthError, ValidationError

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Session]], None]


class AuthService:
    """Sign-in state of the client.

    The session token is kept in ``session_path`` so a later process can
    restore it. Listeners are called with the current session (or None)
    whenever it changes.
    """

    def __init__(self, db: Backend, session_path: Path):
        """Initialize auth service.

        Args:
            db: Backend instance
            session_path: File holding the saved session token
        """
        self.db = db
        self.session_path = Path(session_path)
        self.session: Optional[Session] = None
        self._listeners: list[SessionListener] = []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Call ``listener`` with the current session now and on every change.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)
        listener(self.session)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_session(self, session: Optional[Session]) -> None:
        self.session = session
        if session is None:
            self.session_path.unlink(missing_ok=True)
        else:
            self.session_path.parent.mkdir(parents=True, exist_ok=True)
            self.session_path.write_text(json.dumps({"token": session.token}))
        for listener in list(self._listeners):
            listener(session)

    @property
    def user(self) -> Optional[AuthUser]:
        return self.session.user if self.session else None

    def restore(self) -> Optional[Session]:
        """Restore the saved session if the backend still accepts it."""
        if not self.session_path.exists():
            return None
        try:
            token = json.loads(self.session_path.read_text()).get("token")
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.session_path, e)
            token = None
        session = self.db.get_session(token) if token else None
        if session is None:
            self._set_session(None)
            return None
        self.session = session
        for listener in list(self._listeners):
            listener(session)
        return session

    def sign_in(self, email: str, password: str) -> Session:
        """Sign in with email and password.

        Raises:
            AuthError: If the credentials are rejected
        """
        if not email or not password:
            raise AuthError("Email and password are required", key="login_failed")
        session = self.db.sign_in(email, password)
        self._set_session(session)
        logger.info("Signed in as %s", session.user.email)
        return session

    def sign_up(
        self,
        email: str,
        password: str,
        full_name: str = "",
        username: str = "",
    ) -> tuple[AuthUser, Optional[Session]]:
        """Create an account.

        Returns:
            The new user and its session; the session is None while the email
            address awaits confirmation

        Raises:
            ValidationError: If email or password is empty
            AuthError: If the account already exists
        """
        if not email or not password:
            raise ValidationError("Email and password are required")
        seed = {"full_name": full_name or None, "username": username or None}
        user, session = self.db.sign_up(email, password, seed)
        if session is not None:
            self._set_session(session)
        return user, session

    def sign_out(self) -> None:
        """End the current session."""
        if self.session is not None:
            self.db.sign_out(self.session.token)
        self._set_session(None)
