"""Client-local preferences."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Optional

from tallybook.domain.errors import ValidationError
from tallybook.domain.i18n import CURRENCY_SYMBOLS, DEFAULT_CURRENCY, DEFAULT_LANGUAGE, LANGUAGES

logger = logging.getLogger(__name__)

THEMES = ("light", "dark", "auto")
FONT_SIZES = ("small", "medium", "large", "xlarge")

# key -> (allowed values, default)
GLOBAL_PREFERENCES = {
    "language": (LANGUAGES, DEFAULT_LANGUAGE),
}
USER_PREFERENCES = {
    "theme": (THEMES, "auto"),
    "font_size": (FONT_SIZES, "medium"),
    "currency": (tuple(CURRENCY_SYMBOLS), DEFAULT_CURRENCY),
}

PreferenceListener = Callable[[str, Any, Optional[str]], None]


def _spec(key: str, user_id: Optional[str]) -> tuple[tuple[str, ...], str]:
    if key in GLOBAL_PREFERENCES:
        return GLOBAL_PREFERENCES[key]
    if key in USER_PREFERENCES:
        if user_id is None:
            raise ValidationError(f"Preference '{key}' is stored per user")
        return USER_PREFERENCES[key]
    raise ValidationError(f"Unknown preference '{key}'")


class PreferencesStore(ABC):
    """Preferences kept on the client.

    ``language`` is global; ``theme``, ``font_size`` and ``currency`` are
    stored per user id.
    """

    def __init__(self):
        self._listeners: list[PreferenceListener] = []

    @abstractmethod
    def _read(self, key: str, user_id: Optional[str]) -> Optional[str]:
        pass

    @abstractmethod
    def _write(self, key: str, value: str, user_id: Optional[str]) -> None:
        pass

    def get(self, key: str, user_id: Optional[str] = None) -> str:
        """Return a preference, or its default if unset or invalid."""
        allowed, default = _spec(key, user_id)
        value = self._read(key, user_id)
        return value if value in allowed else default

    def set(self, key: str, value: str, user_id: Optional[str] = None) -> None:
        """Store a preference and notify subscribers.

        Raises:
            ValidationError: If the key is unknown or the value not allowed
        """
        allowed, _ = _spec(key, user_id)
        if value not in allowed:
            raise ValidationError(
                f"Invalid value '{value}' for {key}. Choose from: {', '.join(allowed)}"
            )
        self._write(key, value, user_id)
        for listener in list(self._listeners):
            listener(key, value, user_id)

    def subscribe(self, listener: PreferenceListener) -> Callable[[], None]:
        """Call ``listener(key, value, user_id)`` after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def all_for(self, user_id: Optional[str]) -> dict[str, str]:
        """Return every preference visible to a user."""
        values = {key: self.get(key) for key in GLOBAL_PREFERENCES}
        if user_id is not None:
            values.update({key: self.get(key, user_id) for key in USER_PREFERENCES})
        return values


class MemoryPreferencesStore(PreferencesStore):
    """Preferences held in memory only."""

    def __init__(self):
        super().__init__()
        self._data: dict[str, Any] = {"users": {}}

    def _read(self, key: str, user_id: Optional[str]) -> Optional[str]:
        if user_id is None:
            return self._data.get(key)
        return self._data["users"].get(user_id, {}).get(key)

    def _write(self, key: str, value: str, user_id: Optional[str]) -> None:
        if user_id is None:
            self._data[key] = value
        else:
            self._data["users"].setdefault(user_id, {})[key] = value


class JSONPreferencesStore(MemoryPreferencesStore):
    """Preferences persisted to a JSON file."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            else:
                if isinstance(data, dict):
                    data.setdefault("users", {})
                    self._data = data

    def _write(self, key: str, value: str, user_id: Optional[str]) -> None:
        super()._write(key, value, user_id)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
