"""Connection settings read at startup."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tallybook.domain.errors import ConfigurationError, missing_settings

STORE_URL_ENV = "TALLYBOOK_STORE_URL"
API_KEY_ENV = "TALLYBOOK_API_KEY"
HOME_ENV = "TALLYBOOK_HOME"
CONFIRM_EMAIL_ENV = "TALLYBOOK_CONFIRM_EMAIL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Settings needed to reach the store and keep client-local state."""

    store_url: str
    api_key: str
    home: Path
    require_email_confirmation: bool = False


def load_settings(
    store_url: Optional[str] = None,
    api_key: Optional[str] = None,
    home: Optional[str] = None,
) -> Settings:
    """Build settings from explicit values, falling back to the environment.

    Args:
        store_url: SQLAlchemy URL of the store. Defaults to TALLYBOOK_STORE_URL
        api_key: Public API key. Defaults to TALLYBOOK_API_KEY
        home: Directory for preferences and the saved session. Defaults to
            TALLYBOOK_HOME, then ~/.tallybook

    Raises:
        ConfigurationError: If the store URL or API key is missing
    """
    store_url = store_url or os.environ.get(STORE_URL_ENV)
    api_key = api_key or os.environ.get(API_KEY_ENV)

    missing = []
    if not store_url:
        missing.append(STORE_URL_ENV)
    if not api_key:
        missing.append(API_KEY_ENV)
    if missing:
        raise ConfigurationError(missing_settings(missing))

    home = home or os.environ.get(HOME_ENV)
    home_path = Path(home) if home else Path.home() / ".tallybook"

    confirm = os.environ.get(CONFIRM_EMAIL_ENV, "").strip().lower() in _TRUTHY
    return Settings(
        store_url=store_url,
        api_key=api_key,
        home=home_path,
        require_email_confirmation=confirm,
    )
