"""Tests for settings loading."""

from pathlib import Path

import pytest

from tallybook.config import load_settings
from tallybook.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without tallybook variables."""
    for name in (
        "TALLYBOOK_STORE_URL",
        "TALLYBOOK_API_KEY",
        "TALLYBOOK_HOME",
        "TALLYBOOK_CONFIRM_EMAIL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_environment(monkeypatch, tmp_path):
    """Test settings are read from the environment."""
    monkeypatch.setenv("TALLYBOOK_STORE_URL", "sqlite:///x.db")
    monkeypatch.setenv("TALLYBOOK_API_KEY", "key")
    monkeypatch.setenv("TALLYBOOK_HOME", str(tmp_path))
    monkeypatch.setenv("TALLYBOOK_CONFIRM_EMAIL", "yes")

    settings = load_settings()

    assert settings.store_url == "sqlite:///x.db"
    assert settings.api_key == "key"
    assert settings.home == tmp_path
    assert settings.require_email_confirmation is True


def test_explicit_values_win(monkeypatch):
    """Test arguments override the environment."""
    monkeypatch.setenv("TALLYBOOK_STORE_URL", "sqlite:///env.db")
    settings = load_settings(store_url="sqlite:///arg.db", api_key="key")
    assert settings.store_url == "sqlite:///arg.db"


def test_default_home():
    """Test the home directory defaults to ~/.tallybook."""
    settings = load_settings(store_url="sqlite://", api_key="key")
    assert settings.home == Path.home() / ".tallybook"
    assert settings.require_email_confirmation is False


def test_missing_values_are_named():
    """Test the error names every missing variable."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()
    message = str(exc_info.value)
    assert "TALLYBOOK_STORE_URL" in message
    assert "TALLYBOOK_API_KEY" in message


def test_missing_api_key_only():
    """Test only the missing variable is reported."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(store_url="sqlite://")
    assert "TALLYBOOK_STORE_URL" not in str(exc_info.value)
