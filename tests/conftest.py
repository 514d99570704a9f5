"""Shared pytest fixtures for tallybook tests."""

from datetime import datetime
from decimal import Decimal

import pytest

from tallybook.database.factories import create_sqlite_backend
from tallybook.domain.auth import AuthService
from tallybook.domain.entities import Transaction, TransactionType
from tallybook.domain.preferences import MemoryPreferencesStore
from tallybook.domain.profile import ProfileService
from tallybook.domain.transaction import TransactionService

API_KEY = "test-api-key"

# Wednesday
NOW = datetime(2026, 10, 14, 12, 0, 0)


@pytest.fixture
def now():
    """Fixed local time used by services under test."""
    return NOW


@pytest.fixture
def temp_db(tmp_path):
    """Create a backend on a temporary SQLite file."""
    db_path = tmp_path / "tallybook.db"
    db = create_sqlite_backend(str(db_path), api_key=API_KEY)
    # Store the path for tests that need it
    db.database_path = str(db_path)
    db.connect()

    yield db

    db.disconnect()


@pytest.fixture
def auth_service(temp_db, tmp_path):
    """Create an AuthService that saves its session under tmp_path."""
    return AuthService(temp_db, tmp_path / "home" / "session.json")


@pytest.fixture
def session(auth_service):
    """Sign up and sign in a sample user."""
    _, session = auth_service.sign_up(
        "jane@example.com", "s3cret!", full_name="Jane Doe", username="jane"
    )
    return session


@pytest.fixture
def user(session):
    """The signed-in sample user."""
    return session.user


@pytest.fixture
def transaction_service(temp_db, user, now):
    """Create a TransactionService with a fixed clock."""
    service = TransactionService(temp_db, user.id, clock=lambda: now)
    service.load()
    return service


@pytest.fixture
def profile_service(temp_db, user):
    """Create a ProfileService for the sample user."""
    service = ProfileService(temp_db, user)
    service.load()
    return service


@pytest.fixture
def preferences():
    """In-memory preferences."""
    return MemoryPreferencesStore()


@pytest.fixture
def make_transaction(now):
    """Return a factory for in-memory transactions."""
    counter = iter(range(1, 10_000))

    def _make(
        amount="10.00",
        txn_type=TransactionType.INCOME,
        category="Cash",
        date=None,
        **fields,
    ) -> Transaction:
        return Transaction(
            id=next(counter),
            user_id="user-1",
            created_at=now,
            date=date or now,
            type=txn_type,
            amount=Decimal(amount),
            category=category,
            **fields,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_env(tmp_path):
    """Environment pointing the CLI at a temporary store and home directory."""
    return {
        "TALLYBOOK_STORE_URL": f"sqlite:///{tmp_path / 'cli.db'}",
        "TALLYBOOK_API_KEY": API_KEY,
        "TALLYBOOK_HOME": str(tmp_path / "cli-home"),
        "TALLYBOOK_CONFIRM_EMAIL": "",
    }
