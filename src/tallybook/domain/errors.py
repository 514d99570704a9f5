"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConfigurationError(DomainError):
    """Required connection settings are missing."""


class AuthError(DomainError):
    """Sign-in or sign-up was rejected.

    ``key`` names the translation used to show the error to the user.
    """

    def __init__(self, message: str, key: str = "signup_generic_error"):
        super().__init__(message)
        self.key = key


class RecordLoadError(DomainError):
    """A stored record could not be mapped into the domain model."""

    def __init__(self, message: str, record_id=None):
        super().__init__(message)
        self.record_id = record_id


class WriteError(DomainError):
    """The store rejected an insert or update."""


class FetchError(DomainError):
    """The store could not be read."""


def missing_settings(names: list[str]) -> str:
    """Return message for missing connection settings."""
    return (
        f"Missing configuration: {', '.join(names)}. "
        "Set them in the environment or pass them on the command line."
    )


def transaction_not_found(transaction_id) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def profile_not_found(user_id: str) -> str:
    """Return message for missing profile."""
    return f"Profile for user {user_id} not found"


def invalid_amount(amount) -> str:
    """Return message for a non-positive amount."""
    return f"Amount must be greater than zero, got {amount}"


def missing_field(field_name: str, record_id=None) -> str:
    """Return message for a stored record without a required field."""
    if record_id is None:
        return f"Stored record is missing required field '{field_name}'"
    return f"Stored record {record_id} is missing required field '{field_name}'"


def not_signed_in() -> str:
    """Return message when a command needs a session."""
    return "Not signed in. Run 'tallybook login' first."
