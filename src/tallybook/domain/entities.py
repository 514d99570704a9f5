"""Domain model entities for tallybook.

These are pure data classes representing business concepts, independent of
the storage schema. The storage layer packs some of these fields into shared
text columns; see ``tallybook.database.mappers``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Direction of a ledger entry."""

    INCOME = "income"
    EXPENSE = "expense"


class DocumentType(str, Enum):
    """Document generated for an income entry."""

    RECEIPT = "receipt"
    INVOICE = "invoice"


class Period(str, Enum):
    """Classification window used for dashboards."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


INCOME_CATEGORIES = ("Cash", "Card", "Bank Transfer", "Other")
EXPENSE_CATEGORIES = (
    "Fuel",
    "Repairs",
    "Insurance",
    "Rent",
    "Phone",
    "Subscriptions",
    "Fees & Tolls",
    "Other",
)


def default_categories(txn_type: TransactionType) -> tuple[str, ...]:
    """Return the suggested categories for a transaction type."""
    if TransactionType(txn_type) == TransactionType.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES


@dataclass(frozen=True)
class AuthUser:
    """Identity returned by the auth collaborator."""

    id: str
    email: str
    confirmed: bool = True


@dataclass(frozen=True)
class Session:
    """Authenticated session."""

    token: str
    user: AuthUser


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: Optional[int]
    user_id: str
    created_at: datetime
    date: datetime
    type: TransactionType
    amount: Decimal
    category: str
    document_type: Optional[DocumentType] = None
    document_number: Optional[str] = None
    client_name: Optional[str] = None
    client_email: Optional[str] = None
    service_description: Optional[str] = None
    payment_link: Optional[str] = None
    attachment_url: Optional[str] = None
    attachment_bucket: Optional[str] = None


@dataclass(frozen=True)
class BankDetails:
    """Bank details printed on invoices."""

    bank_name: str = ""
    account_holder_name: str = ""
    account_number: str = ""
    sort_code: str = ""
    iban: str = ""


@dataclass(frozen=True)
class Profile:
    """Profile of the authenticated owner."""

    id: str
    email: str = ""
    updated_at: Optional[datetime] = None
    full_name: str = ""
    username: str = ""
    phone: str = ""
    avatar: str = ""
    company_name: str = ""
    business_registration_code: str = ""
    company_registration_number: str = ""
    address: str = ""
    vat_rate: Decimal = Decimal("0")
    bank: BankDetails = field(default_factory=BankDetails)
