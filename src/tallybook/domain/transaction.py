"""Transaction domain service."""

import dataclasses
import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Optional

from tallybook.database.base import Backend
from tallybook.database.mappers import transaction_from_storage, transaction_to_storage
from tallybook.domain.entities import (
    DocumentType,
    Transaction,
    TransactionType,
    default_categories,
)
from tallybook.domain.errors import (
    NotFoundError,
    RecordLoadError,
    ValidationError,
    invalid_amount,
    transaction_not_found,
)

logger = logging.getLogger(__name__)

DOCUMENT_PREFIXES = {
    DocumentType.INVOICE: "FACT-",
    DocumentType.RECEIPT: "CHIT-",
}
CENT = Decimal("0.01")


def to_cents(amount) -> Decimal:
    """Round an amount to the two decimal places the store keeps."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def generate_document_number(document_type: DocumentType, now: Optional[datetime] = None) -> str:
    """Return a document number: a type prefix followed by epoch milliseconds.

    Two documents created in the same millisecond get the same number.
    """
    now = now or datetime.now()
    return f"{DOCUMENT_PREFIXES[DocumentType(document_type)]}{int(now.timestamp() * 1000)}"


class TransactionService:
    """Service for the signed-in user's transactions.

    Keeps the loaded transactions newest first. Local state only changes
    after the backend confirms a write.
    """

    def __init__(
        self,
        db: Backend,
        user_id: str,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize transaction service.

        Args:
            db: Backend instance
            user_id: Owner of the transactions
            clock: Source of the current local time
        """
        self.db = db
        self.user_id = user_id
        self.clock = clock
        self.transactions: list[Transaction] = []
        self.load_errors: list[RecordLoadError] = []

    def load(self) -> list[Transaction]:
        """Load transactions from the backend.

        Rows that cannot be mapped are skipped and kept in ``load_errors``.

        Returns:
            Loaded transactions, newest first
        """
        rows = self.db.select_transactions(self.user_id)
        loaded: list[Transaction] = []
        errors: list[RecordLoadError] = []
        for row in rows:
            try:
                loaded.append(transaction_from_storage(row))
            except RecordLoadError as e:
                logger.error("Skipping transaction %s: %s", e.record_id, e)
                errors.append(e)
        self.transactions = loaded
        self.load_errors = errors
        return loaded

    def add_transaction(
        self,
        txn_type: TransactionType,
        amount: Decimal,
        category: Optional[str] = None,
        date: Optional[datetime] = None,
        document_type: Optional[DocumentType] = None,
        client_name: Optional[str] = None,
        client_email: Optional[str] = None,
        service_description: Optional[str] = None,
        payment_link: Optional[str] = None,
    ) -> Transaction:
        """Create a transaction and put it at the front of the list.

        Args:
            txn_type: Income or expense
            amount: Positive amount
            category: Category; defaults to the first suggestion for the type
            date: Business date; defaults to now
            document_type: Receipt or invoice to number, if any
            client_name: Optional client name
            client_email: Optional client email
            service_description: Optional description
            payment_link: Optional payment link

        Returns:
            The stored transaction

        Raises:
            ValidationError: If amount is not positive
            WriteError: If the backend rejects the insert
        """
        txn_type = TransactionType(txn_type)
        if amount is None or to_cents(amount) <= 0:
            raise ValidationError(invalid_amount(amount))

        now = self.clock()
        document_number = None
        if document_type is not None:
            document_type = DocumentType(document_type)
            document_number = generate_document_number(document_type, now)

        draft = Transaction(
            id=None,
            user_id=self.user_id,
            created_at=now,
            date=date or now,
            type=txn_type,
            amount=to_cents(amount),
            category=(category or "").strip() or default_categories(txn_type)[0],
            document_type=document_type,
            document_number=document_number,
            client_name=client_name,
            client_email=client_email,
            service_description=service_description,
            payment_link=payment_link,
        )
        row = self.db.insert_transaction(transaction_to_storage(draft))
        created = transaction_from_storage(row)
        self.transactions.insert(0, created)
        logger.info("Added %s transaction %s", txn_type.value, created.id)
        return created

    def add_income(self, amount: Decimal, **fields) -> Transaction:
        """Create an income transaction."""
        return self.add_transaction(TransactionType.INCOME, amount, **fields)

    def add_expense(self, amount: Decimal, **fields) -> Transaction:
        """Create an expense transaction."""
        return self.add_transaction(TransactionType.EXPENSE, amount, **fields)

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get a loaded transaction by ID."""
        for txn in self.transactions:
            if txn.id == transaction_id:
                return txn
        return None

    def edit_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        category: Optional[str] = None,
        date: Optional[datetime] = None,
        client_name: Optional[str] = None,
        client_email: Optional[str] = None,
        service_description: Optional[str] = None,
        payment_link: Optional[str] = None,
    ) -> Transaction:
        """Update editable fields of a transaction.

        Fields left as None keep their current value.

        Raises:
            NotFoundError: If the transaction is not loaded
            ValidationError: If the new amount is not positive
            WriteError: If the backend rejects the update
        """
        current = self.get_transaction(transaction_id)
        if current is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        if amount is not None and to_cents(amount) <= 0:
            raise ValidationError(invalid_amount(amount))

        changes = {
            "amount": to_cents(amount) if amount is not None else None,
            "category": category,
            "date": date,
            "client_name": client_name,
            "client_email": client_email,
            "service_description": service_description,
            "payment_link": payment_link,
        }
        updated = dataclasses.replace(
            current, **{k: v for k, v in changes.items() if v is not None}
        )
        row = self.db.update_transaction(transaction_id, transaction_to_storage(updated))
        stored = transaction_from_storage(row)

        index = self.transactions.index(current)
        self.transactions[index] = stored
        return stored
