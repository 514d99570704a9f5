"""Mapper functions to convert between domain entities and storage records.

Storage records are plain dicts keyed by column name, the shape rows have
when they come back from the store. Payment links and bank details are
written to their own columns. Older rows packed them into free text, which
the readers here still unpack:

- a transaction's payment link appended to ``service_description``
  behind ``[PAYMENT_LINK]``;
- a profile's bank details packed into ``bank_name`` as
  ``"<bank> [HOLDER]... [ACC]... [SORT]... [IBAN]..."``.

A description that itself contains ``[PAYMENT_LINK]`` will not round-trip.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil import parser as date_parser

from tallybook.domain import entities as domain
from tallybook.domain.errors import RecordLoadError, missing_field

PAYMENT_LINK_MARKER = "[PAYMENT_LINK]"

# Packing order is fixed; decoding does not depend on it.
BANK_KEYS = (
    ("HOLDER", "account_holder_name"),
    ("ACC", "account_number"),
    ("SORT", "sort_code"),
    ("IBAN", "iban"),
)


def encode_payment_link(description: Optional[str], payment_link: Optional[str]) -> Optional[str]:
    """Pack a payment link onto the end of a description."""
    combined = description or ""
    if payment_link:
        combined = f"{combined} {PAYMENT_LINK_MARKER}{payment_link}"
    return combined.strip() or None


def decode_payment_link(text: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split a stored description into (description, payment link)."""
    if not text:
        return None, None
    if PAYMENT_LINK_MARKER not in text:
        return text, None
    before, after = text.split(PAYMENT_LINK_MARKER, 1)
    return before.strip() or None, after or None


def encode_bank_details(bank: domain.BankDetails) -> Optional[str]:
    """Pack bank details into a single text value."""
    parts = [bank.bank_name or ""]
    for key, attr in BANK_KEYS:
        value = getattr(bank, attr)
        if value:
            parts.append(f" [{key}]{value}")
    return "".join(parts).strip() or None


def _extract(text: str, key: str) -> str:
    match = re.search(r"\[" + key + r"\]([^\[]*)", text)
    return match.group(1).strip() if match else ""


def decode_bank_details(text: Optional[str]) -> domain.BankDetails:
    """Unpack bank details; missing keys decode to empty strings."""
    if not text:
        return domain.BankDetails()
    marker = text.find("[")
    bank_name = (text if marker == -1 else text[:marker]).strip()
    return domain.BankDetails(
        bank_name=bank_name,
        **{attr: _extract(text, key) for key, attr in BANK_KEYS},
    )


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Return a naive local datetime for a stored timestamp."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    else:
        parsed = date_parser.isoparse(str(value))
    return _local_naive(parsed)


def _local_naive(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def transaction_from_storage(row: dict[str, Any]) -> domain.Transaction:
    """Convert a stored transaction row into a domain Transaction.

    Raises:
        RecordLoadError: If the row lacks a date, type or a valid amount
    """
    record_id = row.get("id")
    for required in ("date", "type", "amount"):
        if row.get(required) is None:
            raise RecordLoadError(missing_field(required, record_id), record_id=record_id)

    try:
        txn_type = domain.TransactionType(row["type"])
    except ValueError:
        raise RecordLoadError(
            f"Stored record {record_id} has unknown type '{row['type']}'", record_id=record_id
        )

    try:
        amount = Decimal(str(row["amount"]))
        txn_date = _parse_timestamp(row["date"])
        created_at = _parse_timestamp(row.get("created_at"))
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise RecordLoadError(
            f"Stored record {record_id} could not be parsed: {e}", record_id=record_id
        )

    document_type = row.get("document_type")
    description, legacy_link = decode_payment_link(row.get("service_description"))

    return domain.Transaction(
        id=record_id,
        user_id=row.get("user_id"),
        created_at=created_at or txn_date,
        date=txn_date,
        type=txn_type,
        amount=amount,
        category=row.get("category") or "",
        document_type=domain.DocumentType(document_type) if document_type else None,
        document_number=row.get("document_number") or None,
        client_name=row.get("client_name") or None,
        client_email=row.get("client_email") or None,
        service_description=description,
        payment_link=row.get("payment_link") or legacy_link,
        attachment_url=row.get("attachment_url") or None,
        attachment_bucket=row.get("attachment_bucket") or None,
    )


def transaction_to_storage(txn: domain.Transaction) -> dict[str, Any]:
    """Convert a domain Transaction into a storage record.

    ``id`` and ``created_at`` are assigned by the store and not included.
    """
    return {
        "user_id": txn.user_id,
        "date": _local_naive(txn.date),
        "type": domain.TransactionType(txn.type).value,
        "amount": txn.amount,
        "category": txn.category,
        "document_type": domain.DocumentType(txn.document_type).value if txn.document_type else None,
        "document_number": txn.document_number or None,
        "client_name": txn.client_name or None,
        "client_email": txn.client_email or None,
        "service_description": txn.service_description or None,
        "payment_link": txn.payment_link or None,
        "attachment_url": txn.attachment_url or None,
        "attachment_bucket": txn.attachment_bucket or None,
    }


def _bank_from_storage(row: dict[str, Any]) -> domain.BankDetails:
    """Read bank details from their columns, falling back to the packed form."""
    legacy = decode_bank_details(row.get("bank_name"))
    return domain.BankDetails(
        bank_name=legacy.bank_name,
        **{attr: row.get(attr) or getattr(legacy, attr) for _, attr in BANK_KEYS},
    )


def profile_from_storage(row: dict[str, Any], auth_user: domain.AuthUser) -> domain.Profile:
    """Convert a stored profile row into a domain Profile.

    The email comes from the auth identity, not the profile row.
    """
    return domain.Profile(
        id=row["id"],
        email=auth_user.email or "",
        updated_at=_parse_timestamp(row.get("updated_at")),
        full_name=row.get("full_name") or "",
        username=row.get("username") or "",
        phone=row.get("phone") or "",
        avatar=row.get("avatar") or "",
        company_name=row.get("company_name") or "",
        business_registration_code=row.get("business_registration_code") or "",
        company_registration_number=row.get("company_registration_number") or "",
        address=row.get("address") or "",
        vat_rate=Decimal(str(row.get("vat_rate") or 0)),
        bank=_bank_from_storage(row),
    )


def profile_to_storage(profile: domain.Profile) -> dict[str, Any]:
    """Convert a domain Profile into the editable columns of a profile row."""
    return {
        "full_name": profile.full_name or None,
        "username": profile.username or None,
        "phone": profile.phone or None,
        "avatar": profile.avatar or None,
        "company_name": profile.company_name or None,
        "business_registration_code": profile.business_registration_code or None,
        "company_registration_number": profile.company_registration_number or None,
        "address": profile.address or None,
        "vat_rate": profile.vat_rate or Decimal("0"),
        "bank_name": profile.bank.bank_name or None,
        **{attr: getattr(profile.bank, attr) or None for _, attr in BANK_KEYS},
    }
