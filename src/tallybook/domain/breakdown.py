"""Per-category breakdown of a filtered transaction set."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from tallybook.domain.entities import Transaction, TransactionType


@dataclass(frozen=True)
class CategoryShare:
    """Amount and share of the total for one category."""

    category: str
    amount: Decimal
    percentage: Decimal


def breakdown(
    transactions: Sequence[Transaction],
    total_amount: Decimal,
    txn_type: TransactionType,
) -> list[CategoryShare]:
    """Group transactions of one type by category.

    Categories are compared as exact strings. Results are sorted by amount,
    highest first; equal amounts keep the order in which the category was
    first seen. An empty list is returned when ``total_amount`` is zero.
    """
    if not total_amount:
        return []

    totals: dict[str, Decimal] = {}
    for txn in transactions:
        if txn.type != TransactionType(txn_type):
            continue
        totals[txn.category] = totals.get(txn.category, Decimal("0")) + txn.amount

    shares = [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=Decimal(100) * amount / Decimal(total_amount),
        )
        for category, amount in totals.items()
    ]
    # sorted() is stable, so ties keep first-seen order
    return sorted(shares, key=lambda share: share.amount, reverse=True)
