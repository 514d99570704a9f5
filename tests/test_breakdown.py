"""Tests for the per-category breakdown."""

from decimal import Decimal

from tallybook.domain.breakdown import breakdown
from tallybook.domain.entities import TransactionType


def test_breakdown_sorted_by_amount(make_transaction):
    """Test categories are summed and sorted highest first."""
    transactions = [
        make_transaction("10", category="Cash"),
        make_transaction("60", category="Card"),
        make_transaction("30", category="Cash"),
    ]
    shares = breakdown(transactions, Decimal("100"), TransactionType.INCOME)

    assert [(s.category, s.amount) for s in shares] == [
        ("Card", Decimal("60")),
        ("Cash", Decimal("40")),
    ]
    assert shares[0].percentage == Decimal("60")


def test_percentages_sum_to_100(make_transaction):
    """Test shares of the full total add up to 100%."""
    transactions = [
        make_transaction("10", category="Cash"),
        make_transaction("10", category="Card"),
        make_transaction("10", category="Other"),
    ]
    shares = breakdown(transactions, Decimal("30"), TransactionType.INCOME)
    assert abs(sum(s.percentage for s in shares) - Decimal("100")) < Decimal("0.000001")


def test_ties_keep_first_seen_order(make_transaction):
    """Test equal amounts keep the order categories first appeared in."""
    transactions = [
        make_transaction("5", category="Other"),
        make_transaction("5", category="Cash"),
    ]
    shares = breakdown(transactions, Decimal("10"), TransactionType.INCOME)
    assert [s.category for s in shares] == ["Other", "Cash"]


def test_zero_total_is_empty(make_transaction):
    """Test a zero total yields no shares."""
    assert breakdown([make_transaction("5")], Decimal("0"), TransactionType.INCOME) == []


def test_other_type_ignored(make_transaction):
    """Test transactions of the other type are left out."""
    transactions = [
        make_transaction("5", category="Cash"),
        make_transaction("9", TransactionType.EXPENSE, category="Fuel"),
    ]
    shares = breakdown(transactions, Decimal("5"), TransactionType.INCOME)
    assert [s.category for s in shares] == ["Cash"]


def test_categories_compared_exactly(make_transaction):
    """Test categories differing only in case stay separate."""
    transactions = [
        make_transaction("5", category="cash"),
        make_transaction("5", category="Cash"),
    ]
    shares = breakdown(transactions, Decimal("10"), TransactionType.INCOME)
    assert len(shares) == 2
