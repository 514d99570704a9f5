"""Tests for period aggregation."""

from datetime import datetime, timedelta
from decimal import Decimal

from tallybook.domain.aggregation import (
    aggregate,
    filter_for_period,
    group_by_day,
    group_by_week_of_month,
    monthly_history,
)
from tallybook.domain.entities import Period, TransactionType
from tallybook.domain.i18n import format_money


class TestAggregate:
    """Tests for aggregate()."""

    def test_daily_balance(self, now, make_transaction):
        """Test a day with income 100 and expense 40 balances to 60."""
        transactions = [
            make_transaction("100", TransactionType.INCOME),
            make_transaction("40", TransactionType.EXPENSE, category="Fuel"),
        ]
        totals = aggregate(transactions, now=now)

        assert totals.daily_income == Decimal("100")
        assert totals.daily_expense == Decimal("40")
        assert format_money(totals.balance(Period.DAILY), "GBP") == "£60.00"

    def test_buckets_overlap(self, now, make_transaction):
        """Test today's entry counts towards day, week and month."""
        totals = aggregate([make_transaction("25")], now=now)
        assert totals.daily_income == Decimal("25")
        assert totals.weekly_income == Decimal("25")
        assert totals.monthly_income == Decimal("25")
        assert len(totals.daily_transactions) == 1
        assert len(totals.weekly_transactions) == 1
        assert len(totals.monthly_transactions) == 1

    def test_older_entries(self, now, make_transaction):
        """Test entries fall only into the buckets that contain them."""
        earlier_this_week = make_transaction("5", date=datetime(2026, 10, 12, 8, 0))
        earlier_this_month = make_transaction("7", date=datetime(2026, 10, 2, 8, 0))
        last_month = make_transaction("11", date=datetime(2026, 9, 30, 8, 0))

        totals = aggregate([earlier_this_week, earlier_this_month, last_month], now=now)

        assert totals.daily_income == Decimal("0")
        assert totals.weekly_income == Decimal("5")
        assert totals.monthly_income == Decimal("12")
        assert totals.total(TransactionType.INCOME, Period.MONTHLY) == Decimal("12")

    def test_totals_match_subsets(self, now, make_transaction):
        """Test each (period, type) total is the sum of its subset of that type."""
        dates = [
            now,
            datetime(2026, 10, 14, 0, 0),
            datetime(2026, 10, 12, 9, 30),
            datetime(2026, 10, 1, 18, 0),
            datetime(2026, 9, 30, 23, 59),
            datetime(2025, 10, 14, 12, 0),
        ]
        transactions = [
            make_transaction(
                f"{index + 1}.{index}5",
                TransactionType.EXPENSE if index % 2 else TransactionType.INCOME,
                date=when,
            )
            for index, when in enumerate(dates * 2)
        ]

        totals = aggregate(transactions, now=now)

        for period in Period:
            for txn_type in TransactionType:
                expected = sum(
                    (txn.amount for txn in totals.subset(period) if txn.type == txn_type),
                    Decimal("0"),
                )
                assert totals.total(txn_type, period) == expected
        assert len(totals.subset(Period.DAILY)) == 4
        assert len(totals.subset(Period.WEEKLY)) == 6
        assert len(totals.subset(Period.MONTHLY)) == 8

    def test_empty(self, now):
        """Test no transactions gives zero totals."""
        totals = aggregate([], now=now)
        for period in Period:
            assert totals.balance(period) == Decimal("0")
            assert totals.subset(period) == []


def test_filter_for_period_keeps_order(now, make_transaction):
    """Test filtering by type and period keeps the input order."""
    first = make_transaction("1", date=now)
    other_type = make_transaction("2", TransactionType.EXPENSE, date=now)
    second = make_transaction("3", date=now - timedelta(days=1))

    weekly = filter_for_period([first, other_type, second], TransactionType.INCOME, Period.WEEKLY, now=now)
    daily = filter_for_period([first, other_type, second], TransactionType.INCOME, Period.DAILY, now=now)

    assert weekly == [first, second]
    assert daily == [first]


def test_group_by_day(make_transaction):
    """Test grouping uses weekday labels."""
    monday = make_transaction("1", date=datetime(2026, 10, 12, 9, 0))
    monday_later = make_transaction("2", date=datetime(2026, 10, 12, 17, 0))
    tuesday = make_transaction("3", date=datetime(2026, 10, 13, 9, 0))

    grouped = group_by_day([monday, monday_later, tuesday])

    assert list(grouped) == ["Monday, Oct 12", "Tuesday, Oct 13"]
    assert grouped["Monday, Oct 12"] == [monday, monday_later]


def test_group_by_week_of_month(make_transaction):
    """Test grouping by Sunday-start week index."""
    week1 = make_transaction("1", date=datetime(2026, 10, 3))
    week2 = make_transaction("2", date=datetime(2026, 10, 4))
    grouped = group_by_week_of_month([week2, week1])
    assert grouped == {2: [week2], 1: [week1]}


class TestMonthlyHistory:
    """Tests for monthly_history()."""

    def test_24_months_newest_first(self, now):
        """Test the window covers 24 zero-filled months, newest first."""
        history = monthly_history([], TransactionType.INCOME, now=now)
        assert len(history) == 24
        assert history[0] == ("October 2026", Decimal("0"))
        assert history[-1][0] == "November 2024"

    def test_totals_by_type(self, now, make_transaction):
        """Test only matching transactions inside the window are summed."""
        transactions = [
            make_transaction("10", date=datetime(2026, 10, 1)),
            make_transaction("15", date=datetime(2026, 10, 9)),
            make_transaction("99", TransactionType.EXPENSE, date=datetime(2026, 10, 9)),
            make_transaction("20", date=datetime(2026, 8, 20)),
            make_transaction("1000", date=datetime(2020, 1, 1)),
        ]
        history = dict(monthly_history(transactions, TransactionType.INCOME, now=now))

        assert history["October 2026"] == Decimal("25")
        assert history["September 2026"] == Decimal("0")
        assert history["August 2026"] == Decimal("20")
        assert sum(history.values()) == Decimal("45")
