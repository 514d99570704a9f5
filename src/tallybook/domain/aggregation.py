"""Period aggregation over the transaction list."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from dateutil.relativedelta import relativedelta

from tallybook.domain.entities import Period, Transaction, TransactionType
from tallybook.domain.periods import (
    is_this_month,
    is_this_week,
    is_today,
    week_of_month,
)

ZERO = Decimal("0")

PERIOD_CHECKS = {
    Period.DAILY: is_today,
    Period.WEEKLY: is_this_week,
    Period.MONTHLY: is_this_month,
}


@dataclass
class PeriodAggregates:
    """Totals and subsets for the daily, weekly and monthly buckets."""

    daily_income: Decimal = ZERO
    weekly_income: Decimal = ZERO
    monthly_income: Decimal = ZERO
    daily_expense: Decimal = ZERO
    weekly_expense: Decimal = ZERO
    monthly_expense: Decimal = ZERO
    daily_transactions: list[Transaction] = field(default_factory=list)
    weekly_transactions: list[Transaction] = field(default_factory=list)
    monthly_transactions: list[Transaction] = field(default_factory=list)

    def total(self, txn_type: TransactionType, period: Period) -> Decimal:
        """Return the total for a (type, period) pair."""
        return getattr(self, f"{Period(period).value}_{TransactionType(txn_type).value}")

    def subset(self, period: Period) -> list[Transaction]:
        """Return the transactions that fell in a bucket."""
        return getattr(self, f"{Period(period).value}_transactions")

    def balance(self, period: Period) -> Decimal:
        """Return income minus expense for a bucket."""
        return self.total(TransactionType.INCOME, period) - self.total(
            TransactionType.EXPENSE, period
        )


def aggregate(
    transactions: Sequence[Transaction], now: Optional[datetime] = None
) -> PeriodAggregates:
    """Compute the six period totals and three subsets in one pass.

    Buckets overlap: a transaction dated today counts towards today, this
    week and this month.
    """
    result = PeriodAggregates()
    for txn in transactions:
        for period, check in PERIOD_CHECKS.items():
            if not check(txn.date, now=now):
                continue
            result.subset(period).append(txn)
            name = f"{period.value}_{TransactionType(txn.type).value}"
            setattr(result, name, getattr(result, name) + txn.amount)
    return result


def filter_for_period(
    transactions: Sequence[Transaction],
    txn_type: TransactionType,
    period: Period,
    now: Optional[datetime] = None,
) -> list[Transaction]:
    """Return transactions of a type that fall in a bucket, in input order."""
    check = PERIOD_CHECKS[Period(period)]
    return [
        txn
        for txn in transactions
        if txn.type == TransactionType(txn_type) and check(txn.date, now=now)
    ]


def group_by_day(transactions: Sequence[Transaction]) -> dict[str, list[Transaction]]:
    """Group transactions by weekday label, e.g. 'Monday, Oct 12'."""
    grouped: dict[str, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        label = f"{txn.date.strftime('%A, %b')} {txn.date.day}"
        grouped[label].append(txn)
    return dict(grouped)


def group_by_week_of_month(
    transactions: Sequence[Transaction],
) -> dict[int, list[Transaction]]:
    """Group transactions by their week index within the month."""
    grouped: dict[int, list[Transaction]] = defaultdict(list)
    for txn in transactions:
        grouped[week_of_month(txn.date)].append(txn)
    return dict(grouped)


def monthly_history(
    transactions: Sequence[Transaction],
    txn_type: TransactionType,
    months: int = 24,
    now: Optional[datetime] = None,
) -> list[tuple[str, Decimal]]:
    """Return (month label, total) for the last ``months`` months, newest first.

    Months without transactions are included with a zero total; transactions
    older than the window are ignored.
    """
    today = now if now is not None else datetime.now()
    first_of_month = today.replace(day=1).date()
    keys = [(first_of_month - relativedelta(months=i)) for i in range(months)]
    totals: dict[tuple[int, int], Decimal] = {(k.year, k.month): ZERO for k in keys}

    for txn in transactions:
        if txn.type != TransactionType(txn_type):
            continue
        key = (txn.date.year, txn.date.month)
        if key in totals:
            totals[key] += txn.amount

    return [(k.strftime("%B %Y"), totals[(k.year, k.month)]) for k in keys]
