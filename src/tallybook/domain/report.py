"""Tax report over a date range."""

import csv
import io
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Sequence, Union
from urllib.parse import quote

from tallybook.domain.entities import Transaction, TransactionType
from tallybook.domain.i18n import format_date, format_datetime

DateLike = Union[date, datetime]

CSV_HEADER = ["Date", "Type", "Amount", "Category", "Document", "Client"]


@dataclass(frozen=True)
class Report:
    """Transactions in a range with income, expense and balance totals."""

    start: datetime
    end: datetime
    transactions: tuple[Transaction, ...]
    total_income: Decimal
    total_expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense


def _day(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def _moment(value: DateLike) -> datetime:
    return value if isinstance(value, datetime) else datetime.combine(value, time.min)


def build_report(
    transactions: Sequence[Transaction],
    start: Optional[DateLike],
    end: Optional[DateLike],
) -> Optional[Report]:
    """Build a report for the inclusive range [start day, end day].

    Returns None if either bound is missing or the range is reversed. An
    empty range yields a report with zero totals.
    """
    if start is None or end is None or _moment(end) < _moment(start):
        return None

    range_start = datetime.combine(_day(start), time.min)
    range_end = datetime.combine(_day(end), time(23, 59, 59, 999000))

    selected = tuple(txn for txn in transactions if range_start <= txn.date <= range_end)
    income = sum(
        (txn.amount for txn in selected if txn.type == TransactionType.INCOME),
        Decimal("0"),
    )
    expense = sum(
        (txn.amount for txn in selected if txn.type == TransactionType.EXPENSE),
        Decimal("0"),
    )
    return Report(
        start=range_start,
        end=range_end,
        transactions=selected,
        total_income=income,
        total_expense=expense,
    )


def report_to_csv(report: Report, language: str = "en") -> str:
    """Serialize a report as CSV text with trailing summary rows."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for txn in report.transactions:
        writer.writerow(
            [
                format_datetime(txn.date, language),
                TransactionType(txn.type).value,
                f"{txn.amount:.2f}",
                txn.category,
                txn.document_number or "",
                txn.client_name or "",
            ]
        )
    writer.writerow([])
    writer.writerow(["Total Income", f"{report.total_income:.2f}"])
    writer.writerow(["Total Expense", f"{report.total_expense:.2f}"])
    writer.writerow(["Balance", f"{report.balance:.2f}"])
    return buffer.getvalue()


def report_filename(report: Report) -> str:
    """Return the default export filename, named after the report range."""
    return (
        f"tax-report-{report.start.strftime('%Y-%m-%d')}"
        f"_to_{report.end.strftime('%Y-%m-%d')}.csv"
    )


def report_mailto(report: Report, language: str = "en") -> str:
    """Return a mailto link that drafts an email about the exported report."""
    body = (
        "Hello,\n\n"
        "Please find my tax report attached for the period from "
        f"{format_date(report.start, language)} to {format_date(report.end, language)}.\n\n"
        "Thank you."
    )
    return f"mailto:?subject={quote('Tax Report')}&body={quote(body)}"
