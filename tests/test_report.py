"""Tests for the tax report."""

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from urllib.parse import unquote

from tallybook.domain.entities import DocumentType, TransactionType
from tallybook.domain.report import (
    CSV_HEADER,
    build_report,
    report_filename,
    report_mailto,
    report_to_csv,
)


class TestBuildReport:
    """Tests for build_report()."""

    def test_missing_bound(self, make_transaction):
        """Test a report needs both bounds."""
        assert build_report([make_transaction()], None, date(2026, 10, 1)) is None
        assert build_report([make_transaction()], date(2026, 10, 1), None) is None

    def test_reversed_range(self, make_transaction):
        """Test end before start gives no report."""
        assert build_report([make_transaction()], date(2026, 10, 2), date(2026, 10, 1)) is None

    def test_reversed_times_on_one_day(self):
        """Test an end earlier in the same day than the start gives no report."""
        assert build_report([], datetime(2026, 10, 5, 15, 0), datetime(2026, 10, 5, 9, 0)) is None
        assert build_report([], datetime(2026, 10, 5, 9, 0), datetime(2026, 10, 5, 15, 0)) is not None

    def test_single_day_is_inclusive(self, make_transaction):
        """Test both ends of the range are included."""
        early = make_transaction("10", date=datetime(2026, 10, 1, 0, 0, 0))
        late = make_transaction("20", date=datetime(2026, 10, 1, 23, 59, 59))
        outside = make_transaction("40", date=datetime(2026, 10, 2, 0, 0, 0))

        report = build_report([early, late, outside], date(2026, 10, 1), date(2026, 10, 1))

        assert report.start == datetime(2026, 10, 1, 0, 0, 0)
        assert report.end == datetime(2026, 10, 1, 23, 59, 59, 999000)
        assert report.transactions == (early, late)
        assert report.total_income == Decimal("30")

    def test_totals(self, make_transaction):
        """Test income, expense and balance totals."""
        transactions = [
            make_transaction("100", date=datetime(2026, 10, 5)),
            make_transaction("30.50", TransactionType.EXPENSE, category="Fuel", date=datetime(2026, 10, 6)),
        ]
        report = build_report(transactions, datetime(2026, 10, 1, 15, 0), date(2026, 10, 31))

        assert report.total_income == Decimal("100")
        assert report.total_expense == Decimal("30.50")
        assert report.balance == Decimal("69.50")

    def test_empty_range_gives_zeros(self, make_transaction):
        """Test a range with no transactions still produces a report."""
        report = build_report([make_transaction(date=datetime(2026, 10, 5))], date(2025, 1, 1), date(2025, 1, 31))

        assert report is not None
        assert report.transactions == ()
        assert report.total_income == Decimal("0")
        assert report.total_expense == Decimal("0")
        assert report.balance == Decimal("0")


def test_report_to_csv(make_transaction):
    """Test CSV rows and trailing summary rows."""
    transactions = [
        make_transaction(
            "450",
            date=datetime(2026, 10, 5, 9, 30, 0),
            category="Bank Transfer",
            document_type=DocumentType.INVOICE,
            document_number="FACT-1760000000000",
            client_name="Acme, Ltd",
        ),
        make_transaction("45.5", TransactionType.EXPENSE, category="Fuel", date=datetime(2026, 10, 6, 18, 0, 0)),
    ]
    report = build_report(transactions, date(2026, 10, 1), date(2026, 10, 31))

    rows = list(csv.reader(io.StringIO(report_to_csv(report))))

    assert rows[0] == CSV_HEADER
    assert rows[1] == [
        "05/10/2026, 09:30:00",
        "income",
        "450.00",
        "Bank Transfer",
        "FACT-1760000000000",
        "Acme, Ltd",
    ]
    assert rows[2] == ["06/10/2026, 18:00:00", "expense", "45.50", "Fuel", "", ""]
    assert rows[3] == []
    assert rows[4] == ["Total Income", "450.00"]
    assert rows[5] == ["Total Expense", "45.50"]
    assert rows[6] == ["Balance", "404.50"]


def test_empty_report_csv():
    """Test an empty report still has header and zero summary rows."""
    report = build_report([], date(2026, 1, 1), date(2026, 1, 31))
    rows = list(csv.reader(io.StringIO(report_to_csv(report))))
    assert rows == [
        CSV_HEADER,
        [],
        ["Total Income", "0.00"],
        ["Total Expense", "0.00"],
        ["Balance", "0.00"],
    ]


def test_report_filename():
    """Test the export file is named after the range."""
    report = build_report([], date(2026, 1, 1), date(2026, 3, 31))
    assert report_filename(report) == "tax-report-2026-01-01_to_2026-03-31.csv"


def test_report_mailto():
    """Test the mailto link drafts a message naming the period."""
    report = build_report([], date(2026, 1, 1), date(2026, 3, 31))
    link = report_mailto(report)

    assert link.startswith("mailto:?subject=Tax%20Report&body=")
    body = unquote(link.split("body=", 1)[1])
    assert "from 01/01/2026 to 31/03/2026" in body
