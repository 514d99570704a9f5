"""Tests for translations and formatting."""

from datetime import date, datetime
from decimal import Decimal

from tallybook.domain.i18n import (
    currency_symbol,
    format_date,
    format_datetime,
    format_money,
    translate,
)


def test_translate():
    """Test lookup, fallback and parameters."""
    assert translate("income", "ro") == "Venit"
    assert translate("income", "de") == "Income"
    assert translate("no_such_key", "en") == "no_such_key"
    assert translate("monthly_history", "en", type="Income") == "Monthly Income History"


def test_currency_symbol():
    """Test unknown currencies fall back to pounds."""
    assert currency_symbol("EUR") == "€"
    assert currency_symbol("CAD") == "CA$"
    assert currency_symbol("XXX") == "£"


def test_format_money():
    """Test two decimals with the symbol before the number."""
    assert format_money(Decimal("60"), "GBP") == "£60.00"
    assert format_money(Decimal("1234.5"), "USD") == "$1234.50"
    assert format_money(Decimal("-10"), "GBP") == "-£10.00"
    assert format_money(0, "EUR") == "€0.00"


def test_format_date_by_language():
    """Test day-first dates for both locales."""
    assert format_date(date(2026, 10, 5), "en") == "05/10/2026"
    assert format_date(date(2026, 10, 5), "ro") == "05.10.2026"


def test_format_datetime():
    """Test date and time formatting."""
    assert format_datetime(datetime(2026, 10, 5, 9, 3, 7)) == "05/10/2026, 09:03:07"
