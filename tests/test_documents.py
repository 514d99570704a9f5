"""Tests for receipt and invoice rendering."""

from decimal import Decimal

import pytest

from tallybook.domain.documents import render_document, split_vat
from tallybook.domain.entities import BankDetails, DocumentType, Profile
from tallybook.domain.errors import ValidationError


@pytest.fixture
def business_profile():
    """Profile with company, VAT and bank details."""
    return Profile(
        id="user-1",
        email="jane@example.com",
        full_name="Jane Doe",
        company_name="Doe Consulting",
        company_registration_number="09876543",
        business_registration_code="GB123456789",
        address="1 High Street, London",
        vat_rate=Decimal("20"),
        bank=BankDetails(bank_name="Barclays", account_number="12345678", sort_code="12-34-56"),
    )


class TestSplitVat:
    """Tests for split_vat()."""

    def test_extracts_vat_from_gross(self):
        """Test 20% VAT on a gross of 120."""
        split = split_vat(Decimal("120"), Decimal("20"))
        assert split.vat == Decimal("20.00")
        assert split.subtotal == Decimal("100.00")
        assert split.total == Decimal("120")

    def test_rounds_half_up(self):
        """Test VAT is rounded to the cent."""
        split = split_vat(Decimal("10"), Decimal("20"))
        assert split.vat == Decimal("1.67")
        assert split.subtotal == Decimal("8.33")

    def test_zero_rate(self):
        """Test a zero rate means no VAT."""
        split = split_vat(Decimal("50"), Decimal("0"))
        assert split.vat == Decimal("0")
        assert split.subtotal == Decimal("50")


def test_invoice(make_transaction, business_profile):
    """Test an invoice shows VAT, payment link and bank details."""
    txn = make_transaction(
        "120",
        document_type=DocumentType.INVOICE,
        document_number="FACT-1760000000000",
        client_name="Acme Ltd",
        client_email="billing@acme.example",
        service_description="Website redesign",
        payment_link="https://pay.example.com/1",
    )
    text = render_document(txn, business_profile)

    assert text.startswith("INVOICE  #FACT-1760000000000")
    assert "Doe Consulting" in text
    assert "Company No: 09876543" in text
    assert "Acme Ltd" in text
    assert "Date Issued: 14/10/2026" in text
    assert "Website redesign" in text
    assert "£100.00" in text
    assert "VAT (20%)" in text
    assert "£20.00" in text
    assert "Pay Now: https://pay.example.com/1" in text
    assert "Sort Code: 12-34-56" in text
    assert "Thank you for your business!" in text


def test_receipt_without_vat(make_transaction, business_profile):
    """Test receipts omit payment details and VAT at a zero rate."""
    profile = Profile(id="user-1", email="jane@example.com", full_name="Jane Doe")
    txn = make_transaction(
        "35",
        document_type=DocumentType.RECEIPT,
        document_number="CHIT-1760000000000",
    )
    text = render_document(txn, profile, currency="EUR", language="ro")

    assert text.startswith("CHITANȚĂ  #CHIT-1760000000000")
    assert "Jane Doe" in text
    assert "TVA" not in text
    assert "€35.00" in text
    assert "Detalii Plată" not in text
    assert "Plata a fost primită" in text


def test_transaction_without_document(make_transaction, business_profile):
    """Test plain transactions have nothing to render."""
    with pytest.raises(ValidationError):
        render_document(make_transaction(), business_profile)
