"""Receipt and invoice rendering."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from tallybook.domain.entities import DocumentType, Profile, Transaction
from tallybook.domain.errors import ValidationError
from tallybook.domain.i18n import format_date, format_money, translate

CENT = Decimal("0.01")


@dataclass(frozen=True)
class VatSplit:
    """Gross amount split into subtotal and VAT."""

    subtotal: Decimal
    vat: Decimal
    total: Decimal


def split_vat(gross: Decimal, vat_rate: Decimal) -> VatSplit:
    """Extract VAT from a gross amount; a zero rate means no VAT."""
    gross = Decimal(gross)
    rate = Decimal(vat_rate or 0)
    if rate <= 0:
        return VatSplit(subtotal=gross, vat=Decimal("0"), total=gross)
    vat = (gross / (1 + rate / 100) * (rate / 100)).quantize(CENT, rounding=ROUND_HALF_UP)
    return VatSplit(subtotal=gross - vat, vat=vat, total=gross)


def render_document(
    txn: Transaction,
    profile: Profile,
    currency: str = "GBP",
    language: str = "en",
) -> str:
    """Render the receipt or invoice of a transaction as plain text.

    Raises:
        ValidationError: If the transaction has no document
    """
    if txn.document_type is None:
        raise ValidationError(f"Transaction {txn.id} has no receipt or invoice")

    def t(key: str) -> str:
        return translate(key, language)

    document_type = DocumentType(txn.document_type)
    lines = [f"{t(document_type.value).upper()}  #{txn.document_number or ''}", ""]

    lines.append(t("from"))
    for value in (profile.company_name or profile.full_name, profile.address, profile.email, profile.phone):
        if value:
            lines.append(f"  {value}")
    if profile.company_registration_number:
        lines.append(f"  {t('company_number')} {profile.company_registration_number}")
    if profile.business_registration_code:
        lines.append(f"  {t('vat_number')} {profile.business_registration_code}")

    if txn.client_name or txn.client_email:
        lines.append(t("to"))
        for value in (txn.client_name, txn.client_email):
            if value:
                lines.append(f"  {value}")

    lines.append(f"{t('date_issued')} {format_date(txn.date, language)}")
    lines.append("")
    lines.append(f"{t('service_description'):<40}{t('total'):>14}")
    lines.append(f"{(txn.service_description or txn.category):<40}{format_money(txn.amount, currency):>14}")
    lines.append("")

    split = split_vat(txn.amount, profile.vat_rate)
    if split.vat > 0:
        lines.append(f"{t('subtotal'):<40}{format_money(split.subtotal, currency):>14}")
        vat_label = f"{t('vat')} ({profile.vat_rate.normalize():f}%)"
        lines.append(f"{vat_label:<40}{format_money(split.vat, currency):>14}")
    lines.append(f"{t('total'):<40}{format_money(split.total, currency):>14}")

    if document_type == DocumentType.INVOICE:
        bank = profile.bank
        bank_lines = [
            (t("bank_name"), bank.bank_name),
            (t("account_holder_name"), bank.account_holder_name),
            (t("account_number"), bank.account_number),
            (t("sort_code"), bank.sort_code),
            (t("iban"), bank.iban),
        ]
        if txn.payment_link or any(value for _, value in bank_lines):
            lines.append("")
            lines.append(t("payment_details"))
            if txn.payment_link:
                lines.append(f"  {t('pay_now')}: {txn.payment_link}")
            for label, value in bank_lines:
                if value:
                    lines.append(f"  {label}: {value}")

    lines.append("")
    lines.append(t("thank_you" if document_type == DocumentType.INVOICE else "payment_received"))
    return "\n".join(lines) + "\n"
