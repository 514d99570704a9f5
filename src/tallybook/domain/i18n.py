"""Translations, currency symbols and locale formatting."""

from datetime import date, datetime
from decimal import Decimal
from typing import Union

LANGUAGES = ("en", "ro")
DEFAULT_LANGUAGE = "en"

CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "CAD": "CA$",
    "AUD": "A$",
    "EUR": "€",
    "JPY": "¥",
    "CNY": "¥",
    "CHF": "Fr",
    "INR": "₹",
}
DEFAULT_CURRENCY = "GBP"

LOCALES = {"en": "en-GB", "ro": "ro-RO"}

# strftime patterns matching how each locale prints dates
_DATE_FORMATS = {"en-GB": "%d/%m/%Y", "ro-RO": "%d.%m.%Y"}

TRANSLATIONS: dict[str, dict[str, str]] = {
    "income": {"en": "Income", "ro": "Venit"},
    "expense": {"en": "Expense", "ro": "Cheltuială"},
    "balance": {"en": "Balance", "ro": "Balanță"},
    "daily": {"en": "Daily", "ro": "Zilnic"},
    "weekly": {"en": "Weekly", "ro": "Săptămânal"},
    "monthly": {"en": "Monthly", "ro": "Lunar"},
    "back": {"en": "Back", "ro": "Înapoi"},
    "week": {"en": "Week", "ro": "Săptămâna"},
    "welcome": {"en": "Welcome to Account Assistant", "ro": "Bun venit la Asistentul Contabil"},
    "home": {"en": "Home", "ro": "Acasă"},
    "tax": {"en": "Tax", "ro": "Taxe"},
    "settings": {"en": "Settings", "ro": "Setări"},
    "dashboard": {"en": "Dashboard", "ro": "Panou de control"},
    "add_income": {"en": "Add Income", "ro": "Adaugă Venit"},
    "add_expense": {"en": "Add Expense", "ro": "Adaugă Cheltuială"},
    "income_breakdown": {"en": "{period} Income Breakdown", "ro": "Detalii Venituri {period}"},
    "expense_breakdown": {"en": "{period} Expense Breakdown", "ro": "Detalii Cheltuieli {period}"},
    "todays_type": {"en": "Today's {type}", "ro": "{type} de Azi"},
    "no_transactions_today": {"en": "No transactions for today.", "ro": "Nicio tranzacție azi."},
    "this_weeks_type": {"en": "This Week's {type}", "ro": "{type} Săptămâna Aceasta"},
    "no_transactions_week": {
        "en": "No transactions for this week.",
        "ro": "Nicio tranzacție săptămâna aceasta.",
    },
    "this_months_type": {"en": "This Month's {type}", "ro": "{type} Luna Aceasta"},
    "view_history": {"en": "View History", "ro": "Vezi Istoric"},
    "no_transactions_month": {
        "en": "No transactions for this month.",
        "ro": "Nicio tranzacție luna aceasta.",
    },
    "monthly_history": {"en": "Monthly {type} History", "ro": "Istoric Lunar {type}"},
    "appearance": {"en": "Appearance", "ro": "Aspect"},
    "font_size": {"en": "Font Size", "ro": "Dimensiune Font"},
    "currency": {"en": "Currency", "ro": "Monedă"},
    "language": {"en": "Language", "ro": "Limbă"},
    "tax_report": {"en": "Tax Report", "ro": "Raport Fiscal"},
    "tax_subtitle": {
        "en": "Select a period to generate your report.",
        "ro": "Selectează o perioadă pentru a genera raportul.",
    },
    "total_income": {"en": "Total Income:", "ro": "Venit Total:"},
    "total_expense": {"en": "Total Expense:", "ro": "Cheltuieli Totale:"},
    "login_failed": {"en": "Invalid login credentials.", "ro": "Credențiale de autentificare invalide."},
    "signup_failed": {
        "en": "An account with this email already exists.",
        "ro": "Un cont cu acest email există deja.",
    },
    "signup_generic_error": {
        "en": "An unexpected error occurred. Please try again.",
        "ro": "A apărut o eroare neașteptată. Vă rugăm să încercați din nou.",
    },
    "email_not_confirmed": {
        "en": "Please confirm your email address before logging in.",
        "ro": "Te rog confirmă adresa de email înainte de autentificare.",
    },
    "check_email_confirmation": {
        "en": "Signup successful! Please check your email to confirm your account.",
        "ro": "Înregistrare reușită! Te rog verifică-ți emailul pentru a confirma contul.",
    },
    "profile": {"en": "Profile", "ro": "Profil"},
    "full_name": {"en": "Full Name", "ro": "Nume Complet"},
    "username": {"en": "Username", "ro": "Nume utilizator"},
    "email_address": {"en": "Email Address", "ro": "Adresă de Email"},
    "phone_number": {"en": "Phone Number", "ro": "Număr de Telefon"},
    "company_name": {"en": "Company Name", "ro": "Nume Companie"},
    "business_reg_code": {"en": "Business Registration Code", "ro": "Cod de Înregistrare Fiscală"},
    "company_reg_number": {
        "en": "Company Registration Number",
        "ro": "Număr de Înregistrare Companie",
    },
    "address": {"en": "Address", "ro": "Adresă"},
    "vat_rate": {"en": "VAT Rate", "ro": "Cotă TVA"},
    "bank_details": {"en": "Bank Details", "ro": "Detalii Bancare"},
    "bank_name": {"en": "Bank Name", "ro": "Numele Băncii"},
    "account_holder_name": {"en": "Account Holder Name", "ro": "Nume Deținător Cont"},
    "account_number": {"en": "Account Number", "ro": "Număr Cont"},
    "sort_code": {"en": "Sort Code", "ro": "Sort Code"},
    "iban": {"en": "IBAN", "ro": "IBAN"},
    "receipt": {"en": "Receipt", "ro": "Chitanță"},
    "invoice": {"en": "Invoice", "ro": "Factură"},
    "from": {"en": "From:", "ro": "De la:"},
    "to": {"en": "To:", "ro": "Către:"},
    "date_issued": {"en": "Date Issued:", "ro": "Data emiterii:"},
    "service_description": {"en": "Service Description", "ro": "Descriere Serviciu"},
    "subtotal": {"en": "Subtotal", "ro": "Subtotal"},
    "vat": {"en": "VAT", "ro": "TVA"},
    "total": {"en": "Total", "ro": "Total"},
    "thank_you": {"en": "Thank you for your business!", "ro": "Vă mulțumim!"},
    "payment_received": {"en": "Payment received. Thank you!", "ro": "Plata a fost primită. Vă mulțumim!"},
    "payment_details": {"en": "Payment Details", "ro": "Detalii Plată"},
    "pay_now": {"en": "Pay Now", "ro": "Plătește Acum"},
    "company_number": {"en": "Company No:", "ro": "Nr. Înreg. Companie:"},
    "vat_number": {"en": "Tax/VAT No:", "ro": "CUI/TVA:"},
}


def translate(key: str, language: str = DEFAULT_LANGUAGE, **params) -> str:
    """Return the translation of ``key``, falling back to English and then the key."""
    entry = TRANSLATIONS.get(key)
    if entry is None:
        return key
    text = entry.get(language) or entry[DEFAULT_LANGUAGE]
    return text.format(**params) if params else text


def currency_symbol(currency: str) -> str:
    """Return the display symbol for a currency code."""
    return CURRENCY_SYMBOLS.get(currency, CURRENCY_SYMBOLS[DEFAULT_CURRENCY])


def format_money(amount: Union[Decimal, float, int], currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount with two decimals and the currency symbol prefixed.

    Negative amounts put the sign before the symbol: -£10.00.
    """
    amount = Decimal(amount)
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol(currency)}{abs(amount):.2f}"


def format_date(value: Union[date, datetime], language: str = DEFAULT_LANGUAGE) -> str:
    """Format a date the way the language's locale prints it."""
    locale = LOCALES.get(language, LOCALES[DEFAULT_LANGUAGE])
    return value.strftime(_DATE_FORMATS[locale])


def format_datetime(value: datetime, language: str = DEFAULT_LANGUAGE) -> str:
    """Format a date and time the way the language's locale prints it."""
    return f"{format_date(value, language)}, {value.strftime('%H:%M:%S')}"
