"""Text rendering of each page."""

from typing import Sequence

from tallybook.app import AppContext
from tallybook.domain.aggregation import (
    filter_for_period,
    group_by_day,
    group_by_week_of_month,
    monthly_history,
)
from tallybook.domain.breakdown import breakdown
from tallybook.domain.entities import Period, Transaction, TransactionType
from tallybook.domain.i18n import format_datetime, format_money, translate
from tallybook.domain.router import Page, View, resolve

RULE = "-" * 60


def _row(label: str, value: str) -> str:
    return f"{label:<40}{value:>20}"


def _transaction_lines(
    transactions: Sequence[Transaction], currency: str, language: str
) -> list[str]:
    lines = []
    for txn in transactions:
        extra = f"  [{txn.document_number}]" if txn.document_number else ""
        lines.append(
            f"  #{txn.id:<5} {format_datetime(txn.date, language):<22} "
            f"{txn.category:<16} {format_money(txn.amount, currency):>12}{extra}"
        )
    return lines


def render_main(app: AppContext) -> list[str]:
    language, currency = app.language, app.currency
    totals = app.aggregates()
    return [
        translate("dashboard", language),
        RULE,
        _row(translate("income", language), format_money(totals.daily_income, currency)),
        _row(translate("expense", language), format_money(totals.daily_expense, currency)),
        _row(translate("balance", language), format_money(totals.balance(Period.DAILY), currency)),
    ]


def render_type_page(app: AppContext, view: View) -> list[str]:
    language, currency = app.language, app.currency
    txn_type = TransactionType(view.page.value)
    period = view.period or Period.DAILY
    totals = app.aggregates()

    lines = [translate(txn_type.value, language), RULE]
    for card in Period:
        marker = "*" if card == period else " "
        lines.append(
            _row(f"{marker} {translate(card.value, language)}", format_money(totals.total(txn_type, card), currency))
        )

    total = totals.total(txn_type, period)
    lines.append("")
    lines.append(
        translate(
            f"{txn_type.value}_breakdown",
            language,
            period=translate(period.value, language),
        )
    )
    shares = breakdown(totals.subset(period), total, txn_type)
    if not shares:
        lines.append(f"  {_empty_message(period, language)}")
    for share in shares:
        lines.append(
            f"  {share.category:<24}{format_money(share.amount, currency):>14}{share.percentage:>9.1f}%"
        )
    return lines


def _empty_message(period: Period, language: str) -> str:
    key = {
        Period.DAILY: "no_transactions_today",
        Period.WEEKLY: "no_transactions_week",
        Period.MONTHLY: "no_transactions_month",
    }[period]
    return translate(key, language)


def render_detail(app: AppContext, view: View) -> list[str]:
    language, currency = app.language, app.currency
    txn_type = view.transaction_type
    period = view.period
    type_label = translate(txn_type.value, language)
    title_key = {
        Period.DAILY: "todays_type",
        Period.WEEKLY: "this_weeks_type",
        Period.MONTHLY: "this_months_type",
    }[period]

    lines = [translate(title_key, language, type=type_label), RULE]
    selected = filter_for_period(app.transactions, txn_type, period, now=app.clock())
    if not selected:
        lines.append(_empty_message(period, language))
    elif period == Period.DAILY:
        lines.extend(_transaction_lines(selected, currency, language))
    elif period == Period.WEEKLY:
        for day, group in group_by_day(selected).items():
            lines.append(day)
            lines.extend(_transaction_lines(group, currency, language))
    else:
        for week, group in group_by_week_of_month(selected).items():
            lines.append(f"{translate('week', language)} {week}")
            lines.extend(_transaction_lines(group, currency, language))

    if period == Period.MONTHLY:
        lines.append("")
        lines.append(f"({translate('view_history', language)})")
    return lines


def render_history(app: AppContext, view: View) -> list[str]:
    language, currency = app.language, app.currency
    type_label = translate(view.transaction_type.value, language)
    lines = [translate("monthly_history", language, type=type_label), RULE]
    for month, total in monthly_history(app.transactions, view.transaction_type, now=app.clock()):
        lines.append(_row(month, format_money(total, currency)))
    return lines


def render_settings(app: AppContext) -> list[str]:
    language = app.language
    lines = [translate("settings", language), RULE]
    lines.append(_row(translate("language", language), language))
    if app.user is not None:
        lines.append(_row(translate("appearance", language), app.user_preference("theme")))
        lines.append(_row(translate("font_size", language), app.user_preference("font_size")))
        lines.append(_row(translate("currency", language), app.currency))
    return lines


def render_tax(app: AppContext) -> list[str]:
    language = app.language
    return [
        translate("tax_report", language),
        RULE,
        translate("tax_subtitle", language),
        "  tallybook report --start-date YYYY-MM-DD --end-date YYYY-MM-DD",
    ]


def render_profile(app: AppContext) -> list[str]:
    language = app.language
    profile = app.profile
    lines = [translate("profile", language), RULE]
    if profile is None:
        lines.append("No profile loaded.")
        return lines

    fields = [
        ("full_name", profile.full_name),
        ("username", profile.username),
        ("email_address", profile.email),
        ("phone_number", profile.phone),
        ("company_name", profile.company_name),
        ("business_reg_code", profile.business_registration_code),
        ("company_reg_number", profile.company_registration_number),
        ("address", profile.address),
        ("vat_rate", f"{profile.vat_rate.normalize():f}%"),
    ]
    for key, value in fields:
        lines.append(f"{translate(key, language) + ':':<30} {value}")
    if profile.avatar:
        lines.append(f"{'Avatar:':<30} {profile.avatar[:40]}{'...' if len(profile.avatar) > 40 else ''}")

    lines.append("")
    lines.append(translate("bank_details", language))
    bank = profile.bank
    for key, value in (
        ("bank_name", bank.bank_name),
        ("account_holder_name", bank.account_holder_name),
        ("account_number", bank.account_number),
        ("sort_code", bank.sort_code),
        ("iban", bank.iban),
    ):
        lines.append(f"  {translate(key, language) + ':':<28} {value}")
    return lines


def render_view(app: AppContext, view: View) -> str:
    """Render a view, falling back to the main page for incomplete views."""
    view = resolve(view)
    if view.page == Page.DETAIL:
        lines = render_detail(app, view)
    elif view.page == Page.HISTORY:
        lines = render_history(app, view)
    elif view.page in (Page.INCOME, Page.EXPENSE):
        lines = render_type_page(app, view)
    elif view.page == Page.SETTINGS:
        lines = render_settings(app)
    elif view.page == Page.TAX:
        lines = render_tax(app)
    elif view.page == Page.PROFILE:
        lines = render_profile(app)
    else:
        lines = render_main(app)
    return "\n".join(lines)
