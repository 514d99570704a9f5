"""Tests for page routing."""

import pytest

from tallybook.domain.entities import Period, TransactionType
from tallybook.domain.router import (
    MAIN_VIEW,
    Back,
    Navigate,
    OpenPeriod,
    Page,
    SelectPeriod,
    View,
    ViewHistory,
    reduce,
    resolve,
)


@pytest.mark.parametrize(
    "page",
    [Page.MAIN, Page.INCOME, Page.EXPENSE, Page.SETTINGS, Page.TAX, Page.PROFILE],
)
def test_navigate_to_top_level_page(page):
    """Test footer navigation resets period and type."""
    start = View(page=Page.DETAIL, period=Period.DAILY, transaction_type=TransactionType.INCOME)
    assert reduce(start, Navigate(page)) == View(page=page)


def test_navigate_to_detail_is_ignored():
    """Test detail and history cannot be reached from the footer."""
    start = View(page=Page.INCOME)
    assert reduce(start, Navigate(Page.DETAIL)) == start
    assert reduce(start, Navigate(Page.HISTORY)) == start


def test_open_period():
    """Test a card click opens the detail page."""
    view = reduce(View(page=Page.EXPENSE), OpenPeriod(TransactionType.EXPENSE, Period.WEEKLY))
    assert view == View(
        page=Page.DETAIL, period=Period.WEEKLY, transaction_type=TransactionType.EXPENSE
    )


def test_select_period_on_type_page():
    """Test the period toggle only applies to income and expense pages."""
    assert reduce(View(page=Page.INCOME), SelectPeriod(Period.MONTHLY)) == View(
        page=Page.INCOME, period=Period.MONTHLY
    )
    assert reduce(View(page=Page.SETTINGS), SelectPeriod(Period.MONTHLY)) == View(
        page=Page.SETTINGS
    )


def test_view_history_only_from_monthly_detail():
    """Test history opens from the monthly detail page only."""
    monthly = View(page=Page.DETAIL, period=Period.MONTHLY, transaction_type=TransactionType.INCOME)
    weekly = View(page=Page.DETAIL, period=Period.WEEKLY, transaction_type=TransactionType.INCOME)

    assert reduce(monthly, ViewHistory()) == View(
        page=Page.HISTORY, transaction_type=TransactionType.INCOME
    )
    assert reduce(weekly, ViewHistory()) == weekly


def test_back_from_detail_and_history():
    """Test back goes from history to monthly detail to the type page."""
    history = View(page=Page.HISTORY, transaction_type=TransactionType.EXPENSE)

    detail = reduce(history, Back())
    assert detail == View(
        page=Page.DETAIL, period=Period.MONTHLY, transaction_type=TransactionType.EXPENSE
    )
    assert reduce(detail, Back()) == View(page=Page.EXPENSE)


def test_back_elsewhere_is_ignored():
    """Test back does nothing on top-level pages."""
    assert reduce(View(page=Page.TAX), Back()) == View(page=Page.TAX)


@pytest.mark.parametrize(
    "view",
    [
        View(page=Page.DETAIL),
        View(page=Page.DETAIL, period=Period.DAILY),
        View(page=Page.DETAIL, transaction_type=TransactionType.INCOME),
        View(page=Page.HISTORY),
    ],
)
def test_incomplete_views_fall_back_to_main(view):
    """Test detail and history views without their context render main."""
    assert resolve(view) == MAIN_VIEW
    assert reduce(view, Back()) == MAIN_VIEW


def test_unknown_action():
    """Test unknown actions are rejected."""
    with pytest.raises(TypeError):
        reduce(MAIN_VIEW, "income")
