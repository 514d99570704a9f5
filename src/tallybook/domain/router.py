"""Page routing as a pure reducer over the current view."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from tallybook.domain.entities import Period, TransactionType


class Page(str, Enum):
    """Pages the application can render."""

    MAIN = "main"
    INCOME = "income"
    EXPENSE = "expense"
    SETTINGS = "settings"
    DETAIL = "detail"
    HISTORY = "history"
    TAX = "tax"
    PROFILE = "profile"


# Pages reachable from the footer
TOP_LEVEL_PAGES = (
    Page.MAIN,
    Page.INCOME,
    Page.EXPENSE,
    Page.SETTINGS,
    Page.TAX,
    Page.PROFILE,
)


@dataclass(frozen=True)
class View:
    """Current navigation state."""

    page: Page = Page.MAIN
    period: Optional[Period] = None
    transaction_type: Optional[TransactionType] = None


MAIN_VIEW = View(page=Page.MAIN)


@dataclass(frozen=True)
class Navigate:
    """Footer navigation to a top-level page."""

    page: Page


@dataclass(frozen=True)
class OpenPeriod:
    """Card click on a period from the income or expense page."""

    transaction_type: TransactionType
    period: Period


@dataclass(frozen=True)
class SelectPeriod:
    """Switch the period shown on the income or expense page."""

    period: Period


@dataclass(frozen=True)
class ViewHistory:
    """Open the monthly history from the monthly detail page."""


@dataclass(frozen=True)
class Back:
    """Leave a detail or history page."""


Action = Union[Navigate, OpenPeriod, SelectPeriod, ViewHistory, Back]


def resolve(view: View) -> View:
    """Return the view that should actually be rendered.

    A detail view needs both a period and a transaction type, and a history
    view needs a transaction type; anything else falls back to the main page.
    """
    if view.page == Page.DETAIL:
        if view.period is None or view.transaction_type is None:
            return MAIN_VIEW
    elif view.page == Page.HISTORY:
        if view.transaction_type is None:
            return MAIN_VIEW
    return view


def reduce(view: View, action: Action) -> View:
    """Return the next view for an action.

    Actions that do not apply to the current page leave it unchanged.
    """
    current = resolve(view)

    if isinstance(action, Navigate):
        page = Page(action.page)
        if page not in TOP_LEVEL_PAGES:
            return current
        return View(page=page)

    if isinstance(action, OpenPeriod):
        return View(
            page=Page.DETAIL,
            transaction_type=TransactionType(action.transaction_type),
            period=Period(action.period),
        )

    if isinstance(action, SelectPeriod):
        if current.page in (Page.INCOME, Page.EXPENSE):
            return View(page=current.page, period=Period(action.period))
        return current

    if isinstance(action, ViewHistory):
        if current.page == Page.DETAIL and current.period == Period.MONTHLY:
            return View(page=Page.HISTORY, transaction_type=current.transaction_type)
        return current

    if isinstance(action, Back):
        if current.page == Page.DETAIL:
            return View(page=Page(current.transaction_type.value))
        if current.page == Page.HISTORY:
            return View(
                page=Page.DETAIL,
                transaction_type=current.transaction_type,
                period=Period.MONTHLY,
            )
        return current

    raise TypeError(f"Unknown navigation action: {action!r}")
