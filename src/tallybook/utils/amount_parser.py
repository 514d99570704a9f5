"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from tallybook.domain.i18n import CURRENCY_SYMBOLS

_SYMBOLS = sorted(set(CURRENCY_SYMBOLS.values()), key=len, reverse=True)
_SYMBOL_PATTERN = re.compile("|".join(re.escape(symbol) for symbol in _SYMBOLS))


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "£123.45", "CA$123.45"
    - "1,234.56"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols
    amount_str = _SYMBOL_PATTERN.sub("", amount_str.strip())

    # Remove commas
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
