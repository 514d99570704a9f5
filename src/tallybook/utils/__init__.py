"""Utility functions for tallybook."""

from tallybook.utils.date_parser import parse_date, parse_datetime, get_date_range
from tallybook.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_datetime", "get_date_range", "parse_amount"]
