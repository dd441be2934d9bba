"""Utility functions for bookkeep."""

from bookkeep.utils.date_parser import parse_date, coerce_date, get_date_range
from bookkeep.utils.amount_parser import parse_amount, to_decimal

__all__ = ["parse_date", "coerce_date", "get_date_range", "parse_amount", "to_decimal"]
