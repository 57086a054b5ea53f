"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date
from fintrack.utils.amount_parser import parse_amount, format_amount

__all__ = ["parse_date", "parse_amount", "format_amount"]
