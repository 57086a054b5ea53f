"""Amount parsing utilities.

Money crosses every boundary as a Decimal with exactly two fractional digits.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re
from typing import Union

CENTS = Decimal("0.01")


def quantize_amount(amount: Decimal) -> Decimal:
    """Round a Decimal to two fractional digits."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_amount(amount_str: Union[str, Decimal, int]) -> Decimal:
    """Parse an amount string into a Decimal with two fractional digits.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string (Decimal and int values pass straight through)

    Returns:
        Decimal amount rounded to cents

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if isinstance(amount_str, bool):
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if isinstance(amount_str, (Decimal, int)):
        amount = Decimal(amount_str)
        if not amount.is_finite():
            raise ValueError(f"Could not parse amount '{amount_str}'")
        return quantize_amount(amount)

    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if is_negative:
        amount = -amount
    return quantize_amount(amount)


def parse_non_negative_amount(amount_str: Union[str, Decimal, int]) -> Decimal:
    """Parse an amount that must be zero or positive.

    Raises:
        ValueError: If the amount cannot be parsed or is negative
    """
    amount = parse_amount(amount_str)
    if amount < 0:
        raise ValueError(f"Amount must not be negative, got {format_amount(amount)}")
    return amount


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two fractional digits, e.g. "1234.50"."""
    return f"{quantize_amount(Decimal(amount)):.2f}"
