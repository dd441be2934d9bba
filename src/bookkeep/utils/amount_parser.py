"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Any, Optional


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount


def to_decimal(value: Any, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """Convert a JSON number or amount string to Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1"), not its binary
    expansion. Missing values return ``default``.

    Raises:
        ValueError: If the value is present but not a number
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValueError(f"Could not parse amount {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return parse_amount(str(value))
    if isinstance(value, str):
        return parse_amount(value)
    raise ValueError(f"Could not parse amount {value!r}")
