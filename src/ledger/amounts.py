"""
Amount parsing and formatting helpers.

Amounts are plain floats. Parsing is strict: the whole input must be one
decimal literal, so "12abc" or "1.2.3" are rejected instead of being cut
down to their numeric prefix.
"""

import math
import re

from src.ledger.enums import ValidationReason
from src.ledger.exceptions import ValidationError

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_amount(raw: str | None) -> float:
    """
    Parse user input into a finite float.

    Args:
        raw: Text from the amount field

    Returns:
        float: Parsed amount

    Raises:
        ValidationError: MISSING_INPUT for blank input, NOT_A_NUMBER for
            anything that is not a complete finite decimal literal
    """
    if raw is None or not raw.strip():
        raise ValidationError(ValidationReason.MISSING_INPUT, "amount is empty")

    text = raw.strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise ValidationError(ValidationReason.NOT_A_NUMBER, f"'{raw}' is not a decimal number")

    value = float(text)
    if not math.isfinite(value):
        raise ValidationError(ValidationReason.NOT_A_NUMBER, f"'{raw}' is out of range")
    return value


def format_number(value: float) -> str:
    """Shortest readable form: 50.0 -> '50', 12.5 -> '12.5'."""
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_currency(value: float, symbol: str = "R", decimals: int = 2) -> str:
    """Fixed-precision money string, e.g. 'R12.50' or 'R-3.00'."""
    return f"{symbol}{value:.{decimals}f}"


def format_signed(value: float, symbol: str = "R", plus_on_zero: bool = False) -> str:
    """
    Money string with an explicit '+' for gains, e.g. '+R50' or 'R-20'.

    Negative values keep their own minus sign after the symbol.
    """
    positive = value > 0 or (plus_on_zero and value == 0)
    return f"{'+' if positive else ''}{symbol}{format_number(value)}"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
