"""
Numeric coercion, rounding and money/weight formatting

Figures accumulate at full precision and are rounded only here,
when they are turned into text.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY_SYMBOL = "Rs."


def parse_number(value: Any) -> float:
    """
    Parse an externally supplied numeric field

    Anything that is not a finite number becomes 0.0 so that a
    receipt always renders, even from degraded input.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "")
        if text == "":
            return 0.0
        try:
            number = float(text)
        except ValueError:
            logger.debug("Unparseable numeric input %r treated as zero", value)
            return 0.0

    if not math.isfinite(number):
        logger.debug("Non-finite numeric input %r treated as zero", value)
        return 0.0
    return number


def round_amount(value: float) -> int:
    """Round to the nearest whole unit, halves away from zero"""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def group_indian(number: int) -> str:
    """Group digits the Indian way (12,34,567)"""
    sign = "-" if number < 0 else ""
    digits = str(abs(number))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups) + "," + tail


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format a money figure as e.g. ``Rs.32,033``"""
    rounded = round_amount(amount)
    if rounded < 0:
        return f"-{symbol}{group_indian(-rounded)}"
    return f"{symbol}{group_indian(rounded)}"


def format_signed_currency(
    amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL
) -> str:
    """
    Format a settlement figure

    A negative amount is a credit owed to the customer and is shown
    as its absolute value with a ``(CR)`` suffix.
    """
    rounded = round_amount(amount)
    if rounded < 0:
        return f"{symbol}{group_indian(-rounded)} (CR)"
    return f"{symbol}{group_indian(rounded)}"


def format_weight(grams: float, unit: str = "g") -> str:
    """Format a weight with three decimals"""
    return f"{grams:.3f}{unit}"


def format_plain(value: float) -> str:
    """Format a configured figure (rate, wastage, charge) without noise"""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.6f}".rstrip("0").rstrip(".")
