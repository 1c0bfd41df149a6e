"""Cost normalization.

The backend reports session cost as a bare number, a display string such as
"125.50 ₴", or an object carrying amount/value/currency. Everything here
reduces those shapes to one number and never raises.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from clubdesk.config import get_settings

Cost = int | float | str | Mapping[str, Any]

# Everything except ASCII digits, dot and minus
_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _get_part(cost: Any, name: str) -> Any:
    if isinstance(cost, Mapping):
        return cost.get(name)
    return getattr(cost, name, None)


def parse_cost(cost: Cost) -> int | float:
    """Parse cost from any of its accepted shapes to a number.

    Args:
        cost: Number, numeric string (currency labels and spaces are ignored),
            or an object with amount/value fields

    Returns:
        The number as-is, the cleaned string's value, amount, then value,
        or 0 when nothing numeric is found
    """
    if _is_number(cost):
        return cost

    if isinstance(cost, str):
        cleaned = _NON_NUMERIC.sub("", cost)
        try:
            number = float(cleaned)
        except ValueError:
            return 0
        if not math.isfinite(number) or number == 0:
            return 0
        return number

    if cost is None:
        return 0

    for name in ("amount", "value"):
        part = _get_part(cost, name)
        if _is_number(part):
            return part

    return 0


def format_cost_number(cost: Cost, decimals: int | None = None) -> str:
    """Format cost as a fixed-decimal number without currency label."""
    if decimals is None:
        decimals = get_settings().currency_decimals
    return f"{parse_cost(cost):.{decimals}f}"


def format_currency(cost: Cost, currency: str | None = None, decimals: int | None = None) -> str:
    """Format cost as a currency string, e.g. "125.50 ₴".

    Args:
        cost: Cost in any accepted shape
        currency: Currency label (defaults to settings.currency_symbol)
        decimals: Decimal places (defaults to settings.currency_decimals)
    """
    if currency is None:
        currency = get_settings().currency_symbol
    return f"{format_cost_number(cost, decimals)} {currency}"
