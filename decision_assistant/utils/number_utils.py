"""Numeric safety and money formatting utilities"""

import math
from typing import Optional


def finite_or_none(value: float) -> Optional[float]:
    """Return value as float if it is a finite number, otherwise None"""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def round_money(value: Optional[float]) -> Optional[float]:
    """Round a money amount to cents, keeping None untouched"""
    if value is None:
        return None
    return round(value, 2)


def format_currency(value: Optional[float], symbol: str = "R$") -> str:
    """
    Format a money amount with Brazilian separators.

    Example:
        58912.5 → "R$ 58.912,50"
        None    → "n/a"
    """
    if value is None:
        return "n/a"
    sign = "-" if value < 0 else ""
    # Swap separators from 58,912.50 to 58.912,50
    formatted = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{symbol} {formatted}"
