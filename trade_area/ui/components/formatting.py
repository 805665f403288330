"""
Utility helpers for formatting numeric values, currency strings, and percentages.
"""

from __future__ import annotations

from typing import Optional

CURRENCY_SYMBOL = "$"


def _plain(value: float) -> str:
    # 33.0 -> "33", 44.2 -> "44.2"
    return f"{value:g}"


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def format_plain(value: Optional[float]) -> str:
    """Render a figure as recorded, without padding trailing zeros."""
    if value is None:
        return "–"
    try:
        return _plain(float(value))
    except (TypeError, ValueError):
        return "–"


def format_currency(
    value: Optional[float],
    symbol: str = CURRENCY_SYMBOL,
    decimals: int = 0,
) -> str:
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"
    return f"{symbol}{numeric:,.{decimals}f}"


def format_thousands(value: Optional[float], symbol: str = CURRENCY_SYMBOL) -> str:
    """Whole thousands of dollars, e.g. 64408 -> "$64k"."""
    if value is None:
        return "–"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return "–"
    return f"{symbol}{numeric / 1000:,.0f}k"


def format_percent(value: Optional[float], decimals: Optional[int] = None) -> str:
    if value is None:
        return "–"
    try:
        if decimals is None:
            return f"{_plain(float(value))}%"
        return f"{value:.{decimals}f}%"
    except (TypeError, ValueError):
        return "–"
