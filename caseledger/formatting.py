"""Display helpers for money and percentages."""
from __future__ import annotations

import re

from caseledger.calculations.money import Amount, parse_amount, to_cents

_NON_NUMERIC = re.compile(r"[^0-9.]")


def format_currency(amount: Amount, symbol: str = "$") -> str:
    """Render ``amount`` as ``$1,234.56``; missing values show as zero."""
    cents = to_cents(amount)
    sign = "-" if cents < 0 else ""
    return f"{sign}{symbol}{abs(cents):,.2f}"


def format_percentage(value: Amount) -> str:
    """Render a percentage without trailing zeros, e.g. ``33.33%`` or ``60%``."""
    text = f"{parse_amount(value):.2f}".rstrip("0").rstrip(".")
    return f"{text}%"


def parse_currency_input(value: str) -> float:
    """Read a typed dollar amount, ignoring symbols and separators."""
    cleaned = _NON_NUMERIC.sub("", value or "")
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


__all__ = ["format_currency", "format_percentage", "parse_currency_input"]
