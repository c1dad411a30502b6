"""Lenient money parsing and display rounding."""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

LOGGER = logging.getLogger(__name__)

Amount = Union[Decimal, float, int, str, None]

_CENT = Decimal("0.01")


def parse_amount(value: Amount) -> float:
    """Return ``value`` as a float, treating anything unusable as zero.

    Accepts numbers and strings such as ``"$1,250.00"`` or ``"(40.00)"``
    (accounting negative). ``None``, blanks, NaN, infinities and text that
    is not a number all become ``0.0``.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    else:
        cleaned = str(value).replace("$", "").replace(",", "").strip()
        if cleaned == "":
            return 0.0
        multiplier = -1.0 if cleaned.startswith("(") and cleaned.endswith(")") else 1.0
        cleaned = cleaned.strip("()")
        try:
            number = float(cleaned) * multiplier
        except ValueError:
            LOGGER.debug("Failed to parse amount: %r", value)
            return 0.0
    if not math.isfinite(number):
        LOGGER.debug("Discarding non-finite amount: %r", value)
        return 0.0
    return number


def to_cents(value: Amount) -> Decimal:
    """Round a computed amount to cents for display."""
    if isinstance(value, Decimal) and value.is_finite():
        amount = value
    else:
        amount = Decimal(str(parse_amount(value)))
    return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


__all__ = ["Amount", "parse_amount", "to_cents"]
