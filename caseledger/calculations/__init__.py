"""Pure financial and deadline calculations for personal-injury cases."""

from .deadlines import (
    AlertThresholds,
    classify_deadline,
    days_open,
    has_statute_alert,
    statute_deadline_for,
)
from .engine import CaseCalculator
from .liability import validate_liability
from .liens import aggregate_liens, balance_due, medical_totals
from .money import parse_amount, to_cents
from .settlement import distribute

__all__ = [
    "AlertThresholds",
    "CaseCalculator",
    "aggregate_liens",
    "balance_due",
    "classify_deadline",
    "days_open",
    "distribute",
    "has_statute_alert",
    "medical_totals",
    "parse_amount",
    "statute_deadline_for",
    "to_cents",
    "validate_liability",
]
