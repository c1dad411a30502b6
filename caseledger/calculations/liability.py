"""Liability share validation for multi-defendant cases."""
from __future__ import annotations

from typing import Sequence

from caseledger.calculations.money import parse_amount
from caseledger.models import LiabilityCheck, LiabilityShare

DEFAULT_TOLERANCE = 0.01


def resolve_percentage(share: LiabilityShare, share_count: int) -> float:
    """Percentage for ``share``; an absent value means an even split."""
    if share.percentage is None:
        return 100.0 / share_count if share_count else 0.0
    return parse_amount(share.percentage)


def validate_liability(
    shares: Sequence[LiabilityShare], *, tolerance: float = DEFAULT_TOLERANCE
) -> LiabilityCheck:
    """Sum the shares and report how far they are from 100%.

    The shares are not modified or rejected; callers decide whether an
    invalid split should block anything.
    """
    count = len(shares)
    total = sum((resolve_percentage(share, count) for share in shares), 0.0)
    delta = total - 100.0
    return LiabilityCheck(total=total, is_valid=abs(delta) <= tolerance, delta=delta)


__all__ = ["DEFAULT_TOLERANCE", "resolve_percentage", "validate_liability"]
