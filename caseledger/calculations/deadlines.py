"""Statute-of-limitations deadlines, alert tiers and case age."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union

from caseledger.models import AlertTier, DeadlineStatus

LOGGER = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]

_FALLBACK_DATE_FORMATS = ("%m/%d/%Y", "%m-%d-%Y", "%Y/%m/%d")
_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class AlertThresholds:
    """Upper bounds (in days remaining) for each alert tier."""

    critical: int = 30
    warning: int = 90
    caution: int = 180


DEFAULT_THRESHOLDS = AlertThresholds()


def parse_date(value: DateLike) -> Optional[datetime]:
    """Coerce a date, datetime or date string into a datetime, or ``None``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    LOGGER.debug("Unparsable date: %r", value)
    return None


def _align(first: datetime, second: datetime) -> Tuple[datetime, datetime]:
    # Subtracting naive from aware datetimes raises; compare wall-clock times instead.
    if (first.tzinfo is None) != (second.tzinfo is None):
        return first.replace(tzinfo=None), second.replace(tzinfo=None)
    return first, second


def _whole_days(start: datetime, end: datetime) -> int:
    start, end = _align(start, end)
    return (end - start) // _ONE_DAY


def classify_days(days_remaining: int, thresholds: AlertThresholds = DEFAULT_THRESHOLDS) -> AlertTier:
    if days_remaining <= 0:
        return AlertTier.EXPIRED
    if days_remaining <= thresholds.critical:
        return AlertTier.CRITICAL
    if days_remaining <= thresholds.warning:
        return AlertTier.WARNING
    if days_remaining <= thresholds.caution:
        return AlertTier.CAUTION
    return AlertTier.NONE


def classify_deadline(
    statute_deadline: DateLike,
    today: Union[date, datetime],
    thresholds: AlertThresholds = DEFAULT_THRESHOLDS,
) -> DeadlineStatus:
    """Days left until ``statute_deadline`` and how urgent that is.

    A missing or unreadable deadline yields ``days_remaining=None`` with no
    alert, since in-progress intakes often have no deadline yet.
    """
    deadline = parse_date(statute_deadline)
    reference = parse_date(today)
    if deadline is None and statute_deadline is not None and str(statute_deadline).strip():
        LOGGER.warning("Invalid statute deadline date: %r", statute_deadline)
    if deadline is None or reference is None:
        return DeadlineStatus(days_remaining=None, tier=AlertTier.NONE)
    days_remaining = _whole_days(reference, deadline)
    return DeadlineStatus(days_remaining=days_remaining, tier=classify_days(days_remaining, thresholds))


def days_open(sign_up_date: DateLike, today: Union[date, datetime]) -> int:
    """Whole days since the client signed up; zero if unknown or in the future."""
    signed_up = parse_date(sign_up_date)
    reference = parse_date(today)
    if signed_up is None or reference is None:
        return 0
    return max(0, _whole_days(signed_up, reference))


def statute_deadline_for(accident_date: DateLike, years: int = 2) -> Optional[date]:
    """Filing deadline ``years`` after the accident; 29 February rolls to 1 March."""
    accident = parse_date(accident_date)
    if accident is None:
        return None
    day = accident.date()
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return date(day.year + years, 3, 1)


def has_statute_alert(
    days_remaining: Optional[int], thresholds: AlertThresholds = DEFAULT_THRESHOLDS
) -> bool:
    """True when a known deadline has expired or falls inside the warning window."""
    if days_remaining is None:
        return False
    return days_remaining <= thresholds.warning


__all__ = [
    "AlertThresholds",
    "DEFAULT_THRESHOLDS",
    "DateLike",
    "parse_date",
    "classify_days",
    "classify_deadline",
    "days_open",
    "statute_deadline_for",
    "has_statute_alert",
]
