from datetime import date, datetime, timedelta

import pytest

from caseledger.calculations import (
    AlertThresholds,
    classify_deadline,
    days_open,
    has_statute_alert,
    statute_deadline_for,
)
from caseledger.models import AlertTier

TODAY = date(2026, 10, 18)

URGENCY = [AlertTier.EXPIRED, AlertTier.CRITICAL, AlertTier.WARNING, AlertTier.CAUTION, AlertTier.NONE]


@pytest.mark.parametrize(
    "offset, tier",
    [
        (-1, AlertTier.EXPIRED),
        (0, AlertTier.EXPIRED),
        (1, AlertTier.CRITICAL),
        (15, AlertTier.CRITICAL),
        (30, AlertTier.CRITICAL),
        (31, AlertTier.WARNING),
        (45, AlertTier.WARNING),
        (90, AlertTier.WARNING),
        (91, AlertTier.CAUTION),
        (180, AlertTier.CAUTION),
        (181, AlertTier.NONE),
        (730, AlertTier.NONE),
    ],
)
def test_tier_boundaries(offset: int, tier: AlertTier) -> None:
    status = classify_deadline(TODAY + timedelta(days=offset), TODAY)
    assert status.days_remaining == offset
    assert status.tier is tier


def test_tiers_get_less_urgent_as_deadline_moves_out() -> None:
    ranks = [
        URGENCY.index(classify_deadline(TODAY + timedelta(days=offset), TODAY).tier)
        for offset in range(-20, 400)
    ]
    assert ranks == sorted(ranks)


def test_iso_string_deadline() -> None:
    status = classify_deadline("2026-11-02", TODAY)
    assert status.days_remaining == 15
    assert status.tier is AlertTier.CRITICAL


def test_partial_days_floor() -> None:
    status = classify_deadline(date(2026, 10, 20), datetime(2026, 10, 18, 12, 0))
    assert status.days_remaining == 1
    late = classify_deadline(datetime(2026, 10, 18, 11, 0), datetime(2026, 10, 18, 12, 0))
    assert late.days_remaining == -1
    assert late.tier is AlertTier.EXPIRED


@pytest.mark.parametrize("deadline", [None, "", "not a date", "2026-13-45"])
def test_unusable_deadline_means_no_alert(deadline: object) -> None:
    status = classify_deadline(deadline, TODAY)  # type: ignore[arg-type]
    assert status.days_remaining is None
    assert status.tier is AlertTier.NONE


def test_custom_thresholds() -> None:
    thresholds = AlertThresholds(critical=10, warning=20, caution=40)
    assert classify_deadline(TODAY + timedelta(days=15), TODAY, thresholds).tier is AlertTier.WARNING
    assert classify_deadline(TODAY + timedelta(days=60), TODAY, thresholds).tier is AlertTier.NONE


def test_days_open() -> None:
    assert days_open("2026-10-01", TODAY) == 17
    assert days_open(date(2025, 10, 18), TODAY) == 365


@pytest.mark.parametrize("sign_up", [None, "", "garbage", "2026-12-01"])
def test_days_open_defaults_to_zero(sign_up: object) -> None:
    assert days_open(sign_up, TODAY) == 0  # type: ignore[arg-type]


def test_us_formatted_dates_are_accepted() -> None:
    assert days_open("10/01/2026", TODAY) == 17


def test_statute_deadline_two_years_after_accident() -> None:
    assert statute_deadline_for("2025-05-10") == date(2027, 5, 10)
    assert statute_deadline_for(date(2024, 2, 29)) == date(2026, 3, 1)
    assert statute_deadline_for("2025-05-10", years=3) == date(2028, 5, 10)
    assert statute_deadline_for(None) is None


def test_statute_alert_flag() -> None:
    assert has_statute_alert(-5)
    assert has_statute_alert(90)
    assert not has_statute_alert(91)
    assert not has_statute_alert(None)
