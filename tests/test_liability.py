import pytest

from caseledger.calculations import validate_liability
from caseledger.models import LiabilityShare


def test_full_allocation_is_valid() -> None:
    check = validate_liability([LiabilityShare(1, 60.0), LiabilityShare(2, 40.0)])
    assert check.is_valid
    assert check.total == pytest.approx(100.0)
    assert check.delta == pytest.approx(0.0)
    assert not check.is_over and not check.is_under


def test_under_allocation_reports_negative_delta() -> None:
    check = validate_liability([LiabilityShare(1, 70.0), LiabilityShare(2, 20.0)])
    assert not check.is_valid
    assert check.delta == pytest.approx(-10.0)
    assert check.is_under


def test_over_allocation_reports_positive_delta() -> None:
    check = validate_liability([LiabilityShare(1, 80.0), LiabilityShare(2, 30.0)])
    assert not check.is_valid
    assert check.delta == pytest.approx(10.0)
    assert check.is_over


def test_thirds_fall_within_tolerance() -> None:
    shares = [LiabilityShare(1, 33.33), LiabilityShare(2, 33.33), LiabilityShare(3, 33.34)]
    assert validate_liability(shares).is_valid


def test_missing_percentages_split_evenly() -> None:
    check = validate_liability([LiabilityShare(1), LiabilityShare(2), LiabilityShare(3)])
    assert check.total == pytest.approx(100.0)
    assert check.is_valid


def test_zero_percentage_is_kept() -> None:
    check = validate_liability([LiabilityShare(1, 100.0), LiabilityShare(2, 0.0)])
    assert check.total == pytest.approx(100.0)
    assert check.is_valid


def test_custom_tolerance() -> None:
    shares = [LiabilityShare(1, 99.5)]
    assert not validate_liability(shares).is_valid
    assert validate_liability(shares, tolerance=1.0).is_valid


def test_shares_are_not_modified() -> None:
    shares = [LiabilityShare(1, 70.0), LiabilityShare(2, None)]
    validate_liability(shares)
    assert shares == [LiabilityShare(1, 70.0), LiabilityShare(2, None)]


def test_no_shares() -> None:
    check = validate_liability([])
    assert check.total == 0.0
    assert check.delta == pytest.approx(-100.0)
    assert not check.is_valid
