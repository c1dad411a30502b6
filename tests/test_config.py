import pytest
from pydantic import ValidationError

from caseledger.config import AppSettings, get_settings


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.attorney_fee_percentage == pytest.approx(33.33)
    assert (settings.critical_days, settings.warning_days, settings.caution_days) == (30, 90, 180)
    assert settings.statute_years == 2
    assert (settings.template_dir / "distribution_summary.txt.j2").exists()


def test_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ATTORNEY_FEE_PERCENTAGE", "40")
    monkeypatch.setenv("CAUTION_DAYS", "365")
    settings = AppSettings()
    assert settings.attorney_fee_percentage == 40.0
    assert settings.caution_days == 365


def test_thresholds_must_increase() -> None:
    with pytest.raises(ValidationError):
        AppSettings(critical_days=100, warning_days=90)


def test_fee_must_be_a_percentage() -> None:
    with pytest.raises(ValidationError):
        AppSettings(attorney_fee_percentage=120)


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
