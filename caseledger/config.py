"""Application configuration using pydantic-settings."""
from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from caseledger.models import DEFAULT_ATTORNEY_FEE_PERCENTAGE

_PACKAGE_DIR = Path(__file__).resolve().parent


class AppSettings(BaseSettings):
    """Business constants the host firm can tune per deployment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Case Ledger")
    currency_symbol: str = Field(default="$", min_length=1, max_length=3)
    attorney_fee_percentage: float = Field(default=DEFAULT_ATTORNEY_FEE_PERCENTAGE, ge=0, le=100)
    critical_days: int = Field(default=30, ge=1)
    warning_days: int = Field(default=90, ge=1)
    caution_days: int = Field(default=180, ge=1)
    statute_years: int = Field(default=2, ge=1)
    liability_tolerance: float = Field(
        default=0.01,
        ge=0,
        description="Allowed distance from 100% before a liability split is flagged.",
    )
    template_dir: Path = Field(default=_PACKAGE_DIR / "templates")

    @field_validator("currency_symbol")
    @classmethod
    def _strip_symbol(cls, value: str) -> str:
        return value.strip() or "$"

    @model_validator(mode="after")
    def _thresholds_increase(self) -> "AppSettings":
        if not self.critical_days < self.warning_days < self.caution_days:
            raise ValueError(
                "Alert thresholds must increase: "
                f"critical={self.critical_days} warning={self.warning_days} caution={self.caution_days}"
            )
        return self


_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Return a cached instance of the application settings."""

    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


__all__ = ["AppSettings", "get_settings"]
