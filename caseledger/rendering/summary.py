"""Text rendering of settlement distributions."""
from __future__ import annotations

from functools import partial
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from caseledger.config import AppSettings, get_settings
from caseledger.formatting import format_currency, format_percentage
from caseledger.models import LiabilityCheck, SettlementDistribution

SUMMARY_TEMPLATE = "distribution_summary.txt.j2"


def _build_environment(settings: AppSettings) -> Environment:
    loader = FileSystemLoader(str(settings.template_dir))
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = partial(format_currency, symbol=settings.currency_symbol)
    env.filters["percent"] = format_percentage
    return env


def render_distribution_summary(
    distribution: SettlementDistribution,
    liability: Optional[LiabilityCheck] = None,
    settings: Optional[AppSettings] = None,
) -> str:
    settings = settings or get_settings()
    env = _build_environment(settings)
    template = env.get_template(SUMMARY_TEMPLATE)
    return template.render(distribution=distribution, liability=liability)


__all__ = ["render_distribution_summary"]
