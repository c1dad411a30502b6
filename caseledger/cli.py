"""Command line interface for case financial summaries."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Any, Dict

from caseledger.adapters import case_from_record
from caseledger.calculations import CaseCalculator, to_cents
from caseledger.config import get_settings
from caseledger.models import CaseSummary
from caseledger.rendering.summary import render_distribution_summary

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal-injury case settlement and deadline calculator")
    parser.add_argument("case", type=Path, help="Case record JSON file")
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        help="Evaluate deadlines as of this date (YYYY-MM-DD), default is the current date",
    )
    parser.add_argument("--text", action="store_true", help="Print the settlement distribution summary")
    parser.add_argument("--fee", type=float, help="Override the attorney fee percentage")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


_MONEY_FIELDS = frozenset(
    {
        "medical_liens",
        "total_billed",
        "total_paid",
        "total_adjusted",
        "total_balance",
        "total_settlement",
        "gross",
        "gross_amount",
        "attorney_fee",
        "case_expenses",
        "net_amount",
        "client_net",
    }
)


def _round_money(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: str(to_cents(item)) if key in _MONEY_FIELDS else _round_money(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_round_money(item) for item in value]
    return value


def summary_to_dict(summary: CaseSummary) -> Dict[str, Any]:
    """JSON-ready view of a summary with money rounded to cents."""
    payload = _round_money(asdict(summary))
    payload["deadline"]["tier"] = summary.deadline.tier.value
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    settings = get_settings()
    try:
        record = json.loads(args.case.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        LOGGER.error("Cannot read case record %s: %s", args.case, exc)
        return 2
    if not isinstance(record, dict):
        LOGGER.error("Case record %s must be a JSON object", args.case)
        return 2

    calculator = CaseCalculator.from_settings(settings)
    case = case_from_record(record)
    if args.fee is not None:
        case.attorney_fee_percentage = args.fee
    summary = calculator.summarize(today=args.today or date.today(), **case.as_kwargs())

    if args.text:
        if summary.distribution is None:
            LOGGER.warning("No settlement amount on record; nothing to distribute")
            return 1
        sys.stdout.write(render_distribution_summary(summary.distribution, summary.liability, settings))
    else:
        sys.stdout.write(json.dumps(summary_to_dict(summary), indent=2) + "\n")
    for anomaly in summary.anomalies:
        LOGGER.warning(anomaly)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
