"""FastAPI application exposing the case calculations."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI

from caseledger.adapters import case_from_record
from caseledger.calculations import (
    CaseCalculator,
    aggregate_liens,
    balance_due,
    has_statute_alert,
    medical_totals,
    to_cents,
)
from caseledger.config import AppSettings, get_settings
from caseledger.models import (
    DeadlineStatus,
    LiabilityCheck,
    LiabilityShare,
    MedicalBillLine,
    MedicalTotals,
    SettlementDistribution,
)
from caseledger.schemas import (
    AllocationResponse,
    CaseSummaryRequest,
    CaseSummaryResponse,
    DeadlineRequest,
    DeadlineResponse,
    LiabilityRequest,
    LiabilityResponse,
    LiabilityShareModel,
    LiensRequest,
    LiensResponse,
    MedicalTotalsResponse,
    SettlementRequest,
    SettlementResponse,
    SettlementTotalsResponse,
)

_settings = get_settings()

app = FastAPI(title=_settings.app_name, version="0.1.0")


def get_calculator(settings: AppSettings = Depends(get_settings)) -> CaseCalculator:
    return CaseCalculator.from_settings(settings)


@app.get("/api/health")
def health(settings: AppSettings = Depends(get_settings)) -> Dict[str, str]:
    return {"status": "ok", "app": settings.app_name}


@app.post("/api/liens", response_model=LiensResponse)
def liens(payload: LiensRequest) -> LiensResponse:
    bills = [MedicalBillLine(**bill.model_dump()) for bill in payload.bills]
    return LiensResponse(
        medical_liens=_quantize_decimal(aggregate_liens(bills)),
        balances=[_quantize_decimal(balance_due(bill)) for bill in bills],
        totals=_medical_totals_response(medical_totals(bills)),
    )


@app.post("/api/liability", response_model=LiabilityResponse)
def liability(
    payload: LiabilityRequest,
    calculator: CaseCalculator = Depends(get_calculator),
) -> LiabilityResponse:
    return _liability_response(calculator.check_liability(_shares(payload.shares)))


@app.post("/api/settlement", response_model=SettlementResponse)
def settlement(
    payload: SettlementRequest,
    calculator: CaseCalculator = Depends(get_calculator),
) -> SettlementResponse:
    shares = _shares(payload.shares)
    distribution = calculator.distribute(
        total_settlement=payload.total_settlement,
        shares=shares,
        case_expenses=payload.case_expenses,
        medical_liens=payload.medical_liens,
        attorney_fee_percentage=payload.attorney_fee_percentage,
    )
    return _settlement_response(distribution, calculator.check_liability(shares))


@app.post("/api/deadline", response_model=DeadlineResponse)
def deadline(
    payload: DeadlineRequest,
    calculator: CaseCalculator = Depends(get_calculator),
) -> DeadlineResponse:
    today = payload.today or date.today()
    status = calculator.deadline_status(
        today,
        statute_deadline=payload.statute_deadline,
        accident_date=payload.accident_date,
    )
    return _deadline_response(status, calculator, calculator.days_open(payload.sign_up_date, today))


@app.post("/api/cases/summary", response_model=CaseSummaryResponse)
def case_summary(
    payload: CaseSummaryRequest,
    calculator: CaseCalculator = Depends(get_calculator),
) -> CaseSummaryResponse:
    record = case_from_record(payload.record)
    summary = calculator.summarize(today=payload.today or date.today(), **record.as_kwargs())
    liability_response = _liability_response(summary.liability)
    return CaseSummaryResponse(
        medical_liens=_quantize_decimal(summary.medical_liens),
        medical_totals=_medical_totals_response(summary.medical_totals),
        liability=liability_response,
        settlement=(
            _settlement_response(summary.distribution, summary.liability)
            if summary.distribution is not None
            else None
        ),
        deadline=_deadline_response(summary.deadline, calculator, summary.days_open),
        anomalies=summary.anomalies,
    )


def _shares(models: List[LiabilityShareModel]) -> List[LiabilityShare]:
    return [LiabilityShare(**model.model_dump()) for model in models]


def _medical_totals_response(totals: MedicalTotals) -> MedicalTotalsResponse:
    return MedicalTotalsResponse(
        total_billed=_quantize_decimal(totals.total_billed),
        total_paid=_quantize_decimal(totals.total_paid),
        total_adjusted=_quantize_decimal(totals.total_adjusted),
        total_balance=_quantize_decimal(totals.total_balance),
        bill_count=totals.bill_count,
    )


def _liability_response(check: LiabilityCheck) -> LiabilityResponse:
    return LiabilityResponse(
        total=check.total,
        is_valid=check.is_valid,
        delta=check.delta,
        is_over=check.is_over,
        is_under=check.is_under,
    )


def _settlement_response(
    distribution: SettlementDistribution, check: LiabilityCheck
) -> SettlementResponse:
    return SettlementResponse(
        total_settlement=_quantize_decimal(distribution.total_settlement),
        attorney_fee_percentage=distribution.attorney_fee_percentage,
        allocations=[
            AllocationResponse(
                defendant_id=alloc.defendant_id,
                defendant_name=alloc.defendant_name,
                liability_percentage=alloc.liability_percentage,
                gross_amount=_quantize_decimal(alloc.gross_amount),
                attorney_fee=_quantize_decimal(alloc.attorney_fee),
                case_expenses=_quantize_decimal(alloc.case_expenses),
                medical_liens=_quantize_decimal(alloc.medical_liens),
                net_amount=_quantize_decimal(alloc.net_amount),
            )
            for alloc in distribution.allocations
        ],
        totals=SettlementTotalsResponse(
            gross=_quantize_decimal(distribution.totals.gross),
            attorney_fee=_quantize_decimal(distribution.totals.attorney_fee),
            case_expenses=_quantize_decimal(distribution.totals.case_expenses),
            medical_liens=_quantize_decimal(distribution.totals.medical_liens),
            client_net=_quantize_decimal(distribution.totals.client_net),
        ),
        liability=_liability_response(check),
    )


def _deadline_response(
    status: DeadlineStatus, calculator: CaseCalculator, days_open: Optional[int]
) -> DeadlineResponse:
    return DeadlineResponse(
        days_remaining=status.days_remaining,
        tier=status.tier,
        has_alert=has_statute_alert(status.days_remaining, calculator.thresholds),
        days_open=days_open or 0,
    )


def _quantize_decimal(value: float) -> Decimal:
    return to_cents(value)


__all__ = ["app"]
