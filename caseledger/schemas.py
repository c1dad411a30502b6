"""Pydantic schemas for the case calculation API."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from caseledger.calculations.money import parse_amount
from caseledger.models import AlertTier


def _lenient_amount(value: Any) -> float:
    return parse_amount(value)


def _lenient_optional(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_amount(value)


class MedicalBillModel(BaseModel):
    amount_billed: Optional[float] = None
    insurance_paid: Optional[float] = None
    insurance_adjusted: Optional[float] = None
    medpay_paid: Optional[float] = None
    patient_paid: Optional[float] = None
    reduction_amount: Optional[float] = None
    client_id: Optional[int] = None
    provider_id: Optional[int] = None

    @field_validator(
        "amount_billed",
        "insurance_paid",
        "insurance_adjusted",
        "medpay_paid",
        "patient_paid",
        "reduction_amount",
        mode="before",
    )
    @classmethod
    def _normalize_amount(cls, value: Any) -> Optional[float]:
        return _lenient_optional(value)


class LiabilityShareModel(BaseModel):
    defendant_id: int
    percentage: Optional[float] = Field(default=None, description="Percent of fault, blank for an even split")
    defendant_name: Optional[str] = None

    @field_validator("percentage", mode="before")
    @classmethod
    def _normalize_percentage(cls, value: Any) -> Optional[float]:
        return _lenient_optional(value)


class LiensRequest(BaseModel):
    bills: List[MedicalBillModel] = Field(default_factory=list)


class MedicalTotalsResponse(BaseModel):
    total_billed: Decimal
    total_paid: Decimal
    total_adjusted: Decimal
    total_balance: Decimal
    bill_count: int


class LiensResponse(BaseModel):
    medical_liens: Decimal
    balances: List[Decimal]
    totals: MedicalTotalsResponse


class LiabilityRequest(BaseModel):
    shares: List[LiabilityShareModel] = Field(default_factory=list)


class LiabilityResponse(BaseModel):
    total: float
    is_valid: bool
    delta: float
    is_over: bool
    is_under: bool


class SettlementRequest(BaseModel):
    total_settlement: float = 0.0
    attorney_fee_percentage: Optional[float] = Field(
        default=None, description="Defaults to the firm's configured rate"
    )
    case_expenses: float = 0.0
    medical_liens: float = 0.0
    shares: List[LiabilityShareModel] = Field(default_factory=list)

    @field_validator("total_settlement", "case_expenses", "medical_liens", mode="before")
    @classmethod
    def _normalize_amount(cls, value: Any) -> float:
        return _lenient_amount(value)

    @field_validator("attorney_fee_percentage", mode="before")
    @classmethod
    def _normalize_rate(cls, value: Any) -> Optional[float]:
        return _lenient_optional(value)


class AllocationResponse(BaseModel):
    defendant_id: int
    defendant_name: Optional[str] = None
    liability_percentage: float
    gross_amount: Decimal
    attorney_fee: Decimal
    case_expenses: Decimal
    medical_liens: Decimal
    net_amount: Decimal


class SettlementTotalsResponse(BaseModel):
    gross: Decimal
    attorney_fee: Decimal
    case_expenses: Decimal
    medical_liens: Decimal
    client_net: Decimal


class SettlementResponse(BaseModel):
    total_settlement: Decimal
    attorney_fee_percentage: float
    allocations: List[AllocationResponse]
    totals: SettlementTotalsResponse
    liability: LiabilityResponse


class DeadlineRequest(BaseModel):
    statute_deadline: Optional[str] = None
    accident_date: Optional[str] = None
    sign_up_date: Optional[str] = None
    today: Optional[date] = None


class DeadlineResponse(BaseModel):
    days_remaining: Optional[int] = None
    tier: AlertTier
    has_alert: bool
    days_open: int


class CaseSummaryRequest(BaseModel):
    record: Dict[str, Any] = Field(default_factory=dict, description="Case record as stored by the CRM")
    today: Optional[date] = None


class CaseSummaryResponse(BaseModel):
    medical_liens: Decimal
    medical_totals: MedicalTotalsResponse
    liability: LiabilityResponse
    settlement: Optional[SettlementResponse] = None
    deadline: DeadlineResponse
    anomalies: List[str] = Field(default_factory=list)
