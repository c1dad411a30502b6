"""Data models for case financial and deadline calculations."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_ATTORNEY_FEE_PERCENTAGE = 33.33


class AlertTier(str, Enum):
    """Urgency of a statute-of-limitations deadline, most urgent first."""

    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    CAUTION = "caution"
    NONE = "none"


@dataclass(frozen=True)
class MedicalBillLine:
    """A single medical bill as recorded against a provider.

    Missing amounts are treated as zero by the calculations.
    """

    amount_billed: Optional[float] = None
    insurance_paid: Optional[float] = None
    insurance_adjusted: Optional[float] = None
    medpay_paid: Optional[float] = None
    patient_paid: Optional[float] = None
    reduction_amount: Optional[float] = None
    client_id: Optional[int] = None
    provider_id: Optional[int] = None


@dataclass(frozen=True)
class LiabilityShare:
    """Percentage of fault assigned to one defendant."""

    defendant_id: int
    percentage: Optional[float] = None
    defendant_name: Optional[str] = None


@dataclass(frozen=True)
class LiabilityCheck:
    """Advisory result of summing a case's liability shares."""

    total: float
    is_valid: bool
    delta: float

    @property
    def is_over(self) -> bool:
        return not self.is_valid and self.delta > 0

    @property
    def is_under(self) -> bool:
        return not self.is_valid and self.delta < 0


@dataclass(frozen=True)
class SettlementInput:
    """Everything needed to split a settlement between defendants."""

    total_settlement: float
    attorney_fee_percentage: float = DEFAULT_ATTORNEY_FEE_PERCENTAGE
    case_expenses: float = 0.0
    medical_liens: float = 0.0
    shares: List[LiabilityShare] = field(default_factory=list)


@dataclass(frozen=True)
class SettlementAllocation:
    """One defendant's portion of a settlement."""

    defendant_id: int
    liability_percentage: float
    gross_amount: float
    attorney_fee: float
    case_expenses: float
    medical_liens: float
    net_amount: float
    defendant_name: Optional[str] = None


@dataclass(frozen=True)
class SettlementTotals:
    """Case-level sums across all allocations."""

    gross: float = 0.0
    attorney_fee: float = 0.0
    case_expenses: float = 0.0
    medical_liens: float = 0.0
    client_net: float = 0.0


@dataclass(frozen=True)
class SettlementDistribution:
    """Full settlement breakdown for a case."""

    total_settlement: float
    attorney_fee_percentage: float
    allocations: List[SettlementAllocation]
    totals: SettlementTotals


@dataclass(frozen=True)
class DeadlineStatus:
    """Days until the statute deadline and the resulting alert tier."""

    days_remaining: Optional[int]
    tier: AlertTier


@dataclass(frozen=True)
class MedicalTotals:
    """Aggregated medical bill figures for a case or a single client."""

    total_billed: float = 0.0
    total_paid: float = 0.0
    total_adjusted: float = 0.0
    total_balance: float = 0.0
    bill_count: int = 0


@dataclass(frozen=True)
class CaseSummary:
    """Combined financial and deadline picture for one case."""

    medical_liens: float
    medical_totals: MedicalTotals
    liability: LiabilityCheck
    distribution: Optional[SettlementDistribution]
    deadline: DeadlineStatus
    days_open: int
    anomalies: List[str] = field(default_factory=list)


__all__ = [
    "DEFAULT_ATTORNEY_FEE_PERCENTAGE",
    "AlertTier",
    "MedicalBillLine",
    "LiabilityShare",
    "LiabilityCheck",
    "SettlementInput",
    "SettlementAllocation",
    "SettlementTotals",
    "SettlementDistribution",
    "DeadlineStatus",
    "MedicalTotals",
    "CaseSummary",
]
