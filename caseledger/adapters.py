"""Normalize loosely-typed case records into calculation inputs.

Records reach us from the intake forms and the database with either
camelCase or snake_case keys and with amounts as numbers or strings. All of
that tolerance lives here so the calculations only see typed models.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from caseledger.calculations.money import parse_amount
from caseledger.models import LiabilityShare, MedicalBillLine

LOGGER = logging.getLogger(__name__)

FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "amount_billed": ("amount_billed", "amountBilled", "total_billed", "totalBilled"),
    "insurance_paid": ("insurance_paid", "insurancePaid"),
    "insurance_adjusted": ("insurance_adjusted", "insuranceAdjusted"),
    "medpay_paid": ("medpay_paid", "medpayPaid"),
    "patient_paid": ("patient_paid", "patientPaid"),
    "reduction_amount": ("reduction_amount", "reductionAmount"),
    "client_id": ("client_id", "clientId"),
    "provider_id": ("provider_id", "providerId", "medical_provider_id", "medicalProviderId"),
    "defendant_id": ("defendant_id", "defendantId", "id"),
    "liability_percentage": ("liability_percentage", "liabilityPercentage", "percentage"),
    "first_name": ("first_name", "firstName"),
    "last_name": ("last_name", "lastName"),
    "name": ("name", "defendant_name", "defendantName"),
    "statute_deadline": ("statute_deadline", "statuteDeadline"),
    "accident_date": ("accident_date", "accidentDate", "date_of_loss", "dateOfLoss"),
    "sign_up_date": ("sign_up_date", "signUpDate"),
    "total_settlement": (
        "total_settlement",
        "totalSettlement",
        "gross_settlement",
        "grossSettlement",
        "settlement_amount",
        "settlementAmount",
    ),
    "attorney_fee_percentage": ("attorney_fee_percentage", "attorneyFeePercentage"),
    "case_expenses": ("case_expenses", "caseExpenses"),
    "medical_liens": ("medical_liens", "medicalLiens"),
    "bills": ("medical_bills", "medicalBills", "bills"),
    "defendants": ("defendants", "shares"),
    "settlement": ("settlement",),
}


def _lookup(record: Mapping[str, Any], canonical: str) -> Any:
    """First non-blank value stored under any alias of ``canonical``."""
    for key in FIELD_ALIASES[canonical]:
        value = record.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        LOGGER.debug("Ignoring non-integer identifier: %r", value)
        return None


def _optional_amount(value: Any) -> Optional[float]:
    return None if value is None else parse_amount(value)


def bill_from_record(record: Mapping[str, Any]) -> MedicalBillLine:
    return MedicalBillLine(
        amount_billed=_optional_amount(_lookup(record, "amount_billed")),
        insurance_paid=_optional_amount(_lookup(record, "insurance_paid")),
        insurance_adjusted=_optional_amount(_lookup(record, "insurance_adjusted")),
        medpay_paid=_optional_amount(_lookup(record, "medpay_paid")),
        patient_paid=_optional_amount(_lookup(record, "patient_paid")),
        reduction_amount=_optional_amount(_lookup(record, "reduction_amount")),
        client_id=_optional_int(_lookup(record, "client_id")),
        provider_id=_optional_int(_lookup(record, "provider_id")),
    )


def _defendant_name(record: Mapping[str, Any]) -> Optional[str]:
    name = _lookup(record, "name")
    if name is not None:
        return str(name).strip()
    parts = [
        str(part).strip()
        for part in (_lookup(record, "first_name"), _lookup(record, "last_name"))
        if part is not None
    ]
    joined = " ".join(part for part in parts if part)
    return joined or None


def share_from_record(record: Mapping[str, Any], position: int) -> LiabilityShare:
    """Build a liability share; ``position`` stands in for a missing defendant id."""
    defendant_id = _optional_int(_lookup(record, "defendant_id"))
    return LiabilityShare(
        defendant_id=position if defendant_id is None else defendant_id,
        percentage=_optional_amount(_lookup(record, "liability_percentage")),
        defendant_name=_defendant_name(record),
    )


@dataclass
class CaseRecord:
    """A case record reduced to what the calculator needs."""

    bills: List[MedicalBillLine] = field(default_factory=list)
    shares: List[LiabilityShare] = field(default_factory=list)
    total_settlement: Optional[float] = None
    attorney_fee_percentage: Optional[float] = None
    case_expenses: float = 0.0
    medical_liens: Optional[float] = None
    statute_deadline: Optional[str] = None
    accident_date: Optional[str] = None
    sign_up_date: Optional[str] = None

    def as_kwargs(self) -> Dict[str, Any]:
        return {
            "bills": self.bills,
            "shares": self.shares,
            "total_settlement": self.total_settlement,
            "attorney_fee_percentage": self.attorney_fee_percentage,
            "case_expenses": self.case_expenses,
            "medical_liens": self.medical_liens,
            "statute_deadline": self.statute_deadline,
            "accident_date": self.accident_date,
            "sign_up_date": self.sign_up_date,
        }


def _records(value: Any) -> Sequence[Mapping[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value).strip()


def case_from_record(record: Mapping[str, Any]) -> CaseRecord:
    """Normalize a case, its defendants, bills and settlement figures.

    Settlement figures may sit at the top level or in a nested
    ``settlement`` mapping; nested values take precedence.
    """
    settlement = _lookup(record, "settlement")
    sources: List[Mapping[str, Any]] = [record]
    if isinstance(settlement, Mapping):
        sources.insert(0, settlement)

    def money(canonical: str) -> Optional[float]:
        for source in sources:
            value = _lookup(source, canonical)
            if value is not None:
                return parse_amount(value)
        return None

    return CaseRecord(
        bills=[bill_from_record(item) for item in _records(_lookup(record, "bills"))],
        shares=[
            share_from_record(item, position)
            for position, item in enumerate(_records(_lookup(record, "defendants")), start=1)
        ],
        total_settlement=money("total_settlement"),
        attorney_fee_percentage=money("attorney_fee_percentage"),
        case_expenses=money("case_expenses") or 0.0,
        medical_liens=money("medical_liens"),
        statute_deadline=_optional_text(_lookup(record, "statute_deadline")),
        accident_date=_optional_text(_lookup(record, "accident_date")),
        sign_up_date=_optional_text(_lookup(record, "sign_up_date")),
    )


__all__ = [
    "FIELD_ALIASES",
    "CaseRecord",
    "bill_from_record",
    "share_from_record",
    "case_from_record",
]
