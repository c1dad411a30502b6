"""Settlement distribution across defendants by liability share."""
from __future__ import annotations

from typing import List, Optional

from caseledger.calculations.liability import resolve_percentage
from caseledger.calculations.money import parse_amount
from caseledger.models import (
    SettlementAllocation,
    SettlementDistribution,
    SettlementInput,
    SettlementTotals,
)


def allocate(
    settlement: SettlementInput, defendant_id: int, percentage: float, defendant_name: Optional[str] = None
) -> SettlementAllocation:
    """Compute a single defendant's portion of the settlement.

    Values stay at full float precision; rounding belongs to the display layer.
    A net below zero is returned as is.
    """
    total_settlement = parse_amount(settlement.total_settlement)
    fee_rate = parse_amount(settlement.attorney_fee_percentage)
    gross = total_settlement * percentage / 100
    attorney_fee = gross * fee_rate / 100
    case_expenses = parse_amount(settlement.case_expenses) * percentage / 100
    medical_liens = parse_amount(settlement.medical_liens) * percentage / 100
    return SettlementAllocation(
        defendant_id=defendant_id,
        defendant_name=defendant_name,
        liability_percentage=percentage,
        gross_amount=gross,
        attorney_fee=attorney_fee,
        case_expenses=case_expenses,
        medical_liens=medical_liens,
        net_amount=gross - attorney_fee - case_expenses - medical_liens,
    )


def distribute(settlement: SettlementInput) -> SettlementDistribution:
    """Split a settlement proportionally to each defendant's liability.

    Shares are used exactly as given, even when they do not add up to 100%;
    check them with :func:`validate_liability` first if that matters.
    Allocations keep the order of ``settlement.shares``.
    """
    count = len(settlement.shares)
    allocations: List[SettlementAllocation] = [
        allocate(
            settlement,
            share.defendant_id,
            resolve_percentage(share, count),
            share.defendant_name,
        )
        for share in settlement.shares
    ]
    totals = SettlementTotals(
        gross=sum((a.gross_amount for a in allocations), 0.0),
        attorney_fee=sum((a.attorney_fee for a in allocations), 0.0),
        case_expenses=sum((a.case_expenses for a in allocations), 0.0),
        medical_liens=sum((a.medical_liens for a in allocations), 0.0),
        client_net=sum((a.net_amount for a in allocations), 0.0),
    )
    return SettlementDistribution(
        total_settlement=parse_amount(settlement.total_settlement),
        attorney_fee_percentage=parse_amount(settlement.attorney_fee_percentage),
        allocations=allocations,
        totals=totals,
    )


__all__ = ["allocate", "distribute"]
