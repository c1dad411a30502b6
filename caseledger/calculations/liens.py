"""Medical bill balances and lien aggregation."""
from __future__ import annotations

from typing import Iterable, List, Optional

from caseledger.calculations.money import parse_amount
from caseledger.models import MedicalBillLine, MedicalTotals


def balance_due(bill: MedicalBillLine) -> float:
    """Outstanding amount on one bill after payments and reductions, never negative."""
    balance = (
        parse_amount(bill.amount_billed)
        - parse_amount(bill.insurance_paid)
        - parse_amount(bill.insurance_adjusted)
        - parse_amount(bill.medpay_paid)
        - parse_amount(bill.patient_paid)
        - parse_amount(bill.reduction_amount)
    )
    return max(0.0, balance)


def aggregate_liens(bills: Iterable[MedicalBillLine]) -> float:
    """Total outstanding medical liens for a case."""
    return sum((balance_due(bill) for bill in bills), 0.0)


def medical_totals(
    bills: Iterable[MedicalBillLine], *, client_id: Optional[int] = None
) -> MedicalTotals:
    """Roll up billed, paid, adjusted and outstanding amounts.

    When ``client_id`` is given only that client's bills are counted.
    """
    selected: List[MedicalBillLine] = [
        bill for bill in bills if client_id is None or bill.client_id == client_id
    ]
    total_billed = 0.0
    total_paid = 0.0
    total_adjusted = 0.0
    for bill in selected:
        total_billed += parse_amount(bill.amount_billed)
        total_paid += (
            parse_amount(bill.insurance_paid)
            + parse_amount(bill.medpay_paid)
            + parse_amount(bill.patient_paid)
        )
        total_adjusted += parse_amount(bill.insurance_adjusted) + parse_amount(bill.reduction_amount)
    return MedicalTotals(
        total_billed=total_billed,
        total_paid=total_paid,
        total_adjusted=total_adjusted,
        total_balance=aggregate_liens(selected),
        bill_count=len(selected),
    )


__all__ = ["balance_due", "aggregate_liens", "medical_totals"]
