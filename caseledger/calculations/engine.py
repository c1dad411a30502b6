"""Case calculator combining liens, liability, settlement and deadline math."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from caseledger.calculations.deadlines import (
    AlertThresholds,
    DateLike,
    classify_deadline,
    days_open,
    statute_deadline_for,
)
from caseledger.calculations.liability import DEFAULT_TOLERANCE, validate_liability
from caseledger.calculations.liens import aggregate_liens, medical_totals
from caseledger.calculations.money import Amount, parse_amount
from caseledger.calculations.settlement import distribute
from caseledger.config import AppSettings
from caseledger.models import (
    DEFAULT_ATTORNEY_FEE_PERCENTAGE,
    CaseSummary,
    DeadlineStatus,
    LiabilityCheck,
    LiabilityShare,
    MedicalBillLine,
    SettlementDistribution,
    SettlementInput,
)

LOGGER = logging.getLogger(__name__)


class CaseCalculator:
    """Applies the firm's configured constants to the pure case calculations.

    Holds configuration only; every method is a function of its arguments.
    """

    def __init__(
        self,
        attorney_fee_percentage: float = DEFAULT_ATTORNEY_FEE_PERCENTAGE,
        thresholds: Optional[AlertThresholds] = None,
        liability_tolerance: float = DEFAULT_TOLERANCE,
        statute_years: int = 2,
    ) -> None:
        self._attorney_fee_percentage = attorney_fee_percentage
        self._thresholds = thresholds or AlertThresholds()
        self._liability_tolerance = liability_tolerance
        self._statute_years = statute_years

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "CaseCalculator":
        return cls(
            attorney_fee_percentage=settings.attorney_fee_percentage,
            thresholds=AlertThresholds(
                critical=settings.critical_days,
                warning=settings.warning_days,
                caution=settings.caution_days,
            ),
            liability_tolerance=settings.liability_tolerance,
            statute_years=settings.statute_years,
        )

    @property
    def attorney_fee_percentage(self) -> float:
        return self._attorney_fee_percentage

    @property
    def thresholds(self) -> AlertThresholds:
        return self._thresholds

    # ------------------------------------------------------------------
    # Financials
    # ------------------------------------------------------------------
    def medical_liens(self, bills: Iterable[MedicalBillLine]) -> float:
        return aggregate_liens(bills)

    def check_liability(self, shares: Sequence[LiabilityShare]) -> LiabilityCheck:
        check = validate_liability(shares, tolerance=self._liability_tolerance)
        if shares and not check.is_valid:
            LOGGER.warning(
                "Liability percentages total %s%%, not 100%%. Results may not be accurate.",
                round(check.total, 2),
            )
        return check

    def distribute(
        self,
        *,
        total_settlement: Amount,
        shares: Sequence[LiabilityShare],
        case_expenses: Amount = 0,
        medical_liens: Amount = 0,
        attorney_fee_percentage: Optional[Amount] = None,
    ) -> SettlementDistribution:
        fee_rate = (
            self._attorney_fee_percentage
            if attorney_fee_percentage is None
            else parse_amount(attorney_fee_percentage)
        )
        return distribute(
            SettlementInput(
                total_settlement=parse_amount(total_settlement),
                attorney_fee_percentage=fee_rate,
                case_expenses=parse_amount(case_expenses),
                medical_liens=parse_amount(medical_liens),
                shares=list(shares),
            )
        )

    # ------------------------------------------------------------------
    # Deadlines
    # ------------------------------------------------------------------
    def deadline_status(
        self,
        today: Union[date, datetime],
        *,
        statute_deadline: DateLike = None,
        accident_date: DateLike = None,
    ) -> DeadlineStatus:
        """Classify the statute deadline, deriving it from the accident date if needed."""
        deadline = statute_deadline
        if deadline in (None, "") and accident_date not in (None, ""):
            deadline = statute_deadline_for(accident_date, years=self._statute_years)
        return classify_deadline(deadline, today, self._thresholds)

    def days_open(self, sign_up_date: DateLike, today: Union[date, datetime]) -> int:
        return days_open(sign_up_date, today)

    # ------------------------------------------------------------------
    # Whole case
    # ------------------------------------------------------------------
    def summarize(
        self,
        *,
        today: Union[date, datetime],
        bills: Sequence[MedicalBillLine] = (),
        shares: Sequence[LiabilityShare] = (),
        total_settlement: Optional[Amount] = None,
        case_expenses: Amount = 0,
        medical_liens: Optional[Amount] = None,
        attorney_fee_percentage: Optional[Amount] = None,
        statute_deadline: DateLike = None,
        accident_date: DateLike = None,
        sign_up_date: DateLike = None,
    ) -> CaseSummary:
        """Compute every figure the case overview shows.

        The distribution is only produced once a settlement amount is known.
        ``medical_liens`` overrides the total derived from ``bills``.
        """
        lien_total = aggregate_liens(bills) if medical_liens is None else parse_amount(medical_liens)
        liability = self.check_liability(shares)
        anomalies: List[str] = []
        if shares and liability.is_over:
            anomalies.append(f"Liability over-allocated by {liability.delta:.2f}%")
        elif shares and liability.is_under:
            anomalies.append(f"Liability under-allocated by {-liability.delta:.2f}%")

        distribution: Optional[SettlementDistribution] = None
        if total_settlement is not None:
            distribution = self.distribute(
                total_settlement=total_settlement,
                shares=shares,
                case_expenses=case_expenses,
                medical_liens=lien_total,
                attorney_fee_percentage=attorney_fee_percentage,
            )
            for allocation in distribution.allocations:
                if allocation.net_amount < 0:
                    anomalies.append(
                        f"Net to client is negative for defendant {allocation.defendant_id}"
                    )

        return CaseSummary(
            medical_liens=lien_total,
            medical_totals=medical_totals(bills),
            liability=liability,
            distribution=distribution,
            deadline=self.deadline_status(
                today, statute_deadline=statute_deadline, accident_date=accident_date
            ),
            days_open=days_open(sign_up_date, today),
            anomalies=anomalies,
        )


__all__ = ["CaseCalculator"]
