import pytest

from caseledger.adapters import bill_from_record, case_from_record, share_from_record
from caseledger.models import LiabilityShare


def test_camel_case_bill() -> None:
    bill = bill_from_record(
        {
            "amountBilled": "1,200.00",
            "insurancePaid": 300,
            "insuranceAdjusted": None,
            "medpayPaid": "",
            "reductionAmount": "abc",
            "clientId": "4",
        }
    )
    assert bill.amount_billed == pytest.approx(1200.0)
    assert bill.insurance_paid == pytest.approx(300.0)
    assert bill.insurance_adjusted is None
    assert bill.medpay_paid is None
    assert bill.reduction_amount == 0.0
    assert bill.client_id == 4


def test_snake_case_bill_with_total_billed_alias() -> None:
    bill = bill_from_record({"total_billed": 950, "patient_paid": "50", "medical_provider_id": 12})
    assert bill.amount_billed == pytest.approx(950.0)
    assert bill.patient_paid == pytest.approx(50.0)
    assert bill.provider_id == 12


def test_defendant_record() -> None:
    share = share_from_record(
        {"id": 7, "firstName": "Ann", "lastName": "Lee", "liabilityPercentage": "60"}, position=1
    )
    assert share == LiabilityShare(defendant_id=7, percentage=60.0, defendant_name="Ann Lee")


def test_defendant_without_id_or_percentage() -> None:
    share = share_from_record({"first_name": "Sam"}, position=3)
    assert share.defendant_id == 3
    assert share.percentage is None
    assert share.defendant_name == "Sam"


def test_case_record_with_nested_settlement() -> None:
    case = case_from_record(
        {
            "statuteDeadline": "2027-01-15",
            "dateOfLoss": "2025-01-15",
            "signUpDate": "2025-02-01",
            "defendants": [
                {"id": 1, "liabilityPercentage": 60},
                {"id": 2, "liability_percentage": 40},
            ],
            "medicalBills": [{"amountBilled": 5000, "insurancePaid": 1000}],
            "settlement_amount": 1,
            "settlement": {
                "gross_settlement": "100000",
                "attorney_fee_percentage": 33.33,
                "case_expenses": "1,500",
            },
        }
    )
    assert case.total_settlement == pytest.approx(100000.0)
    assert case.attorney_fee_percentage == pytest.approx(33.33)
    assert case.case_expenses == pytest.approx(1500.0)
    assert case.medical_liens is None
    assert [share.percentage for share in case.shares] == [60.0, 40.0]
    assert case.bills[0].amount_billed == pytest.approx(5000.0)
    assert case.statute_deadline == "2027-01-15"
    assert case.accident_date == "2025-01-15"
    assert case.sign_up_date == "2025-02-01"


def test_empty_record() -> None:
    case = case_from_record({})
    assert case.bills == []
    assert case.shares == []
    assert case.total_settlement is None
    assert case.case_expenses == 0.0
    assert case.statute_deadline is None


def test_non_mapping_entries_are_skipped() -> None:
    case = case_from_record({"defendants": [None, "x", {"id": 2}], "bills": "oops"})
    assert [share.defendant_id for share in case.shares] == [2]
    assert case.bills == []
