import json
from pathlib import Path

import pytest

from caseledger.cli import main


@pytest.fixture()
def case_file(tmp_path: Path) -> Path:
    path = tmp_path / "case.json"
    path.write_text(
        json.dumps(
            {
                "statuteDeadline": "2026-11-02",
                "signUpDate": "2026-10-01",
                "defendants": [
                    {"id": 1, "firstName": "Lee", "lastName": "Grant", "liabilityPercentage": 60},
                    {"id": 2, "firstName": "Kim", "lastName": "Ortiz", "liabilityPercentage": 40},
                ],
                "medicalBills": [{"amountBilled": 25000, "insurancePaid": 5000}],
                "settlement": {"gross_settlement": 100000},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_json_output(case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(case_file), "--today", "2026-10-18"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["medical_liens"] == "20000.00"
    assert payload["deadline"] == {"days_remaining": 15, "tier": "critical"}
    assert payload["days_open"] == 17
    allocations = payload["distribution"]["allocations"]
    assert [a["net_amount"] for a in allocations] == ["28002.00", "18668.00"]
    assert allocations[0]["liability_percentage"] == 60.0
    assert payload["liability"]["is_valid"] is True


def test_text_output(case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(case_file), "--today", "2026-10-18", "--text"]) == 0
    out = capsys.readouterr().out
    assert "Client Net Total: $46,670.00" in out
    assert "2. Kim Ortiz (40% liability)" in out


def test_fee_override(case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(case_file), "--today", "2026-10-18", "--fee", "40"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["distribution"]["totals"]["attorney_fee"] == "40000.00"


def test_text_without_settlement(tmp_path: Path) -> None:
    path = tmp_path / "intake.json"
    path.write_text(json.dumps({"signUpDate": "2026-10-01"}), encoding="utf-8")
    assert main([str(path), "--text"]) == 1


def test_unreadable_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 2
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    assert main([str(bad)]) == 2
