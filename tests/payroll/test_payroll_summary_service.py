import pytest

from timekeeper.core.constants import SUMMARY_CSV_HEADER
from timekeeper.core.exceptions import ValidationError
from timekeeper.payroll.service import PayrollSummaryService, summary_to_csv


def test_build_summary_uses_stored_rates(storage, make_employee, make_log):
    storage.upsert_account(make_employee("alice", rate=15))
    storage.logs = [make_log("1", "alice", "2024-01-01", 90)]

    (row,) = PayrollSummaryService(storage).build_summary()

    assert row.total_hours == "1.50"
    assert row.total_pay == "22.50"


def test_export_csv_format(storage, make_employee, make_log):
    storage.upsert_account(make_employee("alice", rate=20))
    storage.upsert_account(make_employee("bob", rate=12.5))
    storage.logs = [
        make_log("1", "bob", "2024-01-15", 120),
        make_log("2", "alice", "2024-01-01", 480),
    ]

    csv_text = PayrollSummaryService(storage).export_csv()

    assert csv_text == (
        f"{SUMMARY_CSV_HEADER}\n"
        "2024-01-01,alice,8.00,160.00\n"
        "2024-01-15,bob,2.00,25.00\n"
    )


def test_export_without_logs_is_rejected(storage):
    with pytest.raises(ValidationError):
        PayrollSummaryService(storage).export_csv()


def test_summary_to_csv_header_only_for_no_rows():
    assert summary_to_csv([]) == "Pay Period Start,Employee,Total Hours,Total Pay\n"
