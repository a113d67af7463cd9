import pytest

from timekeeper.core.exceptions import StorageError, ValidationError
from timekeeper.worklogs.model import NewWorkLog
from timekeeper.worklogs.service import WorkLogService


def _add(storage, username="alice", day="2024-01-10", punch_in="09:00", punch_out="17:00", minutes=480):
    return storage.add_log(
        NewWorkLog(
            username=username,
            date=day,
            punch_in=punch_in,
            punch_out=punch_out,
            minutes_worked=minutes,
            pay_period_start="2024-01-01",
        )
    )


def test_update_deduction_recomputes_minutes(storage):
    log = _add(storage)
    svc = WorkLogService(storage)

    updated = svc.update_deduction(log_id=log.log_id, deduction=30)

    assert updated.deduction == 30
    assert updated.minutes_worked == 450
    stored = svc.get(log.log_id)
    assert stored.deduction == 30
    assert stored.minutes_worked == 450


def test_deduction_is_applied_to_raw_session_not_previous_result(storage):
    log = _add(storage)
    svc = WorkLogService(storage)

    svc.update_deduction(log_id=log.log_id, deduction=60)
    updated = svc.update_deduction(log_id=log.log_id, deduction=15)

    assert updated.minutes_worked == 465


@pytest.mark.parametrize("raw", ["abc", "", None, "-20"])
def test_invalid_deduction_counts_as_zero(storage, raw):
    log = _add(storage)
    updated = WorkLogService(storage).update_deduction(log_id=log.log_id, deduction=raw)
    assert updated.deduction == 0
    assert updated.minutes_worked == 480


def test_deduction_beyond_session_floors_at_zero(storage):
    log = _add(storage, punch_in="09:00", punch_out="09:20", minutes=20)
    updated = WorkLogService(storage).update_deduction(log_id=log.log_id, deduction="45")
    assert updated.minutes_worked == 0


def test_unknown_log_raises(storage):
    with pytest.raises(ValidationError):
        WorkLogService(storage).update_deduction(log_id="nope", deduction=10)


def test_failed_write_leaves_log_unchanged(storage):
    log = _add(storage)
    storage.fail_writes = True
    with pytest.raises(StorageError):
        WorkLogService(storage).update_deduction(log_id=log.log_id, deduction=30)
    assert storage.logs[0].minutes_worked == 480


def test_list_and_history_are_sorted_by_date(storage):
    _add(storage, username="bob", day="2024-01-12")
    _add(storage, username="alice", day="2024-01-11")
    _add(storage, username="alice", day="2024-01-09")
    svc = WorkLogService(storage)

    assert [log.date for log in svc.list_logs()] == ["2024-01-09", "2024-01-11", "2024-01-12"]
    assert [log.date for log in svc.history_for("alice")] == ["2024-01-09", "2024-01-11"]
    assert svc.history_for("carol") == []
