from __future__ import annotations

from ..common.time_utils import format_hours
from .model import WorkLog


def log_json(log: WorkLog) -> dict:
    return {
        "id": log.log_id,
        "username": log.username,
        "date": log.date,
        "punch_in": log.punch_in,
        "punch_out": log.punch_out,
        "minutes_worked": log.minutes_worked,
        "hours": format_hours(log.minutes_worked),
        "pay_period_start": log.pay_period_start,
        "deduction": log.deduction,
    }
