from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewWorkLog:
    """A finalized work session that has not been given a storage id yet."""

    username: str
    date: str
    punch_in: str
    punch_out: str
    minutes_worked: int
    pay_period_start: str
    deduction: int = 0


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: persisted record of one completed work session."""

    log_id: str
    username: str
    date: str
    punch_in: str
    punch_out: str
    minutes_worked: int
    pay_period_start: str
    deduction: int = 0

    @classmethod
    def from_new(cls, log_id: str, new: NewWorkLog) -> "WorkLog":
        return cls(
            log_id=str(log_id),
            username=new.username,
            date=new.date,
            punch_in=new.punch_in,
            punch_out=new.punch_out,
            minutes_worked=int(new.minutes_worked),
            pay_period_start=new.pay_period_start,
            deduction=int(new.deduction),
        )


# Fields an administrator may revise after the fact.
EDITABLE_LOG_FIELDS = frozenset({"deduction", "minutes_worked"})
