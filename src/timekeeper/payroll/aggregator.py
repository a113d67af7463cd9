from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Mapping

from ..accounts.model import Account
from ..common.formatting import two_places
from ..common.time_utils import format_hours, minutes_to_hours
from ..worklogs.model import WorkLog
from .model import SummaryRow


def total_minutes_by_period(logs: Iterable[WorkLog]) -> dict[tuple[str, str], int]:
    """Sum stored minutes per (pay_period_start, username).

    Deductions are already applied to ``minutes_worked``.
    """
    totals: dict[tuple[str, str], int] = defaultdict(int)
    for log in logs:
        totals[(log.pay_period_start, log.username)] += int(log.minutes_worked)
    return dict(totals)


def pay_for(total_minutes: int, account: Account | None) -> Decimal:
    rate = Decimal(str(account.effective_rate)) if account else Decimal(0)
    return minutes_to_hours(total_minutes) * rate


def aggregate(logs: Iterable[WorkLog], accounts: Mapping[str, Account]) -> list[SummaryRow]:
    """Build payroll summary rows.

    Rows are ordered by pay period start, then by username.
    """
    totals = total_minutes_by_period(logs)

    rows: list[SummaryRow] = []
    for period, username in sorted(totals):
        minutes = totals[(period, username)]
        rows.append(
            SummaryRow(
                pay_period_start=period,
                username=username,
                total_minutes=minutes,
                total_hours=format_hours(minutes),
                total_pay=two_places(pay_for(minutes, accounts.get(username))),
            )
        )
    return rows
