from __future__ import annotations

from ..core.constants import SUMMARY_CSV_HEADER
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..storage.repository import Storage
from .aggregator import aggregate
from .model import SummaryRow

logger = get_logger(__name__)


def summary_to_csv(rows: list[SummaryRow]) -> str:
    """Plain comma-joined CSV; usernames are assumed to contain no commas."""
    lines = [SUMMARY_CSV_HEADER]
    for r in rows:
        lines.append(f"{r.pay_period_start},{r.username},{r.total_hours},{r.total_pay}")
    return "\n".join(lines) + "\n"


class PayrollSummaryService:
    def __init__(self, storage: Storage):
        self._storage = storage

    def build_summary(self) -> list[SummaryRow]:
        logs = self._storage.get_logs()
        accounts = {a.username: a for a in self._storage.get_accounts()}
        rows = aggregate(logs, accounts)
        logger.info("summary_built", logs=len(logs), rows=len(rows))
        return rows

    def export_csv(self) -> str:
        rows = self.build_summary()
        if not rows:
            raise ValidationError("No summary data to export.")
        return summary_to_csv(rows)
