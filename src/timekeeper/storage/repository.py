from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..accounts.model import Account
from ..payperiods.model import PaySettings
from ..punch.model import PunchSession
from ..worklogs.model import NewWorkLog, WorkLog


class Storage(Protocol):
    """Persistence interface shared by every backend.

    Note (DIP): services depend on this interface, never on a concrete backend.
    Failures are raised as StorageError; no operation is a silent no-op.
    """

    def get_accounts(self) -> Sequence[Account]:
        raise NotImplementedError

    def upsert_account(self, account: Account) -> None:
        raise NotImplementedError

    def delete_account(self, username: str) -> None:
        """Remove the account together with all of its work logs."""

        raise NotImplementedError

    def get_logs(self) -> Sequence[WorkLog]:
        raise NotImplementedError

    def add_log(self, log: NewWorkLog) -> WorkLog:
        raise NotImplementedError

    def update_log(self, log_id: str, **fields) -> None:
        raise NotImplementedError

    def get_pay_settings(self) -> PaySettings:
        raise NotImplementedError

    def set_pay_settings(self, settings: PaySettings) -> None:
        raise NotImplementedError

    def get_current_punch(self) -> dict[str, PunchSession]:
        raise NotImplementedError

    def set_current_punch(self, username: str, session: Optional[PunchSession]) -> None:
        """Open (or replace) the user's session, or clear it when ``session`` is None."""

        raise NotImplementedError
