from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty, require_rate
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..core.logging import get_logger
from ..storage.repository import Storage
from .model import Account, SessionUser

logger = get_logger(__name__)


def find_account(storage: Storage, username: str) -> Optional[Account]:
    for account in storage.get_accounts():
        if account.username == username:
            return account
    return None


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, storage: Storage):
        self._storage = storage

    def authenticate(self, username: str, password: str, role: Optional[Role] = None) -> SessionUser:
        account = find_account(self._storage, (username or "").strip())
        if not account or (role is not None and account.role != role):
            raise AuthenticationError("Invalid credentials or role.")

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials or role.")

        logger.info("login", username=account.username, role=account.role.value)
        return SessionUser(username=account.username, role=account.role)


class AccountService:
    """Use case: manage accounts (admin)."""

    def __init__(self, storage: Storage):
        self._storage = storage

    def ensure_defaults(self, *, admin_username: str, admin_password: str) -> bool:
        """Create the default administrator when no account exists yet."""
        if self._storage.get_accounts():
            return False
        self._storage.upsert_account(
            Account(
                username=admin_username,
                password_hash=generate_password_hash(admin_password),
                role=Role.ADMIN,
            )
        )
        logger.info("default_admin_created", username=admin_username)
        return True

    def list_employees(self) -> list[Account]:
        employees = [a for a in self._storage.get_accounts() if a.is_employee]
        return sorted(employees, key=lambda a: a.username)

    def create_employee(self, *, username: str, password: str, hourly_rate) -> Account:
        username = require_non_empty(username, "Username")
        require_non_empty(password, "Password")
        rate = require_rate(hourly_rate)

        if find_account(self._storage, username):
            raise ValidationError("Username already exists.")

        account = Account(
            username=username,
            password_hash=generate_password_hash(password),
            role=Role.EMPLOYEE,
            hourly_rate=rate,
        )
        self._storage.upsert_account(account)
        logger.info("account_created", username=username, hourly_rate=rate)
        return account

    def set_hourly_rate(self, *, username: str, hourly_rate) -> Account:
        rate = require_rate(hourly_rate)
        account = find_account(self._storage, username)
        if not account or not account.is_employee:
            raise ValidationError("Employee does not exist")

        updated = Account(
            username=account.username,
            password_hash=account.password_hash,
            role=account.role,
            hourly_rate=rate,
        )
        self._storage.upsert_account(updated)
        logger.info("hourly_rate_changed", username=username, old=account.hourly_rate, new=rate)
        return updated

    def delete_account(self, *, username: str) -> None:
        account = find_account(self._storage, username)
        if not account:
            raise ValidationError("Employee does not exist")
        if account.role == Role.ADMIN:
            raise ValidationError("Cannot delete an admin account")

        self._storage.delete_account(username)
        logger.info("account_deleted", username=username)
