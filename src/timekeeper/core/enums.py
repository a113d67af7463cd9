from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles used for access control."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class StorageBackend(str, Enum):
    JSON = "json"
    MYSQL = "mysql"
