from __future__ import annotations

import re
from typing import Iterable, Union

from ..core.constants import MAX_START_DAY, MIN_START_DAY
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..storage.repository import Storage
from .model import PaySettings

logger = get_logger(__name__)

_INT_TOKEN = re.compile(r"^\s*(\d+)")


def _as_day(token) -> int | None:
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        day = token
    else:
        match = _INT_TOKEN.match(str(token))
        if not match:
            return None
        day = int(match.group(1))
    return day if MIN_START_DAY <= day <= MAX_START_DAY else None


def parse_start_days(raw: Union[str, Iterable]) -> tuple[int, ...]:
    """Parse admin input such as "1, 15" into sorted unique start days.

    Tokens that are not numbers or fall outside 1..31 are dropped; an input
    with no usable day left is rejected.
    """
    if isinstance(raw, str):
        tokens = raw.split(",")
    elif isinstance(raw, (int, float)):
        tokens = [raw]
    else:
        tokens = list(raw or [])
    days = {d for d in (_as_day(t) for t in tokens) if d is not None}
    if not days:
        raise ValidationError("Please enter valid day numbers separated by commas.")
    return tuple(sorted(days))


class PaySettingsService:
    def __init__(self, storage: Storage):
        self._storage = storage

    def get(self) -> PaySettings:
        return self._storage.get_pay_settings()

    def save(self, raw: Union[str, Iterable]) -> PaySettings:
        settings = PaySettings(start_days=parse_start_days(raw))
        self._storage.set_pay_settings(settings)
        logger.info("pay_settings_saved", start_days=list(settings.start_days))
        return settings
