from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DEFAULT_START_DAYS


@dataclass(frozen=True)
class PaySettings:
    """Process-wide pay period configuration (sorted, unique start days)."""

    start_days: tuple[int, ...] = field(default=DEFAULT_START_DAYS)

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_days", tuple(sorted({int(d) for d in self.start_days})))
