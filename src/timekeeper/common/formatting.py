from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_TWO_PLACES = Decimal("0.01")


def two_places(value: Decimal) -> str:
    """Render a decimal rounded half-up with exactly two fraction digits."""
    return str(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
