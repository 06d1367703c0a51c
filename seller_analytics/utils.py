from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from . import settings


def round_money(value: float, decimals: int = settings.MONEY_DECIMALS) -> float:
    """
    Rounds a money amount half-away-from-zero, e.g. 2.675 -> 2.68.
    We quantize the shortest decimal repr of the float rather than its binary value,
    so amounts that print as exact half-cents always round away from zero.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    # Normalise -0.0 so results compare and serialise cleanly.
    return float(rounded) + 0.0


def is_sequence(value: Any) -> bool:
    """True for list-like collections; strings, bytes and mappings don't count."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray, Mapping)
    )
