"""Small numeric helpers shared by the calculators."""

import math
from typing import Optional


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float, ndigits: int = 0):
    """Round with .5 going up (2.5 -> 3), unlike the banker's `round`.

    Returns an int when `ndigits` is 0, otherwise a float.
    """
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def finite_or_none(value) -> Optional[float]:
    """Coerce to float, mapping missing or non-finite input to None."""
    if value is None:
        return None
    try:
        v = float(value)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None
