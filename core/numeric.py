# server/core/numeric.py
"""
Numeric helpers shared by the forecast engines
"""
import math

def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties going toward +infinity (-2.5 -> -2).

    Compares against floor(x) instead of computing floor(x + 0.5), which
    would carry 0.49999999999999994 up to 1.
    """
    r = math.floor(x)
    return r + 1 if x - r >= 0.5 else r

def ensure_finite(name: str, value: float) -> float:
    """Return value as float, raising ValueError when it is NaN or infinite."""
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return value
