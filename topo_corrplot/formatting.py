from __future__ import annotations

import math


def round_half_up(value: float, decimals: int) -> float:
    scale = 10.0**decimals
    return math.floor(value * scale + 0.5) / scale


def format_rounded(value: float, decimals: int) -> str:
    """Round to `decimals` places and print without trailing zeros ("2", "-1", "0.125")."""
    if not math.isfinite(value):
        return str(value)
    rounded = round_half_up(value, decimals)
    if rounded == 0.0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)
