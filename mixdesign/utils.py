# mixdesign/utils.py
from __future__ import annotations

import math


def round_half_away(value: float, decimals: int = 2) -> float:
    """Arithmetic rounding (0.5 goes away from zero), unlike Python's round()."""
    factor = 10.0 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def format_cell(value) -> str:
    """Plain text for a CSV cell: 20.0 -> '20', True -> 'true', None -> ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
