"""Display formatting of evaluation results."""

from __future__ import annotations

import math
from typing import Any

EXPONENTIAL_THRESHOLD = 1e9
DECIMAL_PLACES = 8


def format_result(result: Any) -> str:
    """Turn an evaluation result into display text.

    NaN and both infinities all display as ``"Infinity"``.
    """
    if isinstance(result, bool):
        return "true" if result else "false"
    if not isinstance(result, (int, float)):
        return str(result)
    if not math.isfinite(result):
        return "Infinity"
    if abs(result) >= EXPONENTIAL_THRESHOLD:
        return f"{result:.6e}"
    if float(result).is_integer():
        return str(int(result))
    rounded = float(f"{result:.{DECIMAL_PLACES}f}")
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)
