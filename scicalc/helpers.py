"""Numeric helpers exposed to the evaluator next to the ``math`` vocabulary."""

from __future__ import annotations

import math
from typing import Any

_LN10 = math.log(10)


def fact(n: Any) -> float:
    """Factorial of ``floor(n)``.

    Returns NaN for non-finite or negative input. The product is accumulated
    as a float, so large arguments lose precision and eventually become inf.
    """
    try:
        value = float(n)
    except (TypeError, ValueError):
        return math.nan
    if not math.isfinite(value):
        return math.nan
    value = math.floor(value)
    if value < 0:
        return math.nan
    if value in (0, 1):
        return 1.0
    result = 1.0
    for i in range(2, value + 1):
        result *= i
        if math.isinf(result):
            break
    return result


def log10(x: Any) -> float:
    x = float(x)
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    if math.isinf(x):
        return math.inf
    return math.log(x) / _LN10
