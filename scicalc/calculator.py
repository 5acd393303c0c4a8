"""Calculator facade: transform, evaluate and format in one call.

State (angle mode, last answer, history) lives on an explicit
:class:`Calculator` object owned by the caller; the module-level
:func:`evaluate_expression` only touches the history it is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import CalculatorConfig, get_config
from .errors import CalculatorError, EmptyExpressionError
from .evaluator import evaluate
from .formatter import format_result
from .history import History
from .transformer import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalcResult:
    ok: bool
    formatted: Optional[str] = None
    error: Optional[CalculatorError] = None

    @property
    def is_empty(self) -> bool:
        return isinstance(self.error, EmptyExpressionError)


def evaluate_expression(
    raw: str,
    use_degrees: bool,
    history: Optional[History] = None,
) -> CalcResult:
    """Evaluate ``raw`` and return a :class:`CalcResult`.

    Failures never raise; they come back as ``ok=False`` with the error
    attached. Blank input fails with :class:`EmptyExpressionError` and is not
    logged.
    """
    raw = "" if raw is None else str(raw)
    if not raw.strip():
        return CalcResult(ok=False, error=EmptyExpressionError("Empty expression"))

    canonical = transform(raw, use_degrees)
    try:
        value = evaluate(canonical)
    except CalculatorError as exc:
        logger.error("Calc error for %r: %s", raw, exc)
        logger.info("Transformed expression: %s", canonical)
        return CalcResult(ok=False, error=exc)

    formatted = format_result(value)
    logger.debug("Evaluated %r as %s -> %s", raw, canonical, formatted)
    if history is not None:
        history.add(raw, formatted)
    return CalcResult(ok=True, formatted=formatted)


class Calculator:
    """Per-session calculator state."""

    def __init__(self, config: Optional[CalculatorConfig] = None) -> None:
        config = config or get_config()
        self.use_degrees = config.use_degrees
        self.last_answer = ""
        self.history = History(limit=config.history_limit)

    @property
    def angle_label(self) -> str:
        return "Deg" if self.use_degrees else "Rad"

    def toggle_angle_mode(self) -> bool:
        self.use_degrees = not self.use_degrees
        return self.use_degrees

    def evaluate(self, raw: str) -> CalcResult:
        result = evaluate_expression(raw, self.use_degrees, self.history)
        if result.ok:
            self.last_answer = result.formatted
        return result

    def clear_history(self) -> None:
        self.history.clear()
