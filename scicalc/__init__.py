"""Scientific calculator: expression rewriting, safe evaluation, formatting."""

from .calculator import CalcResult, Calculator, evaluate_expression
from .errors import (
    CalculatorError,
    EmptyExpressionError,
    EvaluationError,
    InvalidExpressionError,
)
from .evaluator import evaluate
from .formatter import format_result
from .helpers import fact, log10
from .history import History, HistoryEntry
from .transformer import transform

__all__ = [
    "CalcResult",
    "Calculator",
    "evaluate_expression",
    "CalculatorError",
    "EmptyExpressionError",
    "EvaluationError",
    "InvalidExpressionError",
    "evaluate",
    "format_result",
    "fact",
    "log10",
    "History",
    "HistoryEntry",
    "transform",
]
