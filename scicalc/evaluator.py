"""Safe evaluation of canonical expressions.

The canonical string is first checked against a character whitelist and then
parsed with :mod:`ast`. Only a fixed set of node kinds is interpreted; nothing
is ever handed to ``eval``. Arithmetic follows IEEE double semantics, so
division by zero, domain errors and overflow produce inf/NaN results instead
of exceptions.
"""

from __future__ import annotations

import ast
import math
import operator as op
import re
from typing import Any, Callable, Dict, Union

from .errors import EvaluationError, InvalidExpressionError
from .helpers import fact, log10

Number = Union[float, bool]

_UNSAFE_CHARS = re.compile(r"[^\dA-Za-z\s.+\-*/^%(),!<>=\[\]]")
_FORBIDDEN_CHARS = re.compile(r"[;`\\]")

HELPERS: Dict[str, Callable[..., float]] = {
    "fact": fact,
    "log10": log10,
}

MATH_FUNCTIONS: Dict[str, Callable[..., float]] = {
    name: getattr(math, name)
    for name in [
        "sqrt", "fabs", "log", "log10", "log2", "exp", "pow",
        "sin", "cos", "tan", "asin", "acos", "atan", "atan2",
        "sinh", "cosh", "tanh", "floor", "ceil", "trunc",
        "hypot", "degrees", "radians",
    ]
}

MATH_CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "inf": math.inf,
    "nan": math.nan,
}

COMPARISONS: Dict[type, Callable[[Any, Any], bool]] = {
    ast.Lt: op.lt,
    ast.Gt: op.gt,
    ast.LtE: op.le,
    ast.GtE: op.ge,
    ast.Eq: op.eq,
    ast.NotEq: op.ne,
}


def validate(canonical: str) -> None:
    """Raise :class:`InvalidExpressionError` if ``canonical`` has unsafe characters."""
    if _UNSAFE_CHARS.search(canonical) or _FORBIDDEN_CHARS.search(canonical):
        raise InvalidExpressionError("Invalid characters in expression")


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _remainder(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def _power(left: float, right: float) -> float:
    try:
        result = float(left) ** float(right)
    except (ZeroDivisionError, OverflowError):
        return math.inf
    if isinstance(result, complex):
        return math.nan
    return result


BINARY_OPERATORS: Dict[type, Callable[[float, float], float]] = {
    ast.Add: op.add,
    ast.Sub: op.sub,
    ast.Mult: op.mul,
    ast.Div: _divide,
    ast.Mod: _remainder,
    ast.Pow: _power,
}

UNARY_OPERATORS: Dict[type, Callable[[float], float]] = {
    ast.USub: op.neg,
    ast.UAdd: op.pos,
}


_LOG_FUNCTIONS = ("math.log", "math.log2", "math.log10")


def _domain_error_result(name: str, args: list) -> float:
    # Poles keep their signed infinity; anything else outside the domain is NaN.
    if name in _LOG_FUNCTIONS and args and args[0] == 0:
        return -math.inf
    if name == "math.pow" and len(args) == 2 and args[0] == 0 and args[1] < 0:
        return math.inf
    return math.nan


def _call(func: Callable[..., float], name: str, args: list) -> float:
    try:
        result = func(*args)
    except ValueError:
        return _domain_error_result(name, args)
    except (OverflowError, ZeroDivisionError):
        return math.inf
    except TypeError as exc:
        raise EvaluationError(f"{name} usage error: {exc}") from None
    # floor/ceil/trunc return ints; keep everything in double precision.
    if isinstance(result, int) and not isinstance(result, bool):
        return float(result)
    return result


def _resolve_function(node: ast.AST) -> tuple:
    if isinstance(node, ast.Name) and node.id in HELPERS:
        return node.id, HELPERS[node.id]
    if (
        isinstance(node, ast.Attribute)
        and isinstance(node.value, ast.Name)
        and node.value.id == "math"
        and node.attr in MATH_FUNCTIONS
    ):
        return f"math.{node.attr}", MATH_FUNCTIONS[node.attr]
    raise EvaluationError(f"Function '{ast.unparse(node)}' not allowed")


def _eval(node: ast.AST) -> Number:
    if isinstance(node, ast.Expression):
        return _eval(node.body)

    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise EvaluationError("Only numeric literals are allowed")
        try:
            return float(node.value)
        except OverflowError:
            return math.inf

    if isinstance(node, ast.UnaryOp):
        oper = UNARY_OPERATORS.get(type(node.op))
        if oper is None:
            raise EvaluationError("Unary operator not allowed")
        return oper(_eval(node.operand))

    if isinstance(node, ast.BinOp):
        oper = BINARY_OPERATORS.get(type(node.op))
        if oper is None:
            raise EvaluationError("Operator not allowed")
        return oper(_eval(node.left), _eval(node.right))

    if isinstance(node, ast.Compare):
        # Left to right: 3 > 2 > 1 is (3 > 2) > 1, i.e. True > 1.
        result = _eval(node.left)
        for cmp_op, comparator in zip(node.ops, node.comparators):
            oper = COMPARISONS.get(type(cmp_op))
            if oper is None:
                raise EvaluationError("Comparison not allowed")
            result = oper(result, _eval(comparator))
        return result

    if isinstance(node, ast.Call):
        if node.keywords:
            raise EvaluationError("Keyword arguments are not supported")
        name, func = _resolve_function(node.func)
        if any(isinstance(a, ast.Starred) for a in node.args):
            raise EvaluationError("Argument unpacking is not supported")
        args = [_eval(a) for a in node.args]
        return _call(func, name, args)

    if isinstance(node, ast.Attribute):
        if (
            isinstance(node.value, ast.Name)
            and node.value.id == "math"
            and node.attr in MATH_CONSTANTS
        ):
            return MATH_CONSTANTS[node.attr]
        raise EvaluationError(f"Attribute '{node.attr}' is not allowed")

    if isinstance(node, ast.Name):
        if node.id in HELPERS or node.id == "math":
            raise EvaluationError(f"'{node.id}' cannot be used as a value")
        raise EvaluationError(f"Unknown name: {node.id}")

    raise EvaluationError("Unsupported or unsafe expression construct")


def evaluate(canonical: str) -> Number:
    """Evaluate a canonical expression and return its numeric (or bool) value.

    Raises :class:`InvalidExpressionError` for characters outside the
    whitelist and :class:`EvaluationError` for anything the interpreter
    cannot handle.
    """
    canonical = str(canonical)
    validate(canonical)
    try:
        tree = ast.parse(canonical.strip(), mode="eval")
    except SyntaxError as exc:
        raise EvaluationError(f"Syntax error: {exc.msg}") from None
    except (ValueError, RecursionError, MemoryError) as exc:
        raise EvaluationError(f"Could not parse expression: {exc}") from None
    try:
        return _eval(tree)
    except RecursionError:
        raise EvaluationError("Expression is nested too deeply") from None
