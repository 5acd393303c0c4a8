"""Rewrite human-friendly calculator input into a canonical expression.

The rewrite is purely textual: an ordered list of regex passes, each relying
on the normalization done by the previous ones. The output only uses names the
evaluator knows about (``math.<name>``, ``fact``, ``log10``).

Names that are already qualified with ``math.`` are left alone and converted
trig calls are recognized, so feeding a canonical expression back through
``transform`` with the same angle mode returns it unchanged.
"""

from __future__ import annotations

import re
from typing import Any, Dict

PI_PLACEHOLDER = "PI"

# Display glyphs produced by the keypad.
GLYPHS: Dict[str, str] = {
    "×": "*",
    "÷": "/",
}

FUNCTION_MAP: Dict[str, str] = {
    "sqrt": "math.sqrt",
    "abs": "math.fabs",
    "ln": "math.log",
    "log": "math.log10",
    "exp": "math.exp",
    "pow": "math.pow",
}

TRIG_FUNCTIONS = ("sin", "cos", "tan", "asin", "acos", "atan")

# Not preceded by a word character or a dot, i.e. not part of ``math.<name>``.
_STANDALONE = r"(?<![\w.])"

_PI_WORD = re.compile(_STANDALONE + r"pi\b", re.IGNORECASE)
_PERCENT = re.compile(r"(\d+(?:\.\d+)?)%")
_PI_TOKEN = re.compile(_STANDALONE + PI_PLACEHOLDER + r"\b")
_E_CONSTANT = re.compile(_STANDALONE + r"e\b")
_GROUP_FACTORIAL = re.compile(r"(\([^)]+\))!(?!=)")
_NUMBER_FACTORIAL = re.compile(r"(\d+(?:\.\d+)?)!(?!=)")

_FUNCTION_PATTERNS = [
    (re.compile(_STANDALONE + name + r"\s*\("), target + "(")
    for name, target in FUNCTION_MAP.items()
]
_TRIG_PATTERNS = [
    (re.compile(_STANDALONE + name + r"\s*\("), "math." + name + "(")
    for name in TRIG_FUNCTIONS
]

_DEG_TO_RAD = " * math.pi / 180"
_RAD_TO_DEG = " * 180 / math.pi"

# math.sin(<arg>) -> math.sin((<arg>) * math.pi / 180), unless already wrapped.
_DEGREE_ARGUMENT = re.compile(
    r"math\.(sin|cos|tan)\((?!\([^)]*\)" + re.escape(_DEG_TO_RAD) + r"\))"
    r"\s*([^)]*?)\s*\)"
)
# math.asin(<arg>) -> (math.asin(<arg>) * 180 / math.pi), unless already wrapped.
_DEGREE_RESULT = re.compile(
    r"math\.(asin|acos|atan)\(\s*([^)]*?)\s*\)(?!" + re.escape(_RAD_TO_DEG) + r"\))"
)
_LOG10_CALL = re.compile(r"math\.log10\(")


def transform(raw: Any, use_degrees: bool) -> str:
    """Return the canonical form of ``raw``.

    Never raises; malformed input passes through and is rejected later by the
    evaluator. Known limitation: the degree conversion captures a trig
    argument up to the first closing parenthesis, so ``sin((1+2)*3)`` is not
    converted correctly.
    """
    expr = str(raw).strip()

    expr = _PI_WORD.sub(PI_PLACEHOLDER, expr)
    expr = expr.replace("π", PI_PLACEHOLDER)

    for glyph, operator in GLYPHS.items():
        expr = expr.replace(glyph, operator)

    expr = _PERCENT.sub(r"(\1/100)", expr)
    expr = expr.replace("^", "**")

    expr = _PI_TOKEN.sub("math.pi", expr)
    expr = _E_CONSTANT.sub("math.e", expr)

    expr = _GROUP_FACTORIAL.sub(r"fact(\1)", expr)
    expr = _NUMBER_FACTORIAL.sub(r"fact(\1)", expr)

    for pattern, replacement in _FUNCTION_PATTERNS:
        expr = pattern.sub(replacement, expr)
    for pattern, replacement in _TRIG_PATTERNS:
        expr = pattern.sub(replacement, expr)

    if use_degrees:
        expr = _DEGREE_ARGUMENT.sub(
            lambda m: f"math.{m.group(1)}(({m.group(2)}){_DEG_TO_RAD})", expr
        )
        expr = _DEGREE_RESULT.sub(
            lambda m: f"(math.{m.group(1)}({m.group(2)}){_RAD_TO_DEG})", expr
        )

    return _LOG10_CALL.sub("log10(", expr)
