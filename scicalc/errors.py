"""Exceptions raised by the calculator pipeline."""

from __future__ import annotations


class CalculatorError(Exception):
    """Base class for every failure the calculator reports."""


class InvalidExpressionError(CalculatorError):
    """Canonical expression contains characters outside the whitelist."""


class EvaluationError(CalculatorError):
    """The expression could not be evaluated (syntax, unknown name, ...)."""


class EmptyExpressionError(CalculatorError):
    """Nothing to evaluate: the input is blank."""
