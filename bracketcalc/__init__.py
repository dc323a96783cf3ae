"""
bracketcalc: validate and evaluate fully-parenthesized arithmetic expressions.

This module exposes the public API: the evaluator, its configuration,
expression generation and the self-check harness.
"""

from .config import EvaluatorConfig, default_config, max_depth_ceiling
from .evaluator import (
    ArithmeticFault,
    EvalResult,
    ExpressionError,
    MalformedExpression,
    evaluate,
    is_well_formed,
    parse,
    try_evaluate,
)
from .generator import generate_expressions, rebracket
from .self_check import run_self_check

__version__ = "0.1.0"

__all__ = [
    "EvaluatorConfig",
    "default_config",
    "max_depth_ceiling",
    "ArithmeticFault",
    "EvalResult",
    "ExpressionError",
    "MalformedExpression",
    "evaluate",
    "is_well_formed",
    "parse",
    "try_evaluate",
    "generate_expressions",
    "rebracket",
    "run_self_check",
]
