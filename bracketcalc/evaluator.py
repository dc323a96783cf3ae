"""
Evaluator for fully-parenthesized single-digit arithmetic expressions.

Validation and evaluation happen in the same recursive pass; there is no
tokenizer and no syntax tree. Grammar:

    expr := DIGIT | OPEN expr OP expr CLOSE
    OP   := '+' | '-' | '*' | '/'
    OPEN := '(' | '{' | '['      CLOSE := ')' | '}' | ']'

Within a compound expression the operator that splits it is the first one
found at bracket depth zero, scanning from the character after the opener.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import EvaluatorConfig, default_config

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
OPERATORS = frozenset('+-*/')
BRACKET_PAIRS = {'(': ')', '{': '}', '[': ']'}
OPENERS = frozenset(BRACKET_PAIRS)
CLOSERS = frozenset(BRACKET_PAIRS.values())

# "(1+2)" is the shortest compound expression
_MIN_COMPOUND_LENGTH = 5


class ExpressionError(Exception):
    """Base class for every failure raised while evaluating an expression."""
    pass


class MalformedExpression(ExpressionError):
    """Raised when an expression is not well formed.

    All syntax problems share this one type. ``reason`` is informational only.
    """

    def __init__(self, reason: str = "malformed expression", expression: Optional[str] = None):
        self.reason = reason
        self.expression = expression
        if expression is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason}: {expression!r}")


class ArithmeticFault(ExpressionError):
    """Raised when a well-formed expression divides by zero."""

    def __init__(self, expression: Optional[str] = None):
        self.expression = expression
        message = "Division by zero"
        if expression is not None:
            message = f"{message} in {expression!r}"
        super().__init__(message)


@dataclass(frozen=True)
class EvalResult:
    """Outcome of :func:`try_evaluate`: either a value or the error raised.

    Exactly one of ``value`` and ``error`` is set.
    """
    value: Optional[int]
    error: Optional[ExpressionError]

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("EvalResult needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def evaluate(expression: str, config: Optional[EvaluatorConfig] = None) -> int:
    """
    Validate and evaluate a fully-parenthesized expression.

    Args:
        expression: Expression text, e.g. "((8+7)*2)".
        config: Evaluation settings; the strict default is used when omitted.

    Returns:
        The integer value. Division truncates toward zero.

    Raises:
        TypeError: If ``expression`` is not a string.
        MalformedExpression: If the expression is not well formed.
        ArithmeticFault: If the expression divides by zero.
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, got {type(expression).__name__}")
    if config is None:
        config = default_config()
    return _eval(expression, 0, config)


# Alias for callers that use the parse() name
parse = evaluate


def try_evaluate(expression: str, config: Optional[EvaluatorConfig] = None) -> EvalResult:
    """Evaluate ``expression`` and return an :class:`EvalResult` instead of raising."""
    try:
        return EvalResult(value=evaluate(expression, config), error=None)
    except ExpressionError as e:
        return EvalResult(value=None, error=e)


def is_well_formed(expression: str, config: Optional[EvaluatorConfig] = None) -> bool:
    """Return True if ``expression`` is syntactically valid.

    Only the syntax is checked, so "(1/0)" counts as well formed.
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, got {type(expression).__name__}")
    if config is None:
        config = default_config()
    try:
        _eval(expression, 0, config, check_only=True)
    except MalformedExpression:
        return False
    return True


def _eval(s: str, depth: int, config: EvaluatorConfig, check_only: bool = False) -> int:
    n = len(s)

    if n == 1:
        if s in DIGITS:
            return int(s)
        raise _malformed("not a digit", s)

    if n < _MIN_COMPOUND_LENGTH:
        raise _malformed("too short for a compound expression", s)

    opener = s[0]
    if opener not in OPENERS:
        raise _malformed("compound expression must start with an opening bracket", s)

    closer = s[-1]
    if closer not in CLOSERS:
        raise _malformed("compound expression must end with a closing bracket", s)
    if config.strict_bracket_matching and closer != BRACKET_PAIRS[opener]:
        raise _malformed(f"{opener!r} closed by {closer!r}", s)

    if depth + 1 > config.max_depth:
        raise _malformed(f"nesting exceeds max_depth={config.max_depth}", s)

    split = _find_split(s, config.strict_bracket_matching)
    op = s[split]
    left = _eval(s[1:split], depth + 1, config, check_only)
    right = _eval(s[split + 1:-1], depth + 1, config, check_only)
    if check_only:
        return 0

    value = _apply(op, left, right, s)
    logger.debug(f"{s}: {left} {op} {right} = {value}")
    return value


def _find_split(s: str, strict: bool) -> int:
    """Return the index of the operator splitting the compound ``s``."""
    expected = []
    for i in range(1, len(s)):
        c = s[i]
        if c in OPENERS:
            expected.append(BRACKET_PAIRS[c])
        elif c in CLOSERS:
            if not expected:
                raise _malformed(f"unmatched {c!r} at index {i}", s)
            wanted = expected.pop()
            if strict and c != wanted:
                raise _malformed(f"expected {wanted!r} at index {i}, got {c!r}", s)
        elif c in OPERATORS and not expected and i > 1:
            return i
    raise _malformed("no operator at bracket depth zero", s)


def _apply(op: str, left: int, right: int, s: str) -> int:
    if op == '+':
        return left + right
    if op == '-':
        return left - right
    if op == '*':
        return left * right
    if right == 0:
        logger.debug(f"Division by zero in {s!r}")
        raise ArithmeticFault(s)
    # Truncate toward zero; Python's // floors
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _malformed(reason: str, s: str) -> MalformedExpression:
    logger.debug(f"Rejected {s!r}: {reason}")
    return MalformedExpression(reason, s)
