"""
Random generation of well-formed expressions with known values.

Useful for property checks: every generated expression must evaluate to the
value recorded next to it.
"""

import random
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

from .evaluator import BRACKET_PAIRS, CLOSERS, OPENERS


def generate_expressions(
    num_expressions: int,
    max_depth: int = 3,
    seed: Optional[int] = None,
    bracket_families: str = "({[",
    allow_division: bool = True,
    leaf_probability: float = 0.3,
) -> List[Dict]:
    """
    Generate random well-formed expressions.

    Args:
        num_expressions: How many expressions to generate.
        max_depth: Maximum bracket nesting; 0 yields bare digits only.
        seed: Random seed for reproducibility.
        bracket_families: Opening brackets to draw from (subset of "({[").
        allow_division: Whether '/' may appear. Zero divisors are never generated.
        leaf_probability: Chance of stopping early at a digit below the top level.

    Returns:
        List of dicts with keys 'expression', 'value' and 'depth'.

    Raises:
        ValueError: On negative counts/depths, an empty or unknown bracket
                    family, or a leaf_probability outside [0, 1].
    """
    if num_expressions < 0:
        raise ValueError(f"num_expressions must be >= 0, got {num_expressions}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    if not bracket_families or any(c not in OPENERS for c in bracket_families):
        raise ValueError(
            f"bracket_families must be a non-empty subset of {''.join(sorted(OPENERS))!r}, "
            f"got {bracket_families!r}"
        )
    if not 0.0 <= leaf_probability <= 1.0:
        raise ValueError(f"leaf_probability must be in [0, 1], got {leaf_probability}")

    rng = random.Random(seed)
    operators = "+-*/" if allow_division else "+-*"

    expressions = []
    for _ in range(num_expressions):
        text, value, depth = _build(rng, max_depth, bracket_families, operators, leaf_probability, top=True)
        expressions.append({"expression": text, "value": value, "depth": depth})
    return expressions


def _build(
    rng: random.Random,
    remaining: int,
    families: str,
    operators: str,
    leaf_probability: float,
    top: bool = False,
) -> Tuple[str, int, int]:
    """Return (text, value, nesting depth) for one random subexpression."""
    if remaining == 0 or (not top and rng.random() < leaf_probability):
        digit = rng.randint(0, 9)
        return str(digit), digit, 0

    left_text, left, left_depth = _build(rng, remaining - 1, families, operators, leaf_probability)
    right_text, right, right_depth = _build(rng, remaining - 1, families, operators, leaf_probability)

    op = rng.choice(operators)
    if op == '/' and right == 0:
        op = rng.choice("+-*")

    opener = rng.choice(families)
    text = f"{opener}{left_text}{op}{right_text}{BRACKET_PAIRS[opener]}"
    return text, _combine(op, left, right), 1 + max(left_depth, right_depth)


def _combine(op: str, left: int, right: int) -> int:
    if op == '+':
        return left + right
    if op == '-':
        return left - right
    if op == '*':
        return left * right
    # int() of an exact Fraction truncates toward zero
    return int(Fraction(left, right))


def rebracket(expression: str, opener: str) -> str:
    """
    Replace the outermost bracket pair of ``expression`` with another family.

    A bare digit has no brackets and is returned unchanged.

    Raises:
        ValueError: If ``opener`` is not an opening bracket, or the expression
                    is not wrapped in a bracket pair.
    """
    if opener not in OPENERS:
        raise ValueError(f"Unknown opening bracket: {opener!r}")
    if len(expression) == 1:
        return expression
    if len(expression) < 2 or expression[0] not in OPENERS or expression[-1] not in CLOSERS:
        raise ValueError(f"Expression is not wrapped in brackets: {expression!r}")
    return f"{opener}{expression[1:-1]}{BRACKET_PAIRS[opener]}"
