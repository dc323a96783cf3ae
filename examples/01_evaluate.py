#!/usr/bin/env python3
"""
01: Evaluate - one pass that validates and computes

Every compound expression is wrapped in its own bracket pair and holds exactly
one operator, so "((8+7)*2)" is valid and "8+7*2" is not.
"""

from bracketcalc import (
    EvaluatorConfig,
    generate_expressions,
    try_evaluate,
)


if __name__ == "__main__":
    samples = ["8", "((8+7)*2)", "(4-(7-1))", "(8)", "(1/0)", "(8+1]"]

    print("Strict matching")
    print("=" * 30)
    for expression in samples:
        result = try_evaluate(expression)
        if result.ok:
            print(f"{expression:>12} -> {result.value}")
        else:
            print(f"{expression:>12} -> {type(result.error).__name__}: {result.error}")
    print()

    lenient = EvaluatorConfig(strict_bracket_matching=False)
    print(f"Lenient matching: (8+1] -> {try_evaluate('(8+1]', lenient).value}")
    print()

    print("Random expressions")
    print("=" * 30)
    for item in generate_expressions(5, max_depth=3, seed=0):
        print(f"{item['expression']} = {item['value']}")
