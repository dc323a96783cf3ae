"""
Self-check harness for the expression evaluator.

Runs a fixed set of well-formed and malformed expressions through
:func:`bracketcalc.evaluator.evaluate` and reports one PASS/FAIL line per case.

Usage:
    from bracketcalc.self_check import run_self_check
    report = run_self_check()
    assert report["status"] == "ok"
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import EvaluatorConfig
from .evaluator import ArithmeticFault, MalformedExpression, evaluate
from .utils.logging import ConsoleLogger, Logger

WELL_FORMED_CASES: Tuple[Tuple[str, int], ...] = (
    ("((8+7)*2)", 30),
    ("(4-(7-1))", -2),
    ("8", 8),
    ("((1+1)*(2*2))", 8),
    ("((1+9)*(2-5))", -30),
    ("((0-9)*((1+9)*(2-5)))", 270),
)

MALFORMED_CASES: Tuple[str, ...] = (
    ")8+)1(())",
    "(8+())",
    "-1",
    "(   5    -7)",
    "108",
    "(8)",
    "(+8)",
)


def run_self_check(
    verbose: bool = True,
    config: Optional[EvaluatorConfig] = None,
    logger: Optional[Logger] = None,
    well_formed: Sequence[Tuple[str, int]] = WELL_FORMED_CASES,
    malformed: Sequence[str] = MALFORMED_CASES,
) -> Dict[str, Any]:
    """
    Evaluate every case and collect a report.

    Args:
        verbose: Print passing cases too (ignored when ``logger`` is given).
        config: Evaluator configuration passed through to every case.
        logger: Reporting backend; defaults to a ConsoleLogger.
        well_formed: (expression, expected value) pairs.
        malformed: Expressions that must be rejected.

    Returns:
        A dictionary with keys:
            status: "ok" or "fail"
            checks: mapping of expression to {"ok": bool, ...}
            errors: list of failure messages
    """
    if logger is None:
        logger = ConsoleLogger(verbose=verbose)

    checks: Dict[str, Any] = {}
    errors: List[str] = []
    passed = failed = 0

    for expression, expected in well_formed:
        try:
            returned = evaluate(expression, config)
        except (MalformedExpression, ArithmeticFault) as e:
            message = f"Expression {expression} wrongly rejected ({e})"
            checks[expression] = {"ok": False, "expected": expected, "error": str(e)}
        else:
            message = f"Expression {expression} evaluated to {returned} (expected: {expected})"
            checks[expression] = {"ok": returned == expected, "expected": expected, "returned": returned}
        ok = checks[expression]["ok"]
        if ok:
            passed += 1
        else:
            failed += 1
            errors.append(message)
        logger.log_case(expression, ok, message)

    for expression in malformed:
        try:
            returned = evaluate(expression, config)
        except MalformedExpression:
            message = f"Expression {expression} recognised as malformed"
            checks[expression] = {"ok": True}
        except ArithmeticFault as e:
            message = f"Malformed expression {expression} raised an arithmetic fault ({e})"
            checks[expression] = {"ok": False, "error": str(e)}
        else:
            message = f"Malformed expression {expression} evaluated to {returned}"
            checks[expression] = {"ok": False, "returned": returned}
        ok = checks[expression]["ok"]
        if ok:
            passed += 1
        else:
            failed += 1
            errors.append(message)
        logger.log_case(expression, ok, message)

    status = "ok" if not errors else "fail"
    logger.log_summary({"status": status, "passed": passed, "failed": failed})
    logger.finish()

    return {"status": status, "checks": checks, "errors": errors}
