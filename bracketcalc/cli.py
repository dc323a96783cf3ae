"""
Command-line entry point for bracketcalc.

Commands:
- `eval EXPRESSION`: evaluate one expression
- `check`: run the built-in self-check (default when no command is given)

Exit status is non-zero on any failure so the CLI composes with scripts and CI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from .config import EvaluatorConfig, max_depth_ceiling
from .evaluator import ArithmeticFault, MalformedExpression, evaluate
from .self_check import run_self_check
from .utils.logging import create_logger


def _cmd_eval(args: argparse.Namespace) -> int:
    """Evaluate a single expression and print the value or the failure."""
    base = EvaluatorConfig.from_env()
    config = EvaluatorConfig(
        strict_bracket_matching=base.strict_bracket_matching and not args.lenient,
        max_depth=args.max_depth if args.max_depth is not None else base.max_depth,
    )

    result: Dict[str, Any] = {"expression": args.expression}
    try:
        result["value"] = evaluate(args.expression, config)
        result["status"] = "ok"
    except MalformedExpression as e:
        result.update(status="malformed", error=e.reason)
    except ArithmeticFault as e:
        result.update(status="arithmetic_fault", error=str(e))

    if args.json:
        print(json.dumps(result, indent=2))
    elif result["status"] == "ok":
        print(result["value"])
    else:
        print(f"{result['status']}: {result['error']}", file=sys.stderr)
    return 0 if result["status"] == "ok" else 1


def _cmd_check(args: argparse.Namespace) -> int:
    """Run the self-check and print results."""
    logger = create_logger("recording") if args.json else create_logger("console", verbose=True)
    report = run_self_check(config=EvaluatorConfig.from_env(), logger=logger)
    if args.json:
        print(json.dumps(report, indent=2))
    return 0 if report.get("status") == "ok" else 1


def _depth_limit(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    ceiling = max_depth_ceiling()
    if number > ceiling:
        raise argparse.ArgumentTypeError(f"must be at most {ceiling}, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="bracketcalc",
        description="Evaluate fully-parenthesized single-digit arithmetic expressions",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log evaluation steps to stderr")
    subparsers = parser.add_subparsers(dest="command")

    p_eval = subparsers.add_parser("eval", help="Evaluate one expression")
    p_eval.add_argument("expression", help="Expression such as '((8+7)*2)'")
    p_eval.add_argument("--lenient", action="store_true", help="Accept any closing bracket for any opener")
    p_eval.add_argument("--max-depth", type=_depth_limit, default=None, help="Maximum bracket nesting")
    p_eval.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    p_eval.set_defaults(func=_cmd_eval)

    p_check = subparsers.add_parser("check", help="Run the built-in self-check")
    p_check.add_argument("--json", action="store_true", help="Output machine-readable JSON report")
    p_check.set_defaults(func=_cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Defaults to `check` if no command is provided."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        argv = ["check"]
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger("bracketcalc").setLevel(logging.DEBUG)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
