# bracketcalc/utils/logging/console.py
"""
Console reporting: one PASS/FAIL line per case.
"""

from typing import Any, Dict
from .base import Logger


class ConsoleLogger(Logger):
    """
    Print case outcomes to stdout.

    With ``verbose=False`` only failures and the summary are printed.
    """

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def log_case(self, expression: str, passed: bool, message: str):
        if passed and not self.verbose:
            return
        print(f"{'PASS' if passed else 'FAIL'}: {message}")

    def log_summary(self, summary: Dict[str, Any]):
        print(
            f"Self-check: {summary.get('status', 'fail')} "
            f"({summary.get('passed', 0)} passed, {summary.get('failed', 0)} failed)"
        )

    def finish(self):
        """No cleanup needed for console output."""
        pass
