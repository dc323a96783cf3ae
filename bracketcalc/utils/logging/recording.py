# bracketcalc/utils/logging/recording.py
"""
In-memory reporting for tests and programmatic callers.
"""

from typing import Any, Dict, List, Optional
from .base import Logger


class RecordingLogger(Logger):
    """Keep every reported case and the last summary in memory."""

    def __init__(self):
        self.cases: List[Dict[str, Any]] = []
        self.summary: Optional[Dict[str, Any]] = None
        self.finished = False

    def log_case(self, expression: str, passed: bool, message: str):
        self.cases.append({"expression": expression, "passed": passed, "message": message})

    def log_summary(self, summary: Dict[str, Any]):
        self.summary = dict(summary)

    def finish(self):
        self.finished = True

    @property
    def failures(self) -> List[Dict[str, Any]]:
        return [case for case in self.cases if not case["passed"]]
