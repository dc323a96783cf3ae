# bracketcalc/utils/logging/base.py
"""
Base logger interface for self-check reporting.
"""

from typing import Any, Dict
from abc import ABC, abstractmethod


class Logger(ABC):
    """
    Abstract base class for case-reporting backends.

    The self-check harness reports one line per evaluated case and a
    summary once all cases have run.
    """

    @abstractmethod
    def log_case(self, expression: str, passed: bool, message: str):
        """
        Report the outcome of one case.

        Args:
            expression: The expression that was evaluated
            passed: Whether the outcome matched the expectation
            message: Human-readable description of the outcome
        """
        pass

    @abstractmethod
    def log_summary(self, summary: Dict[str, Any]):
        """
        Report aggregate results.

        Args:
            summary: Mapping with at least 'status', 'passed' and 'failed'
        """
        pass

    @abstractmethod
    def finish(self):
        """Flush or release anything the backend holds."""
        pass
