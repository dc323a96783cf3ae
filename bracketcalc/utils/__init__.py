"""
General utilities for bracketcalc.

- logging: pluggable case reporting (console, in-memory)
"""

from .logging import Logger, ConsoleLogger, RecordingLogger, create_logger

__all__ = [
    'Logger', 'ConsoleLogger', 'RecordingLogger', 'create_logger',
]
