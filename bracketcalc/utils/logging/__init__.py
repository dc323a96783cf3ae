"""
Case reporting backends for the self-check harness.
"""

from .base import Logger
from .console import ConsoleLogger
from .recording import RecordingLogger
from .factory import create_logger

__all__ = [
    'Logger',
    'ConsoleLogger',
    'RecordingLogger',
    'create_logger',
]
