# bracketcalc/utils/logging/factory.py
"""
Factory function for creating logger instances.
"""

from .base import Logger
from .console import ConsoleLogger
from .recording import RecordingLogger


def create_logger(
    logger_type: str = "console",
    **kwargs
) -> Logger:
    """
    Factory function to create logger instances.

    Args:
        logger_type: Type of logger ("console", "recording")
        **kwargs: Logger-specific parameters

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is unknown

    Examples:
        logger = create_logger("console", verbose=False)
        logger = create_logger("recording")
    """
    if logger_type == "console":
        return ConsoleLogger(**kwargs)
    elif logger_type == "recording":
        return RecordingLogger()
    else:
        available_types = ["console", "recording"]
        raise ValueError(f"Unknown logger type: {logger_type}. Available: {available_types}")
