# bracketcalc/config.py
"""
Evaluator configuration.

Values can be set programmatically or read from environment variables:

    BRACKETCALC_STRICT_BRACKETS   'true' (default) or 'false'
    BRACKETCALC_MAX_DEPTH         positive integer nesting limit
"""

import logging
import os
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

# Interpreter frames reserved for callers of the evaluator
_STACK_HEADROOM = 300

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


@dataclass(frozen=True)
class EvaluatorConfig:
    """Configuration for a single evaluation."""
    # Closers must match their own opener family; False accepts any closer
    strict_bracket_matching: bool = True
    # Maximum nesting of compound expressions before failing fast
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")
        ceiling = max_depth_ceiling()
        if self.max_depth > ceiling:
            raise ValueError(
                f"max_depth={self.max_depth} exceeds the recursion-safe ceiling of {ceiling}"
            )

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """Build a config from BRACKETCALC_* environment variables.

        Unparseable values are logged and replaced by the defaults.
        """
        strict = True
        raw_strict = os.getenv('BRACKETCALC_STRICT_BRACKETS')
        if raw_strict is not None:
            value = raw_strict.strip().lower()
            if value in _TRUE_VALUES:
                strict = True
            elif value in _FALSE_VALUES:
                strict = False
            else:
                logger.warning(
                    f"Ignoring BRACKETCALC_STRICT_BRACKETS={raw_strict!r}; expected true or false"
                )

        max_depth = DEFAULT_MAX_DEPTH
        raw_depth = os.getenv('BRACKETCALC_MAX_DEPTH')
        if raw_depth is not None:
            try:
                max_depth = int(raw_depth)
            except ValueError:
                logger.warning(f"Ignoring BRACKETCALC_MAX_DEPTH={raw_depth!r}; not an integer")
            else:
                if max_depth < 1:
                    logger.warning(f"Ignoring BRACKETCALC_MAX_DEPTH={raw_depth!r}; must be positive")
                    max_depth = DEFAULT_MAX_DEPTH
                elif max_depth > max_depth_ceiling():
                    logger.warning(
                        f"Ignoring BRACKETCALC_MAX_DEPTH={raw_depth!r}; "
                        f"exceeds the recursion-safe ceiling of {max_depth_ceiling()}"
                    )
                    max_depth = DEFAULT_MAX_DEPTH

        return cls(strict_bracket_matching=strict, max_depth=max_depth)


def max_depth_ceiling() -> int:
    """Largest max_depth the interpreter stack can hold.

    The evaluator uses one frame per nesting level, so the ceiling follows
    sys.getrecursionlimit() minus headroom for the calling code.
    """
    return max(1, sys.getrecursionlimit() - _STACK_HEADROOM)


_default_config = EvaluatorConfig()


def default_config() -> EvaluatorConfig:
    """Return the shared default configuration (strict matching)."""
    return _default_config
