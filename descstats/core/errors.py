"""
descstats.core.errors
=====================

Exception types raised by the package.

- `StatsError`: common base for everything descstats raises.
- `InvalidInput`: construction-time failure (nothing numeric to analyze).
- `DomainError`: a measure is undefined for the current dataset or argument.
- `InvariantError`: an internal invariant was broken.

`InvalidInput` and `DomainError` are also `ValueError` subclasses so callers
catching the built-in keep working.

Examples
--------
>>> from descstats.core.errors import DomainError
>>> err = DomainError("percentile", "p must be in [0, 100], got 120.0")
>>> err.operation
'percentile'
>>> isinstance(err, ValueError)
True
>>> str(err)
'percentile: p must be in [0, 100], got 120.0'
"""

from __future__ import annotations
from typing import Any, Optional


class StatsError(Exception):
    """Base class for descstats errors."""


class InvalidInput(StatsError, ValueError):
    """
    Raised when a dataset cannot be turned into a Sample.

    Attributes:
        dropped: Number of input entries discarded before failing
        index: Position of the offending entry (strict policy only)
        value: The offending entry itself (strict policy only)
    """

    def __init__(
        self,
        message: str,
        *,
        dropped: int = 0,
        index: Optional[int] = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.dropped = dropped
        self.index = index
        self.value = value


class DomainError(StatsError, ValueError):
    """
    Raised when an operation's mathematical precondition does not hold.

    Attributes:
        operation: Name of the engine method that failed
        condition: The violated condition, phrased for the caller
    """

    def __init__(self, operation: str, condition: str) -> None:
        super().__init__(f"{operation}: {condition}")
        self.operation = operation
        self.condition = condition


class InvariantError(StatsError, RuntimeError):
    """Raised when an internal invariant is broken (a bug, not bad input)."""
