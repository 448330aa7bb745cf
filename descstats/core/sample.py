"""
descstats.core.sample
=====================

Typed ingestion of raw input into an immutable `Sample`.

Input collections are validated once, at this boundary. Only finite real
numbers are kept: ``int``, ``float`` and other ``numbers.Real`` types are
converted to ``float``. Booleans, strings (even numeric-looking ones),
``None``, NaN and infinities are not numbers for this purpose.

What happens to a non-numeric entry depends on the policy:

- ``"drop"`` (default): the entry is skipped and counted in `Sample.dropped`.
- ``"raise"``: ingestion fails with `InvalidInput` at the first such entry.

Either way an empty result fails with `InvalidInput`.

Examples
--------
>>> from descstats.core.sample import IngestConfig, ingest
>>> s = ingest([3, "x", 1.5, None, float("nan"), 2])
>>> s.values
(3.0, 1.5, 2.0)
>>> s.dropped
3
>>> ingest([1, "x"], IngestConfig(non_numeric="raise"))  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
descstats.core.errors.InvalidInput: non-numeric entry at index 1: 'x'
"""

from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from descstats.core.errors import InvalidInput
from descstats.core.logging import get_logger
from descstats.core.names import IngestPolicy

log = get_logger("sample")


@dataclass(frozen=True)
class IngestConfig:
    """
    Ingestion settings.

    Attributes:
        non_numeric: "drop" to skip non-numeric entries, "raise" to reject them
        allow_bool: Treat True/False as 1.0/0.0 instead of non-numeric
    """

    non_numeric: IngestPolicy = "drop"
    allow_bool: bool = False

    def validate(self) -> None:
        """Validate ingestion configuration."""
        if self.non_numeric not in ("drop", "raise"):
            raise ValueError(
                f"non_numeric must be 'drop' or 'raise', got {self.non_numeric!r}"
            )


@dataclass(frozen=True)
class Sample:
    """
    Validated, immutable numeric dataset.

    Attributes:
        values: Retained values, in input order
        dropped: Number of input entries discarded during ingestion
    """

    values: Tuple[float, ...]
    dropped: int = 0

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if not values:
            raise InvalidInput(
                "The dataset must contain at least one numeric value.",
                dropped=self.dropped,
            )

        normalized = []
        for i, item in enumerate(values):
            x = as_finite_real(item)
            if x is None:
                raise InvalidInput(
                    f"non-numeric entry at index {i}: {item!r}",
                    dropped=self.dropped,
                    index=i,
                    value=item,
                )
            normalized.append(x)
        object.__setattr__(self, "values", tuple(normalized))

    @property
    def n(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.values)


def as_finite_real(value: Any, allow_bool: bool = False) -> Optional[float]:
    """Return ``value`` as a float if it is a finite real number, else None.

    >>> as_finite_real(3)
    3.0
    >>> as_finite_real("3") is None
    True
    >>> as_finite_real(True) is None, as_finite_real(True, allow_bool=True)
    (True, 1.0)
    """
    if isinstance(value, bool) and not allow_bool:
        return None
    if not isinstance(value, numbers.Real):
        return None
    x = float(value)
    if not math.isfinite(x):
        return None
    return x


def ingest(data: Iterable[Any], config: Optional[IngestConfig] = None) -> Sample:
    """
    Build a Sample from an arbitrary collection.

    Args:
        data: Any iterable; only finite real numbers are retained
        config: Ingestion settings (defaults to dropping non-numeric entries)

    Returns:
        A Sample holding the retained values as floats

    Raises:
        InvalidInput: Nothing numeric remains, or the "raise" policy met a
            non-numeric entry
    """
    config = config or IngestConfig()
    config.validate()

    values = []
    dropped = 0
    for i, item in enumerate(data):
        x = as_finite_real(item, allow_bool=config.allow_bool)
        if x is None:
            if config.non_numeric == "raise":
                log.debug("sample.rejected", index=i, value=repr(item))
                raise InvalidInput(
                    f"non-numeric entry at index {i}: {item!r}",
                    dropped=dropped,
                    index=i,
                    value=item,
                )
            dropped += 1
            continue
        values.append(x)

    if not values:
        log.debug("sample.rejected", reason="empty", dropped=dropped)
        raise InvalidInput(
            "The dataset must contain at least one numeric value.", dropped=dropped
        )

    log.debug(
        "sample.ingested", n=len(values), dropped=dropped, policy=config.non_numeric
    )
    return Sample(values=tuple(values), dropped=dropped)
