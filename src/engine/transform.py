"""Pre-processing transforms applied before re-running the engine."""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.engine.errors import InvalidDomainError


def apply_log_transform(data: Sequence[float]) -> list[float]:
    """Natural log of every value.

    Raises :class:`InvalidDomainError` on the first value ``<= 0``; nothing
    is dropped silently since that would change the count.
    """
    for position, value in enumerate(data, start=1):
        if value <= 0:
            raise InvalidDomainError(value, position)
    return [math.log(v) for v in data]
