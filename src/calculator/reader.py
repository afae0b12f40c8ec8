"""Line-oriented number reader."""

from __future__ import annotations

import math
from typing import TextIO

import structlog


def read_numbers(stream: TextIO) -> list[float]:
    """Parse one number per line from *stream*.

    Blank lines are skipped silently; unparsable or non-finite lines are
    skipped with a warning so the engine only ever sees finite floats.
    """
    log = structlog.get_logger("reader")
    numbers: list[float] = []
    for line_num, raw in enumerate(stream, start=1):
        text = raw.strip()
        if not text:
            continue
        try:
            value = float(text)
        except ValueError:
            log.warning("skipping invalid number", line=line_num, text=raw.rstrip("\r\n"))
            continue
        if not math.isfinite(value):
            log.warning("skipping non-finite number", line=line_num, text=text)
            continue
        numbers.append(value)
    return numbers
