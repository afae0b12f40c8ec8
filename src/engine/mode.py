"""Multi-mode detection by exact value frequency."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def find_modes(data: Sequence[float]) -> tuple[float, ...]:
    """Every value tied for the highest frequency, ascending.

    A sample in which nothing repeats has no mode and yields ``()``.
    """
    freqs: Counter = Counter(data)

    modes: list[float] = []
    max_freq = 0
    for value, freq in freqs.items():
        if freq > max_freq:
            max_freq = freq
            modes = [value]
        elif freq == max_freq:
            modes.append(value)

    if max_freq <= 1:
        return ()
    return tuple(sorted(modes))
