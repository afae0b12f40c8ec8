"""Typed failures raised by the statistics engine."""

from __future__ import annotations


class StatsError(Exception):
    """Base class for every failure the engine reports."""


class EmptyInputError(StatsError):
    """The sample contains no values."""

    def __init__(self) -> None:
        super().__init__("input contains no valid numbers")


class InvalidDomainError(StatsError):
    """A value falls outside the domain of a transform."""

    def __init__(self, value: float, position: int) -> None:
        super().__init__(
            f"log transform requires positive values, "
            f"got {value!r} at position {position}"
        )
        self.value = value
        self.position = position


class InsufficientDataError(StatsError):
    """A requested trim would discard the entire sample."""

    def __init__(self, count: int, trim_percent: float) -> None:
        super().__init__(
            f"dataset too small for {trim_percent:g}% trim "
            f"({count} values, nothing would remain)"
        )
        self.count = count
        self.trim_percent = trim_percent


class ConfigError(StatsError, ValueError):
    """A configuration value is outside its accepted range."""
