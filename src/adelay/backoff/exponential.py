r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["Exponential"]

from typing import TYPE_CHECKING

from adelay.backoff.base import Strategy
from adelay.duration import MAX_DURATION, MIN_DURATION, saturate, to_duration

if TYPE_CHECKING:
    from datetime import timedelta

# 2**_MAX_EXPONENT already exceeds MAX_DURATION for any non-zero unit
_MAX_EXPONENT = MAX_DURATION.bit_length()


class Exponential(Strategy):
    """Exponential backoff strategy.

    Calculates delay as: ``min(unit * 2 ** attempt, ceiling)``.

    Negative attempts map to a zero delay. Growth saturates at the
    ceiling, or at ``MAX_DURATION`` (about 292 years) when no ceiling is
    set, so large attempt numbers never overflow.

    Args:
        unit: The delay for attempt 0. Defaults to ``1`` (one nanosecond),
            which yields raw powers of two meant to be converted with
            ``units``.
        ceiling: Optional maximum delay. ``None`` or a negative value
            means unbounded.

    Example:
        ```pycon
        >>> from adelay import SECOND, Exponential
        >>> backoff = Exponential(SECOND)
        >>> [d // SECOND for d in backoff.take(5)]
        [1, 2, 4, 8, 16]
        >>> Exponential(ceiling=300).take(10)
        [1, 2, 4, 8, 16, 32, 64, 128, 256, 300]

        ```
    """

    def __init__(self, unit: int | timedelta = 1, ceiling: int | timedelta | None = None) -> None:
        self.unit = to_duration(unit)
        ceil = None if ceiling is None else to_duration(ceiling)
        self.ceiling = MAX_DURATION if ceil is None or ceil < 0 else ceil

    def calculate(self, attempt: int) -> int:
        if attempt < 0 or self.unit == 0:
            return 0
        if attempt >= _MAX_EXPONENT:
            delay = MAX_DURATION if self.unit > 0 else MIN_DURATION
        else:
            delay = saturate(self.unit << attempt)
        return min(delay, self.ceiling)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(unit={self.unit}, ceiling={self.ceiling})"
