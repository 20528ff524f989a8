r"""Interval table backoff strategies.

An interval table returns the n-th entry of a fixed sequence of
durations. Attempts past the end of the table return the last entry,
and negative attempts return the first one.
"""

from __future__ import annotations

__all__ = ["Fixed", "Intervals", "Milliseconds", "Seconds"]

import math
from typing import TYPE_CHECKING

from adelay.backoff.base import Strategy
from adelay.duration import MILLISECOND, SECOND, saturate, to_duration

if TYPE_CHECKING:
    from datetime import timedelta


class Intervals(Strategy):
    """Backoff strategy that looks delays up in a fixed table.

    The table is copied at construction, so later changes to the
    sequence the caller passed in have no effect. An empty table always
    returns zero.

    Args:
        *delays: The delays, as ``int`` nanoseconds or ``timedelta``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from adelay import Intervals, format_duration
        >>> backoff = Intervals(timedelta(minutes=1), timedelta(hours=1), timedelta(hours=2))
        >>> [format_duration(d) for d in backoff.take(4)]
        ['1m0s', '1h0m0s', '2h0m0s', '2h0m0s']

        ```
    """

    def __init__(self, *delays: int | timedelta) -> None:
        self.delays: tuple[int, ...] = tuple(to_duration(delay) for delay in delays)

    def calculate(self, attempt: int) -> int:
        if not self.delays:
            return 0
        index = min(max(attempt, 0), len(self.delays) - 1)
        return self.delays[index]

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}{self.delays}"


Fixed = Intervals


def _scaled(values: tuple[float, ...], unit: int) -> tuple[int, ...]:
    return tuple(saturate(math.floor(value * unit)) for value in values)


class Seconds(Intervals):
    """Interval table whose entries are numbers of seconds.

    Example:
        ```pycon
        >>> from adelay import SECOND, Seconds
        >>> backoff = Seconds(2, 4, 6, 22, 39, 18)
        >>> [d // SECOND for d in backoff.take(8)]
        [2, 4, 6, 22, 39, 18, 18, 18]

        ```
    """

    def __init__(self, *seconds: float) -> None:
        super().__init__(*_scaled(seconds, SECOND))


class Milliseconds(Intervals):
    """Interval table whose entries are numbers of milliseconds.

    Example:
        ```pycon
        >>> from adelay import MILLISECOND, Milliseconds
        >>> backoff = Milliseconds(2, 4, 6)
        >>> [d // MILLISECOND for d in backoff.take(4)]
        [2, 4, 6, 6]

        ```
    """

    def __init__(self, *milliseconds: float) -> None:
        super().__init__(*_scaled(milliseconds, MILLISECOND))
