r"""Multiplicative combinators."""

from __future__ import annotations

__all__ = ["Scaled", "Units"]

import math
from typing import TYPE_CHECKING, Any

from adelay.backoff.base import Combinator
from adelay.duration import MAX_DURATION, MIN_DURATION, saturate, to_duration

if TYPE_CHECKING:
    from datetime import timedelta

    from adelay.backoff.base import Strategy


class Scaled(Combinator):
    """Multiply the delays of a base strategy by a real factor.

    The product is floored to whole nanoseconds and saturated. A
    product that is not a number (for instance ``0 * inf``) yields zero.

    Args:
        base: The wrapped strategy.
        factor: The multiplier.

    Example:
        ```pycon
        >>> from adelay import MILLISECOND, SECOND, Exponential
        >>> backoff = Exponential().units(SECOND).scale(1e-3)
        >>> [d // MILLISECOND for d in backoff.take(4)]
        [1, 2, 4, 8]

        ```
    """

    def __init__(self, base: Strategy | Any, factor: float) -> None:
        super().__init__(base)
        self.factor = float(factor)

    def calculate(self, attempt: int) -> int:
        value = self.base.calculate(attempt) * self.factor
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return MAX_DURATION if value > 0 else MIN_DURATION
        return saturate(math.floor(value))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, factor={self.factor})"


class Units(Combinator):
    """Multiply the delays of a base strategy by a duration unit.

    The base's delays are treated as plain counts, so
    ``Exponential().units(SECOND)`` yields 1s, 2s, 4s, ...

    Args:
        base: The wrapped strategy.
        unit: The duration each count stands for.

    Example:
        ```pycon
        >>> from adelay import MINUTE, Seconds
        >>> Seconds(1, 2).units(60).take(2) == [MINUTE, 2 * MINUTE]
        True

        ```
    """

    def __init__(self, base: Strategy | Any, unit: int | timedelta) -> None:
        super().__init__(base)
        self.unit = to_duration(unit)

    def calculate(self, attempt: int) -> int:
        return saturate(self.base.calculate(attempt) * self.unit)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, unit={self.unit})"
