r"""Combinators that splice literal delays in front of a strategy.

``Prepended`` pushes the base strategy back by the length of the prefix,
while ``Overwritten`` hides the first delays of the base without moving
the rest.
"""

from __future__ import annotations

__all__ = ["Overwritten", "Prepended"]

from typing import TYPE_CHECKING, Any

from adelay.backoff.base import Combinator
from adelay.duration import to_duration

if TYPE_CHECKING:
    from datetime import timedelta

    from adelay.backoff.base import Strategy


class _PrefixCombinator(Combinator):
    def __init__(self, base: Strategy | Any, *delays: int | timedelta) -> None:
        super().__init__(base)
        self.delays: tuple[int, ...] = tuple(to_duration(delay) for delay in delays)

    def _lookup(self, attempt: int) -> int:
        return self.delays[max(attempt, 0)]

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, delays={self.delays})"


class Prepended(_PrefixCombinator):
    """Return literal delays first, then the base strategy from attempt 0.

    For ``k`` prefix delays, attempts below ``k`` return the prefix and
    attempt ``n >= k`` returns ``base(n - k)``.

    Example:
        ```pycon
        >>> from adelay import MINUTE, SECOND, Exponential, format_duration
        >>> backoff = Exponential().units(SECOND).unshift(MINUTE)
        >>> [format_duration(d) for d in backoff.take(4)]
        ['1m0s', '1s', '2s', '4s']

        ```
    """

    def calculate(self, attempt: int) -> int:
        if self.delays and attempt < len(self.delays):
            return self._lookup(attempt)
        return self.base.calculate(attempt - len(self.delays))


class Overwritten(_PrefixCombinator):
    """Replace the first delays of the base strategy with literal delays.

    For ``k`` prefix delays, attempts below ``k`` return the prefix and
    attempt ``n >= k`` returns ``base(n)`` unchanged.

    Example:
        ```pycon
        >>> from adelay import HOUR, MINUTE, Exponential, format_duration
        >>> backoff = Exponential(ceiling=3600).units(MINUTE).shift(1).overwrite(HOUR)
        >>> [format_duration(d) for d in backoff.take(3)]
        ['1h0m0s', '4m0s', '8m0s']

        ```
    """

    def calculate(self, attempt: int) -> int:
        if self.delays and attempt < len(self.delays):
            return self._lookup(attempt)
        return self.base.calculate(attempt)
