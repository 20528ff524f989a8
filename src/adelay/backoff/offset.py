r"""Additive combinator."""

from __future__ import annotations

__all__ = ["Offset"]

from typing import TYPE_CHECKING, Any

from adelay.backoff.base import Combinator
from adelay.duration import saturate, to_duration

if TYPE_CHECKING:
    from datetime import timedelta

    from adelay.backoff.base import Strategy


class Offset(Combinator):
    """Add a fixed duration to the delays of a base strategy.

    The result may be negative. Follow with ``floor`` to forbid that.

    Args:
        base: The wrapped strategy.
        delta: The duration to add.
        negate: If ``True``, subtract ``delta`` instead.

    Example:
        ```pycon
        >>> from adelay import MINUTE, SECOND, Exponential, format_duration
        >>> backoff = Exponential().units(SECOND).add(MINUTE)
        >>> [format_duration(d) for d in backoff.take(3)]
        ['1m1s', '1m2s', '1m4s']

        ```
    """

    def __init__(self, base: Strategy | Any, delta: int | timedelta, negate: bool = False) -> None:
        super().__init__(base)
        delta = to_duration(delta)
        self.delta = -delta if negate else delta

    def calculate(self, attempt: int) -> int:
        return saturate(self.base.calculate(attempt) + self.delta)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, delta={self.delta})"
