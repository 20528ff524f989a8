r"""Random jitter combinator."""

from __future__ import annotations

__all__ = ["Splayed"]

import logging
from typing import TYPE_CHECKING, Any

from adelay.backoff.base import Combinator
from adelay.duration import MAX_DURATION, MIN_DURATION, saturate, to_duration
from adelay.random_source import get_default_random_source

if TYPE_CHECKING:
    from datetime import timedelta

    from adelay.backoff.base import Strategy
    from adelay.random_source import RandomSource

logger: logging.Logger = logging.getLogger(__name__)


class Splayed(Combinator):
    """Add bounded random jitter to the delays of a base strategy.

    Each evaluation draws a jitter uniformly from ``[-spread, +spread)``
    and adds it to the base delay. This keeps processes that share a
    backoff strategy from retrying against a shared service in lockstep.
    When adding the jitter would leave the representable range, the
    jitter is negated instead, so the result always lies within
    ``[base - spread, base + spread]``.

    Args:
        base: The wrapped strategy.
        spread: The jitter amplitude. Its sign is ignored.
        source: Optional random source. The process-wide default source
            is captured at construction when omitted.

    Example:
        ```pycon
        >>> from adelay import SECOND, Exponential
        >>> from adelay.random_source import RandomSource
        >>> backoff = Exponential(10 * SECOND).splay(SECOND, source=RandomSource(seed=1))
        >>> 9 * SECOND <= backoff(0) <= 11 * SECOND
        True

        ```
    """

    def __init__(
        self,
        base: Strategy | Any,
        spread: int | timedelta,
        source: RandomSource | None = None,
    ) -> None:
        super().__init__(base)
        self.spread = abs(to_duration(spread))
        self.source = source if source is not None else get_default_random_source()

    def calculate(self, attempt: int) -> int:
        delay = self.base.calculate(attempt)
        if self.spread == 0:
            return delay
        jitter = self.source.randrange(-self.spread, self.spread)
        if (jitter > 0 and delay > MAX_DURATION - jitter) or (
            jitter < 0 and delay < MIN_DURATION - jitter
        ):
            logger.debug(f"Negating jitter {jitter} to keep delay {delay} in range")
            jitter = -jitter
        return saturate(delay + jitter)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, spread={self.spread})"
