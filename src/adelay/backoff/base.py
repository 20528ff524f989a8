r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "Combinator", "Strategy", "as_strategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from adelay.duration import to_seconds, to_timedelta
from adelay.exceptions import InvalidStrategyError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import timedelta

    from adelay.random_source import RandomSource


class Strategy(ABC):
    """Abstract base class for backoff strategies.

    A strategy maps a retry attempt number to the duration, in
    nanoseconds, the caller should wait before the next attempt. A
    strategy is stateless: the caller owns the attempt counter, performs
    the sleep and decides whether to retry at all.

    Strategies are callable, and every strategy exposes combinator
    methods that wrap it into a new strategy. Chains read left to right.

    Example:
        ```pycon
        >>> from adelay import SECOND, Exponential
        >>> backoff = Exponential(SECOND).ceil(10 * SECOND)
        >>> [d // SECOND for d in backoff.take(6)]
        [1, 2, 4, 8, 10, 10]

        ```
    """

    @abstractmethod
    def calculate(self, attempt: int) -> int:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: The current attempt number (0-indexed). For example,
                attempt=0 is the first retry, attempt=1 is the second retry, etc.

        Returns:
            The calculated delay in nanoseconds.
        """

    def __call__(self, attempt: int) -> int:
        return self.calculate(attempt)

    def take(self, count: int) -> list[int]:
        """Evaluate the strategy for attempts ``0`` to ``count - 1``."""
        return [self.calculate(attempt) for attempt in range(count)]

    def at(self, attempts: Iterable[int]) -> list[int]:
        """Evaluate the strategy for each attempt in ``attempts``."""
        return [self.calculate(attempt) for attempt in attempts]

    def seconds(self, attempt: int) -> float:
        """Return the delay for ``attempt`` as float seconds.

        The result can be passed directly to ``time.sleep`` or
        ``asyncio.sleep``.
        """
        return to_seconds(self.calculate(attempt))

    def timedelta(self, attempt: int) -> timedelta:
        """Return the delay for ``attempt`` as a ``datetime.timedelta``."""
        return to_timedelta(self.calculate(attempt))

    ##########################
    #     Combinators        #
    ##########################

    def scale(self, factor: float) -> Strategy:
        """Multiply every delay by ``factor``, flooring the result."""
        from adelay.backoff.scale import Scaled

        return Scaled(self, factor)

    def units(self, unit: int | timedelta) -> Strategy:
        """Multiply every delay by a duration unit.

        Useful to turn the raw counts of a generator such as
        ``Exponential()`` into real durations.
        """
        from adelay.backoff.scale import Units

        return Units(self, unit)

    def add(self, delta: int | timedelta) -> Strategy:
        """Add a fixed duration to every delay."""
        from adelay.backoff.offset import Offset

        return Offset(self, delta)

    def sub(self, delta: int | timedelta) -> Strategy:
        """Subtract a fixed duration from every delay."""
        from adelay.backoff.offset import Offset

        return Offset(self, delta, negate=True)

    def floor(self, minimum: int | timedelta) -> Strategy:
        """Force every delay to be at least ``minimum``."""
        from adelay.backoff.clamp import Floored

        return Floored(self, minimum)

    def ceil(self, maximum: int | timedelta) -> Strategy:
        """Force every delay to be at most ``maximum``."""
        from adelay.backoff.clamp import Ceiled

        return Ceiled(self, maximum)

    min = floor
    max = ceil

    def shift(self, count: int) -> Strategy:
        """Skip the first ``count`` delays of this strategy."""
        from adelay.backoff.shift import Shifted

        return Shifted(self, count)

    def unshift(self, *delays: int | timedelta) -> Strategy:
        """Return ``delays`` first, then this strategy from attempt 0."""
        from adelay.backoff.prefix import Prepended

        return Prepended(self, *delays)

    prepend = unshift

    def overwrite(self, *delays: int | timedelta) -> Strategy:
        """Replace the first ``len(delays)`` delays of this strategy."""
        from adelay.backoff.prefix import Overwritten

        return Overwritten(self, *delays)

    def splay(self, spread: int | timedelta, source: RandomSource | None = None) -> Strategy:
        """Add uniform random jitter in ``[-spread, +spread)`` to every delay.

        Args:
            spread: The jitter amplitude.
            source: Optional random source. The process-wide default
                source is used when omitted.
        """
        from adelay.backoff.splay import Splayed

        return Splayed(self, spread, source=source)


BaseBackoffStrategy = Strategy


def as_strategy(base: Any) -> Strategy:
    """Return ``base`` as a ``Strategy``.

    Plain callables are adapted with ``FunctionStrategy``.

    Args:
        base: The object to use as a base strategy.

    Returns:
        The base as a ``Strategy``.

    Raises:
        InvalidStrategyError: If ``base`` is ``None`` or is not callable.

    Example:
        ```pycon
        >>> from adelay.backoff import as_strategy
        >>> strategy = as_strategy(lambda attempt: attempt * 10)
        >>> strategy(3)
        30

        ```
    """
    if isinstance(base, Strategy):
        return base
    if base is None:
        msg = "base strategy must not be None"
        raise InvalidStrategyError(msg)
    if not callable(base):
        msg = f"base strategy must be callable, got {type(base).__name__}"
        raise InvalidStrategyError(msg)
    from adelay.backoff.function import FunctionStrategy

    return FunctionStrategy(base)


class Combinator(Strategy):
    """Base class for strategies that wrap another strategy.

    The base is validated when the combinator is built, so a missing base
    fails at composition time rather than when the strategy is evaluated.

    Args:
        base: The wrapped strategy, or a plain callable.

    Raises:
        InvalidStrategyError: If ``base`` is ``None`` or is not callable.
    """

    def __init__(self, base: Strategy | Any) -> None:
        self.base = as_strategy(base)
