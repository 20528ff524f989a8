r"""Constant backoff strategies."""

from __future__ import annotations

__all__ = ["Constant", "Zero"]

from typing import TYPE_CHECKING

from adelay.backoff.base import Strategy
from adelay.duration import to_duration

if TYPE_CHECKING:
    from datetime import timedelta


class Constant(Strategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry attempt, regardless of the
    attempt number.

    Args:
        delay: The fixed delay, as ``int`` nanoseconds or ``timedelta``.

    Example:
        ```pycon
        >>> from adelay import SECOND, Constant
        >>> backoff = Constant(2 * SECOND)
        >>> backoff(0) == backoff(10) == 2 * SECOND
        True

        ```
    """

    def __init__(self, delay: int | timedelta) -> None:
        self.delay = to_duration(delay)

    def calculate(self, attempt: int) -> int:  # noqa: ARG002
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.delay})"


class Zero(Constant):
    """Backoff strategy that never waits.

    Mostly useful as a base for ``prepend`` or ``add``.
    """

    def __init__(self) -> None:
        super().__init__(0)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
