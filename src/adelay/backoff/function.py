r"""Adapter turning a plain callable into a backoff strategy."""

from __future__ import annotations

__all__ = ["FunctionStrategy"]

from typing import TYPE_CHECKING

from adelay.backoff.base import Strategy
from adelay.duration import saturate

if TYPE_CHECKING:
    from collections.abc import Callable


class FunctionStrategy(Strategy):
    """Backoff strategy backed by a user-supplied function.

    The function receives the attempt number and returns a delay in
    nanoseconds. Its result is saturated to the representable range.

    Args:
        func: The function mapping an attempt to a delay.

    Example:
        ```pycon
        >>> from adelay import SECOND
        >>> from adelay.backoff import FunctionStrategy
        >>> linear = FunctionStrategy(lambda attempt: (attempt + 1) * SECOND)
        >>> [d // SECOND for d in linear.add(SECOND).take(3)]
        [2, 3, 4]

        ```
    """

    def __init__(self, func: Callable[[int], int]) -> None:
        self.func = func

    def calculate(self, attempt: int) -> int:
        return saturate(int(self.func(attempt)))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.func!r})"
