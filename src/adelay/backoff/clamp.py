r"""Lower and upper bound combinators."""

from __future__ import annotations

__all__ = ["Ceiled", "Floored"]

from typing import TYPE_CHECKING, Any

from adelay.backoff.base import Combinator
from adelay.duration import to_duration

if TYPE_CHECKING:
    from datetime import timedelta

    from adelay.backoff.base import Strategy


class Floored(Combinator):
    """Force the delays of a base strategy to be at least ``minimum``.

    Example:
        ```pycon
        >>> from adelay import Seconds, SECOND
        >>> Seconds(0, 5).floor(SECOND).take(2) == [SECOND, 5 * SECOND]
        True

        ```
    """

    def __init__(self, base: Strategy | Any, minimum: int | timedelta) -> None:
        super().__init__(base)
        self.minimum = to_duration(minimum)

    def calculate(self, attempt: int) -> int:
        return max(self.base.calculate(attempt), self.minimum)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, minimum={self.minimum})"


class Ceiled(Combinator):
    """Force the delays of a base strategy to be at most ``maximum``.

    Example:
        ```pycon
        >>> from adelay import Seconds, SECOND
        >>> Seconds(1, 5).ceil(2 * SECOND).take(2) == [SECOND, 2 * SECOND]
        True

        ```
    """

    def __init__(self, base: Strategy | Any, maximum: int | timedelta) -> None:
        super().__init__(base)
        self.maximum = to_duration(maximum)

    def calculate(self, attempt: int) -> int:
        return min(self.base.calculate(attempt), self.maximum)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, maximum={self.maximum})"
