r"""Re-indexing combinator."""

from __future__ import annotations

__all__ = ["Shifted"]

from typing import TYPE_CHECKING, Any

from adelay.backoff.base import Combinator

if TYPE_CHECKING:
    from adelay.backoff.base import Strategy


class Shifted(Combinator):
    """Evaluate a base strategy ``count`` attempts ahead.

    ``Shifted(base, n)(attempt) == base(attempt + n)``, which skips the
    first ``n`` delays of the base.

    Args:
        base: The wrapped strategy.
        count: The number of attempts to skip.

    Example:
        ```pycon
        >>> from adelay import SECOND, Seconds
        >>> backoff = Seconds(1, 2, 3, 4, 5).shift(2)
        >>> [d // SECOND for d in backoff.take(5)]
        [3, 4, 5, 5, 5]

        ```
    """

    def __init__(self, base: Strategy | Any, count: int) -> None:
        super().__init__(base)
        self.count = int(count)

    def calculate(self, attempt: int) -> int:
        return self.base.calculate(attempt + self.count)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.base!r}, count={self.count})"
