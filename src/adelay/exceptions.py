r"""Exceptions raised by adelay.

Only two situations are errors: building a strategy on top of something
that is not a strategy, and failing to seed a random source. Evaluating
a strategy never raises.
"""

from __future__ import annotations

__all__ = ["BackoffError", "InvalidStrategyError", "RandomSourceError"]


class BackoffError(Exception):
    """Base class for all adelay errors."""


class InvalidStrategyError(BackoffError, TypeError):
    """Raised when a combinator is built on an absent or non-callable base.

    Example:
        ```pycon
        >>> from adelay.backoff import Shifted
        >>> from adelay.exceptions import InvalidStrategyError
        >>> try:
        ...     Shifted(None, 1)
        ... except InvalidStrategyError as exc:
        ...     print(exc)
        ...
        base strategy must not be None

        ```
    """


class RandomSourceError(BackoffError, RuntimeError):
    """Raised when a random source cannot be seeded from secure entropy.

    This is unrecoverable: jitter computed from a predictable or missing
    seed would synchronize retriers instead of spreading them out.
    """
