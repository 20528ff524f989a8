r"""Parameter validation utilities for backoff configuration.

This module provides validation functions for backoff parameters to
ensure they meet the required constraints before a strategy is built
from them.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params"]


def validate_backoff_params(
    base_delay: int,
    max_delay: int | None = None,
    min_delay: int | None = None,
    jitter: int = 0,
    shift: int = 0,
) -> None:
    """Validate backoff parameters.

    All durations are in nanoseconds.

    Args:
        base_delay: The delay for the first attempt. Must be >= 0.
        max_delay: Optional maximum delay cap. Must be > 0 if provided.
        min_delay: Optional minimum delay. Must be >= 0 if provided, and
            not greater than ``max_delay``.
        jitter: The random jitter amplitude. Must be >= 0.
        shift: The number of leading delays to skip. Must be an integer >= 0.

    Raises:
        ValueError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from adelay.core import validate_backoff_params
        >>> validate_backoff_params(base_delay=1_000_000_000)
        >>> validate_backoff_params(base_delay=1_000_000_000, max_delay=30_000_000_000)
        >>> validate_backoff_params(base_delay=-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: base_delay must be >= 0, got -1

        ```
    """
    if base_delay < 0:
        msg = f"base_delay must be >= 0, got {base_delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be > 0, got {max_delay}"
        raise ValueError(msg)
    if min_delay is not None and min_delay < 0:
        msg = f"min_delay must be >= 0, got {min_delay}"
        raise ValueError(msg)
    if min_delay is not None and max_delay is not None and min_delay > max_delay:
        msg = f"min_delay ({min_delay}) must not exceed max_delay ({max_delay})"
        raise ValueError(msg)
    if jitter < 0:
        msg = f"jitter must be >= 0, got {jitter}"
        raise ValueError(msg)
    if not isinstance(shift, int) or isinstance(shift, bool):
        msg = f"shift must be an integer, got {shift!r}"
        raise ValueError(msg)
    if shift < 0:
        msg = f"shift must be >= 0, got {shift}"
        raise ValueError(msg)
