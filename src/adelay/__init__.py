r"""adelay - Composable, stateless backoff delays for retry loops.

This package maps a retry attempt number to the duration a caller should
wait before trying again. Strategies are built from a few generators and
composed with combinators; the caller keeps the attempt counter, sleeps,
and decides whether to retry.

Key Features:
    - Generators: exponential growth, interval tables, constants
    - Combinators: scale, units, add/sub, floor/ceil, shift, unshift/prepend,
      overwrite, and random splay
    - Saturating arithmetic: no delay ever wraps around
    - Thread-safe jitter backed by a securely seeded random source
    - Declarative ``BackoffConfig`` for the common exponential shape

Example:
    ```pycon
    >>> from adelay import HOUR, MINUTE, Exponential, format_duration
    >>> # Retry on lengthening intervals, but wait an hour after a success
    >>> backoff = Exponential(ceiling=3600).units(MINUTE).shift(1).overwrite(HOUR)
    >>> [format_duration(d) for d in backoff.take(4)]
    ['1h0m0s', '4m0s', '8m0s', '16m0s']
    >>> backoff.seconds(1)  # Ready for time.sleep
    240.0

    ```
"""

from __future__ import annotations

__all__ = [
    "HOUR",
    "MAX_DURATION",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "MIN_DURATION",
    "NANOSECOND",
    "SECOND",
    "BackoffConfig",
    "BackoffError",
    "Constant",
    "Exponential",
    "Fixed",
    "FunctionStrategy",
    "Intervals",
    "InvalidStrategyError",
    "Milliseconds",
    "RandomSource",
    "RandomSourceError",
    "Seconds",
    "Strategy",
    "Zero",
    "__version__",
    "format_duration",
    "get_default_random_source",
    "saturate",
    "to_duration",
    "to_seconds",
    "to_timedelta",
]

from importlib.metadata import PackageNotFoundError, version

from adelay.backoff import (
    Constant,
    Exponential,
    Fixed,
    FunctionStrategy,
    Intervals,
    Milliseconds,
    Seconds,
    Strategy,
    Zero,
)
from adelay.core import BackoffConfig
from adelay.duration import (
    HOUR,
    MAX_DURATION,
    MICROSECOND,
    MILLISECOND,
    MIN_DURATION,
    MINUTE,
    NANOSECOND,
    SECOND,
    format_duration,
    saturate,
    to_duration,
    to_seconds,
    to_timedelta,
)
from adelay.exceptions import BackoffError, InvalidStrategyError, RandomSourceError
from adelay.random_source import RandomSource, get_default_random_source

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
