r"""Configuration dataclass and defaults for building backoff strategies.

This module provides configuration constants and a dataclass-based
configuration object describing the common "exponential with cap and
jitter" backoff shape, for callers that prefer declaring a policy over
chaining combinators by hand.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_JITTER",
    "DEFAULT_MAX_DELAY",
    "BackoffConfig",
]

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from adelay.backoff import Exponential
from adelay.core.validation import validate_backoff_params
from adelay.duration import SECOND, to_duration

if TYPE_CHECKING:
    from adelay.backoff import Strategy
    from adelay.random_source import RandomSource

logger: logging.Logger = logging.getLogger(__name__)

# Default delay before the first retry
# Delay = base_delay * (2 ** attempt): 1s, 2s, 4s, ...
DEFAULT_BASE_DELAY = SECOND

# Default maximum delay (None means the delay keeps growing until it
# saturates at MAX_DURATION)
DEFAULT_MAX_DELAY = None

# Default jitter amplitude (0 disables jitter)
DEFAULT_JITTER = 0


@dataclass
class BackoffConfig:
    """Declarative description of an exponential backoff strategy.

    All durations are ``int`` nanoseconds; ``timedelta`` values are
    converted on initialization.

    Args:
        base_delay: Delay for the first attempt. Must be >= 0.
        max_delay: Optional maximum delay. Must be > 0 if provided.
        min_delay: Optional minimum delay, applied after jitter.
        jitter: Amplitude of the uniform jitter in ``[-jitter, +jitter)``.
            Must be >= 0.
        shift: Number of leading exponential delays to skip. Must be an
            integer >= 0.
        prefix: Literal delays returned before the exponential sequence.

    Example:
        ```pycon
        >>> from adelay import SECOND
        >>> from adelay.core import BackoffConfig
        >>> config = BackoffConfig(max_delay=5 * SECOND)
        >>> [d // SECOND for d in config.build().take(5)]
        [1, 2, 4, 5, 5]
        >>> merged = config.merge(shift=1)  # Override specific parameters
        >>> [d // SECOND for d in merged.build().take(3)]
        [2, 4, 5]
        >>> config.shift  # Original unchanged
        0

        ```
    """

    base_delay: int = DEFAULT_BASE_DELAY
    max_delay: int | None = DEFAULT_MAX_DELAY
    min_delay: int | None = None
    jitter: int = DEFAULT_JITTER
    shift: int = 0
    prefix: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalize durations and validate configuration parameters.

        Raises:
            ValueError: If any parameter fails validation.
        """
        self.base_delay = to_duration(self.base_delay)
        if self.max_delay is not None:
            self.max_delay = to_duration(self.max_delay)
        if self.min_delay is not None:
            self.min_delay = to_duration(self.min_delay)
        self.jitter = to_duration(self.jitter)
        self.prefix = tuple(to_duration(delay) for delay in self.prefix)
        validate_backoff_params(
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            min_delay=self.min_delay,
            jitter=self.jitter,
            shift=self.shift,
        )

    def merge(self, **overrides: Any) -> BackoffConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new BackoffConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Example:
            ```pycon
            >>> from adelay.core import BackoffConfig
            >>> config = BackoffConfig(base_delay=5)
            >>> config.to_dict()["base_delay"]
            5

            ```
        """
        return {
            "base_delay": self.base_delay,
            "max_delay": self.max_delay,
            "min_delay": self.min_delay,
            "jitter": self.jitter,
            "shift": self.shift,
            "prefix": self.prefix,
        }

    def build(self, source: RandomSource | None = None) -> Strategy:
        """Build the strategy described by this configuration.

        The strategy is
        ``Exponential(base_delay, max_delay).shift(shift).splay(jitter)``
        followed by ``floor(min_delay)``, ``ceil(max_delay)`` and
        ``prepend(*prefix)``. Each step is only applied when configured,
        and the final ``ceil`` only when jitter could push a delay past
        ``max_delay``.

        Args:
            source: Optional random source for the jitter. The process-wide
                default source is used when omitted.

        Returns:
            The composed strategy.
        """
        strategy: Strategy = Exponential(self.base_delay, ceiling=self.max_delay)
        if self.shift:
            strategy = strategy.shift(self.shift)
        if self.jitter:
            strategy = strategy.splay(self.jitter, source=source)
        if self.min_delay is not None:
            strategy = strategy.floor(self.min_delay)
        if self.max_delay is not None and self.jitter:
            strategy = strategy.ceil(self.max_delay)
        if self.prefix:
            strategy = strategy.prepend(*self.prefix)
        logger.debug(f"Built backoff strategy {strategy!r}")
        return strategy
