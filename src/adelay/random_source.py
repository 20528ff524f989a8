r"""Lock-guarded pseudorandom source used by the splay combinator.

A ``RandomSource`` is seeded exactly once, from the operating system's
cryptographically strong entropy unless an explicit seed is supplied,
and serializes every draw with a lock so that strategies sharing a
source can be evaluated from several threads at once.
"""

from __future__ import annotations

__all__ = ["RandomSource", "get_default_random_source"]

import logging
import os
import random
import threading

from adelay.exceptions import RandomSourceError

logger: logging.Logger = logging.getLogger(__name__)

_SEED_BYTES = 8


def _secure_seed() -> int:
    try:
        raw = os.urandom(_SEED_BYTES)
    except (NotImplementedError, OSError) as exc:
        msg = f"failed to seed random source: {exc}"
        raise RandomSourceError(msg) from exc
    return int.from_bytes(raw, "big")


class RandomSource:
    """Thread-safe pseudorandom generator with a single, fixed seed.

    Args:
        seed: Optional explicit seed. When omitted, the seed is read from
            ``os.urandom``. Explicit seeds are meant for reproducible
            tests and simulations.

    Raises:
        RandomSourceError: If no seed is given and the operating system
            cannot provide secure entropy.

    Example:
        ```pycon
        >>> from adelay.random_source import RandomSource
        >>> source = RandomSource(seed=42)
        >>> -10 <= source.randrange(-10, 10) < 10
        True

        ```
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            self._rng = random.Random(_secure_seed())  # noqa: S311
            logger.debug("Seeded random source from system entropy")
        else:
            self._rng = random.Random(seed)  # noqa: S311
            logger.debug("Seeded random source with an explicit seed")
        self._lock = threading.Lock()

    def randrange(self, start: int, stop: int) -> int:
        """Draw an integer uniformly from ``[start, stop)``.

        Args:
            start: The inclusive lower bound.
            stop: The exclusive upper bound. Must be greater than ``start``.

        Returns:
            The drawn integer.
        """
        with self._lock:
            return self._rng.randrange(start, stop)


_default_source: RandomSource | None = None
_default_lock = threading.Lock()


def get_default_random_source() -> RandomSource:
    """Return the process-wide random source, creating it on first use.

    The default source is seeded from system entropy exactly once per
    process and is never reseeded.

    Raises:
        RandomSourceError: If the source has to be created and cannot
            be seeded.

    Example:
        ```pycon
        >>> from adelay.random_source import get_default_random_source
        >>> get_default_random_source() is get_default_random_source()
        True

        ```
    """
    global _default_source  # noqa: PLW0603
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = RandomSource()
    return _default_source
