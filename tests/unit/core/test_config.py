r"""Unit tests for BackoffConfig dataclass.

This file contains tests for the BackoffConfig dataclass in
core/config.py.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from coola.equality import objects_are_equal

from adelay.backoff import Exponential
from adelay.core import DEFAULT_BASE_DELAY, DEFAULT_JITTER, DEFAULT_MAX_DELAY, BackoffConfig
from adelay.duration import MAX_DURATION, MINUTE, SECOND
from adelay.random_source import RandomSource

###################################
#     Tests for BackoffConfig     #
###################################


def test_backoff_config_defaults() -> None:
    """Test that BackoffConfig uses correct default values."""
    config = BackoffConfig()
    assert config.base_delay == DEFAULT_BASE_DELAY == SECOND
    assert config.max_delay is DEFAULT_MAX_DELAY
    assert config.min_delay is None
    assert config.jitter == DEFAULT_JITTER == 0
    assert config.shift == 0
    assert config.prefix == ()


def test_backoff_config_converts_timedelta() -> None:
    """Test that timedelta values are normalized to nanoseconds."""
    config = BackoffConfig(
        base_delay=timedelta(seconds=2),
        max_delay=timedelta(minutes=1),
        min_delay=timedelta(seconds=1),
        jitter=timedelta(milliseconds=500),
        prefix=(timedelta(minutes=5),),
    )
    assert config.base_delay == 2 * SECOND
    assert config.max_delay == MINUTE
    assert config.min_delay == SECOND
    assert config.jitter == SECOND // 2
    assert config.prefix == (5 * MINUTE,)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"base_delay": -1}, r"base_delay must be >= 0"),
        ({"max_delay": 0}, r"max_delay must be > 0"),
        ({"min_delay": -1}, r"min_delay must be >= 0"),
        ({"jitter": -1}, r"jitter must be >= 0"),
        ({"shift": -1}, r"shift must be >= 0"),
        ({"shift": 1.5}, r"shift must be an integer"),
        ({"min_delay": 2 * SECOND, "max_delay": SECOND}, r"must not exceed max_delay"),
    ],
)
def test_backoff_config_validation(kwargs: dict, message: str) -> None:
    """Test that invalid parameters are rejected on initialization."""
    with pytest.raises(ValueError, match=message):
        BackoffConfig(**kwargs)


def test_backoff_config_merge() -> None:
    """Test that merge overrides parameters and leaves the original unchanged."""
    config = BackoffConfig(max_delay=10 * SECOND)
    merged = config.merge(shift=2, jitter=None)
    assert merged.shift == 2
    assert merged.jitter == 0
    assert merged.max_delay == 10 * SECOND
    assert config.shift == 0


def test_backoff_config_merge_validates() -> None:
    """Test that merged configs are validated too."""
    with pytest.raises(ValueError, match=r"shift must be >= 0"):
        BackoffConfig().merge(shift=-1)


def test_backoff_config_to_dict() -> None:
    """Test conversion to a dictionary."""
    config = BackoffConfig(base_delay=SECOND, max_delay=MINUTE, shift=1, prefix=(5,))
    assert objects_are_equal(
        config.to_dict(),
        {
            "base_delay": SECOND,
            "max_delay": MINUTE,
            "min_delay": None,
            "jitter": 0,
            "shift": 1,
            "prefix": (5,),
        },
    )


def test_backoff_config_build_default() -> None:
    """Test that the default config builds an unbounded exponential."""
    backoff = BackoffConfig().build()
    assert isinstance(backoff, Exponential)
    assert backoff.take(4) == [SECOND, 2 * SECOND, 4 * SECOND, 8 * SECOND]
    assert backoff(100) == MAX_DURATION


def test_backoff_config_build_with_max_delay() -> None:
    """Test that max_delay caps the exponential."""
    backoff = BackoffConfig(max_delay=5 * SECOND).build()
    assert [d // SECOND for d in backoff.take(5)] == [1, 2, 4, 5, 5]


def test_backoff_config_build_with_shift_and_prefix() -> None:
    """Test shift and prefix together."""
    backoff = BackoffConfig(shift=1, prefix=(MINUTE,)).build()
    assert backoff.take(4) == [MINUTE, 2 * SECOND, 4 * SECOND, 8 * SECOND]


def test_backoff_config_build_with_min_delay() -> None:
    """Test that min_delay raises early delays."""
    backoff = BackoffConfig(min_delay=3 * SECOND).build()
    assert backoff.take(3) == [3 * SECOND, 3 * SECOND, 4 * SECOND]


def test_backoff_config_build_with_jitter() -> None:
    """Test that jitter stays within bounds and under max_delay."""
    backoff = BackoffConfig(max_delay=4 * SECOND, jitter=SECOND, min_delay=SECOND).build(
        source=RandomSource(seed=3)
    )
    for attempt in range(10):
        base = min(SECOND * 2**attempt, 4 * SECOND)
        for _ in range(50):
            delay = backoff(attempt)
            assert SECOND <= delay <= 4 * SECOND
            assert base - SECOND <= delay <= base + SECOND
