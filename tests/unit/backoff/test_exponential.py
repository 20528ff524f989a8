r"""Unit tests for the Exponential strategy."""

from __future__ import annotations

from datetime import timedelta

import pytest

from adelay.backoff import Exponential
from adelay.duration import MAX_DURATION, MIN_DURATION, SECOND


def test_exponential_basic() -> None:
    """Test the doubling sequence with a one second unit."""
    backoff = Exponential(SECOND)
    assert backoff.take(5) == [SECOND, 2 * SECOND, 4 * SECOND, 8 * SECOND, 16 * SECOND]


def test_exponential_default_unit_is_raw_counts() -> None:
    """Test that the default unit yields plain powers of two."""
    assert Exponential().take(6) == [1, 2, 4, 8, 16, 32]


def test_exponential_timedelta_unit() -> None:
    """Test that a timedelta unit is accepted."""
    assert Exponential(timedelta(seconds=1))(3) == 8 * SECOND


def test_exponential_with_ceiling() -> None:
    """Test that delays stop growing at the ceiling."""
    backoff = Exponential(ceiling=300)
    assert backoff.take(11) == [1, 2, 4, 8, 16, 32, 64, 128, 256, 300, 300]


@pytest.mark.parametrize("ceiling", [None, -1, -(10**9)])
def test_exponential_unbounded(ceiling: int | None) -> None:
    """Test that a missing or negative ceiling means unbounded."""
    backoff = Exponential(SECOND, ceiling=ceiling)
    assert backoff.ceiling == MAX_DURATION
    assert backoff(20) == SECOND * 2**20


def test_exponential_strictly_increasing_below_ceiling() -> None:
    """Test strict growth until the ceiling, then a plateau."""
    ceiling = 300 * SECOND
    backoff = Exponential(SECOND, ceiling=ceiling)
    previous = backoff(0)
    for attempt in range(1, 100):
        current = backoff(attempt)
        assert current <= ceiling
        if previous < ceiling:
            assert current > previous
        else:
            assert current == ceiling
        previous = current


@pytest.mark.parametrize("attempt", [-1, -5, -1000])
def test_exponential_negative_attempt_is_zero(attempt: int) -> None:
    """Test that negative attempts map to a zero delay."""
    assert Exponential(SECOND)(attempt) == 0


@pytest.mark.parametrize("attempt", [34, 63, 64, 1000, 10**9])
def test_exponential_saturates_instead_of_overflowing(attempt: int) -> None:
    """Test that huge exponents saturate at MAX_DURATION."""
    assert Exponential(SECOND)(attempt) == MAX_DURATION


def test_exponential_monotonic_up_to_saturation() -> None:
    """Test that the sequence never decreases, even past the range."""
    values = Exponential(SECOND).take(100)
    assert values == sorted(values)
    assert values[-1] == MAX_DURATION


def test_exponential_zero_unit() -> None:
    """Test that a zero unit always yields zero."""
    assert Exponential(0).take(3) == [0, 0, 0]
    assert Exponential(0)(10**9) == 0


def test_exponential_negative_unit_saturates_at_min() -> None:
    """Test that a negative unit saturates toward MIN_DURATION."""
    backoff = Exponential(-SECOND)
    assert backoff(2) == -4 * SECOND
    assert backoff(100) == MIN_DURATION
