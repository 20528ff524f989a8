r"""Unit tests for the lock-guarded random source."""

from __future__ import annotations

import threading
from unittest.mock import patch

import pytest

from adelay import random_source
from adelay.exceptions import RandomSourceError
from adelay.random_source import RandomSource, get_default_random_source


def test_random_source_draws_within_range() -> None:
    """Test that draws lie in the half-open range."""
    source = RandomSource(seed=0)
    values = [source.randrange(-5, 5) for _ in range(1000)]
    assert min(values) >= -5
    assert max(values) < 5


def test_random_source_explicit_seed_is_reproducible() -> None:
    """Test that two sources with the same seed draw the same values."""
    first = RandomSource(seed=99)
    second = RandomSource(seed=99)
    assert [first.randrange(0, 10**9) for _ in range(20)] == [
        second.randrange(0, 10**9) for _ in range(20)
    ]


def test_random_source_seeds_from_urandom() -> None:
    """Test that the default seed is read from system entropy."""
    with patch("adelay.random_source.os.urandom", return_value=b"\x00" * 7 + b"\x2a") as mock:
        source = RandomSource()
    mock.assert_called_once_with(8)
    assert source.randrange(0, 10**9) == RandomSource(seed=42).randrange(0, 10**9)


@pytest.mark.parametrize("error", [NotImplementedError("no source"), OSError("no device")])
def test_random_source_seed_failure_is_fatal(error: Exception) -> None:
    """Test that a missing entropy source raises RandomSourceError."""
    with (
        patch("adelay.random_source.os.urandom", side_effect=error),
        pytest.raises(RandomSourceError, match=r"failed to seed random source"),
    ):
        RandomSource()


def test_random_source_concurrent_draws() -> None:
    """Test that concurrent draws all complete and stay in range."""
    source = RandomSource(seed=7)
    results: list[int] = []
    lock = threading.Lock()

    def worker() -> None:
        values = [source.randrange(0, 100) for _ in range(500)]
        with lock:
            results.extend(values)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(results) == 4000
    assert all(0 <= value < 100 for value in results)


def test_get_default_random_source_is_singleton() -> None:
    """Test that the default source is created once per process."""
    assert get_default_random_source() is get_default_random_source()


def test_get_default_random_source_lazy_creation() -> None:
    """Test that the default source is created on first use."""
    with patch.object(random_source, "_default_source", None):
        source = get_default_random_source()
        assert isinstance(source, RandomSource)
        assert get_default_random_source() is source
