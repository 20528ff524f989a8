from __future__ import annotations

import pytest

from adelay.random_source import RandomSource


@pytest.fixture
def source() -> RandomSource:
    """Create a reproducible random source for jitter tests."""
    return RandomSource(seed=1234)
