r"""Declarative configuration for backoff strategies.

This package contains the configuration defaults, the ``BackoffConfig``
dataclass and the parameter validation it relies on.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_JITTER",
    "DEFAULT_MAX_DELAY",
    "BackoffConfig",
    "validate_backoff_params",
]

from adelay.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_JITTER,
    DEFAULT_MAX_DELAY,
    BackoffConfig,
)
from adelay.core.validation import validate_backoff_params
