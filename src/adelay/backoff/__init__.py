r"""Backoff strategies and combinators.

This package provides the generators that build a strategy from scratch
(exponential growth, interval tables, constants) and the combinators that
wrap a strategy into a new one (scaling, offsets, bounds, shifting,
prefixes and random jitter).
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "Ceiled",
    "Combinator",
    "Constant",
    "Exponential",
    "Fixed",
    "Floored",
    "FunctionStrategy",
    "Intervals",
    "Milliseconds",
    "Offset",
    "Overwritten",
    "Prepended",
    "Scaled",
    "Seconds",
    "Shifted",
    "Splayed",
    "Strategy",
    "Units",
    "Zero",
    "as_strategy",
]

from adelay.backoff.base import BaseBackoffStrategy, Combinator, Strategy, as_strategy
from adelay.backoff.clamp import Ceiled, Floored
from adelay.backoff.constant import Constant, Zero
from adelay.backoff.exponential import Exponential
from adelay.backoff.function import FunctionStrategy
from adelay.backoff.intervals import Fixed, Intervals, Milliseconds, Seconds
from adelay.backoff.offset import Offset
from adelay.backoff.prefix import Overwritten, Prepended
from adelay.backoff.scale import Scaled, Units
from adelay.backoff.shift import Shifted
from adelay.backoff.splay import Splayed
