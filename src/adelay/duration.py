r"""Duration units, bounds and saturating conversions.

A duration is a plain ``int`` counting nanoseconds. Values are bounded
to the signed 64-bit range so that every strategy shares the same notion
of "largest representable delay". Arithmetic results that leave this
range are clamped with ``saturate`` instead of being allowed to grow
without bound.
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
    "format_duration",
    "saturate",
    "to_duration",
    "to_seconds",
    "to_timedelta",
]

from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Signed 64-bit range, roughly 292 years either way
MAX_DURATION = 2**63 - 1
MIN_DURATION = -(2**63)


def saturate(value: int) -> int:
    """Clamp a duration to ``[MIN_DURATION, MAX_DURATION]``.

    Args:
        value: The duration in nanoseconds.

    Returns:
        The duration, or the nearest bound if it is out of range.

    Example:
        ```pycon
        >>> from adelay.duration import MAX_DURATION, saturate
        >>> saturate(42)
        42
        >>> saturate(MAX_DURATION + 1) == MAX_DURATION
        True

        ```
    """
    if value > MAX_DURATION:
        return MAX_DURATION
    if value < MIN_DURATION:
        return MIN_DURATION
    return value


def to_duration(value: int | timedelta) -> int:
    """Convert a value to a duration in nanoseconds.

    Args:
        value: An ``int`` number of nanoseconds, or a ``datetime.timedelta``.

    Returns:
        The saturated duration in nanoseconds.

    Raises:
        TypeError: If ``value`` is neither an ``int`` nor a ``timedelta``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from adelay.duration import to_duration
        >>> to_duration(timedelta(milliseconds=3))
        3000000
        >>> to_duration(15)
        15

        ```
    """
    if isinstance(value, timedelta):
        return saturate((value // timedelta(microseconds=1)) * MICROSECOND)
    if isinstance(value, int) and not isinstance(value, bool):
        return saturate(value)
    msg = f"duration must be an int (nanoseconds) or a timedelta, got {type(value).__name__}"
    raise TypeError(msg)


def to_seconds(duration: int) -> float:
    """Convert a duration to a float number of seconds.

    Example:
        ```pycon
        >>> from adelay.duration import MILLISECOND, to_seconds
        >>> to_seconds(1500 * MILLISECOND)
        1.5

        ```
    """
    return duration / SECOND


def to_timedelta(duration: int) -> timedelta:
    """Convert a duration to a ``datetime.timedelta``.

    Sub-microsecond precision is truncated toward zero. Durations beyond
    the ``timedelta`` range are clamped to ``timedelta.max`` or
    ``timedelta.min``.
    """
    micros = abs(duration) // MICROSECOND
    if duration < 0:
        micros = -micros
    try:
        return timedelta(microseconds=micros)
    except OverflowError:
        return timedelta.max if micros > 0 else timedelta.min


_UNITS = (("h", HOUR), ("m", MINUTE), ("s", SECOND))


def format_duration(duration: int) -> str:
    """Render a duration in a compact human readable form.

    Durations of at least one second are written as hours, minutes and
    seconds (``1h2m3s``, ``1m0s``, ``1.5s``). Shorter durations use the
    largest sub-second unit that fits (``2ms``, ``5us``, ``7ns``).

    Args:
        duration: The duration in nanoseconds.

    Returns:
        The formatted duration.

    Example:
        ```pycon
        >>> from adelay.duration import HOUR, MILLISECOND, MINUTE, SECOND, format_duration
        >>> format_duration(MINUTE + SECOND)
        '1m1s'
        >>> format_duration(2 * HOUR)
        '2h0m0s'
        >>> format_duration(2 * MILLISECOND)
        '2ms'
        >>> format_duration(0)
        '0s'

        ```
    """
    if duration == 0:
        return "0s"
    sign = "-" if duration < 0 else ""
    remaining = abs(duration)
    if remaining < SECOND:
        for suffix, unit in (("ms", MILLISECOND), ("us", MICROSECOND), ("ns", NANOSECOND)):
            if remaining >= unit:
                return f"{sign}{_format_fraction(remaining, unit)}{suffix}"

    parts = []
    for suffix, unit in _UNITS:
        if suffix == "s":
            parts.append(f"{_format_fraction(remaining, unit)}s")
        elif remaining >= unit or parts:
            parts.append(f"{remaining // unit}{suffix}")
            remaining %= unit
    return sign + "".join(parts)


def _format_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = str(frac).rjust(len(str(unit)) - 1, "0").rstrip("0")
    return f"{whole}.{digits}"
