"""Compact, human-readable rendering of durations."""

from __future__ import annotations

from datetime import timedelta

__all__ = ["format_duration"]

_YEAR = 31_557_600  # 365.25 days
_MONTH = 2_630_016  # 30.44 days
_DAY = 86_400


def format_duration(duration: timedelta) -> str:
    """Render only the most significant unit of ``duration``, e.g. ``3h``.

    Durations below one millisecond render as ``0s``.
    """
    if duration < timedelta(0):
        raise ValueError("duration must not be negative")

    secs = duration.days * _DAY + duration.seconds
    millis = duration.microseconds // 1000

    years, year_rest = divmod(secs, _YEAR)
    months, month_rest = divmod(year_rest, _MONTH)
    days, day_secs = divmod(month_rest, _DAY)
    hours = day_secs // 3600
    minutes = day_secs % 3600 // 60
    seconds = day_secs % 60

    parts = (
        ("y", years),
        ("mo", months),
        ("d", days),
        ("h", hours),
        ("m", minutes),
        ("s", seconds),
        ("ms", millis),
    )
    for unit, value in parts:
        if value > 0:
            return f"{value}{unit}"
    return "0s"