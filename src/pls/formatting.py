"""
Small text helpers: durations, progress bars, key masking.
"""

from typing import Union

HORIZONTAL_LINE = "─"
PROGRESS_MARKER = "◼"
PROGRESS_SEGMENTS = 10

Number = Union[int, float]


def div_rem(lhs: Number, rhs: Number) -> tuple[Number, Number]:
    """Quotient and remainder. Raises ZeroDivisionError if rhs is zero."""
    return lhs // rhs, lhs % rhs


def _seconds(value: Number) -> str:
    if isinstance(value, float) and not value.is_integer():
        return f"{value:.1f}s"
    return f"{int(value)}s"


def pretty_duration(s: Number) -> str:
    """Format a number of seconds as days, hours, minutes and seconds.

    Leading zero units are dropped; once a unit is shown every smaller unit
    follows it, so 3600 is "1h0m0s" and 1242 is "20m42s".
    """
    if s < 0:
        raise ValueError("duration must not be negative")
    if isinstance(s, float) and not s.is_integer():
        # round before splitting so 59.96 carries into the minute
        s = round(s, 1)
    days, s = div_rem(s, 86_400)
    hours, s = div_rem(s, 3600)
    minutes, seconds = div_rem(s, 60)
    if isinstance(seconds, float):
        seconds = round(seconds, 1)
    if days > 0:
        return f"{int(days)}d{int(hours)}h{int(minutes)}m{_seconds(seconds)}"
    if hours > 0:
        return f"{int(hours)}h{int(minutes)}m{_seconds(seconds)}"
    if minutes > 0:
        return f"{int(minutes)}m{_seconds(seconds)}"
    return _seconds(seconds)


def progress_bar(p: int) -> str:
    """A 10 segment bar with the marker at p // 10. p must be within 0-100."""
    if p < 0 or p > 100:
        raise ValueError("p must be between 0 and 100")
    filled = p // PROGRESS_SEGMENTS
    return "[{}{}{}]".format(
        HORIZONTAL_LINE * filled,
        PROGRESS_MARKER,
        HORIZONTAL_LINE * (PROGRESS_SEGMENTS - filled),
    )


def mask_api_key(api_key: str) -> str:
    """Mask an API key for logs."""
    if len(api_key) > 8:
        return f"{api_key[:4]}...{api_key[-4:]}"
    return "***"
