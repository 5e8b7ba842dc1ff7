"""
Lenient field adapters for the Tautulli wire format.
"""

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator


def null_to_empty(value: Any) -> Any:
    """The API sends `null` where it means an empty string."""
    return "" if value is None else value


def as_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def parse_percent(value: Optional[str]) -> int:
    """Parse a progress percentage, falling back to 0 for anything outside 0-100."""
    try:
        percent = int(str(value).strip())
    except (TypeError, ValueError):
        return 0
    if percent < 0 or percent > 100:
        return 0
    return percent


NullableStr = Annotated[str, BeforeValidator(null_to_empty)]
TextStr = Annotated[str, BeforeValidator(as_text)]
