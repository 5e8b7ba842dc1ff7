"""
Terminal styling.

Formatters attach rich styles to `Text` spans; whether they turn into escape
codes is decided by the `Console` they are printed on. A console writing to a
pipe or file, or created with `color="never"`, emits the plain text only.
"""

from typing import IO, Optional

from rich.console import Console

COLOR_CHOICES = ("auto", "always", "never")

TITLE = "bold underline"
HEADER = "bold underline"
LABEL = "italic dim"
SECURE = "green"
INSECURE = "red"
ERROR = "bold red"

VERTICAL_LINE = "│"
HORIZONTAL_LINE = "─"
TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"

MUSIC = "🎵"
TV = "📺"
MOVIE = "🎞 "
UNKNOWN = "? "
SECURE_LOCK = "🔒"
INSECURE_LOCK = "🔓"


def make_console(color: str = "auto", stderr: bool = False, file: Optional[IO[str]] = None) -> Console:
    if color not in COLOR_CHOICES:
        raise ValueError(f"color must be one of {', '.join(COLOR_CHOICES)}")
    if color == "always":
        return Console(stderr=stderr, file=file, force_terminal=True)
    if color == "never":
        return Console(stderr=stderr, file=file, color_system=None)
    return Console(stderr=stderr, file=file)
