"""
Render activity sessions and history rows as terminal text.

The render_* functions are pure and return rich `Text` lines; print_data
writes them to a `Console`.
"""

from typing import Iterable, Optional, Union

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from pls import styles
from pls.formatting import pretty_duration, progress_bar
from pls.models.activity import ActivityPayload, Session, SessionType
from pls.models.envelope import Payload
from pls.models.history import HistoryEntry, HistoryPayload

INDENT = "    "

MEDIA_COLUMN = 60
USER_COLUMN = 20
DURATION_COLUMN = 20
TITLE_CELLS = 58

MEDIA_GLYPHS = {
    "track": styles.MUSIC,
    "movie": styles.MOVIE,
    "episode": styles.TV,
}


def media_glyph(media_type: str) -> str:
    return MEDIA_GLYPHS.get(media_type.lower(), styles.UNKNOWN)


def secure_glyph(session_type: Optional[SessionType]) -> Text:
    if session_type is SessionType.SECURE:
        return Text.assemble((styles.SECURE_LOCK, styles.SECURE), " ")
    if session_type is SessionType.INSECURE:
        return Text.assemble((styles.INSECURE_LOCK, styles.INSECURE), " ")
    return Text()


def _box_edge(left: str, right: str, width: int) -> Text:
    return Text(f"{left}{styles.HORIZONTAL_LINE * width}{right}")


def _detail(label: str, value: Union[str, Text]) -> Text:
    return Text.assemble(INDENT, (label, styles.LABEL), ": ", value)


def render_session(session: Session) -> list[Text]:
    glyph = media_glyph(session.media_type)
    # title + glyph + the three spaces around them inside the box
    width = cell_len(session.full_title) + cell_len(glyph) + 3

    if session.is_transcoding:
        container = f"{session.container} -> {session.transcode_container}"
    else:
        container = session.container

    return [
        _box_edge(styles.TOP_LEFT, styles.TOP_RIGHT, width),
        Text.assemble(
            styles.VERTICAL_LINE, " ", glyph, " ",
            (session.full_title, styles.TITLE), " ", styles.VERTICAL_LINE,
        ),
        _box_edge(styles.BOTTOM_LEFT, styles.BOTTOM_RIGHT, width),
        _detail("State", session.state),
        _detail("User", session.user),
        _detail("Player", f"{session.player} ({session.platform})"),
        _detail("Quality", session.quality_profile),
        _detail("Container", container),
        _detail("Progress", progress_bar(session.progress)),
        _detail("IP", Text.assemble(secure_glyph(session.session_type), session.ip_address_public)),
        Text(),
    ]


def render_sessions(sessions: Iterable[Session]) -> list[Text]:
    lines: list[Text] = []
    for session in sessions:
        lines.extend(render_session(session))
    return lines


def _cell(value: str, width: int, align: str, style: str = "") -> Text:
    text = Text(overflow="ellipsis", end="")
    text.append(value, style=style or None)
    text.align(align, width)  # type: ignore[arg-type]
    return text


def render_history_header() -> Text:
    return Text.assemble(
        _cell("Media", MEDIA_COLUMN, "center", styles.HEADER),
        _cell("User", USER_COLUMN, "right", styles.HEADER),
        _cell("Duration", DURATION_COLUMN, "right", styles.HEADER),
    )


def render_history_row(entry: HistoryEntry) -> Text:
    return Text.assemble(
        _cell(entry.full_title, TITLE_CELLS, "left"),
        " ",
        _cell(entry.user, USER_COLUMN, "right"),
        " ",
        _cell(pretty_duration(entry.duration), DURATION_COLUMN, "right"),
    )


def render_history(entries: Iterable[HistoryEntry]) -> list[Text]:
    """Header plus one row per entry, in the order the server returned them."""
    return [render_history_header(), *(render_history_row(e) for e in entries)]


def render_payload(payload: Payload) -> list[Text]:
    if isinstance(payload, ActivityPayload):
        return render_sessions(payload.sessions)
    if isinstance(payload, HistoryPayload):
        return render_history(payload.history)
    raise TypeError(f"cannot render {type(payload).__name__}")


def print_data(console: Console, payload: Payload) -> None:
    for line in render_payload(payload):
        console.print(line, soft_wrap=True)
