"""
get_activity models — the sessions currently streaming from the Plex server.
"""

from enum import IntEnum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field

from pls.models.fields import NullableStr, TextStr, parse_percent


class SessionType(IntEnum):
    INSECURE = 0
    SECURE = 1

    def __str__(self) -> str:
        return self.name.capitalize()


def _session_type(value: Any) -> Any:
    # `secure` only exists on newer Tautulli releases and is sometimes blank
    if value is None or value == "":
        return None
    try:
        value = int(value)
    except (TypeError, ValueError):
        return None
    return value if value in (SessionType.INSECURE, SessionType.SECURE) else None


class Session(BaseModel):
    container: NullableStr
    full_title: NullableStr
    ip_address_public: NullableStr
    media_type: NullableStr
    platform: NullableStr
    player: NullableStr
    quality_profile: NullableStr
    state: NullableStr
    transcode_container: NullableStr = ""
    user: NullableStr
    session_type: Annotated[Optional[SessionType], BeforeValidator(_session_type)] = Field(
        default=None, alias="secure",
    )
    progress_percent: TextStr = "0"

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def progress(self) -> int:
        return parse_percent(self.progress_percent)

    @property
    def is_transcoding(self) -> bool:
        return self.transcode_container != ""


class ActivityPayload(BaseModel):
    """get_activity `data`. Only `sessions` is rendered."""
    sessions: list[Session]
    stream_count: TextStr = "0"
    total_bandwidth: int = 0
    wan_bandwidth: int = 0
    lan_bandwidth: int = 0
    stream_count_direct_play: int = 0
    stream_count_direct_stream: int = 0
    stream_count_transcode: int = 0

    model_config = {"frozen": True}
