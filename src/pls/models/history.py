"""
get_history models.
"""

from pydantic import BaseModel, Field, NonNegativeInt


class HistoryEntry(BaseModel):
    full_title: str
    player: str
    user: str
    duration: NonNegativeInt  # seconds

    model_config = {"frozen": True}


class HistoryPayload(BaseModel):
    """get_history `data`. The rows live under the wire key `data`."""
    records_total: int = Field(default=0, alias="recordsTotal")
    history: list[HistoryEntry] = Field(alias="data")

    model_config = {"frozen": True, "populate_by_name": True}
