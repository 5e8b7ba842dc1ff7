"""
Response envelope — every Tautulli reply is `{"response": {...}}`.

The API answers HTTP 200 even for failures such as a bad API key:

    {"response": {"message": "Invalid apikey", "data": {}, "result": "success"}}

so `result` says nothing useful. Success is decided by whether `data` decodes
to one of the known payload shapes.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError, field_validator

from pls.errors import PayloadShapeError
from pls.models.activity import ActivityPayload
from pls.models.fields import NullableStr
from pls.models.history import HistoryPayload

Payload = Union[ActivityPayload, HistoryPayload]

# Tried in order; the first shape that validates wins.
PAYLOAD_VARIANTS: tuple[type[BaseModel], ...] = (ActivityPayload, HistoryPayload)


def is_empty_payload(raw: Any) -> bool:
    return raw is None or raw == {} or raw == []


def decode_payload(raw: Any) -> Optional[Payload]:
    """Decode `data` into a payload variant.

    Returns None for the empty sentinels the API uses alongside an error
    message. Raises PayloadShapeError when `data` has content but fits no
    known shape.
    """
    if isinstance(raw, (ActivityPayload, HistoryPayload)):
        return raw
    if is_empty_payload(raw):
        return None
    if not isinstance(raw, dict):
        raise PayloadShapeError(details={"type": type(raw).__name__})

    errors: dict[str, Any] = {}
    for variant in PAYLOAD_VARIANTS:
        try:
            return variant.model_validate(raw)
        except ValidationError as e:
            errors[variant.__name__] = e.errors(include_url=False)
    raise PayloadShapeError(details={"keys": sorted(raw), "errors": errors})


class ApiEnvelope(BaseModel):
    message: NullableStr = ""
    result: NullableStr = ""
    data: Optional[Payload] = None

    model_config = {"frozen": True}

    @field_validator("data", mode="before")
    @classmethod
    def _decode_data(cls, value: Any) -> Optional[Payload]:
        return decode_payload(value)


class ServerInfo(BaseModel):
    response: ApiEnvelope
