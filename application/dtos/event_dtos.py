from typing import Any

from pydantic import BaseModel


class DecodeEventRequest(BaseModel):
    family: str
    document: Any


class NormalizedEventResponse(BaseModel):
    family: str
    record_type: str
    document: dict[str, Any]
