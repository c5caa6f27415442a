"""Pydantic response schemas for sf_snowflake.

All responses are wrapped in ApiResponse at the router layer. IDs are
serialized as decimal strings because int64 exceeds the JS safe-integer range.
"""

from typing import Literal

from pydantic import BaseModel

IdEncoding = Literal["decimal", "base64"]


class IdResponse(BaseModel):
    id: str
    base64: str
    timestamp_ms: int  # relative to the generator epoch
    generated_at: str  # ISO-8601 UTC
    node_id: int
    sequence: int


class GenerateIdsResponse(BaseModel):
    ids: list[IdResponse]
