"""Snowflake domain models: pure dataclasses, no FastAPI dependency."""
import base64
from dataclasses import dataclass
from datetime import datetime

from src.sf_common.datetime_utils import ms_to_datetime


@dataclass(frozen=True)
class SnowflakeOptions:
    node_id: int
    epoch_ms: int = 0  # ms since 1970; 0 = DEFAULT_EPOCH_MS


@dataclass(frozen=True)
class IdParts:
    timestamp_ms: int  # relative to the generator epoch
    node_id: int
    sequence: int


@dataclass(frozen=True, order=True)
class SnowflakeID:
    """Immutable wrapper around one signed 64-bit snowflake value."""

    value: int

    def int64(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __bytes__(self) -> bytes:
        return str(self.value).encode("ascii")

    def bytes(self) -> bytes:
        """ASCII bytes of the decimal text (not a fixed-width binary encoding)."""
        return bytes(self)

    def base64(self) -> str:
        """Standard base64 of the decimal text bytes."""
        return base64.b64encode(bytes(self)).decode("ascii")

    def parts(self) -> IdParts:
        from src.sf_snowflake.domain.layout import decompose

        return decompose(self.value)

    def time(self, epoch_ms: int) -> datetime:
        """Generation time as an aware UTC datetime, given the generator's epoch."""
        return ms_to_datetime(epoch_ms + self.parts().timestamp_ms)
