"""ID application service: batch generation and decoding."""
from functools import lru_cache

from config.settings import settings
from src.sf_common.errors import ClockDriftExceededError
from src.sf_snowflake.application.schemas import GenerateIdsResponse, IdEncoding, IdResponse
from src.sf_snowflake.domain.codec import parse_base64, parse_string
from src.sf_snowflake.domain.models import SnowflakeID, SnowflakeOptions
from src.sf_snowflake.engine.generator import SnowflakeGenerator


class IdService:
    """Wraps one SnowflakeGenerator; instantiate once per process."""

    def __init__(self, generator: SnowflakeGenerator) -> None:
        self._generator = generator

    @property
    def generator(self) -> SnowflakeGenerator:
        return self._generator

    def generate(self, count: int = 1) -> GenerateIdsResponse:
        ids = self._generator.next_ids(count)
        if ids is None:
            raise ClockDriftExceededError()
        return GenerateIdsResponse(ids=[self.describe(sid) for sid in ids])

    def decode(self, value: str, encoding: IdEncoding = "decimal") -> IdResponse:
        sid = parse_base64(value) if encoding == "base64" else parse_string(value)
        return self.describe(sid)

    def describe(self, sid: SnowflakeID) -> IdResponse:
        parts = sid.parts()
        return IdResponse(
            id=str(sid),
            base64=sid.base64(),
            timestamp_ms=parts.timestamp_ms,
            generated_at=sid.time(self._generator.epoch_ms).isoformat(),
            node_id=parts.node_id,
            sequence=parts.sequence,
        )


def build_generator() -> SnowflakeGenerator:
    return SnowflakeGenerator(
        SnowflakeOptions(
            node_id=settings.SNOWFLAKE_NODE_ID,
            epoch_ms=settings.SNOWFLAKE_EPOCH_MS,
        ),
        drift_tolerance_ms=settings.SNOWFLAKE_DRIFT_TOLERANCE_MS,
        drift_compensation_factor=settings.SNOWFLAKE_DRIFT_COMPENSATION_FACTOR,
    )


@lru_cache(maxsize=1)
def get_id_service() -> IdService:
    """Process-wide IdService built from settings (FastAPI dependency)."""
    return IdService(build_generator())
