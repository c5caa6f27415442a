"""SnowflakeGenerator: per-node 64-bit ID generator.

One instance per node. All mutable state (sequence, last timestamp) is
touched only while holding the instance lock, so concurrent callers never
observe the same (timestamp, sequence) pair.
"""
import logging
import threading

from src.sf_common.datetime_utils import now_ms
from src.sf_common.errors import ClockDriftExceededError, InvalidEpochError, InvalidNodeIDError
from src.sf_snowflake.domain.layout import (
    DEFAULT_EPOCH_MS,
    MAX_NODE_ID,
    MAX_SEQUENCE,
    NODE_BITS,
    SEQUENCE_BITS,
    compose,
)
from src.sf_snowflake.domain.models import SnowflakeID, SnowflakeOptions
from src.sf_snowflake.engine.clock import Clock, EpochClock

logger = logging.getLogger(__name__)

# Backward-clock policy. Empirical values, tune per deployment.
DRIFT_TOLERANCE_MS = 5
DRIFT_COMPENSATION_FACTOR = 2


class SnowflakeGenerator:
    def __init__(
        self,
        options: SnowflakeOptions,
        *,
        clock: Clock | None = None,
        drift_tolerance_ms: int = DRIFT_TOLERANCE_MS,
        drift_compensation_factor: int = DRIFT_COMPENSATION_FACTOR,
    ) -> None:
        if not (0 <= options.node_id <= MAX_NODE_ID):
            raise InvalidNodeIDError(options.node_id, MAX_NODE_ID)

        epoch_ms = options.epoch_ms or DEFAULT_EPOCH_MS
        if epoch_ms > now_ms():
            raise InvalidEpochError(epoch_ms)
        if clock is None:
            clock = EpochClock(epoch_ms)

        self._node_id = options.node_id
        self._epoch_ms = epoch_ms
        self._clock = clock
        self._drift_tolerance_ms = drift_tolerance_ms
        self._drift_compensation_factor = drift_compensation_factor

        self._sequence = 0
        self._last_timestamp = -1
        self._lock = threading.Lock()

        logger.info("Snowflake generator ready: node_id=%d epoch_ms=%d", self._node_id, epoch_ms)

    # ------------------------------------------------------------------
    # Immutable configuration
    # ------------------------------------------------------------------

    @property
    def node_id(self) -> int:
        return self._node_id

    @property
    def epoch_ms(self) -> int:
        return self._epoch_ms

    @property
    def node_bits(self) -> int:
        return NODE_BITS

    @property
    def sequence_bits(self) -> int:
        return SEQUENCE_BITS

    @property
    def max_node_id(self) -> int:
        return MAX_NODE_ID

    @property
    def max_sequence(self) -> int:
        return MAX_SEQUENCE

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def next_id(self) -> SnowflakeID | None:
        """Produce the next ID, or None if the clock moved backwards beyond tolerance."""
        with self._lock:
            return self._next_id_locked()

    def next_id_or_raise(self) -> SnowflakeID:
        sid = self.next_id()
        if sid is None:
            raise ClockDriftExceededError()
        return sid

    def next_ids(self, count: int) -> list[SnowflakeID] | None:
        """Produce `count` IDs under one lock hold. None if any of them fails."""
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        with self._lock:
            ids: list[SnowflakeID] = []
            for _ in range(count):
                sid = self._next_id_locked()
                if sid is None:
                    return None
                ids.append(sid)
            return ids

    def _next_id_locked(self) -> SnowflakeID | None:
        now = self._clock.elapsed_ms()

        if now < self._last_timestamp:
            offset = self._last_timestamp - now
            if offset > self._drift_tolerance_ms:
                logger.warning(
                    "Clock moved backwards by %dms (tolerance %dms), rejecting",
                    offset,
                    self._drift_tolerance_ms,
                )
                return None
            wait_ms = offset * self._drift_compensation_factor
            logger.warning("Clock moved backwards by %dms, waiting %dms", offset, wait_ms)
            self._clock.sleep_ms(wait_ms)
            now = self._clock.elapsed_ms()
            if now < self._last_timestamp:
                logger.warning(
                    "Clock still %dms behind after compensation, rejecting",
                    self._last_timestamp - now,
                )
                return None

        if now == self._last_timestamp:
            self._sequence = (self._sequence + 1) & MAX_SEQUENCE
            if self._sequence == 0:
                # sequence exhausted for this ms; spin to next ms
                while now <= self._last_timestamp:
                    now = self._clock.elapsed_ms()
        else:
            self._sequence = 0

        self._last_timestamp = now
        return SnowflakeID(compose(now, self._node_id, self._sequence))
