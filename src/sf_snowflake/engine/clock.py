"""Clock abstraction for injectable time source."""

import time
from typing import Protocol


class Clock(Protocol):
    def elapsed_ms(self) -> int: ...

    def sleep_ms(self, ms: int) -> None: ...


class EpochClock:
    """Milliseconds elapsed since an absolute epoch, read off the monotonic clock.

    The epoch is pinned once as a point on time.monotonic_ns():
    anchor = monotonic_now - (wall_now - epoch). Later reads are then just
    "time since anchor" and do not follow wall-clock adjustments.
    """

    def __init__(self, epoch_ms: int) -> None:
        wall_ns = time.time_ns()
        mono_ns = time.monotonic_ns()
        self._anchor_ns = mono_ns - (wall_ns - epoch_ms * 1_000_000)

    def elapsed_ms(self) -> int:
        return (time.monotonic_ns() - self._anchor_ns) // 1_000_000

    def sleep_ms(self, ms: int) -> None:
        time.sleep(ms / 1000)
