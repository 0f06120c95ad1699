"""Frame clock working in milliseconds."""

from __future__ import annotations

import time
from typing import Callable

MILLISECONDS_TO_SECONDS = 1 / 1000.0
SECONDS_TO_MILLISECONDS = 1000

_U32 = 0xFFFFFFFF


def _system_milliseconds() -> int:
    return (time.time_ns() // 1_000_000) & _U32


class EngineClock:
    """Tracks frame ticks, frame delta and target frame rate."""

    def __init__(self, now_ms: Callable[[], int] | None = None) -> None:
        self._now_ms = now_ms or _system_milliseconds
        self.fps = 30
        self._prev_ticks = 0
        self._current_ticks = 0
        self.reset()

    def _now(self) -> int:
        return self._now_ms() & _U32

    def reset(self) -> None:
        """Set both previous and current ticks to now."""
        self._prev_ticks = self._current_ticks = self._now()

    def update_frame_ticks(self) -> None:
        """Advance one frame: current ticks become previous, now becomes current."""
        self._prev_ticks = self._current_ticks
        self._current_ticks = self._now()

    def delta_time(self) -> float:
        """Seconds between the last two frame ticks."""
        elapsed = (self._current_ticks - self._prev_ticks) & _U32
        return elapsed * MILLISECONDS_TO_SECONDS

    def sleep_time(self, fps: int) -> int:
        """Milliseconds to sleep for ``fps``, never more than one frame."""
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        per_frame = SECONDS_TO_MILLISECONDS // fps
        if per_frame == 0:
            return 0
        sleep = (per_frame - self._now()) & _U32
        return per_frame if sleep > per_frame else sleep

    def current_ticks(self) -> int:
        """Ticks of the current frame, in milliseconds."""
        return self._current_ticks