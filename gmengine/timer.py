"""A frame timer measuring scaled time between checks."""

from __future__ import annotations

import struct
import time


def _to_single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class EngineTimer:
    """Measures the time since the previous check, multiplied by a time scale.

    ``delta_time`` holds the result at single precision and
    ``double_delta_time`` at full precision.
    """

    def __init__(self) -> None:
        self._prev = time.perf_counter()
        self._delta = 0.0
        self._fdelta = 0.0
        self.time_scale = 1.0

    @property
    def delta_time(self) -> float:
        return self._fdelta

    @property
    def double_delta_time(self) -> float:
        return self._delta

    def start(self) -> None:
        """Restart the measurement from now."""
        self._prev = time.perf_counter()

    def check(self) -> None:
        """Record the scaled time since the previous check or start."""
        now = time.perf_counter()
        self._delta = (now - self._prev) * self.time_scale
        self._fdelta = _to_single(self._delta)
        self._prev = now

    def end(self) -> float:
        """Check and return the delta at single precision."""
        self.check()
        return self.delta_time

    def end_double(self) -> float:
        """Check and return the delta at full precision."""
        self.check()
        return self.double_delta_time