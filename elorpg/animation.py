"""Frame timing for the animated exit door."""

from __future__ import annotations

NUM_FRAMES = 6
DEFAULT_INTERVAL = 0.055


class DoorAnimation:
    """Cycles through ``frame_count`` frames, one step per elapsed ``interval``."""

    def __init__(self, frame_count: int = NUM_FRAMES,
                 interval: float = DEFAULT_INTERVAL) -> None:
        if frame_count < 1:
            raise ValueError(f"frame_count must be at least 1, got {frame_count}")
        self.frame_count = frame_count
        self.interval = interval
        self.frame = 0
        self.last_time = 0.0

    def update(self, now: float) -> bool:
        """Advance to the next frame if more than an interval passed; say if it did."""
        if now - self.last_time <= self.interval:
            return False
        self.frame = (self.frame + 1) % self.frame_count
        self.last_time = now
        return True