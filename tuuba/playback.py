"""Playback clock of a video and the geometry of the player area."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

DEFAULT_ASPECT_RATIO = 16.0 / 9.0


@dataclass
class VideoPlaybackData:
    """State of one playing video: its source, clock and last shown frame."""

    url: str
    frame_rate: float | None = None
    width: int | None = None
    height: int | None = None
    start_time: float = field(default_factory=time.monotonic)
    frame: int = 0
    texture: Any = None

    def __post_init__(self) -> None:
        parts = urlsplit(self.url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"Invalid URL: '{self.url}'")
        if self.frame_rate is not None and self.frame_rate <= 0:
            raise ValueError(f"frame rate must be positive: {self.frame_rate}")

    def current_frame(self, now: float | None = None) -> int:
        """Index of the frame due at ``now`` (monotonic seconds)."""
        if self.frame_rate is None:
            return 0
        if now is None:
            now = time.monotonic()
        elapsed = max(0.0, now - self.start_time)
        return math.floor(elapsed * self.frame_rate)

    def should_advance_frame(self, now: float | None = None) -> bool:
        """Whether the clock has moved past the last shown frame."""
        return self.current_frame(now) > self.frame

    def advance(self) -> int:
        """Count one more decoded frame and return the new frame index."""
        self.frame += 1
        return self.frame


def fit_video_size(
    avail_width: float, avail_height: float, aspect_ratio: float = DEFAULT_ASPECT_RATIO
) -> tuple[float, float]:
    """Largest size of the given aspect ratio that fits the available area."""
    if aspect_ratio <= 0:
        raise ValueError(f"aspect ratio must be positive: {aspect_ratio}")
    width, height = float(avail_width), float(avail_height)
    if height <= 0:
        return 0.0, max(height, 0.0)
    if width / height > aspect_ratio:
        width = height * aspect_ratio
    else:
        height = width / aspect_ratio
    return width, height


def centered_offset(avail_width: float, video_width: float) -> float:
    """Horizontal offset that centres the video in the available width."""
    if video_width < avail_width:
        return (avail_width - video_width) / 2.0
    return 0.0