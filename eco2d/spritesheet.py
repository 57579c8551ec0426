"""Splitting a sprite sheet into numbered frame regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class FrameRegion:
    frame: int
    x: int
    y: int
    w: int
    h: int


def frame_regions(
    sheet_w: float,
    sheet_h: float,
    frame_w: float,
    frame_h: float,
    frames_per_row: int,
) -> Iterator[FrameRegion]:
    """Yield every whole frame that fits in the sheet, left to right, top down."""
    if frame_w <= 0 or frame_h <= 0:
        raise ValueError("frame size must be positive")
    if frames_per_row <= 0:
        raise ValueError("frames_per_row must be positive")
    max_frames = int((sheet_w * sheet_h) / (frame_w * frame_h))
    for frame in range(max_frames):
        col, row = frame % frames_per_row, frame // frames_per_row
        yield FrameRegion(
            frame,
            int(col * frame_w),
            int(row * frame_h),
            int(frame_w),
            int(frame_h),
        )