"""Camera that either stays in place or smoothly follows an entity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, Protocol

CAMERA_LERP_FACTOR = 11.2


class CameraMode(IntEnum):
    STATIONARY = 0
    FOLLOW = 1


class _Located(Protocol):
    x: float
    y: float


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass
class Camera:
    """Camera state; the first follow after a reset snaps instead of easing."""

    mode: CameraMode = CameraMode.STATIONARY
    ent_id: int = 0
    x: float = 0.0
    y: float = 0.0
    first_time: bool = True

    def reset(self) -> None:
        """Return to a stationary camera at the origin."""
        self.mode = CameraMode.STATIONARY
        self.ent_id = 0
        self.x = 0.0
        self.y = 0.0
        self.first_time = True

    def update(
        self,
        frametime: float,
        lookup: Callable[[int], Optional[_Located]],
    ) -> None:
        """Move towards the followed entity, found through ``lookup``."""
        if self.mode is not CameraMode.FOLLOW:
            return
        view = lookup(self.ent_id)
        if view is None:
            return
        smooth = min(max(float(frametime), 0.0), 1.0)
        t = CAMERA_LERP_FACTOR * smooth
        self.x = _lerp(self.x, view.x, t)
        self.y = _lerp(self.y, view.y, t)
        if self.first_time:
            self.first_time = False
            self.x = view.x
            self.y = view.y

    def set_follow(self, ent_id: int) -> None:
        self.mode = CameraMode.FOLLOW
        self.ent_id = ent_id

    def set_pos(self, x: float, y: float) -> None:
        self.mode = CameraMode.STATIONARY
        self.x = x
        self.y = y

    def snapshot(self) -> "Camera":
        """Return an independent copy of the current state."""
        return dataclasses.replace(self)