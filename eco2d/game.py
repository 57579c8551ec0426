"""Game mode, world viewer selection and connection settings."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterator, Optional, Protocol, Sequence, Tuple

from eco2d.camera import Camera

DEFAULT_PORT = 27000
DEBUG_HOST = "127.0.0.1"
REMOTE_HOST = "eco2d.example.com"


class GameKind(IntEnum):
    SINGLE = 0
    CLIENT = 1
    HEADLESS = 2


class _View(Protocol):
    view_id: int
    owner_id: int


class WorldViewers:
    """A fixed set of world views with one of them active."""

    def __init__(
        self,
        views: Sequence[_View],
        camera: Optional[Camera] = None,
        on_switch: Optional[Callable[[int], None]] = None,
    ) -> None:
        self._views = list(views)
        if not self._views:
            raise ValueError("at least one world view is required")
        self._active = 0
        self.camera = camera
        self.on_switch = on_switch

    def __len__(self) -> int:
        return len(self._views)

    def __iter__(self) -> Iterator[_View]:
        return iter(self._views)

    def active(self) -> _View:
        return self._views[self._active]

    def get(self, idx: int) -> _View:
        if not 0 <= idx < len(self._views):
            raise IndexError(f"world view index {idx} out of range")
        return self._views[idx]

    def count(self) -> int:
        return len(self._views)

    def set_active_by_idx(self, idx: int) -> None:
        """Activate a view, make the camera follow its owner and announce it."""
        view = self.get(idx)
        self._active = idx
        if self.camera is not None:
            self.camera.set_follow(view.owner_id)
        if self.on_switch is not None:
            self.on_switch(view.view_id)

    def cycle_active(self, direction: int) -> None:
        """Step through views; stepping back from the first view stays there."""
        target = self._active + direction
        remainder = abs(target) % len(self._views)
        if target < 0:
            remainder = -remainder
        self.set_active_by_idx(max(0, remainder))


def connection_target(
    ip: Optional[str], port: int, debug: bool = False
) -> Tuple[str, int]:
    """Resolve the host and port a client connects to."""
    host = DEBUG_HOST if debug else REMOTE_HOST
    if ip is not None:
        host = ip
    return host, (port if port > 0 else DEFAULT_PORT)


def is_networked(kind: GameKind) -> bool:
    return GameKind(kind) is not GameKind.SINGLE