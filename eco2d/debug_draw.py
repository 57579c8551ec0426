"""Queue of debug shapes collected during a frame for later drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional

from eco2d.game import GameKind

DEBUG_DRAW_MAX_ENTRIES = 65535


class DrawKind(IntEnum):
    LINE = 0
    CIRCLE = 1
    RECT = 2


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class DrawEntry:
    """One shape; ``a``/``b`` are line ends, rect corners or circle centre."""

    kind: DrawKind
    color: int
    a: Vec2
    b: Optional[Vec2] = None
    radius: float = 0.0

    @property
    def bmin(self) -> Vec2:
        return self.a

    @property
    def bmax(self) -> Optional[Vec2]:
        return self.b

    @property
    def pos(self) -> Vec2:
        return self.a


@dataclass
class DebugDrawQueue:
    """Collects shapes while enabled; headless games collect nothing."""

    enabled: bool = False
    kind: GameKind = GameKind.SINGLE
    capacity: int = DEBUG_DRAW_MAX_ENTRIES
    entries: List[DrawEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DrawEntry]:
        return iter(self.entries)

    def flush(self) -> None:
        self.entries.clear()

    def _push(self, entry: DrawEntry) -> None:
        if not self.enabled or self.kind is GameKind.HEADLESS:
            return
        if len(self.entries) >= self.capacity:
            raise OverflowError("debug draw queue is full")
        self.entries.append(entry)

    def push_line(self, a: Vec2, b: Vec2, color: int) -> None:
        self._push(DrawEntry(DrawKind.LINE, color, a, b))

    def push_circle(self, pos: Vec2, radius: float, color: int) -> None:
        self._push(DrawEntry(DrawKind.CIRCLE, color, pos, radius=radius))

    def push_rect(self, bmin: Vec2, bmax: Vec2, color: int) -> None:
        self._push(DrawEntry(DrawKind.RECT, color, bmin, bmax))