"""Spawner lookup by asset id and action-based throttling of entity streaming."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

SpawnProc = Callable[[], int]
DataSpawnProc = Callable[[Any], int]


@dataclass(frozen=True)
class _SpawnDef:
    asset_id: int
    proc: Optional[SpawnProc] = None
    proc_udata: Optional[DataSpawnProc] = None


class SpawnRegistry:
    """Spawners keyed by asset id; the first registration for an id wins."""

    def __init__(self) -> None:
        self._defs: List[_SpawnDef] = []

    def __len__(self) -> int:
        return len(self._defs)

    def add(self, asset_id: int, proc: SpawnProc) -> None:
        self._defs.append(_SpawnDef(asset_id, proc=proc))

    def add_with_data(self, asset_id: int, proc: DataSpawnProc) -> None:
        self._defs.append(_SpawnDef(asset_id, proc_udata=proc))

    def _lookup(self, asset_id: int) -> Optional[_SpawnDef]:
        return next((d for d in self._defs if d.asset_id == asset_id), None)

    def spawn(self, asset_id: int) -> Optional[int]:
        """Spawn an entity for ``asset_id``; None if no spawner is registered."""
        spawndef = self._lookup(asset_id)
        if spawndef is None:
            return None
        if spawndef.proc is None:
            raise TypeError(f"spawner for asset {asset_id} needs data")
        return spawndef.proc()

    def spawn_with_data(self, asset_id: int, udata: Any) -> Optional[int]:
        spawndef = self._lookup(asset_id)
        if spawndef is None:
            return None
        if spawndef.proc_udata is None:
            raise TypeError(f"spawner for asset {asset_id} takes no data")
        return spawndef.proc_udata(udata)

    def provides(self, asset_id: int) -> bool:
        return self._lookup(asset_id) is not None


@dataclass
class StreamInfo:
    last_update: float = 0.0
    tick_delay: float = 0.0


class StreamThrottle:
    """Slows streaming of idle entities; waking an entity resets its delay."""

    def __init__(self) -> None:
        self._infos: Dict[int, StreamInfo] = {}
        self._last_update_time: Optional[float] = None

    def __len__(self) -> int:
        return len(self._infos)

    def __iter__(self) -> Iterator[int]:
        return iter(self._infos)

    def __contains__(self, ent_id: object) -> bool:
        return ent_id in self._infos

    def __getitem__(self, ent_id: int) -> StreamInfo:
        return self._infos[ent_id]

    def wake(self, ent_id: int) -> None:
        self._infos[ent_id] = StreamInfo()

    def forget(self, ent_id: int) -> None:
        self._infos.pop(ent_id, None)

    def update(self, now: float) -> None:
        """Advance timers; each due entity waits a little longer next time."""
        if self._last_update_time is None:
            self._last_update_time = now
        elapsed = now - self._last_update_time
        for info in self._infos.values():
            if info.last_update < now:
                info.last_update = now + info.tick_delay
                info.tick_delay += elapsed * 0.5
        self._last_update_time = now

    def can_stream(self, ent_id: int, now: float) -> bool:
        info = self._infos.setdefault(ent_id, StreamInfo())
        return info.last_update < now