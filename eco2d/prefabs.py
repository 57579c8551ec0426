"""Configuration of the built-in prefabs: vehicles, producers and blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Optional, Tuple

from eco2d.assets import ASSET_INVALID

PRODUCER_ENERGY_LEVEL = 69.0
ROUTER_PUSH_QTY = 1
BLUEPRINT_MAX_CELLS = 256


class VehicleKind(IntEnum):
    CAR = 0
    TRUCK = 1
    FURNACEMOBILE = 2


class PushFilter(IntEnum):
    PRODUCT = 0
    ANY = 1
    NONE = 2


class CraftTask(IntEnum):
    WAITING = 0
    BUSY = 1
    ENQUEUED = 2
    AUTO = 3


@dataclass(frozen=True)
class VehicleStats:
    """Driving parameters and fitted equipment of a vehicle kind."""

    veh_kind: VehicleKind
    wheel_base: float
    speed: float
    reverse_speed: float
    force: float = 0.0
    has_storage: bool = False
    furnace_device: bool = False
    producer_energy: Optional[float] = None
    harvests_blocks: bool = True


_VEHICLES: Dict[VehicleKind, VehicleStats] = {
    VehicleKind.CAR: VehicleStats(VehicleKind.CAR, 50.0, 50.0, -20.0),
    VehicleKind.TRUCK: VehicleStats(
        VehicleKind.TRUCK, 100.0, 30.0, -10.0,
        has_storage=True, furnace_device=True,
    ),
    VehicleKind.FURNACEMOBILE: VehicleStats(
        VehicleKind.FURNACEMOBILE, 100.0, 30.0, -10.0,
        has_storage=True, furnace_device=True,
        producer_energy=PRODUCER_ENERGY_LEVEL,
    ),
}


def vehicle_stats(kind: int) -> VehicleStats:
    """Stats for a vehicle kind; unknown kinds raise ValueError."""
    return _VEHICLES[VehicleKind(kind)]


@dataclass(frozen=True)
class ProducerConfig:
    """Initial state of a producing device; routers push ``router_push_qty``."""

    energy_level: float
    pending_task: CraftTask
    push_filter: PushFilter
    target_item: int = 0
    router_push_qty: Optional[int] = None


_PRODUCERS: Dict[str, ProducerConfig] = {
    "assembler": ProducerConfig(
        PRODUCER_ENERGY_LEVEL, CraftTask.AUTO, PushFilter.PRODUCT,
        target_item=ASSET_INVALID, router_push_qty=ROUTER_PUSH_QTY,
    ),
    "craftbench": ProducerConfig(
        PRODUCER_ENERGY_LEVEL, CraftTask.WAITING, PushFilter.NONE,
    ),
    "furnace": ProducerConfig(
        PRODUCER_ENERGY_LEVEL, CraftTask.AUTO, PushFilter.ANY,
        router_push_qty=ROUTER_PUSH_QTY,
    ),
}


def producer_config(name: str) -> ProducerConfig:
    """Config of the producer prefab called ``name``."""
    try:
        return _PRODUCERS[name]
    except KeyError:
        raise KeyError(f"no producer prefab named {name!r}") from None


@dataclass(frozen=True)
class Blueprint:
    """A ``w`` by ``h`` grid of asset ids, row by row."""

    w: int
    h: int
    plan: Tuple[int, ...]


def make_blueprint(w: int, h: int, plan: Iterable[int]) -> Blueprint:
    """Build a blueprint from the first ``w * h`` entries of ``plan``."""
    if not (0 <= w <= 255 and 0 <= h <= 255):
        raise ValueError("blueprint dimensions must fit in a byte")
    cells = w * h
    if cells >= BLUEPRINT_MAX_CELLS:
        raise ValueError(f"blueprint must have fewer than {BLUEPRINT_MAX_CELLS} cells")
    entries = tuple(plan)
    if len(entries) < cells:
        raise ValueError(f"plan has {len(entries)} entries, {cells} needed")
    return Blueprint(w, h, entries[:cells])