import pytest

from eco2d.assets import ASSET_INVALID
from eco2d.prefabs import (
    PRODUCER_ENERGY_LEVEL,
    ROUTER_PUSH_QTY,
    CraftTask,
    PushFilter,
    VehicleKind,
    make_blueprint,
    producer_config,
    vehicle_stats,
)


def test_car_stats():
    car = vehicle_stats(VehicleKind.CAR)
    assert car.wheel_base == 50.0
    assert car.has_storage is False
    assert car.producer_energy is None


def test_vehicle_invariants():
    for kind in VehicleKind:
        stats = vehicle_stats(kind)
        assert stats.veh_kind is kind
        assert stats.reverse_speed < 0 < stats.speed
        assert stats.force == 0.0
        assert stats.harvests_blocks is True


def test_truck_and_furnacemobile_share_chassis():
    truck = vehicle_stats(VehicleKind.TRUCK)
    mobile = vehicle_stats(VehicleKind.FURNACEMOBILE)
    assert (truck.wheel_base, truck.speed, truck.reverse_speed) == (
        mobile.wheel_base, mobile.speed, mobile.reverse_speed,
    )
    assert truck.furnace_device and mobile.furnace_device
    assert truck.producer_energy is None
    assert mobile.producer_energy == PRODUCER_ENERGY_LEVEL


def test_unknown_vehicle_kind():
    with pytest.raises(ValueError):
        vehicle_stats(7)


def test_assembler_config():
    cfg = producer_config("assembler")
    assert cfg.target_item == ASSET_INVALID
    assert cfg.pending_task is CraftTask.AUTO
    assert cfg.push_filter is PushFilter.PRODUCT
    assert cfg.router_push_qty == ROUTER_PUSH_QTY


def test_craftbench_waits_and_never_pushes():
    cfg = producer_config("craftbench")
    assert cfg.pending_task is CraftTask.WAITING
    assert cfg.push_filter is PushFilter.NONE
    assert cfg.router_push_qty is None


def test_furnace_pushes_anything():
    cfg = producer_config("furnace")
    assert cfg.push_filter is PushFilter.ANY
    assert cfg.energy_level == PRODUCER_ENERGY_LEVEL


def test_unknown_producer():
    with pytest.raises(KeyError):
        producer_config("teleporter")


def test_blueprint_takes_needed_cells():
    bp = make_blueprint(2, 2, [1, 2, 3, 4, 5, 6])
    assert bp.plan == (1, 2, 3, 4)
    assert (bp.w, bp.h) == (2, 2)


def test_blueprint_too_large():
    with pytest.raises(ValueError):
        make_blueprint(16, 16, [0] * 256)


def test_blueprint_plan_too_short():
    with pytest.raises(ValueError):
        make_blueprint(3, 3, [1, 2])