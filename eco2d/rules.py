"""Tunable gameplay constants shared by the simulation systems."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameRules:
    """Physics, item, player and vehicle tuning values."""

    phy_walk_drag: float = 4.23
    demo_npc_move_speed: int = 500
    demo_npc_steer_speed: int = 300
    item_pick_radius: float = 25.0
    item_merger_radius: float = 75.0
    item_attract_radius: float = 75.0
    item_attract_force: float = 1.98
    item_container_reach_radius: float = 105.0
    item_drop_pickup_time: float = 2.5
    item_drop_merger_time: float = 6.5
    plr_move_speed: float = 800.0
    plr_move_speed_mult: float = 1.5
    vehicle_force: float = 240.8
    vehicle_accel: float = 0.032
    vehicle_decel: float = 0.28
    vehicle_steer: float = 35.89
    vehicle_steer_compensation: float = 4.0
    vehicle_steer_revert: float = 6.0941816
    vehicle_power: float = 97.89
    vehicle_brake_force: float = 0.84
    veh_enter_radius: float = 45.0
    blueprint_build_time: float = 1.5


def default_rules() -> GameRules:
    """Return a fresh set of the default game rules."""
    return GameRules()