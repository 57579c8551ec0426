"""Game-state models for a 2D sandbox simulation: rules, camera, viewers, assets, items, crafting, replays and UI state."""

__version__ = "0.1.0"