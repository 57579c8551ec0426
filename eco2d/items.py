"""Item descriptions and lookups, including proxy resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

from eco2d.database import Database


class ItemUsage(IntEnum):
    DELETE = 0
    PLACE = 1
    PLACE_ITEM = 2
    PLACE_ITEM_DATA = 3
    END_PLACE = 4
    HOLD = 5
    PROXY = 6


class ItemAttachment(IntEnum):
    NONE = 0
    ENERGY_SOURCE = 1


_PLACE_USAGES = (ItemUsage.PLACE, ItemUsage.PLACE_ITEM, ItemUsage.PLACE_ITEM_DATA)


@dataclass
class ItemDesc:
    """Static description of an item kind."""

    kind: int
    usage: ItemUsage = ItemUsage.HOLD
    attachment: ItemAttachment = ItemAttachment.NONE
    max_quantity: int = 0
    has_storage: bool = False
    place_kind: int = 0
    directional: bool = False
    place_item_id: int = 0
    proxy_id: int = 0
    energy_producer: int = 0
    energy_level: float = 0.0
    blueprint_w: int = 0
    blueprint_h: int = 0
    blueprint_plan: Tuple[int, ...] = ()


class ItemCatalog:
    """Ordered list of item descriptions; an item id is its position."""

    def __init__(self) -> None:
        self._items: List[ItemDesc] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemDesc]:
        return iter(self._items)

    @staticmethod
    def _read_row(db: Database, row: int) -> ItemDesc:
        desc = ItemDesc(
            kind=db.get_int("kind", row),
            usage=ItemUsage(db.get_int("usage", row)),
            attachment=ItemAttachment(db.get_int("attachment", row)),
            max_quantity=db.get_int("max_quantity", row),
            has_storage=bool(db.get_int("has_storage", row)),
        )
        if desc.usage in _PLACE_USAGES:
            desc.place_kind = db.get_int("place_kind", row)
            desc.directional = bool(db.get_int("directional", row))
            desc.place_item_id = db.get_int("place_item_id", row)
        elif desc.usage is ItemUsage.PROXY:
            desc.proxy_id = db.get_int("proxy_id", row)
        if desc.attachment is ItemAttachment.ENERGY_SOURCE:
            desc.energy_producer = db.get_int("producer", row)
            desc.energy_level = db.get_float("energy_level", row)
        return desc

    def load(self, db: Database) -> None:
        """Replace the catalog with the rows of the items table."""
        db.push("SELECT * FROM items;")
        try:
            loaded = [self._read_row(db, row) for row in range(db.rows())]
        finally:
            db.pop()
        self._items = loaded

    def add(self, desc: ItemDesc) -> int:
        """Append a description and return its item id."""
        self._items.append(desc)
        return len(self._items) - 1

    def _check(self, item_id: int) -> ItemDesc:
        if not 0 <= item_id < len(self._items):
            raise IndexError(f"item id {item_id} out of range")
        return self._items[item_id]

    def _resolve_proxy(self, item_id: int) -> Optional[int]:
        desc = self._check(item_id)
        if desc.usage is ItemUsage.PROXY:
            return self.find(desc.proxy_id)
        return item_id

    def find(self, kind: int) -> Optional[int]:
        """Item id for an asset kind, following proxies; None if unknown."""
        idx = self.find_no_proxy(kind)
        return None if idx is None else self._resolve_proxy(idx)

    def find_no_proxy(self, kind: int) -> Optional[int]:
        return next(
            (idx for idx, desc in enumerate(self._items) if desc.kind == kind),
            None,
        )

    def fix_kind(self, kind: int) -> int:
        """Asset kind an item of ``kind`` really becomes once proxies resolve."""
        idx = self.find(kind)
        if idx is None:
            raise KeyError(f"no item for asset {kind}")
        return self._items[idx].kind

    def max_quantity(self, item_id: int) -> int:
        return self._check(item_id).max_quantity

    def usage(self, item_id: int) -> ItemUsage:
        return self._check(item_id).usage

    def place_directional(self, item_id: int) -> bool:
        return self._check(item_id).directional

    def desc(self, item_id: int) -> ItemDesc:
        return self._check(item_id)