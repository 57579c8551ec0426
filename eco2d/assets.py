"""Registry of assets: their ids and how they are rendered or played."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional

from eco2d.database import Database

ASSET_INVALID = 0xFFFF
DEFAULT_MAX_ASSETS = 1024
ASSET_NAME_PREFIX = "ASSET_"


class AssetKind(IntEnum):
    TEXTURE = 0
    ANIM = 1
    SOUND = 2


_KIND_NAMES = {
    AssetKind.TEXTURE: "Texture",
    AssetKind.ANIM: "Animated Texture",
    AssetKind.SOUND: "Sound",
}


@dataclass(frozen=True)
class Asset:
    id: int
    kind: AssetKind


@dataclass
class AssetRegistry:
    """Assets loaded from the database, plus the id counter for new ones."""

    max_assets: int = DEFAULT_MAX_ASSETS
    counter: int = 0
    assets: List[Asset] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.assets)

    def new(self, db: Database, name: str) -> int:
        """Insert an asset name under the next id and return that id."""
        if self.counter >= self.max_assets:
            raise OverflowError(f"asset limit of {self.max_assets} reached")
        asset_id = self.counter
        quoted = name.replace("'", "''")
        db.exec(f"INSERT INTO assets (id, name) VALUES ({asset_id}, '{quoted}');")
        self.counter += 1
        return asset_id

    def seed(self, db: Database, names: Iterable[str], next_free: int) -> None:
        """Insert the built-in asset names, then continue ids at ``next_free``."""
        for name in names:
            self.new(db, name.removeprefix(ASSET_NAME_PREFIX))
        self.counter = next_free

    def load(self, db: Database) -> None:
        """Replace the registry contents with the rows of the resources table."""
        db.push("SELECT * FROM resources;")
        try:
            loaded = [
                Asset(db.get_int("asset", row), AssetKind(db.get_int("kind", row)))
                for row in range(db.rows())
            ]
        finally:
            db.pop()
        self.assets = loaded

    def find(self, asset_id: int) -> Optional[int]:
        """Index of the asset with this id, or None."""
        return next(
            (idx for idx, asset in enumerate(self.assets) if asset.id == asset_id),
            None,
        )

    def kind(self, idx: int) -> AssetKind:
        return self.assets[idx].kind

    def kind_name(self, idx: int) -> str:
        return _KIND_NAMES[self.kind(idx)]