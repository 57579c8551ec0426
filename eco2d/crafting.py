"""Recipes and the crafting step that turns reagents into products."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice, takewhile
from typing import Iterator, List, MutableSequence, Optional, Tuple

from eco2d.database import Database

ITEMS_INVENTORY_SIZE = 9
ITEMS_CONTAINER_SIZE = 16


@dataclass
class Item:
    """A stack of one asset kind held in an inventory or container slot."""

    kind: int
    quantity: int = 0
    merger_time: float = 0.0
    durability: float = 1.0


@dataclass(frozen=True)
class Reagent:
    asset: int
    qty: int


@dataclass(frozen=True)
class Recipe:
    """How a producer turns reagents into ``product_qty`` of ``product``.

    A reagent with asset 0 ends the reagent list.
    """

    product: int
    product_qty: int
    process_ticks: int
    producer: int
    reagents: Tuple[Reagent, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "reagents", tuple(self.reagents))

    def active_reagents(self) -> Tuple[Reagent, ...]:
        return tuple(takewhile(lambda rea: rea.asset != 0, self.reagents))

    def uses(self, asset: int) -> bool:
        return any(rea.asset == asset for rea in self.active_reagents())


@dataclass(frozen=True)
class CraftResult:
    product: int
    quantity: int
    process_ticks: int


Slots = MutableSequence[Optional[Item]]


class RecipeBook:
    """Ordered recipes; a recipe id is its position."""

    def __init__(self) -> None:
        self._recipes: List[Recipe] = []

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def load(self, db: Database) -> None:
        """Replace the book with the recipes stored in the database."""
        loaded: List[Recipe] = []
        db.push("SELECT * FROM recipes;")
        try:
            for row in range(db.rows()):
                product = db.get_int("product", row)
                product_qty = db.get_int("product_qty", row)
                process_ticks = db.get_int("process_ticks", row)
                producer = db.get_int("producer", row)
                db.push(f"SELECT * FROM recipe_reagents WHERE recipe_id={row + 1};")
                try:
                    reagent_ids = [db.get_int("reagent_id", j) for j in range(db.rows())]
                finally:
                    db.pop()
                reagents = []
                for reagent_id in reagent_ids:
                    db.push(f"SELECT * FROM reagents WHERE id={int(reagent_id)};")
                    try:
                        reagents.append(
                            Reagent(db.get_int("asset_id", 0), db.get_int("qty", 0))
                        )
                    finally:
                        db.pop()
                loaded.append(
                    Recipe(product, product_qty, process_ticks, producer, tuple(reagents))
                )
        finally:
            db.pop()
        self._recipes = loaded

    def add(self, recipe: Recipe) -> int:
        """Append a recipe and return its id."""
        self._recipes.append(recipe)
        return len(self._recipes) - 1

    def _count_using(self, producer: int, asset: int) -> int:
        return sum(
            1 for rec in self._recipes if rec.producer == producer and rec.uses(asset)
        )

    def _matches(self, producer: int, asset: int) -> Iterator[Recipe]:
        for rec in self._recipes:
            if rec.producer != producer:
                continue
            for rea in rec.active_reagents():
                if rea.asset == asset:
                    yield rec

    @staticmethod
    def _has_reagents(slots: Slots, rec: Recipe) -> bool:
        for rea in rec.active_reagents():
            pending = rea.qty
            for item in slots:
                if item is None:
                    continue
                if item.kind == rea.asset and item.quantity > 0:
                    pending -= min(pending, item.quantity)
                    if pending == 0:
                        break
            if pending > 0:
                return False
        return True

    @staticmethod
    def _consume(slots: Slots, rec: Recipe) -> None:
        for rea in rec.active_reagents():
            pending = rea.qty
            for idx, item in enumerate(slots):
                if item is None:
                    continue
                if item.kind == rea.asset and item.quantity > 0:
                    item.quantity -= min(pending, item.quantity)
                    # The demand shrinks by what is left in the stack afterwards.
                    pending -= min(pending, item.quantity)
                    if item.quantity == 0:
                        slots[idx] = None
                    if pending == 0:
                        break

    def perform(
        self, slots: Slots, producer: int, target: int = 0
    ) -> Optional[CraftResult]:
        """Consume reagents from ``slots`` for the first feasible recipe.

        Emptied slots become None. ``target`` 0 accepts any product.
        Returns None when nothing can be crafted.
        """
        for item in list(slots):
            if item is None:
                continue
            count = self._count_using(producer, item.kind)
            for rec in islice(self._matches(producer, item.kind), count):
                if target != 0 and rec.product != target:
                    continue
                if not self._has_reagents(slots, rec):
                    continue
                self._consume(slots, rec)
                return CraftResult(rec.product, rec.product_qty, rec.process_ticks)
        return None

    def is_reagent_used_in_producer(self, reagent: int, producer: int) -> bool:
        return self._count_using(producer, reagent) > 0

    def is_item_produced_by_producer(self, item: int, producer: int) -> bool:
        return any(
            rec.producer == producer and rec.product == item for rec in self._recipes
        )

    def is_item_produced_by_reagent(self, item: int, reagent: int) -> bool:
        return any(
            rec.product == item and rec.uses(reagent) for rec in self._recipes
        )

    def num_recipes(self) -> int:
        return len(self._recipes)

    def _check(self, recipe_id: int) -> Recipe:
        if not 0 <= recipe_id < len(self._recipes):
            raise IndexError(f"recipe id {recipe_id} out of range")
        return self._recipes[recipe_id]

    def recipe_asset(self, recipe_id: int) -> int:
        return self._check(recipe_id).product

    def recipe_id_from_product(self, product: int) -> Optional[int]:
        return next(
            (idx for idx, rec in enumerate(self._recipes) if rec.product == product),
            None,
        )

    def recipe(self, recipe_id: int) -> Recipe:
        return self._check(recipe_id)