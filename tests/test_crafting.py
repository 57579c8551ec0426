import pytest

from eco2d.crafting import CraftResult, Item, Reagent, Recipe, RecipeBook
from eco2d.database import Database

FURNACE = 10
BENCH = 11
ORE = 3
COAL = 4
INGOT = 5
PLANK = 6


@pytest.fixture
def book():
    b = RecipeBook()
    b.add(Recipe(INGOT, 1, 20, FURNACE, (Reagent(ORE, 2), Reagent(COAL, 1))))
    b.add(Recipe(PLANK, 4, 5, BENCH, (Reagent(ORE, 1),)))
    return b


def test_perform_crafts_and_depletes(book):
    slots = [Item(ORE, 5), None, Item(COAL, 3)]
    result = book.perform(slots, FURNACE)
    assert result == CraftResult(INGOT, 1, 20)
    assert slots[0].quantity == 3
    assert slots[2].quantity == 2


def test_perform_removes_emptied_slots(book):
    slots = [Item(ORE, 2), Item(COAL, 1)]
    assert book.perform(slots, FURNACE) == CraftResult(INGOT, 1, 20)
    assert slots == [None, None]


def test_perform_missing_reagent_leaves_slots(book):
    slots = [Item(ORE, 5)]
    assert book.perform(slots, FURNACE) is None
    assert slots[0].quantity == 5


def test_perform_target_mismatch(book):
    slots = [Item(ORE, 5), Item(COAL, 3)]
    assert book.perform(slots, FURNACE, target=PLANK) is None
    assert slots[0].quantity == 5


def test_perform_uses_producer(book):
    slots = [Item(ORE, 5), Item(COAL, 3)]
    assert book.perform(slots, BENCH) == CraftResult(PLANK, 4, 5)
    assert slots[0].quantity == 4
    assert slots[1].quantity == 3


def test_reagent_list_stops_at_zero():
    b = RecipeBook()
    b.add(Recipe(INGOT, 1, 1, FURNACE, (Reagent(ORE, 1), Reagent(0, 0), Reagent(COAL, 9))))
    slots = [Item(ORE, 2)]
    assert b.perform(slots, FURNACE) == CraftResult(INGOT, 1, 1)
    assert not b.is_reagent_used_in_producer(COAL, FURNACE)


def test_queries(book):
    assert book.is_reagent_used_in_producer(ORE, FURNACE)
    assert not book.is_reagent_used_in_producer(PLANK, FURNACE)
    assert book.is_item_produced_by_producer(INGOT, FURNACE)
    assert not book.is_item_produced_by_producer(INGOT, BENCH)
    assert book.is_item_produced_by_reagent(INGOT, COAL)
    assert not book.is_item_produced_by_reagent(PLANK, COAL)


def test_recipe_lookup(book):
    assert book.num_recipes() == 2
    assert book.recipe_id_from_product(PLANK) == 1
    assert book.recipe_id_from_product(999) is None
    assert book.recipe_asset(0) == INGOT
    assert book.recipe(1).producer == BENCH
    with pytest.raises(IndexError):
        book.recipe(2)
    with pytest.raises(IndexError):
        book.recipe_asset(-1)


def test_load_from_database():
    with Database(":memory:") as db:
        db.exec(
            """
            CREATE TABLE recipes (id INTEGER PRIMARY KEY, product INTEGER,
                product_qty INTEGER, process_ticks INTEGER, producer INTEGER);
            CREATE TABLE reagents (id INTEGER PRIMARY KEY, asset_id INTEGER, qty INTEGER);
            CREATE TABLE recipe_reagents (recipe_id INTEGER, reagent_id INTEGER);
            INSERT INTO recipes VALUES (1, 5, 1, 20, 10);
            INSERT INTO recipes VALUES (2, 6, 4, 5, 11);
            INSERT INTO reagents VALUES (1, 3, 2);
            INSERT INTO reagents VALUES (2, 4, 1);
            INSERT INTO reagents VALUES (3, 3, 1);
            INSERT INTO recipe_reagents VALUES (1, 1);
            INSERT INTO recipe_reagents VALUES (1, 2);
            INSERT INTO recipe_reagents VALUES (2, 3);
            """
        )
        book = RecipeBook()
        book.load(db)
    assert book.num_recipes() == 2
    assert book.recipe(0) == Recipe(5, 1, 20, 10, (Reagent(3, 2), Reagent(4, 1)))
    assert book.recipe(1).reagents == (Reagent(3, 1),)