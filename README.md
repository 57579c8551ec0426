# eco2d

Game-state building blocks for a 2D sandbox simulation. The package holds the
parts of the game that need no window or renderer: gameplay rules, the camera,
world viewer selection, a debug drawing queue, an SQLite-backed model database,
assets, items, crafting recipes, tooltips, notifications, replay recording,
spawner registration, prefab configuration and sprite-sheet frame layout.

## Installing

```
pip install .
```

Tests are run with the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `eco2d.rules`: `GameRules`, a dataclass of tuning values, and
  `default_rules()` returning a fresh instance with the stock values.
- `eco2d.camera`: `Camera` with `CameraMode.STATIONARY` and
  `CameraMode.FOLLOW`. `set_follow(ent_id)` and `set_pos(x, y)` switch modes;
  `update(frametime, lookup)` eases towards the followed entity found through
  `lookup`, snapping there on the first follow after `reset()`.
  `snapshot()` returns an independent copy.
- `eco2d.game`: `GameKind` (`SINGLE`, `CLIENT`, `HEADLESS`), `WorldViewers`
  (a fixed set of views with one active; switching makes an attached camera
  follow the view's owner and calls an optional `on_switch` callback),
  `connection_target(ip, port, debug)` and `is_networked(kind)`.
- `eco2d.debug_draw`: `DebugDrawQueue` collecting `DrawEntry` lines, circles
  and rectangles (`push_line`, `push_circle`, `push_rect`) while enabled and
  not headless; `flush()` empties it. A full queue raises `OverflowError`.
- `eco2d.database`: `Database`, an SQLite wrapper (default `":memory:"`) with
  an `asset(name)` SQL function, `exec`, `exec_file`, `get` and `row` (rows
  as comma-separated text), and a stack of result sets read with `push`,
  `row_push`, `pop`, `rows`, `field`, `get_int`, `get_float` and `get_str`.
  Failures raise `DatabaseError`. It can be used as a context manager.
- `eco2d.assets`: `AssetRegistry` with `new`, `seed` and `load` (from the
  `resources` table), `find`, `kind` and `kind_name`; `AssetKind` and `Asset`.
- `eco2d.items`: `ItemCatalog` of `ItemDesc` entries loaded from the `items`
  table or added by hand; `find` follows proxy items, `find_no_proxy` does not.
- `eco2d.crafting`: `RecipeBook` of `Recipe`s made of `Reagent`s.
  `perform(slots, producer, target)` consumes reagents from a list of `Item`
  slots (emptied slots become `None`) and returns a `CraftResult`, or `None`.
- `eco2d.tooltips`: `TooltipRegistry` with defaults, cross-links built from
  content (`build_links`), search, and a chain of open `TooltipNode`s
  (`show`, `open_link`, `chain`, `clear`).
- `eco2d.notifications`: `NotificationCenter` with `push`, `dismiss`, `clear`
  and `on_screen()` (the oldest five, in drawing order).
- `eco2d.replay`: `ReplayRecorder` recording `KeyState` samples and special
  actions (`ReplayKind`) with their delays, playing them back through
  `next_due()`, and saving/loading msgpack files. `dump_records` and
  `parse_records` work on bytes; version 2 data is also read. Bad data raises
  `ReplayFormatError`.
- `eco2d.spawning`: `SpawnRegistry` mapping asset ids to spawn callables, and
  `StreamThrottle`, which lengthens the streaming delay of idle entities until
  they are woken again.
- `eco2d.prefabs`: `vehicle_stats(kind)`, `producer_config(name)` for
  `"assembler"`, `"craftbench"` and `"furnace"`, and `make_blueprint(w, h, plan)`.
- `eco2d.spritesheet`: `frame_regions(...)` yielding a `FrameRegion` for every
  whole frame of a sprite sheet.

## Example

```python
from eco2d.crafting import Item, Reagent, Recipe, RecipeBook

book = RecipeBook()
book.add(Recipe(product=20, product_qty=1, process_ticks=10, producer=5,
                reagents=[Reagent(asset=10, qty=2)]))
slots = [Item(kind=10, quantity=3)]
result = book.perform(slots, producer=5, target=0)
print(result)  # CraftResult(product=20, quantity=1, process_ticks=10)
```

## What it does not do

There is no game to run: the package has no command, no window, renderer or
input handling, no network client or server, and no entity-component world.
It does not draw the debug queue, tooltips or notifications; it only keeps
their state. It has no colour themes for a user interface. The database is
empty until you create its tables yourself; no schema or data files ship
with the package.