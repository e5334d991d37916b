# dungeoncrawl

A small turn-based dungeon crawler for the terminal. Each game generates a new
dungeon of 20 rooms joined by corridors. You are the `@`. The Amulet of Yala
(`|`) lies on the reachable tile farthest from your starting room. Goblins (`g`)
and orcs (`o`) wait in the other rooms, and they chase you once they can see
you.

## Installing

```
pip install .
```

The package needs only the Python standard library and Python 3.10 or newer.
The terminal front end uses `curses`, so it needs a platform where the standard
`curses` module is available, such as Linux or macOS.

## Playing

```
dungeoncrawl
dungeoncrawl --seed 42
```

`--seed` fixes the random generator, so the same seed gives the same dungeon
and the same monsters.

- Arrow keys move you one tile. If a monster stands on the tile you move into,
  you attack it instead.
- Any other key, such as Space, makes you wait a turn and regain 1 health, up
  to your maximum.
- Point the mouse at something you can see to show its name, and its health if
  it has any.
- Press Ctrl-C to quit.

You start with 10 health. Each hit takes away 1 health. Goblins have 1 health
and orcs have 2. A monster whose health drops below 1 is removed from the
dungeon. If your health drops below 1, the quest is over. Step onto the amulet
to win. Either way, press `1` on the end screen to start again in a new
dungeon.

You see only the tiles in your field of view, which reaches 8 tiles around
you. Tiles you have seen before stay on the map, drawn dimmed.

## Using it as a library

The game logic does not depend on the terminal:

- `dungeoncrawl.map_builder.MapBuilder(rng)` generates a map. It has the rooms,
  the player's start and the amulet's position.
- `dungeoncrawl.ecs.World` stores entities and their components.
  `dungeoncrawl.ecs.CommandBuffer` records changes and applies them later with
  `flush`.
- `dungeoncrawl.spawner` creates the player, the monsters and the amulet.
- The turn systems are `ai.chasing`, `ai.random_move`, `combat.combat`,
  `movement.movement`, `fov.fov`, `player_input.player_input` and
  `end_turn.end_turn`. The drawing systems are in `dungeoncrawl.render`.
- `dungeoncrawl.schedule` puts the systems into schedules with
  `build_input_scheduler`, `build_player_scheduler` and
  `build_monster_scheduler`. These schedules run over a `Resources` object.

To drive the game yourself:

1. Create a `dungeoncrawl.game.State`. You can pass it a `random.Random`.
2. Call its `tick(terminal, key, mouse_pos)` method once per frame. `terminal`
   is a `dungeoncrawl.draw.Terminal` built with
   `dungeoncrawl.game.LAYER_SIZES`. `key` is a `dungeoncrawl.player_input.Key`,
   or `None` when no key was pressed. `mouse_pos` is a
   `dungeoncrawl.geometry.Point`.
3. Read the result back with `terminal.cell(layer, x, y)`.

## What it does not do

The game shows only characters in a text terminal. It has no graphical tile
window. It does not save games or keep scores. Closing the game ends the
current run.

## Running the tests

```
pip install ".[test]"
pytest
```