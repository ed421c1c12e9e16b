# bowguy

*The Tale of Bow Guy* is a top-down arcade shooter. You walk through a chain of
rooms and shoot arrows at plants, rock crabs and bouncing spikes. You pick up
coins and hearts along the way and buy better arrows from the shopkeeper. The
last room holds a boss.

## Installation

```
pip install .
```

This installs the only runtime dependency, pygame. To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
bowguy
```

Options:

- `--resources DIR`: directory with the images and sounds (default `resources`).
- `--maps DIR`: directory with the map files (default `maps`).
- `--seed N`: seed for the random number generator.
- `--frames N`: stop after this many frames.

The rooms are read from `<maps>/map<N>.txt`. If room 0 cannot be read or
parsed, the command prints an error and exits with status 1. A missing or
unreadable image is drawn as a transparent tile. Missing sounds and music are
skipped without an error.

Controls:

- **T** on the title screen starts the game.
- **W A S D** move Bow Guy. Walls block movement.
- **Left mouse button** shoots an arrow towards the crosshair. The crosshair
  turns red while you reload.
- **Esc** or closing the window quits.

How play works:

- Touching an exit tile loads the room it leads to and puts Bow Guy at the
  position that tile names.
- A defeated enemy may drop a coin, which is worth 2 to 5 coins, or a heart,
  which restores 2 health up to the maximum of 6.
- Rooms 5 and 10 have a shopkeeper. Room 5 sells the silver arrow for 50 coins
  while you still use the basic arrow. Room 10 has a cobalt arrow for 110
  coins; it is only on display while your arrow type is already 2 or higher.
  To buy an item, walk over it when you have enough coins.
- Room 16 is the boss fight. After a short intro the boss's health bar fills
  and the boss starts to wander and fire volleys. Once you win, press **R** to
  return to room 0 with your upgrades.
- When your health runs out you go back to room 0 at the start position with
  full health, and you lose 10 coins (never going below zero).

## Map files

A map file holds whitespace-separated integers, in this order:

1. the floor layer, 22 × 14 tile ids;
2. the wall layer, 22 × 14 tile ids;
3. the enemy layer, 22 × 14 ids (0 is empty, 1 a plant, 2 a crab, 3 a spike);
4. the number of transition tiles, and then for each one: tile id, x, y,
   destination map, player x and player y on arrival.

`bowguy.mapfile` reads and writes this format with `parse_map`, `format_map`,
`load_map` and `save_map`, which work on `MapData` objects. Malformed data
raises `ValueError`. `map_path` builds the conventional file name from a map
number, and `tile_position` gives the screen position of a map cell.

```python
from bowguy.mapfile import MapData, load_map, map_path, save_map

data = MapData.blank()
save_map(data, map_path("maps", 20))
assert load_map(map_path("maps", 20)) == data
```

## Using the game logic

All game state lives in `bowguy.world.World`, which has no window or drawing of
its own. Call `World.load_map` first. After that, each call to
`World.update(Controls(...))` advances the game by one frame and returns the
`SoundEvent`s that the frame produced. `World.heart_states` describes the
health display. `World.editor_place` writes a tile or enemy into a layer of the
loaded map and rebuilds that layer.

## What it does not do

The game window has no level editor and no debug overlay. Maps are edited only
through `World.editor_place` and the `bowguy.mapfile` functions, and the game
never writes map files itself. No maps, images or sounds ship with the package;
you must provide them.

## RoboGuy

The package also ships a small toy:

```
roboguy
```

It opens a window with a robot face. Hold **P** to play with RoboGuy. If you
leave him alone for ten seconds, he becomes unhappy. `--frames N` stops the
toy after N frames.