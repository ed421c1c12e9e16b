"""Reading and writing map files: three tile layers plus transition tiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from .geometry import TILE_SIZE
from .tiles import TransitionTile

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 1000
MAP_WIDTH = 22
MAP_HEIGHT = 14
MAP_CELLS = MAP_WIDTH * MAP_HEIGHT
SCREEN_X_OFFSET = (SCREEN_WIDTH - MAP_WIDTH * TILE_SIZE) // 2
SCREEN_Y_OFFSET = SCREEN_HEIGHT - MAP_HEIGHT * TILE_SIZE
TRANSITION_FIELDS = 6


@dataclass
class MapData:
    """The contents of one map: floor, wall and enemy layers and exits."""

    floor: list[int] = field(default_factory=lambda: [0] * MAP_CELLS)
    walls: list[int] = field(default_factory=lambda: [0] * MAP_CELLS)
    enemies: list[int] = field(default_factory=lambda: [0] * MAP_CELLS)
    transitions: list[TransitionTile] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("floor", "walls", "enemies"):
            layer = getattr(self, name)
            if len(layer) != MAP_CELLS:
                raise ValueError(f"{name} layer has {len(layer)} cells, expected {MAP_CELLS}")

    @classmethod
    def blank(cls) -> MapData:
        """An empty map with no tiles, enemies or exits."""
        return cls()


def map_path(directory: str | Path, map_id: int) -> Path:
    """Path of the file holding map ``map_id`` inside ``directory``."""
    return Path(directory) / f"map{map_id}.txt"


def tile_position(index: int) -> tuple[int, int]:
    """Screen position of the top-left corner of map cell ``index``."""
    if not 0 <= index < MAP_CELLS:
        raise ValueError(f"cell index {index} outside the map")
    row, column = divmod(index, MAP_WIDTH)
    return TILE_SIZE * column + SCREEN_X_OFFSET, TILE_SIZE * row + SCREEN_Y_OFFSET


def _read_ints(tokens: Iterator[str], count: int, what: str) -> list[int]:
    values = []
    for _ in range(count):
        token = next(tokens, None)
        if token is None:
            raise ValueError(f"map data ends inside the {what}")
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"bad number {token!r} in the {what}") from None
    return values


def parse_map(text: str) -> MapData:
    """Parse the whitespace-separated text of a map file."""
    tokens = iter(text.split())
    floor = _read_ints(tokens, MAP_CELLS, "floor layer")
    walls = _read_ints(tokens, MAP_CELLS, "wall layer")
    enemies = _read_ints(tokens, MAP_CELLS, "enemy layer")
    (count,) = _read_ints(tokens, 1, "transition count")
    if count < 0:
        raise ValueError(f"negative transition count {count}")
    transitions = []
    for _ in range(count):
        tile_id, x, y, dest, dest_x, dest_y = _read_ints(tokens, TRANSITION_FIELDS, "transitions")
        transitions.append(
            TransitionTile(
                x=x,
                y=y,
                tile_id=tile_id,
                destination_id=dest,
                player_dest_x=dest_x,
                player_dest_y=dest_y,
            )
        )
    return MapData(floor, walls, enemies, transitions)


def _format_layer(layer: list[int]) -> str:
    rows = (layer[start:start + MAP_WIDTH] for start in range(0, MAP_CELLS, MAP_WIDTH))
    return "\n".join("".join(f"{value} " for value in row) for row in rows) + "\n\n"


def format_map(data: MapData) -> str:
    """Render map data in the map file layout."""
    parts = [_format_layer(data.floor), _format_layer(data.walls), _format_layer(data.enemies)]
    parts.append(f"{len(data.transitions)}\n")
    for tile in data.transitions:
        parts.append(
            f"{tile.tile_id} {tile.x} {tile.y} {tile.destination_id} "
            f"{tile.player_dest_x} {tile.player_dest_y}\n"
        )
    return "".join(parts)


def load_map(path: str | Path) -> MapData:
    """Read and parse a map file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))


def save_map(data: MapData, path: str | Path) -> None:
    """Write map data to a file."""
    Path(path).write_text(format_map(data), encoding="utf-8")