from bowguy.geometry import Rect
from bowguy.tiles import EditorTile, Tile, TransitionTile, WallTile


def test_tile_rect_is_one_tile_square():
    tile = Tile(100, 200)
    assert tile.rect == Rect(100, 200, 64, 64)


def test_tile_collides_with_overlapping_rect():
    tile = WallTile(0, 0)
    assert tile.collides(Rect(60, 60, 10, 10))
    assert not tile.collides(Rect(64, 0, 10, 10))


def test_transition_tile_defaults_and_fields():
    tile = TransitionTile(64, 128, tile_id=3, destination_id=7)
    assert tile.destination_id == 7
    assert tile.tile_id == 3
    assert (tile.player_dest_x, tile.player_dest_y) == (0, 0)
    assert tile.collides(Rect(70, 130, 48, 48))


def test_editor_tile_keeps_texture():
    marker = object()
    tile = EditorTile(20, 150, marker)
    assert tile.texture is marker
    assert tile.rect.contains_point(20, 150)
    assert not tile.rect.contains_point(84, 150)