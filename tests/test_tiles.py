import pygame
import pytest

from moonfield.camera import Camera
from moonfield.geometry import Rect, Vector2
from moonfield.items import Shovel
from moonfield.structures import Grass, Rock
from moonfield.tiles import GrassTile, Tile, TileManager, WallTile


def _texture(color):
    surface = pygame.Surface((Tile.SIZE, Tile.SIZE))
    surface.fill(color)
    return surface


def test_tile_bounds_are_32_square():
    tile = GrassTile(Vector2(0, 0), None)
    assert tile.bounds == Rect(0, 0, 32, 32)


def test_tile_is_abstract():
    with pytest.raises(TypeError):
        Tile(Vector2(0, 0), None)


def test_bounds_match_position_and_size():
    tile = WallTile(Vector2(64, -32), None)
    assert tile.bounds == Rect(64, -32, Tile.SIZE, Tile.SIZE)


def test_bare_grass_is_walkable():
    assert GrassTile(Vector2(0, 0), None).walkable is True


def test_grass_with_rock_blocks():
    tile = GrassTile(Vector2(0, 0), None)
    tile.structure = Rock(Vector2(0, 0), None)
    assert tile.walkable is False


def test_grass_with_grass_structure_walkable():
    tile = GrassTile(Vector2(0, 0), None)
    tile.structure = Grass(Vector2(0, 0), None)
    assert tile.walkable is True


def test_wall_never_walkable():
    assert WallTile(Vector2(0, 0), None).walkable is False


def test_new_tile_has_no_structure():
    assert GrassTile(Vector2(0, 0), None).structure is None


def test_shovel_turns_grass_into_path():
    grass = _texture((0, 255, 0))
    path = _texture((120, 80, 40))
    tile = GrassTile(Vector2(0, 0), grass, path)
    tile.interact(Shovel())
    assert tile.texture is path


def test_wall_ignores_tools():
    wall = _texture((90, 90, 90))
    tile = WallTile(Vector2(0, 0), wall)
    tile.interact(Shovel())
    assert tile.texture is wall


def test_draw_blits_texture():
    surface = pygame.Surface((100, 100))
    camera = Camera(Vector2(0, 0), Vector2(0, 0))
    tile = WallTile(Vector2(0, 0), _texture((0, 255, 0)))
    tile.draw(surface, camera)
    center = camera.world_to_screen(tile.bounds.center)
    assert surface.get_at((int(center.x), int(center.y)))[:3] == (0, 255, 0)


class _Recording(WallTile):
    def __init__(self, position, log):
        super().__init__(position, None)
        self.log = log

    def update(self):
        self.log.append(("update", self.position))

    def draw(self, surface, camera):
        self.log.append(("draw", self.position))


def test_manager_keeps_insertion_order():
    manager = TileManager()
    a = GrassTile(Vector2(0, 0), None)
    b = WallTile(Vector2(32, 0), None)
    manager.add(a)
    manager.add(b)
    assert manager.tiles == (a, b)
    assert len(manager) == 2


def test_manager_updates_all():
    log = []
    manager = TileManager()
    manager.add(_Recording(Vector2(0, 0), log))
    manager.add(_Recording(Vector2(5000, 5000), log))
    manager.update()
    assert log == [("update", Vector2(0, 0)), ("update", Vector2(5000, 5000))]


def test_manager_draws_only_visible_tiles():
    log = []
    manager = TileManager()
    manager.add(_Recording(Vector2(0, 0), log))
    manager.add(_Recording(Vector2(500, 500), log))
    manager.draw(pygame.Surface((100, 100)), Camera(Vector2(0, 0), Vector2(0, 0)))
    assert log == [("draw", Vector2(0, 0))]


def test_manager_draw_follows_camera():
    log = []
    manager = TileManager()
    manager.add(_Recording(Vector2(0, 0), log))
    manager.add(_Recording(Vector2(500, 500), log))
    manager.draw(pygame.Surface((100, 100)), Camera(Vector2(500, 500), Vector2(0, 0)))
    assert log == [("draw", Vector2(500, 500))]