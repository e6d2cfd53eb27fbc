"""The playable world screen and the program entry point."""

from __future__ import annotations

import argparse
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import pygame

from moonfield.assets import AssetManager
from moonfield.camera import Camera
from moonfield.controls import InputState, poll_input
from moonfield.daylight import DayNightCycle
from moonfield.enums import Season
from moonfield.gametime import GameTime
from moonfield.geometry import Vector2, point_in_rect
from moonfield.items import Shovel
from moonfield.player import Player
from moonfield.savegame import SAVE_PATH, load_world, save_world
from moonfield.settings import SETTINGS_FILE, load_settings, save_settings
from moonfield.structures import Structure, StructureManager
from moonfield.tiles import GrassTile, Tile, TileManager, WallTile
from moonfield.geometry import Rect
from moonfield.ui import HUD, Hotbar, Inventory
from moonfield.window import Window

logger = logging.getLogger(__name__)

TITLE = "Unnamed Game"
GRID_EXTENT = 1024

BACKGROUND = (245, 245, 245)
_BLACK = (0, 0, 0)
_LIGHTGRAY = (200, 200, 200)
_FPS_COLOR = (0, 158, 47)

SEASON_COLORS = {
    Season.SPRING: (255, 109, 194),
    Season.SUMMER: (0, 228, 48),
    Season.AUTUMN: (255, 161, 0),
    Season.WINTER: (200, 200, 200),
}

_TEXTURES = {
    "grassTile": "images/tiles/GrassTile.png",
    "wallTile": "images/tiles/WallTile.png",
    "pathTile": "images/tiles/PathTile.png",
    "stone": "images/structures/Stone.png",
    "grass": "images/structures/Grass.png",
    "smallTree": "images/structures/SmallTree.png",
    "bigTree": "images/structures/BigTree.png",
}


def _load_texture(path: str) -> Any:
    """Load an image, or return None (with a warning) when it cannot be read."""
    try:
        return pygame.image.load(path)
    except (FileNotFoundError, pygame.error) as exc:
        logger.warning("Could not load texture %s: %s", path, exc)
        return None


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    surface.blit(_font(size).render(text, True, color), (int(x), int(y)))


class Game:
    """The world: ground, structures, the player, the clock and the HUD."""

    def __init__(
        self,
        width: int,
        height: int,
        assets_root: str | Path = "assets",
        save_path: str | Path = SAVE_PATH,
    ) -> None:
        center = Vector2(width / 2, height / 2)
        self.width = width
        self.height = height
        self.assets_root = Path(assets_root)
        self.save_path = Path(save_path)
        self.camera = Camera(center, center)
        self.player: Player | None = None
        self.hud = HUD()
        self.hotbar = Hotbar()
        self.inventory = Inventory()
        self.time = GameTime()
        self.day_night = DayNightCycle(self.time)
        self.tile_manager = TileManager()
        self.structure_manager = StructureManager()
        self.assets = AssetManager(texture_loader=_load_texture)
        self.mouse_position = Vector2()
        self._shovel = Shovel()
        self._frame_rate = 0.0
        logger.info("Game created")

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def init(self) -> None:
        """Create the player, restore the save and lay out the world."""
        logger.info("Starting game")
        self.player = Player()
        load_world(self.player, self.time, self.save_path)

        for asset_id, relative in _TEXTURES.items():
            self.assets.load_texture(asset_id, str(self.assets_root / relative))

        grass_texture = self.assets.texture("grassTile")
        path_texture = self.assets.texture("pathTile")
        for y in range(-GRID_EXTENT, GRID_EXTENT, Tile.SIZE):
            for x in range(-GRID_EXTENT, GRID_EXTENT, Tile.SIZE):
                self.tile_manager.add(
                    GrassTile(Vector2(float(x), float(y)), grass_texture, path_texture)
                )

        self.tile_manager.add(WallTile(Vector2(1200.0, 0.0), self.assets.texture("wallTile")))

        footprint = Rect(0, 0, 32, 32)
        for position, texture_id, walkable in (
            (Vector2(256.0, 256.0), "stone", False),
            (Vector2(256.0, 128.0), "grass", True),
            (Vector2(-256.0, -256.0), "smallTree", False),
            (Vector2(-512.0, -256.0), "bigTree", False),
        ):
            self.structure_manager.add(
                Structure(position, self.assets.texture(texture_id), footprint, walkable)
            )
        self.day_night.update()
        logger.info("Game started")

    def update(self, controls: InputState, dt: float) -> None:
        """Advance the world by one frame of `dt` real seconds."""
        self._frame_rate = 1.0 / dt if dt > 0 else 0.0
        self.structure_manager.update()
        self.day_night.update()

        if self.player is not None:
            self.player.update(
                controls, dt, self.structure_manager.structures, self.tile_manager.tiles
            )
            self.camera.update(self.player.position)
            self.hud.update(controls)
            self.hotbar.update(controls)
            self.inventory.update(controls)

            if controls.use_left_hand:
                world_mouse = self.camera.screen_to_world(self.mouse_position)
                target = next(
                    (t for t in self.tile_manager.tiles if point_in_rect(world_mouse, t.bounds)),
                    None,
                )
                if target is not None:
                    target.interact(self._shovel)

        self.time.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the world and the overlays onto `surface`."""
        surface.fill(BACKGROUND)

        if self.player is not None:
            self.tile_manager.draw(surface, self.camera)
            self.player.draw(surface, self.camera)
            self.structure_manager.draw(surface, self.camera, self.player.position)
            hint = self.camera.world_to_screen(Vector2(50, 50))
            _text(
                surface,
                "Press W A S D to move",
                hint.x,
                hint.y,
                round(16 * self.camera.zoom),
                _BLACK,
            )
            x, y = self.player.position
            _text(surface, f"Coords: x{int(x)}, y{int(y)}", 10, 30, 20, _LIGHTGRAY)

        self.day_night.draw_overlay(surface)
        _text(surface, f"{round(self._frame_rate)} FPS", 10, 10, 20, _FPS_COLOR)
        _text(surface, f"RealTime: {self.time.game_time}", 10, 100, 20, _LIGHTGRAY)
        _text(surface, self.time.format_date(), 10, 130, 20, _LIGHTGRAY)

        season = self.time.calendar().environment.season
        _text(
            surface,
            self.time.format_season(),
            10,
            160,
            20,
            SEASON_COLORS.get(season, _LIGHTGRAY),
        )

        self.hud.draw(surface)
        self.hotbar.draw(surface)
        self.inventory.draw(surface)

    def close(self) -> None:
        """Save the world if a player exists."""
        if self.player is not None:
            save_world(self.player, self.time, self.save_path)


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed or the exit key is pressed."""
    parser = argparse.ArgumentParser(description="Explore the world through the seasons.")
    parser.add_argument("--settings", default=str(SETTINGS_FILE), help="settings JSON file")
    parser.add_argument("--assets", default="assets", help="assets directory")
    parser.add_argument("--save", default=str(SAVE_PATH), help="world save file")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG)

    config = load_settings(args.settings)
    video = config.video
    pygame.font.init()
    window = Window(video.width, video.height, video.fps_limit, TITLE)
    game = Game(video.width, video.height, args.assets, args.save)
    try:
        game.init()
        while True:
            controls = poll_input(pygame.event.get())
            if controls.quit_requested:
                break
            game.mouse_position = Vector2(*map(float, pygame.mouse.get_pos()))
            dt = window.tick()
            game.update(controls, dt)
            game.draw(window.surface)
            pygame.display.flip()
    finally:
        game.close()
        settings_path = Path(args.settings)
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        save_settings(config, settings_path)
        logger.info("Exiting")
        window.close()
    return 0