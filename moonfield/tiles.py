"""Ground tiles laid out on a fixed grid."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from moonfield.camera import Camera
from moonfield.geometry import Rect, Vector2, rects_overlap
from moonfield.items import Item
from moonfield.structures import Structure


def _scaled(texture: pygame.Surface, zoom: float) -> pygame.Surface:
    if zoom == 1:
        return texture
    width, height = texture.get_size()
    return pygame.transform.scale(texture, (round(width * zoom), round(height * zoom)))


class Tile(ABC):
    """A square of ground that may carry a structure."""

    SIZE = 32

    def __init__(self, position: Vector2, texture: pygame.Surface | None) -> None:
        self.position = position
        self.texture = texture
        self.structure: Structure | None = None
        self.age = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"

    def update(self) -> None:
        """Advance per-frame state: count the frames the tile has existed."""
        self.age += 1

    def draw(self, surface: pygame.Surface, camera: Camera) -> None:
        """Blit the tile's texture at its screen position."""
        if self.texture is None:
            return
        corner = camera.world_to_screen(self.position)
        surface.blit(_scaled(self.texture, camera.zoom), (round(corner.x), round(corner.y)))

    @property
    @abstractmethod
    def walkable(self) -> bool:
        """Whether the player may step on this tile."""

    @abstractmethod
    def interact(self, tool: Item) -> None:
        """Apply a tool to this tile."""

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.SIZE, self.SIZE)


class GrassTile(Tile):
    """Grass ground; digging it turns it into a path."""

    def __init__(
        self,
        position: Vector2,
        texture: pygame.Surface | None,
        path_texture: pygame.Surface | None = None,
    ) -> None:
        super().__init__(position, texture)
        self.path_texture = path_texture

    @property
    def walkable(self) -> bool:
        return self.structure is None or self.structure.walkable

    def interact(self, tool: Item) -> None:
        self.texture = self.path_texture


class WallTile(Tile):
    """A wall that can never be walked on."""

    @property
    def walkable(self) -> bool:
        return False

    def interact(self, tool: Item) -> None:
        """Walls ignore tools."""


class TileManager:
    """Holds the world's tiles in insertion order."""

    def __init__(self) -> None:
        self._tiles: list[Tile] = []

    def __len__(self) -> int:
        return len(self._tiles)

    def add(self, tile: Tile) -> None:
        """Lay a tile in the world."""
        self._tiles.append(tile)

    def update(self) -> None:
        """Update every tile."""
        for tile in self._tiles:
            tile.update()

    def draw(self, surface: pygame.Surface, camera: Camera) -> None:
        """Draw the tiles that fall inside the camera's view."""
        view = camera.view_rect(surface.get_width(), surface.get_height())
        for tile in self._tiles:
            if rects_overlap(tile.bounds, view):
                tile.draw(surface, camera)

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)