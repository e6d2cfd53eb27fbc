"""Objects placed in the world on top of tiles: rocks, trees, grass."""

from __future__ import annotations

import logging

import pygame

from moonfield.camera import Camera
from moonfield.geometry import Rect, Vector2

logger = logging.getLogger(__name__)

BEHIND_ALPHA = 100

_RED = (230, 41, 55)
_ORANGE = (255, 161, 0)
_YELLOW = (253, 249, 0)
_GREEN = (0, 228, 48)


def _scaled(texture: pygame.Surface, zoom: float) -> pygame.Surface:
    if zoom == 1:
        return texture
    width, height = texture.get_size()
    return pygame.transform.scale(texture, (round(width * zoom), round(height * zoom)))


def _screen_rect(rect: Rect, camera: Camera) -> pygame.Rect:
    corner = camera.world_to_screen(Vector2(rect.x, rect.y))
    return pygame.Rect(
        round(corner.x),
        round(corner.y),
        round(rect.width * camera.zoom),
        round(rect.height * camera.zoom),
    )


class Structure:
    """A textured object whose picture rises `base_offset` pixels above its footprint."""

    base_offset = 32

    def __init__(
        self,
        position: Vector2 = Vector2(),
        texture: pygame.Surface | None = None,
        hitbox: Rect = Rect(),
        walkable: bool = True,
    ) -> None:
        self.position = position
        self.texture = texture
        self.hitbox = hitbox
        self.walkable = walkable
        self.age = 0
        self.interactions = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position!r}, "
            f"walkable={self.walkable!r})"
        )

    def _texture_size(self) -> tuple[int, int]:
        return self.texture.get_size() if self.texture is not None else (0, 0)

    def update(self) -> None:
        """Advance per-frame state: count the frames the structure has existed."""
        self.age += 1

    def interact(self) -> None:
        """React to the player: count the interaction."""
        self.interactions += 1

    @property
    def bounds(self) -> Rect:
        """World rectangle covered by the texture."""
        width, height = self._texture_size()
        return Rect(
            self.position.x,
            self.position.y - height + self.base_offset,
            width,
            height,
        )

    @property
    def hitbox_rect(self) -> Rect:
        """The hitbox moved to the structure's world position."""
        return Rect(
            self.position.x + self.hitbox.x,
            self.position.y + self.hitbox.y,
            self.hitbox.width,
            self.hitbox.height,
        )

    def is_player_behind(self, player_position: Vector2) -> bool:
        """True when the player stands where the texture hides them."""
        return (
            self.bounds.y < player_position.y < self.position.y + self.base_offset
            and self.position.x < player_position.x < self.position.x + self.base_offset
        )

    def draw(
        self, surface: pygame.Surface, camera: Camera, player_position: Vector2
    ) -> None:
        """Blit the texture, faded when the player is behind it, plus debug outlines."""
        if self.texture is not None:
            image = _scaled(self.texture, camera.zoom)
            if self.is_player_behind(player_position):
                image = image.copy()
                image.set_alpha(BEHIND_ALPHA)
            bounds = self.bounds
            corner = camera.world_to_screen(Vector2(bounds.x, bounds.y))
            surface.blit(image, (round(corner.x), round(corner.y)))
        self._draw_debug(surface, camera)

    def _draw_debug(self, surface: pygame.Surface, camera: Camera) -> None:
        line = max(1, round(camera.zoom))
        bounds = self.bounds
        pygame.draw.rect(surface, _RED, _screen_rect(self.hitbox_rect, camera), line)
        pygame.draw.rect(surface, _ORANGE, _screen_rect(bounds, camera), line)
        corner = camera.world_to_screen(Vector2(bounds.x, bounds.y))
        pygame.draw.circle(surface, _YELLOW, (corner.x, corner.y), 8 * camera.zoom)
        anchor = camera.world_to_screen(
            Vector2(self.position.x + self.base_offset, self.position.y)
        )
        pygame.draw.circle(surface, _GREEN, (anchor.x, anchor.y), 8 * camera.zoom)


class Grass(Structure):
    """Tall grass the player walks through."""

    def __init__(self, position: Vector2, texture: pygame.Surface | None) -> None:
        super().__init__(position, texture, Rect(), True)
        self.durability = 0

    def interact(self) -> None:
        super().interact()
        logger.debug("Interacted with grass at %s", self.position)


class Rock(Structure):
    """A solid rock that blocks movement."""

    def __init__(self, position: Vector2, texture: pygame.Surface | None) -> None:
        super().__init__(position, texture, Rect(), False)
        self.durability = 100

    def interact(self) -> None:
        super().interact()
        logger.info("Interacted with rock at %s", self.position)


class StructureManager:
    """Holds the world's structures in insertion order."""

    def __init__(self) -> None:
        self._structures: list[Structure] = []

    def __len__(self) -> int:
        return len(self._structures)

    def add(self, structure: Structure) -> None:
        """Place a structure in the world."""
        self._structures.append(structure)

    def update(self) -> None:
        """Update every structure."""
        for structure in self._structures:
            structure.update()

    def draw(
        self, surface: pygame.Surface, camera: Camera, player_position: Vector2
    ) -> None:
        """Draw every structure in insertion order."""
        for structure in self._structures:
            structure.draw(surface, camera, player_position)

    @property
    def structures(self) -> tuple[Structure, ...]:
        return tuple(self._structures)