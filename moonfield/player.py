"""The player character."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pygame

from moonfield.camera import Camera
from moonfield.controls import InputState
from moonfield.geometry import Vector2, any_collides, circle_rect_collide
from moonfield.structures import Structure
from moonfield.tiles import Tile

logger = logging.getLogger(__name__)

RADIUS = 16
MOVE_SPEED = 170.0
SPRINT_FACTOR = 2.0

_GREEN = (0, 228, 48)


class Player:
    """A round body that walks around and is stopped by solid things."""

    def __init__(self, position: Vector2 = Vector2()) -> None:
        self.position = position
        self.move_speed = MOVE_SPEED

    def __repr__(self) -> str:
        return f"Player(position={self.position!r})"

    def update(
        self,
        controls: InputState,
        dt: float,
        structures: Iterable[Structure],
        tiles: Iterable[Tile],
    ) -> bool:
        """Move according to `controls` over `dt` seconds; return False if blocked."""
        step = self.move_speed * dt * (SPRINT_FACTOR if controls.run else 1.0)
        x, y = self.position
        if controls.move_up:
            y -= step
        if controls.move_left:
            x -= step
        if controls.move_down:
            y += step
        if controls.move_right:
            x += step
        target = Vector2(x, y)

        blocked = any_collides(
            structures,
            lambda s: not s.walkable and circle_rect_collide(target, RADIUS, s.hitbox_rect),
        ) or any_collides(
            tiles,
            lambda t: not t.walkable and circle_rect_collide(target, RADIUS, t.bounds),
        )

        if blocked:
            logger.debug("Player blocked at %s", target)
            return False
        self.position = target
        return True

    def draw(self, surface: pygame.Surface, camera: Camera) -> None:
        """Draw the player as a filled circle."""
        center = camera.world_to_screen(self.position)
        pygame.draw.circle(surface, _GREEN, (center.x, center.y), RADIUS * camera.zoom)