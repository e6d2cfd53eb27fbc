"""Heads-up display: health bar, hotbar and inventory panel."""

from __future__ import annotations

import logging
from functools import lru_cache

import pygame

from moonfield.controls import InputState
from moonfield.geometry import Rect
from moonfield.items import Item

logger = logging.getLogger(__name__)

_RED = (230, 41, 55)
_GREEN = (0, 228, 48)
_DARKGRAY = (80, 80, 80)
_LIGHTGRAY = (200, 200, 200)
_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)

HEALTH_STEP = 10.0
HOTBAR_SLOTS = 8
HAND_SLOTS = 4
SLOT_SIZE = 64
SLOT_PITCH = 72


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _text(surface: pygame.Surface, text: str, x: float, y: float, size: int, color) -> None:
    surface.blit(_font(size).render(text, True, color), (int(x), int(y)))


def _pg_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))


class HUD:
    """Health bar, adjustable with the damage and heal keys."""

    def __init__(self) -> None:
        self.health = 100.0
        self.max_health = 200.0

    def update(self, controls: InputState) -> None:
        if controls.damage:
            self.health -= HEALTH_STEP
            logger.debug("Took damage, health now %s", self.health)
        self.health = max(self.health, 0.0)
        if controls.heal:
            self.health += HEALTH_STEP
            logger.debug("Healed, health now %s", self.health)
        self.health = min(self.health, self.max_health)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, _RED, pygame.Rect(50, 50, 200, 30))
        filled = int(200 * (self.health / self.max_health))
        if filled > 0:
            pygame.draw.rect(surface, _GREEN, pygame.Rect(50, 50, filled, 30))


class Hotbar:
    """Eight slots: four for the left hand, four for the right."""

    def __init__(self) -> None:
        self.slots: list[Item | None] = [None] * HOTBAR_SLOTS
        self.selected_slot = 0

    def update(self, controls: InputState) -> None:
        if controls.hotbar_slot is not None:
            self.selected_slot = controls.hotbar_slot

    def slot_rects(self, width: float, height: float) -> list[Rect]:
        """Screen rectangles of the slots, left to right."""
        return [
            Rect((width - 924) + index * SLOT_PITCH, height - 80, SLOT_SIZE, SLOT_SIZE)
            for index in range(HOTBAR_SLOTS)
        ]

    def draw(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        highlighted = {self.selected_slot, self.selected_slot + HAND_SLOTS}
        for index, rect in enumerate(self.slot_rects(width, height)):
            area = _pg_rect(rect)
            pygame.draw.rect(surface, _DARKGRAY, area)
            if index in highlighted:
                pygame.draw.rect(surface, _LIGHTGRAY, area)
                if index < HAND_SLOTS:
                    label = f"L{index + 1}"
                else:
                    label = f"R{index - HAND_SLOTS + 1}"
                _text(surface, label, rect.x + 10, rect.y + 10, 14, _BLACK)
            pygame.draw.rect(surface, _BLACK, area, 2)


class Inventory:
    """A toggleable panel with an 8 by 4 grid of slots."""

    def __init__(self) -> None:
        self.is_open = False

    def update(self, controls: InputState) -> None:
        if controls.inventory_toggle:
            self.is_open = not self.is_open

    def draw(self, surface: pygame.Surface) -> None:
        if not self.is_open:
            return
        width, height = surface.get_size()
        pygame.draw.rect(
            surface, _DARKGRAY, pygame.Rect(int(width - 932), int(height - 600), 584, 400)
        )
        _text(surface, "Inventory", width - 922, height - 590, 20, _WHITE)
        for column in range(8):
            for row in range(4):
                cell = Rect(
                    (width - 924) + column * SLOT_PITCH,
                    (height - 550) + row * SLOT_PITCH,
                    SLOT_SIZE,
                    SLOT_SIZE,
                )
                pygame.draw.rect(surface, _BLACK, _pg_rect(cell), 2)