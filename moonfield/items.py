"""Items that the player can carry and use."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

_BORDER = (0, 0, 0)


@dataclass
class Item:
    """Something that can sit in an inventory slot."""

    stackable: bool = False
    item_id: int = 0
    name: str = ""
    frames_held: int = field(default=0, init=False, compare=False, repr=False)
    uses: int = field(default=0, init=False, compare=False, repr=False)

    @property
    def icon_color(self) -> tuple[int, int, int]:
        """A colour fixed by the item's id, used for its icon."""
        return (
            (self.item_id * 67) % 256,
            (self.item_id * 131) % 256,
            (self.item_id * 197) % 256,
        )

    def update(self) -> None:
        """Advance the item's own state by one frame."""
        self.frames_held += 1

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the item's icon across the whole of `surface`."""
        surface.fill(self.icon_color)
        pygame.draw.rect(surface, _BORDER, surface.get_rect(), 1)

    def interact(self) -> None:
        """Use the item once."""
        self.uses += 1


class Shovel(Item):
    """A digging tool: turns grass into path."""

    def __init__(self) -> None:
        super().__init__(stackable=False, item_id=1, name="Shovel")