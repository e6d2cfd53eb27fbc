"""Keyboard and mouse bindings, read once per frame into an immutable snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

import pygame

MOVE_UP_KEY = pygame.K_w
MOVE_LEFT_KEY = pygame.K_a
MOVE_DOWN_KEY = pygame.K_s
MOVE_RIGHT_KEY = pygame.K_d
RUN_KEY = pygame.K_LSHIFT
HOTBAR_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4)
INTERACT_KEY = pygame.K_e
INVENTORY_KEY = pygame.K_i
PAUSE_KEY = pygame.K_ESCAPE
MAP_KEY = pygame.K_m
DAMAGE_KEY = pygame.K_j
HEAL_KEY = pygame.K_k
EXIT_KEY = pygame.K_q

LEFT_MOUSE_BUTTON = 1
RIGHT_MOUSE_BUTTON = 3

_HELD_KEYS = (
    MOVE_UP_KEY,
    MOVE_LEFT_KEY,
    MOVE_DOWN_KEY,
    MOVE_RIGHT_KEY,
    RUN_KEY,
    *HOTBAR_KEYS,
)


@dataclass(frozen=True)
class InputState:
    """What the player is doing this frame.

    Movement, running and the hotbar keys react while held; everything else
    reacts only on the frame the key or button went down.
    """

    move_up: bool = False
    move_left: bool = False
    move_down: bool = False
    move_right: bool = False
    run: bool = False
    hotbar_slot: int | None = None
    interact: bool = False
    use_left_hand: bool = False
    use_right_hand: bool = False
    inventory_toggle: bool = False
    pause_menu: bool = False
    map_toggle: bool = False
    damage: bool = False
    heal: bool = False
    quit_requested: bool = False

    @classmethod
    def from_keys(
        cls,
        held: Iterable[int],
        pressed: Iterable[int],
        mouse_pressed: Iterable[int],
    ) -> InputState:
        """Build a snapshot from held keys, keys pressed this frame and mouse buttons pressed."""
        held = frozenset(held)
        pressed = frozenset(pressed)
        mouse_pressed = frozenset(mouse_pressed)
        hotbar_slot = next(
            (index for index, key in enumerate(HOTBAR_KEYS) if key in held), None
        )
        return cls(
            move_up=MOVE_UP_KEY in held,
            move_left=MOVE_LEFT_KEY in held,
            move_down=MOVE_DOWN_KEY in held,
            move_right=MOVE_RIGHT_KEY in held,
            run=RUN_KEY in held,
            hotbar_slot=hotbar_slot,
            interact=INTERACT_KEY in pressed,
            use_left_hand=LEFT_MOUSE_BUTTON in mouse_pressed,
            use_right_hand=RIGHT_MOUSE_BUTTON in mouse_pressed,
            inventory_toggle=INVENTORY_KEY in pressed,
            pause_menu=PAUSE_KEY in pressed,
            map_toggle=MAP_KEY in pressed,
            damage=DAMAGE_KEY in pressed,
            heal=HEAL_KEY in pressed,
            quit_requested=EXIT_KEY in pressed,
        )


def poll_input(events: Iterable[pygame.event.Event]) -> InputState:
    """Read this frame's events plus the current keyboard state."""
    pressed: set[int] = set()
    mouse_pressed: set[int] = set()
    window_closed = False
    for event in events:
        if event.type == pygame.KEYDOWN:
            pressed.add(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            mouse_pressed.add(event.button)
        elif event.type == pygame.QUIT:
            window_closed = True

    keys = pygame.key.get_pressed()
    held = {key for key in _HELD_KEYS if keys[key]}
    state = InputState.from_keys(held, pressed, mouse_pressed)
    return replace(state, quit_requested=True) if window_closed else state