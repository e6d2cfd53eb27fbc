"""The game window and its frame limiter."""

from __future__ import annotations

import logging

import pygame

from moonfield.geometry import Vector2

logger = logging.getLogger(__name__)

FPS_UNLIMITED = 0
_MAX_FPS = 2147483647


def effective_fps(fps_limit: int) -> int:
    """Frame rate to target: a limit of zero or less means as fast as possible."""
    return _MAX_FPS if fps_limit <= FPS_UNLIMITED else fps_limit


class Window:
    """Opens the display surface and paces frames."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        fps_limit: int = 60,
        title: str = "Unnamed Game",
    ) -> None:
        pygame.display.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._resolution = Vector2(float(width), float(height))
        self._fps = effective_fps(fps_limit)
        self._clock = pygame.time.Clock()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def resolution(self) -> Vector2:
        return self._resolution

    def set_resolution(self, width: int, height: int) -> None:
        """Resize the window."""
        self.surface = pygame.display.set_mode((width, height))
        self._resolution = Vector2(float(width), float(height))

    def set_fps_limit(self, fps_limit: int) -> None:
        """Change the frame-rate cap."""
        self._fps = fps_limit
        logger.info("FPS limit changed to %d", fps_limit)

    def tick(self) -> float:
        """Wait for the next frame and return the elapsed real time in seconds."""
        return self._clock.tick(self._fps) / 1000.0

    def close(self) -> None:
        pygame.display.quit()