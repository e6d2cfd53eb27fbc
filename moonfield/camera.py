"""2D camera that follows a target and maps between world and screen space."""

from __future__ import annotations

from moonfield.geometry import Rect, Vector2

DEFAULT_ZOOM = 2.0


class Camera:
    """A zooming camera: `target` in world space appears at `offset` on screen."""

    def __init__(self, target: Vector2, offset: Vector2) -> None:
        self.target = target
        self.offset = offset
        self.rotation = 0.0
        self.zoom = DEFAULT_ZOOM

    def __repr__(self) -> str:
        return (
            f"Camera(target={self.target!r}, offset={self.offset!r}, "
            f"zoom={self.zoom!r})"
        )

    def update(self, target: Vector2) -> None:
        """Point the camera at a new world position."""
        self.target = target

    def screen_to_world(self, point: Vector2) -> Vector2:
        """Convert a screen position to world coordinates."""
        return (point - self.offset) * (1.0 / self.zoom) + self.target

    def world_to_screen(self, point: Vector2) -> Vector2:
        """Convert a world position to screen coordinates."""
        return (point - self.target) * self.zoom + self.offset

    def view_rect(self, width: float, height: float) -> Rect:
        """World rectangle used to decide what is on screen."""
        return Rect(
            self.target.x - self.offset.x,
            self.target.y - self.offset.y,
            width,
            height,
        )