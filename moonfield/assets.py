"""Cache of textures and sounds, loaded once per id."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame


def _load_image(path: str) -> pygame.Surface:
    return pygame.image.load(path)


def _load_sound(path: str) -> Any:
    return pygame.mixer.Sound(path)


class AssetManager:
    """Loads assets on first request and hands back the cached copy afterwards."""

    def __init__(
        self,
        texture_loader: Callable[[str], Any] = _load_image,
        sound_loader: Callable[[str], Any] = _load_sound,
    ) -> None:
        self._texture_loader = texture_loader
        self._sound_loader = sound_loader
        self._textures: dict[str, Any] = {}
        self._sounds: dict[str, Any] = {}

    def load_texture(self, asset_id: str, path: str) -> Any:
        """Load the texture at `path` under `asset_id` unless that id is already loaded."""
        if asset_id not in self._textures:
            self._textures[asset_id] = self._texture_loader(path)
        return self._textures[asset_id]

    def load_sound(self, asset_id: str, path: str) -> Any:
        """Load the sound at `path` under `asset_id` unless that id is already loaded."""
        if asset_id not in self._sounds:
            self._sounds[asset_id] = self._sound_loader(path)
        return self._sounds[asset_id]

    def texture(self, asset_id: str) -> Any | None:
        """Return the texture loaded under `asset_id`, or None."""
        return self._textures.get(asset_id)

    def sound(self, asset_id: str) -> Any | None:
        """Return the sound loaded under `asset_id`, or None."""
        return self._sounds.get(asset_id)

    def unload_textures(self) -> None:
        """Forget every loaded texture."""
        self._textures.clear()

    def unload_sounds(self) -> None:
        """Forget every loaded sound."""
        self._sounds.clear()

    def unload_all(self) -> None:
        """Forget every loaded asset."""
        self.unload_textures()
        self.unload_sounds()