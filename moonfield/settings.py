"""User settings stored as a JSON document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

SETTINGS_FILE = Path("assets/config/settings.json")


def _default_key_bindings() -> dict[str, str]:
    return {
        "inventory": "I",
        "moveDown": "S",
        "moveLeft": "A",
        "moveRight": "D",
        "moveUp": "W",
    }


def _value(section: dict[str, Any], key: str, default: Any) -> Any:
    """Read `key` from `section`, converting to the type of `default`."""
    raw = section.get(key, default)
    if isinstance(default, bool):
        if not isinstance(raw, bool):
            raise TypeError(f"setting {key!r} must be a boolean, got {raw!r}")
        return raw
    if isinstance(default, (int, float)):
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise TypeError(f"setting {key!r} must be a number, got {raw!r}")
        return type(default)(raw)
    if not isinstance(raw, str):
        raise TypeError(f"setting {key!r} must be a string, got {raw!r}")
    return raw


def _section(raw: dict[str, Any], key: str) -> dict[str, Any] | None:
    if key not in raw:
        return None
    value = raw[key]
    if not isinstance(value, dict):
        raise TypeError(f"setting section {key!r} must be an object")
    return value


@dataclass
class AudioSettings:
    effects: int = 100
    master: int = 100
    music: int = 100
    mute: bool = False


@dataclass
class ControlsSettings:
    key_bindings: dict[str, str] = field(default_factory=_default_key_bindings)
    mouse_sensitivity: float = 1.0


@dataclass
class VideoSettings:
    display: int = 0
    width: int = 1280
    height: int = 720
    fps_limit: int = 144
    fps_unlimited: bool = False


@dataclass
class SettingsData:
    audio: AudioSettings = field(default_factory=AudioSettings)
    controls: ControlsSettings = field(default_factory=ControlsSettings)
    language: str = "en"
    video: VideoSettings = field(default_factory=VideoSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as the JSON document layout."""
        return {
            "audio": {
                "effects": self.audio.effects,
                "master": self.audio.master,
                "music": self.audio.music,
                "mute": self.audio.mute,
            },
            "controls": {
                "keyBindings": dict(self.controls.key_bindings),
                "mouseSensitivity": self.controls.mouse_sensitivity,
            },
            "language": self.language,
            "video": {
                "display": self.video.display,
                "fpsLimit": self.video.fps_limit,
                "width": self.video.width,
                "height": self.video.height,
            },
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> SettingsData:
        """Build settings from a JSON document; missing entries keep their defaults."""
        if not isinstance(raw, dict):
            raise TypeError("settings document must be an object")
        data = cls()

        audio = _section(raw, "audio")
        if audio is not None:
            data.audio = AudioSettings(
                effects=_value(audio, "effects", 100),
                master=_value(audio, "master", 100),
                music=_value(audio, "music", 100),
                mute=_value(audio, "mute", False),
            )

        controls = _section(raw, "controls")
        if controls is not None:
            data.controls.mouse_sensitivity = _value(controls, "mouseSensitivity", 1.0)
            bindings = _section(controls, "keyBindings")
            if bindings is not None:
                for action, key in bindings.items():
                    if not isinstance(key, str):
                        raise TypeError(f"key binding {action!r} must be a string")
                    data.controls.key_bindings[action] = key

        data.language = _value(raw, "language", "en")

        video = _section(raw, "video")
        if video is not None:
            data.video.display = _value(video, "display", 0)
            data.video.fps_limit = _value(video, "fpsLimit", 144)
            data.video.width = _value(video, "width", 1280)
            data.video.height = _value(video, "height", 720)

        return data


def load_settings(path: str | Path = SETTINGS_FILE) -> SettingsData:
    """Read settings from `path`; a missing file yields the defaults."""
    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
    except FileNotFoundError:
        return SettingsData()
    return SettingsData.from_dict(raw)


def save_settings(data: SettingsData, path: str | Path = SETTINGS_FILE) -> None:
    """Write settings to `path` as indented JSON with sorted keys."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data.to_dict(), fh, indent=4, sort_keys=True)