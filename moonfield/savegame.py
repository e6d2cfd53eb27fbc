"""Saving and restoring the world state as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from moonfield.gametime import GameTime
from moonfield.geometry import Vector2
from moonfield.player import Player

SAVE_PATH = Path("save/world.json")


def save_world(player: Player, time: GameTime, path: str | Path = SAVE_PATH) -> None:
    """Write the player's position and the game clock to `path`."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "player": {"position": {"x": player.position.x, "y": player.position.y}},
        "time": {"gameTime": time.game_time},
    }
    path.write_text(json.dumps(data, indent=4, sort_keys=True), encoding="utf-8")


def _number(section: dict[str, Any], key: str, default: float) -> float:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"save entry {key!r} must be a number, got {value!r}")
    return value


def load_world(player: Player, time: GameTime, path: str | Path = SAVE_PATH) -> bool:
    """Restore state from `path`.

    Returns False, leaving everything untouched, when the file is missing,
    empty or not valid JSON.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return False
    if not text:
        return False
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return False
    if not isinstance(data, dict):
        return True

    player_data = data.get("player")
    if isinstance(player_data, dict) and isinstance(player_data.get("position"), dict):
        position = player_data["position"]
        player.position = Vector2(
            float(_number(position, "x", 0.0)), float(_number(position, "y", 0.0))
        )

    time_data = data.get("time")
    if isinstance(time_data, dict):
        time.game_time = int(_number(time_data, "gameTime", 0))

    return True