"""User configuration helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from block_model import DEFAULT_IMAGE_URL


DEFAULT_LOG_LEVEL = "INFO"


def get_config_dir() -> Path:
    root = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return root / "blockpad"


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_config() -> dict:
    path = get_config_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def save_config(config: dict) -> None:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True), encoding="utf-8")


def get_log_level() -> str:
    config = load_config()
    value = config.get("log_level")
    if isinstance(value, str) and value.strip():
        level = value.strip().upper()
        if isinstance(logging.getLevelName(level), int):
            return level
    return DEFAULT_LOG_LEVEL


def set_log_level(level: str) -> None:
    config = load_config()
    config["log_level"] = level
    save_config(config)


def get_placeholder_image_url() -> str:
    config = load_config()
    value = config.get("placeholder_image_url")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_IMAGE_URL


def get_keymap_overrides() -> dict[str, str]:
    config = load_config()
    value = config.get("keymap")
    if not isinstance(value, dict):
        return {}
    block_mode = value.get("block")
    if not isinstance(block_mode, dict):
        return {}
    overrides: dict[str, str] = {}
    for action, sequence in block_mode.items():
        if isinstance(action, str) and isinstance(sequence, str):
            overrides[action] = sequence
    return overrides
