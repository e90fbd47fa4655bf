from __future__ import annotations

from pathlib import Path

SETTINGS_DIR_NAME = "Settings"
PLUGINS_DIR_NAME = "Plugins"


def settings_dir(data_dir: Path) -> Path:
    return data_dir / SETTINGS_DIR_NAME


def plugins_dir(data_dir: Path) -> Path:
    return settings_dir(data_dir) / PLUGINS_DIR_NAME


def plugin_dir(data_dir: Path, plugin_name: str) -> Path:
    name = plugin_name.strip().replace("/", "_").replace("\\", "_")
    if not name:
        raise ValueError("plugin_name must not be empty")
    return plugins_dir(data_dir) / name
