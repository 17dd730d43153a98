from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "SaveScout"

GAME_DIR_NAME = "StardewValley"
SAVES_DIR_NAME = "Saves"


def get_app_data_dir() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base_dir = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    else:
        base_dir = Path.home() / ".config"

    app_data_dir = base_dir / APP_NAME
    app_data_dir.mkdir(parents=True, exist_ok=True)
    return app_data_dir.resolve()


def get_logs_dir() -> Path:
    logs_dir = get_app_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir.resolve()


def get_config_path() -> Path:
    return (get_app_data_dir() / "config.json").resolve()


def get_os_data_dir() -> Path | None:
    """Return the per-user data directory of the OS, or None if it cannot be determined."""
    try:
        home = Path.home()
    except (KeyError, RuntimeError):
        home = None

    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata)
        return None

    if sys.platform == "darwin":
        return home / "Library" / "Application Support" if home is not None else None

    xdg_data_home = os.getenv("XDG_DATA_HOME")
    if xdg_data_home and Path(xdg_data_home).is_absolute():
        return Path(xdg_data_home)
    return home / ".local" / "share" if home is not None else None


def get_default_saves_dir(data_dir: Path | None, fallback_dir: Path) -> Path:
    base_dir = data_dir if data_dir is not None else fallback_dir
    return base_dir / GAME_DIR_NAME / SAVES_DIR_NAME


def path_to_display(path: Path | str) -> str:
    # Undecodable bytes in the path are replaced instead of raising.
    raw = os.fsencode(path)
    return raw.decode("utf-8", errors="replace")


def ensure_runtime_directories() -> None:
    get_app_data_dir()
    get_logs_dir()
