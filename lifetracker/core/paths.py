"""Where LifeTracker keeps its per-user files (currently only logs)."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_DIR_NAME = "lifetracker"
STATE_DIR_ENV = "LT_STATE_DIR"


def _platform_data_dir() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming")
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


def get_app_state_dir() -> Path:
    """Per-user state directory; ``LT_STATE_DIR`` overrides the platform default.

    The directory is not created here.
    """
    override = os.environ.get(STATE_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_platform_data_dir() / APP_DIR_NAME).resolve()


def get_logs_dir(state_dir: Path | None = None) -> Path:
    return (state_dir or get_app_state_dir()) / "logs"
