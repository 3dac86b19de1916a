# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "BudgetPlannerLite"
VENDOR_DIR = "BudgetPlanner"
DATA_DIR_ENV = "BP_DATA_DIR"


def _platform_base() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def user_data_dir() -> Path:
    """
    Per-user directory holding the budget database, logs and exports.

    ``BP_DATA_DIR`` wins when set; otherwise the platform location is used
    (``%APPDATA%``, ``~/Library/Application Support`` or ``$XDG_DATA_HOME``)
    under ``BudgetPlanner/BudgetPlannerLite``.
    """
    override = (os.getenv(DATA_DIR_ENV) or "").strip()
    path = Path(override) if override else _platform_base() / VENDOR_DIR / APP_NAME
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_db_path() -> Path:
    return user_data_dir() / "budgets.db"


def default_export_dir() -> Path:
    return user_data_dir() / "exports"


def default_log_dir() -> Path:
    return user_data_dir() / "logs"
