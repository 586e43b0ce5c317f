"""YAML school configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from homeboard.core.storage import STORAGE_DIR
from homeboard.core.types import CLASS_LEVELS, SUBJECTS


@dataclass
class StorageKeys:
    """Key names used in the key-value medium."""
    homeworks: str = "homeworks"
    progress: str = "progress"
    seeded: str = "seeded"
    # Read-only fallbacks from earlier releases
    legacy_homeworks: str = "hw_items"
    legacy_progress: str = "hw_progress"


@dataclass
class BoardConfig:
    """School-specific configuration."""
    school_name: str = "Homeboard"
    subjects: list[str] = field(default_factory=lambda: list(SUBJECTS))
    class_levels: list[str] = field(default_factory=lambda: list(CLASS_LEVELS))
    storage_dir: Path = STORAGE_DIR
    keys: StorageKeys = field(default_factory=StorageKeys)
    menus: dict[str, Any] = field(default_factory=lambda: {
        "teacher": True,
        "student": True,
        "overview": True,
    })


def load_config(path: str | Path | None = None) -> BoardConfig:
    """Load a school configuration from a YAML file.

    If no path is given, returns the default configuration.  The
    ``HOMEBOARD_STORAGE_DIR`` environment variable always wins over the
    file's ``storage.dir``.
    """
    config = BoardConfig()

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)

        if not isinstance(raw, dict):
            raise ValueError("Config file must be a YAML mapping")

        school = raw.get("school", {})
        if isinstance(school, dict):
            config.school_name = school.get("name", config.school_name)

        subjects = raw.get("subjects")
        if isinstance(subjects, list) and subjects:
            config.subjects = [str(s) for s in subjects]

        class_levels = raw.get("class_levels")
        if isinstance(class_levels, list) and class_levels:
            config.class_levels = [str(c) for c in class_levels]

        storage = raw.get("storage", {})
        if isinstance(storage, dict):
            if storage.get("dir"):
                config.storage_dir = Path(storage["dir"]).expanduser()
            keys = storage.get("keys", {})
            if isinstance(keys, dict):
                for name, value in keys.items():
                    if hasattr(config.keys, name) and isinstance(value, str) and value:
                        setattr(config.keys, name, value)

        menus = raw.get("menus", {})
        if isinstance(menus, dict):
            config.menus.update(menus)

    env_dir = os.environ.get("HOMEBOARD_STORAGE_DIR", "").strip()
    if env_dir:
        config.storage_dir = Path(env_dir).expanduser()

    return config


def is_menu_visible(config: BoardConfig, menu: str, today: date | None = None) -> bool:
    """Check if a menu should be visible given the current date.

    Menu config can be:
    - True/False: always visible/hidden
    - dict with 'visible' and optional 'after_date': date-gated
    """
    menu_val = config.menus.get(menu, False)

    if isinstance(menu_val, bool):
        return menu_val

    if isinstance(menu_val, dict):
        visible = menu_val.get("visible", False)
        if not visible:
            return False
        after_date = menu_val.get("after_date")
        if after_date is None:
            return True
        if isinstance(after_date, str):
            after_date = date.fromisoformat(after_date)
        elif isinstance(after_date, datetime):
            after_date = after_date.date()
        return (today or date.today()) >= after_date

    return bool(menu_val)
