"""Key-value media the entity store persists to.

Both media map string keys to string values, mirroring browser local
storage.  ``FileStore`` keeps one ``<key>.json`` file per key under a
directory; ``MemoryStore`` keeps everything in a dict and is used in tests.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

STORAGE_DIR = Path.home() / ".homeboard" / "storage"

_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class KeyValueMedium(Protocol):
    """What the entity store needs from a durable medium."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...
    def keys(self) -> list[str]: ...
    def __contains__(self, key: str) -> bool: ...


class MemoryStore:
    """In-memory key-value medium."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if *key* is absent."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class FileStore:
    """Directory-backed key-value medium. Each write replaces the whole file."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else STORAGE_DIR
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"

    def get_item(self, key: str) -> str | None:
        """Return the file's text, or ``None`` if absent.

        Raises ``OSError`` if the file cannot be read and
        ``UnicodeDecodeError`` if it is not UTF-8.
        """
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self.directory.glob("*.json"))

    def __contains__(self, key: str) -> bool:
        return self._path(key).exists()
