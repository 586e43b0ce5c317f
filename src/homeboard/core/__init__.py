"""Homeboard core module."""

from homeboard.core.config import BoardConfig, StorageKeys, load_config
from homeboard.core.storage import FileStore, KeyValueMedium, MemoryStore
from homeboard.core.types import CLASS_LEVELS, SUBJECTS, Urgency

__all__ = [
    "BoardConfig",
    "CLASS_LEVELS",
    "FileStore",
    "KeyValueMedium",
    "MemoryStore",
    "SUBJECTS",
    "StorageKeys",
    "Urgency",
    "load_config",
]
