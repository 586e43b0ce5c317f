"""Export/import documents -- ``{"items": [...], "progress": {...}}`` as JSON."""

from __future__ import annotations

import json
from datetime import date
from typing import Any


class InvalidImportError(ValueError):
    """An import file is not valid JSON or lacks the expected shape."""


def export_json(document: dict[str, Any]) -> str:
    """Export a snapshot document as a pretty-printed JSON string."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def export_bytes(document: dict[str, Any]) -> bytes:
    """Export a snapshot document as UTF-8 encoded bytes (e.g. for file download)."""
    return export_json(document).encode("utf-8")


def export_filename(today: date | None = None) -> str:
    """Download filename stamped with the current date."""
    return f"homework-export-{(today or date.today()).isoformat()}.json"


def parse_import(content: str | bytes) -> dict[str, Any]:
    """Decode an uploaded export file.

    Raises
    ------
    InvalidImportError
        If *content* is not UTF-8 JSON or its top level is not an object.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidImportError("Import file is not UTF-8 text.") from exc
    try:
        document = json.loads(content)
    except json.JSONDecodeError as exc:
        raise InvalidImportError(f"Import file is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc
    if not isinstance(document, dict):
        raise InvalidImportError(
            f"Import file must contain a JSON object, got {type(document).__name__}."
        )
    return document
