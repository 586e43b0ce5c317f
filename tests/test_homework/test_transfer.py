"""Tests for export/import documents."""

import json
from datetime import date

import pytest

from homeboard.homework.transfer import (
    InvalidImportError,
    export_bytes,
    export_filename,
    export_json,
    parse_import,
)

from conftest import make_homework

DOC = {
    "items": [make_homework("h1", title="Übung").to_dict()],
    "progress": {"Zoë": {"h1": True}},
}


class TestExport:
    def test_pretty_printed(self):
        text = export_json(DOC)
        assert text.startswith("{\n  ")
        assert json.loads(text) == DOC

    def test_keeps_non_ascii(self):
        assert "Übung" in export_json(DOC)

    def test_bytes_are_utf8(self):
        assert json.loads(export_bytes(DOC).decode("utf-8")) == DOC

    def test_filename_has_date(self):
        assert export_filename(date(2026, 10, 19)) == "homework-export-2026-10-19.json"


class TestParseImport:
    def test_parses_text(self):
        assert parse_import(export_json(DOC)) == DOC

    def test_parses_bytes_with_bom(self):
        assert parse_import(b"\xef\xbb\xbf" + export_bytes(DOC)) == DOC

    @pytest.mark.parametrize("content", ["", "{oops", "not json at all", b"\xff\xfe\x00"])
    def test_invalid_raises(self, content):
        with pytest.raises(InvalidImportError):
            parse_import(content)

    def test_non_object_raises(self):
        with pytest.raises(InvalidImportError):
            parse_import("[1, 2, 3]")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_import("{")
