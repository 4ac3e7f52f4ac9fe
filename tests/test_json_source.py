"""Tests for JSON record loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sunnah.ingestion.json_source import JsonRecordSource, int_field, normalize_keys, text_field


class TestJsonRecordSource:
    """Test JsonRecordSource loading."""

    def test_load_from_directory(self, tmp_path: Path) -> None:
        """Should read <key>.json from the data directory."""
        records = [{"hadithNumber": 1, "englishText": "One"}]
        (tmp_path / "malik.json").write_text(json.dumps(records), encoding="utf-8")

        assert JsonRecordSource(tmp_path).load("malik") == records

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        """Absent data is not an error."""
        assert JsonRecordSource(tmp_path).load("darimi") is None

    def test_non_array_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "malik.json").write_text('{"hadithNumber": 1}', encoding="utf-8")

        with pytest.raises(ValueError, match="JSON array"):
            JsonRecordSource(tmp_path).load("malik")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / "malik.json").write_text("[{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            JsonRecordSource(tmp_path).load("malik")

    def test_packaged_corpus(self) -> None:
        """Without a directory the bundled sample files are used."""
        source = JsonRecordSource()

        records = source.load("bukhari")

        assert records is not None
        assert records[0]["hadithNumber"] == 1
        assert source.load("ahmad") is None


class TestFieldHelpers:
    """Test raw field accessors."""

    def test_normalize_keys(self) -> None:
        assert normalize_keys({"HadithNumber": 1, "englishText": "x"}) == {
            "hadithnumber": 1,
            "englishtext": "x",
        }

    def test_text_field(self) -> None:
        fields = normalize_keys({"englishText": "Text", "grade": None})
        assert text_field(fields, "englishText") == "Text"
        assert text_field(fields, "grade") == ""
        assert text_field(fields, "reference") == ""

    def test_int_field(self) -> None:
        fields = normalize_keys({"hadithNumber": "12", "bookNumber": None, "flag": True})
        assert int_field(fields, "hadithNumber") == 12
        assert int_field(fields, "bookNumber", default=0) == 0
        assert int_field(fields, "missing", default=0) == 0
        with pytest.raises(ValueError):
            int_field(fields, "bookNumber")
        with pytest.raises(ValueError):
            int_field(fields, "flag", default=0)
        with pytest.raises(ValueError):
            int_field(fields, "missing")
