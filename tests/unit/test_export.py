"""
Unit tests for the document exporter (ga_events.export).

Tests JSON layout (field order, omitted empty collections), directory
creation, and that failed writes raise ExportError and leave nothing
behind.
"""

from __future__ import annotations

import json

import pytest

from ga_events.builder import Event, EventContent, EventGroup
from ga_events.exceptions import ExportError
from ga_events.export import dump_document, export_document, load_document


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_groups() -> list[EventGroup]:
    """One group with a screen view, one group with only an event."""
    return [
        EventGroup(
            name="login",
            screen_views=[
                Event(
                    event_trigger="hm_push_screen",
                    name="login",
                    content=[EventContent(name="foo", value="bar")],
                ),
            ],
        ),
        EventGroup(
            name="tap",
            events=[
                Event(
                    event_trigger="hm_push_event",
                    name="tap",
                    parameters=[EventContent(name="foo", value="int")],
                ),
            ],
        ),
    ]


class TestDumpDocument:
    """Tests for dump_document()."""

    def test_none_collections_are_omitted(self):
        data = json.loads(dump_document(_make_groups()))
        login, tap = data
        assert "events" not in login
        assert "screen_views" not in tap
        assert "parameters" not in login["screen_views"][0]
        assert "content" not in tap["events"][0]

    def test_field_order(self):
        data = json.loads(dump_document(_make_groups()))
        assert list(data[0].keys()) == ["name", "screen_views"]
        assert list(data[0]["screen_views"][0].keys()) == [
            "event_trigger", "name", "content",
        ]
        assert list(data[0]["screen_views"][0]["content"][0].keys()) == ["name", "value"]

    def test_empty_document(self):
        assert dump_document([]) == b"[]"

    def test_compact_by_default(self):
        assert b"\n" not in dump_document(_make_groups())

    def test_indent(self):
        assert b"\n  " in dump_document(_make_groups(), indent=2)

    def test_non_ascii_written_as_utf8(self):
        groups = [EventGroup(name="홈")]
        assert "홈".encode("utf-8") in dump_document(groups)

    def test_load_round_trip(self):
        groups = _make_groups()
        assert load_document(dump_document(groups)) == groups


class TestExportDocument:
    """Tests for export_document()."""

    def test_writes_file(self, tmp_path):
        out = tmp_path / "analytics.json"
        written = export_document(_make_groups(), out)
        assert written == out
        assert [g["name"] for g in json.loads(out.read_text(encoding="utf-8"))] == [
            "login", "tap",
        ]

    def test_creates_parent_directory(self, tmp_path):
        out = tmp_path / "nested" / "dir" / "doc.json"
        export_document([], out)
        assert out.read_text(encoding="utf-8") == "[]"

    def test_overwrites_existing(self, tmp_path):
        out = tmp_path / "doc.json"
        out.write_text("old", encoding="utf-8")
        export_document([], out)
        assert out.read_text(encoding="utf-8") == "[]"

    def test_no_temp_files_left(self, tmp_path):
        export_document(_make_groups(), tmp_path / "doc.json")
        assert [p.name for p in tmp_path.iterdir()] == ["doc.json"]

    def test_destination_is_directory_raises(self, tmp_path):
        target = tmp_path / "taken"
        target.mkdir()
        with pytest.raises(ExportError, match="Failed to write"):
            export_document(_make_groups(), target)
        assert [p.name for p in tmp_path.iterdir()] == ["taken"]
