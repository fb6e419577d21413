"""Tests for the JSON mood store."""

import csv
import json
from datetime import datetime

import pytest

from mood.storage import MAX_NOTES_LENGTH, STORAGE_KEY, MoodStore


class TestMoodStore:
    """Test load/save/check-in."""

    def test_missing_file_is_empty(self, store):
        assert store.entries == []

    def test_creates_parent_dir(self, data_file):
        MoodStore(data_file)
        assert data_file.parent.exists()

    def test_check_in_persists(self, store, data_file, now):
        entry = store.check_in(4, "Good walk", timestamp=now)

        assert store.entries == [entry]
        data = json.loads(data_file.read_text())
        assert data[STORAGE_KEY] == [
            {"mood": 4, "notes": "Good walk", "timestamp": now.isoformat()}
        ]

    def test_reload_preserves_order(self, store, data_file, now):
        store.check_in(2, timestamp=now.replace(hour=8))
        store.check_in(5, "better", timestamp=now.replace(hour=20))

        reloaded = MoodStore(data_file)
        assert [e.mood for e in reloaded.entries] == [2, 5]
        assert reloaded.entries[1].notes == "better"

    def test_check_in_defaults_to_now(self, store):
        before = datetime.now()
        entry = store.check_in(3)
        assert entry.timestamp >= before
        assert entry.notes == ""

    def test_invalid_mood_rejected(self, store, data_file):
        with pytest.raises(ValueError):
            store.check_in(6)
        assert store.entries == []
        assert not data_file.exists()

    def test_notes_too_long(self, store):
        with pytest.raises(ValueError, match="max length"):
            store.check_in(3, "x" * (MAX_NOTES_LENGTH + 1))

    def test_invalid_json_raises(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            MoodStore(data_file).load()

    def test_wrong_shape_raises(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(json.dumps([{"mood": 3}]))
        with pytest.raises(ValueError, match=STORAGE_KEY):
            MoodStore(data_file).load()

    def test_bad_records_skipped(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(
            json.dumps(
                {
                    STORAGE_KEY: [
                        {"mood": 4, "notes": "ok", "timestamp": "2026-10-18T09:00:00"},
                        {"mood": 9, "notes": "", "timestamp": "2026-10-18T10:00:00"},
                        {"mood": 3, "notes": "", "timestamp": "not a date"},
                        {"mood": 2, "timestamp": "2026-10-19T09:00:00"},
                    ]
                }
            )
        )
        entries = MoodStore(data_file).load()
        assert [e.mood for e in entries] == [4, 2]

    def test_loads_utc_timestamps(self, data_file):
        """Blobs written with a trailing Z load as naive local datetimes."""
        data_file.parent.mkdir(parents=True)
        data_file.write_text(
            json.dumps({STORAGE_KEY: [{"mood": 5, "timestamp": "2026-10-19T12:00:00.000Z"}]})
        )
        entry = MoodStore(data_file).load()[0]
        assert entry.timestamp.tzinfo is None

    def test_null_notes_load_as_empty(self, data_file):
        data_file.parent.mkdir(parents=True)
        data_file.write_text(
            json.dumps(
                {STORAGE_KEY: [{"mood": 3, "notes": None, "timestamp": "2026-10-19T09:00:00"}]}
            )
        )
        assert MoodStore(data_file).load()[0].notes == ""

    def test_save_leaves_no_temp_files(self, store, data_file, now):
        store.check_in(4, timestamp=now)
        store.check_in(5, timestamp=now)
        assert list(data_file.parent.glob("*.tmp")) == []

    def test_failed_save_keeps_previous_file(self, store, data_file, now, monkeypatch):
        """A write that dies before the rename leaves the old history intact."""
        store.check_in(4, "first", timestamp=now)
        before = data_file.read_text()

        def boom(fd):
            raise OSError("disk full")

        monkeypatch.setattr("mood.storage.os.fsync", boom)
        with pytest.raises(OSError, match="disk full"):
            store.check_in(2, "second", timestamp=now)

        assert data_file.read_text() == before
        assert list(data_file.parent.glob("*.tmp")) == []


class TestExport:
    """Test JSON and CSV export."""

    def test_export_json(self, store, tmp_path, now):
        store.check_in(4, "fine", timestamp=now)
        out = tmp_path / "out" / "export.json"

        count = store.export_json(out)

        assert count == 1
        data = json.loads(out.read_text())
        assert data["count"] == 1
        assert data["entries"][0]["mood"] == 4
        assert "exported_at" in data

    def test_export_csv(self, store, tmp_path, now):
        store.check_in(2, "rough, long day", timestamp=now)
        store.check_in(4, timestamp=now)
        out = tmp_path / "export.csv"

        assert store.export_csv(out) == 2

        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [r["mood"] for r in rows] == ["2", "4"]
        assert rows[0]["notes"] == "rough, long day"

    def test_export_empty(self, store, tmp_path):
        assert store.export_json(tmp_path / "empty.json") == 0
