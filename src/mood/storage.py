"""JSON-file store for mood check-ins."""

import contextlib
import csv
import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from .models import MoodEntry

logger = structlog.get_logger()

STORAGE_KEY = "mood-data"
MAX_NOTES_LENGTH = 10_000


def _write_atomic_json(path: Path, data: dict) -> None:
    """Write JSON via a temp file in the same directory, then replace."""
    fd, tmp_path_str = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
    tmp_path = Path(tmp_path_str)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise


class MoodStore:
    """Append-only list of check-ins persisted as {"mood-data": [...]}.

    Callers hold the store and pass it (or its entries) to whatever needs them.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._entries: Optional[list[MoodEntry]] = None

    @property
    def entries(self) -> list[MoodEntry]:
        if self._entries is None:
            self._entries = self.load()
        return self._entries

    def load(self) -> list[MoodEntry]:
        """Read entries from disk. Records that fail validation are skipped.

        Raises:
            ValueError: If the file is not valid JSON or has the wrong shape
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in mood data file {self.path}: {e}")

        records = data.get(STORAGE_KEY, []) if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise ValueError(f"Mood data file {self.path} has no '{STORAGE_KEY}' list")

        entries = []
        for i, record in enumerate(records):
            try:
                entries.append(MoodEntry.model_validate(record))
            except ValidationError as e:
                logger.warning("mood_entry_skipped", index=i, errors=e.error_count())
                continue

        logger.debug("mood_store_loaded", path=str(self.path), count=len(entries))
        return entries

    def save(self) -> None:
        """Write the full entry list. Last write wins."""
        payload = {STORAGE_KEY: [e.to_record() for e in self.entries]}
        _write_atomic_json(self.path, payload)

    def check_in(
        self,
        mood: int,
        notes: str = "",
        timestamp: Optional[datetime] = None,
    ) -> MoodEntry:
        """Record a new check-in and persist it.

        Raises:
            ValueError: If mood is outside 1-5 or notes are too long
        """
        notes = notes or ""
        if len(notes) > MAX_NOTES_LENGTH:
            raise ValueError(f"Notes exceed max length ({MAX_NOTES_LENGTH} chars)")

        entry = MoodEntry(mood=mood, notes=notes, timestamp=timestamp or datetime.now())
        self.entries.append(entry)
        self.save()

        logger.info("check_in_recorded", mood=entry.mood, notes=entry.notes)
        return entry

    def export_json(self, output_path: Path) -> int:
        """Export entries to JSON. Returns number of entries exported."""
        export_data = {
            "exported_at": datetime.now().isoformat(),
            "count": len(self.entries),
            "entries": [e.to_record() for e in self.entries],
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(export_data, f, indent=2)

        return len(self.entries)

    def export_csv(self, output_path: Path) -> int:
        """Export entries to CSV. Returns number of entries exported."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=["timestamp", "mood", "notes"])
            writer.writeheader()
            for entry in self.entries:
                writer.writerow(entry.to_record())

        return len(self.entries)
