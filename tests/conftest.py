"""Shared test fixtures for the mood tracker."""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def now():
    """Fixed reference time (mid-afternoon so day offsets never cross midnight)."""
    return datetime(2026, 10, 19, 15, 0, 0)


@pytest.fixture
def make_entry(now):
    """Factory: make_entry(mood, days_ago=0, notes="")."""
    from mood.models import MoodEntry

    def _make(mood, days_ago=0, notes="", hour=None):
        ts = now - timedelta(days=days_ago)
        if hour is not None:
            ts = ts.replace(hour=hour)
        return MoodEntry(mood=mood, notes=notes, timestamp=ts)

    return _make


@pytest.fixture
def sample_entries(make_entry):
    """A week of check-ins, oldest first."""
    return [
        make_entry(3, days_ago=6, notes="Tired after a long week"),
        make_entry(2, days_ago=5, notes="Stressed about deadlines"),
        make_entry(3, days_ago=4),
        make_entry(4, days_ago=3, notes="Good walk in the park"),
        make_entry(4, days_ago=2),
        make_entry(5, days_ago=1, notes="Great day with friends, feeling grateful"),
        make_entry(4, days_ago=0, notes="Happy and calm"),
    ]


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "mood" / "mood-data.json"


@pytest.fixture
def store(data_file):
    from mood.storage import MoodStore

    return MoodStore(data_file)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging setup done by CLI invocations."""
    yield
    import logging

    import structlog

    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
