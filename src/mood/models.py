"""Mood entry, insight and recommendation records."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared_types import IconId, InsightKind, Priority, RecommendationCategory

MIN_MOOD = 1
MAX_MOOD = 5

MOOD_LABELS = {
    1: "Terrible",
    2: "Poor",
    3: "Okay",
    4: "Good",
    5: "Excellent",
}


def mood_label(mood: Optional[int]) -> str:
    """Human label for a mood level, "Unknown" for anything else."""
    return MOOD_LABELS.get(mood, "Unknown")


class MoodEntry(BaseModel):
    """A single check-in. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    mood: int = Field(ge=MIN_MOOD, le=MAX_MOOD, description="1=terrible, 5=excellent")
    notes: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)

    @field_validator("notes", mode="before")
    @classmethod
    def none_notes_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("timestamp")
    @classmethod
    def to_local_naive(cls, v: datetime) -> datetime:
        """Stored timestamps may carry a UTC offset; calendar days are local."""
        if v.tzinfo:
            return v.astimezone().replace(tzinfo=None)
        return v

    @property
    def has_notes(self) -> bool:
        return bool(self.notes.strip())

    def to_record(self) -> dict:
        """Serializable form for the persisted blob."""
        return {
            "mood": self.mood,
            "notes": self.notes,
            "timestamp": self.timestamp.isoformat(),
        }


class Insight(BaseModel):
    kind: InsightKind
    title: str
    description: str
    confidence: float = Field(ge=0, le=100)


class Recommendation(BaseModel):
    id: str
    title: str
    description: str
    category: RecommendationCategory
    priority: Priority
    icon: IconId
    action: Optional[str] = None
    duration: Optional[str] = None
