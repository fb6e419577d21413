"""Shared enums and types for the mood tracker."""

from enum import StrEnum


class InsightKind(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    WARNING = "warning"


class RecommendationCategory(StrEnum):
    MINDFULNESS = "mindfulness"
    EXERCISE = "exercise"
    SOCIAL = "social"
    SLEEP = "sleep"
    NUTRITION = "nutrition"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IconId(StrEnum):
    """Icon identifiers, resolved to glyphs by the presentation layer."""

    BRAIN = "brain"
    HEART = "heart"
    ZAP = "zap"
    USERS = "users"
