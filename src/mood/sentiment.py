"""Rule-based insights from mood levels and keyword matching on notes."""

from typing import Sequence

import structlog

from shared_types import InsightKind

from .models import Insight, MoodEntry
from .stats import get_consistency

logger = structlog.get_logger()

# Lexicon-based sentiment (no external deps needed)
POSITIVE_WORDS = frozenset({
    "happy", "good", "great", "excited", "grateful",
    "thankful", "awesome", "amazing", "wonderful", "fantastic",
})

NEGATIVE_WORDS = frozenset({
    "sad", "tired", "stressed", "anxious", "worried",
    "frustrated", "angry", "depressed", "overwhelmed", "exhausted",
})

TREND_THRESHOLD = 0.5
STABLE_CONSISTENCY = 70
VOLATILE_CONSISTENCY = 30
HIGH_AVERAGE = 4
LOW_AVERAGE = 2.5

MAX_CONFIDENCE = 95
MAX_SCORE = 100
MAX_KEYWORD_CONFIDENCE = 90

NO_DATA_INSIGHT = Insight(
    kind=InsightKind.NEUTRAL,
    title="No Data Yet",
    description="Start tracking your mood to see insights here.",
    confidence=0,
)


def _clamp(value: float, upper: float) -> float:
    return max(0.0, min(upper, value))


def keyword_balance(entries: Sequence[MoodEntry]) -> dict:
    """Count lexicon words present in the notes of entries that have notes.

    Each lexicon word counts once if it appears anywhere in the combined
    notes, including inside a longer word ("sadness" counts as "sad").

    Returns:
        {positive_count: int, negative_count: int, noted_entries: int}
    """
    noted = [e for e in entries if e.has_notes]
    text = " ".join(e.notes.lower() for e in noted)
    return {
        "positive_count": sum(1 for word in POSITIVE_WORDS if word in text),
        "negative_count": sum(1 for word in NEGATIVE_WORDS if word in text),
        "noted_entries": len(noted),
    }


def _trend_insight(entries: Sequence[MoodEntry], overall: float, recent_window: int):
    recent_entries = entries[-recent_window:]
    recent = sum(e.mood for e in recent_entries) / len(recent_entries)

    if recent > overall + TREND_THRESHOLD:
        return Insight(
            kind=InsightKind.POSITIVE,
            title="Improving Trend",
            description="Your mood has been trending upward over the past week.",
            confidence=_clamp((recent - overall) * 30 + 70, MAX_CONFIDENCE),
        )
    if recent < overall - TREND_THRESHOLD:
        return Insight(
            kind=InsightKind.WARNING,
            title="Declining Trend",
            description="Your mood has been lower lately. Consider reaching out for support.",
            confidence=_clamp((overall - recent) * 30 + 70, MAX_CONFIDENCE),
        )
    return None


def _consistency_insight(consistency: float):
    if consistency > STABLE_CONSISTENCY:
        return Insight(
            kind=InsightKind.POSITIVE,
            title="Stable Patterns",
            description="Your mood has been relatively consistent, which is a good sign.",
            confidence=_clamp(consistency, MAX_SCORE),
        )
    if consistency < VOLATILE_CONSISTENCY:
        return Insight(
            kind=InsightKind.WARNING,
            title="High Variability",
            description="Your mood varies significantly. Consider tracking triggers.",
            confidence=_clamp(100 - consistency, MAX_SCORE),
        )
    return None


def _wellbeing_insight(overall: float):
    if overall >= HIGH_AVERAGE:
        return Insight(
            kind=InsightKind.POSITIVE,
            title="Strong Wellbeing",
            description="You're maintaining good mental health overall.",
            confidence=_clamp(overall * 20, MAX_SCORE),
        )
    if overall <= LOW_AVERAGE:
        return Insight(
            kind=InsightKind.NEGATIVE,
            title="Concerning Pattern",
            description=(
                "Your overall mood levels suggest you might benefit from professional support."
            ),
            confidence=_clamp((3 - overall) * 40 + 60, MAX_SCORE),
        )
    return None


def _language_insight(entries: Sequence[MoodEntry]):
    balance = keyword_balance(entries)
    noted = balance["noted_entries"]
    if not noted:
        return None

    pos, neg = balance["positive_count"], balance["negative_count"]
    if pos > neg * 2:
        return Insight(
            kind=InsightKind.POSITIVE,
            title="Positive Language",
            description="Your notes frequently contain positive expressions.",
            confidence=_clamp(pos / noted * 100, MAX_KEYWORD_CONFIDENCE),
        )
    if neg > pos * 2:
        return Insight(
            kind=InsightKind.WARNING,
            title="Negative Patterns",
            description="Your notes often mention stress or negative feelings.",
            confidence=_clamp(neg / noted * 100, MAX_KEYWORD_CONFIDENCE),
        )
    return None


def derive_insights(
    entries: Sequence[MoodEntry],
    max_insights: int = 3,
    recent_window: int = 7,
) -> list[Insight]:
    """Evaluate insight rules in priority order.

    Rules: recent vs overall trend, consistency, overall average, note
    keywords. Each rule contributes at most one insight.

    Args:
        entries: Check-ins in insertion order
        max_insights: Cap on returned insights
        recent_window: Number of trailing entries treated as "recent"

    Returns:
        Up to max_insights insights. A single neutral "no data" insight for an
        empty list; an empty list when nothing fires.
    """
    if not entries:
        return [NO_DATA_INSIGHT]

    overall = sum(e.mood for e in entries) / len(entries)

    candidates = [
        _trend_insight(entries, overall, recent_window),
        _consistency_insight(get_consistency(entries)),
        _wellbeing_insight(overall),
        _language_insight(entries),
    ]
    insights = [i for i in candidates if i is not None]

    logger.debug("insights_derived", entries=len(entries), fired=len(insights))
    return insights[:max_insights]
