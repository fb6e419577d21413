"""Wellness recommendations: a fixed table with two mood-based overrides."""

from typing import Optional, Sequence

from shared_types import IconId, Priority, RecommendationCategory

from .models import MoodEntry, Recommendation

MAX_RECOMMENDATIONS = 4
NEUTRAL_MOOD = 3
CRISIS_MOOD = 2

BASELINE = (
    Recommendation(
        id="1",
        title="5-Minute Breathing Exercise",
        description="Simple breathing technique to reduce stress and anxiety",
        category=RecommendationCategory.MINDFULNESS,
        priority=Priority.HIGH,
        icon=IconId.BRAIN,
        action="Start Session",
        duration="5 min",
    ),
    Recommendation(
        id="2",
        title="Daily Gratitude Practice",
        description="Write down 3 things you're grateful for today",
        category=RecommendationCategory.MINDFULNESS,
        priority=Priority.MEDIUM,
        icon=IconId.HEART,
        action="Begin Writing",
        duration="3 min",
    ),
    Recommendation(
        id="3",
        title="10-Minute Walk",
        description="Get some fresh air and light exercise",
        category=RecommendationCategory.EXERCISE,
        priority=Priority.MEDIUM,
        icon=IconId.ZAP,
        action="Track Walk",
        duration="10 min",
    ),
    Recommendation(
        id="4",
        title="Connect with a Friend",
        description="Reach out to someone you care about",
        category=RecommendationCategory.SOCIAL,
        priority=Priority.LOW,
        icon=IconId.USERS,
        action="Send Message",
        duration="15 min",
    ),
)

CRISIS_SUPPORT = Recommendation(
    id="crisis",
    title="Immediate Support",
    description="Consider speaking with a mental health professional",
    category=RecommendationCategory.MINDFULNESS,
    priority=Priority.HIGH,
    icon=IconId.HEART,
    action="Find Help",
)

MOOD_BOOSTER = Recommendation(
    id="boost",
    title="Mood Booster Activities",
    description="Try activities that typically make you feel better",
    category=RecommendationCategory.EXERCISE,
    priority=Priority.HIGH,
    icon=IconId.ZAP,
    action="Explore Ideas",
    duration="20 min",
)


def effective_mood(entries: Sequence[MoodEntry], current_mood: Optional[int] = None) -> int:
    """current_mood if given, else the latest entry's mood, else neutral."""
    if current_mood:
        return current_mood
    if entries:
        return entries[-1].mood
    return NEUTRAL_MOOD


def get_recommendations(
    entries: Sequence[MoodEntry], current_mood: Optional[int] = None
) -> list[Recommendation]:
    """Baseline activities, led by crisis support or a mood booster when warranted."""
    average = sum(e.mood for e in entries) / len(entries) if entries else NEUTRAL_MOOD
    mood = effective_mood(entries, current_mood)

    recommendations = list(BASELINE)
    if mood <= CRISIS_MOOD:
        recommendations.insert(0, CRISIS_SUPPORT)
    elif mood == NEUTRAL_MOOD and average < NEUTRAL_MOOD:
        recommendations.insert(0, MOOD_BOOSTER)

    return recommendations[:MAX_RECOMMENDATIONS]
