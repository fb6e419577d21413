"""Mood statistics over a list of check-ins.

All functions are pure: they read the entry sequence and return derived values.
Degenerate input (empty list, no entry today) maps to neutral defaults, never
to an exception.
"""

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from .models import MoodEntry


def _day(dt: datetime) -> date:
    return dt.date()


def get_todays_entry(
    entries: Sequence[MoodEntry], now: Optional[datetime] = None
) -> Optional[MoodEntry]:
    """Entry recorded on now's calendar date. Last one in list order wins."""
    today = _day(now or datetime.now())
    todays = [e for e in entries if _day(e.timestamp) == today]
    return todays[-1] if todays else None


def get_streak(entries: Sequence[MoodEntry], now: Optional[datetime] = None) -> int:
    """Count consecutive calendar days with a check-in, ending at now's date.

    Several entries on one day count that day once. 0 if nothing was recorded
    on now's date.
    """
    days = {_day(e.timestamp) for e in entries}

    expected = _day(now or datetime.now())
    streak = 0
    while expected in days:
        streak += 1
        expected -= timedelta(days=1)
    return streak


def _mean(entries: Sequence[MoodEntry]) -> float:
    return sum(e.mood for e in entries) / len(entries)


def get_average_mood(entries: Sequence[MoodEntry]) -> float:
    """Mean mood rounded half-up to one decimal, 0 for no entries."""
    if not entries:
        return 0
    avg = Decimal(sum(e.mood for e in entries)) / Decimal(len(entries))
    return float(avg.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def get_trend(entries: Sequence[MoodEntry]) -> int:
    """Last mood minus first mood, in list order."""
    if len(entries) < 2:
        return 0
    return entries[-1].mood - entries[0].mood


def get_variance(entries: Sequence[MoodEntry]) -> float:
    """Population variance of mood values."""
    if not entries:
        return 0.0
    mean = _mean(entries)
    return sum((e.mood - mean) ** 2 for e in entries) / len(entries)


def get_consistency(entries: Sequence[MoodEntry]) -> float:
    """100 minus 25x the mood variance, floored at 0. 0 for no entries."""
    if not entries:
        return 0.0
    return max(0.0, 100 - get_variance(entries) * 25)


def summarize(entries: Sequence[MoodEntry], now: Optional[datetime] = None) -> dict:
    """Quick stats for the dashboard.

    Returns:
        {today, streak, average, trend, consistency, count}
    """
    now = now or datetime.now()
    return {
        "today": get_todays_entry(entries, now),
        "streak": get_streak(entries, now),
        "average": get_average_mood(entries),
        "trend": get_trend(entries),
        "consistency": round(get_consistency(entries), 1),
        "count": len(entries),
    }
