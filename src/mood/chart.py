"""Per-day mood series for the trend chart."""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from .models import MoodEntry

SPARK_CHARS = {1: "▁", 2: "▃", 3: "▅", 4: "▆", 5: "█"}
MISSING_CHAR = "·"


def daily_series(
    entries: Sequence[MoodEntry],
    now: Optional[datetime] = None,
    days: int = 30,
) -> list[dict]:
    """One point per calendar day, oldest first, ending at now's date.

    A day with several entries uses the first one in list order.

    Returns:
        List of {date, label, mood} where mood is None for days without a check-in
    """
    today = (now or datetime.now()).date()

    by_day: dict = {}
    for entry in entries:
        by_day.setdefault(entry.timestamp.date(), entry.mood)

    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append(
            {
                "date": day,
                "label": f"{day.strftime('%b')} {day.day}",
                "mood": by_day.get(day),
            }
        )
    return series


def render_sparkline(series: list[dict]) -> str:
    """One character per day, dots for days without data."""
    return "".join(SPARK_CHARS.get(p["mood"], MISSING_CHAR) for p in series)
