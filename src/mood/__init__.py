from .models import Insight, MoodEntry, Recommendation, mood_label
from .storage import MoodStore

__all__ = ["MoodEntry", "Insight", "Recommendation", "MoodStore", "mood_label"]
