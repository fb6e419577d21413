"""Tests for wellness recommendations."""

import pytest

from mood.recommendations import BASELINE, effective_mood, get_recommendations
from shared_types import IconId


def _ids(recs):
    return [r.id for r in recs]


class TestEffectiveMood:
    def test_current_mood_wins(self, make_entry):
        assert effective_mood([make_entry(1)], current_mood=4) == 4

    def test_falls_back_to_latest_entry(self, make_entry):
        entries = [make_entry(5, days_ago=2), make_entry(2, days_ago=1)]
        assert effective_mood(entries) == 2

    def test_neutral_without_data(self):
        assert effective_mood([]) == 3


class TestGetRecommendations:
    """Test baseline table and override rules."""

    def test_baseline_without_data(self):
        recs = get_recommendations([])
        assert _ids(recs) == ["1", "2", "3", "4"]

    def test_crisis_prepended_for_low_mood(self):
        recs = get_recommendations([], current_mood=2)
        assert _ids(recs) == ["crisis", "1", "2", "3"]

    def test_crisis_from_latest_entry(self, make_entry):
        recs = get_recommendations([make_entry(4, days_ago=1), make_entry(1)])
        assert recs[0].id == "crisis"

    def test_booster_when_okay_but_average_low(self, make_entry):
        entries = [make_entry(2), make_entry(2), make_entry(3)]
        recs = get_recommendations(entries)
        assert _ids(recs) == ["boost", "1", "2", "3"]

    def test_no_booster_when_average_ok(self, make_entry):
        entries = [make_entry(4), make_entry(3)]
        assert _ids(get_recommendations(entries, current_mood=3)) == ["1", "2", "3", "4"]

    def test_current_mood_overrides_latest_entry(self, make_entry):
        recs = get_recommendations([make_entry(1)], current_mood=4)
        assert recs[0].id == "1"

    @pytest.mark.parametrize("mood", [1, 2, 3, 4, 5])
    def test_always_four_and_crisis_first_iff_low(self, mood, make_entry):
        recs = get_recommendations([make_entry(mood)])
        assert len(recs) == 4
        assert (recs[0].id == "crisis") == (mood <= 2)

    def test_icons_are_identifiers(self):
        for rec in get_recommendations([], current_mood=1):
            assert isinstance(rec.icon, IconId)

    def test_baseline_not_mutated(self):
        get_recommendations([], current_mood=1)
        assert _ids(BASELINE) == ["1", "2", "3", "4"]
