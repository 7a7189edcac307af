"""Tests for voice analysis suggestions."""

from singsmart.analysis.suggestions import ENCOURAGEMENT, generate_suggestions


def test_strong_scores_get_encouragement():
    assert generate_suggestions(95.0, 90.0, 85.0) == ENCOURAGEMENT


def test_weak_pitch_only():
    suggestions = generate_suggestions(70.0, 90.0, 90.0)
    assert len(suggestions) == 2
    assert all("pitch" in s.lower() or "note" in s.lower() for s in suggestions)


def test_all_weak_in_order():
    suggestions = generate_suggestions(50.0, 50.0, 50.0)
    assert len(suggestions) == 6
    assert suggestions[0].startswith("Focus on listening")
    assert suggestions[-1].startswith("Practice sustained notes")


def test_thresholds_are_exclusive():
    # Exactly at each threshold is not weak
    assert generate_suggestions(80.0, 75.0, 70.0) == ENCOURAGEMENT


def test_returns_fresh_list():
    first = generate_suggestions(95.0, 95.0, 95.0)
    first.append("mutated")
    assert "mutated" not in generate_suggestions(95.0, 95.0, 95.0)
