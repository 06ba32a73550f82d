"""Tests for reasoning, style notes, confidence labels and ranking."""
from __future__ import annotations

import random
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.explanation import (
    ACCESSORY_NOTE,
    BUSY_PALETTE_NOTE,
    COHESIVE_NOTE,
    generate_reasoning,
    generate_style_notes,
)
from logic.ranking import ScoredCandidate, calculate_confidence_level, rank_recommendations
from models.outfit import ConfidenceLevel, ScoreBreakdown
from models.preferences import Preferences
from models.taxonomy import EventType, Mood
from models.wardrobe_item import WardrobeItem


def _item(item_id: str, category: str, name: str = "", color: str | None = None) -> WardrobeItem:
    return WardrobeItem(item_id=item_id, name=name or item_id, category=category, color=color)


def _candidate(score: int, size: int = 3, meets_required: bool = True, label: str = "") -> ScoredCandidate:
    items = [_item(f"{label}{i}", "Tops") for i in range(size)]
    breakdown = ScoreBreakdown(cardinality=score, event_compliance=0, mood_compliance=0, variety=0)
    return ScoredCandidate(
        items=items, breakdown=breakdown, reasoning=label, style_notes=[], meets_required=meets_required
    )


def test_reasoning_uses_event_mood_and_first_item():
    prefs = Preferences(event_type=EventType.DATE_NIGHT, mood=Mood.BOLD)
    outfit = [_item("t1", "Tops", "Red Silk Blouse"), _item("b1", "Bottoms", "Black Skirt")]
    rng = random.Random(0)
    seen = {generate_reasoning(outfit, prefs, rng) for _ in range(200)}
    assert seen == {
        "This outfit combines Tops, Bottoms perfectly for a date night occasion.",
        "The bold mood is reflected in the choice of Red Silk Blouse as the focal point.",
        "The bold mood is reflected in the sophisticated combination of these pieces.",
        "This combination balances style and comfort for your date night event.",
        "The selected items work harmoniously together to create a bold look.",
    }


def test_style_notes_prioritise_rule_then_mood_then_accessories():
    prefs = Preferences(event_type=EventType.WORK, mood=Mood.CONFIDENT)
    outfit = [_item("t1", "Tops", color="white"), _item("b1", "Bottoms", color="black")]
    notes = generate_style_notes(outfit, prefs)
    assert len(notes) == 3
    assert notes[0].startswith("Layer a structured blazer")
    assert notes[1] == "For a confident look, focus on bold and structured elements."
    assert notes[2] == ACCESSORY_NOTE


def test_style_notes_color_checks():
    prefs = Preferences(event_type=EventType.EXERCISE, mood=Mood.RELAXED)
    cohesive = [
        _item("t1", "Tops", color="grey"),
        _item("b1", "Bottoms", color="gray"),
        _item("a1", "Accessories", color="black"),
    ]
    assert generate_style_notes(cohesive, prefs) == [
        "For a relaxed look, focus on easygoing and casual elements.",
        COHESIVE_NOTE,
    ]

    busy = [
        _item("t1", "Tops", color="red"),
        _item("b1", "Bottoms", color="green"),
        _item("s1", "Shoes", color="blue"),
        _item("a1", "Accessories", color="yellow"),
    ]
    assert BUSY_PALETTE_NOTE in generate_style_notes(busy, prefs)

    three_colors = busy[:2] + [_item("a2", "Accessories", color="blue")]
    notes = generate_style_notes(three_colors, prefs)
    assert COHESIVE_NOTE not in notes and BUSY_PALETTE_NOTE not in notes

    colorless = [_item("t1", "Tops"), _item("a1", "Accessories")]
    assert generate_style_notes(colorless, prefs) == [
        "For a relaxed look, focus on easygoing and casual elements.",
        COHESIVE_NOTE,
    ]


def test_confidence_thresholds():
    assert calculate_confidence_level(80, 3) is ConfidenceLevel.HIGH
    assert calculate_confidence_level(79, 3) is ConfidenceLevel.MEDIUM
    assert calculate_confidence_level(120, 2) is ConfidenceLevel.MEDIUM
    assert calculate_confidence_level(50, 2) is ConfidenceLevel.MEDIUM
    assert calculate_confidence_level(49, 5) is ConfidenceLevel.LOW
    assert calculate_confidence_level(90, 1) is ConfidenceLevel.LOW


def test_confidence_is_monotonic_in_score():
    order = {ConfidenceLevel.LOW: 0, ConfidenceLevel.MEDIUM: 1, ConfidenceLevel.HIGH: 2}
    for size in range(1, 6):
        levels = [order[calculate_confidence_level(score, size)] for score in range(0, 150)]
        assert levels == sorted(levels)


def test_ranking_sorts_caps_and_relabels():
    candidates = [_candidate(40, label="a"), _candidate(90, label="b"), _candidate(60, label="c"),
                  _candidate(90, label="d"), _candidate(10, label="e")]
    ranked = rank_recommendations(candidates)
    assert [r.reasoning for r in ranked] == ["b", "d", "c"]
    assert [r.recommendation_id for r in ranked] == ["outfit-1", "outfit-2", "outfit-3"]
    assert [r.confidence_level for r in ranked] == [
        ConfidenceLevel.HIGH,
        ConfidenceLevel.HIGH,
        ConfidenceLevel.MEDIUM,
    ]
    assert ranked[0].score_breakdown.total == 90


def test_ranking_never_exceeds_three_results():
    candidates = [_candidate(score, label=str(score)) for score in (10, 20, 30, 40, 50, 60)]
    ranked = rank_recommendations(candidates, top_n=5)
    assert [r.reasoning for r in ranked] == ["60", "50", "40"]
    assert rank_recommendations(candidates, top_n=2)[-1].reasoning == "50"


def test_strict_mode_filters_incomplete_candidates():
    candidates = [_candidate(95, meets_required=False, label="x"), _candidate(55, label="y")]
    assert [r.reasoning for r in rank_recommendations(candidates)] == ["x", "y"]
    strict = rank_recommendations(candidates, strict_required=True)
    assert [r.reasoning for r in strict] == ["y"]
    assert strict[0].recommendation_id == "outfit-1"
    assert rank_recommendations([]) == []
