"""Tests for taxonomy parsing, wardrobe items, preferences and rule tables."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.event_rules import EVENT_RULES, get_event_rule
from models.mood_styles import get_mood_style
from models.preferences import (
    ExtendedSignals,
    InvalidPreferencesError,
    Preferences,
    UnsupportedPreferenceError,
)
from models.seasonal_trends import season_for_date, seasonal_style_guide
from models.styling_rules import styling_tip
from models.taxonomy import Category, EventType, Mood, parse_category, parse_event_type, parse_mood
from models.wardrobe_item import WardrobeItem, from_raw_metadata


def test_taxonomy_parsing_accepts_labels_and_aliases():
    assert parse_category("tops") is Category.TOPS
    assert parse_category("Accessory") is Category.ACCESSORIES
    assert parse_event_type("date night") is EventType.DATE_NIGHT
    assert parse_event_type("Workout") is EventType.EXERCISE
    assert parse_mood("CONFIDENT") is Mood.CONFIDENT
    with pytest.raises(ValueError):
        parse_category("Hats")
    with pytest.raises(ValueError):
        parse_mood("")


def test_wardrobe_item_normalises_fields():
    item = WardrobeItem(item_id="1", name="Grey Sweater", category="top", color="Grey", usage_count=-3)
    assert item.category is Category.TOPS
    assert item.color == "gray"
    assert item.usage_count == 0
    with pytest.raises(ValueError):
        WardrobeItem(item_id="2", name="Cape", category="Capes")


def test_from_raw_metadata_reads_document_shape():
    item = from_raw_metadata(
        {
            "_id": "abc",
            "name": "Navy Blazer",
            "category": "Outerwear",
            "colors": [{"primary": "Navy Blue"}],
            "usage": {"timesWorn": 4},
            "season": ["Fall", "Winter"],
            "style": "classic",
        }
    )
    assert item.item_id == "abc"
    assert item.color == "navy"
    assert item.usage_count == 4
    assert item.seasons == ["fall", "winter"]

    camel = from_raw_metadata({"id": "x", "category": "Shoes", "usageCount": 2})
    assert camel.usage_count == 2 and camel.name == ""

    with pytest.raises(ValueError):
        from_raw_metadata({"id": "missing-category"})


def test_preferences_boundary_validation():
    prefs = Preferences.from_raw({"eventType": "Work", "mood": "Classic", "seasonality": "fall"})
    assert prefs.event_type is EventType.WORK
    assert prefs.season == "fall"

    with pytest.raises(InvalidPreferencesError):
        Preferences.from_raw({"eventType": "Work"})
    with pytest.raises(InvalidPreferencesError):
        Preferences.from_raw({"eventType": " ", "mood": "Bold"})

    with pytest.raises(UnsupportedPreferenceError) as excinfo:
        Preferences.from_raw({"eventType": "Brunch", "mood": "Bold"})
    assert excinfo.value.field_name == "eventType"
    assert "Work" in excinfo.value.allowed
    assert isinstance(excinfo.value, ValueError)


def test_extended_signals_from_profile_normalises_values():
    signals = ExtendedSignals.from_user_profile(
        {"stylePreferences": {"preferredStyles": ["Classic"], "favoriteColors": ["Grey", "navy blue"]}}
    )
    assert signals.preferred_styles == ("classic",)
    assert signals.favorite_colors == ("gray", "navy")
    assert signals.include_usage_history is True


def test_rule_tables_cover_every_event_and_mood():
    assert set(EVENT_RULES) == set(EventType)
    for mood in Mood:
        profile = get_mood_style(mood)
        assert profile is not None and profile.keywords and profile.avoid
    assert get_event_rule("Work").required == (Category.TOPS, Category.BOTTOMS)
    assert get_event_rule("Exercise").optional == (Category.OUTERWEAR, Category.SHOES)
    assert get_event_rule("Brunch") is None
    assert get_mood_style("Sleepy") is None
    with pytest.raises(TypeError):
        EVENT_RULES[EventType.WORK] = EVENT_RULES[EventType.CASUAL]  # type: ignore[index]


def test_styling_rules_lookup():
    assert "blazer" in styling_tip(EventType.WORK, Mood.CONFIDENT)
    assert styling_tip(EventType.EXERCISE, Mood.RELAXED) is None


def test_seasonal_style_guide():
    assert season_for_date(date(2026, 10, 17)) == "fall"
    assert season_for_date(date(2026, 1, 5)) == "winter"
    guide = seasonal_style_guide("Autumn")
    assert guide.season == "fall"
    assert "boots" in guide.trends
    assert seasonal_style_guide(today=date(2026, 7, 1)).season == "summer"
    with pytest.raises(ValueError):
        seasonal_style_guide("monsoon")
