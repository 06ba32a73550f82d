"""Human-readable reasoning and style notes for scored outfits."""

from __future__ import annotations

import random
from typing import List, Optional

from models.mood_styles import get_mood_style
from models.preferences import Preferences
from models.styling_rules import styling_tip
from models.taxonomy import Category, normalize_color_name
from models.wardrobe_item import WardrobeItem

MAX_STYLE_NOTES = 3
COHESIVE_COLOR_LIMIT = 2
BUSY_COLOR_THRESHOLD = 3

ACCESSORY_NOTE = "Consider adding accessories to complete the look."
COHESIVE_NOTE = "The color palette is cohesive and balanced."
BUSY_PALETTE_NOTE = "Try limiting to 2-3 main colors for a more polished look."


def _reasoning_templates(items: List[WardrobeItem], preferences: Preferences) -> List[str]:
    categories = ", ".join(item.category.value for item in items)
    event = preferences.event_type.value.lower()
    mood = preferences.mood.value.lower()
    focal = items[0].name if items and items[0].name else "the lead piece"
    return [
        f"This outfit combines {categories} perfectly for a {event} occasion.",
        f"The {mood} mood is reflected in the choice of {focal} as the focal point.",
        f"The {mood} mood is reflected in the sophisticated combination of these pieces.",
        f"This combination balances style and comfort for your {event} event.",
        f"The selected items work harmoniously together to create a {mood} look.",
    ]


def generate_reasoning(
    items: List[WardrobeItem], preferences: Preferences, rng: Optional[random.Random] = None
) -> str:
    templates = _reasoning_templates(items, preferences)
    return (rng or random).choice(templates)


def _color_note(items: List[WardrobeItem]) -> Optional[str]:
    colors = {normalize_color_name(item.color) for item in items if item.color}
    if len(colors) <= COHESIVE_COLOR_LIMIT:
        return COHESIVE_NOTE
    if len(colors) > BUSY_COLOR_THRESHOLD:
        return BUSY_PALETTE_NOTE
    return None


def generate_style_notes(items: List[WardrobeItem], preferences: Preferences) -> List[str]:
    """Collect up to three styling notes, most specific first.

    Sources in priority order: the occasion/mood styling rule, a generic mood
    tip, a missing-accessories nudge and a color cohesion check.
    """

    notes: List[str] = []
    tip = styling_tip(preferences.event_type, preferences.mood)
    if tip:
        notes.append(tip)

    profile = get_mood_style(preferences.mood)
    if profile is not None:
        focus = " and ".join(profile.keywords[:2])
        notes.append(f"For a {preferences.mood.value.lower()} look, focus on {focus} elements.")

    if not any(item.category == Category.ACCESSORIES for item in items):
        notes.append(ACCESSORY_NOTE)

    color_note = _color_note(items)
    if color_note:
        notes.append(color_note)
    return notes[:MAX_STYLE_NOTES]


__all__ = ["generate_reasoning", "generate_style_notes", "MAX_STYLE_NOTES"]
