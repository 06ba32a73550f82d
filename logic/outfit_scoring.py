"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence

from models.event_rules import get_event_rule
from models.mood_styles import get_mood_style
from models.outfit import ScoreBreakdown
from models.preferences import ExtendedSignals, Preferences
from models.taxonomy import normalize_color_name
from models.wardrobe_item import WardrobeItem

POINTS_PER_ITEM = 10
REQUIRED_PRESENT_BONUS = 30
REQUIRED_MISSING_PENALTY = -20
MOOD_KEYWORD_BONUS = 15
MOOD_AVOID_PENALTY = -10
POINTS_PER_CATEGORY = 5
PREFERRED_STYLE_BONUS = 10
FAVORITE_COLOR_BONUS = 5
USAGE_BONUS_CAP = 10


class KeywordMatcher(Protocol):
    """Counts how many vocabulary entries describe an item."""

    def count_matches(self, item: WardrobeItem, keywords: Sequence[str]) -> int:
        ...


class SubstringKeywordMatcher:
    """Case-insensitive substring search of each keyword in the item name."""

    def count_matches(self, item: WardrobeItem, keywords: Sequence[str]) -> int:
        name = item.name.lower()
        return sum(1 for keyword in keywords if keyword.lower() in name)


DEFAULT_MATCHER = SubstringKeywordMatcher()


def has_required_categories(items: Iterable[WardrobeItem], preferences: Preferences) -> bool:
    rule = get_event_rule(preferences.event_type)
    if rule is None:
        return False
    categories = {item.category for item in items}
    return all(category in categories for category in rule.required)


def _event_compliance(items: List[WardrobeItem], preferences: Preferences) -> int:
    if get_event_rule(preferences.event_type) is None:
        return 0
    return REQUIRED_PRESENT_BONUS if has_required_categories(items, preferences) else REQUIRED_MISSING_PENALTY


def _mood_compliance(items: List[WardrobeItem], preferences: Preferences, matcher: KeywordMatcher) -> int:
    profile = get_mood_style(preferences.mood)
    if profile is None:
        return 0
    score = 0
    for item in items:
        score += MOOD_KEYWORD_BONUS * matcher.count_matches(item, profile.keywords)
        score += MOOD_AVOID_PENALTY * matcher.count_matches(item, profile.avoid)
    return score


def _style_preference(items: List[WardrobeItem], signals: ExtendedSignals) -> int:
    preferred = set(signals.preferred_styles)
    return sum(
        PREFERRED_STYLE_BONUS for item in items if item.style and item.style.strip().lower() in preferred
    )


def _color_preference(items: List[WardrobeItem], signals: ExtendedSignals) -> int:
    favorites = set(signals.favorite_colors)
    return sum(
        FAVORITE_COLOR_BONUS for item in items if item.color and normalize_color_name(item.color) in favorites
    )


def _usage_history(items: List[WardrobeItem], signals: ExtendedSignals) -> int:
    if not signals.include_usage_history:
        return 0
    return sum(min(item.usage_count, USAGE_BONUS_CAP) for item in items)


def score_outfit(
    outfit_items: List[WardrobeItem],
    preferences: Preferences,
    extended_signals: Optional[ExtendedSignals] = None,
    matcher: Optional[KeywordMatcher] = None,
) -> ScoreBreakdown:
    """Calculate the additive score for an outfit.

    The same items and preferences always produce the same breakdown. Missing
    optional item fields simply contribute nothing to their term.
    """

    matcher = matcher or DEFAULT_MATCHER
    breakdown = ScoreBreakdown(
        cardinality=POINTS_PER_ITEM * len(outfit_items),
        event_compliance=_event_compliance(outfit_items, preferences),
        mood_compliance=_mood_compliance(outfit_items, preferences, matcher),
        variety=POINTS_PER_CATEGORY * len({item.category for item in outfit_items}),
    )
    if extended_signals is None:
        return breakdown
    return ScoreBreakdown(
        cardinality=breakdown.cardinality,
        event_compliance=breakdown.event_compliance,
        mood_compliance=breakdown.mood_compliance,
        variety=breakdown.variety,
        style_preference=_style_preference(outfit_items, extended_signals),
        color_preference=_color_preference(outfit_items, extended_signals),
        usage_history=_usage_history(outfit_items, extended_signals),
    )


__all__ = [
    "score_outfit",
    "has_required_categories",
    "KeywordMatcher",
    "SubstringKeywordMatcher",
    "DEFAULT_MATCHER",
]
