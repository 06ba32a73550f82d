"""Wardrobe-level analysis: category gaps and composition insights."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from models.taxonomy import ESSENTIAL_CATEGORIES, VERSATILE_CATEGORIES, normalize_color_name
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

MIN_ESSENTIAL_COUNT = 3
MIN_COLOR_VARIETY = 3
MAX_COLOR_VARIETY = 10
TARGET_WARDROBE_SIZE = 20
HIGHLIGHT_LIMIT = 5


def analyze_wardrobe_gaps(items: Iterable[WardrobeItem]) -> List[str]:
    """Return suggestions for every essential or versatile category that is absent.

    Essentials come first, then versatile categories, each in fixed order.
    """

    present = {item.category for item in items}
    suggestions: List[str] = []
    for category in ESSENTIAL_CATEGORIES:
        if category not in present:
            suggestions.append(f"Add {category.value.lower()} to build a foundation wardrobe")
    for category in VERSATILE_CATEGORIES:
        if category not in present:
            suggestions.append(f"Consider adding {category.value.lower()} for more outfit variety")
    return suggestions


@dataclass(frozen=True)
class WardrobeAnalysis:
    total_items: int
    category_breakdown: Dict[str, int] = field(default_factory=dict)
    color_breakdown: Dict[str, int] = field(default_factory=dict)
    style_breakdown: Dict[str, int] = field(default_factory=dict)
    season_breakdown: Dict[str, int] = field(default_factory=dict)
    dominant_style: Optional[str] = None
    most_worn: List[Dict[str, object]] = field(default_factory=list)
    least_worn: List[Dict[str, object]] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    wardrobe_score: int = 0
    summary: str = ""

    def as_dict(self) -> dict:
        return {
            "totalItems": self.total_items,
            "categoryBreakdown": dict(self.category_breakdown),
            "colorBreakdown": dict(self.color_breakdown),
            "styleBreakdown": dict(self.style_breakdown),
            "seasonBreakdown": dict(self.season_breakdown),
            "dominantStyle": self.dominant_style,
            "mostWornItems": list(self.most_worn),
            "leastWornItems": list(self.least_worn),
            "recommendations": list(self.recommendations),
            "wardrobeScore": self.wardrobe_score,
            "analysis": self.summary,
        }


def _composition_recommendations(categories: Counter, colors: Counter) -> List[str]:
    recommendations = []
    for category in ESSENTIAL_CATEGORIES:
        if categories.get(category.value, 0) < MIN_ESSENTIAL_COUNT:
            recommendations.append(
                f"Consider adding more {category.value.lower()} for a complete wardrobe"
            )
    if len(colors) < MIN_COLOR_VARIETY:
        recommendations.append("Add more color variety to increase outfit possibilities")
    elif len(colors) > MAX_COLOR_VARIETY:
        recommendations.append("Focus on a cohesive color palette for better coordination")
    return recommendations


def analyze_wardrobe(items: Iterable[WardrobeItem]) -> WardrobeAnalysis:
    """Summarise wardrobe composition, wear history and improvement ideas."""

    wardrobe = list(items)
    if not wardrobe:
        return WardrobeAnalysis(
            total_items=0,
            recommendations=["Start by adding some clothing items to your wardrobe"],
            summary="No wardrobe items to analyze",
        )

    categories: Counter = Counter(item.category.value for item in wardrobe)
    colors: Counter = Counter(normalize_color_name(item.color) for item in wardrobe if item.color)
    styles: Counter = Counter(item.style for item in wardrobe if item.style)
    seasons: Counter = Counter(season for item in wardrobe for season in item.seasons)

    # Counter.most_common keeps first-seen order on ties
    dominant_style = styles.most_common(1)[0][0] if styles else None

    most_worn = sorted(wardrobe, key=lambda item: item.usage_count, reverse=True)[:HIGHLIGHT_LIMIT]
    never_worn = [item for item in wardrobe if item.usage_count == 0][:HIGHLIGHT_LIMIT]

    analysis = WardrobeAnalysis(
        total_items=len(wardrobe),
        category_breakdown=dict(categories),
        color_breakdown=dict(colors),
        style_breakdown=dict(styles),
        season_breakdown=dict(seasons),
        dominant_style=dominant_style,
        most_worn=[
            {"id": item.item_id, "name": item.name, "timesWorn": item.usage_count} for item in most_worn
        ],
        least_worn=[
            {"id": item.item_id, "name": item.name, "category": item.category.value} for item in never_worn
        ],
        recommendations=_composition_recommendations(categories, colors),
        wardrobe_score=min(100, round(len(wardrobe) / TARGET_WARDROBE_SIZE * 100)),
        summary=f"Your wardrobe has {len(wardrobe)} items with a focus on {dominant_style or 'mixed'} style.",
    )
    logger.info(
        "Analyzed wardrobe of %s items across %s categories", analysis.total_items, len(categories)
    )
    return analysis


__all__ = ["analyze_wardrobe_gaps", "analyze_wardrobe", "WardrobeAnalysis"]
