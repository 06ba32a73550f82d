"""Outfit assembly: grouping wardrobe items and drawing candidate combinations."""
from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Optional

from models.event_rules import get_event_rule
from models.taxonomy import Category, EventType
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 5
OPTIONAL_INCLUSION_PROBABILITY = 0.5
MIN_OUTFIT_SIZE = 2


def group_items_by_category(items: Iterable[WardrobeItem]) -> Dict[Category, List[WardrobeItem]]:
    """Partition items by category, keeping wardrobe order and duplicates."""

    grouped: Dict[Category, List[WardrobeItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def generate_combinations(
    items_by_category: Dict[Category, List[WardrobeItem]],
    event_type: EventType | str,
    rng: Optional[random.Random] = None,
    max_candidates: int = MAX_CANDIDATES,
    optional_inclusion_probability: float = OPTIONAL_INCLUSION_PROBABILITY,
) -> List[List[WardrobeItem]]:
    """Draw up to ``max_candidates`` independent outfits for an event.

    Each required category contributes one uniformly chosen item when the
    wardrobe has any; each optional category is added with probability
    ``optional_inclusion_probability``. Draws with fewer than two items are
    dropped, so the result can be shorter than ``max_candidates``. An event
    type without a rule yields no combinations.
    """

    rule = get_event_rule(event_type)
    if rule is None:
        logger.info("No combination rule for event type %s", event_type)
        return []
    draw = rng or random

    combinations: List[List[WardrobeItem]] = []
    for attempt in range(max_candidates):
        combination: List[WardrobeItem] = []
        for category in rule.required:
            pool = items_by_category.get(category) or []
            if pool:
                combination.append(draw.choice(pool))
        for category in rule.optional:
            pool = items_by_category.get(category) or []
            if pool and draw.random() < optional_inclusion_probability:
                combination.append(draw.choice(pool))

        if len(combination) >= MIN_OUTFIT_SIZE:
            combinations.append(combination)
        else:
            logger.debug("Dropped draw %s with %s item(s)", attempt, len(combination))
    logger.info("Generated %s combinations for %s", len(combinations), event_type)
    return combinations


__all__ = [
    "group_items_by_category",
    "generate_combinations",
    "MAX_CANDIDATES",
    "OPTIONAL_INCLUSION_PROBABILITY",
    "MIN_OUTFIT_SIZE",
]
