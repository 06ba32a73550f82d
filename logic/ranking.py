"""Confidence labelling and top-N ranking of scored outfits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from models.outfit import ConfidenceLevel, OutfitRecommendation, ScoreBreakdown
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

TOP_N = 3
HIGH_SCORE = 80
HIGH_MIN_ITEMS = 3
MEDIUM_SCORE = 50
MEDIUM_MIN_ITEMS = 2


@dataclass(frozen=True)
class ScoredCandidate:
    """A generated outfit after scoring and explanation, before ranking."""

    items: List[WardrobeItem]
    breakdown: ScoreBreakdown
    reasoning: str
    style_notes: List[str] = field(default_factory=list)
    meets_required: bool = True

    @property
    def score(self) -> int:
        return self.breakdown.total


def calculate_confidence_level(score: int, item_count: int) -> ConfidenceLevel:
    if score >= HIGH_SCORE and item_count >= HIGH_MIN_ITEMS:
        return ConfidenceLevel.HIGH
    if score >= MEDIUM_SCORE and item_count >= MEDIUM_MIN_ITEMS:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def rank_recommendations(
    candidates: List[ScoredCandidate], top_n: int = TOP_N, strict_required: bool = False
) -> List[OutfitRecommendation]:
    """Sort candidates by score and keep the best ``top_n`` (at most ``TOP_N``).

    Ties keep generation order. With ``strict_required`` candidates missing
    a required category are dropped instead of merely ranking low. Ids are
    assigned after sorting so ``outfit-1`` is always the best result.
    """

    pool = candidates
    if strict_required:
        pool = [candidate for candidate in candidates if candidate.meets_required]
        logger.info("Strict mode kept %s of %s candidates", len(pool), len(candidates))

    limit = max(0, min(top_n, TOP_N))
    ranked = sorted(pool, key=lambda candidate: candidate.score, reverse=True)[:limit]
    recommendations: List[OutfitRecommendation] = []
    for position, candidate in enumerate(ranked, start=1):
        recommendations.append(
            OutfitRecommendation(
                recommendation_id=f"outfit-{position}",
                items=list(candidate.items),
                score=candidate.score,
                reasoning=candidate.reasoning,
                style_notes=list(candidate.style_notes),
                confidence_level=calculate_confidence_level(candidate.score, len(candidate.items)),
                score_breakdown=candidate.breakdown,
            )
        )
    return recommendations


__all__ = [
    "ScoredCandidate",
    "calculate_confidence_level",
    "rank_recommendations",
    "TOP_N",
]
