"""Outfit recommender driving the grouping, scoring, explanation and ranking pipeline."""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Mapping, Optional

from logic.explanation import generate_reasoning, generate_style_notes
from logic.outfit_builder import generate_combinations, group_items_by_category
from logic.outfit_scoring import KeywordMatcher, has_required_categories, score_outfit
from logic.ranking import ScoredCandidate, rank_recommendations
from logic.validation import (
    ALGORITHM_VERSION,
    RecommendationRequest,
    RecommendationResponse,
    validation_failure,
)
from logic.wardrobe_analysis import WardrobeAnalysis, analyze_wardrobe, analyze_wardrobe_gaps as _gaps
from models.outfit import OutfitRecommendation
from models.preferences import ExtendedSignals, Preferences
from models.seasonal_trends import SeasonalStyleGuide, seasonal_style_guide
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from stylist_app.config import EngineConfig
from stylist_app.logging_config import get_logger, log_event, operation_context
from tools.observability import instrument_operation

logger = get_logger(__name__)


def _coerce_items(raw_items: Iterable[WardrobeItem | Mapping[str, Any]]) -> List[WardrobeItem]:
    items: List[WardrobeItem] = []
    for raw in raw_items:
        items.append(raw if isinstance(raw, WardrobeItem) else from_raw_metadata(raw))
    return items


class OutfitRecommender:
    """Builds ranked outfit recommendations from a flat wardrobe.

    Every call works on its own copies of the inputs; the only state kept on
    the instance is configuration and the default random source.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        matcher: Optional[KeywordMatcher] = None,
    ) -> None:
        self.config = config or EngineConfig()
        if rng is not None:
            self.rng = rng
        elif self.config.random_seed is not None:
            self.rng = random.Random(self.config.random_seed)
        else:
            self.rng = random.Random()
        self.matcher = matcher

    def recommend(
        self,
        items: Iterable[WardrobeItem | Mapping[str, Any]],
        preferences: Preferences | Mapping[str, Any],
        extended_signals: Optional[ExtendedSignals] = None,
        rng: Optional[random.Random] = None,
    ) -> List[OutfitRecommendation]:
        """Return up to ``config.top_n`` ranked outfits.

        Raises :class:`~models.preferences.InvalidPreferencesError` when the
        event type or mood is missing and
        :class:`~models.preferences.UnsupportedPreferenceError` when either has
        no rule.
        """

        prefs = Preferences.from_raw(preferences)
        wardrobe = _coerce_items(items)
        draw = rng or self.rng

        with operation_context(
            "recommender.recommend", event_type=prefs.event_type.value, mood=prefs.mood.value
        ) as correlation_id:
            log_event(
                logger,
                logging.INFO,
                "recommendation_started",
                correlation_id=correlation_id,
                event_type=prefs.event_type.value,
                mood=prefs.mood.value,
                item_count=len(wardrobe),
                extended=extended_signals is not None,
                color_preference=prefs.color_preference,
                preferred_styles=list(extended_signals.preferred_styles) if extended_signals else [],
                favorite_colors=list(extended_signals.favorite_colors) if extended_signals else [],
            )
            grouped = group_items_by_category(wardrobe)
            combinations = generate_combinations(
                grouped,
                prefs.event_type,
                rng=draw,
                max_candidates=self.config.max_candidates,
                optional_inclusion_probability=self.config.optional_inclusion_probability,
            )

            scored: List[ScoredCandidate] = []
            for combo in combinations:
                breakdown = score_outfit(combo, prefs, extended_signals, self.matcher)
                scored.append(
                    ScoredCandidate(
                        items=combo,
                        breakdown=breakdown,
                        reasoning=generate_reasoning(combo, prefs, draw),
                        style_notes=generate_style_notes(combo, prefs),
                        meets_required=has_required_categories(combo, prefs),
                    )
                )

            ranked = rank_recommendations(
                scored, top_n=self.config.top_n, strict_required=self.config.strict_required_categories
            )
            log_event(
                logger,
                logging.INFO,
                "recommendation_completed",
                correlation_id=correlation_id,
                candidate_count=len(scored),
                returned=len(ranked),
                scores=[recommendation.score for recommendation in ranked],
            )
            return ranked

    @instrument_operation(
        "recommender.handle_request",
        input_model=RecommendationRequest,
        on_validation_error=lambda exc: validation_failure("Invalid recommendation request", exc),
    )
    def handle_request(self, items: List[Dict[str, Any]], preferences: Dict[str, Any]) -> Dict[str, Any]:
        """Answer a JSON-shaped ``{items, preferences}`` request.

        Must be called with keyword arguments so the payload can be validated.
        Validation problems come back as a ``needs_review`` payload instead of
        an exception.
        """

        prefs = Preferences.from_raw(preferences)
        recommendations = self.recommend(items, prefs)
        response = RecommendationResponse(
            recommendations=[recommendation.as_dict() for recommendation in recommendations],
            preferences=prefs.as_dict(),
            total_items=len(items),
            algorithm={"version": ALGORITHM_VERSION, "parameters": prefs.as_dict()},
        )
        return response.model_dump(by_alias=True)

    def gaps(self, items: Iterable[WardrobeItem | Mapping[str, Any]]) -> List[str]:
        return _gaps(_coerce_items(items))

    def analyze(self, items: Iterable[WardrobeItem | Mapping[str, Any]]) -> WardrobeAnalysis:
        return analyze_wardrobe(_coerce_items(items))

    def style_trends(self, season: Optional[str] = None) -> SeasonalStyleGuide:
        return seasonal_style_guide(season)


_DEFAULT_RECOMMENDER: Optional[OutfitRecommender] = None


def _default_recommender() -> OutfitRecommender:
    global _DEFAULT_RECOMMENDER
    if _DEFAULT_RECOMMENDER is None:
        _DEFAULT_RECOMMENDER = OutfitRecommender(EngineConfig.from_env())
    return _DEFAULT_RECOMMENDER


def generate_recommendations(
    items: Iterable[WardrobeItem | Mapping[str, Any]],
    preferences: Preferences | Mapping[str, Any],
    rng: Optional[random.Random] = None,
    extended_signals: Optional[ExtendedSignals] = None,
) -> List[OutfitRecommendation]:
    """Rank outfits with the process-wide recommender; pass ``rng`` to pin results."""

    return _default_recommender().recommend(items, preferences, extended_signals=extended_signals, rng=rng)


def analyze_wardrobe_gaps(items: Iterable[WardrobeItem | Mapping[str, Any]]) -> List[str]:
    return _gaps(_coerce_items(items))


__all__ = ["OutfitRecommender", "generate_recommendations", "analyze_wardrobe_gaps"]
