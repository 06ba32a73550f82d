"""Lightweight evaluation harness for seeded end-to-end scenarios."""

from __future__ import annotations

import random
from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.ranking import calculate_confidence_level
from models.outfit import OutfitRecommendation
from services.outfit_recommender import OutfitRecommender
from stylist_app.config import EngineConfig


def _categories(outfit: OutfitRecommendation) -> set:
    return {item.category.value for item in outfit.items}


def _evaluate_expectations(
    expectations: Dict[str, object], outfits: List[OutfitRecommendation], gaps: List[str]
) -> Dict[str, bool]:
    checks: Dict[str, bool] = {"top_n_bound": len(outfits) <= 3}
    if "min_outfits" in expectations:
        checks["min_outfits"] = len(outfits) >= int(expectations["min_outfits"])
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    if expectations.get("required_categories"):
        required = set(expectations["required_categories"])
        checks["required_categories"] = all(required <= _categories(outfit) for outfit in outfits)
    if expectations.get("missing_categories"):
        missing = set(expectations["missing_categories"])
        checks["missing_categories"] = all(not (missing & _categories(outfit)) for outfit in outfits)
    if expectations.get("positive_scores"):
        checks["positive_scores"] = all(outfit.score > 0 for outfit in outfits)
    if expectations.get("confidence_matches_thresholds"):
        checks["confidence_matches_thresholds"] = all(
            outfit.confidence_level == calculate_confidence_level(outfit.score, len(outfit.items))
            for outfit in outfits
        )
    if "gap_count" in expectations:
        checks["gap_count"] = len(gaps) == int(expectations["gap_count"])
    return checks


def run_scenario(scenario: EvaluationScenario, seed: int = 7) -> Dict[str, object]:
    recommender = OutfitRecommender(EngineConfig(), rng=random.Random(seed))
    outfits = recommender.recommend(scenario.wardrobe_items, scenario.preferences)
    gaps = recommender.gaps(scenario.wardrobe_items)
    checks = _evaluate_expectations(scenario.expectations, outfits, gaps)
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "outfit_count": len(outfits),
        "outfits": [outfit.as_dict() for outfit in outfits],
    }


def run_evaluation_suite(seed: int = 7) -> List[Dict[str, object]]:
    return [run_scenario(scenario, seed=seed) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
