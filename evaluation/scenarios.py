"""Evaluation scenarios covering the documented end-to-end behaviours."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class EvaluationScenario:
    name: str
    description: str
    preferences: Dict[str, str]
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object] = field(default_factory=dict)


def _item(item_id: str, category: str, name: str, **extra: object) -> Dict[str, object]:
    return {"id": item_id, "category": category, "name": name, **extra}


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="work_confident_basics",
        description="Shirt, jeans and boots for a confident work day.",
        preferences={"eventType": "Work", "mood": "Confident"},
        wardrobe_items=[
            _item("t1", "Tops", "White Shirt"),
            _item("b1", "Bottoms", "Black Jeans"),
            _item("s1", "Shoes", "Black Boots"),
        ],
        expectations={
            "min_outfits": 1,
            "required_categories": ["Tops", "Bottoms"],
            "positive_scores": True,
            "confidence_matches_thresholds": True,
        },
    ),
    EvaluationScenario(
        name="empty_wardrobe",
        description="Nothing to wear yields nothing to recommend.",
        preferences={"eventType": "Party", "mood": "Bold"},
        wardrobe_items=[],
        expectations={"max_outfits": 0, "gap_count": 6},
    ),
    EvaluationScenario(
        name="accessories_only_work",
        description="Only accessories cannot satisfy a work outfit.",
        preferences={"eventType": "Work", "mood": "Classic"},
        wardrobe_items=[
            _item("a1", "Accessories", "Leather Belt"),
            _item("a2", "Accessories", "Silver Watch"),
        ],
        expectations={"missing_categories": ["Tops", "Bottoms"]},
    ),
    EvaluationScenario(
        name="tops_only_casual",
        description="Casual needs only a top, so every outfit meets the rule.",
        preferences={"eventType": "Casual", "mood": "Relaxed"},
        wardrobe_items=[_item(f"t{i}", "Tops", f"Easygoing Tee {i}") for i in range(10)],
        expectations={"required_categories": ["Tops"]},
    ),
    EvaluationScenario(
        name="one_of_everything",
        description="A wardrobe covering every category has no gaps.",
        preferences={"eventType": "Date Night", "mood": "Bold"},
        wardrobe_items=[
            _item("t1", "Tops", "Vibrant Silk Blouse", color="red"),
            _item("b1", "Bottoms", "Black Trousers", color="black"),
            _item("d1", "Dresses", "Daring Slip Dress", color="red"),
            _item("o1", "Outerwear", "Leather Jacket", color="black"),
            _item("s1", "Shoes", "Heeled Boots", color="black"),
            _item("a1", "Accessories", "Statement Earrings", color="gold"),
        ],
        expectations={"min_outfits": 1, "gap_count": 0, "required_categories": ["Tops", "Bottoms"]},
    ),
]

__all__ = ["EvaluationScenario", "SCENARIOS"]
