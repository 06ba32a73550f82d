"""Outfit recommendation schemas."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from models.wardrobe_item import WardrobeItem


class ConfidenceLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Additive score terms for one candidate; ``total`` is clamped at zero."""

    cardinality: int
    event_compliance: int
    mood_compliance: int
    variety: int
    style_preference: int = 0
    color_preference: int = 0
    usage_history: int = 0

    @property
    def raw_total(self) -> int:
        return (
            self.cardinality
            + self.event_compliance
            + self.mood_compliance
            + self.variety
            + self.style_preference
            + self.color_preference
            + self.usage_history
        )

    @property
    def total(self) -> int:
        return max(0, self.raw_total)

    def as_dict(self) -> Dict[str, int]:
        return {
            "cardinality": self.cardinality,
            "eventCompliance": self.event_compliance,
            "moodCompliance": self.mood_compliance,
            "variety": self.variety,
            "stylePreference": self.style_preference,
            "colorPreference": self.color_preference,
            "usageHistory": self.usage_history,
        }


@dataclass(frozen=True)
class OutfitRecommendation:
    recommendation_id: str
    items: List[WardrobeItem]
    score: int
    reasoning: str
    style_notes: List[str] = field(default_factory=list)
    confidence_level: ConfidenceLevel = ConfidenceLevel.LOW
    score_breakdown: Optional[ScoreBreakdown] = None

    def as_dict(self) -> dict:
        """Render the presentation shape consumed by clients."""

        return {
            "id": self.recommendation_id,
            "items": [
                {
                    "id": item.item_id,
                    "name": item.name,
                    "category": item.category.value,
                    "color": item.color,
                    "style": item.style,
                }
                for item in self.items
            ],
            "score": self.score,
            "reasoning": self.reasoning,
            "styleNotes": list(self.style_notes),
            "confidenceLevel": self.confidence_level.value,
        }
