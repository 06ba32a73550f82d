"""Pydantic schemas and helpers for validating recommendation request payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.preferences import Preferences
from models.taxonomy import parse_category, parse_event_type, parse_mood
from models.wardrobe_item import WardrobeItem

ALGORITHM_VERSION = "1.0"


class WardrobeItemPayload(BaseModel):
    """Input contract for one wardrobe item as sent by clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = ""
    category: str
    color: Optional[str] = None
    material: Optional[str] = None
    style: Optional[str] = None
    occasions: List[str] = Field(default_factory=list)
    seasons: List[str] = Field(default_factory=list)
    usage_count: int = Field(default=0, ge=0, alias="usageCount")

    @field_validator("category")
    @classmethod
    def _validate_category(cls, value: str) -> str:
        return parse_category(value).value

    def to_item(self) -> WardrobeItem:
        return WardrobeItem(
            item_id=self.id,
            name=self.name,
            category=self.category,
            color=self.color,
            material=self.material,
            style=self.style,
            occasions=list(self.occasions),
            seasons=list(self.seasons),
            usage_count=self.usage_count,
        )


class PreferencesPayload(BaseModel):
    """Input contract for event and mood preferences."""

    model_config = ConfigDict(populate_by_name=True)

    event_type: str = Field(min_length=1, alias="eventType")
    mood: str = Field(min_length=1)
    season: Optional[str] = None
    color_preference: Optional[str] = Field(default=None, alias="colorPreference")

    @field_validator("event_type")
    @classmethod
    def _validate_event_type(cls, value: str) -> str:
        return parse_event_type(value).value

    @field_validator("mood")
    @classmethod
    def _validate_mood(cls, value: str) -> str:
        return parse_mood(value).value

    def to_preferences(self) -> Preferences:
        return Preferences.from_raw(self.model_dump(by_alias=True))


class RecommendationRequest(BaseModel):
    """Envelope a host application posts to ask for outfits."""

    items: List[WardrobeItemPayload] = Field(default_factory=list)
    preferences: PreferencesPayload


class AlgorithmInfo(BaseModel):
    version: str = ALGORITHM_VERSION
    parameters: Dict[str, Any] = Field(default_factory=dict)


class RecommendationResponse(BaseModel):
    """Structure returned to presentation clients."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok", "needs_review"] = "ok"
    recommendations: List[Dict[str, Any]] = Field(default_factory=list)
    preferences: Dict[str, Any] = Field(default_factory=dict)
    total_items: int = Field(default=0, alias="totalItems")
    algorithm: AlgorithmInfo = Field(default_factory=AlgorithmInfo)


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "ALGORITHM_VERSION",
    "WardrobeItemPayload",
    "PreferencesPayload",
    "RecommendationRequest",
    "RecommendationResponse",
    "AlgorithmInfo",
    "ValidationResult",
    "validation_failure",
]
