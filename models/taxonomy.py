"""Canonical taxonomy definitions for wardrobe items and preferences.

This module centralises the closed label sets used by the rule tables:
clothing categories, event types and moods. Free-form strings coming from
callers are mapped onto these enums by the ``parse_*`` helpers, which raise a
:class:`ValueError` for anything outside the taxonomy.
"""

from enum import Enum
from typing import Dict, Tuple, Type, TypeVar

E = TypeVar("E", bound=Enum)


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return " ".join(value.strip().lower().replace("_", " ").replace("-", " ").split())


class Category(str, Enum):
    TOPS = "Tops"
    BOTTOMS = "Bottoms"
    DRESSES = "Dresses"
    OUTERWEAR = "Outerwear"
    SHOES = "Shoes"
    ACCESSORIES = "Accessories"

    def __str__(self) -> str:
        return self.value


class EventType(str, Enum):
    WORK = "Work"
    CASUAL = "Casual"
    DATE_NIGHT = "Date Night"
    PARTY = "Party"
    FORMAL = "Formal"
    EXERCISE = "Exercise"

    def __str__(self) -> str:
        return self.value


class Mood(str, Enum):
    CONFIDENT = "Confident"
    COMFORTABLE = "Comfortable"
    TRENDY = "Trendy"
    CLASSIC = "Classic"
    BOLD = "Bold"
    RELAXED = "Relaxed"
    # extended moods
    ROMANTIC = "Romantic"
    EDGY = "Edgy"

    def __str__(self) -> str:
        return self.value


CORE_MOODS: Tuple[Mood, ...] = (
    Mood.CONFIDENT,
    Mood.COMFORTABLE,
    Mood.TRENDY,
    Mood.CLASSIC,
    Mood.BOLD,
    Mood.RELAXED,
)

ESSENTIAL_CATEGORIES: Tuple[Category, ...] = (Category.TOPS, Category.BOTTOMS, Category.SHOES)
VERSATILE_CATEGORIES: Tuple[Category, ...] = (Category.OUTERWEAR, Category.ACCESSORIES, Category.DRESSES)

_CATEGORY_ALIASES: Dict[str, Category] = {
    "top": Category.TOPS,
    "bottom": Category.BOTTOMS,
    "dress": Category.DRESSES,
    "shoe": Category.SHOES,
    "accessory": Category.ACCESSORIES,
}

_EVENT_ALIASES: Dict[str, EventType] = {
    "workout": EventType.EXERCISE,
    "datenight": EventType.DATE_NIGHT,
}

COLOR_MAP = {
    "navy blue": "navy",
    "navy": "navy",
    "light blue": "blue",
    "sky blue": "blue",
    "blue": "blue",
    "black": "black",
    "white": "white",
    "off white": "white",
    "cream": "beige",
    "beige": "beige",
    "tan": "beige",
    "brown": "brown",
    "gray": "gray",
    "grey": "gray",
    "green": "green",
    "olive": "green",
    "red": "red",
    "burgundy": "red",
    "pink": "pink",
    "yellow": "yellow",
    "orange": "orange",
}


def _parse(enum_cls: Type[E], value: object, aliases: Dict[str, E], label: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Missing {label}")
    key = _normalize_key(value)
    for member in enum_cls:
        if _normalize_key(member.value) == key:
            return member
    if key in aliases:
        return aliases[key]
    allowed = [member.value for member in enum_cls]
    raise ValueError(f"Unsupported {label} '{value}'. Allowed: {allowed}")


def parse_category(value: object) -> Category:
    """Validate and normalise a category value.

    Accepts the canonical plural labels in any case as well as singular
    aliases such as ``"top"``.
    """

    return _parse(Category, value, _CATEGORY_ALIASES, "category")


def parse_event_type(value: object) -> EventType:
    """Map a free string onto :class:`EventType`; ``Workout`` means Exercise."""

    return _parse(EventType, value, _EVENT_ALIASES, "event type")


def parse_mood(value: object) -> Mood:
    return _parse(Mood, value, {}, "mood")


def normalize_color_name(raw_string: str) -> str:
    """Map a raw color string to a canonical color name."""

    key = raw_string.strip().lower()
    return COLOR_MAP.get(key, key)


__all__ = [
    "Category",
    "EventType",
    "Mood",
    "CORE_MOODS",
    "ESSENTIAL_CATEGORIES",
    "VERSATILE_CATEGORIES",
    "COLOR_MAP",
    "parse_category",
    "parse_event_type",
    "parse_mood",
    "normalize_color_name",
]
