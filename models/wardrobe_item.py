"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from models.taxonomy import Category, normalize_color_name, parse_category


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _first_present(metadata: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = metadata.get(key)
        if value is not None:
            return value
    return None


def _primary_color(metadata: Mapping[str, Any]) -> Optional[str]:
    """Return the item's primary color from either a flat or a document shape."""

    color = metadata.get("color")
    if color:
        return str(color)
    for entry in _ensure_list(metadata.get("colors")):
        if isinstance(entry, Mapping):
            primary = entry.get("primary")
            if primary:
                return str(primary)
        elif entry:
            return str(entry)
    return None


def _usage_count(metadata: Mapping[str, Any]) -> int:
    raw = _first_present(metadata, "usage_count", "usageCount")
    if raw is None:
        usage = metadata.get("usage")
        if isinstance(usage, Mapping):
            raw = usage.get("timesWorn")
    return int(raw or 0)


@dataclass
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    ``name`` doubles as display text and as the haystack for mood keyword
    matching. Only ``category`` is validated; everything else is optional.
    """

    item_id: str
    name: str
    category: Category
    color: Optional[str] = None
    material: Optional[str] = None
    style: Optional[str] = None
    occasions: List[str] = field(default_factory=list)
    seasons: List[str] = field(default_factory=list)
    usage_count: int = 0

    def __post_init__(self) -> None:
        self.category = parse_category(self.category)
        self.name = str(self.name or "")
        if self.color is not None:
            self.color = normalize_color_name(str(self.color)) or None
        self.occasions = [str(o).strip() for o in _ensure_list(self.occasions) if str(o).strip()]
        self.seasons = [str(s).strip().lower() for s in _ensure_list(self.seasons) if str(s).strip()]
        self.usage_count = max(0, int(self.usage_count or 0))


def from_raw_metadata(metadata: Mapping[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from loose item dictionaries.

    Accepts snake_case and camelCase keys as well as the document shape used by
    the item store (``_id``, ``usage.timesWorn``, ``colors[].primary``).
    """

    item_id = _first_present(metadata, "item_id", "id", "_id")
    required: Dict[str, Any] = {"id": item_id, "category": metadata.get("category")}
    missing = [key for key, value in required.items() if value in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    return WardrobeItem(
        item_id=str(item_id),
        name=str(metadata.get("name") or ""),
        category=metadata["category"],
        color=_primary_color(metadata),
        material=metadata.get("material"),
        style=metadata.get("style"),
        occasions=_ensure_list(metadata.get("occasions") or metadata.get("occasion")),
        seasons=_ensure_list(metadata.get("seasons") or metadata.get("season")),
        usage_count=_usage_count(metadata),
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
