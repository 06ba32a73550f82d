"""Static seasonal style guidance (trends, colors, styles and tips)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

SEASONS: Tuple[str, ...] = ("spring", "summer", "fall", "winter")

_SEASON_ALIASES = {"autumn": "fall"}


@dataclass(frozen=True)
class SeasonalStyleGuide:
    season: str
    trends: Tuple[str, ...]
    colors: Tuple[str, ...]
    styles: Tuple[str, ...]
    tips: Tuple[str, ...]

    def as_dict(self) -> dict:
        return {
            "season": self.season,
            "trends": list(self.trends),
            "colors": list(self.colors),
            "styles": list(self.styles),
            "tips": list(self.tips),
        }


_GUIDES: Mapping[str, SeasonalStyleGuide] = MappingProxyType(
    {
        "spring": SeasonalStyleGuide(
            season="spring",
            trends=("pastels", "florals", "light layers", "trench coats"),
            colors=("sage green", "lavender", "soft pink", "cream"),
            styles=("romantic", "casual", "bohemian"),
            tips=("Layer light pieces", "Incorporate fresh colors", "Add floral prints"),
        ),
        "summer": SeasonalStyleGuide(
            season="summer",
            trends=("bright colors", "breathable fabrics", "minimalist", "sandals"),
            colors=("coral", "turquoise", "yellow", "white"),
            styles=("minimalist", "casual", "trendy"),
            tips=("Choose breathable fabrics", "Embrace minimal styling", "Protect from sun"),
        ),
        "fall": SeasonalStyleGuide(
            season="fall",
            trends=("earth tones", "layering", "boots", "sweaters"),
            colors=("burgundy", "mustard", "brown", "olive"),
            styles=("classic", "edgy", "layered"),
            tips=("Master the art of layering", "Invest in quality outerwear", "Add warm accessories"),
        ),
        "winter": SeasonalStyleGuide(
            season="winter",
            trends=("dark colors", "cozy textures", "outerwear", "accessories"),
            colors=("navy", "black", "gray", "burgundy"),
            styles=("formal", "cozy", "structured"),
            tips=("Focus on warmth", "Add texture with knits", "Don't forget accessories"),
        ),
    }
)


def season_for_date(day: date) -> str:
    """Return the northern-hemisphere season for a calendar date."""

    month = day.month
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "fall"
    return "winter"


def seasonal_style_guide(season: Optional[str] = None, today: Optional[date] = None) -> SeasonalStyleGuide:
    """Return guidance for ``season``, or for the season of ``today`` when omitted.

    Raises a :class:`ValueError` for a season name outside :data:`SEASONS`.
    """

    if season is None:
        season = season_for_date(today or date.today())
    key = season.strip().lower()
    key = _SEASON_ALIASES.get(key, key)
    if key not in _GUIDES:
        raise ValueError(f"Unsupported season '{season}'. Allowed: {list(SEASONS)}")
    return _GUIDES[key]


__all__ = ["SEASONS", "SeasonalStyleGuide", "season_for_date", "seasonal_style_guide"]
