"""Mappings between moods and the vocabulary used to score item names."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from models.taxonomy import Mood, parse_mood

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodStyleProfile:
    """Represents styling vocabulary for a given mood."""

    mood: Mood
    keywords: Tuple[str, ...]
    colors: Tuple[str, ...]
    avoid: Tuple[str, ...]


_MOOD_STYLES: Mapping[Mood, MoodStyleProfile] = MappingProxyType(
    {
        Mood.CONFIDENT: MoodStyleProfile(
            mood=Mood.CONFIDENT,
            keywords=("bold", "structured", "statement", "sharp", "commanding"),
            colors=("black", "red", "navy", "white"),
            avoid=("oversized", "muted", "casual"),
        ),
        Mood.COMFORTABLE: MoodStyleProfile(
            mood=Mood.COMFORTABLE,
            keywords=("soft", "relaxed", "cozy", "loose", "breathable"),
            colors=("neutral", "earth tones", "pastels"),
            avoid=("tight", "restrictive", "formal"),
        ),
        Mood.TRENDY: MoodStyleProfile(
            mood=Mood.TRENDY,
            keywords=("current", "fashionable", "stylish", "contemporary", "chic"),
            colors=("seasonal", "on-trend", "modern"),
            avoid=("outdated", "basic", "old-fashioned"),
        ),
        Mood.CLASSIC: MoodStyleProfile(
            mood=Mood.CLASSIC,
            keywords=("timeless", "elegant", "refined", "sophisticated", "traditional"),
            colors=("neutral", "black", "white", "navy", "beige"),
            avoid=("trendy", "flashy", "experimental"),
        ),
        Mood.BOLD: MoodStyleProfile(
            mood=Mood.BOLD,
            keywords=("vibrant", "daring", "eye-catching", "unique", "adventurous"),
            colors=("bright", "contrasting", "neon", "metallic"),
            avoid=("subtle", "muted", "conservative"),
        ),
        Mood.RELAXED: MoodStyleProfile(
            mood=Mood.RELAXED,
            keywords=("easygoing", "casual", "comfortable", "laid-back", "effortless"),
            colors=("soft", "muted", "neutral"),
            avoid=("formal", "structured", "complicated"),
        ),
        Mood.ROMANTIC: MoodStyleProfile(
            mood=Mood.ROMANTIC,
            keywords=("lace", "floral", "flowy", "silk", "delicate"),
            colors=("pastels", "blush", "cream"),
            avoid=("boxy", "athletic", "distressed"),
        ),
        Mood.EDGY: MoodStyleProfile(
            mood=Mood.EDGY,
            keywords=("leather", "studded", "distressed", "graphic", "asymmetric"),
            colors=("black", "gray", "metallic"),
            avoid=("preppy", "frilly", "pastel"),
        ),
    }
)


def get_mood_style(mood: Mood | str | None) -> Optional[MoodStyleProfile]:
    """Return the :class:`MoodStyleProfile` for a mood.

    Unrecognised mood strings have no profile and contribute nothing to
    scoring or style notes, so ``None`` is returned for them.
    """

    if isinstance(mood, Mood):
        return _MOOD_STYLES.get(mood)
    try:
        parsed = parse_mood(mood)
    except ValueError:
        logger.info("Unknown mood '%s', no style profile applied", mood)
        return None
    return _MOOD_STYLES.get(parsed)


__all__ = ["MoodStyleProfile", "get_mood_style"]
