"""Occasion and mood specific styling tips."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from models.taxonomy import EventType, Mood

STYLING_RULES: Mapping[Tuple[EventType, Mood], str] = MappingProxyType(
    {
        (EventType.WORK, Mood.CONFIDENT): (
            "Layer a structured blazer for authority and add a statement accessory"
        ),
        (EventType.DATE_NIGHT, Mood.BOLD): (
            "Choose one statement piece as your focal point and keep other items complementary"
        ),
        (EventType.CASUAL, Mood.COMFORTABLE): (
            "Opt for soft fabrics and relaxed fits that allow for easy movement"
        ),
        (EventType.PARTY, Mood.TRENDY): (
            "Mix textures and add eye-catching accessories to elevate your look"
        ),
        (EventType.FORMAL, Mood.CLASSIC): (
            "Stick to neutral colors and timeless silhouettes for an elegant appearance"
        ),
    }
)


def styling_tip(event_type: EventType, mood: Mood) -> Optional[str]:
    return STYLING_RULES.get((event_type, mood))


__all__ = ["STYLING_RULES", "styling_tip"]
