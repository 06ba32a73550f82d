"""Per-event category rules driving outfit assembly and event scoring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from models.taxonomy import Category, EventType, parse_event_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventRule:
    """Categories an outfit must contain, may contain, and keywords to steer away from."""

    required: Tuple[Category, ...]
    optional: Tuple[Category, ...]
    excludes: Tuple[str, ...]


EVENT_RULES: Mapping[EventType, EventRule] = MappingProxyType(
    {
        EventType.WORK: EventRule(
            required=(Category.TOPS, Category.BOTTOMS),
            optional=(Category.OUTERWEAR, Category.SHOES, Category.ACCESSORIES),
            excludes=("casual wear", "athletic wear"),
        ),
        EventType.CASUAL: EventRule(
            required=(Category.TOPS,),
            optional=(Category.BOTTOMS, Category.OUTERWEAR, Category.SHOES, Category.ACCESSORIES),
            excludes=("formal wear",),
        ),
        EventType.DATE_NIGHT: EventRule(
            required=(Category.TOPS, Category.BOTTOMS),
            optional=(Category.DRESSES, Category.OUTERWEAR, Category.SHOES, Category.ACCESSORIES),
            excludes=("athletic wear", "loungewear"),
        ),
        EventType.PARTY: EventRule(
            required=(Category.TOPS,),
            optional=(
                Category.BOTTOMS,
                Category.DRESSES,
                Category.OUTERWEAR,
                Category.SHOES,
                Category.ACCESSORIES,
            ),
            excludes=("work wear", "athletic wear"),
        ),
        EventType.FORMAL: EventRule(
            required=(Category.TOPS, Category.BOTTOMS),
            optional=(Category.DRESSES, Category.OUTERWEAR, Category.SHOES, Category.ACCESSORIES),
            excludes=("casual wear", "athletic wear"),
        ),
        EventType.EXERCISE: EventRule(
            required=(Category.TOPS, Category.BOTTOMS),
            optional=(Category.OUTERWEAR, Category.SHOES),
            excludes=("formal wear", "delicate fabrics"),
        ),
    }
)


def get_event_rule(event_type: EventType | str | None) -> Optional[EventRule]:
    """Return the rule for an event type, or ``None`` when no rule exists."""

    if isinstance(event_type, EventType):
        return EVENT_RULES.get(event_type)
    try:
        parsed = parse_event_type(event_type)
    except ValueError:
        logger.info("No event rule for '%s'", event_type)
        return None
    return EVENT_RULES.get(parsed)


__all__ = ["EventRule", "EVENT_RULES", "get_event_rule"]
