"""Recommendation preferences and optional personalisation signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple

from models.taxonomy import EventType, Mood, normalize_color_name, parse_event_type, parse_mood


class InvalidPreferencesError(ValueError):
    """Raised when a preference object is missing a required field."""


class UnsupportedPreferenceError(InvalidPreferencesError):
    """Raised when an event type or mood has no entry in the rule tables."""

    def __init__(self, field_name: str, value: object, allowed: Iterable[str]) -> None:
        self.field_name = field_name
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"No rule for {field_name} '{value}'. Allowed: {self.allowed}")


@dataclass(frozen=True)
class Preferences:
    """What the wearer is dressing for and how they want to feel."""

    event_type: EventType
    mood: Mood
    season: Optional[str] = None
    color_preference: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: "Preferences | Mapping[str, Any]") -> "Preferences":
        """Parse a caller-supplied mapping into :class:`Preferences`.

        Both ``eventType``/``event_type`` and ``colorPreference``/
        ``color_preference`` spellings are accepted; ``seasonality`` is read as
        a fallback for ``season``.
        """

        if isinstance(raw, Preferences):
            return raw
        if not isinstance(raw, Mapping):
            raise InvalidPreferencesError("Preferences must be a mapping")

        event_raw = raw.get("eventType", raw.get("event_type"))
        mood_raw = raw.get("mood")
        missing = [
            name
            for name, value in (("eventType", event_raw), ("mood", mood_raw))
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise InvalidPreferencesError(f"Missing required preference fields: {missing}")

        try:
            event_type = parse_event_type(event_raw)
        except ValueError:
            raise UnsupportedPreferenceError("eventType", event_raw, [e.value for e in EventType]) from None
        try:
            mood = parse_mood(mood_raw)
        except ValueError:
            raise UnsupportedPreferenceError("mood", mood_raw, [m.value for m in Mood]) from None

        season = raw.get("season") or raw.get("seasonality")
        color = raw.get("colorPreference", raw.get("color_preference"))
        return cls(
            event_type=event_type,
            mood=mood,
            season=str(season) if season else None,
            color_preference=str(color) if color else None,
        )

    def as_dict(self) -> dict:
        return {
            "eventType": self.event_type.value,
            "mood": self.mood.value,
            "season": self.season,
            "colorPreference": self.color_preference,
        }


@dataclass(frozen=True)
class ExtendedSignals:
    """Per-user enrichment applied on top of the base score.

    Passing no signals at all gives the plain scoring used by lightweight
    clients; a populated instance adds the style, color and wear-history
    bonuses.
    """

    preferred_styles: Tuple[str, ...] = field(default_factory=tuple)
    favorite_colors: Tuple[str, ...] = field(default_factory=tuple)
    include_usage_history: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "preferred_styles",
            tuple(str(style).strip().lower() for style in self.preferred_styles if str(style).strip()),
        )
        object.__setattr__(
            self,
            "favorite_colors",
            tuple(normalize_color_name(str(color)) for color in self.favorite_colors if str(color).strip()),
        )

    @classmethod
    def from_user_profile(cls, profile: Mapping[str, Any]) -> "ExtendedSignals":
        """Build signals from a stored profile (``stylePreferences`` document shape)."""

        prefs = profile.get("stylePreferences") or profile.get("style_preferences") or {}
        return cls(
            preferred_styles=tuple(prefs.get("preferredStyles") or prefs.get("preferred_styles") or ()),
            favorite_colors=tuple(prefs.get("favoriteColors") or prefs.get("favorite_colors") or ()),
        )


__all__ = [
    "Preferences",
    "ExtendedSignals",
    "InvalidPreferencesError",
    "UnsupportedPreferenceError",
]
