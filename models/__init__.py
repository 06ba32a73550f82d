"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.preferences import ExtendedSignals, InvalidPreferencesError, Preferences, UnsupportedPreferenceError
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = [
    "WardrobeItem",
    "from_raw_metadata",
    "Preferences",
    "ExtendedSignals",
    "InvalidPreferencesError",
    "UnsupportedPreferenceError",
]
