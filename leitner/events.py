"""Event kinds fired by cards and categories."""

from enum import Enum


class EventType(Enum):
    ADDED = "added"
    REMOVED = "removed"
    EDITED = "edited"
    DECK = "deck"        # level, deck or per-side counter change
    EXPIRED = "expired"  # time-driven, raised by a sweep
