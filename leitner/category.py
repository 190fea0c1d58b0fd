"""Category: a tree node that owns cards and groups them into per-level decks."""

import logging
import weakref
from datetime import datetime

from leitner.clock import get_now
from leitner.events import EventType
from leitner.models import Card

logger = logging.getLogger(__name__)


class Category:
    """Container for cards and child categories.

    Card events bubble up: every event fired in a category is delivered to
    its own observers and then to its parent, so an observer of the root sees
    the whole tree. Observers implement ``on_card_event(kind, card, category,
    level)`` and ``on_category_event(kind, category)``.
    """

    def __init__(self, name: str):
        self.name = name
        self._parent = None
        self._children: list["Category"] = []
        self._decks: list[list[Card]] = []
        self._observers: list = []

    # -- tree ---------------------------------------------------------------

    @property
    def parent(self) -> "Category | None":
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> list["Category"]:
        return list(self._children)

    @property
    def path(self) -> str:
        parent = self.parent
        return f"{parent.path}/{self.name}" if parent is not None else self.name

    def add_category(self, child: "Category") -> "Category":
        if child.parent is not None:
            raise ValueError(f"Category {child.name!r} already has a parent.")
        child._parent = weakref.ref(self)
        self._children.append(child)
        self.fire_category_event(EventType.ADDED, child)
        return child

    def remove_category(self, child: "Category"):
        if child not in self._children:
            raise ValueError(f"{child.name!r} is not a child of {self.name!r}.")
        # fire before detaching so the event still reaches the root
        self.fire_category_event(EventType.REMOVED, child)
        self._children.remove(child)
        child._parent = None

    # -- cards and decks ----------------------------------------------------

    @property
    def number_of_decks(self) -> int:
        """Number of decks in this subtree: highest occupied level + 1."""
        levels = [card.level for card in self.get_cards()]
        return max(levels) + 1 if levels else 0

    def add_card(self, card: Card, level: int = 0) -> Card:
        if card.category is not None:
            raise ValueError(f"{card!r} already belongs to {card.category.name!r}.")
        card._set_level(level)
        self._deck(level).append(card)
        card._set_category(self)
        logger.debug("added %r to %s", card, self.path)
        self.fire_card_event(EventType.ADDED, card, self, level)
        return card

    def remove_card(self, card: Card):
        if card.category is not self:
            raise ValueError(f"{card!r} does not belong to {self.name!r}.")
        self._decks[card.level].remove(card)
        self.fire_card_event(EventType.REMOVED, card, self, card.level)
        card._set_category(None)
        logger.debug("removed %r from %s", card, self.path)

    def move_card(self, card: Card, level: int):
        """Put a card of this category into the deck for ``level``."""
        if card.category is not self:
            raise ValueError(f"{card!r} does not belong to {self.name!r}.")
        if level < 0:
            raise ValueError(f"Level can't be negative: {level}")
        self._decks[card.level].remove(card)
        card._set_level(level)
        self._deck(level).append(card)
        logger.debug("moved %r to deck %d in %s", card, level, self.path)
        self.fire_card_event(EventType.DECK, card, self, level)

    def get_local_cards(self, level: int | None = None) -> list[Card]:
        if level is not None:
            return list(self._decks[level]) if level < len(self._decks) else []
        return [card for deck in self._decks for card in deck]

    def get_cards(self, level: int | None = None) -> list[Card]:
        cards = self.get_local_cards(level)
        for child in self._children:
            cards.extend(child.get_cards(level))
        return cards

    def get_learned_cards(self, now: datetime | None = None) -> list[Card]:
        now = now or get_now()
        return [c for c in self.get_cards() if c.is_learned(now)]

    def get_expired_cards(self, now: datetime | None = None) -> list[Card]:
        now = now or get_now()
        return [c for c in self.get_cards() if c.is_expired(now)]

    def get_unlearned_cards(self) -> list[Card]:
        return [c for c in self.get_cards() if c.is_unlearned()]

    def reset_cards(self):
        """Send every card in this subtree back to level 0, unlearned."""
        now = get_now()
        for card in self.get_cards():
            card.set_date_expired(None)
            card.set_date_touched(now)
            card.category.move_card(card, 0)

    def sweep_expired(self, since: datetime, now: datetime | None = None) -> list[Card]:
        """Fire EXPIRED for cards whose due date passed in ``(since, now]``.

        Expiration is a function of time, not a stored transition, so a
        periodic caller decides when to sweep. Returns the expired cards.
        """
        now = now or get_now()
        expired = [c for c in self.get_cards()
                   if c.date_expired is not None and since < c.date_expired <= now]
        for card in expired:
            card.category.fire_card_event(EventType.EXPIRED, card, card.category, card.level)
        if expired:
            logger.debug("%d card(s) expired in %s", len(expired), self.path)
        return expired

    def _deck(self, level: int) -> list[Card]:
        while len(self._decks) <= level:
            self._decks.append([])
        return self._decks[level]

    # -- observers ----------------------------------------------------------

    def add_observer(self, observer):
        self._observers.append(observer)

    def remove_observer(self, observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def fire_card_event(self, kind: EventType, card: Card, category: "Category", level: int):
        for observer in list(self._observers):
            observer.on_card_event(kind, card, category, level)
        parent = self.parent
        if parent is not None:
            parent.fire_card_event(kind, card, category, level)

    def fire_category_event(self, kind: EventType, category: "Category"):
        for observer in list(self._observers):
            observer.on_category_event(kind, category)
        parent = self.parent
        if parent is not None:
            parent.fire_category_event(kind, category)

    # -- copies -------------------------------------------------------------

    def clone_without_progress(self) -> "Category":
        clone = Category(self.name)
        for card in self.get_local_cards():
            clone.add_card(card.clone_without_progress())
        for child in self._children:
            clone.add_category(child.clone_without_progress())
        return clone

    def __repr__(self):
        return f"Category({self.path!r}, cards={len(self.get_cards())})"
