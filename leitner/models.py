"""Card and CardSide: the reviewable item and its two faces."""

import copy
import itertools
import weakref
from datetime import datetime

from leitner.clock import get_now
from leitner.events import EventType
from leitner.text import FormattedText

_card_ids = itertools.count(1)


class CardSide:
    """One face of a card: text plus attached image ids.

    Observers are plain objects with ``on_text_changed(side, text)`` and
    ``on_images_changed(side, images)``. They are notified synchronously, in
    registration order, and only when the value actually changed. Setting the
    text here does not touch the owning card's modification date; use
    ``Card.set_sides`` for edits made by the user.
    """

    def __init__(self, text: FormattedText | None = None):
        self._text: FormattedText | None = None
        self._images: list[str] = []
        self._observers: list = []
        if text is not None:
            self.set_text(text)

    @property
    def text(self) -> FormattedText | None:
        return self._text

    @property
    def images(self) -> list[str]:
        return list(self._images)

    def set_text(self, text: FormattedText):
        if text == self._text:
            return
        self._text = text
        for observer in list(self._observers):
            observer.on_text_changed(self, text)

    def set_images(self, ids: list[str]):
        ids = list(ids)
        if set(ids) == set(self._images):
            return
        self._images = ids
        for observer in list(self._observers):
            observer.on_images_changed(self, self.images)

    def add_observer(self, observer):
        self._observers.append(observer)

    def remove_observer(self, observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def clone(self) -> "CardSide":
        side = CardSide()
        side._text = self._text.clone() if self._text is not None else None
        side._images = list(self._images)
        return side

    def __str__(self):
        return self._text.get_unformatted() if self._text is not None else ""

    def __repr__(self):
        return f"CardSide({str(self)!r}, images={self._images!r})"


def _as_side(value) -> CardSide:
    if isinstance(value, CardSide):
        return value
    if isinstance(value, str):
        value = FormattedText.formatted(value)
    return CardSide(value)


def _as_text(value) -> FormattedText | None:
    if isinstance(value, str):
        return FormattedText.unformatted(value)
    return value


class _SideObserver:
    """Forwards image edits on a side to the owning card."""

    def __init__(self, card: "Card"):
        self._card = weakref.ref(card)

    def on_text_changed(self, side, text):
        # set_sides stamps the card and fires EDITED once for both sides
        pass

    def on_images_changed(self, side, images):
        card = self._card()
        if card is not None:
            card._on_side_edited()


class Card:
    """A flash card with a front and back side that can be learned.

    A card is unlearned until it gets an expiration date, learned while that
    date is in the future, and expired once it has passed. Level and
    expiration are changed by the review session and the owning category;
    content edits never touch them.

    Usage:
        card = Card("2+2", "4")
        category.add_card(card)
        card.set_sides("2+3", "5")   # fires EDITED through the category
    """

    def __init__(self, front, back, created: datetime | None = None):
        if created is None:
            created = get_now()
        self.id = next(_card_ids)
        self._category = None
        self._level = 0
        self._front = _as_side(front)
        self._back = _as_side(back)
        self._date_created = created
        self._date_modified = created
        self._date_touched = created
        self._date_tested: datetime | None = None
        self._date_expired: datetime | None = None
        self._tests_total = 0
        self._tests_passed = 0
        self._front_learned = 0
        self._back_learned = 0
        self._attach_side_observers()

    # -- content ------------------------------------------------------------

    @property
    def front(self) -> CardSide:
        return self._front

    @property
    def back(self) -> CardSide:
        return self._back

    def set_sides(self, front, back):
        """Replace the text of both sides.

        Plain strings are taken as unformatted text. Raises ValueError if
        either side is empty; nothing is changed in that case.
        """
        front = _as_text(front)
        back = _as_text(back)
        for text in (front, back):
            if text is None or text.is_empty():
                raise ValueError("Card sides can't be empty.")

        if front == self._front.text and back == self._back.text:
            return
        self._front.set_text(front)
        self._back.set_text(back)
        self._on_side_edited()

    def _on_side_edited(self):
        category = self.category
        if category is None:
            return
        self._date_modified = max(get_now(), self._date_created)
        category.fire_card_event(EventType.EDITED, self, category, self._level)

    def _attach_side_observers(self):
        observer = _SideObserver(self)
        self._front.add_observer(observer)
        self._back.add_observer(observer)

    # -- level and ownership ------------------------------------------------

    @property
    def level(self) -> int:
        return self._level

    def _set_level(self, level: int):
        # Only Category changes the level, so the card stays in the matching deck.
        if level < 0:
            raise ValueError(f"Level can't be negative: {level}")
        self._level = level

    @property
    def category(self):
        return self._category() if self._category is not None else None

    def _set_category(self, category):
        # Only Category assigns or clears ownership.
        self._category = weakref.ref(category) if category is not None else None

    # -- dates --------------------------------------------------------------

    @property
    def date_created(self) -> datetime:
        return self._date_created

    def set_date_created(self, date: datetime):
        if date is None:
            raise ValueError("Creation date can't be None.")
        if date > self._date_modified:
            raise ValueError("Creation date can't be after modification date.")
        self._date_created = date

    @property
    def date_modified(self) -> datetime:
        return self._date_modified

    def set_date_modified(self, date: datetime):
        if date is None or date < self._date_created:
            raise ValueError("Modification date can't be before creation date.")
        self._date_modified = date

    @property
    def date_tested(self) -> datetime | None:
        return self._date_tested

    def set_date_tested(self, date: datetime):
        """Record a graded review. Testing always counts as a touch."""
        self._date_tested = date
        self._date_touched = date

    @property
    def date_expired(self) -> datetime | None:
        return self._date_expired

    def set_date_expired(self, date: datetime | None):
        """Set the due date directly. None means never reviewed.

        Fires no event; callers that change expiration as part of a review
        move the card through its category, which fires DECK.
        """
        self._date_expired = date

    @property
    def date_touched(self) -> datetime:
        return self._date_touched

    def set_date_touched(self, date: datetime):
        self._date_touched = date

    def sort_key(self) -> tuple:
        """Global ordering key across all categories: touched date, then id."""
        return (self._date_touched, self.id)

    # -- learn state --------------------------------------------------------

    def is_unlearned(self) -> bool:
        return self._date_expired is None

    def is_learned(self, now: datetime | None = None) -> bool:
        if self._date_expired is None:
            return False
        return self._date_expired > (now or get_now())

    def is_expired(self, now: datetime | None = None) -> bool:
        if self._date_expired is None:
            return False
        return self._date_expired <= (now or get_now())

    # -- statistics ---------------------------------------------------------

    @property
    def tests_total(self) -> int:
        return self._tests_total

    @property
    def tests_passed(self) -> int:
        return self._tests_passed

    @property
    def pass_ratio(self) -> int:
        """Percentage of passed tests, rounded half up. 0 when never tested."""
        if self._tests_total == 0:
            return 0
        return int(100 * self._tests_passed / self._tests_total + 0.5)

    def inc_stats(self, hit: int, total: int):
        if hit < 0 or total < 0:
            raise ValueError("Test counts can't be negative.")
        if hit > total:
            raise ValueError(f"Passed tests ({hit}) exceed total tests ({total}).")
        self._tests_total += total
        self._tests_passed += hit

    def reset_stats(self):
        self._tests_total = 0
        self._tests_passed = 0
        self._front_learned = 0
        self._back_learned = 0

    def get_learned_amount(self, frontside: bool) -> int:
        return self._front_learned if frontside else self._back_learned

    def set_learned_amount(self, frontside: bool, amount: int):
        if amount < 0:
            raise ValueError(f"Learned amount can't be negative: {amount}")
        if frontside:
            self._front_learned = amount
        else:
            self._back_learned = amount
        category = self.category
        if category is not None:
            category.fire_card_event(EventType.DECK, self, category, self._level)

    def increment_learned_amount(self, frontside: bool):
        self.set_learned_amount(frontside, self.get_learned_amount(frontside) + 1)

    def reset_learned_amount(self):
        self.set_learned_amount(True, 0)
        self.set_learned_amount(False, 0)

    # -- copies -------------------------------------------------------------

    def clone(self) -> "Card":
        """Full copy including progress. The copy belongs to no category."""
        card = copy.copy(self)
        card.id = next(_card_ids)
        card._category = None
        card._front = self._front.clone()
        card._back = self._back.clone()
        card._attach_side_observers()
        assert card._front.text == self._front.text
        assert card._back.text == self._back.text
        return card

    def clone_without_progress(self) -> "Card":
        """Fresh copy of the content: same creation date, no learn progress."""
        card = Card(self._front.clone(), self._back.clone(), created=self._date_created)
        assert card.level == 0 and card.is_unlearned()
        return card

    def __str__(self):
        return f"({self._front}/{self._back})"

    def __repr__(self):
        return f"Card(id={self.id}, level={self._level}, {self})"
