"""Lesson: the root of a category tree plus its save state and history."""

import logging
import pathlib

from leitner.category import Category
from leitner.events import EventType
from leitner.history import LearnHistory

logger = logging.getLogger(__name__)


class Lesson:
    """Listens to its category tree and tracks whether it needs saving.

    Every card event except EXPIRED and every category event marks the
    lesson as modified. Expiration happens by itself over time and does not
    change anything that would be written to disk.
    """

    def __init__(self, root: Category | None = None, can_save: bool = False):
        self.root = root if root is not None else Category("All")
        self.root.add_observer(self)
        self.can_save = can_save
        self.path: pathlib.Path | None = None
        self.learn_history = LearnHistory()

    def on_card_event(self, kind, card, category, level):
        if kind is not EventType.EXPIRED:
            self._mark_modified(kind)

    def on_category_event(self, kind, category):
        self._mark_modified(kind)

    def _mark_modified(self, kind):
        if not self.can_save:
            logger.debug("%r modified by %s event", self, kind.value)
        self.can_save = True

    def mark_saved(self, path: pathlib.Path | str | None = None):
        """Clear the modified flag after the caller has written the lesson."""
        if path is not None:
            self.path = pathlib.Path(path)
        self.can_save = False

    def clone_without_progress(self) -> "Lesson":
        """Same categories and card content, all learn progress dropped."""
        return Lesson(self.root.clone_without_progress(), can_save=True)

    def _content(self) -> list[tuple]:
        return [(card.front.text, card.back.text) for card in self.root.get_cards()]

    def __eq__(self, other):
        if not isinstance(other, Lesson):
            return NotImplemented
        return self._content() == other._content()

    def __repr__(self):
        return f"Lesson({self.path})"
