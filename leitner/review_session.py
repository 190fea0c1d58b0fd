"""ReviewSession: presents due cards and grades them."""

import logging

from leitner.category import Category
from leitner.clock import get_clock
from leitner.history import SessionSummary
from leitner.models import Card

logger = logging.getLogger(__name__)


class ReviewSession:
    """Walks the expired and unlearned cards of a category tree.

    Grading a card is one logical action: counters, tested date, level and
    expiration are updated together and the card is moved into its new deck,
    which fires DECK through the owning category.
    """

    def __init__(self, category: Category, strategy, clock=None, lesson=None):
        self.category = category
        self.strategy = strategy
        self.clock = clock or get_clock()
        self.lesson = lesson
        self.start = self.clock.now()
        self.passed = 0
        self.failed = 0
        self.skipped = 0
        self.handled_ids: set[int] = set()

    def due_cards(self) -> list[Card]:
        """Expired and unlearned cards not yet handled, in touched order."""
        now = self.clock.now()
        cards = [c for c in self.category.get_cards()
                 if c.id not in self.handled_ids and (c.is_unlearned() or c.is_expired(now))]
        return sorted(cards, key=Card.sort_key)

    def next_card(self) -> Card | None:
        cards = self.due_cards()
        return cards[0] if cards else None

    def remaining_count(self) -> int:
        return len(self.due_cards())

    def grade(self, card: Card, passed: bool, frontside: bool = True):
        owner = card.category
        if owner is None:
            raise ValueError(f"{card!r} is not part of any category.")
        now = self.clock.now()
        level = card.level + 1 if passed else 0
        # the strategy may raise; nothing on the card has changed yet
        expires = self.strategy.expiration_date(level, now)

        card.inc_stats(1 if passed else 0, 1)
        card.set_date_tested(now)
        if passed:
            card.increment_learned_amount(frontside)
            self.passed += 1
        else:
            self.failed += 1
        card.set_date_expired(expires)
        owner.move_card(card, level)
        self.handled_ids.add(card.id)

    def skip(self, card: Card):
        """Leave the card for another session. Skipping is not a test."""
        self.handled_ids.add(card.id)
        self.skipped += 1

    def finish(self) -> SessionSummary:
        summary = SessionSummary(start=self.start, end=self.clock.now(),
                                 passed=self.passed, failed=self.failed,
                                 skipped=self.skipped)
        if self.lesson is not None:
            self.lesson.learn_history.add_summary(summary)
        logger.info("session finished: %d passed, %d failed, %d skipped",
                    summary.passed, summary.failed, summary.skipped)
        return summary
