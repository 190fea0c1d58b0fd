"""Doubling strategy: level n is due 2**(n-1) days after the review.

Level 0 (never passed, or just failed) has no due date, so the card is
unlearned and shows up in the next session again.
"""

from datetime import timedelta


class Strategy:
    strategy_id = "doubling"

    def __init__(self, max_days: int = 365):
        self.max_days = max_days

    def interval(self, level: int) -> timedelta | None:
        if level <= 0:
            return None
        return timedelta(days=min(2 ** (level - 1), self.max_days))

    def expiration_date(self, level, now):
        interval = self.interval(level)
        return now + interval if interval is not None else None
