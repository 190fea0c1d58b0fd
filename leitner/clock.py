"""Time source: the process-wide notion of "now", overridable for tests."""

from contextlib import contextmanager
from datetime import datetime, timedelta, timezone


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """A clock that only moves when told to.

    Usage:
        clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))
        clock.advance(hours=12)
    """

    def __init__(self, now: datetime | None = None):
        self._now = now or datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime):
        self._now = now

    def advance(self, delta: timedelta | None = None, **kwargs) -> datetime:
        self._now = self._now + (delta or timedelta(**kwargs))
        return self._now


_clock = SystemClock()


def get_clock():
    return _clock


def set_clock(clock):
    """Install a new process-wide clock. Returns the previous one."""
    global _clock
    previous = _clock
    _clock = clock if clock is not None else SystemClock()
    return previous


def get_now() -> datetime:
    return _clock.now()


@contextmanager
def use_clock(clock):
    previous = set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)
