"""Tests for leitner.clock."""

from datetime import datetime, timedelta, timezone

from leitner.clock import FixedClock, SystemClock, get_clock, get_now, set_clock, use_clock

T = datetime(2024, 6, 1, tzinfo=timezone.utc)


def test_system_clock_is_utc():
    now = SystemClock().now()
    assert now.tzinfo is timezone.utc


def test_fixed_clock_advance():
    c = FixedClock(T)
    assert c.now() == T
    c.advance(hours=12)
    assert c.now() == T + timedelta(hours=12)
    c.advance(timedelta(days=1))
    assert c.now() == T + timedelta(days=1, hours=12)


def test_fixed_clock_set():
    c = FixedClock(T)
    c.set(T + timedelta(days=3))
    assert c.now() == T + timedelta(days=3)


def test_set_clock_returns_previous():
    c = FixedClock(T)
    previous = set_clock(c)
    try:
        assert get_now() == T
        assert get_clock() is c
    finally:
        set_clock(previous)
    assert get_clock() is previous


def test_set_clock_none_restores_system_clock():
    previous = set_clock(None)
    try:
        assert isinstance(get_clock(), SystemClock)
    finally:
        set_clock(previous)


def test_use_clock_restores_on_exit():
    before = get_clock()
    with use_clock(FixedClock(T)) as c:
        assert get_now() == T
        c.advance(minutes=5)
        assert get_now() == T + timedelta(minutes=5)
    assert get_clock() is before
