"""Shared test fixtures."""

import pathlib
import shutil
from datetime import datetime, timezone

import pytest

from leitner.app import App
from leitner.category import Category
from leitner.clock import FixedClock, set_clock

T0 = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


class EventRecorder:
    """Observer that records every card and category event it receives."""

    def __init__(self):
        self.card_events = []
        self.category_events = []

    def on_card_event(self, kind, card, category, level):
        self.card_events.append((kind, card, category, level))

    def on_category_event(self, kind, category):
        self.category_events.append((kind, category))

    def kinds(self):
        return [e[0] for e in self.card_events]


@pytest.fixture
def clock():
    """Fixed clock at T0, installed as the process clock for the test."""
    c = FixedClock(T0)
    previous = set_clock(c)
    yield c
    set_clock(previous)


@pytest.fixture
def tmp_leitner_dir(tmp_path):
    """Temporary leitner directory with the example strategy copied in."""
    leitner_dir = tmp_path / "leitner_dir"
    (leitner_dir / "strategies" / "doubling").mkdir(parents=True)

    example_strategy = (pathlib.Path(__file__).parent.parent / "example_leitner_dir"
                        / "strategies" / "doubling" / "doubling.py")
    if example_strategy.exists():
        shutil.copy(example_strategy, leitner_dir / "strategies" / "doubling" / "doubling.py")

    return leitner_dir


@pytest.fixture
def strategy(tmp_leitner_dir):
    from leitner.strategies import load_strategy
    return load_strategy("doubling", tmp_leitner_dir)


@pytest.fixture
def app(tmp_leitner_dir, clock):
    return App(leitner_dir=tmp_leitner_dir, clock=clock)


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def category(recorder):
    """Category with an attached event recorder."""
    cat = Category("Math")
    cat.add_observer(recorder)
    return cat
