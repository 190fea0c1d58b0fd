"""Tests for strategy loading and the example doubling strategy."""

from datetime import timedelta

import pytest

from conftest import T0
from leitner.strategies import load_strategy


def test_load_strategy(tmp_leitner_dir):
    strategy = load_strategy("doubling", tmp_leitner_dir)
    assert strategy.strategy_id == "doubling"


def test_load_missing_strategy(tmp_leitner_dir):
    with pytest.raises(FileNotFoundError):
        load_strategy("nope", tmp_leitner_dir)


def test_level_zero_has_no_due_date(strategy):
    assert strategy.expiration_date(0, T0) is None


@pytest.mark.parametrize("level,days", [(1, 1), (2, 2), (3, 4), (5, 16)])
def test_doubling_intervals(strategy, level, days):
    assert strategy.expiration_date(level, T0) == T0 + timedelta(days=days)


def test_interval_capped(strategy):
    assert strategy.expiration_date(30, T0) == T0 + timedelta(days=365)
