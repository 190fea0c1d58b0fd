"""Tests for the App object."""

import logging

import pytest

from leitner.app import App
from leitner.models import Card


def test_app_settings(app):
    assert app.settings["strategy"] == "doubling"
    assert app.strategy is None


def test_app_load_strategy(app):
    strategy = app.load_strategy()
    assert strategy is app.strategy
    assert strategy.strategy_id == "doubling"


def test_app_load_missing_strategy_logs(app, caplog):
    with caplog.at_level(logging.WARNING, logger="leitner.app"):
        with pytest.raises(FileNotFoundError):
            app.load_strategy("missing")
    assert "missing" in caplog.text


def test_app_start_session_loads_strategy(app):
    lesson = app.new_lesson()
    card = lesson.root.add_card(Card("q", "a"))
    session = app.start_session(lesson)
    assert app.strategy is not None
    assert session.clock is app.clock
    assert session.next_card() is card
    session.grade(card, passed=True)
    session.finish()
    assert len(lesson.learn_history.summaries) == 1


def test_app_uses_env_dir(monkeypatch, tmp_leitner_dir):
    monkeypatch.setenv("LEITNER_DIR", str(tmp_leitner_dir))
    app = App()
    assert app.leitner_dir == tmp_leitner_dir


def test_app_configure_logging(tmp_leitner_dir, monkeypatch):
    (tmp_leitner_dir / "settings.toml").write_text('log_level = "debug"\n')
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    App(leitner_dir=tmp_leitner_dir).configure_logging()
    assert calls[0]["level"] == logging.DEBUG
