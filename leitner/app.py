"""App: central object that wires together leitner_dir, settings, strategy and clock."""

import logging
import pathlib

from leitner.clock import get_clock
from leitner.config import get_leitner_dir, load_settings
from leitner.lesson import Lesson
from leitner.review_session import ReviewSession
from leitner.strategies import load_strategy

logger = logging.getLogger(__name__)


class App:
    """Holds all shared state for a leitner session.

    Usage:
        app = App(leitner_dir="/path/to/leitner")
        app.load_strategy()              # uses settings["strategy"]
        lesson = app.new_lesson()
        session = app.start_session(lesson)

    For testing:
        app = App(leitner_dir=tmp_path, clock=FixedClock(t0))
    """

    def __init__(self, leitner_dir: pathlib.Path | str | None = None, clock=None):
        if leitner_dir is None:
            leitner_dir = get_leitner_dir()
        self.leitner_dir = pathlib.Path(leitner_dir)
        self.settings = load_settings(self.leitner_dir)
        self.clock = clock or get_clock()
        self.strategy = None

    def configure_logging(self):
        level = str(self.settings.get("log_level", "WARNING")).upper()
        logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")

    def load_strategy(self, name: str | None = None):
        """Load and store the interval strategy.

        Args:
            name: Strategy name. Defaults to settings["strategy"].
        """
        if name is None:
            name = self.settings.get("strategy", "doubling")
        try:
            self.strategy = load_strategy(name, self.leitner_dir)
        except FileNotFoundError:
            logger.warning("cannot load strategy %r from %s", name, self.leitner_dir)
            raise
        return self.strategy

    def new_lesson(self) -> Lesson:
        return Lesson()

    def start_session(self, lesson: Lesson) -> ReviewSession:
        """Start a review session over the whole lesson."""
        if self.strategy is None:
            self.load_strategy()
        return ReviewSession(lesson.root, self.strategy, clock=self.clock, lesson=lesson)
