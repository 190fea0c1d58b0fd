"""leitner — Leitner-style flash card review core."""

__version__ = "0.1.0"

from leitner.models import Card, CardSide
from leitner.category import Category
from leitner.events import EventType
from leitner.lesson import Lesson
from leitner.text import FormattedText
from leitner.app import App

__all__ = ["App", "Card", "CardSide", "Category", "EventType", "FormattedText", "Lesson"]
