"""FormattedText: immutable rich-text value used for card sides."""

import html
import re
from dataclasses import dataclass

_TAG_RE = re.compile(r"<[^>]*>")


@dataclass(frozen=True)
class FormattedText:
    """Formatted (HTML-like) text. Compared by value."""

    formatted_text: str

    @classmethod
    def formatted(cls, text: str) -> "FormattedText":
        """Wrap a string that already carries formatting."""
        return cls(text)

    @classmethod
    def unformatted(cls, text: str) -> "FormattedText":
        """Wrap a plain string, escaping anything that looks like markup."""
        return cls(html.escape(text, quote=False))

    def get_formatted(self) -> str:
        return self.formatted_text

    def get_unformatted(self) -> str:
        return html.unescape(_TAG_RE.sub("", self.formatted_text))

    def is_empty(self) -> bool:
        return not self.get_unformatted().strip()

    def clone(self) -> "FormattedText":
        return FormattedText(self.formatted_text)

    def __str__(self):
        return self.get_unformatted()
