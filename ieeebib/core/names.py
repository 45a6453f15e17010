"""Author list formatting for IEEE references."""

import re

from .models import Locale

AND_WORDS = {Locale.EN: "and", Locale.DE: "und"}


class AuthorListFormatter:
    """Turn a raw BibTeX author field into a joined display list.

    Names written as ``Family, Given`` are flipped to ``Given Family``;
    names without a comma are assumed to be in display order already.
    """

    SEPARATOR = re.compile(r"\s+and\s+", re.IGNORECASE)
    WHITESPACE = re.compile(r"\s+")

    def __init__(self, locale: Locale | str | None = Locale.EN):
        self.locale = Locale.coerce(locale)

    def split(self, raw: str) -> list[str]:
        """Split a raw author field into normalized display names."""
        if not raw:
            return []

        text = raw.replace("{", "").replace("}", "")
        text = self.WHITESPACE.sub(" ", text).strip()
        if not text:
            return []

        return [self.display_name(part) for part in self.SEPARATOR.split(text)]

    @staticmethod
    def display_name(name: str) -> str:
        """Convert ``Family, Given`` to ``Given Family``."""
        name = name.strip()
        if "," not in name:
            return name

        family, given = name.split(",", 1)
        return f"{given.strip()} {family.strip()}".strip()

    def join(self, names: list[str]) -> str:
        """Join display names with the locale's connector word."""
        and_word = AND_WORDS[self.locale]

        if not names:
            return ""
        if len(names) == 1:
            return names[0]
        if len(names) == 2:
            return f"{names[0]} {and_word} {names[1]}"
        return f"{', '.join(names[:-1])}, {and_word} {names[-1]}"

    def format(self, raw: str) -> str:
        """Format a raw author field."""
        return self.join(self.split(raw))


def format_authors(raw: str, locale: Locale | str | None = Locale.EN) -> str:
    """Format a raw author field for the given locale."""
    return AuthorListFormatter(locale).format(raw)
