"""Substitution of ``[cite:KEY]`` markers and reference list assembly."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ieeebib.core.models import BibRecord, Locale

from .document import DocumentSink
from .styles import IEEEStyle

logger = logging.getLogger(__name__)

REFERENCES_LIST_ID = "references-list"
UNRESOLVED = "[?]"


class CitationProcessor:
    """Number citation markers by first occurrence and build the reference list.

    Each distinct known key gets the next display index the first time it
    appears. Markers for keys missing from the bibliography become the
    literal ``[?]`` and get no index.
    """

    MARKER = re.compile(r"\[cite:([^\]]+)\]")

    def __init__(
        self,
        records: Mapping[str, BibRecord],
        locale: Locale | str | None = Locale.EN,
        list_id: str = REFERENCES_LIST_ID,
    ):
        self.records = records
        self.style = IEEEStyle(locale)
        self.list_id = list_id

    def number_keys(self, keys: list[str]) -> dict[str, int]:
        """Assign display indices to known keys in first-occurrence order."""
        numbers: dict[str, int] = {}
        for key in keys:
            if key in self.records and key not in numbers:
                numbers[key] = len(numbers) + 1
        return numbers

    def link(self, key: str, number: int) -> str:
        """In-text link for a resolved marker."""
        return f'<a href="#{key}">{self.style.format_inline(number)}</a>'

    def process(self, sink: DocumentSink) -> dict[str, int]:
        """Replace markers in ``sink`` and append the rendered references.

        Markers inside the reference list itself are left alone.

        Returns:
            Display index per cited key, in index order.
        """
        matches = sink.find(self.MARKER, exclude=self.list_id)
        numbers = self.number_keys([m.group(1).strip() for m in matches])

        def replacement(match: re.Match[str]) -> str:
            key = match.group(1).strip()
            if key in numbers:
                return self.link(key, numbers[key])
            logger.warning("Unresolved citation key: %s", key)
            return UNRESOLVED

        sink.substitute(self.MARKER, replacement, exclude=self.list_id)

        if not numbers:
            return numbers

        for key, html in zip(numbers, self.bibliography(numbers)):
            if not sink.append_item(self.list_id, key, html):
                logger.warning('No element with id="%s" found', self.list_id)
                break

        return numbers

    def bibliography(self, numbers: Mapping[str, int]) -> list[str]:
        """Rendered references for previously assigned indices."""
        ordered = sorted(numbers.items(), key=lambda item: item[1])
        return [
            self.style.format_bibliography(self.records[key], number)
            for key, number in ordered
            if key in self.records
        ]
