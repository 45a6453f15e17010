"""Localized titles of front and back matter sections.

Enabled sections get their heading text in the configured language.
Disabled sections are removed from the document together with their
companion element (the ``-text`` body of the abstract or the ``-list`` of
a listing).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ieeebib.core.models import FormatterConfig, Locale

from .document import DocumentSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section:
    """A document section with a localized heading."""

    name: str
    element_id: str
    companion_id: str
    en: str
    de: str
    switch: str

    def title(self, locale: Locale | str | None) -> str:
        return self.de if Locale.coerce(locale) is Locale.DE else self.en

    @property
    def element_ids(self) -> tuple[str, str]:
        return (self.element_id, self.companion_id)


SECTIONS = {
    s.name: s
    for s in (
        Section(
            "abstract",
            "abstract",
            "abstract-text",
            "Abstract",
            "Zusammenfassung",
            "abstract",
        ),
        Section(
            "contents",
            "contents",
            "contents-list",
            "List of contents",
            "Inhaltsverzeichnis",
            "list_of_contents",
        ),
        Section(
            "references",
            "references",
            "references-list",
            "References",
            "Quellen",
            "list_of_references",
        ),
        Section(
            "figures",
            "figures",
            "figures-list",
            "List of figures",
            "Abbildungsverzeichnis",
            "list_of_figures",
        ),
        Section(
            "tables",
            "tables",
            "tables-list",
            "List of tables",
            "Tabellenverzeichnis",
            "list_of_tables",
        ),
        Section(
            "source_codes",
            "source-codes",
            "source-codes-list",
            "List of source codes",
            "Quellcodeverzeichnis",
            "list_of_source_codes",
        ),
        Section(
            "abbreviations",
            "abbreviations",
            "abbreviations-list",
            "List of abbreviations",
            "Abkürzungsverzeichnis",
            "list_of_abbreviations",
        ),
    )
}


def section_title(section: str, locale: Locale | str | None = Locale.EN) -> str:
    """Return the heading of a section, e.g. ``"Quellen"`` for references in DE.

    Raises:
        KeyError: If the section name is unknown.
    """
    return SECTIONS[section].title(locale)


def update_headings(sink: DocumentSink, config: FormatterConfig) -> list[str]:
    """Localize enabled section headings and remove disabled sections.

    Returns:
        Names of the sections whose heading was updated.
    """
    updated = []
    for section in SECTIONS.values():
        if getattr(config, section.switch):
            if sink.set_text(section.element_id, section.title(config.locale)):
                updated.append(section.name)
            continue

        removed = [eid for eid in section.element_ids if sink.remove(eid)]
        if removed:
            logger.debug("Removed disabled section %s: %s", section.name, removed)
    return updated
