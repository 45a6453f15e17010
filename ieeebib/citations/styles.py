"""IEEE numbered citation style in English and German."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ieeebib.core.fields import EntryType
from ieeebib.core.latex import LatexDecoder
from ieeebib.core.models import BibRecord, Locale
from ieeebib.core.names import AuthorListFormatter


@dataclass(frozen=True)
class LocaleLabels:
    """Structural words used when assembling a reference."""

    volume: str
    issue: str
    pages: str
    editor: str
    edition: str  # format string with {edition}
    report: str
    available: str
    accessed: str


LABELS = {
    Locale.EN: LocaleLabels(
        volume="vol.",
        issue="no.",
        pages="pp.",
        editor="Ed.",
        edition="{edition} ed.",
        report="Tech. Rep.",
        available="Available",
        accessed="Accessed",
    ),
    Locale.DE: LocaleLabels(
        volume="Band",
        issue="Nr.",
        pages="S.",
        editor="Red.",
        edition="Ausg. {edition}",
        report="Tech. Ber.",
        available="Verfügbar",
        accessed="Abgerufen",
    ),
}


class IEEEStyle:
    """IEEE citation style.

    All state is fixed at construction, so one instance can format any
    number of records, from any thread.
    """

    def __init__(self, locale: Locale | str | None = Locale.EN):
        self.locale = Locale.coerce(locale)
        self.labels = LABELS[self.locale]
        self.author_formatter = AuthorListFormatter(self.locale)
        self.decoder = LatexDecoder()

    def format_bibliography(self, record: BibRecord, number: int) -> str:
        """Format one reference list entry.

        Fields that are missing, or that the record's type does not use,
        are left out. Never raises.

        Args:
            record: Parsed record.
            number: Display index shown as ``[number]``.

        Returns:
            The formatted reference.
        """
        authors = self.author_formatter.format(record.get("author", ""))
        title = self._format_title(record.get("title", ""))

        if authors:
            citation = f"[{number}] {authors}, “{title}”"
        else:
            citation = f"[{number}] “{title}”"

        return (citation + self._format_tail(record)).strip()

    def format_inline(self, number: int) -> str:
        """Format the in-text marker for a display index."""
        return f"[{number}]"

    def _format_tail(self, record: BibRecord) -> str:
        """Type-specific part after the title."""
        get = record.get
        labels = self.labels
        parts: list[str] = []

        match record.entry_type:
            case EntryType.ARTICLE:
                if journal := get("journal"):
                    parts.append(f" {journal}")
                if volume := get("volume"):
                    parts.append(f", {labels.volume} {volume}")
                if number := get("number"):
                    parts.append(f", {labels.issue} {number}")
                if pages := get("pages"):
                    parts.append(f", {self._format_pages(pages)}")
                date = " ".join(v for v in (get("month"), get("year")) if v)
                if date:
                    parts.append(f", {date}")

            case EntryType.INPROCEEDINGS | EntryType.CONFERENCE:
                if booktitle := get("booktitle"):
                    parts.append(f" in {booktitle}")
                if editor := get("editor"):
                    parts.append(f", {labels.editor} {editor}")
                if address := get("address"):
                    parts.append(f", {address}")
                if pages := get("pages"):
                    parts.append(f", {self._format_pages(pages)}")
                if year := get("year"):
                    parts.append(f", {year}")

            case EntryType.BOOK:
                if publisher := get("publisher"):
                    parts.append(f" {publisher}")
                if edition := get("edition"):
                    parts.append(f", {labels.edition.format(edition=edition)}")
                if address := get("address"):
                    parts.append(f", {address}")
                if year := get("year"):
                    parts.append(f", {year}")

            case EntryType.TECHREPORT:
                if institution := get("institution"):
                    parts.append(f", {institution}")
                if number := get("number"):
                    parts.append(f", {labels.report} {number}")
                if year := get("year"):
                    parts.append(f", {year}")

            case EntryType.MISC | EntryType.ONLINE:
                if howpublished := get("howpublished"):
                    parts.append(f" {howpublished}")
                if note := get("note"):
                    parts.append(f", {note}")
                if url := get("url"):
                    parts.append(f", {self._format_url(url)}")
                if year := get("year"):
                    parts.append(f", {year}")
                if urldate := get("urldate"):
                    parts.append(f", {labels.accessed}: {urldate}")

            case _:
                if venue := get("journal") or get("booktitle"):
                    parts.append(f" {venue}")
                if publisher := get("publisher"):
                    parts.append(f", {publisher}")
                if year := get("year"):
                    parts.append(f", {year}")
                if url := get("url"):
                    parts.append(f", {self._format_url(url)}")

        return "".join(parts)

    def _format_title(self, title: str) -> str:
        """Decode the title and make it end with a period."""
        title = self.decoder.decode(title or "").strip()
        if not title.endswith("."):
            title += "."
        return title

    def _format_pages(self, pages: str) -> str:
        """Format page range with the locale's label."""
        pages = pages.replace("--", "–")
        return f"{self.labels.pages} {pages}"

    def _format_url(self, url: str) -> str:
        """Format an online link; display text and target are the same."""
        return f'[Online]. {self.labels.available}: <a href="{url}">{url}</a>'


def render(
    record: BibRecord, index: int, locale: Locale | str | None = Locale.EN
) -> str:
    """Render one record as an IEEE reference."""
    return IEEEStyle(locale).format_bibliography(record, index)


def render_bibliography(
    records: Mapping[str, BibRecord],
    keys: Iterable[str] | None = None,
    locale: Locale | str | None = Locale.EN,
) -> list[str]:
    """Render several records numbered from 1.

    Args:
        records: Parsed records.
        keys: Keys to render in display order. Defaults to all records in
            source order. Keys without a record are skipped.
        locale: Output language.

    Returns:
        Formatted references in display order.
    """
    style = IEEEStyle(locale)
    selected = [records[k] for k in (records if keys is None else keys) if k in records]
    return [
        style.format_bibliography(record, number)
        for number, record in enumerate(selected, 1)
    ]
