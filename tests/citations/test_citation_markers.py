"""Tests for citation marker substitution."""

import logging

from ieeebib.citations.document import TextDocument
from ieeebib.citations.markers import UNRESOLVED, CitationProcessor
from ieeebib.citations.styles import render
from ieeebib.core.bibtex import parse
from ieeebib.core.models import Locale


class TestNumbering:
    """Test display index assignment."""

    def test_first_occurrence_order(self, sample_records) -> None:
        """Keys are numbered by their first appearance."""
        processor = CitationProcessor(sample_records)
        numbers = processor.number_keys(["knuth1997", "mdn", "knuth1997", "lee2024"])

        assert numbers == {"knuth1997": 1, "mdn": 2, "lee2024": 3}

    def test_unknown_keys_get_no_index(self, sample_records) -> None:
        """Unknown keys do not consume a number."""
        processor = CitationProcessor(sample_records)
        numbers = processor.number_keys(["nope", "mdn", "nope2", "roe2001"])

        assert numbers == {"mdn": 1, "roe2001": 2}


class TestProcess:
    """Test substitution in a document sink."""

    def test_markers_replaced(self, sample_records, sample_document) -> None:
        """Known markers become links, unknown ones the placeholder."""
        document = TextDocument(sample_document)
        numbers = CitationProcessor(sample_records).process(document)

        assert numbers == {"lecun2015": 1, "lee2024": 2}
        text = str(document)
        assert 'Deep nets <a href="#lecun2015">[1]</a>' in text
        assert 'beat search <a href="#lee2024">[2]</a>.' in text
        assert 'Again <a href="#lecun2015">[1]</a>, and [?].' in text
        assert "[cite:" not in text.replace("<pre>[cite:knuth1997]</pre>", "")

    def test_protected_regions_untouched(self, sample_records, sample_document) -> None:
        """Markers inside pre blocks are neither replaced nor numbered."""
        document = TextDocument(sample_document)
        numbers = CitationProcessor(sample_records).process(document)

        assert "<pre>[cite:knuth1997]</pre>" in str(document)
        assert "knuth1997" not in numbers

    def test_attribute_markers_untouched(self) -> None:
        """Markers inside attribute values are neither replaced nor numbered."""
        records = parse("@misc{k, title={T}}")
        document = TextDocument(
            '<img alt="[cite:k]"><p>see [cite:k]</p><ol id="references-list"></ol>'
        )

        numbers = CitationProcessor(records).process(document)

        assert numbers == {"k": 1}
        text = str(document)
        assert '<img alt="[cite:k]"/>' in text
        assert '<p>see <a href="#k">[1]</a></p>' in text
        assert '<li id="k">[1] “T.”</li>' in text

    def test_reference_list_not_scanned(self, sample_records) -> None:
        """Markers already inside the reference list are left alone."""
        document = TextDocument(
            '<p>[cite:mdn]</p><ol id="references-list"><li>[cite:roe2001]</li></ol>'
        )

        numbers = CitationProcessor(sample_records).process(document)

        assert numbers == {"mdn": 1}
        assert "<li>[cite:roe2001]</li>" in str(document)

    def test_reference_list_filled(self, sample_records, sample_document) -> None:
        """Rendered references are appended in index order."""
        document = TextDocument(sample_document)
        CitationProcessor(sample_records, Locale.DE).process(document)

        text = str(document)
        first = f'<li id="lecun2015">{render(sample_records["lecun2015"], 1, Locale.DE)}</li>'
        second = f'<li id="lee2024">{render(sample_records["lee2024"], 2, Locale.DE)}</li>'
        assert first in text
        assert second in text
        assert text.index(first) < text.index(second) < text.index("</ol>")

    def test_unresolved_warning(self, sample_records, caplog) -> None:
        """Unknown keys are logged."""
        document = TextDocument("[cite:ghost]")

        with caplog.at_level(logging.WARNING, logger="ieeebib.citations.markers"):
            numbers = CitationProcessor(sample_records).process(document)

        assert numbers == {}
        assert str(document) == UNRESOLVED
        assert "ghost" in caplog.text

    def test_missing_reference_list(self, sample_records, caplog) -> None:
        """Without a reference list the markers are still replaced."""
        document = TextDocument("See [cite:mdn].")

        with caplog.at_level(logging.WARNING, logger="ieeebib.citations.markers"):
            numbers = CitationProcessor(sample_records).process(document)

        assert numbers == {"mdn": 1}
        assert str(document) == 'See <a href="#mdn">[1]</a>.'
        assert "references-list" in caplog.text

    def test_document_without_markers(self, sample_records) -> None:
        """Nothing changes when there is nothing to cite."""
        original = '<p>No citations.</p><ol id="references-list"></ol>'
        document = TextDocument(original)

        assert CitationProcessor(sample_records).process(document) == {}
        assert str(document) == original

    def test_end_to_end_with_parser(self, sample_bibtex) -> None:
        """Parsed records flow through marker substitution."""
        records = parse(sample_bibtex)
        document = TextDocument(
            'Trams [cite:mueller2001].\n<ol id="references-list"></ol>'
        )
        CitationProcessor(records, Locale.DE).process(document)

        assert (
            "[1] Jörg Müller, “Straßenbahnen in München.”, TU München, "
            "Tech. Ber. TR-42, 2001"
        ) in str(document)


class TestBibliography:
    """Test rendering of an existing numbering."""

    def test_bibliography_in_index_order(self, sample_records) -> None:
        """References are rendered sorted by index."""
        processor = CitationProcessor(sample_records)
        references = processor.bibliography({"mdn": 2, "roe2001": 1, "gone": 3})

        assert references == [
            render(sample_records["roe2001"], 1),
            render(sample_records["mdn"], 2),
        ]
