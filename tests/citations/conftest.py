"""Shared fixtures for citation tests."""

import pytest

from ieeebib.core.models import BibRecord


@pytest.fixture
def sample_records() -> dict[str, BibRecord]:
    """One record per rendering branch."""
    records = [
        BibRecord(
            key="lecun2015",
            type="article",
            fields={
                "author": "LeCun, Yann and Bengio, Yoshua and Hinton, Geoffrey",
                "title": "Deep Learning",
                "journal": "Nature",
                "volume": "521",
                "number": "7553",
                "pages": "436--444",
                "month": "May",
                "year": "2015",
            },
        ),
        BibRecord(
            key="lee2024",
            type="inproceedings",
            fields={
                "author": "Lee, Kim and Park, Jin",
                "title": "Neural Architecture Search.",
                "booktitle": "Proc. ICML",
                "editor": "A. Editor",
                "address": "Vienna, Austria",
                "pages": "123--134",
                "year": "2024",
            },
        ),
        BibRecord(
            key="knuth1997",
            type="book",
            fields={
                "author": "Knuth, Donald E.",
                "title": "The Art of Computer Programming",
                "publisher": "Addison-Wesley",
                "edition": "3",
                "address": "Boston",
                "year": "1997",
            },
        ),
        BibRecord(
            key="roe2001",
            type="techreport",
            fields={
                "author": "Roe, Richard",
                "title": "Signal Processing Notes",
                "institution": "MIT",
                "number": "TR-42",
                "year": "2001",
            },
        ),
        BibRecord(
            key="mdn",
            type="misc",
            fields={
                "title": "MDN Web Docs",
                "howpublished": "Website",
                "note": "Living standard",
                "url": "https://developer.mozilla.org",
                "year": "2024",
                "urldate": "2024-01-15",
            },
        ),
        BibRecord(
            key="thesis",
            type="phdthesis",
            fields={
                "author": "Doe, Jane",
                "title": "On Parsing",
                "booktitle": "Collected Theses",
                "publisher": "University Press",
                "school": "TU Berlin",
                "year": "2020",
                "url": "https://example.org/thesis.pdf",
            },
        ),
    ]
    return {record.key: record for record in records}


@pytest.fixture
def sample_document() -> str:
    """HTML document with citation markers and a reference list."""
    return (
        "<h1 id=\"title\">Report</h1>\n"
        "<p>Deep nets [cite:lecun2015] beat search [cite: lee2024 ].</p>\n"
        "<p>Again [cite:lecun2015], and [cite:unknown].</p>\n"
        "<pre>[cite:knuth1997]</pre>\n"
        "<h2 id=\"references\">Sources</h2>\n"
        "<ol id=\"references-list\">\n"
        "</ol>\n"
    )
