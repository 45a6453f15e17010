"""IEEE reference formatting and citation marker substitution.

This module renders parsed records as IEEE numbered references in English
or German, replaces ``[cite:KEY]`` markers in documents and localizes the
headings of generated sections.
"""

from ieeebib.citations.document import (
    DocumentSink,
    TextDocument,
)
from ieeebib.citations.headings import (
    SECTIONS,
    Section,
    section_title,
    update_headings,
)
from ieeebib.citations.markers import (
    REFERENCES_LIST_ID,
    UNRESOLVED,
    CitationProcessor,
)
from ieeebib.citations.styles import (
    LABELS,
    IEEEStyle,
    LocaleLabels,
    render,
    render_bibliography,
)

__all__ = [
    # Document access
    "DocumentSink",
    "TextDocument",
    # Headings
    "Section",
    "SECTIONS",
    "section_title",
    "update_headings",
    # Markers
    "CitationProcessor",
    "REFERENCES_LIST_ID",
    "UNRESOLVED",
    # Styles
    "IEEEStyle",
    "LocaleLabels",
    "LABELS",
    "render",
    "render_bibliography",
]
