"""Core parsing and decoding of bibliography records."""

# Models
from ieeebib.core.models import (
    BibRecord,
    FormatterConfig,
    Locale,
)

# Fields and entry types
from ieeebib.core.fields import (
    NON_RECORD_TYPES,
    EntryType,
)

# Escape decoding
from ieeebib.core.latex import (
    LatexDecoder,
    decode,
)

# BibTeX parsing
from ieeebib.core.bibtex import (
    BibtexParser,
    parse,
)

# Author lists
from ieeebib.core.names import (
    AuthorListFormatter,
    format_authors,
)

__all__ = [
    # Models
    "BibRecord",
    "FormatterConfig",
    "Locale",
    # Fields and types
    "EntryType",
    "NON_RECORD_TYPES",
    # Decoding
    "LatexDecoder",
    "decode",
    # Parsing
    "BibtexParser",
    "parse",
    # Authors
    "AuthorListFormatter",
    "format_authors",
]
