"""BibTeX parsing and IEEE reference rendering in English and German."""

from ieeebib.citations.styles import render, render_bibliography
from ieeebib.core.bibtex import parse
from ieeebib.core.latex import decode
from ieeebib.core.models import BibRecord, FormatterConfig, Locale
from ieeebib.core.names import format_authors

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BibRecord",
    "FormatterConfig",
    "Locale",
    "decode",
    "format_authors",
    "parse",
    "render",
    "render_bibliography",
]
