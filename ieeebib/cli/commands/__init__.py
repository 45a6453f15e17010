"""CLI commands module."""

from .document import cite
from .records import authors, decode, parse, render

__all__ = [
    "authors",
    "cite",
    "decode",
    "parse",
    "render",
]
