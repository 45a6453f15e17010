"""Core data models for parsed bibliography records.

Key components:
- BibRecord: Immutable record produced by the parser
- Locale: Language switch for structural labels and list connectors
"""

import enum
from typing import Any

import msgspec

from .fields import EntryType


class Locale(enum.Enum):
    """Output language of rendered citations."""

    EN = "EN"
    DE = "DE"

    @classmethod
    def coerce(cls, value: "Locale | str | None") -> "Locale":
        """Convert a user supplied value to a locale.

        Strings are matched case-insensitively. Anything that is not a
        known locale falls back to English instead of failing.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        return cls.EN


class BibRecord(msgspec.Struct, frozen=True, kw_only=True):
    """One bibliographic item extracted from the source text.

    ``type`` is always lowercase and drawn from an open set. Field names
    are lowercase and field values are already escape-decoded.
    """

    key: str
    type: str
    fields: dict[str, str] = msgspec.field(default_factory=dict)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return a field value, or ``default`` when absent or empty."""
        return self.fields.get(name.lower()) or default

    def __contains__(self, name: str) -> bool:
        return bool(self.fields.get(name.lower()))

    @property
    def entry_type(self) -> EntryType | None:
        """Recognised entry type, None for generic records."""
        return EntryType.from_string(self.type)

    @property
    def title(self) -> str | None:
        return self.get("title")

    @property
    def author(self) -> str | None:
        return self.get("author")

    def to_dict(self) -> dict[str, Any]:
        """Convert record to a plain dictionary."""
        return msgspec.to_builtins(self)


class FormatterConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Language and feature switches for document processing.

    The configuration is passed explicitly to whatever needs it; nothing
    reads it from module state.
    """

    lang: str = "EN"
    abstract: bool = False
    list_of_contents: bool = True
    list_of_references: bool = True
    list_of_figures: bool = True
    list_of_tables: bool = True
    list_of_source_codes: bool = True
    list_of_abbreviations: bool = True

    @property
    def locale(self) -> Locale:
        return Locale.coerce(self.lang)
