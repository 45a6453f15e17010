"""BibTeX entry types and field names recognised by the IEEE renderer."""

from enum import Enum, unique


# Blocks that share the entry syntax but never describe a record
NON_RECORD_TYPES = {"comment", "preamble", "string"}


@unique
class EntryType(Enum):
    """Entry types with a dedicated IEEE rendering branch.

    The set of entry types in a bibliography is open: any other token is
    still parsed and rendered, it just falls through to the generic branch.
    """

    ARTICLE = "article"
    INPROCEEDINGS = "inproceedings"
    CONFERENCE = "conference"
    BOOK = "book"
    TECHREPORT = "techreport"
    MISC = "misc"
    ONLINE = "online"

    @classmethod
    def from_string(cls, value: str | None) -> "EntryType | None":
        """Return the member matching ``value`` or None for other tokens."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
