"""BibTeX text parsing.

The parser is a hand-written scanner rather than a regular expression so
that arbitrarily nested braces are handled. It is tolerant of stray ``@``
characters and of unknown entry types and fields, but it stops at the first
entry whose braces never balance: every record before that point is kept,
everything after it is discarded.

Key components:
- BibtexParser: Scans text and builds BibRecord objects
- parse: Convenience wrapper around a default parser
"""

import logging
import re

from .fields import NON_RECORD_TYPES
from .latex import LatexDecoder
from .models import BibRecord

logger = logging.getLogger(__name__)


class BibtexParser:
    """Parse BibTeX text into a mapping of citation key to record."""

    ENTRY_HEAD = re.compile(r"(\w+)\s*\{", re.ASCII)
    FIELD_NAME_CHARS = re.compile(r"[A-Za-z0-9_\-]")

    def __init__(self, decoder: LatexDecoder | None = None):
        self.decoder = decoder or LatexDecoder()

    def parse(self, text: str) -> dict[str, BibRecord]:
        """Parse all entries in ``text``.

        Never raises. Later entries with an already seen key replace the
        earlier record.

        Args:
            text: Raw bibliography text.

        Returns:
            Dictionary of records keyed by citation key, in source order.
        """
        records: dict[str, BibRecord] = {}
        if not text:
            return records

        pos = 0
        while True:
            at = text.find("@", pos)
            if at == -1:
                break

            head = self.ENTRY_HEAD.match(text, at + 1)
            if not head:
                pos = at + 1
                continue

            entry_type = head.group(1).lower()
            brace_open = head.end() - 1

            close = self.find_closing_brace(text, brace_open)
            if close == -1:
                logger.warning(
                    "Unbalanced braces in @%s entry at offset %d; "
                    "ignoring the rest of the input",
                    entry_type,
                    at,
                )
                break

            pos = close + 1

            if entry_type in NON_RECORD_TYPES:
                logger.debug("Skipping @%s block at offset %d", entry_type, at)
                continue

            comma = text.find(",", brace_open + 1, close)
            if comma == -1:
                key = text[brace_open + 1 : close].strip()
                body = ""
            else:
                key = text[brace_open + 1 : comma].strip()
                body = text[comma + 1 : close].strip()

            if not key:
                logger.debug("Skipping @%s entry without key at offset %d", entry_type, at)
                continue

            if key in records:
                logger.debug("Duplicate key %r replaces earlier entry", key)

            records[key] = BibRecord(
                key=key, type=entry_type, fields=self.parse_fields(body)
            )

        return records

    @staticmethod
    def find_closing_brace(text: str, brace_open: int) -> int:
        """Return the index of the brace closing ``text[brace_open]``.

        Returns -1 when the end of the text is reached first.
        """
        depth = 1
        i = brace_open + 1
        while i < len(text):
            char = text[i]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return i
            i += 1
        return -1

    def parse_fields(self, body: str) -> dict[str, str]:
        """Parse the comma separated ``name = value`` pairs of an entry body."""
        fields: dict[str, str] = {}
        idx = 0
        length = len(body)

        while idx < length:
            while idx < length and (body[idx].isspace() or body[idx] == ","):
                idx += 1
            if idx >= length:
                break

            start = idx
            while idx < length and self.FIELD_NAME_CHARS.match(body[idx]):
                idx += 1
            name = body[start:idx].strip().lower()

            equals = body.find("=", idx)
            if equals == -1:
                break
            idx = equals + 1
            while idx < length and body[idx].isspace():
                idx += 1

            value, idx = self._read_value(body, idx)
            if name:
                fields[name] = self.decoder.decode(value.strip())

        return fields

    @staticmethod
    def _read_value(body: str, idx: int) -> tuple[str, int]:
        """Read one field value starting at ``idx``.

        Returns the raw value and the position just after it.
        """
        if idx >= len(body):
            return "", idx

        match body[idx]:
            case "{":
                depth = 0
                j = idx
                while j < len(body):
                    if body[j] == "{":
                        depth += 1
                    elif body[j] == "}":
                        depth -= 1
                        if depth == 0:
                            return body[idx + 1 : j], j + 1
                    j += 1
                # Unterminated: take everything up to the end of the body
                return body[idx + 1 :], len(body)

            case '"':
                # No escaping: the next quote always ends the value
                end = body.find('"', idx + 1)
                if end == -1:
                    return body[idx + 1 :], len(body)
                return body[idx + 1 : end], end + 1

            case _:
                end = body.find(",", idx)
                if end == -1:
                    end = len(body)
                return body[idx:end], end


_parser = BibtexParser()


def parse(text: str) -> dict[str, BibRecord]:
    """Parse bibliography text with the default parser."""
    return _parser.parse(text)
