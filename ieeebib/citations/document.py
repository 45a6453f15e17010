"""Document access used by marker substitution and heading updates.

The citation layer never touches a concrete document structure. It talks
to a ``DocumentSink``, which can find and substitute text, append list
items, and read, set or remove elements identified by their id.
``TextDocument`` implements the protocol over an HTML string parsed with
BeautifulSoup, so only text nodes are ever searched; tag names and
attribute values are never rewritten.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Protocol

from bs4 import BeautifulSoup, NavigableString, Tag


class DocumentSink(Protocol):
    """Protocol for documents that receive citation output."""

    def find(
        self, pattern: re.Pattern[str], exclude: str | None = None
    ) -> list[re.Match[str]]:
        """Find matches in searchable text, in document order.

        Text below the element with id ``exclude`` is skipped.
        """
        ...

    def substitute(
        self,
        pattern: re.Pattern[str],
        replacement: Callable[[re.Match[str]], str],
        exclude: str | None = None,
    ) -> int:
        """Replace every match found by ``find`` with an HTML fragment.

        Returns the number of replaced matches.
        """
        ...

    def append_item(self, list_id: str, item_id: str, html: str) -> bool:
        """Append an item to a list element. False if the list is missing."""
        ...

    def get_text(self, element_id: str) -> str | None:
        """Return the display text of an element, None if missing."""
        ...

    def set_text(self, element_id: str, text: str) -> bool:
        """Set the display text of an element. False if missing."""
        ...

    def remove(self, element_id: str) -> bool:
        """Remove an element and its content. False if missing."""
        ...


class TextDocument:
    """Document sink backed by a parsed HTML string."""

    # Text inside these elements is never searched
    PROTECTED = frozenset({"script", "style", "code", "pre"})

    def __init__(self, text: str):
        self.soup = BeautifulSoup(text, "html.parser")

    def __str__(self) -> str:
        return str(self.soup)

    def find(
        self, pattern: re.Pattern[str], exclude: str | None = None
    ) -> list[re.Match[str]]:
        return [
            match
            for node in self._text_nodes(exclude)
            for match in pattern.finditer(str(node))
        ]

    def substitute(
        self,
        pattern: re.Pattern[str],
        replacement: Callable[[re.Match[str]], str],
        exclude: str | None = None,
    ) -> int:
        count = 0
        for node in list(self._text_nodes(exclude)):
            text = str(node)
            pieces: list[NavigableString | Tag] = []
            pos = 0
            for match in pattern.finditer(text):
                if match.start() > pos:
                    pieces.append(NavigableString(text[pos : match.start()]))
                pieces.extend(self._fragment(replacement(match)))
                pos = match.end()
                count += 1

            if not pieces:
                continue
            if pos < len(text):
                pieces.append(NavigableString(text[pos:]))
            node.replace_with(*pieces)
        return count

    def append_item(self, list_id: str, item_id: str, html: str) -> bool:
        target = self.soup.find(["ol", "ul"], id=list_id)
        if target is None:
            return False

        item = self.soup.new_tag("li", attrs={"id": item_id})
        for piece in self._fragment(html):
            item.append(piece)
        target.append(item)
        target.append("\n")
        return True

    def get_text(self, element_id: str) -> str | None:
        element = self.soup.find(id=element_id)
        if element is None:
            return None
        return element.get_text().strip()

    def set_text(self, element_id: str, text: str) -> bool:
        element = self.soup.find(id=element_id)
        if element is None:
            return False
        element.string = text
        return True

    def remove(self, element_id: str) -> bool:
        element = self.soup.find(id=element_id)
        if element is None:
            return False
        element.decompose()
        return True

    def ensure_list(
        self, list_id: str, heading_id: str | None = None, heading: str | None = None
    ) -> None:
        """Append an empty ordered list (and heading) when it does not exist."""
        if self.soup.find(["ol", "ul"], id=list_id) is not None:
            return

        target = self.soup.body or self.soup
        if target.contents and not str(target.contents[-1]).endswith("\n"):
            target.append("\n")

        if heading and heading_id and self.soup.find(id=heading_id) is None:
            title = self.soup.new_tag("h2", attrs={"id": heading_id})
            title.string = heading
            target.append(title)
            target.append("\n")

        ordered = self.soup.new_tag(
            "ol", attrs={"id": list_id, "style": "list-style: none; padding-left: 0"}
        )
        ordered.append("\n")
        target.append(ordered)
        target.append("\n")

    def _text_nodes(self, exclude: str | None = None) -> Iterator[NavigableString]:
        """Yield plain text nodes outside protected and excluded elements."""
        for node in self.soup.find_all(string=True):
            # Comments, doctypes and script bodies are NavigableString subclasses
            if type(node) is not NavigableString:
                continue
            if any(self._skipped(parent, exclude) for parent in node.parents):
                continue
            yield node

    def _skipped(self, element: Tag, exclude: str | None) -> bool:
        if element.name in self.PROTECTED:
            return True
        return exclude is not None and element.get("id") == exclude

    @staticmethod
    def _fragment(html: str) -> list[NavigableString | Tag]:
        """Parse an HTML fragment into nodes ready for insertion."""
        return list(BeautifulSoup(html, "html.parser").contents)
