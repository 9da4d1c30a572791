"""Port abstracting HTML parsing and tree queries.

Extraction rules are written against this minimal node interface so the
underlying parser can be swapped without touching them.
"""

from collections.abc import Sequence
from typing import Protocol


class HtmlNode(Protocol):
    """Element of a parsed HTML document."""

    @property
    def tag(self) -> str:
        """Return the lowercase tag name."""

    @property
    def text(self) -> str:
        """Return the element text with collapsed whitespace."""

    def has_class(self, name: str) -> bool:
        """Return True when the element carries the CSS class."""

    def attribute(self, name: str) -> str | None:
        """Return an attribute value when present."""

    def find_all(
        self,
        tag: str | None = None,
        classes: Sequence[str] = (),
        text_contains: str | None = None,
    ) -> list["HtmlNode"]:
        """Return descendants matching tag, all classes and text."""

    def find(
        self,
        tag: str | None = None,
        classes: Sequence[str] = (),
        text_contains: str | None = None,
    ) -> "HtmlNode | None":
        """Return the first matching descendant."""

    def previous_element(self) -> "HtmlNode | None":
        """Return the previous sibling element, skipping text nodes."""


class HtmlParserPort(Protocol):
    """Port turning raw markup into a queryable tree."""

    def parse(self, markup: str) -> HtmlNode:
        """Return the document root node."""


__all__ = ["HtmlNode", "HtmlParserPort"]
