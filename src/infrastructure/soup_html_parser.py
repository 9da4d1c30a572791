"""BeautifulSoup adapter for the HTML tree port."""

from collections.abc import Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from src.application.ports.html_tree import HtmlNode, HtmlParserPort

PARSER_FEATURES = "html.parser"


class SoupNode(HtmlNode):
    """HtmlNode implementation wrapping a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def tag(self) -> str:
        return (self._tag.name or "").lower()

    @property
    def text(self) -> str:
        return " ".join(self._tag.get_text(" ").split())

    def has_class(self, name: str) -> bool:
        return name in _classes_of(self._tag)

    def attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def find_all(
        self,
        tag: str | None = None,
        classes: Sequence[str] = (),
        text_contains: str | None = None,
    ) -> list[HtmlNode]:
        """Return descendants matching tag, all classes and text.

        Text matching is a case-insensitive substring test on the
        whitespace-collapsed element text.
        """
        needle = text_contains.lower() if text_contains else None
        matches: list[HtmlNode] = []
        for element in self._tag.find_all(tag.lower() if tag else True):
            if classes and not set(classes) <= _classes_of(element):
                continue
            node = SoupNode(element)
            if needle is not None and needle not in node.text.lower():
                continue
            matches.append(node)
        return matches

    def find(
        self,
        tag: str | None = None,
        classes: Sequence[str] = (),
        text_contains: str | None = None,
    ) -> HtmlNode | None:
        matches = self.find_all(tag, classes, text_contains)
        return matches[0] if matches else None

    def previous_element(self) -> HtmlNode | None:
        sibling = self._tag.find_previous_sibling(True)
        return SoupNode(sibling) if sibling is not None else None

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag}>)"


class SoupHtmlParser(HtmlParserPort):
    """HtmlParserPort implementation backed by BeautifulSoup."""

    def __init__(self, features: str = PARSER_FEATURES) -> None:
        """Initialize the parser.

        Args:
            features: BeautifulSoup tree builder name.
        """
        self._features = features

    def parse(self, markup: str) -> HtmlNode:
        """Parse markup into a queryable tree.

        Args:
            markup: Raw HTML text; empty input yields an empty tree.

        Returns:
            HtmlNode: Root node of the document.
        """
        return SoupNode(BeautifulSoup(markup or "", self._features))


def _classes_of(element: Tag) -> set[str]:
    value = element.get("class") or []
    if isinstance(value, str):
        value = value.split()
    return set(value)


__all__ = ["SoupHtmlParser", "SoupNode", "PARSER_FEATURES"]
