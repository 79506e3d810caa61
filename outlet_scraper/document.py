"""Thin read-only wrapper over a parsed HTML tree."""

from bs4 import BeautifulSoup
from bs4.element import Tag


class Node:
    """An element of a parsed document: CSS selection, text, attributes."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def select(self, selector: str) -> list["Node"]:
        return [Node(t) for t in self._tag.select(selector)]

    def select_one(self, selector: str) -> "Node | None":
        tag = self._tag.select_one(selector)
        return Node(tag) if tag is not None else None

    def first(self, selectors) -> "Node | None":
        """First element matched by the earliest selector in a prioritized list."""
        for selector in selectors:
            node = self.select_one(selector)
            if node is not None:
                return node
        return None

    @property
    def text(self) -> str:
        return self._tag.get_text(" ", strip=True)

    def attr(self, name: str) -> str | None:
        value = self._tag.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return value or None


def parse_document(html: str) -> Node:
    return Node(BeautifulSoup(html, "lxml"))
