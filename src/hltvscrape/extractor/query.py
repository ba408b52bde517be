"""
Query adapter over BeautifulSoup trees.

Structural queries are CSS selectors compiled once by soupsieve and reused
for every node they are applied to. Queries only ever see the descendants of
the node they are run against.

Thread-safety: a parsed ``BeautifulSoup`` tree is safe to read from several
threads as long as nobody mutates it, and nothing in the extractor does.
Compiled ``Query`` objects are immutable.
"""

from __future__ import annotations

from typing import List, Optional, Union

import soupsieve
from bs4 import BeautifulSoup, Tag

from ..exceptions import QuerySyntaxError

# Opaque handle into a parsed document. The document itself is a Tag too.
TreeNode = Tag

DEFAULT_BUILDER = "html.parser"


class Query:
    """A precompiled structural query."""

    __slots__ = ("selector", "_pattern")

    def __init__(self, selector: str) -> None:
        try:
            pattern = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as e:
            raise QuerySyntaxError(selector, str(e).splitlines()[0]) from e
        object.__setattr__(self, "selector", selector)
        object.__setattr__(self, "_pattern", pattern)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Query is immutable")

    def __repr__(self) -> str:
        return f"Query({self.selector!r})"

    def first(self, node: TreeNode) -> Optional[TreeNode]:
        return self._pattern.select_one(node)

    def all(self, node: TreeNode) -> List[TreeNode]:
        return self._pattern.select(node)


def parse_document(html: Union[str, bytes], builder: str = DEFAULT_BUILDER) -> BeautifulSoup:
    """Parse raw page markup into a tree.

    Malformed markup still produces a tree; missing structure is reported later
    by the extractors, never here.
    """
    return BeautifulSoup(html, builder)


def select_first(node: TreeNode, query: Query) -> Optional[TreeNode]:
    """Return the first descendant of ``node`` matching ``query``, or None."""
    return query.first(node)


def select_all(node: TreeNode, query: Query) -> List[TreeNode]:
    """Return every descendant of ``node`` matching ``query`` in document order."""
    return query.all(node)


def text_of(node: TreeNode) -> str:
    """Concatenate all descendant text nodes without separator or trimming."""
    return node.get_text()


def attr(node: TreeNode, name: str) -> Optional[str]:
    """Read an attribute value; multi-valued attributes are joined by spaces."""
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
