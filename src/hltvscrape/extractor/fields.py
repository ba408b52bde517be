"""
Typed field extractors.

Each helper takes a record node plus a compiled query and either returns the
field value or raises a ``ParseError`` naming the field.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator, Optional

from ..exceptions import StructureMissingError, ValueFormatError
from .query import Query, TreeNode, attr, select_all, select_first, text_of

NodePredicate = Callable[[TreeNode], bool]

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def required_text(node: TreeNode, query: Query, label: str, message: Optional[str] = None) -> str:
    """Text of the first match of ``query``; a missing match is a named failure."""
    return text_of(required_node(node, query, label, message))


def required_attr(
    node: TreeNode,
    query: Optional[Query],
    attr_name: str,
    label: str,
    message: Optional[str] = None,
) -> str:
    """Attribute of the first match of ``query`` (or of ``node`` itself when ``query`` is None).

    A missing element and a missing attribute raise the same failure.
    """
    target = node if query is None else select_first(node, query)
    value = attr(target, attr_name) if target is not None else None
    if value is None:
        raise StructureMissingError(label, message)
    return value


def required_node(node: TreeNode, query: Query, label: str, message: Optional[str] = None) -> TreeNode:
    """First match of ``query``; a missing match is a named failure."""
    found = select_first(node, query)
    if found is None:
        raise StructureMissingError(label, message)
    return found


def optional_node(node: TreeNode, query: Query) -> Optional[TreeNode]:
    """First match of ``query`` or None; never fails."""
    return select_first(node, query)


def count_matches(node: TreeNode, query: Query, predicate: Optional[NodePredicate] = None) -> int:
    """Number of matches of ``query``, optionally filtered by ``predicate``."""
    matches = select_all(node, query)
    if predicate is None:
        return len(matches)
    return sum(1 for match in matches if predicate(match))


def required_next_text(nodes: Iterator[TreeNode], label: str, message: Optional[str] = None) -> str:
    """Text of the next node from a repeated query's matches."""
    found = next(nodes, None)
    if found is None:
        raise StructureMissingError(label, message)
    return text_of(found)


def parse_unsigned(text: str, label: str, bits: int = 8) -> int:
    """Parse ``text`` as a fixed-width unsigned integer (u8 unless ``bits`` says otherwise)."""
    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise ValueFormatError(label, text)
    value = int(text)
    if value >= 1 << bits:
        raise ValueFormatError(label, text, f"Value {text!r} of {label} does not fit in u{bits}")
    return value


def has_class(class_name: str) -> NodePredicate:
    """Predicate matching nodes that carry ``class_name``."""

    def _predicate(node: TreeNode) -> bool:
        return class_name in (node.get("class") or ())

    return _predicate


def lacks_class(class_name: str) -> NodePredicate:
    """Predicate matching nodes that do not carry ``class_name``."""
    carries = has_class(class_name)
    return lambda node: not carries(node)
