"""
Section grouping.

A section is a region holding one headline and a run of record nodes, e.g.
one day's worth of match results. Grouping is all-or-nothing: the first
record that fails to build aborts the whole call.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, TypeVar

import structlog

from .fields import required_text
from .query import Query, TreeNode, select_all

T = TypeVar("T")

RecordBuilder = Callable[[TreeNode], T]

logger = structlog.get_logger(__name__)


def build_all(container: TreeNode, member_query: Query, build: RecordBuilder[T]) -> List[T]:
    """Run ``build`` over every node matching ``member_query`` inside ``container``."""
    return [build(member) for member in select_all(container, member_query)]


def collect_blocks(
    root: TreeNode,
    block_query: Query,
    member_query: Query,
    build: RecordBuilder[T],
) -> List[List[T]]:
    """Build the records of every block matching ``block_query``, block by block."""
    blocks = [build_all(block, member_query, build) for block in select_all(root, block_query)]
    logger.debug("Collected record blocks", query=block_query.selector, blocks=len(blocks))
    return blocks


def group_sections(
    root: TreeNode,
    section_query: Query,
    headline_query: Query,
    member_query: Query,
    build: RecordBuilder[T],
    headline_label: str = "section.headline",
    headline_message: Optional[str] = None,
) -> Dict[str, List[T]]:
    """Map each section's headline text to the records built from its members.

    Sections are visited in document order and the mapping keeps that order.
    A repeated headline keeps its first position and takes the later records.
    """
    grouped: Dict[str, List[T]] = {}
    for section in select_all(root, section_query):
        key = required_text(section, headline_query, headline_label, headline_message)
        grouped[key] = build_all(section, member_query, build)
    logger.debug("Grouped sections", query=section_query.selector, sections=len(grouped))
    return grouped
