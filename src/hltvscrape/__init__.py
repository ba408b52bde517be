"""
hltvscrape - typed records from HLTV.org pages.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .api import HltvApi, Month
from .config import Config
from .exceptions import (
    HltvError,
    ParseError,
    QuerySyntaxError,
    StructureMissingError,
    TransportError,
    ValueFormatError,
)
from .extractor import (
    parse_archived_news,
    parse_document,
    parse_latest_news,
    parse_match_results,
    parse_upcoming_matches,
)

__all__ = [
    "__version__",
    "Config",
    "HltvApi",
    "Month",
    "HltvError",
    "ParseError",
    "QuerySyntaxError",
    "StructureMissingError",
    "TransportError",
    "ValueFormatError",
    "parse_document",
    "parse_latest_news",
    "parse_archived_news",
    "parse_match_results",
    "parse_upcoming_matches",
]
