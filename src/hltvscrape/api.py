"""
High-level HLTV API: fetch a page, parse it, and run the matching extractor.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

import structlog

from .config.config import Config, settings
from .crawler.http_client import HltvHttpClient
from .exceptions import ParseError, QuerySyntaxError
from .extractor import (
    ArticleBrief,
    MainPageArticleBriefs,
    MatchResult,
    TreeNode,
    UpcomingMatch,
    parse_archived_news,
    parse_document,
    parse_latest_news,
    parse_match_results,
    parse_upcoming_matches,
)
from .observability.metrics import METRICS
from .protocols import PageFetcher

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Month(Enum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def slug(self) -> str:
        """Lower-case English name as used in archive URLs."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union[Month, int, str]) -> Month:
        """Accept a Month, a 1-12 number, or an English month name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) or (isinstance(value, str) and value.isdigit()):
            return cls(int(value))
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown month: {value!r}") from None


def _count_records(result: Union[MainPageArticleBriefs, List[Any], Dict[str, List[Any]]]) -> int:
    if isinstance(result, MainPageArticleBriefs):
        return len(result.today) + len(result.yesterday) + len(result.older)
    if isinstance(result, dict):
        return sum(len(records) for records in result.values())
    if isinstance(result, list):
        return len(result)
    raise TypeError(f"Cannot count records in {type(result).__name__}")


class HltvApi:
    """
    Entry point for scraping HLTV.

    Each call fetches one page, parses it and returns one aggregate, or raises.
    Nothing is cached between calls.
    """

    def __init__(self, fetcher: Optional[PageFetcher] = None, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else settings
        self._owns_fetcher = fetcher is None
        self._fetcher: PageFetcher = fetcher or HltvHttpClient(self.config.client)

    async def _scrape(self, page: str, path: str, extract: Callable[[TreeNode], T]) -> T:
        html = await self._fetcher.fetch(path)
        METRICS["pages_fetched"].labels(page=page).inc()

        document = parse_document(html, self.config.parser.builder)
        try:
            result = extract(document)
        except ParseError as e:
            METRICS["parse_failures"].labels(page=page, kind=type(e).__name__).inc()
            logger.warning(
                "Page layout did not match",
                page=page,
                path=path,
                error_type=type(e).__name__,
                field_label=e.field_label,
            )
            raise
        except QuerySyntaxError as e:
            METRICS["parse_failures"].labels(page=page, kind=type(e).__name__).inc()
            logger.error("Invalid structural query", page=page, selector=e.selector, reason=e.reason)
            raise

        records = _count_records(result)
        METRICS["records_extracted"].labels(page=page).inc(records)
        logger.info("Page extracted", page=page, path=path, records=records)
        return result

    async def latest_news_briefs(self) -> MainPageArticleBriefs:
        """News briefs from the front page (latest news)."""
        return await self._scrape("news", "/", parse_latest_news)

    async def archived_news_briefs(self, year: int, month: Union[Month, int, str]) -> List[ArticleBrief]:
        """News briefs from the archive for one month."""
        path = f"/news/archive/{year}/{Month.parse(month).slug}"
        return await self._scrape("archive", path, parse_archived_news)

    async def match_results(self, offset: int = 0) -> Dict[str, List[MatchResult]]:
        """Recent match results grouped by day; ``offset`` pages back through older results."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        path = f"/results?offset={offset}" if offset else "/results"
        return await self._scrape("results", path, parse_match_results)

    async def upcoming_matches(self) -> Dict[str, List[UpcomingMatch]]:
        """Upcoming matches grouped by day."""
        return await self._scrape("upcoming", "/matches", parse_upcoming_matches)

    async def close(self) -> None:
        if self._owns_fetcher:
            await self._fetcher.close()

    async def __aenter__(self) -> HltvApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
