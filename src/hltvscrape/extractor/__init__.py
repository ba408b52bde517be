"""
hltvscrape record extraction engine.

Turns parsed HLTV pages into typed records:
1. Query adapter: precompiled CSS queries over BeautifulSoup trees
2. Field extractors: required/optional fields with named failures
3. Record builders: news briefs, match results, upcoming matches
4. Section groupers and page assemblers: headline -> records mappings

Every entry point takes an already parsed document and either returns a fully
built aggregate or raises a single ``ParseError``.
"""

from .articles import build_article_brief, parse_archived_news, parse_latest_news
from .models import (
    ArticleBrief,
    EmptyTeams,
    GroupedRecords,
    MainPageArticleBriefs,
    MatchResult,
    MatchTeams,
    NamedTeam,
    TbdTeam,
    UpcomingMatch,
    UpcomingMatchTeam,
    UpcomingMatchTeams,
    grouped_to_dict,
)
from .query import Query, TreeNode, parse_document
from .results import build_match_result, parse_match_results
from .sections import collect_blocks, group_sections
from .upcoming import build_upcoming_match, build_upcoming_match_team, parse_upcoming_matches

__all__ = [
    "Query",
    "TreeNode",
    "parse_document",
    "ArticleBrief",
    "MainPageArticleBriefs",
    "MatchResult",
    "NamedTeam",
    "TbdTeam",
    "UpcomingMatchTeam",
    "EmptyTeams",
    "MatchTeams",
    "UpcomingMatchTeams",
    "UpcomingMatch",
    "GroupedRecords",
    "grouped_to_dict",
    "build_article_brief",
    "build_match_result",
    "build_upcoming_match",
    "build_upcoming_match_team",
    "collect_blocks",
    "group_sections",
    "parse_latest_news",
    "parse_archived_news",
    "parse_match_results",
    "parse_upcoming_matches",
]
