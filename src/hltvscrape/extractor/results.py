"""
Match result extraction for the results page.
"""

from __future__ import annotations

from typing import Dict, List

from .fields import count_matches, parse_unsigned, required_attr, required_next_text, required_text
from .models import MatchResult
from .query import Query, TreeNode, select_all
from .sections import group_sections

RESULTS_SECTION = Query("div.results-holder>div.results-all>div.results-sublist")
# The headline flips between div and span depending on client-side rendering.
RESULTS_HEADLINE = Query(".standard-headline")
RESULT_ROW = Query("div.result-con")

RESULT_LINK = Query("a")
RESULT_TEAM1 = Query("div.team1>div.team")
RESULT_TEAM2 = Query("div.team2>div.team")
RESULT_SCORE = Query("td.result-score>span")
RESULT_EVENT = Query("span.event-name")
RESULT_MAP = Query("div.map-text")
RESULT_STAR = Query("i.star")


def build_match_result(node: TreeNode) -> MatchResult:
    """Build one result from a ``div.result-con`` node."""
    link = required_attr(node, RESULT_LINK, "href", "match_result.link", "No href to match result")
    team1 = required_text(node, RESULT_TEAM1, "match_result.team1", "No team1 for match result")
    team2 = required_text(node, RESULT_TEAM2, "match_result.team2", "No team2 for match result")

    scores = iter(select_all(node, RESULT_SCORE))
    team1_score = parse_unsigned(
        required_next_text(scores, "match_result.team1_score", "No score for team1"),
        "match_result.team1_score",
    )
    team2_score = parse_unsigned(
        required_next_text(scores, "match_result.team2_score", "No score for team2"),
        "match_result.team2_score",
    )

    event = required_text(node, RESULT_EVENT, "match_result.event", "Failed to find event name for match result")
    map_text = required_text(node, RESULT_MAP, "match_result.map", "Failed to find map for match result")
    stars = count_matches(node, RESULT_STAR)

    return MatchResult(
        team1=team1,
        team2=team2,
        result=(team1_score, team2_score),
        link=link,
        event=event,
        map=map_text,
        stars=stars,
    )


def parse_match_results(document: TreeNode) -> Dict[str, List[MatchResult]]:
    """Results page grouped by day headline, e.g. "Results for November 8th 2020"."""
    return group_sections(
        document,
        RESULTS_SECTION,
        RESULTS_HEADLINE,
        RESULT_ROW,
        build_match_result,
        headline_label="match_results.headline",
        headline_message="Failed to find day headline",
    )
