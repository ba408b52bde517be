"""
Upcoming match extraction for the matches page.

Two variant shapes are resolved here by structural presence: a team slot is
either a named team or a "to be decided" placeholder, and a match either has
two team slots plus an event or only an empty-bracket description.
"""

from __future__ import annotations

from typing import Dict, List

from .fields import count_matches, lacks_class, optional_node, required_attr, required_node, required_text
from .models import EmptyTeams, MatchTeams, NamedTeam, TbdTeam, UpcomingMatch, UpcomingMatchTeam, UpcomingMatchTeams
from .query import Query, TreeNode, text_of
from .sections import group_sections

UPCOMING_SECTION = Query(".upcomingMatchesContainer>div>div.upcomingMatchesSection")
UPCOMING_HEADLINE = Query(".matchDayHeadline")
UPCOMING_ROW = Query("div.upcomingMatch")

MATCH_LINK = Query("a")
MATCH_TIME = Query(".matchInfo>.matchTime")
MATCH_RATING_STAR = Query(".matchInfo>.matchRating>.fa-star")
MATCH_META = Query(".matchInfo>.matchMeta")
MATCH_EMPTY = Query(".matchInfoEmpty>span")
MATCH_EVENT = Query(".matchEvent>.matchEventName")
MATCH_TEAM1 = Query(".matchTeams>.team1")
MATCH_TEAM2 = Query(".matchTeams>.team2")

TEAM_NAME = Query(".matchTeamName")
TEAM_PLACEHOLDER = Query(".team")

_not_faded = lacks_class("faded")


def build_upcoming_match_team(node: TreeNode) -> UpcomingMatchTeam:
    """Resolve a team slot, preferring a named team over a placeholder."""
    name = optional_node(node, TEAM_NAME)
    if name is not None:
        return NamedTeam(text_of(name))
    return TbdTeam(required_text(node, TEAM_PLACEHOLDER, "upcoming_team.tbd", "Failed to find TBD team info"))


def _team_slot(node: TreeNode, query: Query, label: str, message: str) -> UpcomingMatchTeam:
    return build_upcoming_match_team(required_node(node, query, label, message))


def build_upcoming_match_teams(node: TreeNode) -> UpcomingMatchTeams:
    """Empty placeholder if present, otherwise event then team1 then team2."""
    empty = optional_node(node, MATCH_EMPTY)
    if empty is not None:
        return EmptyTeams(text_of(empty))
    event = required_text(node, MATCH_EVENT, "upcoming_match.event", "Failed to find event")
    team1 = _team_slot(node, MATCH_TEAM1, "upcoming_match.team1", "Failed to find team1 element")
    team2 = _team_slot(node, MATCH_TEAM2, "upcoming_match.team2", "Failed to find team2 element")
    return MatchTeams(team1=team1, team2=team2, event=event)


def build_upcoming_match(node: TreeNode) -> UpcomingMatch:
    """Build one upcoming match from a ``div.upcomingMatch`` node."""
    link = required_attr(node, MATCH_LINK, "href", "upcoming_match.link", "No href to upcoming match")
    time = required_text(node, MATCH_TIME, "upcoming_match.time", "Failed to find match time")
    rating = count_matches(node, MATCH_RATING_STAR, _not_faded)
    meta = required_text(node, MATCH_META, "upcoming_match.meta", "Failed to get match meta (format)")
    teams = build_upcoming_match_teams(node)
    return UpcomingMatch(teams=teams, time=time, rating=rating, meta=meta, link=link)


def parse_upcoming_matches(document: TreeNode) -> Dict[str, List[UpcomingMatch]]:
    """Matches page grouped by day headline, e.g. "Saturday - 2021-02-13"."""
    return group_sections(
        document,
        UPCOMING_SECTION,
        UPCOMING_HEADLINE,
        UPCOMING_ROW,
        build_upcoming_match,
        headline_label="upcoming_matches.headline",
        headline_message="Failed to find match day headline",
    )
