"""
Record types produced by the extractor.

All records are immutable and hold plain values only, never tree nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, TypeVar, Union

T = TypeVar("T")

# Section headline -> records, in document order.
GroupedRecords = Dict[str, List[T]]


@dataclass(slots=True, frozen=True)
class ArticleBrief:
    """A single news item."""

    name: str
    path: str
    when: str
    comments_num: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "path": self.path, "when": self.when, "comments_num": self.comments_num}


@dataclass(slots=True, frozen=True)
class MainPageArticleBriefs:
    """News briefs from the front page, split by age."""

    today: Tuple[ArticleBrief, ...]
    yesterday: Tuple[ArticleBrief, ...]
    older: Tuple[ArticleBrief, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "today": [brief.to_dict() for brief in self.today],
            "yesterday": [brief.to_dict() for brief in self.yesterday],
            "older": [brief.to_dict() for brief in self.older],
        }


@dataclass(slots=True, frozen=True)
class MatchResult:
    """Short result of a finished match."""

    team1: str
    team2: str
    result: Tuple[int, int]
    link: str
    event: str
    map: str
    stars: int

    def __post_init__(self) -> None:
        if self.stars < 0:
            raise ValueError("stars must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team1": self.team1,
            "team2": self.team2,
            "result": list(self.result),
            "link": self.link,
            "event": self.event,
            "map": self.map,
            "stars": self.stars,
        }


@dataclass(slots=True, frozen=True)
class NamedTeam:
    """A team slot with a known team."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "named", "name": self.name}


@dataclass(slots=True, frozen=True)
class TbdTeam:
    """A team slot still to be decided, e.g. "ENCE/BIG winner"."""

    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "tbd", "description": self.description}


UpcomingMatchTeam = Union[NamedTeam, TbdTeam]


@dataclass(slots=True, frozen=True)
class EmptyTeams:
    """An upcoming match with no teams assigned yet, only a placeholder label."""

    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "empty", "description": self.description}


@dataclass(slots=True, frozen=True)
class MatchTeams:
    team1: UpcomingMatchTeam
    team2: UpcomingMatchTeam
    event: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "teams", "team1": self.team1.to_dict(), "team2": self.team2.to_dict(), "event": self.event}


UpcomingMatchTeams = Union[EmptyTeams, MatchTeams]


@dataclass(slots=True, frozen=True)
class UpcomingMatch:
    """A scheduled match from the matches page."""

    teams: UpcomingMatchTeams
    time: str
    rating: int  # number of non-faded stars, 0..5
    meta: str  # format, e.g. "bo3"
    link: str

    def __post_init__(self) -> None:
        if self.rating < 0:
            raise ValueError("rating must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "teams": self.teams.to_dict(),
            "time": self.time,
            "rating": self.rating,
            "meta": self.meta,
            "link": self.link,
        }


def grouped_to_dict(grouped: GroupedRecords[Any]) -> Dict[str, List[Dict[str, Any]]]:
    """JSON-ready rendering of grouped records."""
    return {key: [record.to_dict() for record in records] for key, records in grouped.items()}
