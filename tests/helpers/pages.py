"""
HTML builders for HLTV page fragments used across the test suite.

The markup mirrors what hltv.org serves (trimmed of tracking attributes).
Keyword flags drop individual elements so tests can break one field at a time.
"""

from typing import Iterable, Optional


def news_brief(
    path: Optional[str] = "/news/30594/flashpoint-2-fantasy-game-live-with-prizes",
    name: Optional[str] = "Flashpoint 2 Fantasy game live with prizes",
    when: Optional[str] = "5 hours ago",
    comments: Optional[str] = "29 comments",
) -> str:
    href = f' href="{path}"' if path is not None else ""
    name_div = (
        f'<div class="newstext">{name}</div>' if name is not None else "<div>Flashpoint 2 Fantasy game live</div>"
    )
    when_div = f'<div class="newsrecent">{when}</div>' if when is not None else '<div class="">5 hours ago</div>'
    comments_div = f"<div>{comments}</div>" if comments is not None else ""
    return f"""
<a{href} class="newsline article" data-link-tracking-page="Frontpage"><img alt="Europe" src="/img/static/flags/30x20/EU.gif" class="newsflag flag" title="Europe">
  {name_div}
  <div class="newstc">
    {when_div}
    {comments_div}
  </div>
</a>"""


def news_block(headline: str, briefs: Iterable[str], header_class: str = "newsheader", box_class: str = "standard-box standard-list") -> str:
    return f"""
  <h2 class="{header_class}">{headline}</h2>
  <div class="{box_class}">{"".join(briefs)}
  </div>"""


def numbered_briefs(count: int, when: str = "a day ago") -> list:
    return [
        news_brief(path=f"/news/{30500 + i}/news-item-{i}", name=f"News item {i}", when=when, comments=f"{i} comments")
        for i in range(count)
    ]


def main_page(*blocks: str) -> str:
    return f"""<html><body><div class="index">{"".join(blocks)}
  <div> Some element </div>
  <a href="/news/archive/2020/november" class="button-more">More news</a><br>
</div></body></html>"""


MAIN_PAGE_HTML = main_page(
    news_block("Today's news", numbered_briefs(2, "6 hours ago")),
    "\n  <div> Some element </div>",
    news_block("Yesterday's news", numbered_briefs(3)),
    '\n  <div class="old-news-con">' + news_block("Previous news", numbered_briefs(2, "2 days ago")) + "\n  </div>",
)

ARCHIVE_PAGE_HTML = main_page(news_block("News from April, 2020", numbered_briefs(4, "2020-04-30")))


def match_result(
    team1: Optional[str] = "STMN",
    team2: Optional[str] = "Loto",
    scores: Optional[tuple] = ("2", "0"),
    event: Optional[str] = "FiReLEAGUE Latin Power - BLAST Premier Qualifier",
    map_text: Optional[str] = "bo3",
    stars: int = 0,
    link: Optional[str] = "/matches/2345169/stmn-vs-loto-fireleague-latin-power-blast-premier-qualifier",
) -> str:
    href = f' href="{link}"' if link is not None else ""
    team1_div = f'<div class="team team-won">{team1}</div>' if team1 is not None else ""
    team2_div = f'<div class="team ">{team2}</div>' if team2 is not None else ""
    score_cell = (
        f'<td class="result-score">'
        + " - ".join(f'<span class="score-{"won" if i == 0 else "lost"}">{s}</span>' for i, s in enumerate(scores))
        + "</td>"
        if scores is not None
        else ""
    )
    event_span = f'<span class="event-name">{event}</span>' if event is not None else ""
    star_icons = "".join('<i class="fa fa-star star"></i>' for _ in range(stars))
    map_div = f'<div class="map map-text">{map_text}</div>' if map_text is not None else ""
    return f"""
<div class="result-con " data-zonedgrouping-entry-unix="1604796087000"><a{href} class="a-reset">
  <div class="result">
    <table>
      <tbody><tr>
        <td class="team-cell">
          <div class="line-align team1">
            {team1_div}
            <img alt="{team1}" src="https://img-cdn.hltv.org/teamlogo/a.png" class="team-logo" title="{team1}"></div>
        </td>
        {score_cell}
        <td class="team-cell">
          <div class="line-align team2"><img alt="{team2}" src="https://img-cdn.hltv.org/teamlogo/b.png" class="team-logo" title="{team2}">
            {team2_div}
          </div>
        </td>
        <td class="event"><img alt="{event}" src="https://static.hltv.org/images/eventLogos/5620.png" class="event-logo smartphone-only">{event_span}</td>
        <td class="star-cell">
          <div class="map-and-stars">
            <div class="stars">{star_icons}</div>
            {map_div}
          </div>
        </td>
      </tr>
      </tbody></table>
  </div>
</a></div>"""


def results_sublist(headline: str, rows: Iterable[str], headline_tag: str = "span") -> str:
    return f"""
    <div class="results-sublist">
      <{headline_tag} class="standard-headline">{headline}</{headline_tag}>{"".join(rows)}
    </div>"""


def results_page(*sublists: str) -> str:
    return f"""<html><body><div class="content">
<div class="results-holder">
  <div class="results-all" data-zonedgrouping-headline-classes="standard-headline" data-zonedgrouping-group-classes="results-sublist">{"".join(sublists)}
  </div>
</div>
</div></body></html>"""


RESULTS_PAGE_HTML = results_page(
    results_sublist(
        "Results for November 8th 2020",
        [
            match_result(),
            match_result(
                team1="New England Whalers",
                team2="Chaos",
                scores=("0", "2"),
                event="IEM Beijing-Haidian 2020 North America",
                stars=1,
                link="/matches/2345196/new-england-whalers-vs-chaos-iem-beijing-haidian-2020-north-america",
            ),
        ],
    ),
    results_sublist(
        "Results for November 7th 2020",
        [
            match_result(team1="Complexity", team2="fnatic", event="IEM Beijing-Haidian 2020 Europe", stars=2),
            match_result(team1="9z", team2="STMN", scores=("16", "12"), map_text="d2"),
            match_result(team1="sAw", team2="GIANTS", scores=("2", "1"), event="Master League Portugal VI"),
        ],
        headline_tag="div",
    ),
)


def named_team(slot: str, name: str) -> str:
    return f"""
      <div class="matchTeam {slot}">
        <div class="matchTeamLogoContainer"><img alt="{name}" src="https://img-cdn.hltv.org/teamlogo/x.svg" class="matchTeamLogo" title="{name}"></div>
        <div class="matchTeamName text-ellipsis">{name}</div>
      </div>"""


def tbd_team(slot: str, description: str) -> str:
    return f"""
      <div class="matchTeam {slot}">
        <div class="team text-ellipsis">{description}</div>
      </div>"""


def rating_stars(filled: int, total: int = 5) -> str:
    return "".join(
        '<i class="fa fa-star"></i>' if i < filled else '<i class="fa fa-star faded"></i>' for i in range(total)
    )


def upcoming_match(
    team1: Optional[str] = None,
    team2: Optional[str] = None,
    event: Optional[str] = "IEM Beijing-Haidian 2020 Europe",
    empty: Optional[str] = None,
    time: Optional[str] = "20:30",
    stars: int = 1,
    meta: Optional[str] = "bo3",
    link: Optional[str] = "/matches/2345214/nip-vs-ence-big-winner-iem-beijing-haidian-2020-europe",
) -> str:
    """An upcoming match; ``team1``/``team2`` are pre-rendered slots (see named_team/tbd_team)."""
    if team1 is None and team2 is None and empty is None:
        team1 = named_team("team1", "NiP")
        team2 = tbd_team("team2", "ENCE/BIG winner")
    href = f' href="{link}"' if link is not None else ""
    time_div = f'<div class="matchTime" data-time-format="HH:mm" data-unix="1605547800000">{time}</div>' if time is not None else ""
    meta_div = f'<div class="matchMeta">{meta}</div>' if meta is not None else ""
    if empty is not None:
        body = f'<div class="matchInfoEmpty"><span class="line-clamp-3">{empty}</span></div>'
    else:
        event_div = (
            f"""
    <div class="matchEvent">
      <div class="matchEventLogoContainer"><img alt="{event}" src="https://static.hltv.org/images/eventLogos/5524.png" class="matchEventLogo"></div>
      <div class="matchEventName gtSmartphone-only">{event}</div>
    </div>"""
            if event is not None
            else ""
        )
        body = f"""
    <div class="matchTeams text-ellipsis">{team1 or ""}{team2 or ""}
    </div>{event_div}"""
    return f"""
<div class="upcomingMatch removeBackground" data-zonedgrouping-entry-unix="1605547800000" lan="false">
  <a{href} class="match a-reset">
    <div class="matchInfo">
      {time_div}
      <div class="matchRating">{rating_stars(stars)}</div>
      {meta_div}
    </div>{body}
  </a>
  <a href="/betting/analytics/2345214/nip-vs-ence" class="matchAnalytics" title="Analytics">
    <div class="analyticsLink"><i class="fa fa-bar-chart"></i><span class="gtSmartphone-only">A</span></div>
  </a>
</div>"""


def upcoming_section(headline: str, matches: Iterable[str]) -> str:
    return f"""
      <div class="upcomingMatchesSection">
        <div class="matchDayHeadline">{headline}</div>{"".join(matches)}
      </div>"""


def upcoming_page(*sections: str) -> str:
    return f"""<html><body><div class="standardPageGrid"><div class="mainContent">
  <div class="liveMatchesSection">
    <div class="liveMatch-container">
      <div class="liveMatch"><a href="/matches/2346342/natus-vincere-vs-faze" class="match a-reset">
        <div class="matchInfo"><div class="matchTime matchLive">LIVE</div><div class="matchMeta">bo3</div></div>
      </a></div>
    </div>
  </div>
  <div class="upcomingMatchesWrapper">
    <div class="upcomingMatchesContainer">
      <div class="" data-zonedgrouping-headline-classes="matchDayHeadline" data-zonedgrouping-group-classes="upcomingMatchesSection">{"".join(sections)}
      </div>
      <div class="match-filter-empty-warning" style="display: none;">Matches with selected filter are hidden.</div>
    </div>
  </div>
</div></div></body></html>"""


UPCOMING_PAGE_HTML = upcoming_page(
    upcoming_section(
        "Saturday - 2021-02-13",
        [
            upcoming_match(
                team1=named_team("team1", "MIBR"),
                team2=named_team("team2", "Liquid"),
                event="BLAST Premier Spring Groups 2021",
                time="21:30",
                stars=2,
                link="/matches/2346343/mibr-vs-liquid-blast-premier-spring-groups-2021",
            )
        ],
    ),
    upcoming_section(
        "Sunday - 2021-02-14",
        [
            upcoming_match(empty="BLAST Premier Spring Groups 2021 - Group C Consolidation Final", time="18:30", stars=2),
            upcoming_match(empty="BLAST Premier Spring Groups 2021 - Group C Final", time="22:30", stars=2),
        ],
    ),
    upcoming_section(
        "Thursday - 2021-03-04",
        [
            upcoming_match(
                team1=named_team("team1", "FATE"),
                team2=named_team("team2", "Singularity"),
                event="ESEA Premier Season 36 Europe",
                time="21:00",
                stars=0,
            )
        ],
    ),
)
