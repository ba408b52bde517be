"""Command-line interface for hltvscrape."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional

import click
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from hltvscrape import __version__
from hltvscrape.api import HltvApi, Month
from hltvscrape.config.config import load_config
from hltvscrape.exceptions import HltvError, ParseError, QuerySyntaxError, TransportError
from hltvscrape.extractor.models import MainPageArticleBriefs, grouped_to_dict
from hltvscrape.observability import configure_logging, export_prometheus
from hltvscrape.utils.atomic import atomic_write_json, atomic_write_text

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger(__name__)

EXIT_PARSE_ERROR = 2
EXIT_TRANSPORT_ERROR = 3
EXIT_CONFIG_ERROR = 4

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "table"]),
    default="json",
    show_default=True,
    help="Output format",
)
output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write JSON to this file instead of stdout",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, path_type=Path), help="Configuration file path")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the config file)",
)
@click.option(
    "--metrics-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write Prometheus metrics to this file when the command finishes",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], log_level: Optional[str], metrics_file: Optional[Path]) -> None:
    """hltvscrape - typed news, results and upcoming matches from HLTV.org."""
    ctx.ensure_object(dict)
    try:
        settings = load_config(config)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        err_console.print(f"[red]Invalid configuration[/red] {config}: {location}: {first['msg']}")
        ctx.exit(EXIT_CONFIG_ERROR)
    except yaml.YAMLError as e:
        err_console.print(f"[red]Invalid configuration[/red] {config}: {str(e).splitlines()[0]}")
        ctx.exit(EXIT_CONFIG_ERROR)
    if log_level:
        settings.monitoring.log_level = log_level
    configure_logging(settings.monitoring)
    ctx.obj["config"] = settings
    ctx.obj.setdefault("api_factory", lambda: HltvApi(config=settings))
    if metrics_file is not None:
        ctx.call_on_close(lambda: atomic_write_text(metrics_file, export_prometheus()))


def _run(ctx: click.Context, call: Callable[[HltvApi], Awaitable[Any]]) -> Any:
    """Run one API call and map failures to exit codes."""

    async def _main() -> Any:
        async with ctx.obj["api_factory"]() as api:
            return await call(api)

    try:
        return asyncio.run(_main())
    except TransportError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        ctx.exit(EXIT_TRANSPORT_ERROR)
    except (ParseError, QuerySyntaxError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        ctx.exit(EXIT_PARSE_ERROR)
    except HltvError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        ctx.exit(1)


def _emit(payload: Any, output: Optional[Path], table: Optional[Callable[[], List[Table]]]) -> None:
    if output is not None:
        atomic_write_json(output, payload)
        err_console.print(f"Wrote {output}")
    elif table is not None:
        for t in table():
            console.print(t)
    else:
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _briefs_table(title: str, briefs: List[Dict[str, Any]]) -> Table:
    table = Table(title=title)
    table.add_column("When")
    table.add_column("Title")
    table.add_column("Comments", justify="right")
    table.add_column("Path", overflow="fold")
    for brief in briefs:
        table.add_row(brief["when"], brief["name"], brief["comments_num"], brief["path"])
    return table


def _team_label(team: Dict[str, Any]) -> str:
    return team["name"] if team["kind"] == "named" else f"[italic]{team['description']}[/italic]"


@cli.command()
@format_option
@output_option
@click.pass_context
def news(ctx: click.Context, output_format: str, output: Optional[Path]) -> None:
    """Latest news from the front page."""
    briefs: MainPageArticleBriefs = _run(ctx, lambda api: api.latest_news_briefs())
    payload = briefs.to_dict()

    def tables() -> List[Table]:
        return [_briefs_table(section.capitalize(), payload[section]) for section in ("today", "yesterday", "older")]

    _emit(payload, output, tables if output_format == "table" else None)


@cli.command()
@click.argument("year", type=click.IntRange(2000, 2100))
@click.argument("month")
@format_option
@output_option
@click.pass_context
def archive(ctx: click.Context, year: int, month: str, output_format: str, output: Optional[Path]) -> None:
    """News archive for YEAR and MONTH (name or 1-12)."""
    try:
        parsed_month = Month.parse(month)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="MONTH") from e

    briefs = _run(ctx, lambda api: api.archived_news_briefs(year, parsed_month))
    payload = [brief.to_dict() for brief in briefs]

    def tables() -> List[Table]:
        return [_briefs_table(f"News from {parsed_month.slug.capitalize()} {year}", payload)]

    _emit(payload, output, tables if output_format == "table" else None)


@cli.command()
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True, help="Results page offset")
@format_option
@output_option
@click.pass_context
def results(ctx: click.Context, offset: int, output_format: str, output: Optional[Path]) -> None:
    """Recent match results grouped by day."""
    grouped = _run(ctx, lambda api: api.match_results(offset))
    payload = grouped_to_dict(grouped)

    def tables() -> List[Table]:
        out = []
        for day, matches in payload.items():
            table = Table(title=day)
            table.add_column("Team 1")
            table.add_column("Score", justify="center")
            table.add_column("Team 2")
            table.add_column("Event")
            table.add_column("Map")
            table.add_column("Stars", justify="right")
            for match in matches:
                score = f"{match['result'][0]} - {match['result'][1]}"
                table.add_row(match["team1"], score, match["team2"], match["event"], match["map"], str(match["stars"]))
            out.append(table)
        return out

    _emit(payload, output, tables if output_format == "table" else None)


@cli.command()
@format_option
@output_option
@click.pass_context
def upcoming(ctx: click.Context, output_format: str, output: Optional[Path]) -> None:
    """Upcoming matches grouped by day."""
    grouped = _run(ctx, lambda api: api.upcoming_matches())
    payload = grouped_to_dict(grouped)

    def tables() -> List[Table]:
        out = []
        for day, matches in payload.items():
            table = Table(title=day)
            table.add_column("Time")
            table.add_column("Match")
            table.add_column("Event")
            table.add_column("Format")
            table.add_column("Stars", justify="right")
            for match in matches:
                teams = match["teams"]
                if teams["kind"] == "empty":
                    label, event = teams["description"], ""
                else:
                    label = f"{_team_label(teams['team1'])} vs {_team_label(teams['team2'])}"
                    event = teams["event"]
                table.add_row(match["time"], label, event, match["meta"], str(match["rating"]))
            out.append(table)
        return out

    _emit(payload, output, tables if output_format == "table" else None)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    sys.exit(main())
