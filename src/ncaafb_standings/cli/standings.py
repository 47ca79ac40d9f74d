from __future__ import annotations

from pathlib import Path

import typer

from ncaafb_standings.cli.common import configure_logging, sportsdata_client
from ncaafb_standings.domain.entities import Conference, League
from ncaafb_standings.domain.errors import MalformedEntityError
from ncaafb_standings.ingestion.providers.base.errors import ProviderError
from ncaafb_standings.ingestion.standings import (
    StandingsQuery,
    fetch_league,
    fetch_standings_xml,
    load_league,
)
from ncaafb_standings.ranking.standings import Standing, standings

app = typer.Typer(help="Fetch and rank NCAA football standings.")


def _format_pct(value: float | None) -> str:
    if value is None:
        return "-"
    return f"{value:.3f}"


def format_standing(row: Standing) -> str:
    team = row.team
    overall = team.overall
    wlt = f"{overall.wins}-{overall.losses}-{overall.ties}"
    return (
        f"{row.position:>3}  {team.display_name:<36} {wlt:>8}  "
        f"{_format_pct(overall.win_pct):>5}  {team.points.net:>+5}  {team.streak}"
    )


def format_conference(conference: Conference) -> list[str]:
    lines = [f"{conference.name} ({conference.id})"]
    lines.extend(format_standing(row) for row in standings(conference.teams))
    return lines


def _league_for(query: StandingsQuery, from_file: Path | None) -> League:
    if from_file is not None:
        return load_league(from_file)
    with sportsdata_client() as client:
        return fetch_league(client, query)


@app.command("rank")
def rank_cmd(
    division: str = typer.Option("FBS", "--division", help="Division id (e.g. FBS or FCS)."),
    year: int = typer.Option(2014, "--year", help="Season year (e.g. 2014)."),
    season: str = typer.Option("REG", "--season", help="Season type (e.g. REG)."),
    conference: str | None = typer.Option(
        None,
        "--conference",
        help="Only rank this conference id (e.g. SEC). Defaults to every conference.",
    ),
    from_file: Path | None = typer.Option(
        None,
        "--from-file",
        exists=True,
        dir_okay=False,
        help="Rank a saved standings XML document instead of fetching.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Rank teams within each conference of a standings document."""

    configure_logging(verbose)
    query = StandingsQuery(division=division, year=year, season=season)

    try:
        league = _league_for(query, from_file)
    except (MalformedEntityError, ProviderError, RuntimeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if conference is not None:
        try:
            selected = [league.division.conference(conference)]
        except KeyError as e:
            typer.echo(f"Error: no conference with id {conference!r}", err=True)
            raise typer.Exit(code=1) from e
    else:
        selected = list(league.conferences)

    typer.echo(
        f"{league.season} {league.season_type} standings: "
        f"{league.division.name} ({league.division.id})"
    )
    for c in selected:
        typer.echo("")
        for line in format_conference(c):
            typer.echo(line)


@app.command("fetch")
def fetch_cmd(
    out: Path = typer.Option(
        ..., "--out", dir_okay=False, help="Where to write the XML document."
    ),
    division: str = typer.Option("FBS", "--division", help="Division id (e.g. FBS or FCS)."),
    year: int = typer.Option(2014, "--year", help="Season year (e.g. 2014)."),
    season: str = typer.Option("REG", "--season", help="Season type (e.g. REG)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Download a raw standings document without ranking it."""

    configure_logging(verbose)
    query = StandingsQuery(division=division, year=year, season=season)

    try:
        with sportsdata_client() as client:
            text = fetch_standings_xml(client, query)
    except (ProviderError, RuntimeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    data = text.encode("utf-8")
    out.write_bytes(data)
    typer.echo(f"Wrote {len(data)} bytes to {out}")
