from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ncaafb_standings.domain.entities import League
from ncaafb_standings.ingestion.providers.sportsdata.client import SportsDataClient
from ncaafb_standings.ingestion.providers.sportsdata.parser import parse_standings_xml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandingsQuery:
    division: str = "FBS"
    year: int = 2014
    season: str = "REG"


def fetch_standings_xml(client: SportsDataClient, query: StandingsQuery) -> str:
    return client.get_standings_xml(query.division, query.year, query.season)


def fetch_league(client: SportsDataClient, query: StandingsQuery) -> League:
    """Fetch and parse one standings document.

    Fetch errors and MalformedEntityError propagate; nothing is retried.
    """

    league = parse_standings_xml(fetch_standings_xml(client, query))
    if league.division.id != query.division:
        logger.warning(
            "Requested division %s but document describes %s", query.division, league.division.id
        )
    return league


def load_league(path: Path) -> League:
    """Parse a standings document previously saved to disk."""

    logger.info("Loading standings from %s", path)
    return parse_standings_xml(path.read_bytes())
