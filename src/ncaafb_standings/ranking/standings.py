from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ncaafb_standings.domain.entities import Conference, Division, Team
from ncaafb_standings.ranking.comparator import rank


@dataclass(frozen=True)
class Standing:
    position: int
    team: Team


def standings(teams: Iterable[Team]) -> list[Standing]:
    """Ranked rows with 1-based positions."""

    return [Standing(position=i, team=t) for i, t in enumerate(rank(teams), start=1)]


def rank_conference(conference: Conference) -> list[Team]:
    return rank(conference.teams)


def rank_division(division: Division) -> dict[str, list[Team]]:
    """Rank each conference on its own, keyed by conference id in document order."""

    return {c.id: rank_conference(c) for c in division.conferences}
