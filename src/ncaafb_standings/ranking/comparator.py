from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from ncaafb_standings.domain.entities import Team

# A comparator returns < 0 when `a` ranks above `b`, > 0 when below, 0 when tied.
TeamComparator = Callable[[Team, Team], int]


def _descending(a: float | int, b: float | int) -> int:
    if a > b:
        return -1
    if a < b:
        return 1
    return 0


def compare_win_pct(a: Team, b: Team) -> int:
    """Higher overall win percentage first; stored values, no tolerance."""

    return _descending(a.overall.win_pct or 0.0, b.overall.win_pct or 0.0)


def compare_wins(a: Team, b: Team) -> int:
    return _descending(a.overall.wins, b.overall.wins)


def compare_net_points(a: Team, b: Team) -> int:
    return _descending(a.points.net, b.points.net)


def compare_name(a: Team, b: Team) -> int:
    """Alphabetically earlier name first (ascending, unlike the other keys)."""

    if a.name < b.name:
        return -1
    if a.name > b.name:
        return 1
    return 0


TIE_BREAKERS: tuple[TeamComparator, ...] = (
    compare_win_pct,
    compare_wins,
    compare_net_points,
    compare_name,
)


def compare_teams(a: Team, b: Team) -> int:
    for compare in TIE_BREAKERS:
        result = compare(a, b)
        if result:
            return result
    return 0


def rank(teams: Iterable[Team]) -> list[Team]:
    """Order teams best-first.

    The sort is stable: teams equal on every tie-break key keep their input
    order. The input is not modified.
    """

    return sorted(teams, key=cmp_to_key(compare_teams))
