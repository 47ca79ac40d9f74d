from ncaafb_standings.ranking.comparator import (
    TIE_BREAKERS,
    compare_name,
    compare_net_points,
    compare_teams,
    compare_win_pct,
    compare_wins,
    rank,
)
from ncaafb_standings.ranking.standings import Standing, rank_conference, rank_division, standings

__all__ = [
    "TIE_BREAKERS",
    "Standing",
    "compare_name",
    "compare_net_points",
    "compare_teams",
    "compare_win_pct",
    "compare_wins",
    "rank",
    "rank_conference",
    "rank_division",
    "standings",
]
