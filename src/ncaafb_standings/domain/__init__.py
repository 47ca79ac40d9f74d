from ncaafb_standings.domain.entities import (
    Conference,
    Division,
    League,
    Points,
    Streak,
    StreakType,
    Team,
    Touchdowns,
    build_conference,
    build_division,
    build_league,
    build_team,
)
from ncaafb_standings.domain.errors import MalformedEntityError
from ncaafb_standings.domain.records import ABBREVIATED_SITUATIONS, Record, Situation, build_record

__all__ = [
    "ABBREVIATED_SITUATIONS",
    "Conference",
    "Division",
    "League",
    "MalformedEntityError",
    "Points",
    "Record",
    "Situation",
    "Streak",
    "StreakType",
    "Team",
    "Touchdowns",
    "build_conference",
    "build_division",
    "build_league",
    "build_record",
    "build_team",
]
