from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ncaafb_standings.domain.errors import MalformedEntityError


class Situation(StrEnum):
    """Contexts a team's record is tracked under; values are the XML element names."""

    OVERALL = "overall"
    IN_CONFERENCE = "in_conference"
    NON_CONFERENCE = "non_conference"
    IN_DIVISION = "in_division"
    HOME = "home"
    AWAY = "away"
    OVERTIME = "overtime"
    GRASS = "grass"
    TURF = "turf"
    DECIDED_BY_7_POINTS = "decided_by_7_points"
    LEADING_AT_HALF = "leading_at_half"
    LAST_5 = "last_5"


# These situations are published without a win percentage.
ABBREVIATED_SITUATIONS: frozenset[Situation] = frozenset(
    {
        Situation.DECIDED_BY_7_POINTS,
        Situation.LEADING_AT_HALF,
        Situation.LAST_5,
    }
)


@dataclass(frozen=True)
class Record:
    wins: int = 0
    losses: int = 0
    ties: int = 0
    win_pct: float | None = 0.0

    def __post_init__(self) -> None:
        for name in ("wins", "losses", "ties"):
            check_count(getattr(self, name), field=name)
        if self.win_pct is not None and math.isnan(self.win_pct):
            raise MalformedEntityError("wpct is not a number", {"wpct": self.win_pct})

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.ties

    @classmethod
    def empty(cls, situation: Situation) -> Record:
        if situation in ABBREVIATED_SITUATIONS:
            return cls(win_pct=None)
        return cls()

    def for_situation(self, situation: Situation) -> Record:
        """This record as published for `situation`; abbreviated ones carry no pct."""

        if situation in ABBREVIATED_SITUATIONS and self.win_pct is not None:
            return Record(wins=self.wins, losses=self.losses, ties=self.ties, win_pct=None)
        return self


def check_count(value: Any, *, field: str, context: Mapping[str, object] | None = None) -> int:
    """Reject anything that is not a non-negative int."""

    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedEntityError(
            f"{field} must be a non-negative integer", {**(context or {}), field: value}
        )
    return value


def parse_count(value: Any, *, field: str, context: Mapping[str, object] | None = None) -> int:
    """Parse a non-negative integer count; missing values default to 0."""

    if value is None:
        return 0
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise MalformedEntityError(f"{field} must be an integer", {**(context or {}), field: value})
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        n = int(value)
    except (TypeError, ValueError) as e:
        raise MalformedEntityError(
            f"{field} is not an integer", {**(context or {}), field: value}
        ) from e
    if n < 0:
        raise MalformedEntityError(f"{field} must be >= 0", {**(context or {}), field: value})
    return n


def parse_int(value: Any, *, field: str, context: Mapping[str, object] | None = None) -> int:
    """Parse a signed integer (e.g. net points); missing values default to 0."""

    if value is None:
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise MalformedEntityError(
            f"{field} is not an integer", {**(context or {}), field: value}
        ) from e


def _parse_pct(value: Any, *, context: Mapping[str, object]) -> float:
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        pct = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedEntityError("wpct is not a number", {**context, "wpct": value}) from e
    if math.isnan(pct):
        raise MalformedEntityError("wpct is not a number", {**context, "wpct": value})
    return pct


def build_record(situation: Situation, fields: Mapping[str, Any] | None) -> Record:
    """Build the record for one situation from raw attribute values.

    `wpct` is kept exactly as read; it is never recomputed from the counts.
    Abbreviated situations always get `win_pct=None`.
    """

    if fields is None:
        return Record.empty(situation)

    context: dict[str, object] = {"situation": situation.value}
    wins = parse_count(fields.get("wins"), field="wins", context=context)
    losses = parse_count(fields.get("losses"), field="losses", context=context)
    ties = parse_count(fields.get("ties"), field="ties", context=context)

    win_pct: float | None
    if situation in ABBREVIATED_SITUATIONS:
        win_pct = None
    else:
        win_pct = _parse_pct(fields.get("wpct"), context=context)

    return Record(wins=wins, losses=losses, ties=ties, win_pct=win_pct)
