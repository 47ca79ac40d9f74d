from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from ncaafb_standings.domain.errors import MalformedEntityError
from ncaafb_standings.domain.records import (
    Record,
    Situation,
    build_record,
    check_count,
    parse_count,
    parse_int,
)


def _check_identity(
    value: Any, *, field: str, level: str, context: Mapping[str, object] | None = None
) -> None:
    if not isinstance(value, str) or not value.strip():
        raise MalformedEntityError(
            f"{level} is missing required field '{field}'", {**(context or {}), field: value}
        )


class StreakType(StrEnum):
    WIN = "win"
    LOSS = "loss"


@dataclass(frozen=True)
class Points:
    points_for: int = 0
    points_against: int = 0
    # Read from the document as published; ranking uses this value as-is.
    net: int = 0

    def __post_init__(self) -> None:
        check_count(self.points_for, field="points.for")
        check_count(self.points_against, field="points.against")
        if isinstance(self.net, bool) or not isinstance(self.net, int):
            raise MalformedEntityError("points.net must be an integer", {"points.net": self.net})

    @property
    def is_consistent(self) -> bool:
        return self.net == self.points_for - self.points_against


@dataclass(frozen=True)
class Touchdowns:
    touchdowns_for: int = 0
    touchdowns_against: int = 0

    def __post_init__(self) -> None:
        check_count(self.touchdowns_for, field="touchdowns.for")
        check_count(self.touchdowns_against, field="touchdowns.against")


@dataclass(frozen=True)
class Streak:
    type: StreakType = StreakType.WIN
    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.type, StreakType):
            raise MalformedEntityError(
                "streak.type must be a StreakType", {"streak.type": self.type}
            )
        check_count(self.value, field="streak.value")

    def __str__(self) -> str:
        return f"{'W' if self.type is StreakType.WIN else 'L'}{self.value}"


@dataclass(frozen=True)
class Team:
    id: str
    name: str
    market: str = ""
    subdivision: str = ""
    records: Mapping[Situation, Record] = field(default_factory=dict, hash=False)
    points: Points = field(default_factory=Points)
    touchdowns: Touchdowns = field(default_factory=Touchdowns)
    streak: Streak = field(default_factory=Streak)

    def __post_init__(self) -> None:
        _check_identity(self.id, field="id", level="team")
        _check_identity(self.name, field="name", level="team", context={"team_id": self.id})

        # Fill every situation and freeze the mapping.
        filled: dict[Situation, Record] = {}
        for s in Situation:
            record = self.records.get(s)
            if record is None:
                record = Record.empty(s)
            elif not isinstance(record, Record):
                raise MalformedEntityError(
                    "record must be a Record", {"team_id": self.id, "situation": s.value}
                )
            filled[s] = record.for_situation(s)
        object.__setattr__(self, "records", MappingProxyType(filled))

    def record(self, situation: Situation | str) -> Record:
        return self.records[Situation(situation)]

    @property
    def overall(self) -> Record:
        return self.records[Situation.OVERALL]

    @property
    def display_name(self) -> str:
        return f"{self.market} {self.name}".strip()


@dataclass(frozen=True)
class Conference:
    id: str
    name: str
    teams: tuple[Team, ...] = ()

    def __post_init__(self) -> None:
        _check_identity(self.id, field="id", level="conference")
        _check_identity(
            self.name, field="name", level="conference", context={"conference_id": self.id}
        )

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def __len__(self) -> int:
        return len(self.teams)


@dataclass(frozen=True)
class Division:
    id: str
    name: str
    conferences: tuple[Conference, ...] = ()

    def __post_init__(self) -> None:
        _check_identity(self.id, field="id", level="division")
        _check_identity(
            self.name, field="name", level="division", context={"division_id": self.id}
        )

    def conference(self, conference_id: str) -> Conference:
        for c in self.conferences:
            if c.id == conference_id:
                return c
        raise KeyError(conference_id)

    def teams(self) -> list[Team]:
        """All teams in document order."""

        return [t for c in self.conferences for t in c.teams]


@dataclass(frozen=True)
class League:
    season: str
    season_type: str
    division: Division

    def __post_init__(self) -> None:
        _check_identity(self.season, field="season", level="league")

    @property
    def conferences(self) -> tuple[Conference, ...]:
        return self.division.conferences


# -----------------------------
# Construction
# -----------------------------


def _require(value: Any, *, field: str, level: str, context: Mapping[str, object]) -> str:
    if value is None or not str(value).strip():
        raise MalformedEntityError(f"{level} is missing required field '{field}'", dict(context))
    return str(value).strip()


def _optional_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def build_points(fields: Mapping[str, Any] | None, *, context: Mapping[str, object]) -> Points:
    if fields is None:
        return Points()
    return Points(
        points_for=parse_count(fields.get("for"), field="points.for", context=context),
        points_against=parse_count(fields.get("against"), field="points.against", context=context),
        net=parse_int(fields.get("net"), field="points.net", context=context),
    )


def build_touchdowns(
    fields: Mapping[str, Any] | None, *, context: Mapping[str, object]
) -> Touchdowns:
    if fields is None:
        return Touchdowns()
    return Touchdowns(
        touchdowns_for=parse_count(fields.get("for"), field="touchdowns.for", context=context),
        touchdowns_against=parse_count(
            fields.get("against"), field="touchdowns.against", context=context
        ),
    )


def build_streak(fields: Mapping[str, Any] | None, *, context: Mapping[str, object]) -> Streak:
    if fields is None:
        return Streak()

    raw_type = fields.get("type")
    if raw_type is None:
        # Upstream schema spells the attribute "Type".
        raw_type = fields.get("Type")

    value = parse_count(fields.get("value"), field="streak.value", context=context)
    if raw_type is None or not str(raw_type).strip():
        return Streak(value=value)

    try:
        streak_type = StreakType(str(raw_type).strip().lower())
    except ValueError as e:
        raise MalformedEntityError(
            "streak.type must be 'win' or 'loss'", {**context, "streak.type": raw_type}
        ) from e
    return Streak(type=streak_type, value=value)


def build_team(
    fields: Mapping[str, Any],
    records: Mapping[Situation | str, Record | Mapping[str, Any] | None] | None = None,
    *,
    points: Mapping[str, Any] | None = None,
    touchdowns: Mapping[str, Any] | None = None,
    streak: Mapping[str, Any] | None = None,
) -> Team:
    """Build a team from its scalar fields plus situation → record.

    Each record may be a `Record` or the raw attribute mapping for one.

    Missing situations and aggregates default to zero values. A missing `id` or
    `name` raises MalformedEntityError.
    """

    context: dict[str, object] = {"team_id": fields.get("id"), "team_name": fields.get("name")}
    team_id = _require(fields.get("id"), field="id", level="team", context=context)
    name = _require(fields.get("name"), field="name", level="team", context=context)

    built: dict[Situation, Record] = {}
    for key, raw in (records or {}).items():
        try:
            situation = Situation(key)
        except ValueError as e:
            raise MalformedEntityError(
                f"unknown situation {key!r}", {**context, "situation": key}
            ) from e
        if isinstance(raw, Record):
            built[situation] = raw.for_situation(situation)
            continue
        try:
            built[situation] = build_record(situation, raw)
        except MalformedEntityError as e:
            raise MalformedEntityError(e.message, {**context, **(e.context or {})}) from e

    return Team(
        id=team_id,
        name=name,
        market=_optional_str(fields.get("market")),
        subdivision=_optional_str(fields.get("subdivision")),
        records=built,
        points=build_points(points, context=context),
        touchdowns=build_touchdowns(touchdowns, context=context),
        streak=build_streak(streak, context=context),
    )


def build_conference(fields: Mapping[str, Any], teams: Iterable[Team]) -> Conference:
    context: dict[str, object] = {
        "conference_id": fields.get("id"),
        "conference_name": fields.get("name"),
    }
    conference_id = _require(fields.get("id"), field="id", level="conference", context=context)
    name = _require(fields.get("name"), field="name", level="conference", context=context)

    kept = tuple(teams)
    seen: set[str] = set()
    for t in kept:
        if t.id in seen:
            raise MalformedEntityError(
                "team appears more than once in conference", {**context, "team_id": t.id}
            )
        seen.add(t.id)

    return Conference(id=conference_id, name=name, teams=kept)


def build_division(fields: Mapping[str, Any], conferences: Iterable[Conference]) -> Division:
    context: dict[str, object] = {
        "division_id": fields.get("id"),
        "division_name": fields.get("name"),
    }
    division_id = _require(fields.get("id"), field="id", level="division", context=context)
    name = _require(fields.get("name"), field="name", level="division", context=context)

    kept = tuple(conferences)
    owner: dict[str, str] = {}
    for c in kept:
        for t in c.teams:
            if t.id in owner:
                raise MalformedEntityError(
                    "team belongs to more than one conference",
                    {
                        **context,
                        "team_id": t.id,
                        "conferences": [owner[t.id], c.id],
                    },
                )
            owner[t.id] = c.id

    return Division(id=division_id, name=name, conferences=kept)


def build_league(fields: Mapping[str, Any], division: Division) -> League:
    context: dict[str, object] = {"season": fields.get("season"), "type": fields.get("type")}
    season = _require(fields.get("season"), field="season", level="league", context=context)
    return League(
        season=season,
        season_type=_optional_str(fields.get("type")),
        division=division,
    )
