from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from ncaafb_standings.domain.entities import (
    Conference,
    Division,
    League,
    Team,
    build_conference,
    build_division,
    build_league,
    build_team,
)
from ncaafb_standings.domain.errors import MalformedEntityError
from ncaafb_standings.domain.records import Situation

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(el: ET.Element, name: str) -> list[ET.Element]:
    return [c for c in el if _local(c.tag) == name]


def _child(el: ET.Element, name: str) -> ET.Element | None:
    for c in el:
        if _local(c.tag) == name:
            return c
    return None


def _attrs(el: ET.Element | None) -> dict[str, str] | None:
    if el is None:
        return None
    return dict(el.attrib)


def parse_team(el: ET.Element) -> Team:
    records = {s: _attrs(_child(el, s.value)) for s in Situation}
    team = build_team(
        el.attrib,
        {s: r for s, r in records.items() if r is not None},
        points=_attrs(_child(el, "points")),
        touchdowns=_attrs(_child(el, "touchdowns")),
        streak=_attrs(_child(el, "streak")),
    )
    if not team.points.is_consistent:
        logger.warning(
            "Team %s reports net points %d but for-against is %d; using reported net",
            team.id,
            team.points.net,
            team.points.points_for - team.points.points_against,
        )
    return team


def parse_conference(el: ET.Element) -> Conference:
    return build_conference(el.attrib, [parse_team(t) for t in _children(el, "team")])


def parse_division(el: ET.Element) -> Division:
    return build_division(
        el.attrib, [parse_conference(c) for c in _children(el, "conference")]
    )


def parse_standings_xml(text: str | bytes) -> League:
    """Parse a SportsData standings document into a League.

    Element names are matched without their namespace. Any structural or field
    problem raises MalformedEntityError and no League is returned.
    """

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise MalformedEntityError(
            "standings document is not well-formed XML", {"error": str(e)}
        ) from e

    if _local(root.tag) != "standings":
        raise MalformedEntityError(
            "expected <standings> root element", {"root": _local(root.tag)}
        )

    divisions = _children(root, "division")
    if len(divisions) != 1:
        raise MalformedEntityError(
            "standings document must contain exactly one <division>",
            {"divisions": len(divisions)},
        )

    league = build_league(root.attrib, parse_division(divisions[0]))
    logger.info(
        "Parsed standings season=%s type=%s division=%s conferences=%d teams=%d",
        league.season,
        league.season_type,
        league.division.id,
        len(league.conferences),
        len(league.division.teams()),
    )
    return league
