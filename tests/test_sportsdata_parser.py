from __future__ import annotations

import pytest

from ncaafb_standings.domain.entities import StreakType
from ncaafb_standings.domain.errors import MalformedEntityError
from ncaafb_standings.domain.records import Record, Situation
from ncaafb_standings.ingestion.providers.sportsdata.parser import parse_standings_xml
from ncaafb_standings.ranking import rank

STANDINGS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<standings xmlns="http://feed.elasticstats.com/schema/ncaafb/standings-v1.0.xsd"
           season="2014" type="REG">
  <division id="FBS" name="I-A">
    <conference id="SEC" name="SEC">
      <team id="UGA" name="Bulldogs" market="Georgia" subdivision="EAST">
        <overall wins="10" losses="2" ties="0" wpct="0.833"/>
        <in_conference wins="6" losses="2" ties="0" wpct="0.750"/>
        <home wins="6" losses="1" ties="0" wpct="0.857"/>
        <decided_by_7_points wins="1" losses="1" ties="0"/>
        <last_5 wins="4" losses="1" ties="0"/>
        <points for="490" against="290" net="200"/>
        <touchdowns for="62" against="33"/>
        <streak Type="win" value="2"/>
      </team>
      <team id="AUB" name="Tigers" market="Auburn" subdivision="WEST">
        <overall wins="11" losses="1" ties="0" wpct="0.917"/>
        <points for="400" against="280" net="120"/>
        <streak Type="loss" value="1"/>
      </team>
      <team id="ALA" name="Crimson Tide" market="Alabama" subdivision="WEST">
        <overall wins="11" losses="1" ties="0" wpct="0.917"/>
        <points for="420" against="300" net="120"/>
      </team>
    </conference>
    <conference id="ACC" name="ACC">
      <team id="FSU" name="Seminoles" market="Florida State" subdivision="ATLANTIC">
        <overall wins="13" losses="0" ties="0" wpct="1.000"/>
        <points for="450" against="300" net="150"/>
      </team>
    </conference>
  </division>
</standings>
"""


def test_parse_standings_builds_full_graph() -> None:
    league = parse_standings_xml(STANDINGS_XML)

    assert league.season == "2014"
    assert league.season_type == "REG"
    assert league.division.id == "FBS"
    assert league.division.name == "I-A"
    assert [c.id for c in league.conferences] == ["SEC", "ACC"]
    assert [t.id for t in league.division.conference("SEC")] == ["UGA", "AUB", "ALA"]

    uga = league.division.conference("SEC").teams[0]
    assert uga.market == "Georgia"
    assert uga.subdivision == "EAST"
    assert uga.overall == Record(wins=10, losses=2, ties=0, win_pct=0.833)
    assert uga.record(Situation.IN_CONFERENCE).wins == 6
    assert uga.record(Situation.DECIDED_BY_7_POINTS) == Record(1, 1, 0, None)
    assert uga.record(Situation.AWAY) == Record()
    assert uga.points.net == 200
    assert uga.touchdowns.touchdowns_against == 33
    assert uga.streak.type is StreakType.WIN
    assert uga.streak.value == 2


def test_parsed_conference_ranks_by_tie_break_cascade() -> None:
    league = parse_standings_xml(STANDINGS_XML)
    ranked = rank(league.division.conference("SEC"))

    # Same record and net points: "Crimson Tide" sorts before "Tigers".
    assert [t.id for t in ranked] == ["ALA", "AUB", "UGA"]


def test_parse_accepts_documents_without_namespace() -> None:
    xml = (
        '<standings season="2014" type="REG"><division id="FCS" name="I-AA">'
        '<conference id="IVY" name="Ivy League"/></division></standings>'
    )
    league = parse_standings_xml(xml.encode("utf-8"))

    assert league.division.id == "FCS"
    assert league.division.teams() == []


def test_parse_keeps_inconsistent_net_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    xml = (
        '<standings season="2014" type="REG"><division id="FBS" name="I-A">'
        '<conference id="X" name="X"><team id="T" name="T">'
        '<points for="10" against="3" net="1"/></team></conference></division></standings>'
    )
    with caplog.at_level("WARNING"):
        league = parse_standings_xml(xml)

    assert league.division.teams()[0].points.net == 1
    assert "using reported net" in caplog.text


@pytest.mark.parametrize(
    "xml",
    [
        "<standings season='2014'",
        "<schedule season='2014'/>",
        "<standings season='2014'/>",
        (
            "<standings season='2014'><division id='FBS' name='I-A'/>"
            "<division id='FCS' name='I-AA'/></standings>"
        ),
        "<standings><division id='FBS' name='I-A'/></standings>",
        (
            "<standings season='2014'><division id='FBS' name='I-A'>"
            "<conference id='SEC' name='SEC'><team id='ALA'/></conference>"
            "</division></standings>"
        ),
        (
            "<standings season='2014'><division id='FBS' name='I-A'>"
            "<conference id='SEC' name='SEC'><team id='ALA' name='Tide'>"
            "<overall wins='many'/></team></conference></division></standings>"
        ),
    ],
)
def test_parse_rejects_malformed_documents(xml: str) -> None:
    with pytest.raises(MalformedEntityError):
        parse_standings_xml(xml)
