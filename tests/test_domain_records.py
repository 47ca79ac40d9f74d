from __future__ import annotations

import pytest

from ncaafb_standings.domain.errors import MalformedEntityError
from ncaafb_standings.domain.records import (
    ABBREVIATED_SITUATIONS,
    Record,
    Situation,
    build_record,
)


def test_build_record_parses_string_attributes() -> None:
    record = build_record(
        Situation.OVERALL, {"wins": "11", "losses": "1", "ties": "0", "wpct": "0.917"}
    )

    assert record == Record(wins=11, losses=1, ties=0, win_pct=0.917)
    assert record.games == 12


def test_build_record_keeps_stored_win_pct_instead_of_recomputing() -> None:
    record = build_record(Situation.HOME, {"wins": "3", "losses": "1", "ties": "0", "wpct": "0.5"})
    assert record.win_pct == 0.5


def test_build_record_defaults_missing_fields_to_zero() -> None:
    record = build_record(Situation.AWAY, {})
    assert record == Record(wins=0, losses=0, ties=0, win_pct=0.0)


def test_missing_situation_is_zero_value_record() -> None:
    assert build_record(Situation.GRASS, None) == Record.empty(Situation.GRASS)
    assert build_record(Situation.LAST_5, None).win_pct is None


@pytest.mark.parametrize("situation", sorted(ABBREVIATED_SITUATIONS))
def test_abbreviated_situations_have_no_win_pct(situation: Situation) -> None:
    record = build_record(situation, {"wins": "4", "losses": "1", "ties": "0", "wpct": "0.8"})
    assert record.win_pct is None
    assert record.wins == 4


def test_abbreviated_situation_set() -> None:
    assert ABBREVIATED_SITUATIONS == {
        Situation.DECIDED_BY_7_POINTS,
        Situation.LEADING_AT_HALF,
        Situation.LAST_5,
    }
    assert len(Situation) == 12


@pytest.mark.parametrize(
    "fields",
    [
        {"wins": "eleven"},
        {"losses": "-1"},
        {"ties": "1.5"},
        {"wins": True},
        {"wpct": "high"},
        {"wpct": "nan"},
    ],
)
def test_build_record_rejects_unparseable_numbers(fields: dict[str, object]) -> None:
    with pytest.raises(MalformedEntityError) as exc_info:
        build_record(Situation.OVERALL, fields)

    assert exc_info.value.context is not None
    assert exc_info.value.context["situation"] == "overall"
