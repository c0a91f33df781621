"""
Record loader tests: camelCase records in, domain dataclasses out.
"""

import pytest

from teamcarpool.domain.errors import InvalidRecordError
from teamcarpool.domain.models import Assigned, Assignment, Unassigned
from teamcarpool.infrastructure.record_loader import (
    dump_assignments,
    load_assignments,
    load_availabilities,
    load_drivers,
    load_event,
    load_players,
    load_rules,
)


def test_load_players_camel_case():
    (p,) = load_players(
        [{"id": "P1", "name": "Ana", "teamName": "U10", "grade": "4", "needsChildSeat": True, "groupIds": ["G1"]}]
    )
    assert p.needs_child_seat is True
    assert p.team_name == "U10"
    assert p.group_ids == ("G1",)


def test_loaded_player_is_hashable_value():
    (p,) = load_players([{"id": "P1", "groupIds": ["G1", "G2"]}])
    (q,) = load_players([{"id": "P1", "groupIds": ["G1", "G2"]}])
    assert isinstance(p.group_ids, tuple)
    assert hash(p) == hash(q)
    assert len({p, q}) == 1


def test_load_players_snake_case_accepted():
    (p,) = load_players([{"id": "P1", "needs_child_seat": True}])
    assert p.needs_child_seat is True


def test_load_drivers_defaults():
    (d,) = load_drivers([{"id": "D1", "name": "Luis"}])
    assert (d.max_seats_total, d.max_child_seats, d.has_license) == (4, 0, True)


def test_load_rules_rejects_unknown_preference():
    with pytest.raises(InvalidRecordError) as exc:
        load_rules([{"driverId": "D1", "playerId": "P1", "preference": "maybe"}])
    assert exc.value.kind == "eligibility"
    assert exc.value.index == 0


def test_load_availabilities_keeps_missing_seats_as_none():
    (av,) = load_availabilities([{"eventId": "E1", "driverId": "D1", "isDriving": True}])
    assert av.available_seats_total is None
    assert av.available_child_seats is None
    assert av.direction == "both"


def test_load_availabilities_rejects_negative_seats():
    with pytest.raises(InvalidRecordError) as exc:
        load_availabilities(
            [
                {"eventId": "E1", "driverId": "D1", "isDriving": True, "availableSeatsTotal": 2},
                {"eventId": "E1", "driverId": "D2", "isDriving": True, "availableSeatsTotal": -1},
            ]
        )
    assert exc.value.index == 1


def test_load_event_requires_id():
    with pytest.raises(InvalidRecordError):
        load_event({"name": "No id"})


def test_assignments_sentinel_maps_to_unassigned():
    a, b = load_assignments(
        [
            {"id": "x", "eventId": "E1", "driverId": "unassigned", "playerId": "P1", "direction": "both"},
            {"id": "y", "eventId": "E1", "driverId": "D1", "playerId": "P2"},
        ]
    )
    assert a.ride == Unassigned()
    assert b.ride == Assigned("D1")


def test_dump_assignments_uses_collaborator_format():
    records = dump_assignments(
        [
            Assignment("asg_E1_P1", "E1", Assigned("D1"), "P1"),
            Assignment("asg_E1_P2", "E1", Unassigned(), "P2"),
        ]
    )
    assert records[0] == {
        "id": "asg_E1_P1",
        "eventId": "E1",
        "driverId": "D1",
        "playerId": "P1",
        "direction": "both",
    }
    assert records[1]["driverId"] == "unassigned"
