"""
Shared fixtures for the carpool tests.
"""

import pytest

from teamcarpool.domain.models import Event, EventAttendance, EventDriverAvailability


@pytest.fixture
def event():
    return Event(id="E1", name="Saturday match", location_name="Riverside Park")


@pytest.fixture
def going():
    """going("P1", "P2") -> attendance records with is_going and needs_ride set."""

    def _going(*player_ids, event_id="E1"):
        return [
            EventAttendance(event_id=event_id, player_id=pid, is_going=True, needs_ride=True)
            for pid in player_ids
        ]

    return _going


@pytest.fixture
def driving():
    """driving(("D1", 3, 1), ...) -> active availabilities with (seats, child seats)."""

    def _driving(*specs, event_id="E1"):
        return [
            EventDriverAvailability(
                event_id=event_id,
                driver_id=did,
                is_driving=True,
                available_seats_total=seats,
                available_child_seats=child,
            )
            for did, seats, child in specs
        ]

    return _driving
