"""
Event state helpers for the calling layer: attendance and driver toggles, event-scoped assignment sets.
The engine never calls these; it takes (is_going, needs_ride) as independent inputs.
"""

from dataclasses import replace
from typing import Any, List, Optional

from teamcarpool.domain.models import (
    DIRECTIONS,
    Assignment,
    Driver,
    EventAttendance,
    EventDriverAvailability,
)

ATTENDANCE_FIELDS = ("is_going", "needs_ride")
DRIVER_FIELDS = ("is_driving", "direction", "available_seats_total", "available_child_seats", "notes")


def toggle_attendance(
    records: List[EventAttendance],
    event_id: str,
    player_id: str,
    field: str,
) -> List[EventAttendance]:
    """
    Flips is_going or needs_ride for the player.
    Not going forces needs_ride off; going forces it back on.
    The updated record moves to the end of the list.
    """
    if field not in ATTENDANCE_FIELDS:
        raise ValueError(f"field must be one of {ATTENDANCE_FIELDS}, got {field!r}")
    existing = next(
        (a for a in records if a.event_id == event_id and a.player_id == player_id),
        EventAttendance(event_id=event_id, player_id=player_id, is_going=False, needs_ride=True),
    )
    if field == "is_going":
        going = not existing.is_going
        updated = replace(existing, is_going=going, needs_ride=going)
    else:
        updated = replace(existing, needs_ride=not existing.needs_ride)
    rest = [a for a in records if not (a.event_id == event_id and a.player_id == player_id)]
    return rest + [updated]


def toggle_driver(
    records: List[EventDriverAvailability],
    event_id: str,
    driver: Driver,
    field: str,
    value: Optional[Any] = None,
) -> List[EventDriverAvailability]:
    """
    is_driving is flipped; any other field is set to value.
    A new record starts not driving, direction "both", seats copied from the driver's maxima.
    """
    if field not in DRIVER_FIELDS:
        raise ValueError(f"field must be one of {DRIVER_FIELDS}, got {field!r}")
    existing = next(
        (d for d in records if d.event_id == event_id and d.driver_id == driver.id),
        EventDriverAvailability(
            event_id=event_id,
            driver_id=driver.id,
            is_driving=False,
            direction="both",
            available_seats_total=driver.max_seats_total,
            available_child_seats=driver.max_child_seats,
        ),
    )
    if field == "is_driving":
        updated = replace(existing, is_driving=not existing.is_driving)
    elif field == "direction":
        if value not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got {value!r}")
        updated = replace(existing, direction=value)
    elif field == "notes":
        updated = replace(existing, notes=str(value or ""))
    else:
        if value is not None and (not isinstance(value, int) or value < 0):
            raise ValueError(f"{field} must be a non-negative int or None, got {value!r}")
        updated = replace(existing, **{field: value})
    rest = [d for d in records if not (d.event_id == event_id and d.driver_id == driver.id)]
    return rest + [updated]


def replace_event_assignments(
    all_assignments: List[Assignment],
    event_id: str,
    new_assignments: List[Assignment],
) -> List[Assignment]:
    """Replace, don't merge: every prior assignment of the event goes, manual overrides included."""
    return drop_event_assignments(all_assignments, event_id) + list(new_assignments)


def drop_event_assignments(all_assignments: List[Assignment], event_id: str) -> List[Assignment]:
    return [a for a in all_assignments if a.event_id != event_id]
