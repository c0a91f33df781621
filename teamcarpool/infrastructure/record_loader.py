"""
Record loader. Raw dict -> domain dataclass (validated through pydantic schemas), and back for assignments.
"""

from typing import Callable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from teamcarpool.domain.errors import InvalidRecordError
from teamcarpool.domain.models import (
    UNASSIGNED_DRIVER_ID,
    Assigned,
    Assignment,
    Driver,
    EligibilityRule,
    Event,
    EventAttendance,
    EventDriverAvailability,
    Player,
    Unassigned,
)
from teamcarpool.infrastructure.schemas import (
    AssignmentSchema,
    AttendanceSchema,
    DriverSchema,
    EligibilitySchema,
    EventDriverSchema,
    EventSchema,
    PlayerSchema,
)

S = TypeVar("S", bound=BaseModel)
T = TypeVar("T")


def _load_many(
    raw_records: list[dict],
    schema: Type[S],
    build: Callable[[S], T],
    kind: str,
) -> List[T]:
    out: List[T] = []
    for i, raw in enumerate(raw_records):
        try:
            rec = schema.model_validate(raw)
        except ValidationError as e:
            raise InvalidRecordError(kind, i, str(e)) from e
        out.append(build(rec))
    return out


def load_players(raw_players: list[dict]) -> list[Player]:
    return _load_many(
        raw_players,
        PlayerSchema,
        lambda r: Player(
            id=r.id,
            name=r.name,
            team_name=r.team_name,
            grade=r.grade,
            needs_child_seat=r.needs_child_seat,
            group_ids=tuple(r.group_ids),
        ),
        "player",
    )


def load_drivers(raw_drivers: list[dict]) -> list[Driver]:
    return _load_many(
        raw_drivers,
        DriverSchema,
        lambda r: Driver(
            id=r.id,
            name=r.name,
            has_license=r.has_license,
            max_seats_total=r.max_seats_total,
            max_child_seats=r.max_child_seats,
            notes=r.notes,
        ),
        "driver",
    )


def load_rules(raw_rules: list[dict]) -> list[EligibilityRule]:
    return _load_many(
        raw_rules,
        EligibilitySchema,
        lambda r: EligibilityRule(
            driver_id=r.driver_id,
            player_id=r.player_id,
            allowed=r.allowed,
            preference=r.preference,
        ),
        "eligibility",
    )


def load_event(raw_event: dict) -> Event:
    return _load_many(
        [raw_event],
        EventSchema,
        lambda r: Event(
            id=r.id,
            name=r.name,
            date_time=r.date_time,
            location_name=r.location_name,
            location_address=r.location_address,
            notes=r.notes,
        ),
        "event",
    )[0]


def load_attendance(raw_attendance: list[dict]) -> list[EventAttendance]:
    return _load_many(
        raw_attendance,
        AttendanceSchema,
        lambda r: EventAttendance(
            event_id=r.event_id,
            player_id=r.player_id,
            is_going=r.is_going,
            needs_ride=r.needs_ride,
        ),
        "attendance",
    )


def load_availabilities(raw_event_drivers: list[dict]) -> list[EventDriverAvailability]:
    """Seat fields absent or null stay None so the bucket falls back to the driver's maxima."""
    return _load_many(
        raw_event_drivers,
        EventDriverSchema,
        lambda r: EventDriverAvailability(
            event_id=r.event_id,
            driver_id=r.driver_id,
            is_driving=r.is_driving,
            direction=r.direction,
            available_seats_total=r.available_seats_total,
            available_child_seats=r.available_child_seats,
            notes=r.notes,
        ),
        "event driver",
    )


def load_assignments(raw_assignments: list[dict]) -> list[Assignment]:
    return _load_many(
        raw_assignments,
        AssignmentSchema,
        lambda r: Assignment(
            id=r.id,
            event_id=r.event_id,
            ride=Unassigned() if r.driver_id == UNASSIGNED_DRIVER_ID else Assigned(r.driver_id),
            player_id=r.player_id,
            direction=r.direction,
        ),
        "assignment",
    )


def dump_assignments(assignments: list[Assignment]) -> list[dict]:
    """Domain -> camelCase records; Unassigned becomes driverId="unassigned"."""
    return [
        AssignmentSchema(
            id=a.id,
            event_id=a.event_id,
            driver_id=a.driver_id if a.driver_id is not None else UNASSIGNED_DRIVER_ID,
            player_id=a.player_id,
            direction=a.direction,
        ).model_dump(by_alias=True)
        for a in assignments
    ]
