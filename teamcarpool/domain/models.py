"""
Carpool domain models. Dataclasses only. No pydantic, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple, Union

Preference = Literal["none", "prefer", "always"]
Direction = Literal["to", "from", "both"]

PREFERENCES = ("none", "prefer", "always")
DIRECTIONS = ("to", "from", "both")

# Only used at the record boundary (loader / dumper).
UNASSIGNED_DRIVER_ID = "unassigned"


@dataclass(frozen=True)
class Player:
    id: str
    name: str = ""
    team_name: str = ""
    grade: str = ""
    needs_child_seat: bool = False
    group_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Driver:
    id: str
    name: str = ""
    has_license: bool = True
    max_seats_total: int = 4
    max_child_seats: int = 0
    notes: str = ""


@dataclass(frozen=True)
class EligibilityRule:
    """Override for one (driver, player) pair. No rule means allowed, no preference."""
    driver_id: str
    player_id: str
    allowed: bool = True
    preference: Preference = "none"


@dataclass(frozen=True)
class Eligibility:
    allowed: bool
    preference: Preference


@dataclass(frozen=True)
class Event:
    id: str
    name: str = ""
    date_time: str = ""
    location_name: str = ""
    location_address: str = ""
    notes: str = ""


@dataclass(frozen=True)
class EventAttendance:
    event_id: str
    player_id: str
    is_going: bool = False
    needs_ride: bool = False


@dataclass(frozen=True)
class EventDriverAvailability:
    event_id: str
    driver_id: str
    is_driving: bool = False
    direction: Direction = "both"
    available_seats_total: Optional[int] = None  # None: nunca configurado para el evento
    available_child_seats: Optional[int] = None
    notes: str = ""


# --- Ride: Assigned(driver_id) | Unassigned ---


@dataclass(frozen=True)
class Assigned:
    driver_id: str


@dataclass(frozen=True)
class Unassigned:
    pass


Ride = Union[Assigned, Unassigned]


@dataclass(frozen=True)
class Assignment:
    id: str
    event_id: str
    ride: Ride
    player_id: str
    direction: Direction = "both"

    @property
    def is_assigned(self) -> bool:
        return isinstance(self.ride, Assigned)

    @property
    def driver_id(self) -> Optional[str]:
        """Driver id of the ride, None when unassigned."""
        if isinstance(self.ride, Assigned):
            return self.ride.driver_id
        return None


def assignment_id(event_id: str, player_id: str) -> str:
    """Deterministic id: one assignment per (event, player)."""
    return f"asg_{event_id}_{player_id}"


@dataclass
class CarpoolResult:
    """Output of one engine run, with counts for observability."""
    assignments: List[Assignment]
    unassigned_player_ids: List[str]
    n_candidates: int = 0
    n_drivers: int = 0
    n_assigned: int = 0
    n_unassigned: int = 0
    duration_ms: float = field(default=0.0, compare=False)  # no entra en la igualdad
