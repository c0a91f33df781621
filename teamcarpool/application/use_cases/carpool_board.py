"""
Carpool board view. Groups an event's assignments by driver for display. Read-only.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from teamcarpool.domain.models import Assignment, Driver, EventDriverAvailability


@dataclass
class DriverColumn:
    driver_id: str
    available_seats_total: int
    assigned_player_ids: List[str] = field(default_factory=list)

    @property
    def load(self) -> int:
        return len(self.assigned_player_ids)

    @property
    def is_full(self) -> bool:
        return self.load >= self.available_seats_total

    @property
    def is_over_capacity(self) -> bool:
        # Solo alcanzable con overrides manuales
        return self.load > self.available_seats_total


@dataclass
class CarpoolBoard:
    unassigned: List[str]
    drivers: List[DriverColumn]

    @property
    def over_capacity_driver_ids(self) -> List[str]:
        return [c.driver_id for c in self.drivers if c.is_over_capacity]

    @property
    def total_passengers(self) -> int:
        return len(self.unassigned) + sum(c.load for c in self.drivers)


def driver_load(assignments: Sequence[Assignment], driver_id: str) -> int:
    return sum(1 for a in assignments if a.driver_id == driver_id)


def build_board(
    assignments: Sequence[Assignment],
    availabilities: Sequence[EventDriverAvailability],
    drivers: Iterable[Driver] = (),
) -> CarpoolBoard:
    """
    One column per active driver (availability order) plus the unassigned column.
    Assignments to drivers that are no longer active are not shown in any column.
    Seats not configured for the event fall back to the driver's maximum (0 if unknown).
    """
    max_seats = {d.id: d.max_seats_total for d in drivers}
    columns = []
    for av in availabilities:
        if not av.is_driving:
            continue
        seats = av.available_seats_total
        if seats is None:
            seats = max_seats.get(av.driver_id, 0)
        columns.append(DriverColumn(driver_id=av.driver_id, available_seats_total=seats))
    by_driver = {c.driver_id: c for c in columns}
    unassigned: List[str] = []
    for a in assignments:
        if not a.is_assigned:
            unassigned.append(a.player_id)
            continue
        col = by_driver.get(a.driver_id)
        if col is not None:
            col.assigned_player_ids.append(a.player_id)
    return CarpoolBoard(unassigned=unassigned, drivers=columns)
