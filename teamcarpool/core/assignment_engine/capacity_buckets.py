"""
Capacity buckets. Per-driver scratch counters for one engine run.
Never persisted; the engine derives Assignment records from them.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from teamcarpool.domain.models import Direction, Driver, EventDriverAvailability, Player

logger = logging.getLogger(__name__)


@dataclass
class DriverBucket:
    driver_id: str
    direction: Direction
    remaining_seats: int
    remaining_child_seats: int
    assigned_player_ids: List[str] = field(default_factory=list)

    def can_take(self, player: Player) -> bool:
        if self.remaining_seats <= 0:
            return False
        if player.needs_child_seat and self.remaining_child_seats <= 0:
            return False
        return True

    def take(self, player: Player) -> None:
        if not self.can_take(player):
            raise ValueError(f"Bucket {self.driver_id} has no room for player {player.id}")
        self.remaining_seats -= 1
        if player.needs_child_seat:
            self.remaining_child_seats -= 1
        self.assigned_player_ids.append(player.id)


def _seat_count(declared: Optional[int], fallback: Optional[int]) -> int:
    value = declared if declared is not None else fallback
    if value is None:
        return 0
    return max(0, int(value))


def build_buckets(
    availabilities: Iterable[EventDriverAvailability],
    drivers: Iterable[Driver] = (),
) -> List[DriverBucket]:
    """
    One bucket per availability with is_driving=True, in input order.
    Seats not configured for the event fall back to the driver's global maxima.
    """
    drivers_by_id: Dict[str, Driver] = {d.id: d for d in drivers}
    buckets: List[DriverBucket] = []
    for av in availabilities:
        if not av.is_driving:
            continue
        driver = drivers_by_id.get(av.driver_id)
        missing = av.available_seats_total is None or av.available_child_seats is None
        if missing and driver is None:
            logger.warning(
                "Driver %s has no seats configured for event %s and is not in the roster; "
                "missing counters default to 0",
                av.driver_id,
                av.event_id,
            )
        buckets.append(
            DriverBucket(
                driver_id=av.driver_id,
                direction=av.direction,
                remaining_seats=_seat_count(
                    av.available_seats_total, driver.max_seats_total if driver else None
                ),
                remaining_child_seats=_seat_count(
                    av.available_child_seats, driver.max_child_seats if driver else None
                ),
            )
        )
    return buckets
