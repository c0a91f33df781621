"""
Manual override: move one player to a driver (or to unassigned) after the automatic pass.
No capacity or eligibility checks; the board flags over-capacity drivers instead.
"""

import logging
from typing import Iterable, List, Union

from teamcarpool.domain.models import (
    UNASSIGNED_DRIVER_ID,
    Assigned,
    Assignment,
    Ride,
    Unassigned,
    assignment_id,
)

logger = logging.getLogger(__name__)


def to_ride(target: Union[Ride, str]) -> Ride:
    """Driver id string or Ride -> Ride. The string "unassigned" maps to Unassigned()."""
    if isinstance(target, (Assigned, Unassigned)):
        return target
    if not isinstance(target, str) or not target:
        raise ValueError(f"target must be a Ride or a non-empty driver id, got {target!r}")
    if target == UNASSIGNED_DRIVER_ID:
        return Unassigned()
    return Assigned(driver_id=target)


def reassign_player(
    event_id: str,
    player_id: str,
    target: Union[Ride, str],
    current_assignments: Iterable[Assignment],
) -> List[Assignment]:
    """
    Returns a new list: the player's assignment for the event removed, the new one
    appended at the end. Every other record keeps its position. Input is not mutated.
    """
    ride = to_ride(target)
    out = [
        a
        for a in current_assignments
        if not (a.event_id == event_id and a.player_id == player_id)
    ]
    out.append(
        Assignment(
            id=assignment_id(event_id, player_id),
            event_id=event_id,
            ride=ride,
            player_id=player_id,
            direction="both",
        )
    )
    logger.info(
        "Player %s reassigned to %s for event %s",
        player_id,
        ride.driver_id if isinstance(ride, Assigned) else UNASSIGNED_DRIVER_ID,
        event_id,
    )
    return out
