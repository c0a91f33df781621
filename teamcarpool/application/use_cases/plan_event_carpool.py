"""
Plan event carpool use case. Orchestrates loader + engine on raw records. No persistence.

Flow: raw records -> load (pydantic) -> generate_assignments -> records (driverId="unassigned" for Unassigned).
"""

from typing import Optional

from teamcarpool.application.config import get_settings
from teamcarpool.core.assignment_engine.carpool_assign_engine import generate_assignments
from teamcarpool.core.assignment_engine.manual_override import reassign_player
from teamcarpool.domain.constraints import ScoringConfig
from teamcarpool.infrastructure.record_loader import (
    dump_assignments,
    load_assignments,
    load_attendance,
    load_availabilities,
    load_drivers,
    load_event,
    load_players,
    load_rules,
)


def plan_event_carpool(
    raw_event: dict,
    raw_players: list[dict],
    raw_attendance: list[dict],
    raw_event_drivers: list[dict],
    raw_rules: list[dict],
    raw_drivers: Optional[list[dict]] = None,
    config: Optional[ScoringConfig] = None,
) -> dict:
    """
    Records already filtered by event id. Returns the replacement assignment set:
    {"event_id", "assignments", "unassigned_player_ids", "n_unassigned"}.

    Raises NoDriversAvailableError (nothing to persist) or InvalidRecordError.
    """
    if config is None:
        config = get_settings().scoring_config()
    event = load_event(raw_event)
    result = generate_assignments(
        event,
        load_players(raw_players),
        load_attendance(raw_attendance),
        load_availabilities(raw_event_drivers),
        load_rules(raw_rules),
        drivers=load_drivers(raw_drivers or []),
        config=config,
    )
    return {
        "event_id": event.id,
        "assignments": dump_assignments(result.assignments),
        "unassigned_player_ids": list(result.unassigned_player_ids),
        "n_unassigned": result.n_unassigned,
    }


def reassign_event_player(
    event_id: str,
    player_id: str,
    target_driver_id: str,
    raw_assignments: list[dict],
) -> list[dict]:
    """Record-level drag and drop: target "unassigned" moves the player to the unassigned column."""
    assignments = load_assignments(raw_assignments)
    return dump_assignments(reassign_player(event_id, player_id, target_driver_id, assignments))
