"""
Carpool assign engine. Greedy deterministic, single pass, no backtracking. No solver.

Candidates (going + needs ride) -> child-seat players first (stable) ->
for each candidate the feasible bucket with the highest score (first one on ties)
-> Assigned / Unassigned records.
"""

import logging
import time
from typing import Dict, Iterable, List, Optional, Sequence

from teamcarpool.core.assignment_engine.capacity_buckets import DriverBucket, build_buckets
from teamcarpool.domain.constraints import DEFAULT_SCORING_CONFIG, ScoringConfig
from teamcarpool.domain.eligibility import EligibilityIndex
from teamcarpool.domain.errors import NoDriversAvailableError
from teamcarpool.domain.models import (
    Assigned,
    Assignment,
    CarpoolResult,
    Driver,
    EligibilityRule,
    Event,
    EventAttendance,
    EventDriverAvailability,
    Player,
    Unassigned,
    assignment_id,
)

logger = logging.getLogger(__name__)


def select_candidates(
    players: Sequence[Player],
    attendance: Iterable[EventAttendance],
) -> List[Player]:
    """Players with is_going and needs_ride, in players order. First record per player wins."""
    by_player: Dict[str, EventAttendance] = {}
    for att in attendance:
        by_player.setdefault(att.player_id, att)

    known = {p.id for p in players}
    for pid in by_player:
        if pid not in known:
            logger.debug("Attendance for unknown player %s ignored", pid)

    out: List[Player] = []
    for p in players:
        att = by_player.get(p.id)
        if att is not None and att.is_going and att.needs_ride:
            out.append(p)
    return out


def order_candidates(candidates: Sequence[Player]) -> List[Player]:
    # sorted() es estable: dentro de cada grupo se mantiene el orden de entrada
    return sorted(candidates, key=lambda p: 0 if p.needs_child_seat else 1)


def _best_bucket(
    player: Player,
    buckets: List[DriverBucket],
    eligibility: EligibilityIndex,
    config: ScoringConfig,
) -> Optional[DriverBucket]:
    best: Optional[DriverBucket] = None
    best_score = -1
    for bucket in buckets:
        if not bucket.can_take(player):
            continue
        rule = eligibility.resolve(bucket.driver_id, player.id)
        if not rule.allowed:
            continue
        score = config.score(rule.preference)
        if score > best_score:
            best_score = score
            best = bucket
    return best


def generate_assignments(
    event: Event,
    players: Sequence[Player],
    attendance: Iterable[EventAttendance],
    availabilities: Iterable[EventDriverAvailability],
    rules: Iterable[EligibilityRule],
    drivers: Iterable[Driver] = (),
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> CarpoolResult:
    """
    Full assignment set for the event. Replaces any previous set for it.

    Raises:
        NoDriversAvailableError: no availability with is_driving=True.
    """
    t0 = time.perf_counter()
    availabilities = list(availabilities)
    if not any(av.is_driving for av in availabilities):
        raise NoDriversAvailableError(event.id)

    buckets = build_buckets(availabilities, drivers)
    eligibility = EligibilityIndex(rules)
    candidates = order_candidates(select_candidates(players, attendance))

    assignments: List[Assignment] = []
    unassigned_ids: List[str] = []
    for player in candidates:
        bucket = _best_bucket(player, buckets, eligibility, config)
        if bucket is not None:
            bucket.take(player)
            ride = Assigned(driver_id=bucket.driver_id)
            logger.debug("Player %s -> driver %s", player.id, bucket.driver_id)
        else:
            ride = Unassigned()
            unassigned_ids.append(player.id)
            logger.debug("Player %s -> unassigned (no feasible driver)", player.id)
        assignments.append(
            Assignment(
                id=assignment_id(event.id, player.id),
                event_id=event.id,
                ride=ride,
                player_id=player.id,
                direction="both",  # no se cruza con la dirección del conductor
            )
        )

    duration_ms = (time.perf_counter() - t0) * 1000.0
    n_assigned = len(assignments) - len(unassigned_ids)
    logger.info(
        "Carpool generated for event %s: %d candidates, %d drivers, %d assigned, %d unassigned",
        event.id,
        len(candidates),
        len(buckets),
        n_assigned,
        len(unassigned_ids),
    )
    return CarpoolResult(
        assignments=assignments,
        unassigned_player_ids=unassigned_ids,
        n_candidates=len(candidates),
        n_drivers=len(buckets),
        n_assigned=n_assigned,
        n_unassigned=len(unassigned_ids),
        duration_ms=duration_ms,
    )
