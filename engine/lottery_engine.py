"""Tiered seat lottery — the core allocation pipeline."""

import logging
from typing import Callable, List, Optional, Set

from models.seat import Seat, ScoredSeat
from models.application import Application
from models.lottery import (
    Assignment, LockedSeat, LotteryConfig, LotteryResult, LotteryStats,
)
from engine.geometry import filter_available_seats, score_seats
from engine.group_allocator import find_and_allocate_seats
from engine.tiers import classify_tiers
from engine.hybrid_selector import hybrid_selection
from engine.quality import assign_seat_quality
from config.defaults import TIER_LOCKED, TIER_PRIORITY, TIER_RESCUE, TIER_OPEN

logger = logging.getLogger(__name__)


class _RoundState:
    """Seats granted so far in one run. Grants are final (no backtracking)."""

    def __init__(self, scored_seats: List[ScoredSeat]):
        self.scored_seats = scored_seats
        self.assigned_seat_ids: Set[str] = set()
        self.solo_seat_ids: Set[str] = set()
        self.assignments: List[Assignment] = []
        self.unassigned: List[str] = []
        self.attempt_order: List[str] = []

    def allocate(self, app: Application, tier: int) -> bool:
        self.attempt_order.append(app.application_id)
        seats = find_and_allocate_seats(
            app.group_size,
            self.scored_seats,
            self.assigned_seat_ids,
            self.solo_seat_ids if app.group_size == 1 else None,
        )
        if seats is None:
            self.unassigned.append(app.application_id)
            return False

        seat_ids = [s.seat_id for s in seats]
        self.assigned_seat_ids.update(seat_ids)
        if app.group_size == 1:
            self.solo_seat_ids.update(seat_ids)
        self.assignments.append(Assignment(
            application_id=app.application_id,
            seat_ids=seat_ids,
            average_score=sum(s.score for s in seats) / len(seats),
            tier=tier,
        ))
        return True


def build_locked_assignments(locked_seats: Optional[List[LockedSeat]]) -> List[Assignment]:
    """Relation groups reserved before the draw, reported as tier 0."""
    return [
        Assignment(
            application_id=ls.customer_id,
            seat_ids=list(ls.seat_ids),
            average_score=0.0,
            tier=TIER_LOCKED,
        )
        for ls in (locked_seats or [])
    ]


def compute_stats(
    seats: List[Seat],
    available: List[Seat],
    applications: List[Application],
    assignments: List[Assignment],
    locked_assignments: List[Assignment],
    tier2_overflow_count: int,
) -> LotteryStats:
    total_people = sum(len(a.seat_ids) for a in assignments)
    avg_score = (
        sum(a.average_score for a in assignments) / len(assignments) if assignments else 0.0
    )
    return LotteryStats(
        total_seats=len(seats),
        available_seats=len(available),
        total_applications=len(applications),
        total_people_assigned=total_people,
        average_score=avg_score,
        tier0_count=len(locked_assignments),
        tier1_count=sum(1 for a in assignments if a.tier == TIER_PRIORITY),
        tier2_count=sum(1 for a in assignments if a.tier == TIER_RESCUE),
        tier3_count=sum(1 for a in assignments if a.tier == TIER_OPEN),
        tier2_overflow_count=tier2_overflow_count,
    )


def run_lottery(
    seats: List[Seat],
    applications: List[Application],
    config: Optional[LotteryConfig] = None,
    locked_seats: Optional[List[LockedSeat]] = None,
) -> LotteryResult:
    """Full lottery pipeline: score seats, tier applicants, allocate, rate.

    Seats held by `locked_seats` are excluded from the pool; the caller's
    seat records are never modified. Allocation failures end up in
    `unassigned`; nothing here raises for ordinary inputs.
    """
    cfg = config or LotteryConfig()
    random_fn: Callable[[], float] = cfg.resolve_random_fn()
    locked_assignments = build_locked_assignments(locked_seats)
    excluded = {sid for a in locked_assignments for sid in a.seat_ids}

    # Step 1: Available seats
    available = filter_available_seats(seats, excluded)

    if not available or not applications:
        logger.warning(
            "Degenerate lottery input: %d available seats, %d applications",
            len(available), len(applications),
        )
        return LotteryResult(
            assignments=[],
            unassigned=[a.application_id for a in applications],
            stats=LotteryStats(
                total_seats=len(seats),
                available_seats=0,
                total_applications=len(applications),
                tier0_count=len(locked_assignments),
            ),
            locked_assignments=locked_assignments,
        )

    # Step 2: Score seats against the stage
    scored_seats = score_seats(available, cfg.stage_position)

    # Step 3: Tiers
    split = classify_tiers(applications, random_fn)
    state = _RoundState(scored_seats)

    # Step 4: Tier 1, priority
    for app in split.priority:
        state.allocate(app, TIER_PRIORITY)

    # Step 5: Tier 2, rescue for last round's losers
    tier2_overflow_count = 0
    for app in split.rescue:
        if not state.allocate(app, TIER_RESCUE):
            tier2_overflow_count += 1

    # Step 6: Tier 3, hybrid skill/luck order
    for app in hybrid_selection(split.open, cfg.skill_weight, random_fn):
        state.allocate(app, TIER_OPEN)

    # Step 7: Relative seat quality
    assign_seat_quality(state.assignments)

    stats = compute_stats(
        seats, available, applications, state.assignments,
        locked_assignments, tier2_overflow_count,
    )
    logger.debug(
        "Lottery done: %d seated (%d people), %d unassigned, %d rescue overflow",
        len(state.assignments), stats.total_people_assigned,
        len(state.unassigned), tier2_overflow_count,
    )

    return LotteryResult(
        assignments=state.assignments,
        unassigned=state.unassigned,
        stats=stats,
        locked_assignments=locked_assignments,
        attempt_order=state.attempt_order,
    )
