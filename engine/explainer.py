"""Generates human-readable explanations for lottery outcomes."""

from typing import List, Optional

from models.application import Application
from models.lottery import Assignment, ScoreUpdate
from config.defaults import (
    QUALITY_LABELS, QUALITY_SCORE_DELTA, LOSE_SCORE_DELTA,
    MIN_SCORE, MAX_SCORE,
    TIER_LOCKED, TIER_PRIORITY, TIER_RESCUE, TIER_LABELS,
)


def describe_attribute(assignment: Assignment, app: Optional[Application] = None) -> str:
    """Short attribute shown on the winners list."""
    if assignment.tier == TIER_LOCKED:
        return "Relation (locked)"
    if app is not None and app.is_invitation:
        return "Invitation"
    if app is not None and app.is_relation:
        return "Relation"
    if assignment.tier == TIER_RESCUE:
        return "Rescue"
    if app is not None and app.group_size > 1:
        return f"Group ({app.group_size})"
    return "Fan club"


def explain_assignment(
    assignment: Assignment,
    app: Application,
    skill_weight: float,
) -> List[str]:
    """Produce step-by-step explanation for how an applicant got their seats."""
    steps = []

    if assignment.tier == TIER_PRIORITY:
        reason = "invitation holder" if app.is_invitation else "relation"
        steps.append(
            f"Step 1 - Tier: {TIER_LABELS[TIER_PRIORITY]} ({reason}) => allocated before everyone else, "
            f"in random order among priority applicants"
        )
    elif assignment.tier == TIER_RESCUE:
        steps.append(
            f"Step 1 - Tier: {TIER_LABELS[TIER_RESCUE]} (lost last round) => allocated after priority, "
            f"highest past score first (past score {app.past_score:.1f})"
        )
    else:
        steps.append(
            f"Step 1 - Tier: {TIER_LABELS[assignment.tier]} => draw order mixes past score "
            f"({skill_weight:.0%}) and luck ({1 - skill_weight:.0%}), past score {app.past_score:.1f}"
        )

    steps.append(
        f"Step 2 - Seats: best free contiguous run of {app.group_size} seat(s) "
        f"=> average seat score {assignment.average_score:.1f}"
    )

    if assignment.seat_quality:
        steps.append(
            f"Step 3 - Quality: ranked {QUALITY_LABELS[assignment.seat_quality]} "
            f"relative to all non-priority winners this round"
        )
    else:
        steps.append("Step 3 - Quality: not rated (priority seats are not merit-based)")

    return steps


def explain_score_update(update: ScoreUpdate, app: Application) -> List[str]:
    """Produce step-by-step explanation for a next-round score change."""
    steps = [f"Step 1 - Current score: {update.current_score:.1f}"]

    if app.is_priority:
        steps.append("Step 2 - Priority applicant => score unchanged")
    elif update.last_result == "lose":
        steps.append(f"Step 2 - Not seated => {LOSE_SCORE_DELTA:+.1f}")
    else:
        delta = QUALITY_SCORE_DELTA.get(update.seat_quality, 0.0)
        label = QUALITY_LABELS.get(update.seat_quality, update.seat_quality)
        steps.append(f"Step 2 - Seated ({label}) => {delta:+.1f}")

    raw = update.current_score
    if not app.is_priority:
        raw += LOSE_SCORE_DELTA if update.last_result == "lose" else QUALITY_SCORE_DELTA.get(update.seat_quality, 0.0)
    if raw != update.next_score:
        steps.append(
            f"Note: {raw:.1f} clamped to [{MIN_SCORE:.0f}, {MAX_SCORE:.0f}] => {update.next_score:.1f}"
        )

    steps.append(f"Step 3 - Next score: {update.next_score:.1f} ({update.change:+.1f})")
    return steps
