"""Relative seat-quality labels, recomputed every run."""

from typing import List

from models.lottery import Assignment
from config.defaults import QUALITY_BANDS, QUALITY_FALLBACK, TIER_PRIORITY


def quality_for_percentile(percentile: float) -> str:
    for upper, label in QUALITY_BANDS:
        if percentile < upper:
            return label
    return QUALITY_FALLBACK


def assign_seat_quality(assignments: List[Assignment]) -> List[Assignment]:
    """Label non-priority assignments by percentile rank of average score.

    Priority (tier 1) seats are not merit-based and stay unlabelled.
    """
    rated = [a for a in assignments if a.tier != TIER_PRIORITY]
    if not rated:
        return assignments

    rated.sort(key=lambda a: a.average_score, reverse=True)
    total = len(rated)
    for i, assignment in enumerate(rated):
        assignment.seat_quality = quality_for_percentile(i / total * 100)
    return assignments


def quality_counts(assignments: List[Assignment]) -> dict:
    counts = {label: 0 for _, label in QUALITY_BANDS}
    counts[QUALITY_FALLBACK] = 0
    for a in assignments:
        if a.seat_quality in counts:
            counts[a.seat_quality] += 1
    return counts
