"""Skill/luck blended ordering for the open tier."""

import logging
from typing import Callable, List

from models.application import Application
from engine.tiers import random_index
from config.defaults import MIN_SKILL_WEIGHT, MAX_SKILL_WEIGHT

logger = logging.getLogger(__name__)


def clamp_skill_weight(skill_weight: float) -> float:
    clamped = max(MIN_SKILL_WEIGHT, min(MAX_SKILL_WEIGHT, skill_weight))
    if clamped != skill_weight:
        logger.warning("skill_weight %.3f outside [0, 1], clamped to %.3f", skill_weight, clamped)
    return clamped


def hybrid_selection(
    candidates: List[Application],
    skill_weight: float,
    random_fn: Callable[[], float],
) -> List[Application]:
    """Rank every candidate by repeatedly drawing skill or luck.

    Each step draws r: if r < skill_weight the highest remaining past score
    is taken (ties in input order), otherwise a second draw picks a uniformly
    random remaining candidate. Every candidate appears exactly once.
    """
    weight = clamp_skill_weight(skill_weight)
    remaining = sorted(candidates, key=lambda a: a.past_score, reverse=True)
    selected: List[Application] = []

    while remaining:
        if random_fn() < weight:
            idx = 0
        else:
            idx = random_index(random_fn, len(remaining))
        selected.append(remaining.pop(idx))

    return selected
