"""Split applicants into priority, rescue and open tiers."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from models.application import Application

logger = logging.getLogger(__name__)


@dataclass
class TierSplit:
    priority: List[Application] = field(default_factory=list)  # tier 1, shuffled
    rescue: List[Application] = field(default_factory=list)    # tier 2, score desc
    open: List[Application] = field(default_factory=list)      # tier 3, input order


def random_index(random_fn: Callable[[], float], n: int) -> int:
    """Map a [0, 1) draw onto range(n); a stray 1.0 lands on the last index."""
    return min(int(random_fn() * n), n - 1)


def shuffle_in_place(items: list, random_fn: Callable[[], float]) -> list:
    """Fisher-Yates shuffle driven by the injected random source."""
    for i in range(len(items) - 1, 0, -1):
        j = random_index(random_fn, i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def classify_tiers(
    applications: List[Application],
    random_fn: Optional[Callable[[], float]] = None,
) -> TierSplit:
    """Place every applicant in exactly one tier and order tiers 1 and 2.

    Tier 1: invitation or relation, random order.
    Tier 2: lost the previous round, highest past score first.
    Tier 3: everyone else, left in input order for hybrid selection.
    """
    split = TierSplit()
    for app in applications:
        if app.is_priority:
            split.priority.append(app)
        elif app.lost_last_round:
            split.rescue.append(app)
        else:
            split.open.append(app)

    if random_fn is not None:
        shuffle_in_place(split.priority, random_fn)
    split.rescue.sort(key=lambda a: a.past_score, reverse=True)

    logger.debug(
        "Tier split: %d priority, %d rescue, %d open",
        len(split.priority), len(split.rescue), len(split.open),
    )
    return split
