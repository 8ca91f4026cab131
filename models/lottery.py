import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from config.defaults import DEFAULT_SKILL_WEIGHT, DEFAULT_STAGE_POSITION


@dataclass
class LotteryConfig:
    stage_position: Tuple[float, float] = DEFAULT_STAGE_POSITION
    skill_weight: float = DEFAULT_SKILL_WEIGHT
    random_fn: Optional[Callable[[], float]] = None  # uniform draws in [0, 1)
    seed: Optional[int] = None

    def resolve_random_fn(self) -> Callable[[], float]:
        """Injected source if given, otherwise a private generator seeded with `seed`."""
        if self.random_fn is not None:
            return self.random_fn
        return random.Random(self.seed).random

    @classmethod
    def from_rule_config(cls, rule_config: Optional[dict] = None) -> "LotteryConfig":
        cfg = rule_config or {}
        return cls(
            stage_position=(
                float(cfg.get("stage_x", DEFAULT_STAGE_POSITION[0])),
                float(cfg.get("stage_y", DEFAULT_STAGE_POSITION[1])),
            ),
            skill_weight=float(cfg.get("skill_weight", DEFAULT_SKILL_WEIGHT)),
            seed=cfg.get("seed"),
        )


@dataclass
class LockedSeat:
    """Seats reserved for a relation customer before the lottery runs."""
    customer_id: str
    customer_name: str
    group_size: int
    seat_ids: List[str] = field(default_factory=list)


@dataclass
class Assignment:
    application_id: str
    seat_ids: List[str]
    average_score: float
    tier: int                           # 0=locked, 1=priority, 2=rescue, 3=open
    seat_quality: Optional[str] = None  # set after all allocations complete


@dataclass
class LotteryStats:
    total_seats: int = 0
    available_seats: int = 0
    total_applications: int = 0
    total_people_assigned: int = 0
    average_score: float = 0.0
    tier0_count: int = 0
    tier1_count: int = 0
    tier2_count: int = 0
    tier3_count: int = 0
    tier2_overflow_count: int = 0


@dataclass
class LotteryResult:
    assignments: List[Assignment] = field(default_factory=list)
    unassigned: List[str] = field(default_factory=list)
    stats: LotteryStats = field(default_factory=LotteryStats)
    locked_assignments: List[Assignment] = field(default_factory=list)
    attempt_order: List[str] = field(default_factory=list)  # application ids, draw order

    @property
    def assigned_ids(self) -> List[str]:
        return [a.application_id for a in self.assignments]

    def seat_assignment_map(self) -> dict:
        """seat_id -> Assignment, including locked relation groups."""
        mapping = {}
        for a in self.locked_assignments + self.assignments:
            for seat_id in a.seat_ids:
                mapping[seat_id] = a
        return mapping


@dataclass
class ScoreUpdate:
    application_id: str
    current_score: float
    next_score: float
    change: float
    seat_quality: str   # quality label or "lose"
    last_result: str    # "win" or "lose"
