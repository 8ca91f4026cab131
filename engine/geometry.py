"""Seat desirability scoring from stage distance and premium flags."""

import math
from typing import Iterable, List, Optional, Set, Tuple

from models.seat import Seat, ScoredSeat
from config.defaults import DISTANCE_SCORE_MAX, PREMIUM_BONUS


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def filter_available_seats(
    seats: Iterable[Seat],
    excluded_seat_ids: Optional[Set[str]] = None,
) -> List[Seat]:
    """Drop disabled seats and seats held by a locked relation group."""
    excluded = excluded_seat_ids or set()
    return [s for s in seats if not s.is_disabled and s.seat_id not in excluded]


def max_stage_distance(seats: List[Seat], stage_position: Tuple[float, float]) -> float:
    """Largest seat-to-stage distance; 1 when every seat sits on the stage point."""
    sx, sy = stage_position
    longest = max((calculate_distance(s.x, s.y, sx, sy) for s in seats), default=0.0)
    return longest or 1.0


def calculate_seat_score(
    seat: Seat,
    stage_position: Tuple[float, float],
    max_distance: float,
) -> ScoredSeat:
    """Closer to the stage scores higher; premium seats get a flat bonus on top."""
    distance = calculate_distance(seat.x, seat.y, stage_position[0], stage_position[1])
    distance_score = max(0.0, DISTANCE_SCORE_MAX - (distance / max_distance) * DISTANCE_SCORE_MAX)
    premium_bonus = PREMIUM_BONUS if seat.is_premium else 0
    return ScoredSeat(seat=seat, score=distance_score + premium_bonus, distance_from_stage=distance)


def score_seats(seats: List[Seat], stage_position: Tuple[float, float]) -> List[ScoredSeat]:
    """Score already-filtered available seats against a shared max distance."""
    max_distance = max_stage_distance(seats, stage_position)
    return [calculate_seat_score(s, stage_position, max_distance) for s in seats]
