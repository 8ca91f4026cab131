"""Best contiguous seat run for a party, with solo-attendee clustering."""

from typing import Dict, List, Optional, Set, Tuple

from models.seat import ScoredSeat, SeatChunk
from engine.runs import build_candidates
from config.defaults import SOLO_NEIGHBOR_BONUS_RATIO


def _grid_position(seat: ScoredSeat) -> Optional[Tuple]:
    s = seat.seat
    if s.block_id is None or s.row is None or s.col is None:
        return None
    return (s.block_id, s.row, s.col)


def solo_adjacent_seat_ids(
    scored_seats: List[ScoredSeat],
    assigned_seat_ids: Set[str],
    solo_seat_ids: Set[str],
) -> Set[str]:
    """Unassigned seats in the 8-neighbourhood of any seated solo attendee."""
    grid: Dict[Tuple, str] = {}
    by_id: Dict[str, ScoredSeat] = {}
    for s in scored_seats:
        by_id[s.seat_id] = s
        pos = _grid_position(s)
        if pos is not None:
            grid[pos] = s.seat_id

    adjacent: Set[str] = set()
    for solo_id in solo_seat_ids:
        seat = by_id.get(solo_id)
        pos = _grid_position(seat) if seat else None
        if pos is None:
            continue
        block_id, row, col = pos
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                neighbor_id = grid.get((block_id, row + dr, col + dc))
                if neighbor_id and neighbor_id not in assigned_seat_ids:
                    adjacent.add(neighbor_id)
    return adjacent


def rank_candidates(
    candidates: List[SeatChunk],
    adjacent_ids: Optional[Set[str]] = None,
) -> List[Tuple[SeatChunk, float]]:
    """Sort candidates by effective score, descending; ties keep input order.

    Single-seat candidates next to a solo attendee get a flat bonus of
    SOLO_NEIGHBOR_BONUS_RATIO x the best candidate average (non-stacking).
    """
    bonus = 0.0
    if adjacent_ids:
        best = max([c.avg_score for c in candidates] + [1.0])
        bonus = best * SOLO_NEIGHBOR_BONUS_RATIO

    ranked = []
    for chunk in candidates:
        score = chunk.avg_score
        if bonus and len(chunk.seats) == 1 and chunk.seats[0].seat_id in adjacent_ids:
            score += bonus
        ranked.append((chunk, score))

    ranked.sort(key=lambda pair: pair[1], reverse=True)
    return ranked


def find_and_allocate_seats(
    group_size: int,
    scored_seats: List[ScoredSeat],
    assigned_seat_ids: Set[str],
    solo_seat_ids: Optional[Set[str]] = None,
) -> Optional[List[ScoredSeat]]:
    """Pick the best unassigned contiguous run of `group_size` seats, or None."""
    available = [s for s in scored_seats if s.seat_id not in assigned_seat_ids]
    if group_size < 1 or len(available) < group_size:
        return None

    candidates = build_candidates(available, group_size)
    if not candidates:
        return None

    adjacent_ids: Set[str] = set()
    if group_size == 1 and solo_seat_ids:
        adjacent_ids = solo_adjacent_seat_ids(scored_seats, assigned_seat_ids, solo_seat_ids)

    best_chunk, _ = rank_candidates(candidates, adjacent_ids)[0]
    return list(best_chunk.seats)
