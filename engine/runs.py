"""Contiguous same-row seat runs and their fixed-size sub-runs."""

from typing import Dict, List, Tuple

from models.seat import ScoredSeat, SeatChunk


def _average(seats: List[ScoredSeat]) -> float:
    return sum(s.score for s in seats) / len(seats)


def _make_chunk(seats: List[ScoredSeat], grid_key: Tuple) -> SeatChunk:
    return SeatChunk(
        seats=seats,
        avg_score=_average(seats),
        grid_key=grid_key,
        start_col=seats[0].col,
    )


def group_by_row(seats: List[ScoredSeat]) -> Dict[Tuple, List[ScoredSeat]]:
    """Group seats by (block, row). Dict order follows first appearance."""
    grouped: Dict[Tuple, List[ScoredSeat]] = {}
    for seat in seats:
        grouped.setdefault(seat.seat.grid_key, []).append(seat)
    return grouped


def build_all_chunks(seats: List[ScoredSeat]) -> List[SeatChunk]:
    """Split every block row into maximal runs of consecutive columns."""
    chunks: List[SeatChunk] = []

    for grid_key, row_seats in group_by_row(seats).items():
        row_seats = sorted(row_seats, key=lambda s: s.col)

        run = [row_seats[0]]
        for prev, seat in zip(row_seats, row_seats[1:]):
            if seat.col == prev.col + 1:
                run.append(seat)
            else:
                chunks.append(_make_chunk(run, grid_key))
                run = [seat]
        chunks.append(_make_chunk(run, grid_key))

    return chunks


def get_sub_chunks(chunk: SeatChunk, size: int) -> List[SeatChunk]:
    """All sliding windows of `size` seats within a run."""
    if size <= 0 or len(chunk.seats) < size:
        return []
    return [
        _make_chunk(chunk.seats[i:i + size], chunk.grid_key)
        for i in range(len(chunk.seats) - size + 1)
    ]


def build_candidates(seats: List[ScoredSeat], size: int) -> List[SeatChunk]:
    candidates: List[SeatChunk] = []
    for chunk in build_all_chunks(seats):
        candidates.extend(get_sub_chunks(chunk, size))
    return candidates
