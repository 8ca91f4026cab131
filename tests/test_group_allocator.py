"""Tests for party seat selection."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.seat import Seat, ScoredSeat
from engine.runs import build_candidates
from engine.group_allocator import (
    solo_adjacent_seat_ids,
    rank_candidates,
    find_and_allocate_seats,
)


def make_scored(seat_id, score, row=0, col=0, block="A"):
    return ScoredSeat(Seat(seat_id, 0.0, 0.0, row=row, col=col, block_id=block), score, 0.0)


def make_row(scores, row=0, block="A"):
    return [make_scored(f"{block}-{row}-{i}", s, row=row, col=i, block=block) for i, s in enumerate(scores)]


class TestFindAndAllocateSeats:
    def test_picks_highest_average_window(self):
        seats = make_row([10, 20, 30, 40, 50])
        chosen = find_and_allocate_seats(3, seats, set())
        assert [s.score for s in chosen] == [30, 40, 50]

    def test_tie_keeps_first_candidate(self):
        seats = make_row([50, 50, 10, 50, 50])
        chosen = find_and_allocate_seats(2, seats, set())
        assert [s.seat_id for s in chosen] == ["A-0-0", "A-0-1"]

    def test_skips_assigned_seats(self):
        seats = make_row([10, 20, 30, 40, 50])
        chosen = find_and_allocate_seats(2, seats, {"A-0-4"})
        assert [s.seat_id for s in chosen] == ["A-0-2", "A-0-3"]

    def test_assigned_seat_breaks_run(self):
        seats = make_row([10, 20, 30])
        assert find_and_allocate_seats(3, seats, {"A-0-1"}) is None

    def test_never_spans_gap(self):
        seats = make_row([10, 20]) + [make_scored("A-0-3", 30, col=3)]
        assert find_and_allocate_seats(3, seats, set()) is None

    def test_never_spans_rows(self):
        seats = make_row([10, 20], row=0) + make_row([30], row=1)
        chosen = find_and_allocate_seats(3, seats, set())
        assert chosen is None

    def test_never_spans_blocks(self):
        seats = [make_scored("A1", 10, col=0, block="A"), make_scored("B1", 10, col=1, block="B")]
        assert find_and_allocate_seats(2, seats, set()) is None

    def test_seats_without_grid_only_fit_solos(self):
        seats = [ScoredSeat(Seat("L1", 0, 0), 10.0, 0.0), ScoredSeat(Seat("L2", 0, 0), 20.0, 0.0)]
        assert find_and_allocate_seats(2, seats, set()) is None
        chosen = find_and_allocate_seats(1, seats, set())
        assert chosen[0].seat_id == "L2"

    def test_not_enough_seats(self):
        assert find_and_allocate_seats(4, make_row([1, 2, 3]), set()) is None

    def test_zero_group_size(self):
        assert find_and_allocate_seats(0, make_row([1, 2, 3]), set()) is None

    def test_empty_pool(self):
        assert find_and_allocate_seats(1, [], set()) is None


class TestSoloClustering:
    def test_adjacent_ids_eight_neighbourhood(self):
        seats = [make_scored(f"A-{r}-{c}", 1, row=r, col=c) for r in range(3) for c in range(3)]
        adjacent = solo_adjacent_seat_ids(seats, {"A-1-1"}, {"A-1-1"})
        assert len(adjacent) == 8
        assert "A-1-1" not in adjacent

    def test_adjacent_excludes_assigned(self):
        seats = make_row([1, 1, 1])
        adjacent = solo_adjacent_seat_ids(seats, {"A-0-0", "A-0-1"}, {"A-0-1"})
        assert adjacent == {"A-0-2"}

    def test_adjacent_ignores_other_blocks(self):
        seats = [make_scored("A", 1, col=0, block="A"), make_scored("B", 1, col=1, block="B")]
        assert solo_adjacent_seat_ids(seats, {"A"}, {"A"}) == set()

    def test_solo_prefers_seat_next_to_solo(self):
        seats = [
            make_scored("A-0-0", 100, row=0, col=0),
            make_scored("A-0-1", 50, row=0, col=1),
            make_scored("A-5-5", 55, row=5, col=5),
        ]
        assigned = {"A-0-0"}
        without = find_and_allocate_seats(1, seats, assigned)
        with_solo = find_and_allocate_seats(1, seats, assigned, solo_seat_ids={"A-0-0"})
        assert without[0].seat_id == "A-5-5"
        assert with_solo[0].seat_id == "A-0-1"

    def test_bonus_does_not_stack(self):
        candidates = build_candidates(make_row([50, 40, 10]), 1)
        ranked = rank_candidates(candidates, adjacent_ids={"A-0-1", "A-0-2"})
        scores = {chunk.seat_ids[0]: score for chunk, score in ranked}
        assert scores["A-0-0"] == pytest.approx(50.0)
        assert scores["A-0-1"] == pytest.approx(50.0)
        assert scores["A-0-2"] == pytest.approx(20.0)

    def test_seat_between_two_solos_gets_one_bonus(self):
        seats = [
            make_scored("A-0-0", 30, row=0, col=0),
            make_scored("A-0-1", 10, row=0, col=1),
            make_scored("A-0-2", 30, row=0, col=2),
            make_scored("A-5-5", 13, row=5, col=5),
        ]
        solos = {"A-0-0", "A-0-2"}
        free = [s for s in seats if s.seat_id not in solos]
        ranked = rank_candidates(build_candidates(free, 1), solo_adjacent_seat_ids(seats, solos, solos))
        scores = {chunk.seat_ids[0]: score for chunk, score in ranked}
        # best free average 13, bonus 0.2 x 13 applied once
        assert scores["A-0-1"] == pytest.approx(12.6)
        chosen = find_and_allocate_seats(1, seats, solos, solo_seat_ids=solos)
        assert chosen[0].seat_id == "A-5-5"


    def test_bonus_ignored_for_groups(self):
        candidates = build_candidates(make_row([50, 40, 10]), 2)
        ranked = rank_candidates(candidates, adjacent_ids={"A-0-1", "A-0-2"})
        assert [score for _, score in ranked] == [45.0, 25.0]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
