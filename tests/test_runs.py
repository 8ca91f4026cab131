"""Tests for contiguous run building."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.seat import Seat, ScoredSeat
from engine.runs import group_by_row, build_all_chunks, get_sub_chunks, build_candidates


def make_scored(seat_id, score, row=0, col=0, block="A"):
    return ScoredSeat(Seat(seat_id, 0.0, 0.0, row=row, col=col, block_id=block), score, 0.0)


def make_row(scores, row=0, block="A", start_col=0):
    return [
        make_scored(f"{block}-{row}-{start_col + i}", s, row=row, col=start_col + i, block=block)
        for i, s in enumerate(scores)
    ]


class TestGroupByRow:
    def test_groups_by_block_and_row(self):
        seats = make_row([1, 2], row=0) + make_row([3], row=1) + make_row([4], row=0, block="B")
        grouped = group_by_row(seats)
        assert list(grouped.keys()) == [("block", "A", 0), ("block", "A", 1), ("block", "B", 0)]
        assert len(grouped[("block", "A", 0)]) == 2

    def test_block_id_with_delimiter_does_not_collide(self):
        a = make_scored("x", 1, row=1, col=0, block="A_1")
        b = make_scored("y", 1, row=1, col=1, block="A")
        assert len(group_by_row([a, b])) == 2

    def test_seat_without_grid_is_own_group(self):
        loose = ScoredSeat(Seat("L1", 0, 0), 5.0, 0.0)
        loose2 = ScoredSeat(Seat("L2", 0, 0), 5.0, 0.0)
        assert len(group_by_row([loose, loose2])) == 2


class TestBuildAllChunks:
    def test_single_run(self):
        chunks = build_all_chunks(make_row([10, 20, 30]))
        assert len(chunks) == 1
        assert chunks[0].avg_score == pytest.approx(20.0)
        assert chunks[0].start_col == 0

    def test_gap_splits_run(self):
        seats = make_row([10, 20]) + make_row([30], start_col=3)
        chunks = build_all_chunks(seats)
        assert [c.seat_ids for c in chunks] == [["A-0-0", "A-0-1"], ["A-0-3"]]

    def test_sorts_by_column(self):
        seats = list(reversed(make_row([10, 20, 30])))
        chunks = build_all_chunks(seats)
        assert chunks[0].seat_ids == ["A-0-0", "A-0-1", "A-0-2"]

    def test_empty(self):
        assert build_all_chunks([]) == []


class TestSubChunks:
    def test_sliding_windows(self):
        chunk = build_all_chunks(make_row([10, 20, 30, 40, 50]))[0]
        subs = get_sub_chunks(chunk, 3)
        assert len(subs) == 3
        assert [s.avg_score for s in subs] == [20.0, 30.0, 40.0]
        assert subs[2].start_col == 2

    def test_too_short(self):
        chunk = build_all_chunks(make_row([10, 20]))[0]
        assert get_sub_chunks(chunk, 3) == []

    def test_candidates_across_rows(self):
        seats = make_row([1, 2, 3]) + make_row([4, 5], row=1)
        assert len(build_candidates(seats, 2)) == 3


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
