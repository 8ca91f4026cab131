"""Tests for relative seat-quality rating."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.lottery import Assignment
from engine.quality import quality_for_percentile, assign_seat_quality, quality_counts


def make_assignment(app_id, score, tier=3):
    return Assignment(app_id, [f"S-{app_id}"], score, tier)


class TestQualityForPercentile:
    def test_band_edges(self):
        assert quality_for_percentile(0) == "top"
        assert quality_for_percentile(14.9) == "top"
        assert quality_for_percentile(15) == "good"
        assert quality_for_percentile(40) == "normal"
        assert quality_for_percentile(60) == "back"
        assert quality_for_percentile(85) == "far"
        assert quality_for_percentile(99) == "far"


class TestAssignSeatQuality:
    def test_twenty_assignments_band_sizes(self):
        assignments = [make_assignment(f"a{i}", float(20 - i)) for i in range(20)]
        assign_seat_quality(assignments)
        counts = quality_counts(assignments)
        assert counts == {"top": 3, "good": 5, "normal": 4, "back": 5, "far": 3}

    def test_best_score_is_top(self):
        assignments = [make_assignment("low", 10.0), make_assignment("high", 90.0)]
        assign_seat_quality(assignments)
        assert assignments[1].seat_quality == "top"
        assert assignments[0].seat_quality == "normal"

    def test_priority_unlabelled_and_not_ranked(self):
        assignments = [
            make_assignment("vip", 1000.0, tier=1),
            make_assignment("fan", 50.0, tier=3),
        ]
        assign_seat_quality(assignments)
        assert assignments[0].seat_quality is None
        assert assignments[1].seat_quality == "top"

    def test_rescue_and_locked_tiers_rated(self):
        assignments = [make_assignment("r", 60.0, tier=2), make_assignment("o", 40.0, tier=3)]
        assign_seat_quality(assignments)
        assert all(a.seat_quality is not None for a in assignments)

    def test_keeps_input_order(self):
        assignments = [make_assignment("a", 1.0), make_assignment("b", 2.0)]
        result = assign_seat_quality(assignments)
        assert [a.application_id for a in result] == ["a", "b"]

    def test_only_priority(self):
        assignments = [make_assignment("vip", 100.0, tier=1)]
        assign_seat_quality(assignments)
        assert assignments[0].seat_quality is None

    def test_empty(self):
        assert assign_seat_quality([]) == []


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
