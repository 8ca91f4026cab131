"""Tests for skill/luck ordering of the open tier."""

import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.application import Application
from engine.hybrid_selector import clamp_skill_weight, hybrid_selection


def make_app(app_id, score):
    return Application(app_id, past_score=score)


def scripted(draws):
    it = iter(draws)
    return lambda: next(it)


def ids(apps):
    return [a.application_id for a in apps]


class TestClampSkillWeight:
    def test_in_range_unchanged(self):
        assert clamp_skill_weight(0.3) == 0.3

    def test_above_one(self):
        assert clamp_skill_weight(1.5) == 1.0

    def test_below_zero(self):
        assert clamp_skill_weight(-0.2) == 0.0


class TestHybridSelection:
    def test_full_skill_is_score_order(self):
        apps = [make_app("a", 3.0), make_app("b", 9.0), make_app("c", 6.0)]
        order = hybrid_selection(apps, 1.0, random.Random(7).random)
        assert ids(order) == ["b", "c", "a"]

    def test_out_of_range_weight_behaves_clamped(self):
        apps = [make_app("a", 3.0), make_app("b", 9.0), make_app("c", 6.0)]
        order = hybrid_selection(apps, 1.5, random.Random(7).random)
        assert ids(order) == ["b", "c", "a"]

    def test_score_ties_keep_input_order(self):
        apps = [make_app("a", 5.0), make_app("b", 5.0), make_app("c", 5.0)]
        order = hybrid_selection(apps, 1.0, lambda: 0.5)
        assert ids(order) == ["a", "b", "c"]

    def test_luck_draws_pick_index(self):
        apps = [make_app("a", 1.0), make_app("b", 9.0), make_app("c", 5.0)]
        # remaining starts as [b, c, a]
        order = hybrid_selection(apps, 0.0, scripted([0.9, 0.9, 0.9, 0.0, 0.5, 0.5]))
        assert ids(order) == ["a", "b", "c"]

    def test_mixed_skill_and_luck(self):
        apps = [make_app("a", 1.0), make_app("b", 9.0), make_app("c", 5.0)]
        # skill (0.1 < 0.5) takes b; luck (0.8) then 0.99 takes a; skill takes c
        order = hybrid_selection(apps, 0.5, scripted([0.1, 0.8, 0.99, 0.2]))
        assert ids(order) == ["b", "a", "c"]

    def test_every_candidate_exactly_once(self):
        apps = [make_app(f"m{i}", float(i % 10)) for i in range(50)]
        order = hybrid_selection(apps, 0.7, random.Random(3).random)
        assert sorted(ids(order)) == sorted(ids(apps))

    def test_does_not_reorder_input(self):
        apps = [make_app("a", 1.0), make_app("b", 9.0)]
        hybrid_selection(apps, 1.0, lambda: 0.5)
        assert ids(apps) == ["a", "b"]

    def test_seeded_runs_repeat(self):
        apps = [make_app(f"m{i}", float(i % 7)) for i in range(30)]
        first = hybrid_selection(apps, 0.4, random.Random(11).random)
        second = hybrid_selection(apps, 0.4, random.Random(11).random)
        assert ids(first) == ids(second)

    def test_empty(self):
        assert hybrid_selection([], 0.7, scripted([])) == []


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
