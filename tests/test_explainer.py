"""Tests for outcome explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.application import Application
from models.lottery import Assignment, ScoreUpdate
from engine.explainer import describe_attribute, explain_assignment, explain_score_update


class TestDescribeAttribute:
    def test_locked(self):
        assert describe_attribute(Assignment("r", ["s"], 0.0, 0)) == "Relation (locked)"

    def test_invitation_and_relation(self):
        a = Assignment("x", ["s"], 10.0, 1)
        assert describe_attribute(a, Application("x", is_invitation=True)) == "Invitation"
        assert describe_attribute(a, Application("x", is_relation=True)) == "Relation"

    def test_rescue_group_and_fanclub(self):
        assert describe_attribute(Assignment("x", ["s"], 1.0, 2), Application("x")) == "Rescue"
        assert describe_attribute(Assignment("x", ["s", "t"], 1.0, 3), Application("x", group_size=2)) == "Group (2)"
        assert describe_attribute(Assignment("x", ["s"], 1.0, 3), Application("x")) == "Fan club"


class TestExplainAssignment:
    def test_priority_not_rated(self):
        steps = explain_assignment(Assignment("x", ["s"], 50.0, 1), Application("x", is_invitation=True), 0.7)
        assert len(steps) == 3
        assert "invitation holder" in steps[0]
        assert "not rated" in steps[2]

    def test_open_tier_mentions_weights(self):
        app = Application("x", past_score=6.0)
        steps = explain_assignment(Assignment("x", ["s"], 50.0, 3, seat_quality="good"), app, 0.7)
        assert "70%" in steps[0] and "30%" in steps[0]
        assert "Good seat" in steps[2]


class TestExplainScoreUpdate:
    def test_clamped_loss(self):
        update = ScoreUpdate("x", 9.0, 10.0, 1.0, "lose", "lose")
        steps = explain_score_update(update, Application("x", past_score=9.0))
        assert any("clamped" in s for s in steps)
        assert steps[-1].startswith("Step 3 - Next score: 10.0")

    def test_unclamped_win(self):
        update = ScoreUpdate("x", 5.0, 3.5, -1.5, "good", "win")
        steps = explain_score_update(update, Application("x", past_score=5.0))
        assert not any("clamped" in s for s in steps)
        assert "-1.5" in steps[1]

    def test_priority_unchanged(self):
        update = ScoreUpdate("x", 5.0, 5.0, 0.0, "normal", "win")
        steps = explain_score_update(update, Application("x", is_relation=True, past_score=5.0))
        assert "unchanged" in steps[1]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
