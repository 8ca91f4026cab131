"""Tests for CSV export builders."""

import sys
import os
from datetime import date
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.seat import Seat
from models.application import Application
from models.lottery import Assignment, LockedSeat, LotteryResult, ScoreUpdate
from data.exporter import (
    WINNER_COLUMNS,
    LOSER_COLUMNS,
    NEXT_EVENT_COLUMNS,
    build_winners_df,
    build_losers_df,
    build_next_event_df,
    to_csv_bytes,
    export_filename,
)


def make_seats():
    return [Seat(f"s{c}", c, 0, row=0, col=c, block_id="A") for c in range(4)]


def make_apps():
    return [
        Application("a1", group_size=2, member_id="M1", name="Alice", address="Tokyo",
                    tags=["fanclub"], past_score=5.0),
        Application("a2", is_invitation=True, member_id="V1", name="Vip", tags=["invitation"]),
        Application("a3", member_id="M3", name="Carl", address="Osaka", tags=["fanclub"], past_score=9.0),
    ]


def make_result():
    return LotteryResult(
        assignments=[
            Assignment("a2", ["s0"], 95.04, 1),
            Assignment("a1", ["s1", "s2"], 60.0, 3, seat_quality="top"),
        ],
        unassigned=["a3"],
        locked_assignments=[Assignment("r1", ["s3"], 0.0, 0)],
    )


class TestWinners:
    def test_columns_and_order(self):
        locks = [LockedSeat("r1", "Relation One", 1, ["s3"])]
        df = build_winners_df(make_result(), make_apps(), make_seats(), locks)
        assert list(df.columns) == WINNER_COLUMNS
        assert list(df["Name"]) == ["Relation One", "Vip", "Alice"]

    def test_row_values(self):
        df = build_winners_df(make_result(), make_apps(), make_seats())
        alice = df[df["Name"] == "Alice"].iloc[0]
        assert alice["Seats"] == "A-1-2, A-1-3"
        assert alice["Attribute"] == "Group (2)"
        assert alice["Tier"] == "Open"
        assert alice["Seat Quality"] == "Top seat"

    def test_priority_quality_dash(self):
        df = build_winners_df(make_result(), make_apps(), make_seats())
        vip = df[df["Name"] == "Vip"].iloc[0]
        assert vip["Seat Quality"] == "-"
        assert vip["Attribute"] == "Invitation"
        assert vip["Score"] == 95.0

    def test_locked_attribute(self):
        df = build_winners_df(make_result(), make_apps(), make_seats())
        assert df.iloc[0]["Attribute"] == "Relation (locked)"


class TestLosers:
    def test_losers(self):
        df = build_losers_df(make_result(), make_apps())
        assert list(df.columns) == LOSER_COLUMNS
        assert list(df["Member ID"]) == ["M3"]

    def test_no_losers(self):
        df = build_losers_df(LotteryResult(), make_apps())
        assert df.empty
        assert list(df.columns) == LOSER_COLUMNS


class TestNextEvent:
    def test_rows(self):
        updates = [
            ScoreUpdate("a1", 5.0, 1.0, -4.0, "top", "win"),
            ScoreUpdate("a3", 9.0, 10.0, 1.0, "lose", "lose"),
        ]
        df = build_next_event_df(updates, make_apps())
        assert list(df.columns) == NEXT_EVENT_COLUMNS
        assert list(df["Score"]) == ["1.0", "10.0"]
        assert list(df["Last Result"]) == ["win", "lose"]
        assert df.iloc[0]["Tags"] == "fanclub"


class TestCsvHelpers:
    def test_bom(self):
        df = build_losers_df(make_result(), make_apps())
        data = to_csv_bytes(df)
        assert data.startswith(b"\xef\xbb\xbf")
        assert b"Member ID" in data

    def test_filename(self):
        assert export_filename("winners", "Summer Live", date(2026, 7, 1)) == "winners_Summer Live_2026-07-01.csv"

    def test_filename_default_event(self):
        assert export_filename("losers", None, date(2026, 7, 1)) == "losers_Event_2026-07-01.csv"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
