"""CSV exports: winners and losers mailing lists, next-event customer update."""

from datetime import date
from typing import Dict, List, Optional
import pandas as pd

from models.seat import Seat
from models.application import Application
from models.lottery import LotteryResult, LockedSeat, ScoreUpdate
from engine.explainer import describe_attribute
from config.defaults import TIER_LABELS, QUALITY_LABELS, DEFAULT_EVENT_NAME

WINNER_COLUMNS = [
    "Member ID", "Name", "Group Size", "Seats", "Attribute",
    "Tier", "Seat Quality", "Score", "Address",
]
LOSER_COLUMNS = ["Member ID", "Name", "Group Size", "Address"]
NEXT_EVENT_COLUMNS = ["Member ID", "Name", "Tags", "Score", "Last Result", "Group Size"]


def _seat_label(seat_id: str, seat_map: Dict[str, Seat]) -> str:
    seat = seat_map.get(seat_id)
    return seat.label if seat else seat_id


def build_winners_df(
    result: LotteryResult,
    applications: List[Application],
    seats: List[Seat],
    locked_seats: Optional[List[LockedSeat]] = None,
) -> pd.DataFrame:
    """One row per seated party, locked relation groups first."""
    app_map = {a.application_id: a for a in applications}
    seat_map = {s.seat_id: s for s in seats}
    lock_map = {ls.customer_id: ls for ls in (locked_seats or [])}

    rows = []
    for assignment in result.locked_assignments + result.assignments:
        app = app_map.get(assignment.application_id)
        lock = lock_map.get(assignment.application_id)
        if app is not None:
            member_id, name, address, group_size = app.member_id, app.name, app.address, app.group_size
        elif lock is not None:
            member_id, name, address, group_size = "", lock.customer_name, "", lock.group_size
        else:
            member_id, name, address, group_size = "", assignment.application_id, "", len(assignment.seat_ids)

        rows.append({
            "Member ID": member_id,
            "Name": name,
            "Group Size": group_size,
            "Seats": ", ".join(_seat_label(sid, seat_map) for sid in assignment.seat_ids),
            "Attribute": describe_attribute(assignment, app),
            "Tier": TIER_LABELS[assignment.tier],
            "Seat Quality": QUALITY_LABELS.get(assignment.seat_quality, "-"),
            "Score": round(assignment.average_score, 1),
            "Address": address,
        })
    return pd.DataFrame(rows, columns=WINNER_COLUMNS)


def build_losers_df(result: LotteryResult, applications: List[Application]) -> pd.DataFrame:
    loser_ids = set(result.unassigned)
    rows = [{
        "Member ID": a.member_id,
        "Name": a.name,
        "Group Size": a.group_size,
        "Address": a.address,
    } for a in applications if a.application_id in loser_ids]
    return pd.DataFrame(rows, columns=LOSER_COLUMNS)


def build_next_event_df(updates: List[ScoreUpdate], applications: List[Application]) -> pd.DataFrame:
    """Customer update rows carrying next-round scores, in score-update order."""
    app_map = {a.application_id: a for a in applications}
    rows = []
    for update in updates:
        app = app_map.get(update.application_id)
        if app is None:
            continue
        rows.append({
            "Member ID": app.member_id,
            "Name": app.name,
            "Tags": ";".join(app.tags),
            "Score": f"{update.next_score:.1f}",
            "Last Result": update.last_result,
            "Group Size": app.group_size,
        })
    return pd.DataFrame(rows, columns=NEXT_EVENT_COLUMNS)


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    """UTF-8 with BOM so spreadsheet apps detect the encoding."""
    return df.to_csv(index=False).encode("utf-8-sig")


def export_filename(kind: str, event_name: Optional[str] = None, on: Optional[date] = None) -> str:
    """e.g. 'winners_Summer Live_2026-10-19.csv'."""
    day = (on or date.today()).isoformat()
    return f"{kind}_{event_name or DEFAULT_EVENT_NAME}_{day}.csv"
