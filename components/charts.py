"""Plotly chart builders for the Seat Lottery Platform."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List, Optional, Tuple

from models.seat import Seat
from models.lottery import Assignment, LotteryStats, ScoreUpdate
from config.defaults import TIER_COLORS, TIER_LABELS, SEAT_QUALITIES, QUALITY_LABELS


def seat_map_scatter(
    seats: List[Seat],
    seat_assignments: Dict[str, Assignment],
    stage_position: Tuple[float, float],
    title: str = "Seat Map",
) -> go.Figure:
    """Scatter of every seat, coloured by the tier that won it."""
    rows = []
    for s in seats:
        a = seat_assignments.get(s.seat_id)
        if a is not None:
            status = TIER_LABELS[a.tier]
        elif s.is_disabled:
            status = "Disabled"
        else:
            status = "Empty"
        rows.append({
            "x": s.x, "y": s.y, "seat": s.label, "status": status,
            "premium": "Premium" if s.is_premium else "",
            "applicant": a.application_id if a else "",
            "quality": QUALITY_LABELS.get(a.seat_quality, "") if a else "",
        })
    df = pd.DataFrame(rows)

    color_map = {TIER_LABELS[t]: c for t, c in TIER_COLORS.items()}
    color_map.update({"Empty": "#d1d5db", "Disabled": "#6b7280"})

    fig = px.scatter(
        df, x="x", y="y", color="status",
        hover_data=["seat", "applicant", "quality", "premium"],
        color_discrete_map=color_map,
        title=title,
    )
    fig.add_trace(go.Scatter(
        x=[stage_position[0]], y=[stage_position[1]],
        mode="markers+text", text=["STAGE"], textposition="top center",
        marker=dict(symbol="star", size=18, color="#E8734A"),
        name="Stage",
    ))
    fig.update_yaxes(autorange="reversed", scaleanchor="x", scaleratio=1)
    fig.update_layout(height=600, legend_title_text="")
    return fig


def tier_breakdown_bar(stats: LotteryStats, title: str = "Seated Parties by Tier") -> go.Figure:
    """Bar chart of seated parties per tier plus rescue overflow."""
    labels = [TIER_LABELS[t] for t in (0, 1, 2, 3)] + ["Rescue overflow"]
    values = [stats.tier0_count, stats.tier1_count, stats.tier2_count,
              stats.tier3_count, stats.tier2_overflow_count]
    colors = [TIER_COLORS[t] for t in (0, 1, 2, 3)] + ["#cc0000"]
    fig = go.Figure(data=[go.Bar(x=labels, y=values, marker_color=colors, text=values,
                                 textposition="auto")])
    fig.update_layout(title=title, yaxis_title="Parties", height=400)
    return fig


def quality_distribution_bar(counts: Dict[str, int], title: str = "Seat Quality Distribution") -> go.Figure:
    """Bar chart of non-priority winners per quality band."""
    labels = [QUALITY_LABELS[q] for q in SEAT_QUALITIES]
    values = [counts.get(q, 0) for q in SEAT_QUALITIES]
    fig = px.bar(
        x=labels, y=values,
        labels={"x": "Quality", "y": "Parties"},
        title=title,
        color=labels,
        color_discrete_sequence=["#155724", "#4A90D9", "#F5C542", "#E8734A", "#cc0000"],
    )
    fig.update_layout(showlegend=False, height=400)
    return fig


def seat_usage_donut(used: int, total: int, title: str = "Seat Usage") -> go.Figure:
    """Donut chart showing seated vs empty available seats."""
    empty = max(0, total - used)
    fig = go.Figure(data=[go.Pie(
        labels=["Seated", "Empty"],
        values=[used, empty],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def score_change_histogram(
    updates: List[ScoreUpdate],
    title: Optional[str] = "Next-Round Score Changes",
) -> go.Figure:
    """Histogram of score deltas split by win/lose."""
    df = pd.DataFrame([{"change": u.change, "result": u.last_result} for u in updates])
    fig = px.histogram(
        df, x="change", color="result", barmode="overlay",
        labels={"change": "Score change", "result": ""},
        color_discrete_map={"win": "#4A90D9", "lose": "#E8734A"},
        title=title,
    )
    fig.update_layout(height=400, yaxis_title="Applicants")
    return fig
