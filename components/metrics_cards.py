"""Reusable KPI metric card widgets."""

import streamlit as st

from models.lottery import LotteryStats


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_lottery_stats(stats: LotteryStats, unassigned_count: int):
    """Two rows of lottery KPIs: seating overview, then per-tier counts."""
    fill = stats.total_people_assigned / stats.available_seats if stats.available_seats else 0
    render_metric_row([
        {"label": "Available Seats", "value": f"{stats.available_seats:,}",
         "delta": f"of {stats.total_seats:,} total", "delta_color": "off"},
        {"label": "People Seated", "value": f"{stats.total_people_assigned:,}",
         "delta": f"{fill:.0%} filled", "delta_color": "off"},
        {"label": "Applications", "value": f"{stats.total_applications:,}"},
        {"label": "Unassigned", "value": f"{unassigned_count:,}",
         "delta": f"{unassigned_count:,} lost" if unassigned_count else "None",
         "delta_color": "inverse" if unassigned_count else "normal"},
    ])
    render_metric_row([
        {"label": "Locked (Tier 0)", "value": str(stats.tier0_count)},
        {"label": "Priority (Tier 1)", "value": str(stats.tier1_count)},
        {"label": "Rescue (Tier 2)", "value": str(stats.tier2_count),
         "delta": f"{stats.tier2_overflow_count} overflow" if stats.tier2_overflow_count else None,
         "delta_color": "inverse"},
        {"label": "Open (Tier 3)", "value": str(stats.tier3_count)},
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
