"""Tab 2: Lottery — run the tiered draw and review who sits where."""

import streamlit as st

from data.session_store import (
    get_seats, get_customers, get_locked_seats, get_rule_config, is_data_loaded,
    get_lottery_result, get_applications, set_lottery_outcome,
)
from data.loader import customers_to_applications
from data.validator import validate_lottery_config
from data.exporter import build_winners_df
from engine.lottery_engine import run_lottery
from engine.score_updater import calculate_score_updates
from engine.quality import quality_counts
from engine.explainer import explain_assignment
from models.lottery import LotteryConfig
from components.metrics_cards import render_lottery_stats, render_alert_card
from components.charts import seat_map_scatter, tier_breakdown_bar, quality_distribution_bar, seat_usage_donut
from components.tables import render_quality_table


def _run():
    rule_config = get_rule_config()
    check = validate_lottery_config(rule_config)
    for w in check.warnings:
        st.warning(w)
    if not check.is_valid:
        for e in check.errors:
            st.error(e)
        return

    locks = get_locked_seats()
    applications = customers_to_applications(
        get_customers(), locked_customer_ids={ls.customer_id for ls in locks},
    )
    result = run_lottery(get_seats(), applications, LotteryConfig.from_rule_config(rule_config), locks)
    updates = calculate_score_updates(result.assignments, result.unassigned, applications)
    set_lottery_outcome(applications, result, updates)


def render(sidebar_state):
    """Render the Lottery tab."""
    st.header("Lottery")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Data tab.")
        return

    st.caption(
        f"Stage at ({sidebar_state.stage_x:.0f}, {sidebar_state.stage_y:.0f}) | "
        f"Skill weight {sidebar_state.skill_weight:.0%} | "
        f"Seed {sidebar_state.seed if sidebar_state.seed is not None else 'random'}"
    )

    if st.button("Run Lottery", type="primary", key="btn_run_lottery"):
        _run()

    result = get_lottery_result()
    if result is None:
        st.info("No lottery results yet. Press Run Lottery.")
        return

    stats = result.stats
    render_lottery_stats(stats, len(result.unassigned))

    if stats.tier2_overflow_count:
        render_alert_card(
            f"{stats.tier2_overflow_count} rescue applicant(s) lost again because seats ran out. "
            "They keep first refusal next round.",
            level="error",
        )

    st.divider()

    # --- Seat Map ---
    seats = get_seats()
    fig = seat_map_scatter(
        seats, result.seat_assignment_map(), (sidebar_state.stage_x, sidebar_state.stage_y),
    )
    st.plotly_chart(fig, use_container_width=True)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.plotly_chart(tier_breakdown_bar(stats), use_container_width=True)
    with col2:
        st.plotly_chart(quality_distribution_bar(quality_counts(result.assignments)),
                        use_container_width=True)
    with col3:
        st.plotly_chart(seat_usage_donut(stats.total_people_assigned, stats.available_seats),
                        use_container_width=True)

    st.divider()

    # --- Winners ---
    applications = get_applications()
    st.subheader("Winners")
    winners_df = build_winners_df(result, applications, seats, get_locked_seats())
    render_quality_table(winners_df)

    # --- Per-Assignment Explanation ---
    with st.expander("Why did this applicant get these seats?"):
        app_map = {a.application_id: a for a in applications}
        chosen = st.selectbox(
            "Applicant",
            [a.application_id for a in result.assignments],
            format_func=lambda aid: f"{app_map[aid].name} ({app_map[aid].member_id})",
            key="explain_applicant",
        )
        if chosen:
            assignment = next(a for a in result.assignments if a.application_id == chosen)
            for step in explain_assignment(assignment, app_map[chosen], sidebar_state.skill_weight):
                st.markdown(f"- {step}")
