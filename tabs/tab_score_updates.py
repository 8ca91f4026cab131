"""Tab 3: Score Updates — next-round scores and CSV exports."""

import streamlit as st
import pandas as pd

from data.session_store import (
    get_lottery_result, get_score_updates, get_applications, get_customers,
    get_seats, get_locked_seats, set_customers, clear_lottery_outcome, is_data_loaded,
)
from data.exporter import (
    build_winners_df, build_losers_df, build_next_event_df, to_csv_bytes, export_filename,
)
from engine.score_updater import apply_score_updates
from engine.explainer import explain_score_update
from components.charts import score_change_histogram
from components.tables import render_change_table
from config.defaults import QUALITY_LABELS


def render(sidebar_state):
    """Render the Score Updates tab."""
    st.header("Score Updates")

    if not is_data_loaded():
        st.info("No data loaded. Please upload data in the Data tab.")
        return

    result = get_lottery_result()
    updates = get_score_updates()
    if result is None or not updates:
        st.info("No score updates yet. Run the lottery first.")
        return

    applications = get_applications()
    app_map = {a.application_id: a for a in applications}

    col1, col2 = st.columns([3, 2])
    with col1:
        rows = [{
            "Member ID": app_map[u.application_id].member_id,
            "Name": app_map[u.application_id].name,
            "Result": u.last_result,
            "Seat Quality": QUALITY_LABELS.get(u.seat_quality, u.seat_quality),
            "Current": round(u.current_score, 1),
            "Next": round(u.next_score, 1),
            "Change": round(u.change, 1),
        } for u in updates if u.application_id in app_map]
        render_change_table(pd.DataFrame(rows))
    with col2:
        st.plotly_chart(score_change_histogram(updates), use_container_width=True)
        winners = sum(1 for u in updates if u.last_result == "win")
        st.metric("Seated", f"{winners:,}")
        st.metric("Not seated", f"{len(updates) - winners:,}")

    with st.expander("Explain a score change"):
        chosen = st.selectbox(
            "Applicant",
            [u.application_id for u in updates],
            format_func=lambda aid: f"{app_map[aid].name} ({app_map[aid].member_id})",
            key="explain_score",
        )
        if chosen:
            update = next(u for u in updates if u.application_id == chosen)
            for step in explain_score_update(update, app_map[chosen]):
                st.markdown(f"- {step}")

    st.divider()

    # --- Exports ---
    st.subheader("Exports")
    event_name = sidebar_state.event_name
    col1, col2, col3 = st.columns(3)
    with col1:
        winners_df = build_winners_df(result, applications, get_seats(), get_locked_seats())
        st.download_button(
            "Winners (mailing list)",
            data=to_csv_bytes(winners_df),
            file_name=export_filename("winners", event_name),
            mime="text/csv",
            key="dl_winners",
        )
    with col2:
        st.download_button(
            "Losers (mailing list)",
            data=to_csv_bytes(build_losers_df(result, applications)),
            file_name=export_filename("losers", event_name),
            mime="text/csv",
            key="dl_losers",
        )
    with col3:
        st.download_button(
            "Next event (customer update)",
            data=to_csv_bytes(build_next_event_df(updates, applications)),
            file_name=export_filename("next_event", event_name),
            mime="text/csv",
            key="dl_next_event",
        )

    st.divider()

    st.subheader("Apply to Customers")
    st.caption(
        "Write next-round scores and results back into the loaded customer list. "
        "This clears the current lottery results."
    )
    if st.button("Apply Score Updates", type="primary", key="btn_apply_scores"):
        set_customers(apply_score_updates(get_customers(), updates))
        clear_lottery_outcome()
        st.success(f"Updated {len(updates)} customers.")
        st.rerun()
