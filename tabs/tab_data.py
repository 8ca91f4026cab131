"""Tab 1: Data — seat map and customer upload, relation seat locks."""

import streamlit as st
import pandas as pd

from data.loader import load_file, load_multi_sheet_excel, parse_seats, parse_customers
from data.validator import validate_seats, validate_customers, validate_lock
from data.sample_data import generate_seats_df, generate_customers_df
from data.session_store import (
    set_seats, set_customers, set_data_loaded, is_data_loaded, get_seats,
    get_customers, get_locked_seats, add_locked_seat, remove_locked_seat,
    clear_lottery_outcome, reset_all,
)
from models.lottery import LockedSeat


def _load_and_validate(seats_df, customers_df):
    """Validate and store uploaded data."""
    errors = []
    warnings = []

    for r in [validate_seats(seats_df), validate_customers(customers_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    for w in warnings:
        st.warning(w)

    seats = parse_seats(seats_df)
    customers = parse_customers(customers_df)

    set_seats(seats)
    set_customers(customers)
    st.session_state["locked_seats"] = []
    clear_lottery_outcome()
    set_data_loaded(True)

    st.success(f"Data loaded: {len(seats)} seats, {len(customers)} customers")

    # --- Immediate supply vs demand health check ---
    usable = sum(1 for s in seats if not s.is_disabled)
    premium = sum(1 for s in seats if s.is_premium and not s.is_disabled)
    demand = sum(c.group_size for c in customers)
    priority_demand = sum(c.group_size for c in customers if c.is_invitation or c.is_relation)

    st.divider()
    st.subheader("Data Health Check")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Usable Seats", f"{usable:,}")
    col2.metric("Premium Seats", f"{premium:,}")
    col3.metric("Requested Seats", f"{demand:,}")
    col4.metric("Priority Requests", f"{priority_demand:,}")

    if priority_demand > usable:
        st.error(
            f"RISK: Priority requests ({priority_demand:,}) exceed usable seats ({usable:,}). "
            f"Some invitation holders or relations will not be seated."
        )
    elif demand > usable:
        st.info(
            f"Oversubscribed: {demand:,} seats requested for {usable:,} usable seats "
            f"({demand / usable:.1f}x). The lottery decides who is seated."
        )
    else:
        st.success(f"Everyone fits: {demand:,} seats requested, {usable:,} usable.")

    return True


def _render_locks():
    st.subheader("Relation Seat Locks")
    st.caption(
        "Reserve seats for a relation before the draw. Locked seats are removed from the "
        "lottery pool and the customer does not enter the draw."
    )

    seats = get_seats()
    customers = get_customers()
    locks = get_locked_seats()
    locked_ids = {ls.customer_id for ls in locks}
    taken = {sid for ls in locks for sid in ls.seat_ids}

    candidates = [c for c in customers if c.customer_id not in locked_ids]
    relations_only = st.checkbox("Relations only", value=True, key="lock_relations_only")
    if relations_only:
        candidates = [c for c in candidates if c.is_relation]

    if candidates:
        col1, col2 = st.columns([1, 2])
        with col1:
            customer = st.selectbox(
                "Customer",
                candidates,
                format_func=lambda c: f"{c.name} ({c.member_id}, party of {c.group_size})",
                key="lock_customer",
            )
        with col2:
            seat_options = [s.seat_id for s in seats if not s.is_disabled and s.seat_id not in taken]
            seat_ids = st.multiselect(
                "Seats",
                seat_options,
                max_selections=customer.group_size if customer else None,
                key="lock_seats",
            )

        if st.button("Lock Seats", type="primary", key="btn_lock"):
            result = validate_lock(customer, seat_ids, seats, locks)
            for w in result.warnings:
                st.warning(w)
            if result.is_valid:
                add_locked_seat(LockedSeat(
                    customer_id=customer.customer_id,
                    customer_name=customer.name,
                    group_size=customer.group_size,
                    seat_ids=list(seat_ids),
                ))
                st.success(f"Locked {len(seat_ids)} seat(s) for {customer.name}.")
                st.rerun()
            else:
                for e in result.errors:
                    st.error(e)
    else:
        st.info("No customers available to lock.")

    if locks:
        lock_df = pd.DataFrame([{
            "Customer": ls.customer_name,
            "Party": ls.group_size,
            "Seats": ", ".join(ls.seat_ids),
        } for ls in locks])
        st.dataframe(lock_df, use_container_width=True)

        to_unlock = st.selectbox(
            "Unlock",
            [ls.customer_id for ls in locks],
            format_func=lambda cid: next(ls.customer_name for ls in locks if ls.customer_id == cid),
            key="unlock_customer",
        )
        if st.button("Unlock", key="btn_unlock"):
            remove_locked_seat(to_unlock)
            st.rerun()


def render(sidebar_state):
    """Render the Data tab."""
    st.header("Data")

    # --- Data Upload Section ---
    st.subheader("Data Upload")

    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file (2 tabs)", "Two separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file (2 tabs)":
        st.caption(
            "Upload one `.xlsx` file with two sheets named **Seats** and **Customers** "
            "(also accepts aliases like 'Seat Map', 'Members', 'Applicants')."
        )
        single_file = st.file_uploader("Excel workbook with 2 tabs", type=["xlsx"], key="upload_single")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Validate", type="primary", key="btn_upload_single"):
                if single_file:
                    try:
                        s_df, c_df = load_multi_sheet_excel(single_file)
                        _load_and_validate(s_df, c_df)
                    except ValueError as e:
                        st.error(f"Error loading file: {e}")
                else:
                    st.warning("Please upload an Excel file.")
    else:
        col1, col2 = st.columns(2)
        with col1:
            seats_file = st.file_uploader("Seat Map", type=["csv", "xlsx"], key="upload_seats")
        with col2:
            customers_file = st.file_uploader("Customers", type=["csv", "xlsx"], key="upload_customers")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Validate", type="primary", key="btn_upload_multi"):
                if seats_file and customers_file:
                    try:
                        _load_and_validate(load_file(seats_file), load_file(customers_file))
                    except ValueError as e:
                        st.error(f"Error loading files: {e}")
                else:
                    st.warning("Please upload both files.")

    with col_sample:
        if st.button("Load Sample Data", key="btn_sample"):
            _load_and_validate(generate_seats_df(), generate_customers_df())

    if not is_data_loaded():
        return

    st.divider()
    _render_locks()

    st.divider()
    st.subheader("Customers")
    customers_df = pd.DataFrame([{
        "Member ID": c.member_id,
        "Name": c.name,
        "Tags": ";".join(c.tags),
        "Score": c.total_score,
        "Group Size": c.group_size,
        "Last Result": c.last_result or "",
    } for c in get_customers()])
    st.dataframe(customers_df, use_container_width=True, height=350)

    if st.button("Reset All Data", key="btn_reset_all"):
        reset_all()
        st.rerun()
