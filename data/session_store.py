"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from models.seat import Seat
from models.customer import Customer
from models.lottery import LockedSeat, LotteryResult, ScoreUpdate
from models.application import Application
from config.defaults import DEFAULT_SKILL_WEIGHT, DEFAULT_STAGE_POSITION, DEFAULT_EVENT_NAME


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "seats": [],
        "customers": [],
        "locked_seats": [],
        "applications": [],
        "lottery_result": None,
        "score_updates": [],
        "data_loaded": False,
        "rule_config": {
            "stage_x": DEFAULT_STAGE_POSITION[0],
            "stage_y": DEFAULT_STAGE_POSITION[1],
            "skill_weight": DEFAULT_SKILL_WEIGHT,
            "seed": None,
        },
        "event_name": DEFAULT_EVENT_NAME,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_seats() -> List[Seat]:
    return st.session_state.get("seats", [])


def get_customers() -> List[Customer]:
    return st.session_state.get("customers", [])


def get_locked_seats() -> List[LockedSeat]:
    return st.session_state.get("locked_seats", [])


def get_applications() -> List[Application]:
    return st.session_state.get("applications", [])


def get_lottery_result() -> Optional[LotteryResult]:
    return st.session_state.get("lottery_result")


def get_score_updates() -> List[ScoreUpdate]:
    return st.session_state.get("score_updates", [])


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def get_event_name() -> str:
    return st.session_state.get("event_name", DEFAULT_EVENT_NAME)


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_seats(seats: List[Seat]):
    st.session_state["seats"] = seats


def set_customers(customers: List[Customer]):
    st.session_state["customers"] = customers


def set_data_loaded(loaded: bool):
    st.session_state["data_loaded"] = loaded


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config


def set_event_name(name: str):
    st.session_state["event_name"] = name


def set_lottery_outcome(
    applications: List[Application],
    result: Optional[LotteryResult],
    updates: List[ScoreUpdate],
):
    st.session_state["applications"] = applications
    st.session_state["lottery_result"] = result
    st.session_state["score_updates"] = updates


def clear_lottery_outcome():
    set_lottery_outcome([], None, [])


# --- Relation Locks ---

def add_locked_seat(lock: LockedSeat):
    st.session_state["locked_seats"].append(lock)
    clear_lottery_outcome()


def remove_locked_seat(customer_id: str):
    st.session_state["locked_seats"] = [
        ls for ls in get_locked_seats() if ls.customer_id != customer_id
    ]
    clear_lottery_outcome()


def reset_all():
    for key in ("seats", "customers", "locked_seats"):
        st.session_state[key] = []
    set_data_loaded(False)
    clear_lottery_outcome()
