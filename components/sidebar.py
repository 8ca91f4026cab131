"""Global sidebar controls for stage position, skill weight and event."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional
from data.session_store import (
    get_rule_config, set_rule_config, get_event_name, set_event_name, is_data_loaded,
    get_seats, get_customers, get_locked_seats,
)
from config.defaults import DEFAULT_SKILL_WEIGHT, DEFAULT_STAGE_POSITION


@dataclass
class SidebarState:
    stage_x: float
    stage_y: float
    skill_weight: float
    seed: Optional[int]
    event_name: str


def initial_seed(cfg: dict, fallback: int = 42) -> int:
    """Seed shown when the seed input is (re)created; a stored 0 is kept."""
    stored = cfg.get("seed")
    return int(stored) if stored is not None else fallback


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    cfg = get_rule_config()
    with st.sidebar:
        st.title("Seat Lottery")
        st.divider()

        event_name = st.text_input("Event Name", value=get_event_name(), key="sidebar_event")
        if event_name != get_event_name():
            set_event_name(event_name)

        st.subheader("Stage Position")
        col1, col2 = st.columns(2)
        stage_x = col1.number_input(
            "X", value=float(cfg.get("stage_x", DEFAULT_STAGE_POSITION[0])), step=10.0,
            key="sidebar_stage_x",
        )
        stage_y = col2.number_input(
            "Y", value=float(cfg.get("stage_y", DEFAULT_STAGE_POSITION[1])), step=10.0,
            key="sidebar_stage_y",
        )

        skill_weight = st.slider(
            "Skill Weight (open tier)",
            min_value=0.0, max_value=1.0,
            value=float(cfg.get("skill_weight", DEFAULT_SKILL_WEIGHT)),
            step=0.05,
            help="Share of open-tier picks decided by past score; the rest is luck.",
            key="sidebar_skill_weight",
        )

        use_seed = st.checkbox("Reproducible draw (fixed seed)", value=cfg.get("seed") is not None,
                               key="sidebar_use_seed")
        seed = None
        if use_seed:
            seed = int(st.number_input("Seed", value=initial_seed(cfg), step=1,
                                       key="sidebar_seed"))

        new_cfg = {**cfg, "stage_x": stage_x, "stage_y": stage_y,
                   "skill_weight": skill_weight, "seed": seed}
        if new_cfg != cfg:
            set_rule_config(new_cfg)

        st.divider()

        # Data status indicator
        if is_data_loaded():
            st.success("Data loaded")
            st.caption(f"Seats: {len(get_seats()):,}")
            st.caption(f"Customers: {len(get_customers()):,}")
            st.caption(f"Locked groups: {len(get_locked_seats())}")
        else:
            st.warning("No data loaded — go to Data tab")

    return SidebarState(
        stage_x=stage_x,
        stage_y=stage_y,
        skill_weight=skill_weight,
        seed=seed,
        event_name=event_name,
    )
