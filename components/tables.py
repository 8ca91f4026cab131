"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_quality_table(df: pd.DataFrame, quality_column: str = "Seat Quality"):
    """Render a winners table with color-coded seat quality."""
    def color_quality(val):
        if val == "Top seat":
            return "background-color: #d4edda; color: #155724; font-weight: bold"
        elif val == "Far back":
            return "background-color: #ffcccc; color: #cc0000"
        elif val == "Back seat":
            return "background-color: #fff3cd; color: #856404"
        return ""

    if quality_column in df.columns:
        styled = df.style.map(color_quality, subset=[quality_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)


def render_change_table(df: pd.DataFrame, change_column: str = "Change"):
    """Render a score table; a rising score (better odds next time) shows green."""
    def color_change(val):
        try:
            v = float(val)
            if v > 0:
                return "color: #155724; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if change_column in df.columns:
        styled = df.style.map(color_change, subset=[change_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
