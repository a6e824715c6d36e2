# panels/forms.py
import streamlit as st

from scopes.models import PERIOD_LABELS, PERIODS, SCOPE_LABELS, SCOPES

from .config import UNIT
from .state import TARGET_KEY, widget_key


def render_period_inputs(period: str):
    st.markdown(f"#### {PERIOD_LABELS[period]}")
    for scope in SCOPES:
        st.number_input(
            SCOPE_LABELS[scope],
            min_value=0.0,
            step=100.0,
            key=widget_key(period, scope),
            placeholder="e.g., 5000",
        )


def render_emissions_form():
    st.markdown(f"### Emissions Data ({UNIT})")
    cols = st.columns(len(PERIODS))
    for col, period in zip(cols, PERIODS):
        with col:
            render_period_inputs(period)


def render_target_form():
    st.markdown("### Set Your Goal")
    st.markdown("#### 🎯 Reduction Target")
    st.caption("Set the desired % reduction in total emissions for the current year.")
    st.number_input(
        "Reduction target (%)",
        min_value=0.0,
        step=1.0,
        key=TARGET_KEY,
    )
