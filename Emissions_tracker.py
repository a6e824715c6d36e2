import logging

import streamlit as st

from panels.charts import comparison_chart, comparison_frame, export_frame, progress_chart
from panels.config import APP_ICON, APP_TITLE, APP_VERSION, UNIT, configure_logging, load_settings
from panels.forms import render_emissions_form, render_target_form
from panels.indicators import change_indicators, render_kpi_cards
from panels.load_css import load_css
from panels.state import derive_metrics, reset_inputs, seed_state, sync_inputs

# ---------------------------------------------------------
# CONFIG
# ---------------------------------------------------------
settings = load_settings()
configure_logging(settings)
logger = logging.getLogger("emissions_tracker")

SCOPE_NOTES = [
    "**Scope 1**: direct emissions from owned or controlled sources (fuel, fleet, refrigerants).",
    "**Scope 2**: indirect emissions from purchased electricity, steam, heat and cooling.",
    "**Scope 3**: all other indirect emissions across the value chain.",
]

# ---------------------------------------------------------
# PAGE SETUP (must be first Streamlit call)
# ---------------------------------------------------------
st.set_page_config(page_title=APP_TITLE, page_icon=APP_ICON, layout="wide")
load_css()

seed_state()

# ---------------------------------------------------------
# SIDEBAR
# ---------------------------------------------------------
with st.sidebar:
    st.markdown(f"## {APP_ICON} {APP_TITLE}")
    st.caption(APP_VERSION)
    st.divider()

    st.button(
        "↺ Reset to example figures",
        key="reset_inputs",
        on_click=reset_inputs,
        use_container_width=True,
    )

    st.divider()
    with st.expander("About the scopes"):
        for note in SCOPE_NOTES:
            st.markdown(f"- {note}")
        st.caption(f"All figures are in {UNIT} (kilograms of CO₂ equivalent).")

# ---------------------------------------------------------
# HEADER
# ---------------------------------------------------------
st.markdown(
    f"""
    <div class='tracker-header'>
    <h1>{APP_TITLE}</h1>
    <p>Compare year-over-year emissions and track progress against your reduction targets.</p>
    </div>
    """,
    unsafe_allow_html=True,
)

# ---------------------------------------------------------
# DATA INPUT
# ---------------------------------------------------------
data_col, goal_col = st.columns([2, 1])
with data_col:
    with st.container(border=True):
        render_emissions_form()
with goal_col:
    with st.container(border=True):
        render_target_form()

inputs = sync_inputs()
metrics = derive_metrics(inputs)
logger.debug("Total change %.2f%%, progress %.1f%%", metrics.total_change, metrics.progress)

# ---------------------------------------------------------
# PERFORMANCE ANALYSIS
# ---------------------------------------------------------
st.markdown("## Performance Analysis")

render_kpi_cards(change_indicators(metrics))

st.write("")  # spacing

chart_col, gauge_col = st.columns([2, 1])
with chart_col:
    with st.container(border=True):
        st.markdown("### Year-over-Year Emissions Comparison")
        frame = comparison_frame(inputs.previous, inputs.current)
        st.altair_chart(comparison_chart(frame), use_container_width=True)

        with st.expander("Show data table"):
            table = export_frame(metrics, inputs.previous, inputs.current)
            st.dataframe(table, use_container_width=True, hide_index=True)
            st.download_button(
                label="💾 Download comparison (CSV)",
                data=table.to_csv(index=False).encode("utf-8"),
                file_name="emissions_comparison.csv",
                mime="text/csv",
            )

with gauge_col:
    with st.container(border=True):
        st.markdown("### Progress to KPI Target")
        st.altair_chart(progress_chart(metrics.progress), use_container_width=True)
        st.caption(f"of {inputs.target:g}% target")

if settings.debug:
    with st.expander("Debug: derived metrics"):
        st.code(repr(metrics))

# ---------------------------------------------------------
# FOOTER
# ---------------------------------------------------------
st.divider()
st.caption(
    "Percentage changes compare the current year with the previous year. "
    "Increases in emissions are flagged in red, reductions in green."
)
st.caption(f"{APP_TITLE} • {APP_VERSION}")
