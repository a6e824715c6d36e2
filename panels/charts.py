# panels/charts.py
import math

import altair as alt
import pandas as pd

from scopes.models import (
    PERIOD_LABELS,
    SCOPE_LABELS,
    SCOPES,
    DerivedMetrics,
    MeasurementSet,
)

from .config import UNIT

PERIOD_ORDER = [PERIOD_LABELS["previous"], PERIOD_LABELS["current"]]
PERIOD_COLORS = ["#a0aec0", "#4c51bf"]

PROGRESS_SEGMENTS = ["Achieved", "Remaining"]
PROGRESS_COLORS = ["#82ca9d", "#e5e7eb"]


# ---------------------------------------------------------
# Year-over-year comparison
# ---------------------------------------------------------

def comparison_frame(previous: MeasurementSet, current: MeasurementSet) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Scope": SCOPE_LABELS[scope],
                PERIOD_LABELS["previous"]: getattr(previous, scope),
                PERIOD_LABELS["current"]: getattr(current, scope),
            }
            for scope in SCOPES
        ],
        columns=["Scope"] + PERIOD_ORDER,
    )


def comparison_chart(frame: pd.DataFrame) -> alt.Chart:
    """Grouped bars: one group per scope, one bar per year."""
    long_df = frame.melt(id_vars="Scope", var_name="Period", value_name="Emissions")

    return (
        alt.Chart(long_df)
        .mark_bar()
        .encode(
            x=alt.X("Scope:N", title=None),
            xOffset=alt.XOffset("Period:N", sort=PERIOD_ORDER),
            y=alt.Y("Emissions:Q", title=UNIT),
            color=alt.Color(
                "Period:N",
                sort=PERIOD_ORDER,
                scale=alt.Scale(domain=PERIOD_ORDER, range=PERIOD_COLORS),
                legend=alt.Legend(title=None, orient="bottom"),
            ),
            tooltip=[
                alt.Tooltip("Scope:N"),
                alt.Tooltip("Period:N"),
                alt.Tooltip("Emissions:Q", title=UNIT, format=",.0f"),
            ],
        )
        .properties(height=400)
    )


def export_frame(
    metrics: DerivedMetrics,
    previous: MeasurementSet,
    current: MeasurementSet,
) -> pd.DataFrame:
    """Comparison table with totals and percentage changes, for CSV download."""
    df = comparison_frame(previous, current)
    df["Change (%)"] = [metrics.change_for(scope) for scope in SCOPES]

    total_row = pd.DataFrame(
        [
            {
                "Scope": "Total",
                PERIOD_LABELS["previous"]: metrics.previous_total,
                PERIOD_LABELS["current"]: metrics.current_total,
                "Change (%)": metrics.total_change,
            }
        ]
    )
    return pd.concat([df, total_row], ignore_index=True)


# ---------------------------------------------------------
# Progress toward the reduction target
# ---------------------------------------------------------

def progress_frame(progress: float) -> pd.DataFrame:
    achieved = min(max(progress, 0.0), 100.0)
    return pd.DataFrame(
        {
            "Segment": PROGRESS_SEGMENTS,
            "Percent": [achieved, 100.0 - achieved],
        }
    )


def progress_chart(progress: float) -> alt.LayerChart:
    """Half-donut gauge from 0 to 100 with the rounded value in the middle."""
    gauge = (
        alt.Chart(progress_frame(progress))
        .mark_arc(innerRadius=80, outerRadius=130, cornerRadius=10)
        .encode(
            theta=alt.Theta(
                "Percent:Q",
                stack=True,
                scale=alt.Scale(domain=[0, 100], range=[-math.pi / 2, math.pi / 2]),
            ),
            color=alt.Color(
                "Segment:N",
                scale=alt.Scale(domain=PROGRESS_SEGMENTS, range=PROGRESS_COLORS),
                legend=None,
            ),
            tooltip=[alt.Tooltip("Segment:N"), alt.Tooltip("Percent:Q", format=".1f")],
        )
    )

    label = (
        alt.Chart(pd.DataFrame({"label": [f"{progress:.0f}%"]}))
        .mark_text(fontSize=44, fontWeight="bold", color="#374151", dy=-20)
        .encode(text="label:N")
    )

    return alt.layer(gauge, label).properties(height=300)
