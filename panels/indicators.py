# panels/indicators.py
import math
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from scopes.models import SCOPE_LABELS, SCOPES, DerivedMetrics

NO_BASELINE_HELP = (
    "There were no previous-year emissions to compare against, "
    "so the percentage change is undefined."
)


@dataclass(frozen=True)
class ChangeIndicator:
    """
    One KPI card: a percentage change and its direction.

    Lower emissions are the goal, so an increase is shown as the bad
    direction and a reduction as the good one.
    """

    title: str
    change: float

    @property
    def direction(self) -> str:
        if self.change == 0 or not math.isfinite(self.change):
            return "neutral"
        return "increase" if self.change > 0 else "reduction"

    @property
    def value_text(self) -> str:
        if math.isinf(self.change):
            return "+∞%" if self.change > 0 else "-∞%"
        # + 0.0 turns -0.0 into 0.0
        return f"{self.change + 0.0:.1f}%"

    @property
    def delta_text(self) -> Optional[str]:
        magnitude = f"{abs(self.change):.1f}%"
        if self.direction == "increase":
            return f"{magnitude} Increase vs Previous Year"
        if self.direction == "reduction":
            # leading "-" makes st.metric draw a down arrow
            return f"-{magnitude} Reduction vs Previous Year"
        return None

    @property
    def help_text(self) -> Optional[str]:
        return NO_BASELINE_HELP if math.isinf(self.change) else None


def change_indicators(metrics: DerivedMetrics) -> List[ChangeIndicator]:
    indicators = [ChangeIndicator("Total Emissions Change", metrics.total_change)]
    indicators.extend(
        ChangeIndicator(f"{SCOPE_LABELS[scope]} Change", metrics.change_for(scope))
        for scope in SCOPES
    )
    return indicators


def render_kpi_cards(indicators: List[ChangeIndicator]) -> None:
    cols = st.columns(len(indicators))
    for col, indicator in zip(cols, indicators):
        col.metric(
            indicator.title,
            indicator.value_text,
            delta=indicator.delta_text,
            delta_color="inverse",
            help=indicator.help_text,
        )
