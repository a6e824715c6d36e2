# panels/state.py
import logging
from dataclasses import dataclass
from typing import MutableMapping, Optional, Tuple

import streamlit as st

from scopes.inputs import coerce_measurements, coerce_target
from scopes.metrics import compute_metrics
from scopes.models import (
    DEFAULT_CURRENT,
    DEFAULT_PREVIOUS,
    DEFAULT_TARGET,
    PERIODS,
    SCOPES,
    DerivedMetrics,
    MeasurementSet,
)

logger = logging.getLogger(__name__)

# -----------------------------
# SESSION STORAGE KEYS
# -----------------------------
# Widgets own the raw values; the sanitized snapshot lives under INPUTS_KEY.
INPUTS_KEY = "emissions_inputs"
TARGET_KEY = "target"

# Each edit to a number input is a new cache key
METRICS_CACHE_ENTRIES = 128


@dataclass(frozen=True)
class DashboardInputs:
    previous: MeasurementSet
    current: MeasurementSet
    target: float


DEFAULT_INPUTS = DashboardInputs(
    previous=DEFAULT_PREVIOUS,
    current=DEFAULT_CURRENT,
    target=DEFAULT_TARGET,
)


def widget_key(period: str, scope: str) -> str:
    return f"{period}-{scope}"


def _session(state: Optional[MutableMapping]) -> MutableMapping:
    return st.session_state if state is None else state


def _write_widgets(state: MutableMapping, inputs: DashboardInputs, overwrite: bool) -> None:
    for period in PERIODS:
        measurements = getattr(inputs, period)
        for scope in SCOPES:
            key = widget_key(period, scope)
            if overwrite or key not in state:
                state[key] = float(getattr(measurements, scope))

    if overwrite or TARGET_KEY not in state:
        state[TARGET_KEY] = float(inputs.target)


def seed_state(state: Optional[MutableMapping] = None) -> None:
    """Fill in the example figures for any widget that has no value yet."""
    _write_widgets(_session(state), DEFAULT_INPUTS, overwrite=False)


def reset_inputs(state: Optional[MutableMapping] = None) -> None:
    """Restore the example figures. Used as a button callback."""
    state = _session(state)
    _write_widgets(state, DEFAULT_INPUTS, overwrite=True)
    state[INPUTS_KEY] = DEFAULT_INPUTS
    logger.info("Inputs reset to example figures")


def read_inputs(state: Optional[MutableMapping] = None) -> DashboardInputs:
    state = _session(state)
    periods = {
        period: coerce_measurements(
            {scope: state.get(widget_key(period, scope)) for scope in SCOPES}
        )
        for period in PERIODS
    }
    return DashboardInputs(
        previous=periods["previous"],
        current=periods["current"],
        target=coerce_target(state.get(TARGET_KEY)),
    )


def sync_inputs(state: Optional[MutableMapping] = None) -> DashboardInputs:
    """
    Take a snapshot of the widget values and store it.

    The stored snapshot is replaced as a whole, and only when it differs
    from the previous one, so every reader sees a consistent set of
    previous/current/target values.
    """
    state = _session(state)
    inputs = read_inputs(state)
    if state.get(INPUTS_KEY) != inputs:
        logger.debug("Inputs changed: %s", inputs)
        state[INPUTS_KEY] = inputs
    return state[INPUTS_KEY]


def _values(measurements: MeasurementSet) -> Tuple[float, ...]:
    return tuple(measurements.as_dict().values())


@st.cache_data(show_spinner=False, max_entries=METRICS_CACHE_ENTRIES)
def _cached_metrics(
    previous: Tuple[float, ...],
    current: Tuple[float, ...],
    target: float,
) -> DerivedMetrics:
    logger.debug("Recomputing metrics for previous=%s current=%s target=%s", previous, current, target)
    return compute_metrics(
        MeasurementSet(*previous),
        MeasurementSet(*current),
        target,
    )


def derive_metrics(inputs: DashboardInputs) -> DerivedMetrics:
    """Metrics for a snapshot, memoized on the snapshot's values."""
    return _cached_metrics(_values(inputs.previous), _values(inputs.current), inputs.target)
