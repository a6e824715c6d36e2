# scopes/metrics.py
"""
Derived emissions metrics.

All functions here are pure: the same inputs always give the same
outputs and nothing outside the arguments is read or written. Inputs
are assumed to be sanitized (finite, non-negative) by scopes.inputs.
"""
import math

from .models import SCOPES, DerivedMetrics, MeasurementSet


def total(measurements: MeasurementSet) -> float:
    return measurements.scope1 + measurements.scope2 + measurements.scope3


def percent_change(previous: float, current: float) -> float:
    """
    Percentage change from previous to current.

    A zero baseline gives +inf when current is positive and 0 otherwise.
    """
    if previous == 0:
        return math.inf if current > 0 else 0.0
    return (current - previous) / previous * 100.0


def target_progress(total_change: float, target: float) -> float:
    """
    Progress (0..100) toward a percentage reduction target.

    A decrease in emissions counts as reduction achieved; an increase
    earns no credit. A zero target is met by any reduction at all.
    """
    reduction_achieved = -total_change
    if reduction_achieved <= 0:
        return 0.0
    if target == 0:
        return 100.0
    return min(reduction_achieved / target * 100.0, 100.0)


def compute_metrics(
    previous: MeasurementSet,
    current: MeasurementSet,
    target: float,
) -> DerivedMetrics:
    previous_total = total(previous)
    current_total = total(current)
    total_change = percent_change(previous_total, current_total)

    scope_changes = {
        scope: percent_change(getattr(previous, scope), getattr(current, scope))
        for scope in SCOPES
    }

    return DerivedMetrics(
        previous_total=previous_total,
        current_total=current_total,
        total_change=total_change,
        reduction_achieved=-total_change,
        progress=target_progress(total_change, target),
        target=target,
        scope_changes=scope_changes,
    )
