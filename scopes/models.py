# scopes/models.py
from dataclasses import dataclass, field
from typing import Dict

# -------------------------------------------------------------------
# Scope and period labels
# -------------------------------------------------------------------

SCOPES = ("scope1", "scope2", "scope3")

SCOPE_LABELS = {
    "scope1": "Scope 1",
    "scope2": "Scope 2",
    "scope3": "Scope 3",
}

PERIODS = ("previous", "current")

PERIOD_LABELS = {
    "previous": "Previous Year",
    "current": "Current Year",
}


@dataclass(frozen=True)
class MeasurementSet:
    """
    Emissions for one reporting period, in Kg/CO2e.
    Values are expected to be sanitized already (see scopes.inputs).
    """

    scope1: float = 0.0
    scope2: float = 0.0
    scope3: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {scope: getattr(self, scope) for scope in SCOPES}


@dataclass(frozen=True)
class DerivedMetrics:
    previous_total: float
    current_total: float
    total_change: float
    reduction_achieved: float
    progress: float
    target: float
    scope_changes: Dict[str, float] = field(default_factory=dict)

    def change_for(self, name: str) -> float:
        if name == "total":
            return self.total_change
        return self.scope_changes[name]


# Example figures shown on first load
DEFAULT_PREVIOUS = MeasurementSet(scope1=12000.0, scope2=8000.0, scope3=25000.0)
DEFAULT_CURRENT = MeasurementSet(scope1=11000.0, scope2=7500.0, scope3=26000.0)
DEFAULT_TARGET = 10.0
