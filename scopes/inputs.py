# scopes/inputs.py
import logging
import math
from typing import Any, Mapping

from .models import SCOPES, MeasurementSet

logger = logging.getLogger(__name__)


def coerce_amount(value: Any) -> float:
    """
    Turn raw user input into a finite, non-negative float.

    Anything that cannot be read as such (empty text, junk, NaN,
    infinity, negative numbers) degrades to 0.0 instead of raising.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Could not read %r as a number, using 0", value)
        return 0.0

    if not math.isfinite(number) or number < 0:
        logger.debug("Out-of-range amount %r, using 0", value)
        return 0.0

    return number


def coerce_target(value: Any) -> float:
    """Reduction target in percent; same policy as amounts."""
    return coerce_amount(value)


def coerce_measurements(raw: Mapping[str, Any]) -> MeasurementSet:
    return MeasurementSet(**{scope: coerce_amount(raw.get(scope)) for scope in SCOPES})
