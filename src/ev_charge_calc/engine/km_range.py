"""Range on a full battery."""

from __future__ import annotations

from ev_charge_calc.config.inputs import RangeInput
from ev_charge_calc.engine._checks import is_non_negative, is_positive
from ev_charge_calc.errors import InvalidInput


def calculate_km_range(params: RangeInput) -> float:
    """Estimated km on a full charge = capacity / kWh-per-km."""
    if not is_non_negative(params.battery_capacity):
        raise InvalidInput("Battery capacity must be a non-negative number")

    if not is_positive(params.kwh_usage):
        raise InvalidInput("kWh usage must be a positive number")

    return params.battery_capacity / params.kwh_usage
