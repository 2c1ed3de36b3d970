"""Charge time at an AC station.

A single-phase car on a three-phase station only draws one phase, i.e. a
third of the station rating.  The result is then derated twice:

  actual_power = theoretical_power × efficiency_factor × ramp_up_factor
  hours        = capacity / actual_power
"""

from __future__ import annotations

import math

from ev_charge_calc.config.calibration import ChargeTimeCalibration
from ev_charge_calc.config.inputs import ChargerRating, ChargeTimeInput, PhaseCount
from ev_charge_calc.engine._checks import is_positive
from ev_charge_calc.errors import InvalidInput
from ev_charge_calc.models.results import ChargeTimeResult


def _resolve_phases(value: int) -> PhaseCount:
    try:
        return PhaseCount(value)
    except (ValueError, TypeError):
        raise InvalidInput("Car phases must be either 1 or 3") from None


def _resolve_rating(value: float) -> ChargerRating:
    try:
        return ChargerRating(value)
    except (ValueError, TypeError):
        raise InvalidInput("Charging power must be either 11 or 22 kW") from None


def theoretical_max_power(phases: PhaseCount, rating: ChargerRating) -> float:
    """Peak kW the car can draw from the station before derating."""
    if phases is PhaseCount.THREE:
        return float(rating)
    return rating / 3


def format_duration(hours: int, minutes: int) -> str:
    """'5h 37m', or just '45m' under an hour.  Minutes are always shown."""
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def calculate_charge_time(
    params: ChargeTimeInput,
    calibration: ChargeTimeCalibration | None = None,
) -> ChargeTimeResult:
    """Realistic time for a full charge from empty."""
    if not is_positive(params.battery_capacity):
        raise InvalidInput("Battery capacity must be a positive number")

    phases = _resolve_phases(params.car_phases)
    rating = _resolve_rating(params.charging_power)
    calibration = calibration or ChargeTimeCalibration()

    actual_power = (
        theoretical_max_power(phases, rating)
        * calibration.efficiency_factor
        * calibration.ramp_up_factor
    )
    charge_time_hours = params.battery_capacity / actual_power
    if not math.isfinite(charge_time_hours):
        raise InvalidInput("Charge time is too long to represent")

    hours = math.floor(charge_time_hours)
    # Half-up, not banker's rounding.
    minutes = math.floor((charge_time_hours - hours) * 60 + 0.5)

    return ChargeTimeResult(
        charge_time_hours=charge_time_hours,
        # Rounded total; may differ slightly from charge_time_hours × 60.
        charge_time_minutes=hours * 60 + minutes,
        actual_charging_power=actual_power,
        formatted_time=format_duration(hours, minutes),
    )
