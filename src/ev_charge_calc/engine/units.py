"""Fuel-economy unit conversion for display.  The engine itself uses km/L."""

from __future__ import annotations

from ev_charge_calc.engine._checks import is_positive
from ev_charge_calc.errors import InvalidInput


def km_per_liter_to_liters_per_100km(km_per_liter: float) -> float:
    if not is_positive(km_per_liter):
        raise InvalidInput("Fuel consumption must be a positive number")
    return 100 / km_per_liter


def liters_per_100km_to_km_per_liter(liters_per_100km: float) -> float:
    if not is_positive(liters_per_100km):
        raise InvalidInput("Fuel consumption must be a positive number")
    return 100 / liters_per_100km
