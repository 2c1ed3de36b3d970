"""Petrol cost for an equivalent distance."""

from __future__ import annotations

from ev_charge_calc.config.inputs import PetrolCostInput
from ev_charge_calc.engine._checks import is_non_negative, is_positive
from ev_charge_calc.errors import InvalidInput


def calculate_petrol_cost(params: PetrolCostInput) -> float:
    """(km / km-per-liter) × price-per-liter."""
    if not is_non_negative(params.km_range):
        raise InvalidInput("Range must be a non-negative number")

    if not is_positive(params.petrol_usage):
        raise InvalidInput("Petrol usage must be a positive number")

    if not is_non_negative(params.petrol_price):
        raise InvalidInput("Petrol price must be a non-negative number")

    liters = params.km_range / params.petrol_usage
    return liters * params.petrol_price
