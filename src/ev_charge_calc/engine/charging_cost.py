"""Charging cost.

energy_cost = capacity × price_per_kWh
total       = energy_cost + fee(fee_type)
"""

from __future__ import annotations

from ev_charge_calc.config.inputs import ChargingCostInput, FeeType
from ev_charge_calc.engine._checks import is_non_negative, is_within
from ev_charge_calc.errors import InvalidInput


def calculate_charging_cost(params: ChargingCostInput) -> float:
    """Cost of one full charge including the session fee.  Not rounded."""
    if not (is_non_negative(params.battery_capacity) and is_non_negative(params.price_per_kwh)):
        raise InvalidInput("Battery capacity and price per kWh must be valid non-negative numbers")

    fee_type = FeeType.resolve(params.fee_type)

    if fee_type is FeeType.FIXED and not is_non_negative(params.starting_fee):
        raise InvalidInput("Starting fee must be a non-negative number")

    if fee_type is FeeType.PERCENTAGE and not is_within(params.transaction_fee_percent, 0, 100):
        raise InvalidInput("Transaction fee percentage must be a number between 0 and 100")

    energy_cost = params.battery_capacity * params.price_per_kwh

    if fee_type is FeeType.FIXED:
        fee = params.starting_fee
    elif fee_type is FeeType.PERCENTAGE:
        fee = energy_cost * params.transaction_fee_percent / 100
    else:
        fee = 0.0

    return energy_cost + fee
