"""Charging vs petrol comparison."""

from __future__ import annotations

from ev_charge_calc.config.calibration import ComparisonPolicy
from ev_charge_calc.config.inputs import ComparisonInput
from ev_charge_calc.engine._checks import is_non_negative
from ev_charge_calc.errors import InvalidInput
from ev_charge_calc.models.results import ComparisonResult


def compare_charging_with_petrol_cost(
    params: ComparisonInput,
    policy: ComparisonPolicy | None = None,
) -> ComparisonResult:
    """Which option is cheaper and by how much.

    Equal costs go to ``policy.tie_winner`` (petrol unless configured).
    ``cost_difference`` is signed: positive means charging is cheaper.
    """
    if not (is_non_negative(params.charging_cost) and is_non_negative(params.petrol_cost)):
        raise InvalidInput("Charging cost and petrol cost must be non-negative numbers")

    policy = policy or ComparisonPolicy()

    if policy.tie_winner == "charging":
        is_charging_cheaper = params.charging_cost <= params.petrol_cost
    else:
        is_charging_cheaper = params.charging_cost < params.petrol_cost

    return ComparisonResult(
        is_charging_cheaper=is_charging_cheaper,
        savings=abs(params.charging_cost - params.petrol_cost),
        cheaper_option="charging" if is_charging_cheaper else "petrol",
        cost_difference=params.petrol_cost - params.charging_cost,
    )
