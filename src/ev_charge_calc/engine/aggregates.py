"""Convenience aggregates.

Both compose the single-purpose calculations in a fixed order.  Errors
from any step propagate unchanged.
"""

from __future__ import annotations

import logging

from ev_charge_calc.config.calibration import ChargeTimeCalibration, ComparisonPolicy
from ev_charge_calc.config.inputs import ComparisonInput, EVCostsInput, HybridComparisonInput
from ev_charge_calc.engine.charge_time import calculate_charge_time
from ev_charge_calc.engine.charging_cost import calculate_charging_cost
from ev_charge_calc.engine.comparison import compare_charging_with_petrol_cost
from ev_charge_calc.engine.km_range import calculate_km_range
from ev_charge_calc.engine.petrol_cost import calculate_petrol_cost
from ev_charge_calc.models.results import EVCostsResult, HybridComparisonResult

logger = logging.getLogger(__name__)


def calculate_hybrid_comparison(
    params: HybridComparisonInput,
    calibration: ChargeTimeCalibration | None = None,
    policy: ComparisonPolicy | None = None,
) -> HybridComparisonResult:
    """Charging cost + range → petrol cost for that range → charge time → comparison."""
    charging_cost = calculate_charging_cost(params.charging_cost_input())
    km_range = calculate_km_range(params.range_input())
    petrol_cost = calculate_petrol_cost(params.petrol_cost_input(km_range))
    charge_time = calculate_charge_time(params.charge_time_input(), calibration)
    comparison = compare_charging_with_petrol_cost(
        ComparisonInput(charging_cost=charging_cost, petrol_cost=petrol_cost),
        policy,
    )

    logger.debug(
        "hybrid: charging=%.4f petrol=%.4f range=%.2fkm cheaper=%s",
        charging_cost, petrol_cost, km_range, comparison.cheaper_option,
    )

    return HybridComparisonResult(
        charging_cost=charging_cost,
        petrol_cost=petrol_cost,
        km_range=km_range,
        charge_time=charge_time,
        **comparison.model_dump(),
    )


def calculate_ev_costs(
    params: EVCostsInput,
    calibration: ChargeTimeCalibration | None = None,
) -> EVCostsResult:
    """EV-only: no petrol baseline, so charging is cheaper by definition."""
    charging_cost = calculate_charging_cost(params.charging_cost_input())
    km_range = calculate_km_range(params.range_input())
    charge_time = calculate_charge_time(params.charge_time_input(), calibration)

    logger.debug("ev: charging=%.4f range=%.2fkm time=%s", charging_cost, km_range, charge_time.formatted_time)

    return EVCostsResult(
        charging_cost=charging_cost,
        km_range=km_range,
        is_charging_cheaper=True,
        petrol_cost=0.0,
        charge_time=charge_time,
    )
