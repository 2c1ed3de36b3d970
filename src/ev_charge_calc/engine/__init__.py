"""Engine — pure calculation functions over the input records."""

from ev_charge_calc.engine.charging_cost import calculate_charging_cost
from ev_charge_calc.engine.km_range import calculate_km_range
from ev_charge_calc.engine.petrol_cost import calculate_petrol_cost
from ev_charge_calc.engine.comparison import compare_charging_with_petrol_cost
from ev_charge_calc.engine.charge_time import calculate_charge_time
from ev_charge_calc.engine.aggregates import calculate_ev_costs, calculate_hybrid_comparison
from ev_charge_calc.engine.units import km_per_liter_to_liters_per_100km, liters_per_100km_to_km_per_liter

__all__ = [
    "calculate_charging_cost",
    "calculate_km_range",
    "calculate_petrol_cost",
    "compare_charging_with_petrol_cost",
    "calculate_charge_time",
    "calculate_ev_costs",
    "calculate_hybrid_comparison",
    "km_per_liter_to_liters_per_100km",
    "liters_per_100km_to_km_per_liter",
]
