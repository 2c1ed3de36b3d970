"""Configuration models — calculation inputs, calibration, and settings."""

from ev_charge_calc.config.inputs import (
    ChargerRating,
    ChargeTimeInput,
    ChargingCostInput,
    ComparisonInput,
    EVCostsInput,
    FeeType,
    HybridComparisonInput,
    PetrolCostInput,
    PhaseCount,
    RangeInput,
)
from ev_charge_calc.config.calibration import (
    ALTERNATIVE_CALIBRATION,
    ChargeTimeCalibration,
    ComparisonPolicy,
)
from ev_charge_calc.config.settings import (
    CalculatorSettings,
    PreferenceStore,
    load_initial_settings,
    reset_to_defaults,
)

__all__ = [
    "FeeType",
    "PhaseCount",
    "ChargerRating",
    "ChargingCostInput",
    "RangeInput",
    "PetrolCostInput",
    "ChargeTimeInput",
    "ComparisonInput",
    "EVCostsInput",
    "HybridComparisonInput",
    "ChargeTimeCalibration",
    "ComparisonPolicy",
    "ALTERNATIVE_CALIBRATION",
    "CalculatorSettings",
    "PreferenceStore",
    "load_initial_settings",
    "reset_to_defaults",
]
