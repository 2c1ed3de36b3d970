"""Result models — calculation output contracts."""

from ev_charge_calc.models.results import (
    ChargeTimeResult,
    ComparisonResult,
    EVCostsResult,
    HybridComparisonResult,
)

__all__ = [
    "ChargeTimeResult",
    "ComparisonResult",
    "EVCostsResult",
    "HybridComparisonResult",
]
