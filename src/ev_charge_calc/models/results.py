"""Result types — the contract between engine, API, narrative and dashboard.

Plain derived values with no back-references to the inputs.  Nothing is
rounded here; display sinks format for presentation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChargeTimeResult(_Result):
    """Realistic full-charge duration at an AC station."""

    charge_time_hours: float
    """capacity / actual_charging_power, unrounded."""

    charge_time_minutes: int
    """floor(hours) × 60 + round(fractional hours × 60)."""

    actual_charging_power: float
    """Derated average power (kW)."""

    formatted_time: str
    """'5h 37m', or '45m' when under an hour."""


class ComparisonResult(_Result):
    """Charging vs petrol verdict."""

    is_charging_cheaper: bool
    savings: float
    """|charging_cost − petrol_cost|."""

    cheaper_option: Literal["charging", "petrol"]
    cost_difference: float
    """petrol_cost − charging_cost; positive means charging is cheaper."""


class HybridComparisonResult(ComparisonResult):
    """EV vs petrol for the distance one full charge covers."""

    charging_cost: float
    petrol_cost: float
    km_range: float
    charge_time: ChargeTimeResult


class EVCostsResult(_Result):
    """EV-only results.  ``petrol_cost`` is always 0 and charging always 'cheaper'."""

    charging_cost: float
    km_range: float
    is_charging_cheaper: bool
    petrol_cost: float
    charge_time: ChargeTimeResult
