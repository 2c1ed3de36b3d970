"""Calculation input records.

Bounds are not declared as pydantic constraints.  The engine checks them
and raises ``InvalidInput`` naming the failed field.  NaN / inf are
accepted here and rejected there.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

from ev_charge_calc.config import defaults


class FeeType(str, Enum):
    """Charging-session surcharge policy."""

    FIXED = "fixed"
    PERCENTAGE = "percentage"
    NONE = "none"

    @classmethod
    def resolve(cls, value: object) -> FeeType:
        """Map a raw fee-type value to a variant.  Unrecognized → ``NONE``."""
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


class PhaseCount(IntEnum):
    """Number of AC phases the car's on-board charger can draw from."""

    SINGLE = 1
    THREE = 3


class ChargerRating(IntEnum):
    """Rated AC station power (kW)."""

    KW_11 = 11
    KW_22 = 22


class _Input(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChargingCostInput(_Input):
    """One full-battery charging session at a public charger."""

    battery_capacity: float = Field(default=defaults.DEFAULT_BATTERY_CAPACITY, description="Battery capacity (kWh)")
    price_per_kwh: float = Field(default=defaults.DEFAULT_PRICE_PER_KWH, description="Energy price (currency/kWh)")
    fee_type: str = Field(
        default=defaults.DEFAULT_FEE_TYPE,
        description="'fixed', 'percentage' or 'none'.  Any other value is treated as 'none'.",
    )
    starting_fee: float = Field(
        default=defaults.DEFAULT_STARTING_FEE,
        description="Flat session fee (currency).  Only checked / used when fee_type='fixed'.",
    )
    transaction_fee_percent: float = Field(
        default=defaults.DEFAULT_TRANSACTION_FEE_PERCENT,
        description="Fee as % of energy cost, 0–100.  Only checked / used when fee_type='percentage'.",
    )


class RangeInput(_Input):
    battery_capacity: float = Field(default=defaults.DEFAULT_BATTERY_CAPACITY, description="Battery capacity (kWh)")
    kwh_usage: float = Field(default=defaults.DEFAULT_KWH_USAGE, description="Consumption (kWh/km), > 0")


class PetrolCostInput(_Input):
    km_range: float = Field(description="Distance to cover (km)")
    petrol_usage: float = Field(default=defaults.DEFAULT_PETROL_USAGE, description="Fuel economy (km/liter), > 0")
    petrol_price: float = Field(default=defaults.DEFAULT_PETROL_PRICE, description="Fuel price (currency/liter)")


class ChargeTimeInput(_Input):
    battery_capacity: float = Field(default=defaults.DEFAULT_BATTERY_CAPACITY, description="Battery capacity (kWh), > 0")
    car_phases: int = Field(default=defaults.DEFAULT_CAR_PHASES, description="Car on-board charger phases: 1 or 3")
    charging_power: float = Field(default=defaults.DEFAULT_CHARGING_POWER, description="Station rating (kW): 11 or 22")


class ComparisonInput(_Input):
    charging_cost: float = Field(description="Cost of one full charge (currency)")
    petrol_cost: float = Field(description="Petrol cost for the same distance (currency)")


class EVCostsInput(_Input):
    """Everything the EV-only aggregate needs: cost, range and charge time."""

    battery_capacity: float = Field(default=defaults.DEFAULT_BATTERY_CAPACITY, description="Battery capacity (kWh)")
    price_per_kwh: float = Field(default=defaults.DEFAULT_PRICE_PER_KWH, description="Energy price (currency/kWh)")
    fee_type: str = Field(default=defaults.DEFAULT_FEE_TYPE, description="'fixed', 'percentage' or 'none'")
    starting_fee: float = Field(default=defaults.DEFAULT_STARTING_FEE, description="Flat session fee (currency)")
    transaction_fee_percent: float = Field(
        default=defaults.DEFAULT_TRANSACTION_FEE_PERCENT, description="Fee as % of energy cost, 0–100",
    )
    kwh_usage: float = Field(default=defaults.DEFAULT_KWH_USAGE, description="Consumption (kWh/km)")
    car_phases: int = Field(default=defaults.DEFAULT_CAR_PHASES, description="Car on-board charger phases: 1 or 3")
    charging_power: float = Field(default=defaults.DEFAULT_CHARGING_POWER, description="Station rating (kW): 11 or 22")

    def charging_cost_input(self) -> ChargingCostInput:
        return ChargingCostInput(
            battery_capacity=self.battery_capacity,
            price_per_kwh=self.price_per_kwh,
            fee_type=self.fee_type,
            starting_fee=self.starting_fee,
            transaction_fee_percent=self.transaction_fee_percent,
        )

    def range_input(self) -> RangeInput:
        return RangeInput(battery_capacity=self.battery_capacity, kwh_usage=self.kwh_usage)

    def charge_time_input(self) -> ChargeTimeInput:
        return ChargeTimeInput(
            battery_capacity=self.battery_capacity,
            car_phases=self.car_phases,
            charging_power=self.charging_power,
        )


class HybridComparisonInput(EVCostsInput):
    """EV inputs plus the petrol baseline to compare against."""

    petrol_usage: float = Field(default=defaults.DEFAULT_PETROL_USAGE, description="Fuel economy (km/liter)")
    petrol_price: float = Field(default=defaults.DEFAULT_PETROL_PRICE, description="Fuel price (currency/liter)")

    def petrol_cost_input(self, km_range: float) -> PetrolCostInput:
        return PetrolCostInput(km_range=km_range, petrol_usage=self.petrol_usage, petrol_price=self.petrol_price)
