"""Tunable constants for charge-time derating and comparison tie-breaking."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChargeTimeCalibration(BaseModel):
    """Derating applied to the theoretical charging power.

    actual_power = theoretical_power × efficiency_factor × ramp_up_factor
    """

    model_config = ConfigDict(frozen=True)

    efficiency_factor: float = Field(
        default=0.90, gt=0, le=1.0,
        description="Fraction of rated power sustained after heat / conversion losses",
    )
    ramp_up_factor: float = Field(
        default=0.90, gt=0, le=1.0,
        description="Average-over-session fraction of peak power, accounting for the gradual "
                    "power ramp at the start of a session",
    )


# Second observed calibration — slower ramp-up.
ALTERNATIVE_CALIBRATION = ChargeTimeCalibration(efficiency_factor=0.90, ramp_up_factor=0.85)


class ComparisonPolicy(BaseModel):
    """How equal charging and petrol costs are resolved."""

    model_config = ConfigDict(frozen=True)

    tie_winner: Literal["petrol", "charging"] = Field(
        default="petrol",
        description="Option reported as cheaper when both costs are exactly equal",
    )
