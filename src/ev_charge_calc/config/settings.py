"""Settings source — initial form values and remembered user preferences.

Priority (highest first):
  1. preferences saved by the user (JSON file, see ``PreferenceStore``)
  2. ``EV_CALC_DEFAULT_*`` environment variables
  3. the ``EV_CALC_APP_ENV`` profile overrides
  4. hardcoded defaults (``config/defaults.py``)
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, ValidationInfo, ValidatorFunctionWrapHandler, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ev_charge_calc.config import defaults
from ev_charge_calc.config.inputs import EVCostsInput, HybridComparisonInput

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV = "EV_CALC_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path.home() / ".ev_charge_calc" / "settings.json"


class CalculatorSettings(BaseSettings):
    """Values the calculator form starts from."""

    model_config = SettingsConfigDict(
        env_prefix="EV_CALC_DEFAULT_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    app_env: Literal["development", "production", "test"] = Field(
        default="development",
        validation_alias="EV_CALC_APP_ENV",
        description="Profile selecting a set of default overrides",
    )

    mode: Literal["EV", "Hybrid"] = Field(default=defaults.DEFAULT_MODE, description="EV-only or EV vs petrol")
    battery_capacity: float = Field(default=defaults.DEFAULT_BATTERY_CAPACITY, description="kWh")
    price_per_kwh: float = Field(default=defaults.DEFAULT_PRICE_PER_KWH, description="currency/kWh")
    fee_type: str = Field(default=defaults.DEFAULT_FEE_TYPE, description="'fixed', 'percentage' or 'none'")
    starting_fee: float = Field(default=defaults.DEFAULT_STARTING_FEE, description="currency")
    transaction_fee_percent: float = Field(default=defaults.DEFAULT_TRANSACTION_FEE_PERCENT, description="%")
    kwh_usage: float = Field(default=defaults.DEFAULT_KWH_USAGE, description="kWh/km")
    petrol_price: float = Field(default=defaults.DEFAULT_PETROL_PRICE, description="currency/liter")
    petrol_usage: float = Field(default=defaults.DEFAULT_PETROL_USAGE, description="km/liter")
    use_liters_per_100km: bool = Field(default=False, description="Show petrol usage as L/100km")

    @field_validator("*", mode="wrap")
    @classmethod
    def _fall_back_to_default(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo,
    ) -> Any:
        # Unparseable values fall back to the field default.
        try:
            return handler(value)
        except ValidationError:
            default = cls.model_fields[info.field_name].default
            logger.warning("Ignoring invalid %s=%r, using default %r", info.field_name, value, default)
            return default

    def to_ev_costs_input(
        self,
        car_phases: int = defaults.DEFAULT_CAR_PHASES,
        charging_power: float = defaults.DEFAULT_CHARGING_POWER,
    ) -> EVCostsInput:
        return EVCostsInput(
            **self.model_dump(include=set(EVCostsInput.model_fields) - {"car_phases", "charging_power"}),
            car_phases=car_phases,
            charging_power=charging_power,
        )

    def to_hybrid_input(
        self,
        car_phases: int = defaults.DEFAULT_CAR_PHASES,
        charging_power: float = defaults.DEFAULT_CHARGING_POWER,
    ) -> HybridComparisonInput:
        return HybridComparisonInput(
            **self.model_dump(include=set(HybridComparisonInput.model_fields) - {"car_phases", "charging_power"}),
            car_phases=car_phases,
            charging_power=charging_power,
        )

    def preferences(self) -> dict[str, Any]:
        """Fields worth remembering between sessions (everything but the profile)."""
        return self.model_dump(exclude={"app_env"})


def load_environment_settings() -> CalculatorSettings:
    """Hardcoded defaults ← profile overrides ← ``EV_CALC_DEFAULT_*`` env vars."""
    settings = CalculatorSettings()
    profile = defaults.PROFILE_OVERRIDES.get(settings.app_env, {})
    # Env-provided fields land in model_fields_set and win over the profile.
    overrides = {k: v for k, v in profile.items() if k not in settings.model_fields_set}
    if overrides:
        logger.info("Applying '%s' profile overrides: %s", settings.app_env, sorted(overrides))
    return settings.model_copy(update=overrides)


class PreferenceStore:
    """JSON file holding the user's last-used form values."""

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            path = os.environ.get(SETTINGS_PATH_ENV) or DEFAULT_SETTINGS_PATH
        self.path = Path(path)

    def load(self) -> dict[str, Any] | None:
        """Saved preferences, or ``None`` if nothing usable is stored.

        A corrupted file is removed so the next save starts clean.
        """
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load preferences from %s: %s", self.path, exc)
            self.clear()
            return None
        if not isinstance(data, dict):
            logger.warning("Discarding preferences in %s: expected an object, got %s", self.path, type(data).__name__)
            self.clear()
            return None
        return data

    def save(self, settings: CalculatorSettings) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(settings.preferences(), indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to save preferences to %s: %s", self.path, exc)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove preferences file %s: %s", self.path, exc)


def load_initial_settings(store: PreferenceStore | None = None) -> CalculatorSettings:
    """Settings the form opens with: saved preferences over env / defaults."""
    base = load_environment_settings()
    saved = store.load() if store is not None else None
    if not saved:
        return base
    known = {k: v for k, v in saved.items() if k in CalculatorSettings.model_fields and k != "app_env"}
    return CalculatorSettings.model_validate({**base.model_dump(), **known})


def reset_to_defaults(store: PreferenceStore | None = None) -> CalculatorSettings:
    """Forget saved preferences and return the env / default settings."""
    if store is not None:
        store.clear()
    return load_environment_settings()
