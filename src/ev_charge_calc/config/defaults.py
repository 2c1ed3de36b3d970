"""Hardcoded defaults — the last fallback of the settings source."""

DEFAULT_MODE = "EV"

# Charging
DEFAULT_BATTERY_CAPACITY = 50.0  # kWh
DEFAULT_PRICE_PER_KWH = 0.25  # currency / kWh
DEFAULT_FEE_TYPE = "fixed"
DEFAULT_STARTING_FEE = 0.5  # currency, flat per session
DEFAULT_TRANSACTION_FEE_PERCENT = 5.0  # % of energy cost

# Consumption
DEFAULT_KWH_USAGE = 0.2  # kWh / km
DEFAULT_PETROL_PRICE = 1.65  # currency / liter
DEFAULT_PETROL_USAGE = 15.0  # km / liter

# Charger
DEFAULT_CAR_PHASES = 3
DEFAULT_CHARGING_POWER = 11.0  # kW rated

# Profile overrides applied on top of the defaults, below env variables.
PROFILE_OVERRIDES: dict[str, dict[str, object]] = {
    "development": {},
    "production": {},
    "test": {
        "battery_capacity": 75.0,
        "price_per_kwh": 0.30,
    },
}
