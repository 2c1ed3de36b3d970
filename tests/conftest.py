"""Shared test fixtures — the worked examples used across the engine tests."""

from __future__ import annotations

import os

import pytest

from ev_charge_calc.config import (
    ChargeTimeCalibration,
    EVCostsInput,
    HybridComparisonInput,
    PreferenceStore,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep host EV_CALC_* variables out of settings-dependent tests."""
    for key in list(os.environ):
        if key.upper().startswith("EV_CALC_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def calibration() -> ChargeTimeCalibration:
    return ChargeTimeCalibration(efficiency_factor=0.90, ramp_up_factor=0.90)


@pytest.fixture
def ev_input() -> EVCostsInput:
    return EVCostsInput(
        battery_capacity=50,
        price_per_kwh=0.25,
        fee_type="fixed",
        starting_fee=2.50,
        transaction_fee_percent=0,
        kwh_usage=0.2,
        car_phases=3,
        charging_power=11,
    )


@pytest.fixture
def hybrid_input() -> HybridComparisonInput:
    return HybridComparisonInput(
        battery_capacity=50,
        price_per_kwh=0.25,
        fee_type="fixed",
        starting_fee=2.50,
        transaction_fee_percent=0,
        kwh_usage=0.2,
        petrol_usage=15,
        petrol_price=1.65,
        car_phases=3,
        charging_power=11,
    )


@pytest.fixture
def store(tmp_path) -> PreferenceStore:
    return PreferenceStore(tmp_path / "settings.json")
