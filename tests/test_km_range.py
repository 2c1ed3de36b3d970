"""Tests for engine/km_range.py and engine/petrol_cost.py."""

from __future__ import annotations

import math

import pytest

from ev_charge_calc.config import PetrolCostInput, RangeInput
from ev_charge_calc.engine.km_range import calculate_km_range
from ev_charge_calc.engine.petrol_cost import calculate_petrol_cost
from ev_charge_calc.errors import InvalidInput


# ── Range ───────────────────────────────────────────────────────────────

def test_range():
    # 75 / 0.18 ≈ 416.67
    assert abs(calculate_km_range(RangeInput(battery_capacity=75, kwh_usage=0.18)) - 416.67) < 0.01


def test_range_zero_capacity():
    assert calculate_km_range(RangeInput(battery_capacity=0, kwh_usage=0.2)) == 0


@pytest.mark.parametrize("capacity", [-50, math.nan, math.inf])
def test_range_invalid_capacity(capacity):
    with pytest.raises(InvalidInput, match="Battery capacity must be a non-negative number"):
        calculate_km_range(RangeInput(battery_capacity=capacity, kwh_usage=0.18))


@pytest.mark.parametrize("usage", [0, -0.1, math.nan])
def test_range_invalid_usage(usage):
    with pytest.raises(InvalidInput, match="kWh usage must be a positive number"):
        calculate_km_range(RangeInput(battery_capacity=75, kwh_usage=usage))


# ── Petrol cost ─────────────────────────────────────────────────────────

def test_petrol_cost():
    # 400 km / 12 km/l × 1.50 = 50
    cost = calculate_petrol_cost(PetrolCostInput(km_range=400, petrol_usage=12, petrol_price=1.50))
    assert cost == pytest.approx(50)


def test_petrol_cost_zero_range():
    assert calculate_petrol_cost(PetrolCostInput(km_range=0, petrol_usage=12, petrol_price=1.50)) == 0


@pytest.mark.parametrize("field,value,message", [
    ("km_range", -1, "Range must be a non-negative number"),
    ("km_range", math.nan, "Range must be a non-negative number"),
    ("petrol_usage", 0, "Petrol usage must be a positive number"),
    ("petrol_usage", -12, "Petrol usage must be a positive number"),
    ("petrol_price", -1.5, "Petrol price must be a non-negative number"),
    ("petrol_price", math.inf, "Petrol price must be a non-negative number"),
])
def test_petrol_cost_invalid(field, value, message):
    params = dict(km_range=400, petrol_usage=12, petrol_price=1.50)
    params[field] = value
    with pytest.raises(InvalidInput, match=message):
        calculate_petrol_cost(PetrolCostInput(**params))


def test_petrol_checks_range_first():
    with pytest.raises(InvalidInput, match="Range"):
        calculate_petrol_cost(PetrolCostInput(km_range=-1, petrol_usage=0, petrol_price=-1))
