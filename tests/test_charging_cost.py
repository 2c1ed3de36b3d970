"""Tests for engine/charging_cost.py — hand-calculated expected values."""

from __future__ import annotations

import math

import pytest

from ev_charge_calc.config import ChargingCostInput, FeeType
from ev_charge_calc.engine.charging_cost import calculate_charging_cost
from ev_charge_calc.errors import InvalidInput


def _cost(**kwargs) -> float:
    base = dict(battery_capacity=50, price_per_kwh=0.25, fee_type="fixed",
                starting_fee=0.0, transaction_fee_percent=0.0)
    base.update(kwargs)
    return calculate_charging_cost(ChargingCostInput(**base))


def test_fixed_fee():
    # 50 × 0.25 + 2.50 = 15
    assert _cost(fee_type="fixed", starting_fee=2.50) == 15


def test_percentage_fee():
    # 12.5 + 12.5 × 10% = 13.75
    assert _cost(fee_type="percentage", transaction_fee_percent=10) == 13.75


def test_no_fee():
    assert _cost(fee_type="none", starting_fee=99, transaction_fee_percent=50) == 12.5


def test_unrecognized_fee_type_is_treated_as_none():
    assert _cost(fee_type="subscription", starting_fee=2.50) == 12.5


def test_fee_type_enum_accepted():
    assert _cost(fee_type=FeeType.PERCENTAGE, transaction_fee_percent=10) == 13.75


def test_zero_capacity_fixed_fee_only():
    assert _cost(battery_capacity=0, starting_fee=2.50) == 2.50


def test_percentage_bounds_inclusive():
    assert _cost(fee_type="percentage", transaction_fee_percent=0) == 12.5
    assert _cost(fee_type="percentage", transaction_fee_percent=100) == 25.0


def test_result_is_not_rounded():
    # 33.3 × 0.3 = 9.99 (float), plus 0.333… fixed fee
    assert _cost(battery_capacity=33.3, price_per_kwh=0.3, starting_fee=1 / 3) == 33.3 * 0.3 + 1 / 3


@pytest.mark.parametrize("field,value", [
    ("battery_capacity", -10),
    ("price_per_kwh", -0.25),
    ("battery_capacity", math.nan),
    ("price_per_kwh", math.inf),
])
def test_invalid_capacity_or_price(field, value):
    with pytest.raises(InvalidInput, match="Battery capacity and price per kWh must be valid non-negative numbers"):
        _cost(**{field: value})


def test_negative_starting_fee():
    with pytest.raises(InvalidInput, match="Starting fee must be a non-negative number"):
        _cost(fee_type="fixed", starting_fee=-2.50)


def test_starting_fee_ignored_for_other_fee_types():
    assert _cost(fee_type="percentage", starting_fee=-1, transaction_fee_percent=10) == 13.75


@pytest.mark.parametrize("pct", [-1, 150, math.nan])
def test_invalid_transaction_fee(pct):
    with pytest.raises(InvalidInput, match="Transaction fee percentage must be a number between 0 and 100"):
        _cost(fee_type="percentage", transaction_fee_percent=pct)


def test_transaction_fee_ignored_for_fixed():
    assert _cost(fee_type="fixed", starting_fee=2.50, transaction_fee_percent=500) == 15


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        _cost(battery_capacity=-1)


def test_idempotent():
    params = ChargingCostInput(battery_capacity=61.7, price_per_kwh=0.29, fee_type="percentage",
                               transaction_fee_percent=7.5)
    assert calculate_charging_cost(params) == calculate_charging_cost(params)
