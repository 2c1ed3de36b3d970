"""Tests for engine/comparison.py — verdict, savings and tie policy."""

from __future__ import annotations

import math

import pytest

from ev_charge_calc.config import ComparisonInput, ComparisonPolicy
from ev_charge_calc.engine.comparison import compare_charging_with_petrol_cost
from ev_charge_calc.errors import InvalidInput


def test_charging_cheaper():
    r = compare_charging_with_petrol_cost(ComparisonInput(charging_cost=15, petrol_cost=25))
    assert r.is_charging_cheaper is True
    assert r.savings == 10
    assert r.cheaper_option == "charging"
    assert r.cost_difference == 10


def test_petrol_cheaper():
    r = compare_charging_with_petrol_cost(ComparisonInput(charging_cost=30, petrol_cost=20))
    assert r.is_charging_cheaper is False
    assert r.savings == 10
    assert r.cheaper_option == "petrol"
    assert r.cost_difference == -10  # signed


def test_tie_favours_petrol_by_default():
    r = compare_charging_with_petrol_cost(ComparisonInput(charging_cost=25, petrol_cost=25))
    assert r.is_charging_cheaper is False
    assert r.savings == 0
    assert r.cheaper_option == "petrol"
    assert r.cost_difference == 0


def test_tie_policy_charging():
    r = compare_charging_with_petrol_cost(
        ComparisonInput(charging_cost=25, petrol_cost=25),
        ComparisonPolicy(tie_winner="charging"),
    )
    assert r.is_charging_cheaper is True
    assert r.cheaper_option == "charging"


def test_tie_policy_does_not_affect_strict_cases():
    policy = ComparisonPolicy(tie_winner="charging")
    r = compare_charging_with_petrol_cost(ComparisonInput(charging_cost=26, petrol_cost=25), policy)
    assert r.cheaper_option == "petrol"


def test_zero_costs():
    r = compare_charging_with_petrol_cost(ComparisonInput(charging_cost=0, petrol_cost=0))
    assert r.cheaper_option == "petrol"


@pytest.mark.parametrize("charging,petrol", [(-1, 10), (10, -1), (math.nan, 10), (10, math.inf)])
def test_invalid_costs(charging, petrol):
    with pytest.raises(InvalidInput, match="Charging cost and petrol cost must be non-negative numbers"):
        compare_charging_with_petrol_cost(ComparisonInput(charging_cost=charging, petrol_cost=petrol))
