"""EV Charge Calculator — Streamlit dashboard.

Run with:
    streamlit run src/ev_charge_calc/dashboard/app.py

Layout: sidebar inputs (seeded from saved preferences / env / defaults,
remembered on every change) → main area with headline metrics, a cost
comparison chart in Hybrid mode, and the plain-English summary.
"""

from __future__ import annotations

import math

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ev_charge_calc.api.narrative import generate_ev_narrative, generate_hybrid_narrative
from ev_charge_calc.config import (
    ALTERNATIVE_CALIBRATION,
    CalculatorSettings,
    ChargeTimeCalibration,
    ComparisonPolicy,
    PreferenceStore,
    load_initial_settings,
    reset_to_defaults,
)
from ev_charge_calc.engine import (
    calculate_ev_costs,
    calculate_hybrid_comparison,
    km_per_liter_to_liters_per_100km,
    liters_per_100km_to_km_per_liter,
)
from ev_charge_calc.errors import InvalidInput

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="EV Charge Calculator", page_icon="⚡", layout="wide")

_FEE_TYPES = ["fixed", "percentage", "none"]
_MODES = ["EV", "Hybrid"]
_CALIBRATIONS = {
    "Standard (90% / 90%)": ChargeTimeCalibration(),
    "Slow ramp-up (90% / 85%)": ALTERNATIVE_CALIBRATION,
}

store = PreferenceStore()

if "settings" not in st.session_state:
    st.session_state.settings = load_initial_settings(store)
current: CalculatorSettings = st.session_state.settings

# Widget bounds.  L/100km limits mirror the km/l limits so the toggle
# always converts one valid value into another.
_KM_PER_L_MIN, _KM_PER_L_MAX = 1.0, 50.0
_L_PER_100_MIN, _L_PER_100_MAX = 100 / _KM_PER_L_MAX, 100 / _KM_PER_L_MIN


def bounded_input(label: str, low: float, high: float, value: float, step: float, **kwargs) -> float:
    """``number_input`` whose starting value is clamped into [low, high].

    Saved preferences and env overrides are not limited to the widget range.
    """
    value = float(value)
    start = min(max(value, low), high) if math.isfinite(value) else low
    return st.number_input(label, low, high, start, step, **kwargs)


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Inputs")

mode = st.sidebar.radio("Mode", _MODES, index=_MODES.index(current.mode), horizontal=True)

with st.sidebar.expander("Charging", expanded=True):
    battery_capacity = bounded_input("Battery capacity kWh", 0.0, 300.0, current.battery_capacity, 1.0)
    price_per_kwh = bounded_input("Price per kWh", 0.0, 5.0, current.price_per_kwh, 0.01, format="%.2f")
    fee_type = st.selectbox(
        "Fee type", _FEE_TYPES,
        index=_FEE_TYPES.index(current.fee_type) if current.fee_type in _FEE_TYPES else 0,
    )
    starting_fee = current.starting_fee
    transaction_fee_percent = current.transaction_fee_percent
    if fee_type == "fixed":
        starting_fee = bounded_input("Starting fee", 0.0, 100.0, current.starting_fee, 0.1, format="%.2f")
    elif fee_type == "percentage":
        transaction_fee_percent = bounded_input(
            "Transaction fee %", 0.0, 100.0, current.transaction_fee_percent, 0.5,
        )
    kwh_usage = bounded_input("Usage kWh/km", 0.01, 1.0, current.kwh_usage, 0.01, format="%.2f")

with st.sidebar.expander("Charger", expanded=True):
    c1, c2 = st.columns(2)
    car_phases = c1.selectbox("Car phases", [1, 3], index=1)
    charging_power = c2.selectbox("Station kW", [11, 22], index=0)
    calibration_name = st.selectbox("Derating", list(_CALIBRATIONS))

petrol_price = current.petrol_price
petrol_usage = current.petrol_usage
use_liters_per_100km = current.use_liters_per_100km
tie_winner = "petrol"
if mode == "Hybrid":
    with st.sidebar.expander("Petrol", expanded=True):
        petrol_price = bounded_input(
            "Petrol price per liter", 0.0, 10.0, current.petrol_price, 0.01, format="%.2f",
        )
        use_liters_per_100km = st.toggle("Enter usage as L/100km", value=current.use_liters_per_100km)
        if use_liters_per_100km:
            try:
                saved_l_per_100 = round(km_per_liter_to_liters_per_100km(current.petrol_usage), 2)
            except InvalidInput as exc:
                st.error(str(exc))
                st.stop()
            l_per_100 = bounded_input(
                "Usage L/100km", _L_PER_100_MIN, _L_PER_100_MAX, saved_l_per_100, 0.1, format="%.2f",
            )
            petrol_usage = liters_per_100km_to_km_per_liter(l_per_100)
        else:
            petrol_usage = bounded_input("Usage km/l", _KM_PER_L_MIN, _KM_PER_L_MAX, current.petrol_usage, 0.5)
        tie_winner = st.radio("On equal cost, prefer", ["petrol", "charging"], horizontal=True)

settings = current.model_copy(update={
    "mode": mode,
    "battery_capacity": battery_capacity,
    "price_per_kwh": price_per_kwh,
    "fee_type": fee_type,
    "starting_fee": starting_fee,
    "transaction_fee_percent": transaction_fee_percent,
    "kwh_usage": kwh_usage,
    "petrol_price": petrol_price,
    "petrol_usage": petrol_usage,
    "use_liters_per_100km": use_liters_per_100km,
})
if settings != current:
    st.session_state.settings = settings
    store.save(settings)

if st.sidebar.button("Reset to defaults"):
    st.session_state.settings = reset_to_defaults(store)
    st.rerun()

# ---------------------------------------------------------------------------
# MAIN — Results
# ---------------------------------------------------------------------------
st.title("⚡ EV Charge Calculator")

calibration = _CALIBRATIONS[calibration_name]

try:
    if mode == "Hybrid":
        result = calculate_hybrid_comparison(
            settings.to_hybrid_input(car_phases, charging_power),
            calibration,
            ComparisonPolicy(tie_winner=tie_winner),
        )
    else:
        result = calculate_ev_costs(settings.to_ev_costs_input(car_phases, charging_power), calibration)
except InvalidInput as exc:
    st.error(str(exc))
    st.stop()

m1, m2, m3 = st.columns(3)
m1.metric("Full charge cost", f"{result.charging_cost:.2f}")
m2.metric("Range", f"{result.km_range:.0f} km")
m3.metric("Charge time", result.charge_time.formatted_time,
          help=f"~{result.charge_time.actual_charging_power:.2f} kW average")

if mode == "Hybrid":
    st.subheader("Charging vs petrol")
    verdict = "Charging" if result.is_charging_cheaper else "Petrol"
    st.metric(f"{verdict} is cheaper by", f"{result.savings:.2f}")

    fig = go.Figure(go.Bar(
        x=["Charging", "Petrol"],
        y=[result.charging_cost, result.petrol_cost],
        marker_color=["#2ecc71", "#e67e22"],
        text=[f"{result.charging_cost:.2f}", f"{result.petrol_cost:.2f}"],
        textposition="outside",
    ))
    fig.update_layout(
        height=340,
        margin=dict(l=20, r=20, t=30, b=20),
        yaxis_title=f"Cost for {result.km_range:.0f} km",
    )
    st.plotly_chart(fig, use_container_width=True)

    table = pd.DataFrame([
        {"Option": "Charging", "Cost": round(result.charging_cost, 2),
         "Per 100 km": round(result.charging_cost / result.km_range * 100, 2) if result.km_range else 0.0},
        {"Option": "Petrol", "Cost": round(result.petrol_cost, 2),
         "Per 100 km": round(result.petrol_cost / result.km_range * 100, 2) if result.km_range else 0.0},
    ])
    st.dataframe(table, hide_index=True, use_container_width=True)
    narrative = generate_hybrid_narrative(result)
else:
    narrative = generate_ev_narrative(result)

with st.expander("Summary"):
    st.code(narrative, language=None)
