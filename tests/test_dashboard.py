"""Streamlit dashboard smoke tests — starting values outside the widget ranges."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[1] / "src" / "ev_charge_calc" / "dashboard" / "app.py"


@pytest.fixture
def prefs_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "settings.json"
    monkeypatch.setenv("EV_CALC_SETTINGS_PATH", str(path))
    return path


def _run(prefs_path: Path, saved: dict | None = None) -> AppTest:
    if saved is not None:
        prefs_path.write_text(json.dumps(saved), encoding="utf-8")
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    return at.run()


def _number_input(at: AppTest, label: str):
    return next(n for n in at.number_input if n.label == label)


def test_default_run(prefs_path: Path):
    at = _run(prefs_path)
    assert not at.exception
    assert _number_input(at, "Battery capacity kWh").value == 50.0


def test_env_default_above_widget_max_is_clamped(prefs_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EV_CALC_DEFAULT_BATTERY_CAPACITY", "400")
    at = _run(prefs_path)
    assert not at.exception
    assert _number_input(at, "Battery capacity kWh").value == 300.0


def test_switching_to_liters_per_100km_with_low_km_per_liter(prefs_path: Path):
    at = _run(prefs_path, {"mode": "Hybrid", "petrol_usage": 1.5})
    assert not at.exception
    at.toggle[0].set_value(True).run()
    assert not at.exception
    # 100 / 1.5 ≈ 66.67 L/100km, inside the 2–100 range
    assert _number_input(at, "Usage L/100km").value == pytest.approx(66.67)


def test_high_km_per_liter_shown_as_liters_per_100km_is_clamped(prefs_path: Path):
    at = _run(prefs_path, {"mode": "Hybrid", "petrol_usage": 100, "use_liters_per_100km": True})
    assert not at.exception
    # 100 km/l → 1 L/100km, below the 2 L/100km floor
    assert _number_input(at, "Usage L/100km").value == 2.0


def test_saved_zero_petrol_usage_shows_error(prefs_path: Path):
    at = _run(prefs_path, {"mode": "Hybrid", "petrol_usage": 0, "use_liters_per_100km": True})
    assert not at.exception
    assert "Fuel consumption must be a positive number" in at.error[0].value


def test_saved_zero_petrol_usage_in_km_per_liter_is_clamped(prefs_path: Path):
    at = _run(prefs_path, {"mode": "Hybrid", "petrol_usage": 0})
    assert not at.exception
    assert _number_input(at, "Usage km/l").value == 1.0
