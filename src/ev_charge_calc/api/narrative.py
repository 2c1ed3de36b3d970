"""Narrative generator — plain-English interpretation of calculation results.

Turns ``EVCostsResult`` / ``HybridComparisonResult`` into sectioned text
for display sinks that don't render the raw numbers themselves.
"""

from __future__ import annotations

from ev_charge_calc.models.results import ChargeTimeResult, EVCostsResult, HybridComparisonResult


def _header(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def _charging_section(charging_cost: float, km_range: float, charge_time: ChargeTimeResult) -> list[str]:
    cost_per_100km = charging_cost / km_range * 100 if km_range > 0 else 0.0
    lines = _header("CHARGING")
    lines.append(
        f"Full charge cost: {charging_cost:.2f}\n"
        f"Range on a full charge: {km_range:.0f} km\n"
        f"Cost per 100 km: {cost_per_100km:.2f}\n"
        f"Charge time: {charge_time.formatted_time} "
        f"at ~{charge_time.actual_charging_power:.2f} kW average"
    )
    return lines


def generate_ev_narrative(result: EVCostsResult) -> str:
    """Summary for the EV-only mode: cost, range and charge time."""
    sections = _charging_section(result.charging_cost, result.km_range, result.charge_time)
    return "\n".join(sections)


def generate_hybrid_narrative(result: HybridComparisonResult) -> str:
    """Summary for the EV vs petrol mode.

    Covers:
      1. Charging cost, range and time
      2. Petrol cost for the same distance
      3. Verdict
    """
    sections = _charging_section(result.charging_cost, result.km_range, result.charge_time)

    sections.append("")
    sections.extend(_header("PETROL"))
    sections.append(f"Petrol cost for {result.km_range:.0f} km: {result.petrol_cost:.2f}")

    sections.append("")
    sections.extend(_header("VERDICT"))
    if result.savings == 0:
        sections.append(
            f"Both options cost the same ({result.charging_cost:.2f}); "
            f"reported cheaper option: {result.cheaper_option}."
        )
    elif result.is_charging_cheaper:
        sections.append(f"Charging is cheaper by {result.savings:.2f} per full charge.")
    else:
        sections.append(f"Petrol is cheaper by {result.savings:.2f} for the same distance.")

    return "\n".join(sections)
