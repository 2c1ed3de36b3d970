"""FastAPI server — HTTP access to the charge calculation engine.

Run with:
    uvicorn ev_charge_calc.api.server:app --reload --port 8000

Or:
    python -m ev_charge_calc.api.server

Endpoints:
    GET  /defaults                 — starting values (env overrides applied)
    POST /calculate/charging-cost  — cost of one full charge
    POST /calculate/range          — km on a full charge
    POST /calculate/petrol-cost    — petrol cost for a distance
    POST /calculate/charge-time    — realistic full-charge duration
    POST /calculate/compare        — charging vs petrol verdict
    POST /calculate/ev             — EV-only aggregate (+ narrative)
    POST /calculate/hybrid         — EV vs petrol aggregate (+ narrative)
"""

from __future__ import annotations

import logging
import math
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from ev_charge_calc.api.narrative import generate_ev_narrative, generate_hybrid_narrative
from ev_charge_calc.config.calibration import ChargeTimeCalibration, ComparisonPolicy
from ev_charge_calc.config.inputs import (
    ChargeTimeInput,
    ChargingCostInput,
    ComparisonInput,
    EVCostsInput,
    HybridComparisonInput,
    PetrolCostInput,
    RangeInput,
)
from ev_charge_calc.config.settings import load_environment_settings
from ev_charge_calc.engine import (
    calculate_charge_time,
    calculate_charging_cost,
    calculate_ev_costs,
    calculate_hybrid_comparison,
    calculate_km_range,
    calculate_petrol_cost,
    compare_charging_with_petrol_cost,
)
from ev_charge_calc.errors import InvalidInput
from ev_charge_calc.models.results import ChargeTimeResult, ComparisonResult, EVCostsResult, HybridComparisonResult

logger = logging.getLogger(__name__)

API_VERSION = "1.0"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="EV Charge Calculator API",
    version=API_VERSION,
    description=(
        "Cost, range and charge time of a full EV charge, and how it compares "
        "with driving the same distance on petrol."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class ChargeTimeRequest(BaseModel):
    params: ChargeTimeInput = Field(default_factory=ChargeTimeInput)
    calibration: ChargeTimeCalibration = Field(default_factory=ChargeTimeCalibration)


class CompareRequest(BaseModel):
    params: ComparisonInput
    policy: ComparisonPolicy = Field(default_factory=ComparisonPolicy)


class AggregateRequest(BaseModel):
    """Request body for /calculate/ev and /calculate/hybrid.  All fields optional."""
    inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial input record. Missing fields use the current defaults. "
                    "Example: {'battery_capacity': 75, 'fee_type': 'percentage'}",
    )
    calibration: ChargeTimeCalibration = Field(default_factory=ChargeTimeCalibration)
    policy: ComparisonPolicy = Field(
        default_factory=ComparisonPolicy,
        description="Tie-break policy (hybrid only)",
    )


class EVResponse(BaseModel):
    result: EVCostsResult
    narrative: str = ""


class HybridResponse(BaseModel):
    result: HybridComparisonResult
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_input(model: type[EVCostsInput], overrides: dict[str, Any]) -> EVCostsInput:
    """Merge partial overrides onto the environment / default settings."""
    settings = load_environment_settings()
    base = settings.to_hybrid_input().model_dump(include=set(model.model_fields))
    try:
        return model(**{**base, **overrides})
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc


def _finite(payload: Any) -> Any:
    """Reject results that overflowed to inf; JSON cannot carry them."""
    values = payload.model_dump() if isinstance(payload, BaseModel) else payload
    if _has_non_finite(values):
        raise InvalidInput("Inputs are too large: the result is not a finite number")
    return payload


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_has_non_finite(v) for v in value)
    return False


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/defaults")
def get_defaults():
    """Starting values after env / profile overrides (saved preferences are a UI concern)."""
    return load_environment_settings().preferences()


@app.post("/calculate/charging-cost")
def charging_cost(params: ChargingCostInput):
    return _finite({"charging_cost": calculate_charging_cost(params)})


@app.post("/calculate/range")
def km_range(params: RangeInput):
    return _finite({"km_range": calculate_km_range(params)})


@app.post("/calculate/petrol-cost")
def petrol_cost(params: PetrolCostInput):
    return _finite({"petrol_cost": calculate_petrol_cost(params)})


@app.post("/calculate/charge-time", response_model=ChargeTimeResult)
def charge_time(req: ChargeTimeRequest):
    return _finite(calculate_charge_time(req.params, req.calibration))


@app.post("/calculate/compare", response_model=ComparisonResult)
def compare(req: CompareRequest):
    return _finite(compare_charging_with_petrol_cost(req.params, req.policy))


@app.post("/calculate/ev", response_model=EVResponse)
def ev_costs(req: AggregateRequest):
    """EV-only: charging cost, range and charge time."""
    params = _build_input(EVCostsInput, req.inputs)
    result = _finite(calculate_ev_costs(params, req.calibration))
    return EVResponse(result=result, narrative=generate_ev_narrative(result))


@app.post("/calculate/hybrid", response_model=HybridResponse)
def hybrid_comparison(req: AggregateRequest):
    """EV vs petrol for the distance one full charge covers."""
    params = _build_input(HybridComparisonInput, req.inputs)
    result = _finite(calculate_hybrid_comparison(params, req.calibration, req.policy))
    return HybridResponse(result=result, narrative=generate_hybrid_narrative(result))


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logger.info("Starting EV Charge Calculator API v%s", API_VERSION)
    uvicorn.run(
        "ev_charge_calc.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
