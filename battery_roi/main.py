"""FastAPI application exposing the battery ROI engine to the UI layer."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from battery_roi.config.settings import get_settings
from battery_roi.engine.calculator import ROICalculationEngine
from battery_roi.engine.result import ROIOutputs, SanityResult
from battery_roi.engine.sanity import run_sanity_check
from battery_roi.hooks.audit_hooks import log_calculation, log_sanity_check
from battery_roi.models.inputs import ROIInputs
from battery_roi.scenarios.loader import get_reference_scenario

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Battery ROI API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = ROICalculationEngine(settings)


class ROIDetailsResponse(BaseModel):
    pv_savings: Decimal
    demand_savings: Decimal
    arbitrage_savings: Decimal
    o_and_m: Decimal
    net_investment: Decimal


class ROIResponse(BaseModel):
    """ROI outputs; ``payback`` and ``irr`` are null when unattainable/indeterminate."""

    annual_net_sek: Decimal
    payback: Optional[Decimal]
    payback_status: str
    npv: Decimal
    irr: Optional[Decimal]
    irr_status: str
    details: ROIDetailsResponse

    @classmethod
    def from_outputs(cls, outputs: ROIOutputs) -> ROIResponse:
        d = outputs.details
        return cls(
            annual_net_sek=outputs.annual_net_sek,
            payback=outputs.payback,
            payback_status=outputs.payback_status.value,
            npv=outputs.npv,
            irr=outputs.irr,
            irr_status=outputs.irr_status.value,
            details=ROIDetailsResponse(
                pv_savings=d.pv_savings,
                demand_savings=d.demand_savings,
                arbitrage_savings=d.arbitrage_savings,
                o_and_m=d.o_and_m,
                net_investment=d.net_investment,
            ),
        )


class SanityCheckRequest(BaseModel):
    inputs: ROIInputs
    actual_annual_net: Decimal
    actual_payback: Optional[Decimal] = None


class SanityCheckResponse(BaseModel):
    passed: bool
    deltas: dict[str, Optional[Decimal]]
    expected: dict[str, Optional[Decimal]]
    actual: dict[str, Optional[Decimal]]
    tolerances: dict[str, Decimal]
    note: str

    @classmethod
    def from_result(cls, result: SanityResult) -> SanityCheckResponse:
        return cls(
            passed=result.passed,
            deltas=result.deltas,
            expected=result.expected,
            actual=result.actual,
            tolerances=result.tolerances,
            note=result.note,
        )


@app.post("/api/roi", response_model=ROIResponse)
async def calculate_roi(body: ROIInputs):
    """Run the ROI engine on the posted inputs."""
    outputs = engine.calculate(body)
    log_calculation(str(uuid4()), outputs)
    return ROIResponse.from_outputs(outputs)


@app.post("/api/roi/sanity-check", response_model=SanityCheckResponse)
async def sanity_check(body: SanityCheckRequest):
    """Validate figures already shown to the user against a fresh calculation."""
    result = run_sanity_check(
        body.inputs, body.actual_annual_net, body.actual_payback, settings=settings
    )
    log_sanity_check(str(uuid4()), result)
    return SanityCheckResponse.from_result(result)


@app.get("/api/roi/reference", response_model=ROIInputs)
async def reference_scenario():
    """Return the reference installation inputs."""
    return get_reference_scenario()


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
