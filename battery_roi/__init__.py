"""Battery energy-storage ROI engine and sanity checker."""

from .engine.calculator import ROICalculationEngine, calculate
from .engine.result import CashFlowYear, ROIDetails, ROIOutputs, SanityResult
from .engine.sanity import run_sanity_check
from .models.enums import IRRStatus, PaybackStatus
from .models.inputs import ROIInputs
from .scenarios.loader import get_reference_scenario, load_scenario

__all__ = [
    "ROICalculationEngine",
    "calculate",
    "run_sanity_check",
    "ROIInputs",
    "ROIOutputs",
    "ROIDetails",
    "CashFlowYear",
    "SanityResult",
    "IRRStatus",
    "PaybackStatus",
    "load_scenario",
    "get_reference_scenario",
]
