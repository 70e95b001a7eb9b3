"""Audit hooks -- log-ready records of calculations and sanity checks."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from battery_roi.engine.result import ROIOutputs, SanityResult

logger = logging.getLogger(__name__)


def _fmt(value: Any) -> str | None:
    return None if value is None else str(value)


def log_calculation(request_id: str, outputs: ROIOutputs) -> dict[str, Any]:
    """Record an ROI calculation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "request_id": request_id,
        "kind": "calculation",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "annual_net_sek": _fmt(outputs.annual_net_sek),
        "payback": _fmt(outputs.payback),
        "npv": _fmt(outputs.npv),
        "irr": _fmt(outputs.irr),
        "irr_status": outputs.irr_status.value,
    }
    logger.info("ROI calculation audit: %s → payback=%s", request_id, entry["payback"])
    return entry


def log_sanity_check(request_id: str, result: SanityResult) -> dict[str, Any]:
    """Record a sanity check verdict; failures are logged at WARNING."""
    entry = {
        "request_id": request_id,
        "kind": "sanity_check",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        "passed": result.passed,
        "deltas": {k: _fmt(v) for k, v in result.deltas.items()},
        "note": result.note,
    }
    if result.passed:
        logger.info("Sanity check audit: %s → pass", request_id)
    else:
        logger.warning("Sanity check audit: %s → FAIL (%s)", request_id, result.note)
    return entry
