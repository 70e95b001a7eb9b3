"""Sanity check of displayed ROI figures against a fresh engine run.

Tolerances:
 - the greater of 5 000 SEK or 10 % of the expected annual net benefit
 - 0.25 years on simple payback
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Optional, Union

from battery_roi.config.settings import Settings, get_settings
from battery_roi.engine.calculator import ROICalculationEngine
from battery_roi.engine.result import SanityResult
from battery_roi.models.inputs import ROIInputs

logger = logging.getLogger(__name__)

Number = Union[Decimal, float, int, str]

PASS_NOTE = "OK"
FAIL_NOTE = "Deviation above tolerance in {fields} - check price, peaks and export cap."


def _to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """Coerce a reported figure; None and NaN both mean "unattainable"."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return Decimal(str(value))
    dec = value if isinstance(value, Decimal) else Decimal(value)
    if dec.is_nan():
        return None
    return dec


def _payback_delta(
    actual: Optional[Decimal], expected: Optional[Decimal]
) -> tuple[Optional[Decimal], bool]:
    """Return (delta, comparable). Both unattainable compares equal."""
    if actual is None and expected is None:
        return Decimal("0"), True
    if actual is None or expected is None:
        return None, False
    return abs(actual - expected), True


def run_sanity_check(
    inputs: ROIInputs,
    actual_annual_net: Optional[Number],
    actual_payback: Optional[Number],
    settings: Optional[Settings] = None,
) -> SanityResult:
    """Recompute the expected figures and compare them with what is shown.

    ``actual_payback`` may be None (or NaN) when the caller displays the
    payback as unattainable. A None or NaN ``actual_annual_net`` is a
    mismatch: the verdict fails with an annual delta of None.
    """
    settings = settings or get_settings()
    expected = ROICalculationEngine(settings).savings(inputs)

    actual_annual = _to_decimal(actual_annual_net)
    actual_pb = _to_decimal(actual_payback)

    tol_annual = max(
        settings.sanity_annual_abs_tolerance,
        expected.annual_net * settings.sanity_annual_rel_tolerance,
    )
    tol_payback = settings.sanity_payback_tolerance

    # a missing annual net never matches
    delta_annual = None if actual_annual is None else abs(actual_annual - expected.annual_net)
    delta_payback, comparable = _payback_delta(actual_pb, expected.payback)

    annual_ok = delta_annual is not None and delta_annual <= tol_annual
    payback_ok = comparable and delta_payback <= tol_payback
    passed = annual_ok and payback_ok

    failing = [name for name, ok in (("annual net", annual_ok), ("payback", payback_ok)) if not ok]
    note = PASS_NOTE if passed else FAIL_NOTE.format(fields=" and ".join(failing))

    if passed:
        logger.debug("Sanity check passed: delta_annual=%s delta_payback=%s", delta_annual, delta_payback)
    else:
        logger.warning(
            "Sanity check failed: delta_annual=%s (tol %s) delta_payback=%s (tol %s)",
            delta_annual,
            tol_annual,
            delta_payback,
            tol_payback,
        )

    return SanityResult(
        passed=passed,
        deltas={"annual": delta_annual, "payback": delta_payback},
        expected={"annual": expected.annual_net, "payback": expected.payback},
        actual={"annual": actual_annual, "payback": actual_pb},
        tolerances={"annual": tol_annual, "payback": tol_payback},
        note=note,
    )
