"""Core battery ROI calculation engine.

Takes validated ROIInputs -> produces ROIOutputs with savings breakdown,
simple payback, NPV and IRR.
"""

from __future__ import annotations

import logging
from decimal import localcontext
from typing import Optional

from battery_roi.config.settings import Settings, get_settings
from battery_roi.engine.cashflow import net_present_value, project_cash_flows
from battery_roi.engine.irr import solve_irr
from battery_roi.engine.result import CashFlowYear, ROIOutputs, SavingsResult
from battery_roi.engine.savings import calculate_savings
from battery_roi.models.inputs import ROIInputs

logger = logging.getLogger(__name__)


class ROICalculationEngine:
    """Stateless engine that runs battery ROI calculations."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def calculate(self, inputs: ROIInputs) -> ROIOutputs:
        """Run savings, cash-flow projection and IRR search for one input set."""
        with localcontext() as ctx:
            ctx.prec = self.settings.decimal_precision
            savings = self.savings(inputs)
            projections = project_cash_flows(
                savings.annual_net, inputs.degradation, inputs.wacc, inputs.years
            )
            npv = net_present_value(projections, savings.details.net_investment)
            irr = solve_irr(
                annual_net=savings.annual_net,
                degradation=inputs.degradation,
                net_investment=savings.details.net_investment,
                years=inputs.years,
                initial_guess=self.settings.irr_initial_guess,
                tolerance=self.settings.irr_tolerance,
                max_iterations=self.settings.irr_max_iterations,
                lower_bound=self.settings.irr_lower_bound,
                upper_bound=self.settings.irr_upper_bound,
            )

        logger.debug(
            "ROI calculated: annual_net=%s payback=%s npv=%s irr=%s (%s after %d iterations)",
            savings.annual_net,
            savings.payback,
            npv,
            irr.rate,
            irr.status.value,
            irr.iterations,
        )

        return ROIOutputs(
            annual_net_sek=savings.annual_net,
            payback=savings.payback,
            npv=npv,
            irr=irr.rate,
            details=savings.details,
            irr_status=irr.status,
        )

    def savings(self, inputs: ROIInputs) -> SavingsResult:
        """Savings and investment step only (no projection, no IRR)."""
        with localcontext() as ctx:
            ctx.prec = self.settings.decimal_precision
            return calculate_savings(inputs, self.settings.demand_shaving_factor)

    def project(self, inputs: ROIInputs) -> list[CashFlowYear]:
        """Year-by-year degraded, discounted cash flows for inspection."""
        with localcontext() as ctx:
            ctx.prec = self.settings.decimal_precision
            savings = calculate_savings(inputs, self.settings.demand_shaving_factor)
            return project_cash_flows(
                savings.annual_net, inputs.degradation, inputs.wacc, inputs.years
            )


def calculate(inputs: ROIInputs, settings: Optional[Settings] = None) -> ROIOutputs:
    """Calculate battery ROI metrics for ``inputs``."""
    return ROICalculationEngine(settings).calculate(inputs)
