"""Internal rate of return via Newton-Raphson on the NPV equation."""

from __future__ import annotations

import logging
from decimal import Decimal, DecimalException

from battery_roi.engine.cashflow import degraded_benefits
from battery_roi.engine.result import IRRResult
from battery_roi.models.enums import IRRStatus

logger = logging.getLogger(__name__)

_ONE = Decimal("1")
_ZERO = Decimal("0")


def npv_at_rate(benefits: list[Decimal], net_investment: Decimal, rate: Decimal) -> Decimal:
    """NPV(r) = sum(benefit_y / (1 + r)^y) - net_investment"""
    npv = -net_investment
    growth = _ONE + rate
    for year, benefit in enumerate(benefits, start=1):
        npv += benefit / growth**year
    return npv


def _npv_and_derivative(
    benefits: list[Decimal],
    net_investment: Decimal,
    rate: Decimal,
) -> tuple[Decimal, Decimal]:
    """Evaluate NPV(r) and dNPV/dr = sum(-y * benefit_y / (1 + r)^(y + 1))."""
    npv = -net_investment
    derivative = _ZERO
    growth = _ONE + rate
    for year, benefit in enumerate(benefits, start=1):
        discount = growth**year
        npv += benefit / discount
        derivative -= year * benefit / (discount * growth)
    return npv, derivative


def solve_irr(
    annual_net: Decimal,
    degradation: Decimal,
    net_investment: Decimal,
    years: int,
    initial_guess: Decimal = Decimal("0.10"),
    tolerance: Decimal = Decimal("1e-6"),
    max_iterations: int = 50,
    lower_bound: Decimal = Decimal("-1"),
    upper_bound: Decimal = Decimal("10"),
) -> IRRResult:
    """Search for the rate at which the degraded benefit stream repays the investment.

    Returns an ``IRRResult`` whose ``rate`` is None when the search does not
    converge within ``max_iterations``, hits a zero derivative or a decimal
    arithmetic fault, or steps or converges outside the open band
    (``lower_bound``, ``upper_bound``).
    """
    benefits = degraded_benefits(annual_net, degradation, years)
    guess = initial_guess

    for iteration in range(1, max_iterations + 1):
        try:
            npv, derivative = _npv_and_derivative(benefits, net_investment, guess)
            if derivative == 0:
                logger.debug("IRR search hit a zero derivative at r=%s", guess)
                return IRRResult(rate=None, status=IRRStatus.ZERO_DERIVATIVE, iterations=iteration)
            new_guess = guess - npv / derivative
        except DecimalException as e:
            logger.debug("IRR search aborted at r=%s: %r", guess, e)
            return IRRResult(rate=None, status=IRRStatus.ARITHMETIC_ERROR, iterations=iteration)

        if abs(new_guess - guess) < tolerance:
            if lower_bound < new_guess < upper_bound:
                return IRRResult(rate=new_guess, status=IRRStatus.CONVERGED, iterations=iteration)
            logger.debug("IRR converged outside plausible band: %s", new_guess)
            return IRRResult(rate=None, status=IRRStatus.OUT_OF_RANGE, iterations=iteration)
        if not lower_bound < new_guess < upper_bound:
            logger.debug("IRR search left the plausible band at r=%s", new_guess)
            return IRRResult(rate=None, status=IRRStatus.OUT_OF_RANGE, iterations=iteration)
        guess = new_guess

    logger.debug("IRR search did not converge after %d iterations", max_iterations)
    return IRRResult(rate=None, status=IRRStatus.NOT_CONVERGED, iterations=max_iterations)
