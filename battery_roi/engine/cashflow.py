"""Multi-year projection of degraded, discounted cash flows."""

from __future__ import annotations

from decimal import Decimal

from battery_roi.engine.result import CashFlowYear

_ONE = Decimal("1")


def degradation_factor(degradation: Decimal, year: int) -> Decimal:
    """(1 - degradation)^(year - 1); year 1 carries the full benefit."""
    return (_ONE - degradation) ** (year - 1)


def degraded_benefits(annual_net: Decimal, degradation: Decimal, years: int) -> list[Decimal]:
    """Undiscounted benefit for each year 1..years."""
    return [annual_net * degradation_factor(degradation, year) for year in range(1, years + 1)]


def project_cash_flows(
    annual_net: Decimal,
    degradation: Decimal,
    wacc: Decimal,
    years: int,
) -> list[CashFlowYear]:
    """Project the benefit stream across the horizon, discounted at ``wacc``."""
    projections: list[CashFlowYear] = []
    for year, degraded_net in enumerate(degraded_benefits(annual_net, degradation, years), start=1):
        discount_factor = (_ONE + wacc) ** -year
        projections.append(
            CashFlowYear(
                year=year,
                degraded_net=degraded_net,
                discount_factor=discount_factor,
                discounted_value=degraded_net * discount_factor,
            )
        )
    return projections


def net_present_value(projections: list[CashFlowYear], net_investment: Decimal) -> Decimal:
    """NPV = sum of discounted yearly values - net investment."""
    total = sum((p.discounted_value for p in projections), Decimal("0"))
    return total - net_investment
