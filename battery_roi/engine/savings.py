"""Savings and investment step of the battery ROI engine.

Pure calculations with no side effects. Monetary values are in SEK.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from battery_roi.engine.result import ROIDetails, SavingsResult
from battery_roi.models.inputs import ROIInputs

DEFAULT_SHAVING_FACTOR = Decimal("0.6")

_ZERO = Decimal("0")
_ONE = Decimal("1")


def usable_energy(capacity_kwh: Decimal, dod: Decimal, efficiency: Decimal) -> Decimal:
    """Usable_kWh = capacity x depth_of_discharge x round_trip_efficiency"""
    return capacity_kwh * dod * efficiency


def calc_pv_savings(
    usable_kwh: Decimal,
    pv_cycles_per_year: Decimal,
    annual_pv_kwh: Decimal,
    purchase_price_sek_per_kwh: Decimal,
) -> Decimal:
    """PV_Savings = min(usable x pv_cycles, annual_pv_kwh) x purchase_price

    Battery throughput from PV is bounded by what the site can export.
    """
    pv_energy_per_year = usable_kwh * pv_cycles_per_year
    pv_energy_capped = min(pv_energy_per_year, annual_pv_kwh)
    return pv_energy_capped * purchase_price_sek_per_kwh


def calc_demand_savings(
    monthly_peaks_kw: Iterable[Decimal],
    inverter_kw: Decimal,
    demand_price_sek_per_kw_month: Decimal,
    shaving_factor: Decimal = DEFAULT_SHAVING_FACTOR,
) -> Decimal:
    """Demand_Savings = sum over months of min(peak, factor x inverter_kw) x demand_price"""
    cap_kw = inverter_kw * shaving_factor
    demand_savings = _ZERO
    for peak in monthly_peaks_kw:
        shaved_kw = min(peak, cap_kw)
        demand_savings += shaved_kw * demand_price_sek_per_kw_month
    return demand_savings


def calc_arbitrage_savings(
    usable_kwh: Decimal,
    arbitrage_cycles_per_year: Decimal,
    spread_sek_per_kwh: Decimal,
) -> Decimal:
    """Arbitrage_Savings = usable x arbitrage_cycles x spread"""
    return usable_kwh * arbitrage_cycles_per_year * spread_sek_per_kwh


def calc_net_investment(capex_cogs: Decimal, grant_pct: Decimal) -> Decimal:
    """Net_Investment = capex x (1 - grant_pct)"""
    return capex_cogs * (_ONE - grant_pct)


def calc_payback(net_investment: Decimal, annual_net: Decimal) -> Optional[Decimal]:
    """Simple payback in years, or None when the annual net never recoups."""
    if annual_net > 0:
        if net_investment == 0:
            return _ZERO
        return net_investment / annual_net
    return None


def calculate_savings(
    inputs: ROIInputs,
    shaving_factor: Decimal = DEFAULT_SHAVING_FACTOR,
) -> SavingsResult:
    """Derive usable energy, the three savings streams, annual net and payback."""
    usable = usable_energy(inputs.capacity_kwh, inputs.dod, inputs.efficiency)

    pv_savings = calc_pv_savings(
        usable,
        inputs.pv_cycles_per_year,
        inputs.annual_pv_kwh,
        inputs.purchase_price_sek_per_kwh,
    )
    demand_savings = calc_demand_savings(
        inputs.monthly_peaks_kw,
        inputs.inverter_kw,
        inputs.demand_price_sek_per_kw_month,
        shaving_factor,
    )
    arbitrage_savings = calc_arbitrage_savings(
        usable, inputs.arbitrage_cycles_per_year, inputs.spread_sek_per_kwh
    )

    annual_net = pv_savings + demand_savings + arbitrage_savings - inputs.o_and_m
    net_investment = calc_net_investment(inputs.capex_cogs, inputs.grant_pct)

    return SavingsResult(
        usable_kwh=usable,
        annual_net=annual_net,
        payback=calc_payback(net_investment, annual_net),
        details=ROIDetails(
            pv_savings=pv_savings,
            demand_savings=demand_savings,
            arbitrage_savings=arbitrage_savings,
            o_and_m=inputs.o_and_m,
            net_investment=net_investment,
        ),
    )
