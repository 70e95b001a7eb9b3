"""Shared test fixtures for the battery ROI test suite."""

from decimal import Decimal

import pytest

from battery_roi.models.inputs import ROIInputs

REFERENCE_VALUES = dict(
    capex_cogs=Decimal("1264000"),
    grant_pct=Decimal("0.65"),
    capacity_kwh=Decimal("261"),
    inverter_kw=Decimal("125"),
    dod=Decimal("0.9"),
    efficiency=Decimal("0.92"),
    pv_cycles_per_year=Decimal("220"),
    arbitrage_cycles_per_year=Decimal("80"),
    annual_pv_kwh=Decimal("38726"),
    purchase_price_sek_per_kwh=Decimal("1.56"),
    demand_price_sek_per_kw_month=Decimal("114.8"),
    monthly_peaks_kw=[Decimal("75")] * 12,
    spread_sek_per_kwh=Decimal("0.30"),
    o_and_m=Decimal("5220"),
    wacc=Decimal("0.08"),
    degradation=Decimal("0.02"),
    years=12,
)


def make_inputs(**overrides) -> ROIInputs:
    """Reference inputs with selected fields replaced."""
    values = {**REFERENCE_VALUES, **overrides}
    return ROIInputs(**values)


@pytest.fixture
def reference_inputs() -> ROIInputs:
    """261 kWh / 125 kW installation with 65 % support, 12 year horizon."""
    return make_inputs()


@pytest.fixture
def break_even_inputs() -> ROIInputs:
    """No savings streams and no running cost: annual net is exactly zero."""
    return make_inputs(
        pv_cycles_per_year=Decimal("0"),
        arbitrage_cycles_per_year=Decimal("0"),
        demand_price_sek_per_kw_month=Decimal("0"),
        o_and_m=Decimal("0"),
    )


@pytest.fixture
def loss_making_inputs() -> ROIInputs:
    """O&M larger than every savings stream combined."""
    return make_inputs(o_and_m=Decimal("500000"))
