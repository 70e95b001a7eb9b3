"""Pydantic model for the battery ROI calculation inputs."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONTHS_PER_YEAR = 12


class ROIInputs(BaseModel):
    """Technical and tariff parameters for one battery ROI evaluation.

    Every monetary and fractional field is a ``Decimal``. Instances are
    frozen: an evaluation never mutates its inputs.
    """

    model_config = ConfigDict(frozen=True)

    capex_cogs: Decimal = Field(ge=0, description="System cost before support (SEK)")
    price_ex_vat: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Quoted price excluding VAT, not used by the engine",
    )
    grant_pct: Decimal = Field(ge=0, le=1, description="Support share (0-1)")
    capacity_kwh: Decimal = Field(gt=0, description="Battery capacity (kWh)")
    inverter_kw: Decimal = Field(gt=0, description="Inverter power (kW)")
    dod: Decimal = Field(ge=0, le=1, description="Depth of discharge (0-1)")
    efficiency: Decimal = Field(ge=0, le=1, description="Round-trip efficiency (0-1)")
    pv_cycles_per_year: Decimal = Field(ge=0)
    arbitrage_cycles_per_year: Decimal = Field(ge=0)
    annual_pv_kwh: Decimal = Field(ge=0, description="Annual PV export capability (kWh)")
    purchase_price_sek_per_kwh: Decimal = Field(ge=0)
    demand_price_sek_per_kw_month: Decimal = Field(ge=0)
    monthly_peaks_kw: tuple[Decimal, ...] = Field(
        description="Peak demand per calendar month (kW), January first",
    )
    spread_sek_per_kwh: Decimal = Field(ge=0, description="Arbitrage spread (SEK/kWh)")
    o_and_m: Decimal = Field(ge=0, description="Annual operations and maintenance (SEK)")
    wacc: Decimal = Field(gt=-1, description="Discount rate for NPV")
    degradation: Decimal = Field(ge=0, lt=1, description="Annual benefit degradation")
    years: int = Field(ge=1, description="Analysis horizon in years")

    @field_validator("monthly_peaks_kw")
    @classmethod
    def twelve_non_negative_peaks(cls, v: tuple[Decimal, ...]) -> tuple[Decimal, ...]:
        if len(v) != MONTHS_PER_YEAR:
            raise ValueError(
                f"monthly_peaks_kw must hold {MONTHS_PER_YEAR} values, got {len(v)}"
            )
        for i, peak in enumerate(v):
            if peak < 0:
                raise ValueError(f"monthly_peaks_kw[{i}] cannot be negative, got {peak}")
        return v

    def with_changes(self, **changes) -> ROIInputs:
        """Return a validated copy with some fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return ROIInputs.model_validate(data)
