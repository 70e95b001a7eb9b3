"""Immutable result structures for the battery ROI engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from battery_roi.models.enums import IRRStatus, PaybackStatus


@dataclass(frozen=True)
class ROIDetails:
    """Breakdown of the annual benefit and the investment."""

    pv_savings: Decimal
    demand_savings: Decimal
    arbitrage_savings: Decimal
    o_and_m: Decimal
    net_investment: Decimal


@dataclass(frozen=True)
class SavingsResult:
    """Output of the savings and investment step."""

    usable_kwh: Decimal
    annual_net: Decimal
    payback: Optional[Decimal]
    details: ROIDetails

    @property
    def payback_status(self) -> PaybackStatus:
        if self.payback is None:
            return PaybackStatus.UNATTAINABLE
        return PaybackStatus.ATTAINABLE


@dataclass(frozen=True)
class CashFlowYear:
    """Single projected year. Only lives during projection and IRR search."""

    year: int
    degraded_net: Decimal
    discount_factor: Decimal
    discounted_value: Decimal


@dataclass(frozen=True)
class IRRResult:
    rate: Optional[Decimal]
    status: IRRStatus
    iterations: int


@dataclass(frozen=True)
class ROIOutputs:
    """Top-level result of one battery ROI calculation.

    ``payback`` is None when the investment never recoups (annual net <= 0)
    and ``irr`` is None when no rate could be determined; check
    ``payback_attainable`` / ``irr_determinate`` before doing arithmetic.
    """

    annual_net_sek: Decimal
    payback: Optional[Decimal]
    npv: Decimal
    irr: Optional[Decimal]
    details: ROIDetails
    irr_status: IRRStatus

    @property
    def payback_attainable(self) -> bool:
        return self.payback is not None

    @property
    def irr_determinate(self) -> bool:
        return self.irr is not None

    @property
    def payback_status(self) -> PaybackStatus:
        if self.payback is None:
            return PaybackStatus.UNATTAINABLE
        return PaybackStatus.ATTAINABLE


@dataclass(frozen=True)
class SanityResult:
    """Verdict of a sanity check against externally reported figures.

    Deltas are absolute differences. A delta is None when the two sides cannot
    be compared: a missing actual annual net, or a payback that is
    unattainable on exactly one side.
    """

    passed: bool
    deltas: dict[str, Optional[Decimal]]
    expected: dict[str, Optional[Decimal]]
    actual: dict[str, Optional[Decimal]]
    tolerances: dict[str, Decimal] = field(default_factory=dict)
    note: str = ""
