"""Unit tests for the savings and investment formulas."""

from decimal import Decimal

import pytest

from battery_roi.engine.savings import (
    calc_arbitrage_savings,
    calc_demand_savings,
    calc_net_investment,
    calc_payback,
    calc_pv_savings,
    calculate_savings,
    usable_energy,
)
from tests.conftest import make_inputs


class TestUsableEnergy:
    def test_basic_calculation(self):
        # 261 kWh * 0.9 * 0.92 = 216.108 kWh
        assert usable_energy(Decimal("261"), Decimal("0.9"), Decimal("0.92")) == Decimal("216.108")

    def test_zero_dod(self):
        assert usable_energy(Decimal("261"), Decimal("0"), Decimal("0.92")) == 0


class TestPVSavings:
    def test_capped_at_annual_pv(self):
        # 216.108 * 220 = 47,543.76 kWh > 38,726 kWh export cap
        result = calc_pv_savings(
            Decimal("216.108"), Decimal("220"), Decimal("38726"), Decimal("1.56")
        )
        assert result == Decimal("60412.56")

    def test_below_cap_uses_battery_throughput(self):
        # 100 kWh * 50 cycles = 5,000 kWh < 38,726
        result = calc_pv_savings(
            Decimal("100"), Decimal("50"), Decimal("38726"), Decimal("2")
        )
        assert result == Decimal("10000")

    def test_no_pv_production(self):
        result = calc_pv_savings(Decimal("216.108"), Decimal("220"), Decimal("0"), Decimal("1.56"))
        assert result == 0


class TestDemandSavings:
    def test_peaks_at_cap(self):
        # 12 * 75 kW * 114.8 SEK = 103,320
        result = calc_demand_savings([Decimal("75")] * 12, Decimal("125"), Decimal("114.8"))
        assert result == Decimal("103320")

    def test_peaks_above_cap_only_partially_shaved(self):
        result = calc_demand_savings([Decimal("400")] * 12, Decimal("125"), Decimal("114.8"))
        assert result == Decimal("103320")

    def test_peaks_below_cap(self):
        peaks = [Decimal("10")] * 6 + [Decimal("20")] * 6
        # (6 * 10 + 6 * 20) * 100 = 18,000
        result = calc_demand_savings(peaks, Decimal("125"), Decimal("100"))
        assert result == Decimal("18000")

    def test_custom_shaving_factor(self):
        # cap = 125 * 0.5 = 62.5 kW
        result = calc_demand_savings(
            [Decimal("75")] * 12, Decimal("125"), Decimal("114.8"), Decimal("0.5")
        )
        assert result == Decimal("86100")

    @pytest.mark.parametrize("peak", ["0", "74.9", "75", "1000", "1000000"])
    def test_never_exceeds_ceiling(self, peak):
        inverter_kw = Decimal("125")
        price = Decimal("114.8")
        ceiling = 12 * Decimal("0.6") * inverter_kw * price
        result = calc_demand_savings([Decimal(peak)] * 12, inverter_kw, price)
        assert result <= ceiling


class TestArbitrageSavings:
    def test_basic_calculation(self):
        # 216.108 * 80 * 0.30 = 5,186.592
        result = calc_arbitrage_savings(Decimal("216.108"), Decimal("80"), Decimal("0.30"))
        assert result == Decimal("5186.592")

    def test_zero_spread(self):
        assert calc_arbitrage_savings(Decimal("216.108"), Decimal("80"), Decimal("0")) == 0


class TestNetInvestmentAndPayback:
    def test_net_investment_after_grant(self):
        assert calc_net_investment(Decimal("1264000"), Decimal("0.65")) == Decimal("442400")

    def test_full_grant(self):
        assert calc_net_investment(Decimal("1264000"), Decimal("1")) == 0

    def test_payback(self):
        assert calc_payback(Decimal("1000"), Decimal("250")) == Decimal("4")

    def test_payback_unattainable_when_net_zero(self):
        assert calc_payback(Decimal("1000"), Decimal("0")) is None

    def test_payback_unattainable_when_net_negative(self):
        assert calc_payback(Decimal("1000"), Decimal("-1")) is None

    def test_zero_investment_pays_back_immediately(self):
        assert calc_payback(Decimal("0"), Decimal("100")) == 0

    def test_full_grant_payback_is_plain_zero(self):
        net_investment = calc_net_investment(Decimal("1264000"), Decimal("1.00"))
        payback = calc_payback(net_investment, Decimal("163699.152"))
        assert payback == 0
        assert str(payback) == "0"


class TestCalculateSavings:
    def test_components_sum_to_annual_net(self, reference_inputs):
        result = calculate_savings(reference_inputs)
        d = result.details
        assert d.pv_savings + d.demand_savings + d.arbitrage_savings - d.o_and_m == result.annual_net

    def test_o_and_m_passed_through(self, reference_inputs):
        result = calculate_savings(reference_inputs)
        assert result.details.o_and_m == Decimal("5220")

    def test_usable_energy_reported(self, reference_inputs):
        assert calculate_savings(reference_inputs).usable_kwh == Decimal("216.108")

    def test_negative_net_has_no_payback(self, loss_making_inputs):
        result = calculate_savings(loss_making_inputs)
        assert result.annual_net < 0
        assert result.payback is None

    def test_larger_grant_lowers_investment_and_payback(self):
        low = calculate_savings(make_inputs(grant_pct=Decimal("0.50")))
        high = calculate_savings(make_inputs(grant_pct=Decimal("0.65")))
        assert high.details.net_investment < low.details.net_investment
        assert high.payback <= low.payback
