"""Tests for CDSPricer and the trade-level pricing entry points."""

import math
from datetime import date

import pytest

from cds_pricing.calendar import WeekendCalendar
from cds_pricing.curves import HazardRateCurve, ZeroRateCurve
from cds_pricing.errors import ContractValidationError
from cds_pricing.market import Market
from cds_pricing.pricers import CDSPricer, ContingentLegValuer, PremiumLegValuer
from cds_pricing.pricing import price, price_many, value
from cds_pricing.products.cds import CDSTrade, ProtectionDirection
from cds_pricing.schedule import build_accrual_schedule


class _RecordingCurve:
    """Flat curve that remembers every time it was sampled."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls: list[float] = []

    def sample(self, t: float) -> float:
        self.calls.append(t)
        return math.exp(-0.03 * t)

    def bumped(self, bump: float) -> "_RecordingCurve":
        return self


def test_concrete_scenario(
    make_contract, act360_config, quarterly_schedule, flat_discount, flat_survival
) -> None:
    """10M, 100bp, 2% rates, 5% hazard, R=40%, K=12: PV = contingent - premium."""
    contract = make_contract()
    pricer = CDSPricer(act360_config)
    assert pricer.horizon(contract) == (0.0, 5.0)

    premium = PremiumLegValuer().value(
        quarterly_schedule, 10_000_000, 0.01, flat_discount, flat_survival, include_accrued=True
    )
    contingent = ContingentLegValuer().value(
        10_000_000, 0.4, flat_discount, flat_survival, 0.0, 5.0, 12
    )
    valuation = pricer.legs(contract, quarterly_schedule, flat_discount, flat_survival)

    assert valuation.premium_pv == premium
    assert valuation.contingent == contingent
    assert valuation.pv == contingent - premium
    assert pricer.price(contract, quarterly_schedule, flat_discount, flat_survival) == valuation.pv
    # 5% hazard at 60% LGD is worth ~300bp running; 100bp premium leaves buyer in the money.
    assert valuation.pv > 0


def test_buy_sell_antisymmetry(make_contract, quarterly_schedule, flat_discount, flat_survival) -> None:
    pricer = CDSPricer()
    buy = pricer.price(
        make_contract(direction=ProtectionDirection.BUY_PROTECTION),
        quarterly_schedule,
        flat_discount,
        flat_survival,
    )
    sell = pricer.price(
        make_contract(direction=ProtectionDirection.SELL_PROTECTION),
        quarterly_schedule,
        flat_discount,
        flat_survival,
    )
    assert buy == -sell


def test_price_linear_in_notional(make_contract, quarterly_schedule, flat_discount, flat_survival) -> None:
    pricer = CDSPricer()
    base = pricer.price(make_contract(notional=1_000_000), quarterly_schedule, flat_discount, flat_survival)
    scaled = pricer.price(make_contract(notional=7_000_000), quarterly_schedule, flat_discount, flat_survival)
    assert math.isclose(scaled, 7.0 * base, rel_tol=1e-12)


def test_par_spread_zeroes_pv(make_contract, quarterly_schedule, flat_discount, flat_survival) -> None:
    """Repricing at the par spread gives PV ~ 0; ~LGD * hazard for flat curves."""
    pricer = CDSPricer()
    par_bps = pricer.par_spread_bps(make_contract(), quarterly_schedule, flat_discount, flat_survival)
    assert 250 < par_bps < 350
    at_par = make_contract(par_spread_bps=par_bps)
    pv = pricer.price(at_par, quarterly_schedule, flat_discount, flat_survival)
    assert abs(pv) < 1e-6 * at_par.notional


def test_matured_contract_rejected_before_sampling(make_contract, quarterly_schedule) -> None:
    """Invalid horizon fails fast: no curve is touched."""
    discount = _RecordingCurve("DISC")
    survival = _RecordingCurve("SURV")
    contract = make_contract(valuation_date=date(2030, 1, 1))
    with pytest.raises(ContractValidationError, match="maturity_date"):
        CDSPricer().price(contract, quarterly_schedule, discount, survival)
    assert discount.calls == []
    assert survival.calls == []


def test_too_few_steps_rejected_before_sampling(make_contract, quarterly_schedule) -> None:
    """A 2-month horizon with K=1 rounds to zero partitions."""
    discount = _RecordingCurve("DISC")
    survival = _RecordingCurve("SURV")
    contract = make_contract(
        valuation_date=date(2024, 1, 1),
        maturity_date=date(2024, 3, 1),
        integration_steps_per_year=1,
    )
    with pytest.raises(ContractValidationError, match="number_of_partitions"):
        CDSPricer().price(contract, quarterly_schedule, discount, survival)
    assert discount.calls == [] and survival.calls == []


def _market_and_trade(make_contract, direction=ProtectionDirection.BUY_PROTECTION, trade_id=None):
    disc = ZeroRateCurve(name="USD_DISC", pillars=[1.0, 5.0], zero_rates_cc=[0.03, 0.035])
    surv = HazardRateCurve(name="ACME_SURV", pillars=[1.0, 5.0], hazard_rates=[0.01, 0.02])
    market = Market(curves={"USD_DISC": disc, "ACME_SURV": surv})
    contract = make_contract(
        start_date=date(2024, 3, 19),
        valuation_date=date(2024, 3, 19),
        maturity_date=date(2029, 3, 20),
        direction=direction,
    )
    return market, CDSTrade(contract, "USD_DISC", "ACME_SURV", trade_id=trade_id)


def test_price_trade_from_market(make_contract) -> None:
    """price() builds the schedule from contract dates and looks curves up by name."""
    market, trade = _market_and_trade(make_contract)
    calendar = WeekendCalendar()
    schedule = build_accrual_schedule(trade.contract, calendar)
    expected = CDSPricer().price(
        trade.contract, schedule, market.curve("USD_DISC"), market.curve("ACME_SURV")
    )
    assert price(trade, market, calendar) == expected
    assert value(trade, market).pv == expected


def test_price_many_shares_one_snapshot(make_contract) -> None:
    market, buy = _market_and_trade(make_contract, trade_id="T1")
    _, sell = _market_and_trade(make_contract, ProtectionDirection.SELL_PROTECTION, trade_id="T2")
    results = price_many([buy, sell], market)
    assert set(results) == {"T1", "T2"}
    assert results["T1"] == -results["T2"]
    assert results["T1"] == price(buy, market)


def test_price_many_uses_position_without_ids(make_contract) -> None:
    market, trade = _market_and_trade(make_contract)
    assert set(price_many([trade, trade], market)) == {"0", "1"}


def test_price_many_rejects_duplicate_ids(make_contract) -> None:
    market, trade = _market_and_trade(make_contract, trade_id="T1")
    with pytest.raises(ValueError, match="duplicate"):
        price_many([trade, trade], market)


def test_missing_curve_named_in_error(make_contract) -> None:
    market, trade = _market_and_trade(make_contract)
    with pytest.raises(KeyError, match="ACME_SURV"):
        price(trade, Market(curves={"USD_DISC": market.curve("USD_DISC")}))


def test_market_with_curve_is_copy_on_write() -> None:
    base = ZeroRateCurve(name="C", pillars=[1.0], zero_rates_cc=[0.01])
    market = Market(curves={"C": base})
    updated = market.with_curve("C", base.bumped(0.01))
    assert market.curve("C") is base
    assert updated.curve("C") is not base
