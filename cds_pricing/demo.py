"""Demo: flat curves, a 5Y 10M CDS, leg breakdown, par spread and risks."""

import logging
from datetime import date

from cds_pricing.calendar import WeekendCalendar
from cds_pricing.config import PricingConfig
from cds_pricing.curves import HazardRateCurve, ZeroRateCurve
from cds_pricing.market import Market
from cds_pricing.pricers import CDSPricer
from cds_pricing.pricing import value
from cds_pricing.products.cds import CDSContract, CDSTrade, ProtectionDirection, Sector
from cds_pricing.risk import cs01_parallel, pv01_parallel
from cds_pricing.schedule import ScheduleGenerator, build_accrual_schedule


def main() -> None:
    config = PricingConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    disc_curve = ZeroRateCurve(name="USD_DISC", pillars=[1.0], zero_rates_cc=[0.02])
    surv_curve = HazardRateCurve(name="ACME_SURV", pillars=[1.0], hazard_rates=[0.05])
    market = Market(curves={"USD_DISC": disc_curve, "ACME_SURV": surv_curve})
    calendar = WeekendCalendar()

    contract = CDSContract(
        notional=10_000_000,
        par_spread_bps=100,
        direction=ProtectionDirection.BUY_PROTECTION,
        start_date=date(2024, 3, 19),
        maturity_date=date(2029, 3, 20),
        valuation_date=date(2024, 3, 19),
        recovery_rate=0.4,
        include_accrued_premium=True,
        adjust_maturity_date=True,
        integration_steps_per_year=12,
        reference_entity="ACME Corp",
        sector=Sector.INDUSTRIALS,
    )
    trade = CDSTrade(contract=contract, discount_curve="USD_DISC", survival_curve="ACME_SURV")

    dates = ScheduleGenerator(calendar).generate(contract)
    schedule = build_accrual_schedule(contract, calendar, config)
    valuation = value(trade, market, calendar, config)
    par_bps = CDSPricer(config).par_spread_bps(contract, schedule, disc_curve, surv_curve)
    cs01 = cs01_parallel(trade, market)
    pv01 = pv01_parallel(trade, market)

    print("=== CDS Pricing Demo ===\n")
    print(f"Reference entity: {contract.reference_entity} ({contract.sector.value})")
    print(f"Schedule: {dates.count} dates")
    for d in dates:
        print(f"   {d.isoformat()}")
    print()
    print("5Y CDS, 10M notional, 100bp spread, protection buyer")
    print(f"   Premium (coupons)  = {valuation.premium.principal:,.2f}")
    print(f"   Premium (accrued)  = {valuation.premium.accrued:,.2f}")
    print(f"   Contingent leg     = {valuation.contingent:,.2f}")
    print(f"   PV                 = {valuation.pv:,.2f}")
    print(f"   Par spread         = {par_bps:,.2f} bp")
    print(f"   CS01               = {cs01:,.2f}")
    print(f"   PV01               = {pv01:,.2f}\n")
    print("Done.")


if __name__ == "__main__":
    main()
