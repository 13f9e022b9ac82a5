"""Leg valuers and the CDS pricer that combines them."""

from cds_pricing.pricers.cds_pricer import CDSPricer, CDSValuation
from cds_pricing.pricers.contingent_leg import ContingentLegValuer, number_of_partitions
from cds_pricing.pricers.premium_leg import PremiumLegBreakdown, PremiumLegValuer

__all__ = [
    "CDSPricer",
    "CDSValuation",
    "ContingentLegValuer",
    "PremiumLegBreakdown",
    "PremiumLegValuer",
    "number_of_partitions",
]
