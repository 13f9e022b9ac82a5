"""Products: single-name CDS contract and trade."""

from cds_pricing.products.cds import (
    CDSContract,
    CDSTrade,
    ProtectionDirection,
    Sector,
)

__all__ = ["CDSContract", "CDSTrade", "ProtectionDirection", "Sector"]
