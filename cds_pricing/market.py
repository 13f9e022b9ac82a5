"""
Market snapshot container.

`Market` is a *simple* in-memory snapshot of the curves needed to value CDS
trades, keyed by name (e.g. "USD_DISC", "ACME_SURV"). Many trades can be valued
against one snapshot: the snapshot is never mutated, and curves are frozen.
"""

from __future__ import annotations

from cds_pricing.interfaces import Curve


class Market:
    """
    Curve snapshot (name -> curve).
    Immutable-style: with_curve returns a new Market instance.
    """

    def __init__(self, curves: dict[str, Curve] | None = None) -> None:
        # Copy so the caller's dict and the snapshot never alias.
        self.curves: dict[str, Curve] = curves.copy() if curves else {}

    def curve(self, name: str) -> Curve:
        """Return curve by name. Raises KeyError naming the missing curve."""
        try:
            return self.curves[name]
        except KeyError:
            raise KeyError(f"curve {name!r} not in market (have {sorted(self.curves)})") from None

    def with_curve(self, name: str, curve: Curve) -> Market:
        """Return a new Market with the given curve updated/added."""
        new_curves = self.curves.copy()
        new_curves[name] = curve
        return Market(curves=new_curves)
