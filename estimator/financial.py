"""
Tax and round-off derivation for any BOQ subtotal.

subtotal + SGST + CGST gives the raw total; the grand total is that rounded to
the nearest whole currency unit, and the signed difference is carried as its
own round-off ledger line so the printed figures always add up.
"""

import logging
import math
from typing import Iterable, Optional

from .config import settings
from .coerce import to_number
from .schemas import TaxSummary

logger = logging.getLogger(__name__)


class FinancialRounding:

    def __init__(self, sgst_rate: Optional[float] = None, cgst_rate: Optional[float] = None):
        self.sgst_rate = settings.SGST_RATE if sgst_rate is None else sgst_rate
        self.cgst_rate = settings.CGST_RATE if cgst_rate is None else cgst_rate

    def finalize(self, subtotal) -> TaxSummary:
        """
        Returns sgst, cgst, round_off and grand_total for a subtotal.
        subtotal + sgst + cgst + round_off == grand_total holds exactly.
        """
        subtotal = to_number(subtotal)
        sgst = subtotal * self.sgst_rate
        cgst = subtotal * self.cgst_rate
        raw_total = subtotal + sgst + cgst

        grand_total = self._round_half_up(raw_total)
        round_off = grand_total - raw_total

        logger.debug("Finalized %.2f: raw %.4f -> %.0f (round off %.4f)",
                     subtotal, raw_total, grand_total, round_off)
        return TaxSummary(
            subtotal=subtotal,
            sgst=sgst,
            cgst=cgst,
            raw_total=raw_total,
            round_off=round_off,
            grand_total=grand_total,
        )

    def finalize_many(self, amounts: Iterable) -> TaxSummary:
        """Finalize the sum of several line/item totals (e.g. a whole BOQ)."""
        return self.finalize(sum(to_number(a) for a in amounts))

    def _round_half_up(self, value: float) -> float:
        """Nearest whole unit, .5 goes up."""
        whole = math.floor(value)
        if value - whole >= 0.5:
            whole += 1
        return float(whole)


def finalize(subtotal) -> TaxSummary:
    """Module-level shortcut using the configured tax rates."""
    return FinancialRounding().finalize(subtotal)
