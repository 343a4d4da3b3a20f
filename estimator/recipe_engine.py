"""
Recipe scaling engine.

A recipe is a ConfigBasis plus an ordered list of MaterialLines describing how
much of each material one basis quantity of installed product needs (e.g.
per 100 sq ft). The engine scales it to the project's target quantity.
Pure math: quantity × rate, no state, no I/O.

Input: ConfigBasis + MaterialLine[] + target required qty
Output: BoqResult (computed lines + totals)
"""

import logging
import math
from typing import Iterable, Optional

from .config import settings
from .coerce import to_number
from .schemas import (
    BillingBasis, BoqItemPayload, BoqResult, ComputedLine, ConfigBasis,
    MaterialLine, RoundOffPolicy, UnitType,
)

logger = logging.getLogger(__name__)

# Result fields (and their camelCase aliases) a stored line must not pre-seed
_COMPUTED_KEYS = {
    key
    for name, field in ComputedLine.model_fields.items()
    if name not in MaterialLine.model_fields
    for key in (name, field.alias)
}


def effective_wastage(line: MaterialLine, basis: ConfigBasis) -> float:
    """Wastage % for a line: its own override if set, else the recipe default."""
    if not line.apply_wastage:
        return 0.0
    if line.wastage_pct is not None:
        return line.wastage_pct
    return basis.wastage_pct_default


class RecipeScalingEngine:
    """
    Scales a per-basis material recipe to a target installed quantity.
    Deterministic: identical inputs always give identical output, so
    callers can re-run it on every read of a stored recipe.
    """

    def __init__(self, round_off_policy: Optional[str] = None,
                 purchase_increment: Optional[float] = None,
                 billing_basis: Optional[str] = None,
                 epsilon: Optional[float] = None):
        self.round_off_policy = RoundOffPolicy(round_off_policy or settings.ROUND_OFF_POLICY)
        self.billing_basis = BillingBasis(billing_basis or settings.BILLING_BASIS)
        increment = to_number(purchase_increment, settings.PURCHASE_INCREMENT)
        self.purchase_increment = increment if increment > 0 else 1.0
        self.epsilon = epsilon if epsilon else settings.EPSILON

    def scale(self, config_basis: ConfigBasis, material_lines: Iterable[MaterialLine],
              target_required_qty) -> BoqResult:
        """
        Expand the recipe to target_required_qty.

        A target <= 0 gives all-zero lines; an empty recipe gives zero totals.
        Neither is an error.
        """
        target = to_number(target_required_qty)
        base = self._safe_base(config_basis.base_required_qty)

        computed = [self._compute_line(line, config_basis, base, target)
                    for line in material_lines]

        total_supply = sum(c.supply_amount for c in computed)
        total_install = sum(c.install_amount for c in computed)
        grand_total = total_supply + total_install

        rate_per_unit = grand_total / target if target > 0 else 0.0
        # Sqmt rate = per-unit rate × 10.76, as the Excel BOQ sheets quote it
        rate_per_sqmt = None
        if config_basis.required_unit_type == UnitType.SQMT:
            rate_per_sqmt = rate_per_unit * settings.SQMT_PER_SQFT

        logger.debug("Scaled %d lines to %.4f %s: grand total %.2f",
                     len(computed), target, config_basis.required_unit_type.value, grand_total)

        return BoqResult(
            computed=computed,
            total_supply=total_supply,
            total_install=total_install,
            grand_total=grand_total,
            rate_per_unit=rate_per_unit,
            rate_per_sqmt=rate_per_sqmt,
        )

    def scale_payload(self, payload: BoqItemPayload) -> BoqResult:
        """Re-scale a stored BOQ item document. The document is the recipe, not the result."""
        return self.scale(payload.config_basis, payload.material_lines,
                          payload.target_required_qty)

    def round_off(self, quantity: float) -> float:
        """Purchasing round-off for a scaled quantity under the configured policy."""
        if self.round_off_policy == RoundOffPolicy.NONE:
            return quantity
        if self.round_off_policy == RoundOffPolicy.TWO_DECIMALS:
            return math.ceil(round(quantity * 100, 9)) / 100
        # Float noise (110.00000000000001) must not buy a whole extra unit
        increment = self.purchase_increment
        return math.ceil(round(quantity / increment, 9)) * increment

    def _safe_base(self, base_required_qty: float) -> float:
        """The recipe's basis quantity, never below epsilon."""
        if base_required_qty <= 0:
            logger.warning("Recipe base quantity %s clamped to %s", base_required_qty, self.epsilon)
        return max(self.epsilon, base_required_qty)

    def _compute_line(self, line: MaterialLine, basis: ConfigBasis,
                      base: float, target: float) -> ComputedLine:
        wastage_pct = effective_wastage(line, basis)

        wastage_qty = line.base_qty * wastage_pct / 100
        effective_qty = line.base_qty * (1 + wastage_pct / 100)
        per_unit_qty = effective_qty / base

        scaled_qty = per_unit_qty * target
        round_off_qty = self.round_off(scaled_qty)

        billed_qty = round_off_qty if self.billing_basis == BillingBasis.ROUND_OFF else scaled_qty
        supply_amount = billed_qty * line.supply_rate
        install_amount = billed_qty * line.install_rate

        return ComputedLine(
            **{k: v for k, v in line.model_dump().items() if k not in _COMPUTED_KEYS},
            wastage_pct_used=wastage_pct,
            wastage_qty=wastage_qty,
            effective_qty=effective_qty,
            per_unit_qty=per_unit_qty,
            scaled_qty=scaled_qty,
            round_off_qty=round_off_qty,
            supply_amount=supply_amount,
            install_amount=install_amount,
            line_total=supply_amount + install_amount,
        )


def scale(config_basis: ConfigBasis, material_lines: Iterable[MaterialLine],
          target_required_qty) -> BoqResult:
    """Module-level shortcut using the configured policies."""
    return RecipeScalingEngine().scale(config_basis, material_lines, target_required_qty)
