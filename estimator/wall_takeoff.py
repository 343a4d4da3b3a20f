"""
WallTakeoffCalculator: front door to the per-wall-type calculators.

An incomplete wall (no type, length or height yet) is a normal state while the
user is still filling in the form, so it yields an empty result, not an error.
"""

import logging
from typing import Optional

from .calculators.registry import get_calculator, has_calculator
from .coerce import to_number
from .schemas import ComputedMaterials, WallSpec

logger = logging.getLogger(__name__)


class WallTakeoffCalculator:

    def compute_materials(self, wall_type, length, height, sub_option=None,
                          wastage_percent=0.0) -> Optional[ComputedMaterials]:
        """Typed takeoff. None when the wall is not fully specified or the type is unknown."""
        length = to_number(length)
        height = to_number(height)
        if not wall_type or not length or not height:
            return None

        if not has_calculator(wall_type):
            logger.warning("Wall takeoff skipped: unknown wall type %r", wall_type)
            return None

        materials = get_calculator(wall_type).calculate(
            length, height, sub_option or "", to_number(wastage_percent),
        )
        logger.debug("Takeoff %s %.2f x %.2f ft (%s): %s",
                     wall_type, length, height, sub_option, materials)
        return materials

    def compute(self, wall_type, length, height, sub_option=None,
                wastage_percent=0.0) -> dict:
        """Takeoff as a camelCase dict: {} when the wall is incomplete."""
        materials = self.compute_materials(wall_type, length, height, sub_option, wastage_percent)
        if materials is None:
            return {}
        return materials.model_dump(by_alias=True)

    def compute_wall(self, spec: WallSpec) -> dict:
        return self.compute(spec.wall_type, spec.length, spec.height,
                            spec.sub_option, spec.wastage_percent)


def compute(wall_type, length, height, sub_option=None, wastage_percent=0.0) -> dict:
    """Module-level shortcut for WallTakeoffCalculator().compute(...)."""
    return WallTakeoffCalculator().compute(wall_type, length, height, sub_option, wastage_percent)
