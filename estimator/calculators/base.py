"""
Abstract base class for all wall-type takeoff calculators.

Input: wall length/height in feet, a sub-option string, wastage percent
Output: one ComputedMaterials variant (see schemas.py)
"""

import math
from abc import ABC, abstractmethod

# Coverage constants
BRICK_FACE_AREA_FT2 = 0.08        # 1 brick face ~0.08 sq ft
BAG_VOLUME_FT3 = 1.25             # 1 bag cement = 1.25 cu ft
ROCKWOOL_BAG_COVER_SQFT = 70      # 1 rockwool bag covers 70 sq ft
GYPSUM_BOARD_AREA_SQFT = 24       # standard gypsum board
PLYWOOD_SHEET_AREA_SQFT = 32      # standard 8' x 4' plywood sheet


class BaseTakeoffCalculator(ABC):
    """All wall-type calculators inherit from this."""

    wall_type: str = ""

    @abstractmethod
    def calculate(self, length: float, height: float, sub_option: str = "",
                  wastage_percent: float = 0.0):
        """
        Takes validated, positive dimensions.
        Returns the ComputedMaterials variant for this wall type.
        """
        pass

    # --- Helper methods for all calculators ---

    def area_sq_ft(self, length_ft: float, height_ft: float) -> float:
        """Wall face area in sq ft."""
        return length_ft * height_ft

    def wastage_factor(self, wastage_percent: float) -> float:
        """5 -> 1.05."""
        return 1 + (wastage_percent / 100)

    def round_up(self, quantity: float) -> int:
        """Always round UP to the next whole unit: you can't buy half a board."""
        return math.ceil(quantity)

    def has_option(self, sub_option, keyword: str) -> bool:
        """Case-insensitive keyword test on the sub-option selector."""
        return keyword.lower() in str(sub_option or "").lower()
