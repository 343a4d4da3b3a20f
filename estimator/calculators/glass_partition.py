"""
Glass partition calculators: a glazed band over a gypsum or plywood base.

Input: wall length/height (ft).
Output: GypsumGlassMaterials / PlywoodGlassMaterials.
"""

from .base import BaseTakeoffCalculator, GYPSUM_BOARD_AREA_SQFT, PLYWOOD_SHEET_AREA_SQFT
from ..schemas import GypsumGlassMaterials, PlywoodGlassMaterials

FACES = 2


class GlassPartitionCalculator(BaseTakeoffCalculator):
    """Shared glass + perimeter frame math. Subclasses set the split and the solid board."""

    GLASS_FRACTION = 0.5

    def glass_area(self, area: float) -> int:
        """Glazed area, both faces."""
        return self.round_up(area * self.GLASS_FRACTION * FACES)

    def frame_channels(self, length: float, height: float) -> int:
        """Aluminium frame around the glazing: running ft of perimeter."""
        return self.round_up((length + height) * 2)


class GypsumGlassCalculator(GlassPartitionCalculator):

    wall_type = "gypsum-glass"
    GLASS_FRACTION = 0.6  # 60% glass, 40% gypsum

    def calculate(self, length: float, height: float, sub_option: str = "",
                  wastage_percent: float = 0.0) -> GypsumGlassMaterials:
        area = self.area_sq_ft(length, height)
        gypsum_boards = self.round_up(
            area * (1 - self.GLASS_FRACTION) / GYPSUM_BOARD_AREA_SQFT * FACES
        )
        return GypsumGlassMaterials(
            area=area,
            gypsum_boards=gypsum_boards,
            glass_area=self.glass_area(area),
            aluminium_channels=self.frame_channels(length, height),
        )


class PlywoodGlassCalculator(GlassPartitionCalculator):

    wall_type = "plywood-glass"
    GLASS_FRACTION = 0.5  # 50% glass, 50% plywood

    def calculate(self, length: float, height: float, sub_option: str = "",
                  wastage_percent: float = 0.0) -> PlywoodGlassMaterials:
        area = self.area_sq_ft(length, height)
        plywood_sheets = self.round_up(
            area * self.GLASS_FRACTION / PLYWOOD_SHEET_AREA_SQFT * FACES
        )
        return PlywoodGlassMaterials(
            area=area,
            plywood_sheets=plywood_sheets,
            glass_area=self.glass_area(area),
            aluminium_channels=self.frame_channels(length, height),
        )
