"""
Plywood partition calculator.

Input: wall length/height (ft).
Output: PlywoodMaterials with sheets, aluminium channels, laminate, rockwool.
"""

from .base import BaseTakeoffCalculator, PLYWOOD_SHEET_AREA_SQFT, ROCKWOOL_BAG_COVER_SQFT
from ..schemas import PlywoodMaterials

FACES = 2
CHANNEL_FT_PER_WALL_FT = 1.2


class PlywoodWallCalculator(BaseTakeoffCalculator):

    wall_type = "plywood"

    def calculate(self, length: float, height: float, sub_option: str = "",
                  wastage_percent: float = 0.0) -> PlywoodMaterials:
        area = self.area_sq_ft(length, height)

        plywood_sheets = self.round_up(area / PLYWOOD_SHEET_AREA_SQFT * FACES)
        aluminium_channels = self.round_up(length * CHANNEL_FT_PER_WALL_FT)

        return PlywoodMaterials(
            area=area,
            plywood_sheets=plywood_sheets,
            aluminium_channels=aluminium_channels,
            laminate_sheets=plywood_sheets,  # laminate faces every sheet
            rockwool_bags=self.round_up(area / ROCKWOOL_BAG_COVER_SQFT),
        )
