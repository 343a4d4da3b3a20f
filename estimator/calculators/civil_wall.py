"""
Civil (brick masonry) wall calculator.

Input: wall length/height (ft), "9 inch" or "4.5 inch" sub-option, brick wastage %.
Output: CivilMaterials with bricks, cement bags, sand (cu ft).
"""

from .base import BaseTakeoffCalculator, BRICK_FACE_AREA_FT2, BAG_VOLUME_FT3
from ..schemas import CivilMaterials

NINE_INCH = "9 inch"
NINE_INCH_THICKNESS_FT = 0.75
HALF_BRICK_THICKNESS_FT = 0.375

# Mortar is 1:4 cement:sand
MORTAR_SAND_RATIO = 4


class CivilWallCalculator(BaseTakeoffCalculator):

    wall_type = "civil"

    def calculate(self, length: float, height: float, sub_option: str = "",
                  wastage_percent: float = 0.0) -> CivilMaterials:
        area = self.area_sq_ft(length, height)
        wastage_factor = self.wastage_factor(wastage_percent)

        # 9" wall is a double layer of bricks; anything else is a half-brick wall
        is_nine_inch = sub_option == NINE_INCH
        thickness = NINE_INCH_THICKNESS_FT if is_nine_inch else HALF_BRICK_THICKNESS_FT
        volume = area * thickness

        base_bricks = area / BRICK_FACE_AREA_FT2
        layers = 2 if is_nine_inch else 1
        bricks = self.round_up(base_bricks * layers * wastage_factor)

        cement_bags = self.round_up(volume / BAG_VOLUME_FT3 * wastage_factor)
        sand_cubic_ft = self.round_up(volume * MORTAR_SAND_RATIO * wastage_factor)

        return CivilMaterials(
            area=area,
            bricks=bricks,
            cement_bags=cement_bags,
            sand_cubic_ft=sand_cubic_ft,
        )
