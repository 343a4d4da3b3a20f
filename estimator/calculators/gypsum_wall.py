"""
Gypsum drywall partition calculator.

Input: wall length/height (ft), "single"/"double" board sub-option.
Output: GypsumMaterials with boards, rockwool, channels, studs, jointing.
"""

from .base import BaseTakeoffCalculator, GYPSUM_BOARD_AREA_SQFT, ROCKWOOL_BAG_COVER_SQFT
from ..schemas import GypsumMaterials

FACES = 2                 # boarded both sides
CHANNEL_LENGTH_FT = 4.5   # floor + ceiling channel stock
STUD_SPACING_FT = 2


class GypsumWallCalculator(BaseTakeoffCalculator):

    wall_type = "gypsum"

    def calculate(self, length: float, height: float, sub_option: str = "",
                  wastage_percent: float = 0.0) -> GypsumMaterials:
        area = self.area_sq_ft(length, height)
        layers = 2 if self.has_option(sub_option, "double") else 1

        gypsum_boards = self.round_up(area / GYPSUM_BOARD_AREA_SQFT * FACES * layers)
        rockwool_bags = self.round_up(area / ROCKWOOL_BAG_COVER_SQFT)

        channels = self.round_up(length / CHANNEL_LENGTH_FT * 2)
        studs = self.round_up((length / STUD_SPACING_FT + 1) * 2)

        # One roll of tape per board, one bucket of compound per two boards
        joint_tape = gypsum_boards
        joint_compound = self.round_up(gypsum_boards / 2)

        return GypsumMaterials(
            area=area,
            gypsum_boards=gypsum_boards,
            rockwool_bags=rockwool_bags,
            channels=channels,
            studs=studs,
            joint_tape=joint_tape,
            joint_compound=joint_compound,
        )
