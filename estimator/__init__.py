"""
BOQ quantity & cost estimation engine.

Three pure calculators:
- RecipeScalingEngine: scales a per-basis material recipe to a target quantity
- WallTakeoffCalculator: raw material counts from wall dimensions and type
- FinancialRounding: SGST + CGST and a whole-unit round-off for any subtotal
"""

from .recipe_engine import RecipeScalingEngine, effective_wastage
from .wall_takeoff import WallTakeoffCalculator
from .financial import FinancialRounding

__version__ = "1.0.0"
__all__ = [
    "RecipeScalingEngine",
    "WallTakeoffCalculator",
    "FinancialRounding",
    "effective_wastage",
]
