"""
Calculator registry: maps wall_type strings to takeoff calculator classes.
"""

from .civil_wall import CivilWallCalculator
from .gypsum_wall import GypsumWallCalculator
from .plywood_wall import PlywoodWallCalculator
from .glass_partition import GypsumGlassCalculator, PlywoodGlassCalculator
from .base import BaseTakeoffCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "civil": CivilWallCalculator,
    "gypsum": GypsumWallCalculator,
    "plywood": PlywoodWallCalculator,
    "gypsum-glass": GypsumGlassCalculator,
    "plywood-glass": PlywoodGlassCalculator,
}


def get_calculator(wall_type: str) -> BaseTakeoffCalculator:
    """Returns an instance of the calculator for a wall type, or raises ValueError."""
    if wall_type not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for wall type: {wall_type}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[wall_type]()


def has_calculator(wall_type: str) -> bool:
    """Check if a calculator exists for a wall type."""
    return wall_type in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered wall types."""
    return list(CALCULATOR_REGISTRY.keys())
