from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .coerce import to_number, to_optional_number


class UnitType(str, Enum):
    SQFT = "Sqft"
    SQMT = "Sqmt"
    LENGTH = "Length"
    LS = "LS"
    RFT = "RFT"
    NOS = "Nos"
    RUNNING_FT = "RunningFt"


class WallType(str, Enum):
    CIVIL = "civil"
    GYPSUM = "gypsum"
    PLYWOOD = "plywood"
    GYPSUM_GLASS = "gypsum-glass"
    PLYWOOD_GLASS = "plywood-glass"


class RoundOffPolicy(str, Enum):
    CEILING = "ceiling"            # next whole purchasable increment
    TWO_DECIMALS = "two_decimals"  # up to the next 0.01
    NONE = "none"                  # keep the scaled quantity


class BillingBasis(str, Enum):
    SCALED = "scaled"
    ROUND_OFF = "round_off"


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (matches the stored BOQ JSON)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# --- Recipe scaling ---

class ConfigBasis(CamelModel):
    required_unit_type: UnitType = UnitType.SQFT
    base_required_qty: float = 1.0
    wastage_pct_default: float = 0.0

    @field_validator("base_required_qty", "wastage_pct_default", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        return to_number(value)


class MaterialLine(CamelModel):
    id: Optional[Union[str, int]] = None
    name: Optional[str] = None
    unit: Optional[str] = None
    location: str = "Main Area"
    description: Optional[str] = None
    base_qty: float = 0.0
    wastage_pct: Optional[float] = None
    apply_wastage: bool = True
    supply_rate: float = 0.0
    install_rate: float = 0.0

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"  # shop_name, technicalspecification etc. ride along

    @field_validator("base_qty", "supply_rate", "install_rate", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        return to_number(value)

    @field_validator("wastage_pct", mode="before")
    @classmethod
    def _coerce_override(cls, value):
        return to_optional_number(value)


class ComputedLine(MaterialLine):
    wastage_pct_used: float = 0.0
    wastage_qty: float = 0.0
    effective_qty: float = 0.0
    per_unit_qty: float = 0.0
    scaled_qty: float = 0.0
    round_off_qty: float = 0.0
    supply_amount: float = 0.0
    install_amount: float = 0.0
    line_total: float = 0.0


class BoqResult(CamelModel):
    computed: List[ComputedLine] = []
    total_supply: float = 0.0
    total_install: float = 0.0
    grand_total: float = 0.0
    rate_per_unit: float = 0.0
    rate_per_sqmt: Optional[float] = None


class RecipeRequest(CamelModel):
    config_basis: ConfigBasis = Field(default_factory=ConfigBasis)
    material_lines: List[MaterialLine] = []
    target_required_qty: float = 0.0

    @field_validator("target_required_qty", mode="before")
    @classmethod
    def _coerce_target(cls, value):
        return to_number(value)


class BoqItemPayload(RecipeRequest):
    """The recipe document stored on a BOQ item: the result is never stored."""
    product_name: Optional[str] = None
    product_id: Optional[Union[str, int]] = None


# --- Wall takeoff ---

class WallSpec(CamelModel):
    wall_type: Optional[str] = None
    length: Optional[float] = None
    height: Optional[float] = None
    sub_option: Optional[str] = None
    wastage_percent: float = 0.0

    @field_validator("length", "height", mode="before")
    @classmethod
    def _coerce_dimension(cls, value):
        return to_optional_number(value)

    @field_validator("wastage_percent", mode="before")
    @classmethod
    def _coerce_wastage(cls, value):
        return to_number(value)


class CivilMaterials(CamelModel):
    wall_type: Literal["civil"] = "civil"
    area: float
    bricks: int
    cement_bags: int
    sand_cubic_ft: int


class GypsumMaterials(CamelModel):
    wall_type: Literal["gypsum"] = "gypsum"
    area: float
    gypsum_boards: int
    rockwool_bags: int
    channels: int
    studs: int
    joint_tape: int
    joint_compound: int


class PlywoodMaterials(CamelModel):
    wall_type: Literal["plywood"] = "plywood"
    area: float
    plywood_sheets: int
    aluminium_channels: int
    laminate_sheets: int
    rockwool_bags: int


class GypsumGlassMaterials(CamelModel):
    wall_type: Literal["gypsum-glass"] = "gypsum-glass"
    area: float
    gypsum_boards: int
    glass_area: int
    aluminium_channels: int


class PlywoodGlassMaterials(CamelModel):
    wall_type: Literal["plywood-glass"] = "plywood-glass"
    area: float
    plywood_sheets: int
    glass_area: int
    aluminium_channels: int


ComputedMaterials = Annotated[
    Union[CivilMaterials, GypsumMaterials, PlywoodMaterials,
          GypsumGlassMaterials, PlywoodGlassMaterials],
    Field(discriminator="wall_type"),
]


# --- Tax / round-off ---

class TaxSummary(CamelModel):
    subtotal: float
    sgst: float
    cgst: float
    raw_total: float
    round_off: float
    grand_total: float


class FinalizeRequest(CamelModel):
    subtotal: Optional[float] = None
    amounts: List[float] = []
