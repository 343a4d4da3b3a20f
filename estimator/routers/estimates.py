from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.registry import list_calculators
from ..financial import FinancialRounding
from ..recipe_engine import RecipeScalingEngine
from ..wall_takeoff import WallTakeoffCalculator

router = APIRouter(prefix="/estimates", tags=["estimates"])


@router.post("/recipe", response_model=schemas.BoqResult)
def scale_recipe(request: schemas.RecipeRequest):
    """Scale a recipe to the target quantity."""
    engine = RecipeScalingEngine()
    return engine.scale(request.config_basis, request.material_lines, request.target_required_qty)


@router.post("/boq-item")
def price_boq_item(payload: schemas.BoqItemPayload):
    """Re-scale a stored BOQ item document and finalize its grand total with tax."""
    result = RecipeScalingEngine().scale_payload(payload)
    tax = FinancialRounding().finalize(result.grand_total)
    return {
        "product_id": payload.product_id,
        "product_name": payload.product_name,
        "result": result.model_dump(by_alias=True),
        "tax": tax.model_dump(by_alias=True),
    }


@router.get("/wall-types")
def list_wall_types():
    return {"wall_types": list_calculators()}


@router.post("/wall")
def compute_wall(spec: schemas.WallSpec):
    """Wall takeoff. Returns {} while the wall is not fully specified."""
    return WallTakeoffCalculator().compute_wall(spec)


@router.post("/finalize", response_model=schemas.TaxSummary)
def finalize_totals(request: schemas.FinalizeRequest):
    """Tax + round-off for a subtotal, or for the sum of several amounts."""
    rounding = FinancialRounding()
    if request.subtotal is not None:
        return rounding.finalize(request.subtotal)
    if request.amounts:
        return rounding.finalize_many(request.amounts)
    raise HTTPException(status_code=400, detail="Provide a subtotal or a list of amounts")
