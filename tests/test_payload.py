"""
Stored BOQ item payload tests: current camelCase document + legacy table_data.
"""

import pytest

from estimator.payload import basis_from_table_data, lines_from_table_data, payload_from_table_data
from estimator.recipe_engine import RecipeScalingEngine
from estimator.schemas import BoqItemPayload, UnitType


def _stored_item():
    """BOQ item JSON exactly as the app persists it."""
    return {
        "product_name": "Gypsum false ceiling",
        "product_id": "p-101",
        "configBasis": {"requiredUnitType": "Sqft", "baseRequiredQty": 100, "wastagePctDefault": 5},
        "materialLines": [
            {"id": "m1", "name": "Gypsum board", "unit": "Nos", "baseQty": 4,
             "supplyRate": 450, "installRate": 120},
            {"id": "m2", "name": "GI section", "unit": "RFT", "baseQty": 60, "wastagePct": 10,
             "supplyRate": 38, "installRate": 12},
        ],
        "targetRequiredQty": 250,
    }


def test_payload_parses_stored_document():
    payload = BoqItemPayload.model_validate(_stored_item())
    assert payload.product_name == "Gypsum false ceiling"
    assert payload.product_id == "p-101"
    assert payload.config_basis.base_required_qty == 100
    assert payload.material_lines[1].wastage_pct == 10
    assert payload.material_lines[0].wastage_pct is None
    assert payload.target_required_qty == 250


def test_rescaling_stored_payload_follows_target_edits():
    """The stored doc is the recipe: editing the target re-scales consistently."""
    engine = RecipeScalingEngine()
    item = _stored_item()
    first = engine.scale_payload(BoqItemPayload.model_validate(item))
    item["targetRequiredQty"] = 500
    second = engine.scale_payload(BoqItemPayload.model_validate(item))
    assert second.computed[0].scaled_qty == pytest.approx(first.computed[0].scaled_qty * 2)
    assert second.grand_total == pytest.approx(first.grand_total * 2)


def test_basis_from_table_data_defaults():
    basis = basis_from_table_data({})
    assert basis.required_unit_type == UnitType.SQFT
    assert basis.base_required_qty == 1
    assert basis.wastage_pct_default == 0


def test_basis_from_table_data_unknown_unit_falls_back():
    basis = basis_from_table_data({"requiredUnitType": "Bags", "baseRequiredQty": 0})
    assert basis.required_unit_type == UnitType.SQFT
    assert basis.base_required_qty == 1  # 0 is never a usable basis


def test_lines_from_table_data_snake_case_fallbacks():
    lines = lines_from_table_data({"lines": [
        {"material_id": "m7", "material_name": "Primer", "qty": "2.5",
         "supply_rate": 180, "install_rate": 40, "apply_wastage": False,
         "shop_name": "Asian Paints Depot", "technicalspecification": "Interior primer"},
    ]})
    assert len(lines) == 1
    line = lines[0]
    assert line.id == "m7"
    assert line.name == "Primer"
    assert line.base_qty == 2.5
    assert line.supply_rate == 180
    assert line.install_rate == 40
    assert line.apply_wastage is False
    assert line.location == "Main Area"
    assert line.description == "Interior primer"
    assert line.model_dump()["shop_name"] == "Asian Paints Depot"


def test_lines_from_legacy_step11_items():
    lines = lines_from_table_data({"step11_items": [
        {"id": 3, "title": "Ceiling tile", "unit": "Nos", "qty": 12,
         "supply_rate": 55, "install_rate": 10, "location": "Lobby"},
    ]})
    assert lines[0].name == "Ceiling tile"
    assert lines[0].base_qty == 12
    assert lines[0].location == "Lobby"
    assert lines[0].wastage_pct is None


def test_lines_from_table_data_empty():
    assert lines_from_table_data({}) == []
    assert lines_from_table_data(None) == []
    assert lines_from_table_data({"lines": []}) == []


def test_payload_from_table_data_both_shapes():
    current = payload_from_table_data(_stored_item())
    assert len(current.material_lines) == 2

    legacy = payload_from_table_data({
        "product_name": "Ceiling",
        "baseRequiredQty": 10,
        "targetRequiredQty": 20,
        "step11_items": [{"title": "Tile", "qty": 5, "supply_rate": 2}],
    })
    assert legacy.config_basis.base_required_qty == 10
    result = RecipeScalingEngine().scale_payload(legacy)
    assert result.computed[0].scaled_qty == pytest.approx(10)
    assert result.total_supply == pytest.approx(20)


def test_legacy_fractional_wastage_read_as_percent():
    """Old table_data stores 5% as 0.05."""
    legacy = payload_from_table_data({
        "baseRequiredQty": 1,
        "wastagePctDefault": 0.05,
        "targetRequiredQty": 100,
        "lines": [
            {"name": "Board", "qty": 1, "supply_rate": 10},
            {"name": "Screws", "qty": 1, "wastagePct": 0.1, "supply_rate": 1},
        ],
    })
    assert legacy.config_basis.wastage_pct_default == pytest.approx(5)
    assert legacy.material_lines[0].wastage_pct is None
    assert legacy.material_lines[1].wastage_pct == pytest.approx(10)

    result = RecipeScalingEngine().scale_payload(legacy)
    assert result.computed[0].wastage_pct_used == pytest.approx(5)
    assert result.computed[0].scaled_qty == pytest.approx(105)
    assert result.computed[0].round_off_qty == 105
    assert result.computed[1].scaled_qty == pytest.approx(110)


def test_current_document_wastage_stays_percent():
    """Only the legacy shape is converted: camelCase documents already hold percents."""
    payload = payload_from_table_data(_stored_item())
    assert payload.config_basis.wastage_pct_default == 5
    assert payload.material_lines[1].wastage_pct == 10
