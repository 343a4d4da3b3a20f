"""
Loading recipes out of stored BOQ item JSON.

Newer items carry camelCase `configBasis` / `materialLines`. Older items only
have the flat table_data shape (`lines`, or the original `step11_items`),
with snake_case keys: these helpers normalize both into engine models.
"""

import logging

from .coerce import to_number, to_optional_number
from .schemas import BoqItemPayload, ConfigBasis, MaterialLine, UnitType

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Main Area"


def _wastage_percent(fraction):
    """Legacy table_data keeps wastage as a fraction (0.05); the engine works in percent (5)."""
    fraction = to_optional_number(fraction)
    return None if fraction is None else fraction * 100


def _first(data: dict, *keys, default=None):
    """First key present with a non-None value."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def basis_from_table_data(table_data: dict) -> ConfigBasis:
    """ConfigBasis from raw table_data. Missing or old fields fall back to Sqft / 1 / 0%."""
    table_data = table_data or {}
    unit = table_data.get("requiredUnitType") or table_data.get("required_unit_type")
    try:
        unit_type = UnitType(unit) if unit else UnitType.SQFT
    except ValueError:
        logger.warning("Unknown unit type %r in table data, using Sqft", unit)
        unit_type = UnitType.SQFT

    return ConfigBasis(
        required_unit_type=unit_type,
        base_required_qty=to_number(
            _first(table_data, "baseRequiredQty", "base_required_qty"), default=0.0) or 1.0,
        wastage_pct_default=_wastage_percent(
            _first(table_data, "wastagePctDefault", "wastage_pct_default")) or 0.0,
    )


def _apply_wastage_flag(line: dict) -> bool:
    if line.get("apply_wastage") is not None:
        return bool(line["apply_wastage"])
    if line.get("applyWastage") is not None:
        return bool(line["applyWastage"])
    return True


def lines_from_table_data(table_data: dict) -> list[MaterialLine]:
    """
    MaterialLines from the `lines` snapshot stored on a BOQ item.
    Falls back to the legacy `step11_items` list, else returns [].
    """
    table_data = table_data or {}

    lines = table_data.get("lines")
    if isinstance(lines, list) and lines:
        return [
            MaterialLine(
                id=_first(line, "id", "material_id"),
                name=_first(line, "name", "material_name"),
                unit=line.get("unit"),
                location=line.get("location") or DEFAULT_LOCATION,
                base_qty=_first(line, "baseQty", "qty", default=0),
                wastage_pct=_wastage_percent(line.get("wastagePct")),
                supply_rate=_first(line, "supplyRate", "supply_rate", default=0),
                install_rate=_first(line, "installRate", "install_rate", default=0),
                apply_wastage=_apply_wastage_flag(line),
                description=(line.get("description") or line.get("technicalspecification")
                             or line.get("name")),
                shop_name=line.get("shop_name"),
                technicalspecification=line.get("technicalspecification"),
            )
            for line in lines
        ]

    items = table_data.get("step11_items")
    if isinstance(items, list):
        return [
            MaterialLine(
                id=item.get("id"),
                name=item.get("title") or item.get("name"),
                unit=item.get("unit"),
                location=item.get("location") or DEFAULT_LOCATION,
                base_qty=_first(item, "qty", default=0),
                supply_rate=_first(item, "supply_rate", default=0),
                install_rate=_first(item, "install_rate", default=0),
            )
            for item in items
        ]

    return []


def payload_from_table_data(table_data: dict) -> BoqItemPayload:
    """
    A BoqItemPayload from any stored shape: the current camelCase document
    when `configBasis`/`materialLines` are present, else the legacy table_data.
    """
    table_data = table_data or {}
    if "configBasis" in table_data or "materialLines" in table_data:
        return BoqItemPayload.model_validate(table_data)

    return BoqItemPayload(
        product_name=table_data.get("product_name"),
        product_id=table_data.get("product_id"),
        config_basis=basis_from_table_data(table_data),
        material_lines=lines_from_table_data(table_data),
        target_required_qty=_first(table_data, "targetRequiredQty", "target_required_qty",
                                   default=0),
    )
