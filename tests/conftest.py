"""
Shared test fixtures: test client and sample recipes.
"""

import pytest
from fastapi.testclient import TestClient

from estimator.main import app
from estimator.schemas import ConfigBasis, MaterialLine, UnitType


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def gypsum_ceiling_basis():
    """Recipe defined per 100 sq ft with 5% default wastage."""
    return ConfigBasis(
        required_unit_type=UnitType.SQFT,
        base_required_qty=100,
        wastage_pct_default=5,
    )


@pytest.fixture
def gypsum_ceiling_lines():
    """Three-line false ceiling recipe: one line overrides wastage, one opts out."""
    return [
        MaterialLine(id="m1", name="Gypsum board 12.5mm", unit="Nos",
                     base_qty=4, supply_rate=450, install_rate=120),
        MaterialLine(id="m2", name="GI ceiling section", unit="RFT",
                     base_qty=60, wastage_pct=10, supply_rate=38, install_rate=12),
        MaterialLine(id="m3", name="Labour: framing", unit="LS",
                     base_qty=1, apply_wastage=False, supply_rate=0, install_rate=900),
    ]
