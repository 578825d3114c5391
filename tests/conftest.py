"""Canonical test fixtures used across the insurance tests.

Fixture: 1,850 sqft frame rental built 1995, 12-year-old roof, $2,500
deductible, no hazard flags.
"""

import pytest
from decimal import Decimal

from src.models.insurance import Construction, EstimateInput, Occupancy, RiskFlags

AS_OF_YEAR = 2026


@pytest.fixture
def as_of_year() -> int:
    return AS_OF_YEAR


@pytest.fixture
def regression_fields() -> dict:
    """Raw fields as the deal form's estimator section would send them."""
    return {
        "sqft": "1850",
        "year_built": "1995",
        "occupancy": "rental",
        "roof_age_years": "12",
        "construction": "frame",
        "deductible": "2500",
        "risk_flags": {
            "flood": False,
            "wildfire": False,
            "hurricane": False,
            "hail": False,
        },
    }


@pytest.fixture
def regression_input() -> EstimateInput:
    return EstimateInput(
        sqft=Decimal("1850"),
        year_built=1995,
        occupancy=Occupancy.RENTAL,
        roof_age_years=Decimal("12"),
        construction=Construction.FRAME,
        deductible=2500,
        risk_flags=RiskFlags(),
    )


@pytest.fixture
def deal_form() -> dict:
    """Deal submission form as posted by the browser (unchecked boxes absent)."""
    return {
        "title": "3/2 rental near downtown",
        "squareFeet": "1850",
        "yearBuilt": "1995",
        "occupancy": "rental",
        "roofAgeYears": "12",
        "construction": "frame",
        "deductible": "2500",
        "replacementCostOverride": "",
    }
