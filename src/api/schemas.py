"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---- Request schemas ----
# Request fields are untyped so every value reaches validate_estimate_input
# and rejections share its {"errors": {field: message}} shape.

class InsuranceEstimateRequest(BaseModel):
    """Raw estimator fields. Parsing and defaults happen in the validator."""

    model_config = ConfigDict(extra="allow")

    sqft: Any = Field(None, description="Living area in square feet")
    year_built: Any = None
    occupancy: Any = Field(None, description="owner, rental or vacant")
    roof_age_years: Any = None
    construction: Any = Field(None, description="frame, masonry or unknown")
    deductible: Any = Field(None, description="1000, 2500 or 5000")
    replacement_cost_override: Any = None
    cost_per_sqft_override: Any = None
    risk_flags: Any = Field(None, description="flood, wildfire, hurricane and hail checkboxes")


class StoredEstimateRequest(BaseModel):
    """The insurance columns of a stored deal row."""
    insurance_estimate_annual: Decimal | None = None
    insurance_estimate_monthly: Decimal | None = None
    insurance_estimate_inputs: dict | None = None
    insurance_estimate_updated_at: datetime | None = None


# ---- Response schemas ----

class InsuranceBreakdownResponse(BaseModel):
    cost_per_sqft: Decimal
    base_rate: Decimal
    base_rate_adjustments: list[str] = []
    occupancy_multiplier: Decimal
    deductible_multiplier: Decimal
    risk_multiplier: Decimal


class InsuranceEstimateResponse(BaseModel):
    annual: Decimal
    monthly: Decimal
    replacement_cost: Decimal
    breakdown: InsuranceBreakdownResponse
    explanation: list[str] = []


class StoredEstimateResponse(BaseModel):
    available: bool
    annual: Decimal | None = None
    monthly: Decimal | None = None
    estimate: InsuranceEstimateResponse | None = None
