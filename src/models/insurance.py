"""Insurance estimate data types."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar


class Occupancy(Enum):
    OWNER = "owner"
    RENTAL = "rental"
    VACANT = "vacant"


class Construction(Enum):
    FRAME = "frame"
    MASONRY = "masonry"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RiskFlags:
    flood: bool = False
    wildfire: bool = False
    hurricane: bool = False
    hail: bool = False


@dataclass(frozen=True)
class EstimateInput:
    """Validated property/risk record. Build via validate_estimate_input()."""
    sqft: Decimal
    year_built: int | None = None
    occupancy: Occupancy = Occupancy.RENTAL
    roof_age_years: Decimal | None = None
    construction: Construction = Construction.UNKNOWN
    deductible: int = 2500
    replacement_cost_override: Decimal | None = None
    cost_per_sqft_override: Decimal | None = None
    risk_flags: RiskFlags = field(default_factory=RiskFlags)


@dataclass(frozen=True)
class InsuranceBreakdown:
    cost_per_sqft: Decimal
    base_rate: Decimal
    base_rate_adjustments: tuple[str, ...]
    occupancy_multiplier: Decimal
    deductible_multiplier: Decimal
    risk_multiplier: Decimal


@dataclass(frozen=True)
class InsuranceEstimate:
    annual: Decimal
    monthly: Decimal
    replacement_cost: Decimal
    breakdown: InsuranceBreakdown


@dataclass(frozen=True)
class ValidEstimateInput:
    ok: ClassVar[bool] = True
    value: EstimateInput


@dataclass(frozen=True)
class InvalidEstimateInput:
    """Field name -> message for every rejected field."""
    ok: ClassVar[bool] = False
    errors: dict[str, str]


EstimateValidation = ValidEstimateInput | InvalidEstimateInput


@dataclass(frozen=True)
class DealInsuranceFields:
    """The estimate columns stored on a deal row. All None means no estimate."""
    insurance_estimate_annual: Decimal | None = None
    insurance_estimate_monthly: Decimal | None = None
    insurance_estimate_inputs: dict | None = None
    insurance_estimate_updated_at: datetime | None = None


@dataclass(frozen=True)
class StoredEstimateView:
    """Headline numbers for display plus the recomputed estimate, if any."""
    annual: Decimal | None = None
    monthly: Decimal | None = None
    estimate: InsuranceEstimate | None = None

    @property
    def available(self) -> bool:
        return self.annual is not None and self.monthly is not None
