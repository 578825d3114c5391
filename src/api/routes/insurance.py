"""Insurance estimate routes: deal form preview and admin redisplay."""

from fastapi import APIRouter, HTTPException

from src.api.schemas import (
    InsuranceBreakdownResponse,
    InsuranceEstimateRequest,
    InsuranceEstimateResponse,
    StoredEstimateRequest,
    StoredEstimateResponse,
)
from src.engine.deal_insurance import redisplay_estimate
from src.engine.insurance import estimate_insurance, explain_estimate
from src.engine.insurance_validation import validate_estimate_input
from src.models.insurance import InsuranceEstimate

router = APIRouter(prefix="/api/v1/insurance", tags=["insurance"])


def _estimate_to_response(estimate: InsuranceEstimate) -> InsuranceEstimateResponse:
    b = estimate.breakdown
    return InsuranceEstimateResponse(
        annual=estimate.annual,
        monthly=estimate.monthly,
        replacement_cost=estimate.replacement_cost,
        breakdown=InsuranceBreakdownResponse(
            cost_per_sqft=b.cost_per_sqft,
            base_rate=b.base_rate,
            base_rate_adjustments=list(b.base_rate_adjustments),
            occupancy_multiplier=b.occupancy_multiplier,
            deductible_multiplier=b.deductible_multiplier,
            risk_multiplier=b.risk_multiplier,
        ),
        explanation=explain_estimate(estimate),
    )


@router.post("/estimate", response_model=InsuranceEstimateResponse)
async def estimate(req: InsuranceEstimateRequest):
    """Raw deal-form fields → premium estimate with breakdown.

    Invalid fields come back as a 422 keyed by field name so the form can
    show "preview unavailable" next to them.
    """
    result = validate_estimate_input(req.model_dump(exclude_none=True))
    if not result.ok:
        raise HTTPException(status_code=422, detail={"errors": result.errors})
    return _estimate_to_response(estimate_insurance(result.value))


@router.post("/redisplay", response_model=StoredEstimateResponse)
async def redisplay(req: StoredEstimateRequest):
    """Stored deal columns → headline numbers plus the recomputed breakdown."""
    view = redisplay_estimate(req.model_dump())
    return StoredEstimateResponse(
        available=view.available,
        annual=view.annual,
        monthly=view.monthly,
        estimate=_estimate_to_response(view.estimate) if view.estimate else None,
    )
