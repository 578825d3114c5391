"""Insurance estimates on the deal submission and admin review paths.

Submission: deal form fields -> validated input -> estimate -> the four
insurance_estimate_* columns stored on the deal.
Review: stored columns -> headline numbers, with the breakdown recomputed
from the stored inputs.
"""

import logging
from collections.abc import Mapping
from dataclasses import asdict
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from src.engine.insurance import estimate_insurance
from src.engine.insurance_validation import validate_estimate_input
from src.models.insurance import (
    DealInsuranceFields,
    EstimateInput,
    StoredEstimateView,
)

logger = logging.getLogger(__name__)

# Deal submission form name -> estimator field
DEAL_FORM_FIELDS: dict[str, str] = {
    "squareFeet": "sqft",
    "yearBuilt": "year_built",
    "occupancy": "occupancy",
    "roofAgeYears": "roof_age_years",
    "construction": "construction",
    "deductible": "deductible",
    "replacementCostOverride": "replacement_cost_override",
}

RISK_FORM_FIELDS: dict[str, str] = {
    "riskFlood": "flood",
    "riskWildfire": "wildfire",
    "riskHurricane": "hurricane",
    "riskHail": "hail",
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _json_number(value: Decimal | None) -> int | float | None:
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def _stored_decimal(value: Any) -> Decimal | None:
    if value is None:
        return None
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        logger.warning("Ignoring non-numeric stored insurance value: %r", value)
        return None
    return number if number.is_finite() else None


def insurance_fields_from_form(form: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the estimator fields out of a deal submission form."""
    raw: dict[str, Any] = {
        field_name: form.get(form_name)
        for form_name, field_name in DEAL_FORM_FIELDS.items()
    }
    # Unchecked checkboxes are simply absent from the submitted form
    raw["risk_flags"] = {
        flag: not _is_blank(form.get(form_name))
        for form_name, flag in RISK_FORM_FIELDS.items()
    }
    return raw


def serialize_estimate_input(estimate_input: EstimateInput) -> dict[str, Any]:
    """JSON-safe copy of a validated input, loadable by validate_estimate_input()."""
    return {
        "sqft": _json_number(estimate_input.sqft),
        "year_built": estimate_input.year_built,
        "occupancy": estimate_input.occupancy.value,
        "roof_age_years": _json_number(estimate_input.roof_age_years),
        "construction": estimate_input.construction.value,
        "deductible": estimate_input.deductible,
        "replacement_cost_override": _json_number(estimate_input.replacement_cost_override),
        "cost_per_sqft_override": _json_number(estimate_input.cost_per_sqft_override),
        "risk_flags": asdict(estimate_input.risk_flags),
    }


def estimate_for_deal(form: Mapping[str, Any], *, as_of: datetime) -> DealInsuranceFields:
    """Build the insurance columns for a submitted deal.

    No square footage, or any invalid field, means no estimate is stored
    (every column None). The deal itself is still saved by the caller.
    """
    raw = insurance_fields_from_form(form)
    if _is_blank(raw["sqft"]):
        return DealInsuranceFields()

    result = validate_estimate_input(raw, as_of_year=as_of.year)
    if not result.ok:
        logger.warning("Skipping insurance estimate for deal: %s", result.errors)
        return DealInsuranceFields()

    estimate = estimate_insurance(result.value)
    return DealInsuranceFields(
        insurance_estimate_annual=estimate.annual,
        insurance_estimate_monthly=estimate.monthly,
        insurance_estimate_inputs=serialize_estimate_input(result.value),
        insurance_estimate_updated_at=as_of,
    )


def redisplay_estimate(
    record: Mapping[str, Any],
    *,
    as_of_year: int | None = None,
) -> StoredEstimateView:
    """Headline numbers and breakdown for a stored deal.

    Stored annual/monthly win over the recomputed ones so a deal keeps
    showing what was quoted at submission time.
    """
    estimate = None
    stored_inputs = record.get("insurance_estimate_inputs")
    if stored_inputs:
        result = validate_estimate_input(stored_inputs, as_of_year=as_of_year)
        if result.ok:
            estimate = estimate_insurance(result.value)
        else:
            logger.info("Stored insurance inputs no longer validate: %s", result.errors)

    annual = _stored_decimal(record.get("insurance_estimate_annual"))
    monthly = _stored_decimal(record.get("insurance_estimate_monthly"))
    if annual is None and estimate is not None:
        annual = estimate.annual
    if monthly is None and estimate is not None:
        monthly = estimate.monthly

    return StoredEstimateView(annual=annual, monthly=monthly, estimate=estimate)
