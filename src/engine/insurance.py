"""Insurance premium estimator for submitted deals.

Replacement cost (sqft * cost per sqft) times a base rate, then occupancy,
deductible and hazard multipliers. Every rate and multiplier ends up in the
InsuranceBreakdown so the admin review page can show how the number was built.

Pure function: validated EstimateInput in, InsuranceEstimate out. No I/O and
no clock reads; age rules use the caller's year_built/roof_age_years.
"""

from decimal import Decimal

from src.models.insurance import (
    Construction,
    EstimateInput,
    InsuranceBreakdown,
    InsuranceEstimate,
    Occupancy,
    RiskFlags,
)

MONTHS_PER_YEAR = Decimal("12")

# Replacement cost per sqft; older stock costs more to rebuild
BASE_COST_PER_SQFT = Decimal("200")
PRE_1980_COST_PER_SQFT = Decimal("215")
PRE_1950_COST_PER_SQFT = Decimal("230")

CONSTRUCTION_COST_ADJUSTMENTS: dict[Construction, Decimal] = {
    Construction.FRAME: Decimal("10"),
    Construction.MASONRY: Decimal("-10"),
    Construction.UNKNOWN: Decimal("0"),
}

BASE_RATE = Decimal("0.005")  # 0.50% of replacement cost

PRE_1980_RATE_ADD = Decimal("0.0005")
PRE_1950_RATE_ADD = Decimal("0.001")
OLD_ROOF_RATE_ADD = Decimal("0.0005")
OLD_ROOF_YEARS = Decimal("15")

OCCUPANCY_MULTIPLIERS: dict[Occupancy, Decimal] = {
    Occupancy.OWNER: Decimal("1.00"),
    Occupancy.RENTAL: Decimal("1.15"),
    Occupancy.VACANT: Decimal("1.35"),
}

DEFAULT_DEDUCTIBLE = 2500
DEDUCTIBLE_MULTIPLIERS: dict[int, Decimal] = {
    1000: Decimal("1.10"),
    2500: Decimal("1.00"),
    5000: Decimal("0.90"),
}

# Applied in this order; each true flag multiplies in
RISK_FLAG_MULTIPLIERS: dict[str, Decimal] = {
    "flood": Decimal("1.20"),
    "wildfire": Decimal("1.20"),
    "hurricane": Decimal("1.15"),
    "hail": Decimal("1.10"),
}


def _cost_per_sqft(
    year_built: int | None,
    construction: Construction,
    override: Decimal | None,
) -> Decimal:
    if override is not None:
        return override

    cost = BASE_COST_PER_SQFT
    if year_built is not None and year_built < 1980:
        cost = PRE_1980_COST_PER_SQFT
    if year_built is not None and year_built < 1950:
        cost = PRE_1950_COST_PER_SQFT
    return cost + CONSTRUCTION_COST_ADJUSTMENTS[construction]


def _base_rate(
    year_built: int | None,
    roof_age_years: Decimal | None,
) -> tuple[Decimal, tuple[str, ...]]:
    """Base rate plus the labels of every adjustment that fired, in check order.

    The pre-1980 and pre-1950 adds stack: a 1940 build gets both.
    """
    rate = BASE_RATE
    labels: list[str] = []

    if year_built is not None and year_built < 1980:
        rate += PRE_1980_RATE_ADD
        labels.append("yearBuilt<1980:+0.05%")
    if year_built is not None and year_built < 1950:
        rate += PRE_1950_RATE_ADD
        labels.append("yearBuilt<1950:+0.10%")
    if roof_age_years is not None and roof_age_years >= OLD_ROOF_YEARS:
        rate += OLD_ROOF_RATE_ADD
        labels.append("roofAge>=15:+0.05%")

    return rate, tuple(labels)


def risk_multiplier(flags: RiskFlags) -> Decimal:
    multiplier = Decimal("1")
    for name, flag_mult in RISK_FLAG_MULTIPLIERS.items():
        if getattr(flags, name):
            multiplier *= flag_mult
    return multiplier


def estimate_insurance(estimate_input: EstimateInput) -> InsuranceEstimate:
    """Estimate the annual and monthly premium for a validated input.

    annual = replacement_cost * base_rate * occupancy * deductible * risk
    monthly = annual / 12

    Nothing is rounded here; callers round for display only.
    """
    cost_per_sqft = _cost_per_sqft(
        estimate_input.year_built,
        estimate_input.construction,
        estimate_input.cost_per_sqft_override,
    )

    if estimate_input.replacement_cost_override is not None:
        replacement_cost = estimate_input.replacement_cost_override
    else:
        replacement_cost = estimate_input.sqft * cost_per_sqft

    base_rate, adjustments = _base_rate(
        estimate_input.year_built,
        estimate_input.roof_age_years,
    )

    occupancy_mult = OCCUPANCY_MULTIPLIERS[estimate_input.occupancy]
    deductible_mult = DEDUCTIBLE_MULTIPLIERS[estimate_input.deductible]
    risk_mult = risk_multiplier(estimate_input.risk_flags)

    annual = replacement_cost * base_rate * occupancy_mult * deductible_mult * risk_mult
    monthly = annual / MONTHS_PER_YEAR

    return InsuranceEstimate(
        annual=annual,
        monthly=monthly,
        replacement_cost=replacement_cost,
        breakdown=InsuranceBreakdown(
            cost_per_sqft=cost_per_sqft,
            base_rate=base_rate,
            base_rate_adjustments=adjustments,
            occupancy_multiplier=occupancy_mult,
            deductible_multiplier=deductible_mult,
            risk_multiplier=risk_mult,
        ),
    )


def explain_estimate(estimate: InsuranceEstimate) -> list[str]:
    """Human-readable "how we calculate insurance" lines."""
    b = estimate.breakdown
    lines = [
        f"Replacement cost: ${float(estimate.replacement_cost):,.0f}",
        f"Cost per sqft: ${float(b.cost_per_sqft):,.0f}",
        f"Base rate: {float(b.base_rate) * 100:.2f}%",
    ]
    if b.base_rate_adjustments:
        lines.append(f"Adjustments: {', '.join(b.base_rate_adjustments)}")
    lines.extend([
        f"Occupancy multiplier: {float(b.occupancy_multiplier):.2f}x",
        f"Deductible multiplier: {float(b.deductible_multiplier):.2f}x",
        f"Risk multiplier: {float(b.risk_multiplier):.2f}x",
    ])
    return lines
