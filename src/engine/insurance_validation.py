"""Validation boundary for insurance estimator input.

Raw field bags arrive from HTML forms (strings, blank optionals, checkbox
values), API payloads, or JSON blobs stored alongside a deal. This module is
the one place they are parsed and the one place defaults are decided.
Failures come back as InvalidEstimateInput, never as exceptions.
"""

import logging
from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from src.engine.insurance import DEDUCTIBLE_MULTIPLIERS, DEFAULT_DEDUCTIBLE
from src.models.insurance import (
    Construction,
    EstimateInput,
    EstimateValidation,
    InvalidEstimateInput,
    Occupancy,
    RiskFlags,
    ValidEstimateInput,
)

logger = logging.getLogger(__name__)

EARLIEST_YEAR_BUILT = 1700
# Sizes and dollar amounts stay within 10**-12 .. 10**13 so the premium
# product never leaves the decimal context.
MAX_AMOUNT_EXPONENT = 12
DEFAULT_OCCUPANCY = Occupancy.RENTAL
DEFAULT_CONSTRUCTION = Construction.UNKNOWN

_TRUE_STRINGS = {"on", "true", "1", "yes"}
_FALSE_STRINGS = {"", "off", "false", "0", "no"}


def _parse_number(value: Any) -> Decimal | None:
    """Form value -> Decimal. Blank means absent."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("must be a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError("must be a number") from None
    if not number.is_finite():
        raise ValueError("must be a finite number")
    return number


def _parse_amount(value: Any) -> Decimal | None:
    """Positive size or dollar amount. Blank means absent."""
    number = _parse_number(value)
    if number is None:
        return None
    if number <= 0:
        raise ValueError("must be greater than 0")
    if number.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValueError("is too large")
    if number.adjusted() < -MAX_AMOUNT_EXPONENT:
        raise ValueError("is too small")
    return number


def _parse_flag(value: Any) -> bool:
    # Checkbox semantics: any submitted value other than an explicit "off" is checked
    if value is None:
        return False
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        return True
    return bool(value)


def _parse_choice(value: Any, default):
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        return text or default
    return value


class RiskFlagsForm(BaseModel):
    model_config = ConfigDict(extra="ignore")

    flood: bool = False
    wildfire: bool = False
    hurricane: bool = False
    hail: bool = False

    @field_validator("flood", "wildfire", "hurricane", "hail", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return _parse_flag(value)


class EstimateForm(BaseModel):
    """Loosely-typed estimator fields. Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    sqft: Decimal
    year_built: int | None = None
    occupancy: Occupancy = DEFAULT_OCCUPANCY
    roof_age_years: Decimal | None = None
    construction: Construction = DEFAULT_CONSTRUCTION
    deductible: int = DEFAULT_DEDUCTIBLE
    replacement_cost_override: Decimal | None = None
    cost_per_sqft_override: Decimal | None = None
    risk_flags: RiskFlagsForm = Field(default_factory=RiskFlagsForm)

    @field_validator("sqft", mode="before")
    @classmethod
    def _check_sqft(cls, value: Any) -> Decimal:
        number = _parse_amount(value)
        if number is None:
            raise ValueError("square footage is required")
        return number

    @field_validator("year_built", mode="before")
    @classmethod
    def _check_year_built(cls, value: Any, info: ValidationInfo) -> int | None:
        number = _parse_number(value)
        if number is None:
            return None
        # Range first: int() of a huge exponent is expensive
        if number < EARLIEST_YEAR_BUILT:
            raise ValueError(f"must be {EARLIEST_YEAR_BUILT} or later")
        as_of_year = (info.context or {}).get("as_of_year") or date.today().year
        if number > as_of_year + 1:
            raise ValueError(f"must be {as_of_year + 1} or earlier")
        if number != number.to_integral_value():
            raise ValueError("must be a whole year")
        return int(number)

    @field_validator("occupancy", mode="before")
    @classmethod
    def _check_occupancy(cls, value: Any) -> Any:
        return _parse_choice(value, DEFAULT_OCCUPANCY)

    @field_validator("construction", mode="before")
    @classmethod
    def _check_construction(cls, value: Any) -> Any:
        return _parse_choice(value, DEFAULT_CONSTRUCTION)

    @field_validator("roof_age_years", mode="before")
    @classmethod
    def _check_roof_age(cls, value: Any) -> Decimal | None:
        number = _parse_number(value)
        if number is not None and number < 0:
            raise ValueError("cannot be negative")
        return number

    @field_validator("deductible", mode="before")
    @classmethod
    def _check_deductible(cls, value: Any) -> int:
        number = _parse_number(value)
        if number is None:
            return DEFAULT_DEDUCTIBLE
        # Exact match only; 2400 or 2500.4 are not rounded onto a tier
        if number not in DEDUCTIBLE_MULTIPLIERS:
            raise ValueError("must be one of 1000, 2500 or 5000")
        return int(number)

    @field_validator("replacement_cost_override", "cost_per_sqft_override", mode="before")
    @classmethod
    def _check_override(cls, value: Any) -> Decimal | None:
        return _parse_amount(value)

    @field_validator("risk_flags", mode="before")
    @classmethod
    def _check_risk_flags(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, RiskFlags):
            return vars(value)
        return value

    def to_estimate_input(self) -> EstimateInput:
        return EstimateInput(
            sqft=self.sqft,
            year_built=self.year_built,
            occupancy=self.occupancy,
            roof_age_years=self.roof_age_years,
            construction=self.construction,
            deductible=self.deductible,
            replacement_cost_override=self.replacement_cost_override,
            cost_per_sqft_override=self.cost_per_sqft_override,
            risk_flags=RiskFlags(
                flood=self.risk_flags.flood,
                wildfire=self.risk_flags.wildfire,
                hurricane=self.risk_flags.hurricane,
                hail=self.risk_flags.hail,
            ),
        )


_FIELD_NAMES: dict[str, str] = {}
for _name, _info in EstimateForm.model_fields.items():
    _FIELD_NAMES[_name] = _name
    _FIELD_NAMES[_info.alias or _name] = _name


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        loc = err.get("loc") or ("input",)
        field_name = _FIELD_NAMES.get(str(loc[0]), str(loc[0]))
        if err.get("type") == "missing":
            message = "is required"
        else:
            message = err.get("msg", "is invalid").removeprefix("Value error, ")
        errors.setdefault(field_name, message)
    return errors


def validate_estimate_input(
    raw: Mapping[str, Any] | None,
    *,
    as_of_year: int | None = None,
) -> EstimateValidation:
    """Parse an untrusted field bag into a validated EstimateInput.

    Args:
        raw: Field values keyed by snake_case or camelCase name. Missing keys,
            None and blank strings all mean "not provided".
        as_of_year: Reference year for the year_built upper bound
            (as_of_year + 1). Defaults to today's year.

    Returns:
        ValidEstimateInput, or InvalidEstimateInput with one message per
        offending field.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        return InvalidEstimateInput(errors={"input": "must be a mapping of field values"})
    if as_of_year is None:
        as_of_year = date.today().year

    try:
        form = EstimateForm.model_validate(dict(raw), context={"as_of_year": as_of_year})
    except ValidationError as e:
        errors = _field_errors(e)
        logger.debug("Rejected insurance estimate input: %s", errors)
        return InvalidEstimateInput(errors=errors)

    return ValidEstimateInput(value=form.to_estimate_input())
