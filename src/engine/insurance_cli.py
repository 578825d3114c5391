"""CLI for the insurance premium estimator.

Usage:
    python -m src.engine.insurance_cli --sqft 1850 --year-built 1995 --roof-age 12 --construction frame
    python -m src.engine.insurance_cli --sqft 1800 --occupancy vacant --deductible 5000 --flood --hail
"""

import argparse
import sys

from src.engine.insurance import estimate_insurance, explain_estimate
from src.engine.insurance_validation import validate_estimate_input
from src.models.insurance import InsuranceEstimate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deal insurance premium estimate")
    parser.add_argument("--sqft", help="Living area in square feet (required)")
    parser.add_argument("--year-built", help="Construction year")
    parser.add_argument("--occupancy", help="owner, rental or vacant (default: rental)")
    parser.add_argument("--roof-age", dest="roof_age_years", help="Roof age in years")
    parser.add_argument("--construction", help="frame, masonry or unknown (default: unknown)")
    parser.add_argument("--deductible", help="1000, 2500 or 5000 (default: 2500)")
    parser.add_argument("--replacement-cost", dest="replacement_cost_override", help="Replacement cost override ($)")
    parser.add_argument("--cost-per-sqft", dest="cost_per_sqft_override", help="Cost per sqft override ($)")
    parser.add_argument("--as-of-year", type=int, help="Reference year for year-built checks")
    for flag in ("flood", "wildfire", "hurricane", "hail"):
        parser.add_argument(f"--{flag}", action="store_true", help=f"Property is in a {flag} risk zone")
    return parser


def raw_fields(args: argparse.Namespace) -> dict:
    return {
        "sqft": args.sqft,
        "year_built": args.year_built,
        "occupancy": args.occupancy,
        "roof_age_years": args.roof_age_years,
        "construction": args.construction,
        "deductible": args.deductible,
        "replacement_cost_override": args.replacement_cost_override,
        "cost_per_sqft_override": args.cost_per_sqft_override,
        "risk_flags": {
            "flood": args.flood,
            "wildfire": args.wildfire,
            "hurricane": args.hurricane,
            "hail": args.hail,
        },
    }


def print_estimate(estimate: InsuranceEstimate) -> None:
    print(f"\n{'=' * 60}")
    print("  Insurance Estimate (estimate only)")
    print(f"{'=' * 60}")
    print(f"  Monthly:          ${float(estimate.monthly):,.2f}/mo")
    print(f"  Annual:           ${float(estimate.annual):,.2f}/yr")
    print()
    for line in explain_estimate(estimate):
        print(f"  {line}")
    print()


def print_errors(errors: dict[str, str]) -> None:
    print("Preview unavailable:", file=sys.stderr)
    for field_name, message in sorted(errors.items()):
        print(f"  {field_name}: {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    result = validate_estimate_input(raw_fields(args), as_of_year=args.as_of_year)
    if not result.ok:
        print_errors(result.errors)
        return 2
    print_estimate(estimate_insurance(result.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
