"""CLI: simulate a property and print its year-1 proforma.

Usage:
    python -m src.cli "1247 Maple Grove Avenue, Portland, OR 97214" --beds 3 --baths 2 --year 2006
    python -m src.cli "..." --scenario all --federal 32 --state 9.3
    python -m src.cli "..." --set monthly_rent=2900 --set vacancy_pct=6
"""

import argparse
import logging

from src.config import settings
from src.engine.assumptions_builder import apply_overrides, percent_input_to_fraction
from src.engine.proforma import compute_proforma
from src.engine.simulator import generate_market_context, simulate
from src.formatting import format_currency, format_percent
from src.models.assumptions import FRACTION_FIELDS
from src.models.investor import DEFAULT_PERSONAL, PersonalProfile
from src.models.property import Property
from src.models.results import OwnerProforma, Proforma, Scenario

SCENARIO_TITLES = {
    Scenario.RENTAL: "Long-Term Rental",
    Scenario.AIRBNB: "Short-Term (Airbnb)",
    Scenario.OWNER: "Owner-Occupied",
}


def _header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def _line(label: str, value: str) -> None:
    print(f"  {label:<28}{value:>16}")


def print_assumptions(prop: Property, assumptions, market) -> None:
    _header(f"Property: {prop.address}")
    print(f"  {prop.bedrooms} bd / {prop.bathrooms:g} ba, built {prop.year_built}")
    _line("Purchase Price", format_currency(assumptions.purchase_price))
    _line("Down Payment", format_percent(assumptions.down_payment_pct))
    _line("Interest Rate", format_percent(assumptions.interest_rate))
    _line("Monthly Rent", format_currency(assumptions.monthly_rent))
    _line("Nightly Rate", format_currency(assumptions.avg_nightly_rate))
    _line("Occupancy", format_percent(assumptions.occupancy_rate))
    _line("Monthly HOA", format_currency(assumptions.monthly_hoa))
    _line("Area Median Price", format_currency(market.median_home_price))
    _line("Area Avg Rent", format_currency(market.avg_rent_in_area))
    _line("Days on Market", str(market.days_on_market))


def print_proforma(proforma: Proforma) -> None:
    base = proforma.base
    _header(SCENARIO_TITLES[base.scenario])
    _line("Total Cash Needed", format_currency(base.total_cash_needed))

    if isinstance(proforma, OwnerProforma):
        _line("Avoided Rent", format_currency(proforma.gross_avoided_rent))
        _line("PITI", format_currency(proforma.annual_piti))
        _line("Total Annual Cost", format_currency(proforma.total_annual_cost))
        _line("Tax Benefit", format_currency(proforma.tax_benefit))
        _line("Net Annual Cost", format_currency(proforma.net_annual_cost))
        _line("Net Monthly Cost", format_currency(proforma.net_monthly_cost))
        _line("Net Benefit vs Renting", format_currency(proforma.net_benefit))
        _line("Opportunity Cost", format_currency(base.opportunity_cost))
        return

    _line("Effective Gross Income", format_currency(proforma.effective_gross_income))
    _line("Operating Expenses", format_currency(proforma.total_opex))
    _line("NOI", format_currency(proforma.net_operating_income))
    _line("Debt Service", format_currency(proforma.annual_mortgage_payment))
    _line("Cash Flow Before Tax", format_currency(proforma.cash_flow_before_tax))
    _line("Tax Benefit", format_currency(proforma.tax_benefit))
    _line("Cash Flow After Tax", format_currency(proforma.cash_flow_after_tax))
    _line("Per Month", format_currency(proforma.cash_flow_per_month))
    _line("Cap Rate", format_percent(proforma.cap_rate))
    _line("Cash-on-Cash", format_percent(proforma.cash_on_cash_return))


def parse_overrides(pairs: list[str], parser: argparse.ArgumentParser) -> dict[str, float]:
    """--set name=value pairs; percent fields are entered as percents."""
    overrides: dict[str, float] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep:
            parser.error(f"--set expects name=value, got {pair!r}")
        try:
            if name in FRACTION_FIELDS:
                overrides[name] = percent_input_to_fraction(raw)
            else:
                overrides[name] = float(raw)
        except ValueError:
            parser.error(f"--set {name}: {raw!r} is not a number")
    return overrides


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rental vs Airbnb vs owner-occupied proforma")
    parser.add_argument("address", help="Property address")
    parser.add_argument("--beds", type=int, default=3, help="Number of bedrooms (default: 3)")
    parser.add_argument("--baths", type=float, default=2.0, help="Number of bathrooms (default: 2)")
    parser.add_argument("--year", type=int, default=2006, help="Year built (default: 2006)")
    parser.add_argument(
        "--scenario",
        choices=[s.value for s in Scenario] + ["all"],
        default="all",
        help="Scenario to show (default: all)",
    )
    parser.add_argument("--federal", type=float, help="Federal tax rate, percent")
    parser.add_argument("--state", type=float, help="State tax rate, percent")
    parser.add_argument("--opportunity", type=float, help="Opportunity cost rate, percent")
    parser.add_argument(
        "--set", dest="overrides", action="append", default=[], metavar="FIELD=VALUE",
        help="Override an assumption (percent fields in percent)",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.beds < 0 or args.baths < 0:
        parser.error("--beds and --baths must be non-negative")

    prop = Property(
        address=args.address,
        bedrooms=args.beds,
        bathrooms=args.baths,
        year_built=args.year,
    )
    try:
        assumptions, _ = apply_overrides(simulate(prop), parse_overrides(args.overrides, parser))
    except ValueError as e:
        parser.error(str(e))

    personal = PersonalProfile(
        federal_tax_rate=(
            args.federal / 100 if args.federal is not None else DEFAULT_PERSONAL.federal_tax_rate
        ),
        state_tax_rate=(
            args.state / 100 if args.state is not None else DEFAULT_PERSONAL.state_tax_rate
        ),
        opportunity_cost_rate=(
            args.opportunity / 100
            if args.opportunity is not None
            else DEFAULT_PERSONAL.opportunity_cost_rate
        ),
    )

    print_assumptions(prop, assumptions, generate_market_context(prop))

    scenarios = list(Scenario) if args.scenario == "all" else [Scenario(args.scenario)]
    for scenario in scenarios:
        print_proforma(compute_proforma(assumptions, personal, scenario))
    print()


if __name__ == "__main__":
    main()
