"""Command-line entrypoint for tariff comparison and salary conversion."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tariff_checker.application.use_cases import (
    PLAN_TYPES,
    BrowsePlansUseCase,
    CompareTariffsUseCase,
    ComparisonContext,
    ConvertSalaryUseCase,
    ensure_quantity,
)
from tariff_checker.domain.models import (
    FUEL_TYPES,
    LOAN_TYPES,
    ElectricityInput,
    FuelInput,
    GasInput,
    LoanInput,
    WaterInput,
)
from tariff_checker.domain.money import bgn_to_eur, eur_to_bgn, format_currency, format_number
from tariff_checker.errors import TariffCheckerError
from tariff_checker.infrastructure.repositories.table_repositories import (
    electricity_file_repository,
    fuel_file_repository,
    gas_file_repository,
    loan_file_repository,
    reference_repositories,
    water_file_repository,
)
from tariff_checker.presentation.report import breakdown_to_rows, plans_to_rows, results_to_rows, row_columns

logger = logging.getLogger(__name__)

FILE_REPOSITORIES = {
    "electricity": electricity_file_repository,
    "water": water_file_repository,
    "gas": gas_file_repository,
    "fuel": fuel_file_repository,
    "loans": loan_file_repository,
}


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare utility, fuel and loan offers, list telecom plans and convert salaries")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    elec = sub.add_parser("electricity", help="Compare electricity suppliers")
    elec.add_argument("day_kwh", type=str)
    elec.add_argument("night_kwh", type=str, nargs="?", default="0")
    elec.add_argument("--meter", choices=("single", "dual"), default="dual")

    for name in ("water", "gas"):
        utility = sub.add_parser(name, help=f"Compare {name} suppliers")
        utility.add_argument("consumption_m3", type=str)

    fuel = sub.add_parser("fuel", help="Compare fuel station chains")
    fuel.add_argument("fuel_type", choices=FUEL_TYPES)
    fuel.add_argument("monthly_liters", type=str)

    loans = sub.add_parser("loans", help="Compare bank loans")
    loans.add_argument("amount", type=str)
    loans.add_argument("term_months", type=str)
    loans.add_argument("--type", dest="loan_type", choices=LOAN_TYPES, default="consumer")

    for name in FILE_REPOSITORIES:
        sub.choices[name].add_argument("--table", type=Path, help="CSV or Excel rate table instead of bundled data")

    mobile = sub.add_parser("mobile", help="List mobile plans, cheapest first")
    mobile.add_argument("--type", dest="plan_type", choices=PLAN_TYPES, default="all")
    mobile.add_argument("--min-data", dest="min_data_gb", type=str, help="Minimum data allowance in GB")
    mobile.add_argument("--operator", default="all")

    internet = sub.add_parser("internet", help="List fixed internet plans, cheapest first")
    internet.add_argument("--min-speed", dest="min_speed_mbps", type=str, help="Minimum speed in Mbps")
    internet.add_argument("--provider", default="all")

    salary = sub.add_parser("salary", help="Convert a monthly salary (EUR)")
    salary.add_argument("direction", choices=("net", "gross"), help="net: gross -> net, gross: net -> gross")
    salary.add_argument("amount", type=str)

    convert = sub.add_parser("convert", help="Convert between EUR and BGN at the fixed peg")
    convert.add_argument("amount", type=str)
    convert.add_argument("--to", choices=("eur", "bgn"), default="eur")

    return parser.parse_args(argv)


def build_context(args: argparse.Namespace) -> ComparisonContext:
    repositories = reference_repositories()
    table = getattr(args, "table", None)
    if table is not None:
        repositories[args.command] = FILE_REPOSITORIES[args.command](table)
    return ComparisonContext(
        electricity_repository=repositories["electricity"],
        water_repository=repositories["water"],
        gas_repository=repositories["gas"],
        fuel_repository=repositories["fuel"],
        loan_repository=repositories["loans"],
    )


def print_rows(rows: list[dict[str, str]]) -> None:
    if not rows:
        print("No matching offer.")
        return
    columns = row_columns(rows)
    widths = {col: max(len(col), *(len(row.get(col, "")) for row in rows)) for col in columns}
    print("  ".join(col.ljust(widths[col]) for col in columns))
    print("  ".join("-" * widths[col] for col in columns))
    for row in rows:
        print("  ".join(row.get(col, "").ljust(widths[col]) for col in columns))


def run(args: argparse.Namespace) -> None:
    if args.command == "salary":
        use_case = ConvertSalaryUseCase()
        breakdown = use_case.from_gross(args.amount) if args.direction == "net" else use_case.from_net(args.amount)
        print_rows(breakdown_to_rows(breakdown))
        return
    if args.command == "convert":
        amount = ensure_quantity("amount", args.amount)
        if args.to == "eur":
            print(format_currency(bgn_to_eur(amount)))
        else:
            print(f"{format_number(eur_to_bgn(amount))} лв.")
        return

    if args.command in ("mobile", "internet"):
        repositories = reference_repositories()
        plans_use_case = BrowsePlansUseCase(repositories["mobile"], repositories["internet"])
        if args.command == "mobile":
            plans = plans_use_case.mobile(args.plan_type, args.min_data_gb, args.operator)
        else:
            plans = plans_use_case.internet(args.min_speed_mbps, args.provider)
        print_rows(plans_to_rows(plans))
        return

    use_case = CompareTariffsUseCase(build_context(args))
    if args.command == "electricity":
        response = use_case.electricity(ElectricityInput(args.day_kwh, args.night_kwh, args.meter))
    elif args.command == "water":
        response = use_case.water(WaterInput(args.consumption_m3))
    elif args.command == "gas":
        response = use_case.gas(GasInput(args.consumption_m3))
    elif args.command == "fuel":
        response = use_case.fuel(FuelInput(args.fuel_type, args.monthly_liters))
    else:
        response = use_case.loans(LoanInput(args.amount, args.term_months, args.loan_type))
    print_rows(results_to_rows(response.results))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except (TariffCheckerError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
