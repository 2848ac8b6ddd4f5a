"""
Command-line interface for AmortLab.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import subprocess
import sys
from pathlib import Path

from amortlab import __version__
from amortlab.core.params import DEFAULT_PARAMETERS, LoanParameters
from amortlab.core.scenario import ScenarioStore
from amortlab.core.schedule import compute
from amortlab.kpi import loan_summary
from amortlab.report import (
    comparison_table,
    key_insights,
    schedule_table,
    summary_rows,
)

logger = logging.getLogger(__name__)


class ScheduleEncoder(json.JSONEncoder):
    """JSON encoder that handles pandas objects and writes NaN/inf as null."""

    def iterencode(self, o, _one_shot=False):
        return super().iterencode(_without_non_finite(o), _one_shot)

    def default(self, obj):
        import pandas as pd

        if isinstance(obj, pd.DataFrame):
            return _without_non_finite(obj.to_dict("records"))
        elif isinstance(obj, pd.Series):
            return _without_non_finite(obj.to_dict())
        elif hasattr(obj, "item"):
            # numpy scalars
            return _without_non_finite(obj.item())
        return super().default(obj)


def _without_non_finite(data):
    if isinstance(data, float):
        return _finite_or_none(data)
    if isinstance(data, dict):
        return {key: _without_non_finite(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_without_non_finite(value) for value in data]
    return data


def _dump_json(data) -> None:
    json.dump(data, sys.stdout, indent=2, cls=ScheduleEncoder, allow_nan=False)
    sys.stdout.write("\n")


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def _params_from_args(args) -> LoanParameters:
    return LoanParameters.from_inputs(
        principal=args.principal,
        annual_rate_pct=args.rate,
        term_years=args.term,
        start_year=args.start_year,
    )


def parse_scenario_arg(text: str) -> tuple[str, LoanParameters]:
    """
    Parse ``NAME=PRINCIPAL,RATE,TERM[,START_YEAR]`` into a name and parameters.

    Raises:
        ValueError: If the text does not follow the format
    """
    name, sep, values = text.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Expected NAME=PRINCIPAL,RATE,TERM[,START_YEAR], got {text!r}")

    parts = [p.strip() for p in values.split(",")]
    if len(parts) not in (3, 4):
        raise ValueError(f"Expected 3 or 4 comma-separated values, got {values!r}")

    start_year = float(parts[3]) if len(parts) == 4 else DEFAULT_PARAMETERS.start_year
    params = LoanParameters.from_inputs(
        principal=float(parts[0]),
        annual_rate_pct=float(parts[1]),
        term_years=float(parts[2]),
        start_year=start_year,
    )
    return name.strip(), params


def cmd_summary(args) -> int:
    """Print the loan summary and key insights."""
    try:
        params = _params_from_args(args)
        result = compute(params)
        summary = loan_summary(params)

        if args.json:
            _dump_json(
                {
                    "params": params.to_dict(),
                    "monthly_payment": summary.monthly_payment,
                    "total_interest": summary.total_interest,
                    "total_cost": summary.total_cost,
                    "interest_ratio_pct": summary.interest_ratio_pct,
                    "efficiency": _finite_or_none(summary.efficiency),
                    "crossover": {
                        "month_number": result.crossover.month_number,
                        "year_fraction": result.crossover.year_fraction,
                        "percentage_of_term": result.crossover.percentage_of_term,
                    },
                    "equity_year": result.equity_year,
                }
            )
        else:
            print("Loan Summary")
            print("=" * 50)
            for label, value in summary_rows(summary):
                print(f"{label + ':':<30} {value}")
            print()
            print("Key Insights:")
            for line in key_insights(result, summary):
                print(f"  - {line}")

        return 0

    except Exception as e:
        print(f"Error computing summary: {e}", file=sys.stderr)
        return 1


def cmd_schedule(args) -> int:
    """Print the yearly amortization table."""
    try:
        params = _params_from_args(args)
        result = compute(params)

        if args.json:
            _dump_json(result.to_frame())
        else:
            print(schedule_table(result).to_string(index=False))

        return 0

    except Exception as e:
        print(f"Error computing schedule: {e}", file=sys.stderr)
        return 1


def cmd_compare(args) -> int:
    """Compare several scenarios given on the command line."""
    try:
        store = ScenarioStore()
        for text in args.scenario:
            name, params = parse_scenario_arg(text)
            store.save(name, params)

        comparison = store.compare()
        if args.json:
            _dump_json(comparison)
        else:
            print(comparison_table(comparison).to_string(index=False))

        return 0

    except Exception as e:
        print(f"Error comparing scenarios: {e}", file=sys.stderr)
        return 1


def cmd_ui(args) -> int:
    """Launch the Streamlit app."""
    app_path = Path(__file__).with_name("app.py")
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]
    if args.port:
        cmd += ["--server.port", str(args.port)]
    logger.debug("Launching %s", " ".join(cmd))
    try:
        return subprocess.call(cmd)
    except OSError as e:
        print(f"Error launching app: {e}", file=sys.stderr)
        return 1


def _add_loan_arguments(parser: argparse.ArgumentParser) -> None:
    defaults = DEFAULT_PARAMETERS
    parser.add_argument(
        "--principal",
        type=float,
        default=defaults.principal,
        help=f"Loan amount, min 1000 (default: {defaults.principal:.0f})",
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=defaults.annual_rate_pct,
        help=f"Annual interest rate in percent, 0.1-20 (default: {defaults.annual_rate_pct})",
    )
    parser.add_argument(
        "--term",
        type=int,
        default=defaults.term_years,
        help=f"Loan term in years, 1-50 (default: {defaults.term_years})",
    )
    parser.add_argument(
        "--start-year",
        type=int,
        default=defaults.start_year,
        help=f"First calendar year of the schedule, min 1900 (default: {defaults.start_year})",
    )
    parser.add_argument("--json", action="store_true", help="Output in JSON format")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amortlab", description="AmortLab - Loan amortization schedule simulator"
    )

    parser.add_argument("--version", action="version", version=f"AmortLab {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # Summary command
    summary_parser = subparsers.add_parser(
        "summary", help="Show monthly payment, totals and key insights"
    )
    _add_loan_arguments(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    # Schedule command
    schedule_parser = subparsers.add_parser(
        "schedule", help="Show the yearly amortization table"
    )
    _add_loan_arguments(schedule_parser)
    schedule_parser.set_defaults(func=cmd_schedule)

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare", help="Compare named scenarios side by side"
    )
    compare_parser.add_argument(
        "-s",
        "--scenario",
        action="append",
        required=True,
        metavar="NAME=PRINCIPAL,RATE,TERM[,START_YEAR]",
        help="Scenario definition (repeat for each scenario)",
    )
    compare_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    compare_parser.set_defaults(func=cmd_compare)

    # UI command
    ui_parser = subparsers.add_parser("ui", help="Launch the interactive Streamlit app")
    ui_parser.add_argument("--port", type=int, help="Port for the Streamlit server")
    ui_parser.set_defaults(func=cmd_ui)

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
