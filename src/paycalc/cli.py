"""PayCalc Command Line Interface.

Usage:
    paycalc parse "rate *50 for 40 hours"
    paycalc calculate --line "*50 40" --step-increase 10 --step-hours 10
    paycalc calculate --rate 50 --hours 25.5 --already-paid 500 --json
    paycalc defaults
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from paycalc.calculators import (
    InputValidationError,
    InvalidHoursError,
    InvalidScheduleError,
    ParseInputError,
    WageInputs,
    build_statement,
    format_summary,
    parse_line,
    round_to_cents,
)
from paycalc.config import Settings, get_settings


def parse_amount(s: str) -> float:
    """Parse a number, accepting a comma as decimal separator."""
    try:
        return float(s.replace(",", "."))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {s!r}") from None


class PayCalcCli:
    """PayCalc Command Line Interface."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="paycalc",
            description="Wages under a stepped hourly-rate schedule",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log each tier of the calculation",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # parse command
        parse = subparsers.add_parser(
            "parse",
            help="Read a rate and total hours from a free-form line",
        )
        parse.add_argument("line", type=str, help='Input line, e.g. "*50 40"')

        # calculate command
        calculate = subparsers.add_parser(
            "calculate",
            help="Calculate total earned and remaining balance",
        )
        calculate.add_argument(
            "--line",
            type=str,
            help="Free-form line holding the rate (after *) and the hours",
        )
        calculate.add_argument(
            "--rate",
            type=parse_amount,
            help="Starting hourly rate (ignored when --line is given)",
        )
        calculate.add_argument(
            "--hours",
            type=parse_amount,
            help="Total worked hours (ignored when --line is given)",
        )
        calculate.add_argument(
            "--step-increase",
            type=parse_amount,
            help="Rate increase per step",
        )
        calculate.add_argument(
            "--step-hours",
            type=parse_amount,
            help="Number of hours per step",
        )
        calculate.add_argument(
            "--already-paid",
            type=parse_amount,
            help="Amount already paid",
        )
        calculate.add_argument(
            "--note",
            type=str,
            default="",
            help="Free-form note added to the summary",
        )
        calculate.add_argument(
            "--json",
            action="store_true",
            help="Print the statement as JSON",
        )

        # defaults command
        subparsers.add_parser(
            "defaults",
            help="Show the configured default values",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run CLI with arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        logging.basicConfig(
            level=logging.DEBUG if parsed.verbose else self.settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )

        handlers = {
            "parse": self._cmd_parse,
            "calculate": self._cmd_calculate,
            "defaults": self._cmd_defaults,
        }

        handler = handlers.get(parsed.command)
        if handler:
            try:
                return handler(parsed)
            except ParseInputError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            except InputValidationError as e:
                print("Error: invalid input", file=sys.stderr)
                for error in e.errors:
                    print(f"  - {error}", file=sys.stderr)
                return 1
            except (InvalidScheduleError, InvalidHoursError) as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _cmd_parse(self, args: argparse.Namespace) -> int:
        """Read a rate and hours from a line."""
        parsed = parse_line(args.line)
        print(f"Starting rate: {parsed.rate:.2f}/h")
        print(f"Total worked hours: {parsed.hours:.2f}h")
        return 0

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate a wage statement."""
        defaults = self.settings.default_inputs()

        if args.line is not None:
            parsed = parse_line(args.line)
            per_hour, worked_hours = parsed.rate, parsed.hours
        else:
            per_hour = defaults.per_hour if args.rate is None else args.rate
            worked_hours = defaults.worked_hours if args.hours is None else args.hours

        inputs = WageInputs(
            per_hour=per_hour,
            worked_hours=worked_hours,
            step_increase=(
                defaults.step_increase if args.step_increase is None else args.step_increase
            ),
            step_hours=defaults.step_hours if args.step_hours is None else args.step_hours,
            already_paid=(
                defaults.already_paid if args.already_paid is None else args.already_paid
            ),
            note=args.note,
        )
        statement = build_statement(inputs, max_tiers=self.settings.max_tiers)

        if args.json:
            output: dict[str, Any] = {
                "per_hour": inputs.per_hour,
                "worked_hours": inputs.worked_hours,
                "step_increase": inputs.step_increase,
                "step_hours": inputs.step_hours,
                "segments": [
                    {**segment.to_dict(), "amount": str(round_to_cents(segment.amount))}
                    for segment in statement.segments
                ],
                "total_earned": str(statement.total_earned),
                "already_paid": str(statement.already_paid),
                "remaining": str(statement.remaining),
            }
            print(json.dumps(output, indent=2))
        else:
            print(format_summary(statement))

        return 0

    def _cmd_defaults(self, args: argparse.Namespace) -> int:
        """Show configured defaults."""
        defaults = self.settings.default_inputs()
        print(f"Starting rate: {defaults.per_hour:.2f}/h")
        print(f"Total worked hours: {defaults.worked_hours:.2f}h")
        print(f"Increase per step: +{defaults.step_increase:.2f}/h")
        print(f"Hours per step: {defaults.step_hours:.2f}h")
        print(f"Already paid: {defaults.already_paid:.2f}")
        return 0


def main() -> int:
    """CLI entry point."""
    cli = PayCalcCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
