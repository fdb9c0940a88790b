"""Wage line parsing and tiered payment calculation."""

from paycalc.calculators.errors import (
    EmptyRateError,
    InputValidationError,
    InvalidHoursError,
    InvalidNumberError,
    InvalidScheduleError,
    MissingMarkerError,
    NoHoursFoundError,
    ParseErrorKind,
    ParseInputError,
)
from paycalc.calculators.line_parser import extract_rate, extract_total_hours, parse_line
from paycalc.calculators.statement import (
    build_statement,
    format_summary,
    round_to_cents,
    validate_inputs,
)
from paycalc.calculators.tiered_payment import (
    calculate,
    calculate_breakdown,
    calculate_for_schedule,
    count_full_periods,
)
from paycalc.calculators.types import (
    ParsedWage,
    TieredSchedule,
    TierSegment,
    WageInputs,
    WageStatement,
)

__all__ = [
    # Parser
    "extract_rate",
    "extract_total_hours",
    "parse_line",
    # Calculator
    "calculate",
    "calculate_breakdown",
    "calculate_for_schedule",
    "count_full_periods",
    # Statement
    "build_statement",
    "format_summary",
    "round_to_cents",
    "validate_inputs",
    # Types
    "ParsedWage",
    "TieredSchedule",
    "TierSegment",
    "WageInputs",
    "WageStatement",
    # Errors
    "ParseErrorKind",
    "ParseInputError",
    "MissingMarkerError",
    "InvalidNumberError",
    "EmptyRateError",
    "NoHoursFoundError",
    "InvalidScheduleError",
    "InvalidHoursError",
    "InputValidationError",
]
