"""PayCalc: wages under a stepped hourly-rate schedule.

Reads a starting rate and worked hours from a free-form line such as
``"*50 40"`` and bills the hours in tiers whose rate grows by a fixed
amount every N hours.
"""

from paycalc.calculators import (
    EmptyRateError,
    InputValidationError,
    InvalidHoursError,
    InvalidNumberError,
    InvalidScheduleError,
    MissingMarkerError,
    NoHoursFoundError,
    ParsedWage,
    ParseErrorKind,
    ParseInputError,
    TieredSchedule,
    TierSegment,
    WageInputs,
    WageStatement,
    build_statement,
    calculate,
    calculate_breakdown,
    calculate_for_schedule,
    count_full_periods,
    extract_rate,
    extract_total_hours,
    format_summary,
    parse_line,
    validate_inputs,
)

__version__ = "0.1.0"

__all__ = [
    "extract_rate",
    "extract_total_hours",
    "parse_line",
    "calculate",
    "calculate_breakdown",
    "calculate_for_schedule",
    "count_full_periods",
    "build_statement",
    "format_summary",
    "validate_inputs",
    "ParsedWage",
    "TieredSchedule",
    "TierSegment",
    "WageInputs",
    "WageStatement",
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
