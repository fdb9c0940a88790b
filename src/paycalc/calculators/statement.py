"""Wage statement: validated inputs, tier breakdown and remaining balance."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from paycalc.calculators.errors import InputValidationError, InvalidHoursError
from paycalc.calculators.tiered_payment import calculate_breakdown, count_full_periods
from paycalc.calculators.types import WageInputs, WageStatement

OUTPUT_PRECISION = Decimal("0.01")  # 2 decimal places for display
DEFAULT_MAX_TIERS = 10_000


def round_to_cents(amount: float | Decimal) -> Decimal:
    """Round amount to 2 decimal places (cents)."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def validate_inputs(inputs: WageInputs, max_tiers: int = DEFAULT_MAX_TIERS) -> list[str]:
    """Validate wage inputs before calculation.

    Every field must be a finite, non-negative number, step hours must be
    strictly positive, and the hours may span at most `max_tiers` full tiers.

    Returns list of error messages (empty if all valid).
    """
    errors: list[str] = []

    if not math.isfinite(inputs.per_hour):
        errors.append("Starting hourly rate must be a finite number")
    elif inputs.per_hour < 0:
        errors.append("Starting hourly rate must be positive")

    if not math.isfinite(inputs.worked_hours):
        errors.append("Worked hours must be a finite number")
    elif inputs.worked_hours < 0:
        errors.append("Worked hours must be positive")

    if not math.isfinite(inputs.step_increase):
        errors.append("Rate increase per step must be a finite number")
    elif inputs.step_increase < 0:
        errors.append("Rate increase per step must be positive or zero")

    if not math.isfinite(inputs.step_hours):
        errors.append("Hours per step must be a finite number")
    elif inputs.step_hours <= 0:
        errors.append("Hours per step must be strictly positive")

    if not math.isfinite(inputs.already_paid):
        errors.append("Already paid amount must be a finite number")
    elif inputs.already_paid < 0:
        errors.append("Already paid amount cannot be negative")

    if errors:
        return errors

    try:
        tiers = count_full_periods(inputs.worked_hours, inputs.step_hours)
    except InvalidHoursError:
        errors.append("Worked hours are too large for the hours per step")
        return errors
    if tiers > max_tiers:
        errors.append(
            f"Too many rate steps: {tiers} exceeds the maximum of {max_tiers}"
        )

    return errors


def build_statement(
    inputs: WageInputs, max_tiers: int = DEFAULT_MAX_TIERS
) -> WageStatement:
    """Calculate the total earned and what is left to pay.

    Raises:
        InputValidationError: If any input is out of range, or the total
            is too large to represent
    """
    errors = validate_inputs(inputs, max_tiers=max_tiers)
    if errors:
        raise InputValidationError(errors)

    segments = calculate_breakdown(
        inputs.per_hour,
        inputs.worked_hours,
        inputs.step_increase,
        inputs.step_hours,
    )
    total = sum((segment.amount for segment in segments), 0.0)
    if not math.isfinite(total) or not math.isfinite(total - inputs.already_paid):
        raise InputValidationError(["Total earned is too large to represent"])

    return WageStatement(
        inputs=inputs,
        segments=segments,
        total_earned=round_to_cents(total),
        already_paid=round_to_cents(inputs.already_paid),
        remaining=round_to_cents(total - inputs.already_paid),
    )


def format_summary(statement: WageStatement) -> str:
    """Render a statement as plain text with two-decimal amounts."""
    inputs = statement.inputs
    lines = [
        "Inputs:",
        f"  Starting rate: {inputs.per_hour:.2f}/h",
        f"  Total worked hours: {inputs.worked_hours:.2f}h",
        f"  Increase per step: +{inputs.step_increase:.2f}/h",
        f"  Hours per step: {inputs.step_hours:.2f}h",
        "",
        "Breakdown:",
    ]
    for segment in statement.segments:
        label = "Remainder" if segment.is_remainder else f"Period {segment.index + 1}"
        lines.append(
            f"  {label}: {round_to_cents(segment.amount)} "
            f"({segment.hours:.2f}h at {segment.rate:.2f}/h)"
        )
    if not statement.segments:
        lines.append("  (no hours worked)")

    lines += [
        "",
        f"Total earned: {statement.total_earned}",
        f"Already paid: {statement.already_paid}",
        f"Remaining to pay: {statement.remaining}",
    ]

    note = inputs.note.strip()
    if note:
        lines += ["", "Notes:", f"  {note}"]

    return "\n".join(lines)
