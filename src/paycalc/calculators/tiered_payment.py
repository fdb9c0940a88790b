"""Tiered hourly-rate payment calculation."""

from __future__ import annotations

import logging
import math

from paycalc.calculators.errors import InvalidHoursError, InvalidScheduleError
from paycalc.calculators.types import TieredSchedule, TierSegment

logger = logging.getLogger(__name__)


def count_full_periods(worked_hours: float, step_hours: float) -> int:
    """Number of complete tiers in `worked_hours`.

    Raises:
        InvalidScheduleError: If `step_hours` is not strictly positive
        InvalidHoursError: If `worked_hours` is not a finite number
    """
    if not math.isfinite(step_hours) or step_hours <= 0:
        raise InvalidScheduleError(step_hours)
    periods = worked_hours / step_hours
    if not math.isfinite(periods):
        raise InvalidHoursError(worked_hours)
    return math.floor(periods)


def calculate_breakdown(
    starting_rate: float,
    worked_hours: float,
    step_increase: float,
    step_hours: float,
) -> list[TierSegment]:
    """Split worked hours into tiers billed at escalating rates.

    Tier k (0-indexed) covers `step_hours` hours at
    ``starting_rate + k * step_increase``. Hours left after the last full
    tier are billed at the rate reached after it.

    Raises:
        InvalidScheduleError: If `step_hours` is not strictly positive
        InvalidHoursError: If `worked_hours` is not a finite number
    """
    full_periods = count_full_periods(worked_hours, step_hours)

    segments: list[TierSegment] = []
    rate = starting_rate

    for period in range(full_periods):
        amount = step_hours * rate
        segments.append(
            TierSegment(index=period, hours=step_hours, rate=rate, amount=amount)
        )
        logger.debug(
            "Period %d: %.2f (%sh at %.2f/h)", period + 1, amount, step_hours, rate
        )
        rate += step_increase

    remainder = worked_hours - full_periods * step_hours
    if remainder > 0:
        amount = remainder * rate
        segments.append(
            TierSegment(
                index=max(full_periods, 0),
                hours=remainder,
                rate=rate,
                amount=amount,
                is_remainder=True,
            )
        )
        logger.debug("Remainder: %.2f (%.2fh at %.2f/h)", amount, remainder, rate)

    return segments


def calculate(
    starting_rate: float,
    worked_hours: float,
    step_increase: float,
    step_hours: float,
) -> float:
    """Compute the total earned under a tiered rate schedule.

    Example: 25h starting at 50/h, +10/h every 10h is
    10h at 50 + 10h at 60 + 5h at 70 = 1450.
    """
    segments = calculate_breakdown(starting_rate, worked_hours, step_increase, step_hours)
    total = 0.0
    for segment in segments:
        total += segment.amount

    logger.debug("Total payment: %.2f over %d segment(s)", total, len(segments))
    return total


def calculate_for_schedule(schedule: TieredSchedule, worked_hours: float) -> float:
    """Total earned for `worked_hours` under `schedule`."""
    return calculate(
        schedule.starting_rate,
        worked_hours,
        schedule.step_increase,
        schedule.step_hours,
    )
