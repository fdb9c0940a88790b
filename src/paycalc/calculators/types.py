"""Type definitions for the wage calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class ParsedWage:
    """Rate and total hours read from a free-form line.

    Neither field is range-checked by the parser.
    """

    rate: float
    hours: float


@dataclass(frozen=True)
class TieredSchedule:
    """How the hourly rate escalates over worked hours."""

    starting_rate: float
    step_increase: float
    step_hours: float


@dataclass(frozen=True)
class TierSegment:
    """One block of hours billed at a single rate."""

    index: int  # 0-based tier number
    hours: float
    rate: float
    amount: float
    is_remainder: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "hours": self.hours,
            "rate": self.rate,
            "amount": self.amount,
            "is_remainder": self.is_remainder,
        }


@dataclass
class WageInputs:
    """The five numbers a front end collects, plus an optional note."""

    per_hour: float
    worked_hours: float
    step_increase: float
    step_hours: float
    already_paid: float = 0.0
    note: str = ""


@dataclass
class WageStatement:
    """Result of a full calculation, money rounded to cents."""

    inputs: WageInputs
    segments: list[TierSegment] = field(default_factory=list)
    total_earned: Decimal = Decimal("0")
    already_paid: Decimal = Decimal("0")
    remaining: Decimal = Decimal("0")

    @property
    def is_settled(self) -> bool:
        return self.remaining <= 0
