"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ============================================================================
# Parse schemas
# ============================================================================


class ParseRequest(BaseModel):
    """A free-form line to read a rate and hours from."""

    line: str = Field(..., description='Free-form text, e.g. "*50 40"')


class ParseResponse(BaseModel):
    """Rate and total hours read from a line."""

    rate: float
    hours: float


# ============================================================================
# Calculation schemas
# ============================================================================


class CalculateRequest(BaseModel):
    """Form submission for a wage calculation.

    When `line` is given it supplies the rate and worked hours; explicit
    `per_hour` / `worked_hours` are used otherwise. Missing values fall
    back to the configured defaults.
    """

    line: str | None = None
    per_hour: float | None = None
    worked_hours: float | None = None
    step_increase: float | None = None
    step_hours: float | None = None
    already_paid: float | None = None
    note: str = ""


class TierSegmentResponse(BaseModel):
    """One tier of the breakdown."""

    index: int
    hours: float
    rate: float
    amount: Decimal
    is_remainder: bool


class CalculateResponse(BaseModel):
    """Wage statement with two-decimal amounts."""

    per_hour: float
    worked_hours: float
    step_increase: float
    step_hours: float
    segments: list[TierSegmentResponse]
    total_earned: Decimal
    already_paid: Decimal
    remaining: Decimal
    summary: str


class DefaultsResponse(BaseModel):
    """Default form values."""

    per_hour: float
    worked_hours: float
    step_increase: float
    step_hours: float
    already_paid: float


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    code: str
    errors: list[str] = Field(default_factory=list)
