"""Wage parsing and calculation endpoints."""

from fastapi import APIRouter, status

from paycalc.api.dependencies import AppSettings
from paycalc.api.schemas import (
    CalculateRequest,
    CalculateResponse,
    DefaultsResponse,
    ErrorResponse,
    ParseRequest,
    ParseResponse,
    TierSegmentResponse,
)
from paycalc.calculators import (
    WageInputs,
    build_statement,
    format_summary,
    parse_line,
    round_to_cents,
)

router = APIRouter(prefix="/wages", tags=["wages"])


def _pick(value: float | None, default: float) -> float:
    return default if value is None else value


@router.post(
    "/parse",
    response_model=ParseResponse,
    responses={422: {"model": ErrorResponse}},
)
def parse_wage_line(payload: ParseRequest) -> ParseResponse:
    """Read the starting rate and total hours from a free-form line."""
    parsed = parse_line(payload.line)
    return ParseResponse(rate=parsed.rate, hours=parsed.hours)


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
def calculate_wages(
    payload: CalculateRequest,
    settings: AppSettings,
) -> CalculateResponse:
    """Calculate total earned and remaining balance for a form submission."""
    defaults = settings.default_inputs()

    per_hour = _pick(payload.per_hour, defaults.per_hour)
    worked_hours = _pick(payload.worked_hours, defaults.worked_hours)
    if payload.line is not None:
        parsed = parse_line(payload.line)
        per_hour, worked_hours = parsed.rate, parsed.hours

    inputs = WageInputs(
        per_hour=per_hour,
        worked_hours=worked_hours,
        step_increase=_pick(payload.step_increase, defaults.step_increase),
        step_hours=_pick(payload.step_hours, defaults.step_hours),
        already_paid=_pick(payload.already_paid, defaults.already_paid),
        note=payload.note,
    )
    statement = build_statement(inputs, max_tiers=settings.max_tiers)

    return CalculateResponse(
        per_hour=inputs.per_hour,
        worked_hours=inputs.worked_hours,
        step_increase=inputs.step_increase,
        step_hours=inputs.step_hours,
        segments=[
            TierSegmentResponse(
                index=segment.index,
                hours=segment.hours,
                rate=segment.rate,
                amount=round_to_cents(segment.amount),
                is_remainder=segment.is_remainder,
            )
            for segment in statement.segments
        ],
        total_earned=statement.total_earned,
        already_paid=statement.already_paid,
        remaining=statement.remaining,
        summary=format_summary(statement),
    )


@router.get("/defaults", response_model=DefaultsResponse)
async def get_defaults(settings: AppSettings) -> DefaultsResponse:
    """Return the default form values."""
    defaults = settings.default_inputs()
    return DefaultsResponse(
        per_hour=defaults.per_hour,
        worked_hours=defaults.worked_hours,
        step_increase=defaults.step_increase,
        step_hours=defaults.step_hours,
        already_paid=defaults.already_paid,
    )
