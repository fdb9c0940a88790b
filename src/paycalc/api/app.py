"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from paycalc import __version__
from paycalc.api.routes import health_router, wages_router
from paycalc.calculators import (
    InputValidationError,
    InvalidHoursError,
    InvalidScheduleError,
    ParseInputError,
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PayCalc API",
        description="Wages under a stepped hourly-rate schedule",
        version=__version__,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ParseInputError)
    async def parse_error_handler(
        request: Request, exc: ParseInputError
    ) -> JSONResponse:
        """Report a line that could not be parsed."""
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "code": exc.kind.value, "errors": []},
        )

    @app.exception_handler(InputValidationError)
    async def validation_error_handler(
        request: Request, exc: InputValidationError
    ) -> JSONResponse:
        """Report out-of-range wage inputs."""
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "code": "VALIDATION_ERROR",
                "errors": exc.errors,
            },
        )

    @app.exception_handler(InvalidScheduleError)
    async def schedule_error_handler(
        request: Request, exc: InvalidScheduleError
    ) -> JSONResponse:
        """Report a schedule with non-positive step hours."""
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "code": "INVALID_SCHEDULE", "errors": []},
        )

    @app.exception_handler(InvalidHoursError)
    async def hours_error_handler(
        request: Request, exc: InvalidHoursError
    ) -> JSONResponse:
        """Report worked hours that cannot be split into tiers."""
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "code": "INVALID_HOURS", "errors": []},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(wages_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
