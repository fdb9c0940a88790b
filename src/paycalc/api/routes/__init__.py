"""API routes."""

from paycalc.api.routes.health import router as health_router
from paycalc.api.routes.wages import router as wages_router

__all__ = ["health_router", "wages_router"]
