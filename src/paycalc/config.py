"""Configuration management for PayCalc."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from paycalc.calculators.types import WageInputs


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    default_rate: float
    default_hours: float
    default_step_increase: float
    default_step_hours: float
    default_already_paid: float
    max_tiers: int
    host: str
    port: int
    debug: bool
    log_level: str

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    def default_inputs(self) -> WageInputs:
        """Form values used on first display and after a reset."""
        return WageInputs(
            per_hour=self.default_rate,
            worked_hours=self.default_hours,
            step_increase=self.default_step_increase,
            step_hours=self.default_step_hours,
            already_paid=self.default_already_paid,
        )

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            default_rate=float(os.getenv("PAYCALC_DEFAULT_RATE", "50")),
            default_hours=float(os.getenv("PAYCALC_DEFAULT_HOURS", "40")),
            default_step_increase=float(os.getenv("PAYCALC_DEFAULT_STEP_INCREASE", "10")),
            default_step_hours=float(os.getenv("PAYCALC_DEFAULT_STEP_HOURS", "10")),
            default_already_paid=float(os.getenv("PAYCALC_DEFAULT_ALREADY_PAID", "0")),
            max_tiers=int(os.getenv("PAYCALC_MAX_TIERS", "10000")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


settings = get_settings()
