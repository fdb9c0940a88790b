"""Pytest fixtures for PayCalc tests."""

from __future__ import annotations

import pytest

from paycalc.calculators.types import WageInputs
from paycalc.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the standard form defaults."""
    return Settings(
        default_rate=50.0,
        default_hours=40.0,
        default_step_increase=10.0,
        default_step_hours=10.0,
        default_already_paid=0.0,
        max_tiers=10_000,
        host="127.0.0.1",
        port=8000,
        debug=False,
        log_level="WARNING",
    )


@pytest.fixture
def wage_inputs() -> WageInputs:
    """25.5h starting at 50/h, +10/h every 10h, 485 already paid."""
    return WageInputs(
        per_hour=50.0,
        worked_hours=25.5,
        step_increase=10.0,
        step_hours=10.0,
        already_paid=485.0,
    )
