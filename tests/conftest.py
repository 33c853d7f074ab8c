from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.config import Settings
from investcalc.core.projection import ProjectionInput


@pytest.fixture()
def settings() -> Settings:
    return Settings(max_years=60)


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client


OPENING_VALUES = {
    "initial_investment": 10000,
    "monthly_investment": 5000,
    "annual_step_up": 5,
    "years": 5,
    "interest_rate": 7,
    "inflation_rate": 4.5,
}


@pytest.fixture()
def make_input():
    """Build the calculator's opening input, with optional overrides."""

    def _make(**overrides) -> ProjectionInput:
        return ProjectionInput(**{**OPENING_VALUES, **overrides})

    return _make
