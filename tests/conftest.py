"""
Shared pytest fixtures for the forecast backend test suite.
"""

import os

# No artificial delay and a predictable environment under test
os.environ["SIMULATED_LATENCY_MS"] = "0"
os.environ["ENVIRONMENT"] = "testing"

from datetime import date

import pytest
from fastapi.testclient import TestClient

from core.config import get_settings

get_settings.cache_clear()

from agents.market.service import PriceForecastService
from agents.weather.service import WeatherService


@pytest.fixture
def weather_service() -> WeatherService:
    return WeatherService()

@pytest.fixture
def price_service() -> PriceForecastService:
    return PriceForecastService()

@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 30)

@pytest.fixture
def client():
    """Test client with the application lifespan (agents registered)."""
    from run import create_application

    with TestClient(create_application()) as c:
        yield c
