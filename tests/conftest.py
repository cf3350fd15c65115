"""
Pytest configuration and shared fixtures for unit tests.

This module provides common fixtures for unit testing:
- Mock repositories, rate source and services (no real database or network)
- Sample rate and calendar records
- FastAPI test client with dependency overrides

Note: Database fixtures are not included because SQLite doesn't support
PostgreSQL schemas. For integration tests with database, use a real
PostgreSQL test database.
"""
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from exrates.api.main import app
from exrates.db.models.exchange_rate import ExchangeRate
from exrates.db.models.weekend import Weekend
from exrates.repositories.exchange_rate_repository import ExchangeRateRepository
from exrates.repositories.weekend_repository import WeekendRepository
from exrates.services.nbrb_rate_source import NbrbRateSource


# ==================== FastAPI App & Client Fixtures ====================

@pytest.fixture
def test_app():
    """Get the FastAPI application instance, clearing overrides afterwards."""
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """
    Create a synchronous test client for API endpoint testing.
    Routes get their services through app.dependency_overrides.
    """
    with TestClient(test_app) as test_client:
        yield test_client


# ==================== Mock Collaborator Fixtures ====================

@pytest.fixture
def mock_db_session():
    """Create a mock AsyncSession for repository testing."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


@pytest.fixture
def mock_exchange_rate_repository():
    """
    Mock rate store. Empty by default: no rates in range,
    currency unknown, save_all echoes its input.
    """
    mock = Mock(spec=ExchangeRateRepository)
    mock.find_by_currency_type = AsyncMock(return_value=[])
    mock.find_by_currency_type_and_date_between = AsyncMock(return_value=[])
    mock.exists_by_currency_type = AsyncMock(return_value=False)
    mock.save_all = AsyncMock(side_effect=lambda rates: list(rates))
    return mock


@pytest.fixture
def mock_weekend_repository():
    """Mock calendar store with no day-off records."""
    mock = Mock(spec=WeekendRepository)
    mock.find_all = AsyncMock(return_value=[])
    mock.find_all_by_date_between = AsyncMock(return_value=[])
    mock.find_by_calendar_date = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def mock_rate_source():
    """Mock NB RB rate source resolving every code to ID 431 with an empty series."""
    mock = Mock(spec=NbrbRateSource)
    mock.lookup_currency_id_async = AsyncMock(return_value="431")
    mock.fetch_series_async = AsyncMock(return_value=[])
    return mock


# ==================== Sample Test Data Fixtures ====================

def make_rate(day: datetime, rate: str, currency_type: str = "USD", rate_id: int = None) -> ExchangeRate:
    """Build a transient ExchangeRate model."""
    return ExchangeRate(id=rate_id, currency_type=currency_type, date=day, rate=Decimal(rate))


def make_weekend(day: date, is_day_off: bool = True) -> Weekend:
    """Build a transient Weekend model."""
    return Weekend(calendar_date=day, is_day_off=is_day_off)


@pytest.fixture
def sample_exchange_rate():
    """A stored USD rate."""
    return make_rate(datetime(2024, 1, 2), "3.2789", rate_id=1)


@pytest.fixture
def sample_weekend():
    """A stored day off."""
    return make_weekend(date(2024, 1, 6), True)


@pytest.fixture
def rate_factory():
    """Factory for transient ExchangeRate models: rate_factory(datetime, "2.5")."""
    return make_rate


@pytest.fixture
def weekend_factory():
    """Factory for transient Weekend models: weekend_factory(date, is_day_off)."""
    return make_weekend
