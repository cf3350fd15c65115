"""FastAPI dependency providers wiring repositories, the rate source and services."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exrates.core.config import settings
from exrates.db.session import get_db
from exrates.repositories.exchange_rate_repository import ExchangeRateRepository
from exrates.repositories.weekend_repository import WeekendRepository
from exrates.services.exchange_rate_service import ExchangeRateService
from exrates.services.nbrb_rate_source import NbrbRateSource
from exrates.services.weekend_service import WeekendService


def get_rate_source() -> NbrbRateSource:
    """Dependency to get NB RB rate source instance."""
    return NbrbRateSource(
        base_url=settings.nbrb_api_base_url,
        timeout_seconds=settings.nbrb_api_timeout_seconds
    )


def get_exchange_rate_repository(
    db: AsyncSession = Depends(get_db)
) -> ExchangeRateRepository:
    """Dependency to get ExchangeRateRepository instance."""
    return ExchangeRateRepository(db)


def get_weekend_repository(
    db: AsyncSession = Depends(get_db)
) -> WeekendRepository:
    """Dependency to get WeekendRepository instance."""
    return WeekendRepository(db)


def get_exchange_rate_service(
    exchange_rate_repository: ExchangeRateRepository = Depends(get_exchange_rate_repository),
    weekend_repository: WeekendRepository = Depends(get_weekend_repository),
    rate_source: NbrbRateSource = Depends(get_rate_source)
) -> ExchangeRateService:
    """Dependency to get ExchangeRateService instance."""
    return ExchangeRateService(
        exchange_rate_repository,
        weekend_repository,
        rate_source,
        calendar_timezone=settings.calendar_timezone
    )


def get_weekend_service(
    weekend_repository: WeekendRepository = Depends(get_weekend_repository)
) -> WeekendService:
    """Dependency to get WeekendService instance."""
    return WeekendService(weekend_repository)
