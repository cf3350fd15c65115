"""Repository for ExchangeRate data access."""
from datetime import datetime
from typing import List, Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exrates.db.models.exchange_rate import ExchangeRate
from exrates.repositories.base import BaseRepository


class ExchangeRateRepository(BaseRepository[ExchangeRate]):
    """Repository for exchange rates queried by currency type and date range."""
    
    def __init__(self, db: AsyncSession):
        super().__init__(ExchangeRate, db)
    
    async def find_by_currency_type(self, currency_type: str) -> List[ExchangeRate]:
        """Get every stored rate for a currency type, oldest first."""
        return await self.get_all(
            limit=None,
            filters={"currency_type": currency_type},
            order_by=ExchangeRate.date
        )
    
    async def find_by_currency_type_and_date_between(
        self,
        currency_type: str,
        start_date: datetime,
        end_date: datetime
    ) -> List[ExchangeRate]:
        """Get rates for a currency type whose date lies in [start_date, end_date]."""
        result = await self.db.execute(
            select(ExchangeRate)
            .where(
                ExchangeRate.currency_type == currency_type,
                ExchangeRate.date.between(start_date, end_date)
            )
            .order_by(ExchangeRate.date)
        )
        return list(result.scalars().all())
    
    async def exists_by_currency_type(self, currency_type: str) -> bool:
        """Check whether any rate of this currency type is stored."""
        return await self.exists({"currency_type": currency_type})
    
    async def save_all(self, rates: Sequence[ExchangeRate]) -> List[ExchangeRate]:
        """Insert a batch of new rates."""
        return await self.create_many(rates)
