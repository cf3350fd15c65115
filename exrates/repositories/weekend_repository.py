"""Repository for Weekend (calendar day-off) data access."""
from datetime import date
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exrates.db.models.weekend import Weekend
from exrates.repositories.base import BaseRepository


class WeekendRepository(BaseRepository[Weekend]):
    """Read-only repository for calendar day-off flags."""
    
    def __init__(self, db: AsyncSession):
        super().__init__(Weekend, db)
    
    async def find_by_calendar_date(self, calendar_date: date) -> Optional[Weekend]:
        """Get the calendar record for a single day."""
        result = await self.db.execute(
            select(Weekend).where(Weekend.calendar_date == calendar_date)
        )
        return result.scalars().first()
    
    async def find_all_by_date_between(self, start_date: date, end_date: date) -> List[Weekend]:
        """Get calendar records with calendar_date in [start_date, end_date]."""
        result = await self.db.execute(
            select(Weekend)
            .where(Weekend.calendar_date.between(start_date, end_date))
            .order_by(Weekend.calendar_date)
        )
        return list(result.scalars().all())
    
    async def find_all(self) -> List[Weekend]:
        """Get every calendar record, earliest date first."""
        return await self.get_all(limit=None, order_by=Weekend.calendar_date)
