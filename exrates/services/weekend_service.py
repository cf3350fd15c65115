"""Business logic service for calendar day-off records."""
import logging
from datetime import date
from typing import List

from exrates.core.exceptions import NotFoundError
from exrates.db.models.weekend import Weekend
from exrates.repositories.weekend_repository import WeekendRepository

logger = logging.getLogger(__name__)


class WeekendService:
    """Service layer for reading weekend and holiday flags."""
    
    def __init__(self, weekend_repository: WeekendRepository):
        self.weekend_repository = weekend_repository
    
    async def find_all_async(self) -> List[Weekend]:
        """Get every calendar record, earliest date first."""
        return await self.weekend_repository.find_all()
    
    async def find_by_date_async(self, calendar_date: date) -> Weekend:
        """
        Get the calendar record for one day.
        
        Raises:
            NotFoundError: If the calendar has no record for the date
        """
        weekend = await self.weekend_repository.find_by_calendar_date(calendar_date)
        if weekend is None:
            logger.info(f"No calendar record for {calendar_date}")
            raise NotFoundError(f"No calendar record found for {calendar_date}")
        return weekend
