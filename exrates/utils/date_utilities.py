"""
Calendar-day helpers shared by the rate and weekend services.
"""
from datetime import date, datetime, time
from typing import Tuple, Union
import logging

from dateutil import tz
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

END_OF_DAY = time(23, 59, 59)


class DateUtilities:
    """
    Utility class for month boundaries and calendar-day normalization.
    Rate timestamps and day-off dates are only compared at day granularity.
    """
    
    @staticmethod
    def month_bounds(year: int, month: int) -> Tuple[date, date]:
        """
        Get the first and last calendar day of a month.
        
        Args:
            year: Calendar year
            month: Month number, 1 = January
        
        Returns:
            Tuple of (first_day, last_day), both inclusive
        
        Raises:
            ValueError: If month or year is out of range
        """
        first_day = date(year, month, 1)
        last_day = first_day + relativedelta(day=31)
        return first_day, last_day
    
    @staticmethod
    def start_of_day(value: date) -> datetime:
        """Midnight at the start of the given day."""
        return datetime.combine(value, time.min)
    
    @staticmethod
    def end_of_day(value: date) -> datetime:
        """23:59:59 on the given day."""
        return datetime.combine(value, END_OF_DAY)
    
    @staticmethod
    def to_calendar_day(value: Union[date, datetime], zone_name: str = "UTC") -> date:
        """
        Reduce a date or datetime to the calendar day it falls on in a zone.
        
        Naive datetimes are taken to be in the zone already. Aware datetimes
        are converted to the zone before the time of day is dropped.
        
        Args:
            value: Date or datetime to normalize
            zone_name: IANA zone name, e.g. "UTC" or "Europe/Minsk"
        
        Returns:
            date object
        
        Raises:
            ValueError: If the zone name is unknown
        """
        if not isinstance(value, datetime):
            return value
        
        if value.tzinfo is None:
            return value.date()
        
        return value.astimezone(DateUtilities._zone(zone_name)).date()
    
    @staticmethod
    def to_local_naive(value: datetime, zone_name: str = "UTC") -> datetime:
        """
        Express a datetime as a naive wall-clock time in a zone.
        
        Naive datetimes are returned unchanged. Aware datetimes are converted
        to the zone and their offset is dropped, matching the naive
        timestamps stored for rates.
        
        Raises:
            ValueError: If the zone name is unknown
        """
        if value.tzinfo is None:
            return value
        
        return value.astimezone(DateUtilities._zone(zone_name)).replace(tzinfo=None)
    
    @staticmethod
    def _zone(zone_name: str):
        zone = tz.gettz(zone_name)
        if zone is None:
            logger.error(f"Unknown calendar timezone '{zone_name}'")
            raise ValueError(f"Unknown timezone: {zone_name}")
        return zone
