"""Pydantic schemas for Weekends API responses."""
from pydantic import BaseModel, Field, ConfigDict
from datetime import date


class WeekendDto(BaseModel):
    calendar_date: date = Field(alias="calendarDate")
    is_day_off: bool = Field(alias="isDayOff")
    
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
