from datetime import date
from typing import List
from fastapi import APIRouter, Depends

from exrates.api.dependencies import get_weekend_service
from exrates.schemas.exchange_rate import ApiError
from exrates.schemas.weekend import WeekendDto
from exrates.services.weekend_service import WeekendService

router = APIRouter(prefix="/api/weekends", tags=["weekends"])


@router.get("", response_model=List[WeekendDto])
async def find_all_weekends(
    service: WeekendService = Depends(get_weekend_service)
):
    """Get every calendar day-off record, earliest date first."""
    weekends = await service.find_all_async()
    return [WeekendDto.model_validate(weekend) for weekend in weekends]


@router.get(
    "/{calendar_date}",
    response_model=WeekendDto,
    responses={404: {"model": ApiError}}
)
async def find_weekend_by_date(
    calendar_date: date,
    service: WeekendService = Depends(get_weekend_service)
):
    """
    Get the calendar record for one day.
    
    Args:
        calendar_date: Date in YYYY-MM-DD format
    
    Responses:
        200: Calendar record found
        404: No record for this date
    """
    weekend = await service.find_by_date_async(calendar_date)
    return WeekendDto.model_validate(weekend)
