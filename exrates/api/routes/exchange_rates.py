import logging
from datetime import datetime
from typing import List
from fastapi import APIRouter, Depends, Query, Response

from exrates.api.dependencies import get_exchange_rate_service
from exrates.schemas.exchange_rate import ApiError, ExchangeRateDto
from exrates.services.exchange_rate_service import ExchangeRateService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exchangeRates", tags=["exchange rates"])


@router.post(
    "",
    response_model=List[ExchangeRateDto],
    responses={400: {"model": ApiError}, 409: {"model": ApiError}, 500: {"model": ApiError}}
)
async def add_exchange_rate(
    currency_type: str = Query(..., alias="currencyType", min_length=1, max_length=3),
    start_date: datetime = Query(..., alias="startDate"),
    end_date: datetime = Query(..., alias="endDate"),
    service: ExchangeRateService = Depends(get_exchange_rate_service)
):
    """
    Fetch official rates for a period from NB RB and store them.
    
    Args:
        currencyType: Currency letter code, e.g. USD
        startDate: ISO-8601 date-time, start of the period
        endDate: ISO-8601 date-time, end of the period
        
    Returns:
        List of stored exchange rates
        
    Responses:
        200: Rates fetched and stored
        400: Start date after end date, or currency unknown to NB RB
        409: Rates already stored for part of the period
        500: NB RB unavailable or internal error
    """
    logger.info(f"Adding {currency_type} rates from {start_date} to {end_date}")
    exchange_rates = await service.add_exchange_rate_async(currency_type, start_date, end_date)
    return [ExchangeRateDto.model_validate(rate) for rate in exchange_rates]


@router.get(
    "",
    response_model=List[ExchangeRateDto],
    responses={400: {"model": ApiError}}
)
async def get_all_exchange_rates(
    currency_type: str = Query(..., alias="currencyType", min_length=1, max_length=3),
    service: ExchangeRateService = Depends(get_exchange_rate_service)
):
    """
    Get every stored rate for a currency type.
    
    Responses:
        200: Stored rates, oldest first
        400: No rate of this currency type is stored
    """
    exchange_rates = await service.get_all_exchange_rates_async(currency_type)
    return [ExchangeRateDto.model_validate(rate) for rate in exchange_rates]


@router.get(
    "/average",
    responses={
        200: {"content": {"application/json": {"schema": {"type": "number"}}}},
        400: {"model": ApiError},
        500: {"model": ApiError}
    }
)
async def calculate_average_exchange_rate(
    currency_type: str = Query(..., alias="currencyType", min_length=1, max_length=3),
    month: int = Query(...),
    year: int = Query(...),
    service: ExchangeRateService = Depends(get_exchange_rate_service)
):
    """
    Geometric mean of a currency's business-day rates over a month.
    
    Responses:
        200: Average rate as a JSON number with 2 decimal places
        400: Unknown currency type or month outside 1..12
        500: No business-day rates stored for the month
    """
    average = await service.calculate_average_exchange_rate_async(currency_type, month, year)
    # str() keeps both fractional digits, e.g. 4.00
    return Response(content=str(average), media_type="application/json")
