"""
Exchange rate ingestion and monthly averaging service.
"""
import logging
import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List

from exrates.core.config import settings
from exrates.core.constants import AveragingConstants
from exrates.core.exceptions import (
    DuplicateDataError,
    InvalidRangeError,
    NoDataError,
    UnknownCurrencyError,
)
from exrates.db.models.exchange_rate import ExchangeRate
from exrates.repositories.exchange_rate_repository import ExchangeRateRepository
from exrates.repositories.weekend_repository import WeekendRepository
from exrates.services.nbrb_rate_source import NbrbRateSource
from exrates.utils.date_utilities import DateUtilities

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """
    Service layer for exchange rate ingestion, retrieval and averaging.

    This implementation:
    - Ingests official rates from NB RB for a currency and date range, once
    - Returns stored rates for a currency
    - Computes a monthly geometric mean that skips days off
    """

    def __init__(
        self,
        exchange_rate_repository: ExchangeRateRepository,
        weekend_repository: WeekendRepository,
        rate_source: NbrbRateSource,
        calendar_timezone: str = settings.calendar_timezone
    ):
        """
        Initialize the exchange rate service.

        Args:
            exchange_rate_repository: Rate store
            weekend_repository: Calendar day-off store
            rate_source: External source of official rates
            calendar_timezone: Zone used to turn rate timestamps into calendar days
        """
        self.exchange_rate_repository = exchange_rate_repository
        self.weekend_repository = weekend_repository
        self.rate_source = rate_source
        self.calendar_timezone = calendar_timezone

    async def add_exchange_rate_async(
        self,
        currency_type: str,
        start_date: datetime,
        end_date: datetime
    ) -> List[ExchangeRate]:
        """
        Fetch official rates for a period from NB RB and store them.

        Args:
            currency_type: Currency letter code, e.g. "USD"
            start_date: Start of the period (inclusive)
            end_date: End of the period (inclusive)

        Bounds carrying a UTC offset are converted to the calendar timezone
        and made naive, like the stored rate timestamps.

        Returns:
            The stored ExchangeRate records

        Raises:
            InvalidRangeError: If start_date is after end_date
            DuplicateDataError: If rates already exist inside the period
            UnknownCurrencyError: If NB RB does not know the currency
            SourceUnavailableError: If NB RB cannot be reached or returns no data
        """
        start_date = DateUtilities.to_local_naive(start_date, self.calendar_timezone)
        end_date = DateUtilities.to_local_naive(end_date, self.calendar_timezone)

        if start_date > end_date:
            raise InvalidRangeError("Start date cannot be after end date")

        existing_rates = await self.exchange_rate_repository.find_by_currency_type_and_date_between(
            currency_type, start_date, end_date
        )
        if existing_rates:
            logger.warning(
                f"Rejected ingestion of {currency_type} from {start_date} to {end_date}: "
                f"{len(existing_rates)} rates already stored"
            )
            raise DuplicateDataError("Exchange rates already exist for the selected period")

        currency_id = await self.resolve_currency_identifier_async(currency_type)
        points = await self.rate_source.fetch_series_async(currency_id, start_date, end_date)

        exchange_rates = [
            ExchangeRate(id=None, currency_type=currency_type, date=point.date, rate=point.rate)
            for point in points
        ]
        saved = await self.exchange_rate_repository.save_all(exchange_rates)

        logger.info(f"Stored {len(saved)} {currency_type} rates from {start_date} to {end_date}")
        return saved

    async def get_all_exchange_rates_async(self, currency_type: str) -> List[ExchangeRate]:
        """
        Get every stored rate for a currency type.

        Raises:
            UnknownCurrencyError: If no rate of this currency type is stored
        """
        await self._ensure_currency_known_async(currency_type)
        return await self.exchange_rate_repository.find_by_currency_type(currency_type)

    async def calculate_average_exchange_rate_async(
        self,
        currency_type: str,
        month: int,
        year: int
    ) -> Decimal:
        """
        Calculate the geometric mean of a currency's rates over a month.

        Rates dated on a day flagged as a day off are left out. The product
        is exact; the root is taken in floating point and the result is
        rounded half-up to 2 decimal places.

        Args:
            currency_type: Currency letter code, e.g. "USD"
            month: Month number, 1 = January
            year: Calendar year

        Returns:
            Average rate with exactly 2 fractional digits

        Raises:
            UnknownCurrencyError: If no rate of this currency type is stored
            InvalidRangeError: If month is not in 1..12
            NoDataError: If no business-day rate exists in the month
        """
        await self._ensure_currency_known_async(currency_type)

        try:
            first_day, last_day = DateUtilities.month_bounds(year, month)
        except ValueError as ex:
            raise InvalidRangeError(f"Invalid month {month} of year {year}") from ex

        exchange_rates = await self.exchange_rate_repository.find_by_currency_type_and_date_between(
            currency_type,
            DateUtilities.start_of_day(first_day),
            DateUtilities.end_of_day(last_day)
        )
        weekends = await self.weekend_repository.find_all_by_date_between(first_day, last_day)
        days_off = {weekend.calendar_date for weekend in weekends if weekend.is_day_off}

        business_day_rates = [
            exchange_rate.rate
            for exchange_rate in exchange_rates
            if DateUtilities.to_calendar_day(exchange_rate.date, self.calendar_timezone) not in days_off
        ]

        if not business_day_rates:
            logger.warning(f"No {currency_type} business-day rates stored for {year}-{month:02d}")
            raise NoDataError("No exchange rates found for the specified period")

        product = self._exact_product(business_day_rates)
        average = self._nth_root(product, len(business_day_rates)).quantize(
            Decimal(AveragingConstants.QUANTUM), rounding=ROUND_HALF_UP
        )

        logger.info(
            f"Average {currency_type} rate for {year}-{month:02d} over "
            f"{len(business_day_rates)} business days: {average}"
        )
        return average

    async def resolve_currency_identifier_async(self, currency_type: str) -> str:
        """
        Resolve the NB RB currency ID for a currency type.

        Raises:
            UnknownCurrencyError: If NB RB answers not found
            SourceUnavailableError: On any other NB RB failure
        """
        return await self.rate_source.lookup_currency_id_async(currency_type)

    async def _ensure_currency_known_async(self, currency_type: str) -> None:
        if not await self.exchange_rate_repository.exists_by_currency_type(currency_type):
            logger.warning(f"No stored rates for currency type {currency_type}")
            raise UnknownCurrencyError(f"Currency type not found: {currency_type}")

    @staticmethod
    def _exact_product(values: List[Decimal]) -> Decimal:
        """Multiply decimals with enough precision that no digit is rounded away."""
        digits = sum(len(value.as_tuple().digits) for value in values)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits + 1)
            product = Decimal(1)
            for value in values:
                product *= value
            return product

    @staticmethod
    def _nth_root(product: Decimal, n: int) -> Decimal:
        """
        Take the n-th root of a positive product.

        The root is taken in floating point. Products outside the float
        range fall back to exp(ln(product) / n) in Decimal.
        """
        as_float = float(product)
        if as_float == 0.0 or math.isinf(as_float):
            logger.info(f"Product of {n} rates is outside the float range, taking the root in Decimal")
            return (product.ln() / n).exp()
        return Decimal(repr(as_float ** (1.0 / n)))
