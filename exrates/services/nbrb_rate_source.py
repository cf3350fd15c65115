"""NB RB (National Bank of the Republic of Belarus) exchange rate source."""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import httpx
from pydantic import ValidationError

from exrates.core.constants import NbrbConstants
from exrates.core.exceptions import SourceUnavailableError, UnknownCurrencyError
from exrates.schemas.nbrb import NbrbCurrencyRate, NbrbRateDynamicsItem

logger = logging.getLogger(__name__)

SOURCE_FAILURE_MESSAGE = "Failed to get data from NB RB API"


@dataclass(frozen=True)
class RatePoint:
    """One (date, rate) pair of a currency's official rate series."""
    date: datetime
    rate: Decimal


class NbrbRateSource:
    """Client for currency lookups and rate dynamics from the NB RB API."""

    def __init__(
        self,
        base_url: str = "https://api.nbrb.by",
        timeout_seconds: int = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize NB RB rate source.

        Args:
            base_url: Base URL for NB RB API (default: https://api.nbrb.by)
            timeout_seconds: Request timeout in seconds (default: 30)
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def lookup_currency_id_async(self, currency_code: str) -> str:
        """
        Resolve a letter currency code to the NB RB internal currency ID.

        Args:
            currency_code: ISO letter code, e.g. "USD"

        Returns:
            Currency ID as a string

        Raises:
            UnknownCurrencyError: If NB RB answers 404 for the code
            SourceUnavailableError: On any other transport or response failure
        """
        url = f"{self.base_url}{NbrbConstants.RATES_PATH}/{currency_code}"
        params = {"parammode": NbrbConstants.PARAM_MODE_LETTER_CODE}

        logger.info(f"Looking up NB RB currency ID for {currency_code}")

        try:
            async with self._client() as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as ex:
            logger.error(f"Error looking up NB RB currency {currency_code}: {ex}", exc_info=True)
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE) from ex

        if response.status_code == 404:
            logger.warning(f"NB RB does not know currency type {currency_code}")
            raise UnknownCurrencyError(f"Currency type not found: {currency_code}")

        if response.status_code != 200:
            logger.error(
                f"HTTP error looking up currency {currency_code}: {response.status_code} - {response.reason_phrase}"
            )
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE)

        try:
            currency = NbrbCurrencyRate.model_validate(response.json(parse_float=Decimal))
        except (ValueError, ValidationError) as ex:
            logger.error(f"Malformed NB RB currency response for {currency_code}: {ex}")
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE) from ex

        logger.info(f"Resolved {currency_code} to NB RB currency ID {currency.cur_id}")
        return str(currency.cur_id)

    async def fetch_series_async(
        self,
        currency_id: str,
        start_date: datetime,
        end_date: datetime
    ) -> List[RatePoint]:
        """
        Fetch the daily official rates of a currency over a date range.

        Args:
            currency_id: NB RB currency ID from lookup_currency_id_async
            start_date: First day of the range
            end_date: Last day of the range

        Returns:
            List of RatePoint in the order NB RB returned them

        Raises:
            SourceUnavailableError: On transport failure, non-200 status, or a
                null, empty or malformed body
        """
        url = f"{self.base_url}{NbrbConstants.DYNAMICS_PATH}/{currency_id}"
        params = {
            "startdate": start_date.isoformat(),
            "enddate": end_date.isoformat()
        }

        logger.info(f"Fetching NB RB rate dynamics for currency ID {currency_id} from {start_date} to {end_date}")

        try:
            async with self._client() as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as ex:
            logger.error(f"Error fetching NB RB rate dynamics for {currency_id}: {ex}", exc_info=True)
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE) from ex

        if response.status_code != 200:
            logger.error(
                f"HTTP error fetching rate dynamics for {currency_id}: {response.status_code} - {response.reason_phrase}"
            )
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE)

        try:
            payload = response.json(parse_float=Decimal)
        except ValueError as ex:
            logger.error(f"NB RB returned a non-JSON body for currency ID {currency_id}")
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE) from ex

        if not isinstance(payload, list):
            logger.error(f"NB RB returned no rate series for currency ID {currency_id}: {payload!r}")
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE)

        try:
            items = [NbrbRateDynamicsItem.model_validate(item) for item in payload]
        except ValidationError as ex:
            logger.error(f"Malformed NB RB rate dynamics for currency ID {currency_id}: {ex}")
            raise SourceUnavailableError(SOURCE_FAILURE_MESSAGE) from ex

        logger.info(f"Fetched {len(items)} rate points for currency ID {currency_id}")
        return [RatePoint(date=item.date, rate=item.cur_official_rate) for item in items]
