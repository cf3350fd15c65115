"""Error taxonomy raised by the service layer and mapped to HTTP by the API."""
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for service operations."""
    INVALID_RANGE = "invalid_range"
    UNKNOWN_CURRENCY = "unknown_currency"
    DUPLICATE = "duplicate"
    SOURCE_UNAVAILABLE = "source_unavailable"
    NO_DATA = "no_data"
    NOT_FOUND = "not_found"


class ExchangeRateServiceError(Exception):
    """Base class for failures raised by exchange rate operations."""
    error_code: ErrorCode = ErrorCode.SOURCE_UNAVAILABLE
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRangeError(ExchangeRateServiceError):
    """Start date after end date, or a month outside 1..12."""
    error_code = ErrorCode.INVALID_RANGE


class UnknownCurrencyError(ExchangeRateServiceError):
    """Currency code unknown locally or at the rate source."""
    error_code = ErrorCode.UNKNOWN_CURRENCY


class DuplicateDataError(ExchangeRateServiceError):
    """Rates already stored for part of the requested period."""
    error_code = ErrorCode.DUPLICATE


class SourceUnavailableError(ExchangeRateServiceError):
    """Rate source unreachable, failing, or returning an unusable body."""
    error_code = ErrorCode.SOURCE_UNAVAILABLE


class NoDataError(ExchangeRateServiceError):
    """Nothing left to average for the requested period."""
    error_code = ErrorCode.NO_DATA


class NotFoundError(ExchangeRateServiceError):
    """Requested record does not exist."""
    error_code = ErrorCode.NOT_FOUND
