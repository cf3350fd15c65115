"""Pydantic schemas for Exchange Rates API responses."""
from pydantic import BaseModel, Field, ConfigDict, field_serializer
from datetime import datetime
from decimal import Decimal
from typing import Optional


class ExchangeRateDto(BaseModel):
    id: Optional[int] = None
    currency_type: str = Field(alias="currencyType")
    date: datetime
    rate: Decimal

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_serializer("rate", when_used="json")
    def serialize_rate(self, rate: Decimal) -> float:
        """Write the rate as a JSON number instead of a string."""
        return float(rate)


class ApiError(BaseModel):
    """Error body returned for every failed request."""
    status: str
    message: str
