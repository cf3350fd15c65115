"""Pydantic schemas for NB RB API response bodies."""
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from decimal import Decimal
from typing import Optional

from exrates.core.constants import NbrbConstants


class NbrbCurrencyRate(BaseModel):
    """Body of GET /exrates/rates/{code}?parammode=2."""
    cur_id: int = Field(alias=NbrbConstants.CURRENCY_ID_FIELD)
    date: Optional[datetime] = Field(None, alias=NbrbConstants.DATE_FIELD)
    cur_abbreviation: Optional[str] = Field(None, alias="Cur_Abbreviation")
    cur_scale: Optional[int] = Field(None, alias="Cur_Scale")
    cur_name: Optional[str] = Field(None, alias="Cur_Name")
    cur_official_rate: Optional[Decimal] = Field(None, alias=NbrbConstants.OFFICIAL_RATE_FIELD)
    
    model_config = ConfigDict(populate_by_name=True)


class NbrbRateDynamicsItem(BaseModel):
    """One element of GET /exrates/rates/dynamics/{id}."""
    cur_id: int = Field(alias=NbrbConstants.CURRENCY_ID_FIELD)
    date: datetime = Field(alias=NbrbConstants.DATE_FIELD)
    cur_official_rate: Decimal = Field(alias=NbrbConstants.OFFICIAL_RATE_FIELD)
    
    model_config = ConfigDict(populate_by_name=True)
