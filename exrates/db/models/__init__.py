"""Models module initialization."""
from exrates.db.models.exchange_rate import ExchangeRate
from exrates.db.models.weekend import Weekend

__all__ = [
    "ExchangeRate",
    "Weekend",
]
