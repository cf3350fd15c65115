"""ExchangeRate model representing official daily rates in the database."""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Index

from exrates.core.config import settings
from exrates.db.session import Base


class ExchangeRate(Base):
    """Official rate of one currency at one effective timestamp."""
    __tablename__ = "exchange_rates"
    __table_args__ = (
        Index('ix_exchange_rates_currency_date', 'currency_type', 'date'),
        {'schema': settings.database_schema}
    )
    
    # Primary Key
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    # Currency letter code, e.g. "USD"
    currency_type = Column(String(3), nullable=False)
    
    # Effective timestamp of the rate as published by NB RB
    date = Column(DateTime, nullable=False)
    
    # Official rate
    rate = Column(Numeric(18, 8), nullable=False)
    
    def __repr__(self) -> str:
        return f"<ExchangeRate(id={self.id}, {self.currency_type}={self.rate}, date={self.date})>"
