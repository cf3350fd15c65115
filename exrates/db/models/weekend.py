"""Weekend model representing calendar day-off flags in the database."""
from sqlalchemy import Column, Integer, Date, Boolean

from exrates.core.config import settings
from exrates.db.session import Base


class Weekend(Base):
    """Calendar day flagged as a day off (weekend or holiday) or a business day."""
    __tablename__ = "weekends"
    __table_args__ = {'schema': settings.database_schema}
    
    # Primary Key
    weekend_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    
    calendar_date = Column(Date, nullable=False, index=True)
    is_day_off = Column(Boolean, nullable=False, default=False)
    
    def __repr__(self) -> str:
        return f"<Weekend(id={self.weekend_id}, date={self.calendar_date}, day_off={self.is_day_off})>"
