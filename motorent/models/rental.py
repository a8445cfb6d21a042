# motorent/models/rental.py
"""
Rental contracts. Created active; closed once on return and never deleted.
total_value holds the plan baseline until the rental is closed, then the settled total.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String
from motorent.database import Base


class Rental(Base):
    __tablename__ = "rentals"

    id = Column(String(36), primary_key=True)
    driver_id = Column(String(100), nullable=False, index=True)
    motorcycle_id = Column(String(100), nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    expected_end_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    plan_days = Column(Integer, nullable=False)
    daily_rate = Column(Numeric(10, 2), nullable=False)
    total_value = Column(Numeric(10, 2), nullable=False)
    active = Column(Boolean, default=True, nullable=False, index=True)

    def __repr__(self):
        return (f"<Rental {self.id} driver={self.driver_id} "
                f"motorcycle={self.motorcycle_id} active={self.active}>")
