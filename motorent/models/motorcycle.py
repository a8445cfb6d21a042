# motorent/models/motorcycle.py
"""
Fleet table. One row per motorcycle, keyed by the caller-supplied id.
Plate uniqueness is case-insensitive and enforced by the eligibility rules,
not by the column constraint.
"""

from sqlalchemy import Column, Integer, String
from motorent.database import Base


class Motorcycle(Base):
    __tablename__ = "motorcycles"

    id = Column(String(100), primary_key=True)
    year = Column(Integer, nullable=False)
    model = Column(String(200), nullable=False)
    license_plate = Column(String(20), nullable=False, index=True)

    def __repr__(self):
        return f"<Motorcycle {self.id} plate={self.license_plate} year={self.year}>"
