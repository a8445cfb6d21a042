# motorent/models/driver.py
"""
Delivery drivers table.
cnpj and driver_license_number are unique (exact match); license type is A, B or AB.
"""

from sqlalchemy import Column, Date, String
from motorent.database import Base


class Driver(Base):
    __tablename__ = "drivers"

    id = Column(String(100), primary_key=True)
    name = Column(String(200), nullable=False)
    cnpj = Column(String(20), nullable=False, index=True)
    birth_date = Column(Date, nullable=False)
    driver_license_number = Column(String(50), nullable=False, index=True)
    driver_license_type = Column(String(2), nullable=False)

    def __repr__(self):
        return f"<Driver {self.id} cnpj={self.cnpj} license={self.driver_license_type}>"
