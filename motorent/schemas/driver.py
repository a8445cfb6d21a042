# motorent/schemas/driver.py
from pydantic import BaseModel, Field
from datetime import date


class DriverUpdate(BaseModel):
    name: str
    cnpj: str = Field(min_length=1)
    birth_date: date
    driver_license_number: str = Field(min_length=1)
    driver_license_type: str      # A | B | AB — checked by the service


class DriverIn(DriverUpdate):
    id: str = Field(min_length=1)


class DriverOut(BaseModel):
    id: str
    name: str
    cnpj: str
    birth_date: date
    driver_license_number: str
    driver_license_type: str

    class Config:
        from_attributes = True
