# motorent/schemas/motorcycle.py
from pydantic import BaseModel, Field


class MotorcycleIn(BaseModel):
    id: str = Field(min_length=1)
    year: int
    model: str
    license_plate: str = Field(min_length=1)


class MotorcycleUpdate(BaseModel):
    year: int
    model: str
    license_plate: str = Field(min_length=1)


class MotorcycleOut(BaseModel):
    id: str
    year: int
    model: str
    license_plate: str

    class Config:
        from_attributes = True
