# motorent/schemas/rental.py
from pydantic import BaseModel
from datetime import datetime
from decimal import Decimal


class RentalCreate(BaseModel):
    driver_id: str
    motorcycle_id: str
    plan_days: int           # 7 | 15 | 30 | 45 | 50


class RentalOut(BaseModel):
    id: str
    driver_id: str
    motorcycle_id: str
    start_date: datetime
    expected_end_date: datetime
    end_date: datetime
    plan_days: int
    daily_rate: Decimal
    total_value: Decimal
    active: bool

    class Config:
        from_attributes = True


class ReturnRequest(BaseModel):
    return_date: datetime


class SettlementOut(BaseModel):
    total_value: Decimal
    penalty: Decimal
    extra_charge: Decimal

    class Config:
        from_attributes = True
