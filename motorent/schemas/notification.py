# motorent/schemas/notification.py
from pydantic import BaseModel
from datetime import datetime


class NotificationOut(BaseModel):
    id: str
    motorcycle_id: str
    year: int
    notification_date: datetime

    class Config:
        from_attributes = True
