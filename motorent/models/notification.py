# motorent/models/notification.py
"""Fleet intake notifications. Written once when a new-fleet motorcycle is registered."""

from sqlalchemy import Column, DateTime, Integer, String
from motorent.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True)
    motorcycle_id = Column(String(100), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    notification_date = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<Notification {self.id} motorcycle={self.motorcycle_id} year={self.year}>"
