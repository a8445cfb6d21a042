# motorent/services/notification_service.py
"""
Fleet intake notifications.
Fired by motorcycle_service after a motorcycle is registered. Only the
new-fleet model year produces a notification; updates and deletes never do.
Delivery (push, email, ...) is out of scope — records are only stored.
"""

from datetime import datetime
from typing import Callable, List, Optional

from motorent.models.motorcycle import Motorcycle
from motorent.models.notification import Notification
from motorent.repositories.entity_store import EntityStore
from motorent.utils.clock import new_id, utcnow
from motorent.utils.logger import get_logger

logger = get_logger(__name__)

NEW_FLEET_YEAR = 2024


def notify_fleet_intake(
    store: EntityStore,
    motorcycle: Motorcycle,
    clock: Callable[[], datetime] = utcnow,
    id_factory: Callable[[], str] = new_id,
) -> Optional[Notification]:
    """Store a notification if `motorcycle` belongs to the new fleet year."""
    if motorcycle.year != NEW_FLEET_YEAR:
        return None

    notification = store.add(Notification(
        id=id_factory(),
        motorcycle_id=motorcycle.id,
        year=motorcycle.year,
        notification_date=clock(),
    ))
    logger.info(f"[NOTIFY] New {NEW_FLEET_YEAR} motorcycle in fleet: {motorcycle.id} ({motorcycle.license_plate})")
    return notification


def list_notifications(store: EntityStore) -> List[Notification]:
    with store.transaction():
        return store.find(Notification, order_by=Notification.notification_date)
