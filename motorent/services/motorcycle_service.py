# motorent/services/motorcycle_service.py
"""
Fleet management — register, look up, update and remove motorcycles.
Registration of a new-fleet year motorcycle fires notify_fleet_intake.
Removal is blocked while the motorcycle has an active rental.
"""

from datetime import datetime
from typing import Callable, List, Optional

from motorent.models.motorcycle import Motorcycle
from motorent.repositories.entity_store import EntityStore
from motorent.services import errors
from motorent.services.eligibility import ROLE_MOTORCYCLE, has_active_rental, plate_is_unique
from motorent.services.notification_service import notify_fleet_intake
from motorent.utils.clock import new_id, utcnow
from motorent.utils.logger import get_logger

logger = get_logger(__name__)


def _get_or_raise(store: EntityStore, motorcycle_id: str) -> Motorcycle:
    motorcycle = store.get(Motorcycle, motorcycle_id)
    if not motorcycle:
        raise errors.motorcycle_not_found(motorcycle_id)
    return motorcycle


def register_motorcycle(
    store: EntityStore,
    motorcycle_id: str,
    year: int,
    model: str,
    license_plate: str,
    clock: Callable[[], datetime] = utcnow,
    id_factory: Callable[[], str] = new_id,
) -> Motorcycle:
    with store.transaction():
        if not plate_is_unique(store, license_plate):
            logger.warning(f"[FLEET] Rejected registration: plate {license_plate} already exists")
            raise errors.plate_already_exists(license_plate)
        if store.get(Motorcycle, motorcycle_id):
            raise errors.id_already_exists("Motorcycle", motorcycle_id)

        motorcycle = store.add(Motorcycle(id=motorcycle_id, year=year, model=model,
                                          license_plate=license_plate))
        notify_fleet_intake(store, motorcycle, clock=clock, id_factory=id_factory)

    logger.info(f"[FLEET] Registered motorcycle {motorcycle_id} plate={license_plate} year={year}")
    return motorcycle


def list_motorcycles(store: EntityStore, license_plate: Optional[str] = None) -> List[Motorcycle]:
    """All motorcycles, optionally filtered by a case-insensitive plate substring."""
    criteria = []
    if license_plate:
        criteria.append(Motorcycle.license_plate.icontains(license_plate, autoescape=True))
    with store.transaction():
        return store.find(Motorcycle, *criteria, order_by=Motorcycle.id)


def get_motorcycle(store: EntityStore, motorcycle_id: str) -> Motorcycle:
    with store.transaction():
        return _get_or_raise(store, motorcycle_id)


def update_motorcycle(store: EntityStore, motorcycle_id: str, year: int, model: str,
                      license_plate: str) -> Motorcycle:
    with store.transaction():
        motorcycle = _get_or_raise(store, motorcycle_id)
        if not plate_is_unique(store, license_plate, exclude_id=motorcycle_id):
            raise errors.plate_already_exists(license_plate)
        store.update(motorcycle, license_plate=license_plate, model=model, year=year)

    logger.info(f"[FLEET] Updated motorcycle {motorcycle_id} plate={license_plate}")
    return motorcycle


def delete_motorcycle(store: EntityStore, motorcycle_id: str) -> None:
    with store.transaction():
        motorcycle = _get_or_raise(store, motorcycle_id)
        if has_active_rental(store, motorcycle_id, ROLE_MOTORCYCLE):
            logger.warning(f"[FLEET] Refused to remove {motorcycle_id}: active rental")
            raise errors.has_active_rentals("Motorcycle", motorcycle_id)
        store.delete(motorcycle)

    logger.info(f"[FLEET] Removed motorcycle {motorcycle_id}")
