# motorent/services/eligibility.py
"""
Eligibility rules — read-only predicates over the entity store.
Used by motorcycle_service, driver_service and the rental lifecycle controller
to gate registration, updates, deletion and rental creation.
"""

from typing import Optional
from sqlalchemy import func
from motorent.models.driver import Driver
from motorent.models.motorcycle import Motorcycle
from motorent.models.rental import Rental
from motorent.repositories.entity_store import EntityStore

LICENSE_TYPES = frozenset({"A", "B", "AB"})
CATEGORY_A = "A"

ROLE_DRIVER = "driver"
ROLE_MOTORCYCLE = "motorcycle"


def plate_is_unique(store: EntityStore, plate: str, exclude_id: Optional[str] = None) -> bool:
    """Case-insensitive; the motorcycle being updated is ignored."""
    criteria = [func.lower(Motorcycle.license_plate) == plate.lower()]
    if exclude_id is not None:
        criteria.append(Motorcycle.id != exclude_id)
    return not store.exists(Motorcycle, *criteria)


def cnpj_is_unique(store: EntityStore, cnpj: str, exclude_id: Optional[str] = None) -> bool:
    criteria = [Driver.cnpj == cnpj]
    if exclude_id is not None:
        criteria.append(Driver.id != exclude_id)
    return not store.exists(Driver, *criteria)


def license_number_is_unique(store: EntityStore, number: str, exclude_id: Optional[str] = None) -> bool:
    criteria = [Driver.driver_license_number == number]
    if exclude_id is not None:
        criteria.append(Driver.id != exclude_id)
    return not store.exists(Driver, *criteria)


def license_type_is_valid(license_type: str) -> bool:
    return license_type in LICENSE_TYPES


def driver_qualifies_for_category_a(license_type: str) -> bool:
    """License types A and AB ride motorcycles; B does not."""
    return CATEGORY_A in (license_type or "")


def has_active_rental(store: EntityStore, entity_id: str, role: str) -> bool:
    if role == ROLE_DRIVER:
        column = Rental.driver_id
    elif role == ROLE_MOTORCYCLE:
        column = Rental.motorcycle_id
    else:
        raise ValueError(f"Unknown rental role: {role!r}")
    return store.exists(Rental, column == entity_id, Rental.active.is_(True))
