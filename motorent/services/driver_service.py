# motorent/services/driver_service.py
"""
Delivery driver management.
Checks run in a fixed order so the reported error is deterministic:
existence → cnpj uniqueness → license number uniqueness → license type.
"""

from datetime import date
from typing import List, Optional

from motorent.models.driver import Driver
from motorent.repositories.entity_store import EntityStore
from motorent.services import errors
from motorent.services.eligibility import (
    ROLE_DRIVER,
    cnpj_is_unique,
    has_active_rental,
    license_number_is_unique,
    license_type_is_valid,
)
from motorent.utils.logger import get_logger

logger = get_logger(__name__)


def _get_or_raise(store: EntityStore, driver_id: str) -> Driver:
    driver = store.get(Driver, driver_id)
    if not driver:
        raise errors.driver_not_found(driver_id)
    return driver


def _validate(store: EntityStore, cnpj: str, license_number: str, license_type: str,
              exclude_id: Optional[str] = None):
    if not cnpj_is_unique(store, cnpj, exclude_id=exclude_id):
        raise errors.cnpj_exists(cnpj)
    if not license_number_is_unique(store, license_number, exclude_id=exclude_id):
        raise errors.license_number_exists(license_number)
    if not license_type_is_valid(license_type):
        raise errors.invalid_license_type(license_type)


def register_driver(store: EntityStore, driver_id: str, name: str, cnpj: str, birth_date: date,
                    driver_license_number: str, driver_license_type: str) -> Driver:
    with store.transaction():
        _validate(store, cnpj, driver_license_number, driver_license_type)
        if store.get(Driver, driver_id):
            raise errors.id_already_exists("Driver", driver_id)
        driver = store.add(Driver(
            id=driver_id,
            name=name,
            cnpj=cnpj,
            birth_date=birth_date,
            driver_license_number=driver_license_number,
            driver_license_type=driver_license_type,
        ))

    logger.info(f"[DRIVERS] Registered driver {driver_id} license={driver_license_type}")
    return driver


def list_drivers(store: EntityStore) -> List[Driver]:
    with store.transaction():
        return store.find(Driver, order_by=Driver.id)


def get_driver(store: EntityStore, driver_id: str) -> Driver:
    with store.transaction():
        return _get_or_raise(store, driver_id)


def update_driver(store: EntityStore, driver_id: str, name: str, cnpj: str, birth_date: date,
                  driver_license_number: str, driver_license_type: str) -> Driver:
    with store.transaction():
        driver = _get_or_raise(store, driver_id)
        _validate(store, cnpj, driver_license_number, driver_license_type, exclude_id=driver_id)
        store.update(
            driver,
            name=name,
            cnpj=cnpj,
            birth_date=birth_date,
            driver_license_number=driver_license_number,
            driver_license_type=driver_license_type,
        )

    logger.info(f"[DRIVERS] Updated driver {driver_id}")
    return driver


def delete_driver(store: EntityStore, driver_id: str) -> None:
    with store.transaction():
        driver = _get_or_raise(store, driver_id)
        if has_active_rental(store, driver_id, ROLE_DRIVER):
            logger.warning(f"[DRIVERS] Refused to remove {driver_id}: active rental")
            raise errors.has_active_rentals("Driver", driver_id)
        store.delete(driver)

    logger.info(f"[DRIVERS] Removed driver {driver_id}")
