# motorent/services/rental_service.py
"""
Rental lifecycle — create (validate → price → persist) and close
(validate → settle → mutate). A rental is Active from creation and Closed
after return; closed rentals cannot be reopened, settled again or deleted.

The controller gets its store, clock and id generator injected so tests can
pin dates and identifiers.

Creation checks, in order:
  driver exists → driver holds category A → motorcycle exists →
  motorcycle free → driver free → plan known
"""

from datetime import datetime, timedelta
from typing import Callable, List

from motorent.models.driver import Driver
from motorent.models.motorcycle import Motorcycle
from motorent.models.rental import Rental
from motorent.repositories.entity_store import EntityStore
from motorent.services import errors
from motorent.services.eligibility import (
    ROLE_DRIVER,
    ROLE_MOTORCYCLE,
    driver_qualifies_for_category_a,
    has_active_rental,
)
from motorent.services.pricing import Settlement, compute_rental_total, daily_rate_for_plan, settle
from motorent.utils.clock import as_naive_utc, new_id, utcnow
from motorent.utils.logger import get_logger

logger = get_logger(__name__)


class RentalLifecycleController:
    def __init__(self, store: EntityStore, clock: Callable[[], datetime] = utcnow,
                 id_factory: Callable[[], str] = new_id):
        self.store = store
        self.clock = clock
        self.id_factory = id_factory

    def create_rental(self, driver_id: str, motorcycle_id: str, plan_days: int) -> Rental:
        store = self.store
        with store.transaction():
            driver = store.get(Driver, driver_id)
            if not driver:
                raise errors.driver_not_found(driver_id)
            if not driver_qualifies_for_category_a(driver.driver_license_type):
                logger.warning(f"[RENTAL] Driver {driver_id} has license {driver.driver_license_type}, not category A")
                raise errors.driver_not_qualified(driver_id)

            if not store.get(Motorcycle, motorcycle_id):
                raise errors.motorcycle_not_found(motorcycle_id)
            if has_active_rental(store, motorcycle_id, ROLE_MOTORCYCLE):
                raise errors.motorcycle_already_rented(motorcycle_id)
            if has_active_rental(store, driver_id, ROLE_DRIVER):
                raise errors.driver_already_renting(driver_id)

            daily_rate = daily_rate_for_plan(plan_days)

            # Rentals start the calendar day after booking.
            today = as_naive_utc(self.clock()).replace(hour=0, minute=0, second=0, microsecond=0)
            start_date = today + timedelta(days=1)
            expected_end_date = start_date + timedelta(days=plan_days)

            rental = store.add(Rental(
                id=self.id_factory(),
                driver_id=driver_id,
                motorcycle_id=motorcycle_id,
                start_date=start_date,
                expected_end_date=expected_end_date,
                end_date=expected_end_date,
                plan_days=plan_days,
                daily_rate=daily_rate,
                total_value=compute_rental_total(daily_rate, plan_days),
                active=True,
            ))

        logger.info(f"[RENTAL] Created {rental.id}: driver={driver_id} motorcycle={motorcycle_id} "
                    f"plan={plan_days}d total={rental.total_value}")
        return rental

    def close_rental(self, rental_id: str, return_date: datetime) -> Settlement:
        """Close an active rental. Already-closed rentals report not found."""
        store = self.store
        return_date = as_naive_utc(return_date)
        with store.transaction():
            rental = store.first(Rental, Rental.id == rental_id, Rental.active.is_(True))
            if not rental:
                raise errors.rental_not_found(rental_id)

            settlement = settle(rental, return_date)
            # The baseline total is overwritten; no history is kept.
            store.update(rental, active=False, end_date=return_date,
                         total_value=settlement.total_value)

        logger.info(f"[RENTAL] Closed {rental_id}: total={settlement.total_value} "
                    f"penalty={settlement.penalty} extra={settlement.extra_charge}")
        return settlement

    def list_rentals(self) -> List[Rental]:
        with self.store.transaction():
            return self.store.find(Rental, order_by=Rental.start_date)
