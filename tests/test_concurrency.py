# tests/test_concurrency.py
"""Concurrent requests against one in-memory database: invariants hold and no write is lost."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import threading
import uuid
from datetime import date, datetime

from motorent.database import close_session
from motorent.models.driver import Driver
from motorent.models.motorcycle import Motorcycle
from motorent.models.notification import Notification
from motorent.models.rental import Rental
from motorent.repositories.entity_store import SqlAlchemyEntityStore
from motorent.routers.health import health_check
from motorent.services import driver_service, motorcycle_service
from motorent.services.errors import RentalServiceError
from motorent.services.rental_service import RentalLifecycleController

THREADS = 8
NOW = datetime(2024, 5, 10, 14, 30)


def run_concurrently(session_factory, action, n=THREADS):
    """Run action(store, i) in n threads, each with its own session. Returns outcome codes."""
    barrier = threading.Barrier(n)
    outcomes = []
    outcomes_lock = threading.Lock()

    def worker(i):
        db = session_factory()
        try:
            barrier.wait()
            action(SqlAlchemyEntityStore(db), i)
            result = "ok"
        except RentalServiceError as exc:
            result = exc.code
        except Exception as exc:
            result = repr(exc)
        finally:
            close_session(db)
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert len(outcomes) == n
    return outcomes


def controller_for(store):
    return RentalLifecycleController(store, clock=lambda: NOW, id_factory=lambda: str(uuid.uuid4()))


def seed_drivers(store, n):
    with store.transaction():
        for i in range(n):
            store.add(Driver(id=f"drv-{i}", name=f"Driver {i}", cnpj=f"{i:014d}",
                             birth_date=date(1990, 1, 1), driver_license_number=f"CNH{i:08d}",
                             driver_license_type="A"))


def seed_motorcycles(store, n):
    with store.transaction():
        for i in range(n):
            store.add(Motorcycle(id=f"moto-{i}", year=2023, model="Mottu Sport",
                                 license_plate=f"ABC{i:04d}"))


class TestConcurrentRentals:
    def test_one_motorcycle_rented_once(self, session_factory, store):
        seed_drivers(store, THREADS)
        seed_motorcycles(store, 1)

        outcomes = run_concurrently(
            session_factory, lambda s, i: controller_for(s).create_rental(f"drv-{i}", "moto-0", 7))

        assert outcomes.count("ok") == 1
        assert outcomes.count("MOTORCYCLE_ALREADY_RENTED") == THREADS - 1
        assert len(store.find(Rental, Rental.active.is_(True))) == 1

    def test_one_driver_rents_once(self, session_factory, store):
        seed_drivers(store, 1)
        seed_motorcycles(store, THREADS)

        outcomes = run_concurrently(
            session_factory, lambda s, i: controller_for(s).create_rental("drv-0", f"moto-{i}", 15))

        assert outcomes.count("ok") == 1
        assert outcomes.count("DRIVER_ALREADY_RENTING") == THREADS - 1
        assert len(store.find(Rental, Rental.driver_id == "drv-0")) == 1

    def test_concurrent_returns_settle_once(self, session_factory, store):
        seed_drivers(store, 1)
        seed_motorcycles(store, 1)
        rental = controller_for(store).create_rental("drv-0", "moto-0", 7)

        outcomes = run_concurrently(
            session_factory, lambda s, i: controller_for(s).close_rental(rental.id, rental.expected_end_date))

        assert outcomes.count("ok") == 1
        assert outcomes.count("RENTAL_NOT_FOUND") == THREADS - 1


class TestConcurrentRegistration:
    def test_same_plate_registered_once(self, session_factory, store):
        def register(s, i):
            plate = "QWE2R34" if i % 2 else "qwe2r34"
            motorcycle_service.register_motorcycle(s, f"moto-{i}", 2024, "Mottu Sport", plate,
                                                   clock=lambda: NOW)

        outcomes = run_concurrently(session_factory, register)

        assert outcomes.count("ok") == 1
        assert outcomes.count("PLATE_ALREADY_EXISTS") == THREADS - 1
        assert len(store.find(Motorcycle)) == 1
        assert len(store.find(Notification)) == 1

    def test_same_cnpj_registered_once(self, session_factory, store):
        def register(s, i):
            driver_service.register_driver(s, f"drv-{i}", "Driver", "11222333000181",
                                           date(1990, 1, 1), f"CNH{i:08d}", "A")

        outcomes = run_concurrently(session_factory, register)

        assert outcomes.count("ok") == 1
        assert outcomes.count("CNPJ_EXISTS") == THREADS - 1
        assert len(store.find(Driver)) == 1


class TestHealthDuringWrite:
    def test_health_ping_waits_for_open_transaction(self, session_factory, store):
        results = {}

        def ping():
            db = session_factory()
            try:
                results["health"] = health_check(SqlAlchemyEntityStore(db))
            finally:
                close_session(db)

        with store.transaction():
            store.add(Motorcycle(id="moto-1", year=2024, model="Mottu Sport", license_plate="ABC1D23"))
            t = threading.Thread(target=ping)
            t.start()
            t.join(timeout=0.3)
            # Blocked on the store lock while the registration is open.
            assert t.is_alive()

        t.join(timeout=10)
        assert results["health"]["database"] == "ok"

        db = session_factory()
        try:
            assert [m.id for m in db.query(Motorcycle).all()] == ["moto-1"]
        finally:
            close_session(db)
