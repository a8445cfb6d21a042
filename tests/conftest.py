# tests/conftest.py
"""Shared fixtures: a fresh in-memory database per test, a store, and an API client."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date, datetime
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from motorent.database import build_engine, close_session, create_tables, get_db
from motorent.dependencies import get_rental_controller
from motorent.main import app
from motorent.models.driver import Driver
from motorent.models.motorcycle import Motorcycle
from motorent.repositories.entity_store import SqlAlchemyEntityStore
from motorent.services.rental_service import RentalLifecycleController

# Booking "now": rentals start 2024-05-11 00:00.
FIXED_NOW = datetime(2024, 5, 10, 14, 30, 0)


def fixed_clock():
    return FIXED_NOW


@pytest.fixture
def id_factory():
    seq = count(1)
    return lambda: f"id-{next(seq)}"


@pytest.fixture
def session_factory():
    """Sessions on one fresh in-memory database; all share its single connection."""
    engine = build_engine("sqlite://")
    create_tables(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    finally:
        engine.dispose()


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        close_session(db)


@pytest.fixture
def store(session):
    return SqlAlchemyEntityStore(session)


@pytest.fixture
def controller(store, id_factory):
    return RentalLifecycleController(store, clock=fixed_clock, id_factory=id_factory)


@pytest.fixture
def add_motorcycle(store):
    def _add(motorcycle_id="moto-1", plate="ABC1D23", year=2023, model="Mottu Sport"):
        with store.transaction():
            return store.add(Motorcycle(id=motorcycle_id, year=year, model=model, license_plate=plate))
    return _add


@pytest.fixture
def add_driver(store):
    def _add(driver_id="drv-1", cnpj="11222333000181", license_number="12345678900", license_type="A"):
        with store.transaction():
            return store.add(Driver(id=driver_id, name="João Silva", cnpj=cnpj,
                                    birth_date=date(1990, 1, 15),
                                    driver_license_number=license_number,
                                    driver_license_type=license_type))
    return _add


@pytest.fixture
def client(session, store, id_factory):
    def override_get_db():
        yield session

    def override_controller():
        return RentalLifecycleController(store, clock=fixed_clock, id_factory=id_factory)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rental_controller] = override_controller
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
