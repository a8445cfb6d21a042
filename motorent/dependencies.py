# motorent/dependencies.py
"""FastAPI dependencies that hand the services their store and controller."""

from fastapi import Depends
from sqlalchemy.orm import Session
from motorent.database import get_db
from motorent.repositories.entity_store import SqlAlchemyEntityStore
from motorent.services.rental_service import RentalLifecycleController


def get_store(db: Session = Depends(get_db)) -> SqlAlchemyEntityStore:
    return SqlAlchemyEntityStore(db)


def get_rental_controller(store: SqlAlchemyEntityStore = Depends(get_store)) -> RentalLifecycleController:
    """System clock and uuid4 ids. Tests override this to pin both."""
    return RentalLifecycleController(store)
