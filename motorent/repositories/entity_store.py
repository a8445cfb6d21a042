# motorent/repositories/entity_store.py
"""
Entity store used by the services and the rental lifecycle controller.

EntityStore is the contract the core depends on: insert, lookup by id,
update in place, delete, predicate scans, and a transaction scope.
SqlAlchemyEntityStore backs it with a SQLAlchemy session (in-memory SQLite
by default, PostgreSQL through DATABASE_URL).

Every core operation runs inside transaction(). One process-wide re-entrant
lock serializes them, so uniqueness and one-active-rental checks cannot
interleave with another request's write, and reads never observe a
half-applied mutation.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from motorent.database import store_lock
from motorent.utils.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class EntityStore(ABC):
    """Storage contract for motorcycles, drivers, rentals and notifications."""

    @abstractmethod
    def transaction(self) -> Iterator[None]:
        """Context manager: serialize, then commit on success or roll back on error."""

    @abstractmethod
    def add(self, entity: T) -> T:
        pass

    @abstractmethod
    def get(self, model: Type[T], entity_id: str) -> Optional[T]:
        pass

    @abstractmethod
    def update(self, entity: T, **fields: Any) -> T:
        pass

    @abstractmethod
    def delete(self, entity: Any) -> None:
        pass

    @abstractmethod
    def find(self, model: Type[T], *criteria, order_by=None) -> List[T]:
        """All rows of `model` matching every criterion."""

    @abstractmethod
    def first(self, model: Type[T], *criteria) -> Optional[T]:
        pass

    def exists(self, model: Type[T], *criteria) -> bool:
        return self.first(model, *criteria) is not None


class SqlAlchemyEntityStore(EntityStore):
    _lock = store_lock

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self):
        with self._lock:
            try:
                yield
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

    def add(self, entity):
        self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, model, entity_id):
        return self.db.get(model, entity_id)

    def update(self, entity, **fields):
        for name, value in fields.items():
            if not hasattr(entity, name):
                raise AttributeError(f"{type(entity).__name__} has no field '{name}'")
            setattr(entity, name, value)
        self.db.flush()
        return entity

    def delete(self, entity):
        self.db.delete(entity)
        self.db.flush()

    def find(self, model, *criteria, order_by=None):
        q = self.db.query(model)
        if criteria:
            q = q.filter(*criteria)
        if order_by is not None:
            q = q.order_by(order_by)
        return q.all()

    def first(self, model, *criteria):
        return self.db.query(model).filter(*criteria).first()
