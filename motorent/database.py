# motorent/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy. The default URL is an in-memory SQLite database shared by
every session of the process (StaticPool); PostgreSQL works through DATABASE_URL.
All models are auto-imported here so create_tables() creates every table in one call.
"""

import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from motorent.config import settings


def build_engine(url: str):
    """Engine for the given URL. In-memory SQLite must share one connection."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    return create_engine(
        url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
        echo=False,                  # Set True to log all SQL queries (debug only)
    )


engine = build_engine(settings.DATABASE_URL)

# Objects stay readable after commit; responses are built from the committed state.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

Base = declarative_base()

# One mutation domain per process, held by store transactions and session close.
# Returning a connection to the pool rolls it back, and in-memory SQLite
# shares that one connection between all sessions.
store_lock = threading.RLock()


def close_session(db):
    with store_lock:
        db.close()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        close_session(db)


def create_tables(bind=None):
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from motorent.models.motorcycle import Motorcycle         # noqa
    from motorent.models.driver import Driver                 # noqa
    from motorent.models.rental import Rental                 # noqa
    from motorent.models.notification import Notification     # noqa

    Base.metadata.create_all(bind=bind or engine)
