# motorent/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from motorent.dependencies import get_store
from motorent.repositories.entity_store import SqlAlchemyEntityStore
from motorent.utils.clock import utcnow

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(store: SqlAlchemyEntityStore = Depends(get_store)):
    result = {
        "status": "ok",
        "timestamp": utcnow().isoformat(),
        "database": "unknown",
    }

    # Same lock as every other request: the ping shares their connection.
    try:
        with store.transaction():
            store.db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
