# motorent/routers/notifications.py
from fastapi import APIRouter, Depends
from motorent.dependencies import get_store
from motorent.repositories.entity_store import EntityStore
from motorent.schemas.notification import NotificationOut
from motorent.services.notification_service import list_notifications

router = APIRouter()


@router.get("/notifications", response_model=list[NotificationOut], summary="Fleet intake notifications")
def get_all_notifications(store: EntityStore = Depends(get_store)):
    return list_notifications(store)
