# motorent/routers/motorcycles.py
"""Fleet — CRUD for motorcycles."""

from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from motorent.dependencies import get_store
from motorent.repositories.entity_store import EntityStore
from motorent.schemas.motorcycle import MotorcycleIn, MotorcycleOut, MotorcycleUpdate
from motorent.services import motorcycle_service

router = APIRouter()


@router.post("/motorcycles", response_model=MotorcycleOut, status_code=status.HTTP_201_CREATED,
             summary="Register a motorcycle")
def register_motorcycle(body: MotorcycleIn, response: Response, store: EntityStore = Depends(get_store)):
    """Registers a motorcycle. A 2024 model also generates a fleet notification."""
    motorcycle = motorcycle_service.register_motorcycle(
        store, body.id, body.year, body.model, body.license_plate)
    response.headers["Location"] = f"/api/v1/motorcycles/{motorcycle.id}"
    return motorcycle


@router.get("/motorcycles", response_model=list[MotorcycleOut], summary="List motorcycles")
def list_motorcycles(license_plate: Optional[str] = None, store: EntityStore = Depends(get_store)):
    """Filter by plate substring (case-insensitive)."""
    return motorcycle_service.list_motorcycles(store, license_plate)


@router.get("/motorcycles/{motorcycle_id}", response_model=MotorcycleOut)
def get_motorcycle(motorcycle_id: str, store: EntityStore = Depends(get_store)):
    return motorcycle_service.get_motorcycle(store, motorcycle_id)


@router.put("/motorcycles/{motorcycle_id}", response_model=MotorcycleOut, summary="Update a motorcycle")
def update_motorcycle(motorcycle_id: str, body: MotorcycleUpdate, store: EntityStore = Depends(get_store)):
    return motorcycle_service.update_motorcycle(
        store, motorcycle_id, body.year, body.model, body.license_plate)


@router.delete("/motorcycles/{motorcycle_id}", status_code=status.HTTP_204_NO_CONTENT,
               summary="Remove a motorcycle")
def delete_motorcycle(motorcycle_id: str, store: EntityStore = Depends(get_store)):
    """Refused while the motorcycle has an active rental."""
    motorcycle_service.delete_motorcycle(store, motorcycle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
