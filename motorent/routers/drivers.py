# motorent/routers/drivers.py
"""Delivery drivers — CRUD."""

from fastapi import APIRouter, Depends, Response, status
from motorent.dependencies import get_store
from motorent.repositories.entity_store import EntityStore
from motorent.schemas.driver import DriverIn, DriverOut, DriverUpdate
from motorent.services import driver_service

router = APIRouter()


@router.post("/drivers", response_model=DriverOut, status_code=status.HTTP_201_CREATED,
             summary="Register a delivery driver")
def register_driver(body: DriverIn, response: Response, store: EntityStore = Depends(get_store)):
    driver = driver_service.register_driver(
        store, body.id, body.name, body.cnpj, body.birth_date,
        body.driver_license_number, body.driver_license_type,
    )
    response.headers["Location"] = f"/api/v1/drivers/{driver.id}"
    return driver


@router.get("/drivers", response_model=list[DriverOut], summary="List drivers")
def list_drivers(store: EntityStore = Depends(get_store)):
    return driver_service.list_drivers(store)


@router.get("/drivers/{driver_id}", response_model=DriverOut)
def get_driver(driver_id: str, store: EntityStore = Depends(get_store)):
    return driver_service.get_driver(store, driver_id)


@router.put("/drivers/{driver_id}", response_model=DriverOut, summary="Update a driver")
def update_driver(driver_id: str, body: DriverUpdate, store: EntityStore = Depends(get_store)):
    return driver_service.update_driver(
        store, driver_id, body.name, body.cnpj, body.birth_date,
        body.driver_license_number, body.driver_license_type,
    )


@router.delete("/drivers/{driver_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Remove a driver")
def delete_driver(driver_id: str, store: EntityStore = Depends(get_store)):
    driver_service.delete_driver(store, driver_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
