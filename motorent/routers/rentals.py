# motorent/routers/rentals.py
"""Rental lifecycle — book a motorcycle, list contracts, return with settlement."""

from fastapi import APIRouter, Depends, Response, status
from motorent.dependencies import get_rental_controller
from motorent.schemas.rental import RentalCreate, RentalOut, ReturnRequest, SettlementOut
from motorent.services.rental_service import RentalLifecycleController

router = APIRouter()


@router.post("/rentals", response_model=RentalOut, status_code=status.HTTP_201_CREATED,
             summary="Rent a motorcycle")
def create_rental(body: RentalCreate, response: Response,
                  controller: RentalLifecycleController = Depends(get_rental_controller)):
    """
    Plans: 7, 15, 30, 45 or 50 days. The rental starts the day after booking.
    Requires a category A (A or AB) license and a free driver and motorcycle.
    """
    rental = controller.create_rental(body.driver_id, body.motorcycle_id, body.plan_days)
    response.headers["Location"] = f"/api/v1/rentals/{rental.id}"
    return rental


@router.get("/rentals", response_model=list[RentalOut], summary="List rentals")
def list_rentals(controller: RentalLifecycleController = Depends(get_rental_controller)):
    return controller.list_rentals()


@router.post("/rentals/{rental_id}/return", response_model=SettlementOut, summary="Return a motorcycle")
def return_rental(rental_id: str, body: ReturnRequest,
                  controller: RentalLifecycleController = Depends(get_rental_controller)):
    """
    Closes the rental and returns the settlement:
    early return refunds unused days minus a penalty (7-day plan 20%, 15-day plan 40%),
    late return adds 50.00 per extra day.
    """
    return controller.close_rental(rental_id, body.return_date)
