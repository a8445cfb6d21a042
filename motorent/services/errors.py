# motorent/services/errors.py
"""
Business errors raised by the services.
Each kind maps to one HTTP status in main.py; `code` names the specific outcome.
"""

from typing import Any, Dict, Optional


class RentalServiceError(Exception):
    """Base class for every expected business failure."""

    kind = "error"
    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> dict:
        body = {"detail": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class NotFoundError(RentalServiceError):
    """Referenced entity is absent."""
    kind = "not_found"
    status_code = 404


class ConflictError(RentalServiceError):
    """Uniqueness violation (plate, cnpj, license number)."""
    kind = "conflict"
    status_code = 409


class InvalidInputError(RentalServiceError):
    """Bad enum value or unmapped plan length."""
    kind = "invalid_input"
    status_code = 400


class PreconditionFailedError(RentalServiceError):
    """Business rule blocks the operation."""
    kind = "precondition_failed"
    status_code = 400


# ── Specific outcomes ────────────────────────────────────────────────────────

def motorcycle_not_found(motorcycle_id: str) -> NotFoundError:
    return NotFoundError("MOTORCYCLE_NOT_FOUND", "Motorcycle not found", {"id": motorcycle_id})


def driver_not_found(driver_id: str) -> NotFoundError:
    return NotFoundError("DRIVER_NOT_FOUND", "Driver not found", {"id": driver_id})


def rental_not_found(rental_id: str) -> NotFoundError:
    return NotFoundError("RENTAL_NOT_FOUND", "Rental not found or already closed", {"id": rental_id})


def plate_already_exists(plate: str) -> ConflictError:
    return ConflictError("PLATE_ALREADY_EXISTS", "License plate already exists", {"license_plate": plate})


def cnpj_exists(cnpj: str) -> ConflictError:
    return ConflictError("CNPJ_EXISTS", "CNPJ already exists", {"cnpj": cnpj})


def license_number_exists(number: str) -> ConflictError:
    return ConflictError("LICENSE_NUMBER_EXISTS", "Driver license number already exists",
                         {"driver_license_number": number})


def invalid_license_type(license_type: str) -> InvalidInputError:
    return InvalidInputError("INVALID_LICENSE_TYPE", "Invalid driver license type. Must be A, B, or AB",
                             {"driver_license_type": license_type})


def invalid_plan(plan_days: int) -> InvalidInputError:
    return InvalidInputError("INVALID_PLAN", "Invalid rental plan", {"plan_days": plan_days})


def has_active_rentals(entity: str, entity_id: str) -> PreconditionFailedError:
    return PreconditionFailedError("HAS_ACTIVE_RENTALS", f"{entity} has active rentals", {"id": entity_id})


def driver_not_qualified(driver_id: str) -> PreconditionFailedError:
    return PreconditionFailedError("DRIVER_NOT_QUALIFIED",
                                   "Driver not qualified for category A motorcycles", {"id": driver_id})


def motorcycle_already_rented(motorcycle_id: str) -> PreconditionFailedError:
    return PreconditionFailedError("MOTORCYCLE_ALREADY_RENTED", "Motorcycle is already rented",
                                   {"id": motorcycle_id})


def driver_already_renting(driver_id: str) -> PreconditionFailedError:
    return PreconditionFailedError("DRIVER_ALREADY_RENTING", "Driver already has an active rental",
                                   {"id": driver_id})


def id_already_exists(entity: str, entity_id: str) -> ConflictError:
    return ConflictError("ID_ALREADY_EXISTS", f"{entity} id already exists", {"id": entity_id})
