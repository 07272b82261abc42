"""
Domain: error taxonomy for the sales backend.

Every failure the core can raise belongs to one of these families so the API
boundary can map it to a response code:

- SalesValidationError: caller-recoverable input problems (400)
- NotFoundError: the referenced vehicle or sale does not exist (404)
- ConflictError: the request is valid but contradicts current state (409)
- VehicleInventoryError: the upstream inventory service failed (502)
- PersistenceError: the sale store failed (500)

Webhook delivery failures are intentionally absent: they never leave the notifier.
"""

from __future__ import annotations


class SalesError(Exception):
    """Base class for every error raised by the sales core."""


# ----------------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------------

class SalesValidationError(SalesError, ValueError):
    """Input failed validation."""


class InvalidIdentityNumber(SalesValidationError):
    """The customer identity number (CPF) is not valid."""


class InvalidIdentityNumberFormat(InvalidIdentityNumber):
    """The identity number does not have exactly 11 digits."""


class InvalidIdentityNumberChecksum(InvalidIdentityNumber):
    """The identity number check digits do not match (or all digits are equal)."""


class InvalidPrice(SalesValidationError):
    """A price is not a non-negative decimal with at most 2 fractional digits."""


class InvalidPaymentOutcome(SalesValidationError):
    """A payment outcome other than 'approved' or 'rejected' was supplied."""


class InvalidSortOrder(SalesValidationError):
    """A sort order other than 'asc' or 'desc' was supplied."""


# ----------------------------------------------------------------------------
# Not found
# ----------------------------------------------------------------------------

class NotFoundError(SalesError):
    """The referenced entity does not exist."""


class VehicleNotFound(NotFoundError):
    def __init__(self, vehicle_id: str) -> None:
        super().__init__(f"Vehicle not found: {vehicle_id}")
        self.vehicle_id = vehicle_id


class SaleNotFound(NotFoundError):
    def __init__(self, sale_id: str) -> None:
        super().__init__(f"Sale not found: {sale_id}")
        self.sale_id = sale_id


# ----------------------------------------------------------------------------
# Conflicts
# ----------------------------------------------------------------------------

class ConflictError(SalesError):
    """The request conflicts with the current state of a vehicle or sale."""


class VehicleUnavailable(ConflictError):
    def __init__(self, vehicle_id: str, status: str) -> None:
        super().__init__(f"Vehicle {vehicle_id} is not available for sale (status: {status})")
        self.vehicle_id = vehicle_id
        self.status = status


class DuplicateSale(ConflictError):
    def __init__(self, vin: str, existing_sale_id: str) -> None:
        super().__init__(f"An active sale already exists for VIN {vin} (sale {existing_sale_id})")
        self.vin = vin
        self.existing_sale_id = existing_sale_id


class InvalidStateTransition(ConflictError):
    def __init__(self, sale_id: str, current: str, target: str) -> None:
        super().__init__(f"Sale {sale_id} cannot move from '{current}' to '{target}'")
        self.sale_id = sale_id
        self.current = current
        self.target = target


# ----------------------------------------------------------------------------
# Infrastructure
# ----------------------------------------------------------------------------

class VehicleInventoryError(SalesError, RuntimeError):
    """The upstream vehicle inventory service could not be queried."""


class VehicleInventoryNotFound(VehicleInventoryError):
    """The upstream service answered 404 for a single-vehicle lookup."""


class PersistenceError(SalesError, RuntimeError):
    """The sale store rejected or failed an operation."""


__all__ = [
    "SalesError",
    "SalesValidationError",
    "InvalidIdentityNumber",
    "InvalidIdentityNumberFormat",
    "InvalidIdentityNumberChecksum",
    "InvalidPrice",
    "InvalidPaymentOutcome",
    "InvalidSortOrder",
    "NotFoundError",
    "VehicleNotFound",
    "SaleNotFound",
    "ConflictError",
    "VehicleUnavailable",
    "DuplicateSale",
    "InvalidStateTransition",
    "VehicleInventoryError",
    "VehicleInventoryNotFound",
    "PersistenceError",
]
