"""
Sale service: the sale state machine.

Handles:
- Sale creation (identity validation, fresh vehicle lookup, duplicate-VIN check)
- Payment confirmation (pending -> completed/canceled, webhook on approval)
- Sale history queries (sold vehicles, sales per customer)

Errors from the inventory service and the sale store propagate unchanged; only
the webhook notifier swallows its own failures.

Known gap: the duplicate-VIN check and the insert are separate store calls, so
two concurrent requests for the same VIN can both pass the check.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, List, Optional, Protocol, Union
from uuid import uuid4

from domain.errors import (
    DuplicateSale,
    InvalidIdentityNumber,
    InvalidStateTransition,
    SaleNotFound,
    VehicleNotFound,
    VehicleUnavailable,
)
from domain.identity_number import IdentityNumber
from domain.pricing import SortOrder, parse_price, sort_by_price
from domain.sale import PaymentOutcome, Sale, SaleStatus
from domain.time import utc_now
from domain.vehicle import VehicleStatus
from repositories.sale_repository import SaleRepository
from services.vehicle_cache import VehicleAvailabilityCache

logger = logging.getLogger(__name__)


class StatusNotifier(Protocol):
    def notify(self, vehicle_id: str, status: VehicleStatus) -> None: ...


class SaleService:
    def __init__(
        self,
        sale_repository: SaleRepository,
        vehicle_cache: VehicleAvailabilityCache,
        notifier: StatusNotifier,
        now: Callable = utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ) -> None:
        self._sales = sale_repository
        self._vehicles = vehicle_cache
        self._notifier = notifier
        self._now = now
        self._new_id = id_factory

    def create_sale(
        self,
        vehicle_id: str,
        customer_name: str,
        raw_identity_number: str,
        price: Union[str, Decimal],
    ) -> Sale:
        """
        Create a pending sale for a vehicle.

        Process:
        1. Validate the identity number and price (no upstream call on bad input)
        2. Look the vehicle up directly upstream
        3. Reject vehicles that are not available
        4. Reject VINs that already have a non-canceled sale
        5. Persist the sale as pending with a snapshot of the vehicle

        The inventory service is not notified here; that happens when payment
        is approved.

        Raises:
            InvalidIdentityNumber, InvalidPrice, VehicleNotFound,
            VehicleUnavailable, DuplicateSale, VehicleInventoryError,
            PersistenceError
        """

        logger.info("Starting sale creation for vehicle %s", vehicle_id)

        try:
            identity_number = IdentityNumber.parse(raw_identity_number)
        except InvalidIdentityNumber:
            logger.warning("Rejected sale for vehicle %s: invalid CPF", vehicle_id)
            raise

        sale_price = parse_price(price)

        vehicle = self._vehicles.get_by_id(vehicle_id)
        if vehicle is None:
            logger.warning("Rejected sale: vehicle %s not found", vehicle_id)
            raise VehicleNotFound(vehicle_id)

        if not vehicle.is_available:
            logger.warning(
                "Rejected sale: vehicle %s is not available (status: %s)",
                vehicle.id, vehicle.status.value,
            )
            raise VehicleUnavailable(vehicle.id, vehicle.status.value)

        existing = self._sales.find_active_by_vin(vehicle.vin)
        if existing is not None:
            logger.warning(
                "Rejected sale: VIN %s already has active sale %s", vehicle.vin, existing.sale_id
            )
            raise DuplicateSale(vehicle.vin, existing.sale_id)

        sale = Sale(
            sale_id=self._new_id(),
            vehicle_id=vehicle.id,
            customer_name=customer_name,
            customer_identity_number=identity_number,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            vin=vehicle.vin,
            color=vehicle.color,
            price=sale_price,
            sale_date=self._now(),
            status=SaleStatus.PENDING,
        )

        created = self._sales.create(sale)
        logger.info(
            "Sale %s created for vehicle %s (customer CPF %s)",
            created.sale_id, vehicle.id, identity_number.formatted,
        )
        return created

    def process_payment(self, sale_id: str, outcome: Union[PaymentOutcome, str]) -> Sale:
        """
        Apply a payment outcome to a pending sale.

        approved -> completed, then the inventory service is told the vehicle
        is sold (best-effort). rejected -> canceled, no notification.

        Raises:
            InvalidPaymentOutcome, SaleNotFound, InvalidStateTransition,
            PersistenceError
        """

        resolved = PaymentOutcome.coerce(outcome)

        sale = self._sales.get_by_id(sale_id)
        if sale is None:
            logger.warning("Payment %s for unknown sale %s", resolved.value, sale_id)
            raise SaleNotFound(sale_id)

        try:
            updated = sale.apply_payment(resolved)
        except InvalidStateTransition:
            logger.warning(
                "Refused payment %s for sale %s already %s",
                resolved.value, sale_id, sale.status.value,
            )
            raise

        self._sales.update_status(sale_id, updated.status)
        logger.info("Sale %s is now %s", sale_id, updated.status.value)

        if updated.status is SaleStatus.COMPLETED:
            self._notifier.notify(updated.vehicle_id, VehicleStatus.SOLD)

        return updated

    def get_all_vehicles_sold(self, sort_by: Optional[Union[SortOrder, str]] = None) -> List[Sale]:
        """Completed sales, optionally ordered by sale price."""

        order = SortOrder.coerce(sort_by)
        completed = self._sales.list_sales(status=SaleStatus.COMPLETED)
        return sort_by_price(completed, lambda s: s.price, order)

    def get_sales_by_identity_number(self, raw_identity_number: str) -> List[Sale]:
        """Every sale for a customer, whatever its status. Invalid input raises InvalidIdentityNumber."""

        identity_number = IdentityNumber.parse(raw_identity_number)
        return self._sales.list_by_identity_number(identity_number)


__all__ = ["SaleService", "StatusNotifier"]
