"""
Domain: Sale records and their payment state machine.

Rules implemented here:
- A sale is created `pending` when a request is accepted.
- It moves to a terminal state exactly once: `pending -> completed` on payment
  approval, `pending -> canceled` on rejection.
- Vehicle attributes are copied onto the sale at creation time so historical
  records stay stable when the upstream vehicle changes.

Only one non-canceled sale may exist per VIN; that rule needs the sale store and
is enforced by the sale service, not here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Union

from .errors import InvalidPaymentOutcome, InvalidStateTransition
from .identity_number import IdentityNumber
from .time import require_utc_timestamp


class SaleStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELED = "canceled"


class PaymentOutcome(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"

    @staticmethod
    def coerce(value: Union["PaymentOutcome", str]) -> "PaymentOutcome":
        if isinstance(value, PaymentOutcome):
            return value
        try:
            return PaymentOutcome(str(value))
        except ValueError:
            raise InvalidPaymentOutcome(
                f"Payment status must be 'approved' or 'rejected', got '{value}'"
            ) from None


@dataclass(frozen=True, slots=True)
class Sale:
    """
    Immutable record of a vehicle sale.

    Captures:
    - Who is buying (customer_name, customer_identity_number)
    - What was sold (vehicle_id plus a snapshot of make/model/year/vin/color)
    - When and for how much (sale_date, price)
    - Where the payment stands (status)

    Transitions return new instances; the original is left untouched.
    """

    sale_id: str
    vehicle_id: str
    customer_name: str
    customer_identity_number: IdentityNumber
    make: str
    model: str
    year: int
    vin: str
    color: str
    price: Decimal
    sale_date: datetime
    status: SaleStatus = SaleStatus.PENDING

    def __post_init__(self) -> None:
        require_utc_timestamp("sale_date", self.sale_date)

    @property
    def is_active(self) -> bool:
        """A sale blocks its VIN until it is canceled."""
        return self.status is not SaleStatus.CANCELED

    def _transition(self, target: SaleStatus) -> "Sale":
        if self.status is not SaleStatus.PENDING:
            raise InvalidStateTransition(self.sale_id, self.status.value, target.value)
        return replace(self, status=target)

    def completed(self) -> "Sale":
        return self._transition(SaleStatus.COMPLETED)

    def canceled(self) -> "Sale":
        return self._transition(SaleStatus.CANCELED)

    def apply_payment(self, outcome: PaymentOutcome) -> "Sale":
        """Resolve a pending sale from a payment outcome."""

        if outcome is PaymentOutcome.APPROVED:
            return self.completed()
        return self.canceled()


__all__ = ["Sale", "SaleStatus", "PaymentOutcome"]
