"""
Domain: Vehicle records owned by the upstream inventory service.

This system only holds read-through copies keyed by vehicle id; the inventory
service stays authoritative for availability.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping

from .errors import InvalidPrice, VehicleInventoryError
from .pricing import parse_price


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"


@dataclass(frozen=True, slots=True)
class Vehicle:
    """Immutable snapshot of an upstream vehicle record."""

    id: str
    make: str
    model: str
    year: int
    vin: str
    price: Decimal
    color: str
    status: VehicleStatus

    @property
    def is_available(self) -> bool:
        return self.status is VehicleStatus.AVAILABLE

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "Vehicle":
        """
        Build a Vehicle from the upstream JSON representation.

        Raises VehicleInventoryError if the payload is missing fields or carries
        values this system cannot interpret.
        """

        try:
            return Vehicle(
                id=str(payload["id"]),
                make=str(payload["make"]),
                model=str(payload["model"]),
                year=int(payload["year"]),
                vin=str(payload["vin"]),
                price=parse_price(str(payload["price"])),
                color=str(payload["color"]),
                status=VehicleStatus(str(payload["status"])),
            )
        except (KeyError, TypeError, ValueError, InvalidPrice) as exc:
            raise VehicleInventoryError(f"Malformed vehicle record from inventory service: {exc!r}") from exc

    def to_payload(self) -> Dict[str, Any]:
        """Upstream-compatible JSON representation (price as a 2-place string)."""

        return {
            "id": self.id,
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "vin": self.vin,
            "price": f"{self.price:.2f}",
            "color": self.color,
            "status": self.status.value,
        }


__all__ = ["Vehicle", "VehicleStatus"]
