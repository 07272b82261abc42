"""Test doubles for the upstream inventory service, the notifier and time."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from domain.errors import VehicleInventoryError, VehicleInventoryNotFound
from domain.vehicle import Vehicle, VehicleStatus

VALID_CPF = "12345678909"
OTHER_VALID_CPF = "52998224725"
FIXED_NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_vehicle(
    vehicle_id: str = "V1",
    vin: str = "ABC123",
    price: str = "18000.00",
    status: VehicleStatus = VehicleStatus.AVAILABLE,
) -> Vehicle:
    return Vehicle(
        id=vehicle_id,
        make="Toyota",
        model="Corolla",
        year=2023,
        vin=vin,
        price=Decimal(price),
        color="Prata",
        status=status,
    )


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeVehicleSource:
    """Scripted stand-in for VehicleInventoryClient that counts its calls."""

    def __init__(self, vehicles: Optional[List[Vehicle]] = None) -> None:
        self.vehicles: List[Vehicle] = list(vehicles or [])
        self.by_id: Dict[str, Vehicle] = {}
        self.list_error: Optional[Exception] = None
        self.get_error: Optional[Exception] = None
        self.list_calls = 0
        self.get_calls: List[str] = []

    def list_available(self) -> List[Vehicle]:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.vehicles)

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        self.get_calls.append(vehicle_id)
        if self.get_error is not None:
            raise self.get_error
        vehicle = self.by_id.get(vehicle_id)
        if vehicle is None:
            raise VehicleInventoryNotFound(f"HTTP 404: {vehicle_id}")
        return vehicle

    def fail_listing(self, message: str = "HTTP 503: unavailable") -> None:
        self.list_error = VehicleInventoryError(message)


class RecordingNotifier:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, VehicleStatus]] = []

    def notify(self, vehicle_id: str, status: VehicleStatus) -> None:
        self.calls.append((vehicle_id, status))
