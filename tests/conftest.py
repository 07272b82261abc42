"""
Pytest configuration.

Adds the project root to the Python path so tests can import domain,
repositories, services and api, and provides shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the project directory to the Python path
# so tests can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from repositories.memory_sale_repository import InMemorySaleRepository  # noqa: E402
from services.sale_service import SaleService  # noqa: E402
from services.vehicle_cache import VehicleAvailabilityCache  # noqa: E402
from tests.fakes import FIXED_NOW, FakeClock, FakeVehicleSource, RecordingNotifier  # noqa: E402


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(start=1_000.0)


@pytest.fixture
def source() -> FakeVehicleSource:
    return FakeVehicleSource()


@pytest.fixture
def cache(source: FakeVehicleSource, clock: FakeClock) -> VehicleAvailabilityCache:
    return VehicleAvailabilityCache(source, ttl_seconds=300, clock=clock)


@pytest.fixture
def sale_repository() -> InMemorySaleRepository:
    return InMemorySaleRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def sale_service(
    sale_repository: InMemorySaleRepository,
    cache: VehicleAvailabilityCache,
    notifier: RecordingNotifier,
) -> SaleService:
    return SaleService(sale_repository, cache, notifier, now=lambda: FIXED_NOW)
