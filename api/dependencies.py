"""
Service wiring.

Builds the one availability cache and hands the same instance to both the
vehicle and sale services. Routers get services from `app.state.services`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests
from fastapi import Request

from config.settings import Settings
from repositories.memory_sale_repository import InMemorySaleRepository
from repositories.sale_repository import SaleRepository
from repositories.vehicle_inventory_client import VehicleInventoryClient
from services.sale_service import SaleService
from services.vehicle_cache import VehicleAvailabilityCache
from services.vehicle_service import VehicleService
from services.webhook_notifier import WebhookNotifier


@dataclass
class ServiceContainer:
    sale_service: SaleService
    vehicle_service: VehicleService
    session: Optional[requests.Session] = None

    def close(self) -> None:
        if self.session is not None:
            self.session.close()


def _build_sale_repository(settings: Settings) -> SaleRepository:
    if settings.sale_store == "memory":
        return InMemorySaleRepository()

    from repositories.client import create_supabase_client
    from repositories.supabase_sale_repository import SupabaseSaleRepository

    client = create_supabase_client(settings.supabase_url or "", settings.supabase_key or "")
    return SupabaseSaleRepository(client)


def build_services(settings: Settings) -> ServiceContainer:
    session = requests.Session()

    inventory = VehicleInventoryClient(
        settings.vehicle_service_url,
        timeout=settings.http_timeout_seconds,
        session=session,
    )
    cache = VehicleAvailabilityCache(inventory, ttl_seconds=settings.cache_ttl_seconds)
    notifier = WebhookNotifier(
        settings.webhook_url,
        timeout=settings.http_timeout_seconds,
        session=session,
    )

    return ServiceContainer(
        sale_service=SaleService(_build_sale_repository(settings), cache, notifier),
        vehicle_service=VehicleService(cache),
        session=session,
    )


def get_sale_service(request: Request) -> SaleService:
    return request.app.state.services.sale_service


def get_vehicle_service(request: Request) -> VehicleService:
    return request.app.state.services.vehicle_service


__all__ = [
    "ServiceContainer",
    "build_services",
    "get_sale_service",
    "get_vehicle_service",
]
