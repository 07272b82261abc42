"""HTTP client for the upstream vehicle inventory service."""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests

from domain.errors import VehicleInventoryError, VehicleInventoryNotFound
from domain.vehicle import Vehicle

logger = logging.getLogger(__name__)


class VehicleInventoryClient:
    """Read-only access to the inventory service.

    Endpoints used:
        GET {base}?isSold=false   -> list of available vehicles
        GET {base}/{id}           -> single vehicle, 404 when unknown

    Transport errors, timeouts, unexpected status codes and malformed bodies
    are all raised as VehicleInventoryError. No retries are attempted.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _get(self, url: str, params: dict | None = None) -> Any:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise VehicleInventoryError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code == 404:
            raise VehicleInventoryNotFound(f"HTTP 404: {url}")

        if not 200 <= resp.status_code < 300:
            raise VehicleInventoryError(f"HTTP {resp.status_code}: {resp.text}")

        try:
            return resp.json()
        except ValueError as exc:
            raise VehicleInventoryError(f"Invalid JSON from {url}: {exc}") from exc

    def list_available(self) -> List[Vehicle]:
        """Fetch every vehicle the inventory service reports as not sold."""

        data = self._get(self.base_url, params={"isSold": "false"})
        if not isinstance(data, list):
            raise VehicleInventoryError(
                f"Expected a list of vehicles, got {type(data).__name__}"
            )
        vehicles = [Vehicle.from_payload(item) for item in data]
        logger.debug("Fetched %d available vehicles from %s", len(vehicles), self.base_url)
        return vehicles

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        """Fetch one vehicle. Raises VehicleInventoryNotFound on 404."""

        data = self._get(f"{self.base_url}/{quote(vehicle_id, safe='')}")
        if not isinstance(data, dict):
            raise VehicleInventoryError(
                f"Expected a vehicle object, got {type(data).__name__}"
            )
        return Vehicle.from_payload(data)

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


__all__ = ["VehicleInventoryClient"]
