"""
Webhook notifier for vehicle status changes.

Tells the inventory service that a sale changed a vehicle's status. Delivery is
best-effort: the sale store is the source of truth, so any failure here is
logged and dropped, and re-delivery is left to operational tooling.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import requests

from domain.vehicle import VehicleStatus

logger = logging.getLogger(__name__)


class WebhookNotifier:
    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def notify(self, vehicle_id: str, status: Union[VehicleStatus, str]) -> None:
        """POST {vehicleId, status} to the webhook. Never raises."""

        status_value = status.value if isinstance(status, VehicleStatus) else str(status)
        payload = {"vehicleId": vehicle_id, "status": status_value}

        logger.info(
            "Sending vehicle status change: vehicle=%s status=%s url=%s",
            vehicle_id, status_value, self.url,
        )

        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.error(
                "Vehicle status webhook failed: vehicle=%s status=%s error=%s",
                vehicle_id, status_value, exc,
            )
            return

        if not 200 <= resp.status_code < 300:
            logger.error(
                "Vehicle status webhook returned HTTP %s: vehicle=%s status=%s body=%s",
                resp.status_code, vehicle_id, status_value, resp.text,
            )
            return

        logger.info("Vehicle status webhook delivered: vehicle=%s status=%s", vehicle_id, status_value)


__all__ = ["WebhookNotifier"]
