"""
Vehicle availability cache.

Fronts the upstream inventory service with a time-boxed, in-memory copy of the
available-vehicle list.

Policy:
- Listing favors availability. A fresh cache is served directly; a stale or empty
  cache is refreshed first. If the refresh fails while entries exist, the stale
  entries are served and the failure is only logged.
- Point lookups favor correctness. `get_by_id` always asks the upstream service,
  because selling an already-sold vehicle is the failure the sale path must avoid.

The whole cache is replaced at once: a refresh builds a new snapshot and swaps a
single reference (an atomic assignment, no lock), so readers see either the old
mapping or the new one.
Concurrent stale readers may each trigger a refresh; that only costs a redundant
upstream call.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol

from domain.errors import VehicleInventoryError, VehicleInventoryNotFound
from domain.vehicle import Vehicle

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS: float = 5 * 60
_EPOCH: float = 0.0


class VehicleSource(Protocol):
    def list_available(self) -> List[Vehicle]: ...

    def get_vehicle(self, vehicle_id: str) -> Vehicle: ...


@dataclass(frozen=True, slots=True)
class _Snapshot:
    entries: Dict[str, Vehicle] = field(default_factory=dict)
    refreshed_at: float = _EPOCH


class VehicleAvailabilityCache:
    def __init__(
        self,
        source: VehicleSource,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._source = source
        self._ttl = ttl_seconds
        self._clock = clock
        self._snapshot = _Snapshot()

    @property
    def last_refresh(self) -> float:
        return self._snapshot.refreshed_at

    def __len__(self) -> int:
        return len(self._snapshot.entries)

    def _is_fresh(self, snapshot: _Snapshot) -> bool:
        return bool(snapshot.entries) and (self._clock() - snapshot.refreshed_at) < self._ttl

    def get_all_available(self) -> List[Vehicle]:
        """Available vehicles, refreshed from upstream when empty or older than the TTL."""

        snapshot = self._snapshot
        if self._is_fresh(snapshot):
            logger.debug("Serving %d vehicles from cache", len(snapshot.entries))
            return list(snapshot.entries.values())

        self.refresh()
        return list(self._snapshot.entries.values())

    def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        """
        Look a vehicle up directly upstream, bypassing the cache.

        Returns None when the inventory service does not know the id; any other
        upstream failure propagates as VehicleInventoryError.
        """

        try:
            return self._source.get_vehicle(vehicle_id)
        except VehicleInventoryNotFound:
            return None

    def refresh(self) -> None:
        """
        Replace the cache with the current upstream list.

        Raises:
            VehicleInventoryError: only when the fetch fails and there is no
                cached data to fall back on
        """

        try:
            vehicles = self._source.list_available()
        except VehicleInventoryError as exc:
            if self._snapshot.entries:
                logger.warning(
                    "Vehicle refresh failed, serving %d stale entries: %s",
                    len(self._snapshot.entries), exc,
                )
                return
            logger.error("Vehicle refresh failed with an empty cache: %s", exc)
            raise

        fresh = _Snapshot(
            entries={vehicle.id: vehicle for vehicle in vehicles},
            refreshed_at=self._clock(),
        )
        self._snapshot = fresh
        logger.info("Vehicle cache refreshed with %d vehicles", len(fresh.entries))

    def clear(self) -> None:
        """Drop every entry and reset the refresh time so the next read refreshes."""

        self._snapshot = _Snapshot()
        logger.info("Vehicle cache cleared")


__all__ = ["VehicleAvailabilityCache", "VehicleSource", "DEFAULT_TTL_SECONDS"]
