"""
Vehicle catalog queries.

Read-only listing of available vehicles, served through the shared
availability cache.
"""

from __future__ import annotations

from typing import List, Optional, Union

from domain.pricing import SortOrder, sort_by_price
from domain.vehicle import Vehicle
from services.vehicle_cache import VehicleAvailabilityCache


class VehicleService:
    def __init__(self, cache: VehicleAvailabilityCache) -> None:
        self._cache = cache

    def list_available(self, sort_by: Optional[Union[SortOrder, str]] = None) -> List[Vehicle]:
        """
        List available vehicles, optionally ordered by price.

        Args:
            sort_by: "asc" / "desc" (or SortOrder); None keeps upstream order

        Returns:
            A new list; the cache contents are never reordered in place
        """

        return sort_by_price(self._cache.get_all_available(), lambda v: v.price, sort_by)

    def clear_cache(self) -> None:
        self._cache.clear()


__all__ = ["VehicleService"]
