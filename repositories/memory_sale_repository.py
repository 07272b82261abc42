"""
In-memory sale repository.

Satisfies the SaleRepository contract for tests and local runs
(SALE_STORE=memory). Each operation is guarded by a lock so concurrent requests
see whole records; it adds no cross-operation atomicity the Supabase store lacks.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from domain.errors import PersistenceError
from domain.identity_number import IdentityNumber
from domain.sale import Sale, SaleStatus


class InMemorySaleRepository:
    def __init__(self) -> None:
        self._sales: Dict[str, Sale] = {}
        self._lock = threading.Lock()

    def create(self, sale: Sale) -> Sale:
        with self._lock:
            if sale.sale_id in self._sales:
                raise PersistenceError(f"Failed to record sale: duplicate sale_id {sale.sale_id}")
            self._sales[sale.sale_id] = sale
        return sale

    def get_by_id(self, sale_id: str) -> Optional[Sale]:
        with self._lock:
            return self._sales.get(sale_id)

    def find_active_by_vin(self, vin: str) -> Optional[Sale]:
        with self._lock:
            for sale in self._sales.values():
                if sale.vin == vin and sale.is_active:
                    return sale
        return None

    def list_by_identity_number(self, identity_number: IdentityNumber) -> List[Sale]:
        with self._lock:
            return [s for s in self._sales.values() if s.customer_identity_number == identity_number]

    def list_sales(self, status: Optional[SaleStatus] = None) -> List[Sale]:
        with self._lock:
            return [s for s in self._sales.values() if status is None or s.status is status]

    def update_status(self, sale_id: str, status: SaleStatus) -> None:
        with self._lock:
            sale = self._sales.get(sale_id)
            if sale is None:
                raise PersistenceError(f"Failed to update sale status: sale {sale_id} does not exist")
            self._sales[sale_id] = replace(sale, status=status)

    def delete(self, sale_id: str) -> None:
        """Remove a sale. Not part of the service contract; used by tests and tooling."""

        with self._lock:
            self._sales.pop(sale_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sales)


__all__ = ["InMemorySaleRepository"]
