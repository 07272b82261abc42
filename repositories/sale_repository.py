"""
Sale repository contract.

The sale service depends only on this protocol. It covers persistence and
lookup; business rules (single active sale per VIN, allowed status transitions)
are enforced by the service and the Sale entity, not by implementations.

Implementations:
- repositories.supabase_sale_repository.SupabaseSaleRepository (production)
- repositories.memory_sale_repository.InMemorySaleRepository (tests, local runs)
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from domain.identity_number import IdentityNumber
from domain.sale import Sale, SaleStatus


class SaleRepository(Protocol):
    def create(self, sale: Sale) -> Sale:
        """Insert a new sale and return it as stored."""
        ...

    def get_by_id(self, sale_id: str) -> Optional[Sale]:
        """Return the sale with this id, or None."""
        ...

    def find_active_by_vin(self, vin: str) -> Optional[Sale]:
        """Return a non-canceled sale for this VIN, or None."""
        ...

    def list_by_identity_number(self, identity_number: IdentityNumber) -> List[Sale]:
        """Return every sale for this customer, regardless of status."""
        ...

    def list_sales(self, status: Optional[SaleStatus] = None) -> List[Sale]:
        """Return all sales, optionally only those in `status`."""
        ...

    def update_status(self, sale_id: str, status: SaleStatus) -> None:
        """Persist a new status for an existing sale."""
        ...


__all__ = ["SaleRepository"]
