"""
Sale repository backed by Supabase (persistence).

This module provides *only* persistence operations for the Sale domain entity.
It does not enforce business rules (e.g., one active sale per VIN); it inserts,
fetches and updates rows in the `sales` table.

Row layout:
- customer_cpf holds the normalized 11-digit identity number, never the formatted one
- sale_price is stored as a decimal string
- sale_date_utc is ISO-8601 UTC
- status is one of pending, completed, canceled; anything else is rejected on read
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Mapping, Optional

from postgrest.exceptions import APIError

from domain.errors import InvalidIdentityNumber, PersistenceError
from domain.identity_number import IdentityNumber
from domain.sale import Sale, SaleStatus
from domain.time import parse_utc_datetime, to_iso_utc
from repositories.client import Client

# Supabase table name for sale records.
# Keep this aligned with your database schema.
_SALES_TABLE: str = "sales"


def _sale_to_row(sale: Sale) -> dict[str, Any]:
    return {
        "sale_id": sale.sale_id,
        "vehicle_id": sale.vehicle_id,
        "customer_name": sale.customer_name,
        "customer_cpf": sale.customer_identity_number.value,
        "make": sale.make,
        "model": sale.model,
        "year": sale.year,
        "vin": sale.vin,
        "color": sale.color,
        "sale_price": str(sale.price),
        "sale_date_utc": to_iso_utc(sale.sale_date, name="sale_date"),
        "status": sale.status.value,
    }


def _row_to_sale(row: Mapping[str, Any]) -> Sale:
    """Convert a Supabase row into a Sale, rejecting values outside the schema."""

    raw_status = str(row.get("status"))
    try:
        status = SaleStatus(raw_status)
    except ValueError:
        raise PersistenceError(
            f"Unknown sale status '{raw_status}' stored for sale {row.get('sale_id')}"
        ) from None

    try:
        return Sale(
            sale_id=str(row["sale_id"]),
            vehicle_id=str(row["vehicle_id"]),
            customer_name=str(row["customer_name"]),
            customer_identity_number=IdentityNumber(str(row["customer_cpf"])),
            make=str(row["make"]),
            model=str(row["model"]),
            year=int(row["year"]),
            vin=str(row["vin"]),
            color=str(row["color"]),
            price=Decimal(str(row["sale_price"])),
            sale_date=parse_utc_datetime(row["sale_date_utc"]),
            status=status,
        )
    except (KeyError, TypeError, ValueError, InvalidOperation, InvalidIdentityNumber) as exc:
        raise PersistenceError(f"Malformed sale row {row.get('sale_id')}: {exc!r}") from exc


class SupabaseSaleRepository:
    """SaleRepository implementation over a Supabase table."""

    def __init__(self, client: Client, table: str = _SALES_TABLE) -> None:
        self._client = client
        self._table = table

    def _execute(self, action: str, build: Callable[[], Any]) -> List[Mapping[str, Any]]:
        try:
            response = build().execute()
        except APIError as exc:
            raise PersistenceError(f"Failed to {action}: {exc}") from exc

        error = getattr(response, "error", None)
        if error:
            raise PersistenceError(f"Failed to {action}: {error}")

        return getattr(response, "data", None) or []

    def create(self, sale: Sale) -> Sale:
        """Insert a new sale row and return the sale as written."""

        payload = _sale_to_row(sale)
        self._execute(
            "record sale",
            lambda: self._client.table(self._table).insert(payload),
        )
        return sale

    def get_by_id(self, sale_id: str) -> Optional[Sale]:
        rows = self._execute(
            "get sale",
            lambda: self._client.table(self._table).select("*").eq("sale_id", sale_id).limit(1),
        )
        if not rows:
            return None
        return _row_to_sale(rows[0])

    def find_active_by_vin(self, vin: str) -> Optional[Sale]:
        rows = self._execute(
            "look up sale by VIN",
            lambda: (
                self._client.table(self._table)
                .select("*")
                .eq("vin", vin)
                .neq("status", SaleStatus.CANCELED.value)
                .limit(1)
            ),
        )
        if not rows:
            return None
        return _row_to_sale(rows[0])

    def list_by_identity_number(self, identity_number: IdentityNumber) -> List[Sale]:
        rows = self._execute(
            "list sales",
            lambda: self._client.table(self._table).select("*").eq("customer_cpf", identity_number.value),
        )
        return [_row_to_sale(row) for row in rows]

    def list_sales(self, status: Optional[SaleStatus] = None) -> List[Sale]:
        def build() -> Any:
            query = self._client.table(self._table).select("*")
            if status is not None:
                query = query.eq("status", status.value)
            return query

        rows = self._execute("list sales", build)
        return [_row_to_sale(row) for row in rows]

    def update_status(self, sale_id: str, status: SaleStatus) -> None:
        self._execute(
            "update sale status",
            lambda: self._client.table(self._table).update({"status": status.value}).eq("sale_id", sale_id),
        )


__all__ = ["SupabaseSaleRepository"]
