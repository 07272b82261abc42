"""Tests for `repositories/memory_sale_repository.py`."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from domain.errors import PersistenceError
from domain.identity_number import IdentityNumber
from domain.sale import Sale, SaleStatus
from repositories.memory_sale_repository import InMemorySaleRepository
from tests.fakes import OTHER_VALID_CPF, VALID_CPF


def _sale(sale_id: str, vin: str, cpf: str = VALID_CPF, status: SaleStatus = SaleStatus.PENDING) -> Sale:
    return Sale(
        sale_id=sale_id,
        vehicle_id=f"vehicle-{sale_id}",
        customer_name="Maria",
        customer_identity_number=IdentityNumber.parse(cpf),
        make="Fiat",
        model="Uno",
        year=2020,
        vin=vin,
        color="Branco",
        price=Decimal("30000.00"),
        sale_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
        status=status,
    )


def test_create_and_get_by_id() -> None:
    repo = InMemorySaleRepository()
    sale = _sale("s1", "VIN-1")

    assert repo.create(sale) == sale
    assert repo.get_by_id("s1") == sale
    assert repo.get_by_id("s2") is None


def test_create_rejects_duplicate_id() -> None:
    repo = InMemorySaleRepository()
    repo.create(_sale("s1", "VIN-1"))

    with pytest.raises(PersistenceError):
        repo.create(_sale("s1", "VIN-2"))


def test_find_active_by_vin_skips_canceled() -> None:
    repo = InMemorySaleRepository()
    repo.create(_sale("s1", "VIN-1", status=SaleStatus.CANCELED))

    assert repo.find_active_by_vin("VIN-1") is None

    repo.create(_sale("s2", "VIN-1", status=SaleStatus.COMPLETED))
    assert repo.find_active_by_vin("VIN-1").sale_id == "s2"


def test_list_by_identity_number_matches_all_statuses() -> None:
    repo = InMemorySaleRepository()
    repo.create(_sale("s1", "VIN-1"))
    repo.create(_sale("s2", "VIN-2", status=SaleStatus.CANCELED))
    repo.create(_sale("s3", "VIN-3", cpf=OTHER_VALID_CPF))

    found = repo.list_by_identity_number(IdentityNumber.parse(VALID_CPF))

    assert [s.sale_id for s in found] == ["s1", "s2"]


def test_list_sales_filters_by_status() -> None:
    repo = InMemorySaleRepository()
    repo.create(_sale("s1", "VIN-1"))
    repo.create(_sale("s2", "VIN-2", status=SaleStatus.COMPLETED))

    assert [s.sale_id for s in repo.list_sales()] == ["s1", "s2"]
    assert [s.sale_id for s in repo.list_sales(SaleStatus.COMPLETED)] == ["s2"]


def test_update_status() -> None:
    repo = InMemorySaleRepository()
    repo.create(_sale("s1", "VIN-1"))

    repo.update_status("s1", SaleStatus.COMPLETED)

    assert repo.get_by_id("s1").status is SaleStatus.COMPLETED


def test_update_status_of_missing_sale_fails() -> None:
    with pytest.raises(PersistenceError):
        InMemorySaleRepository().update_status("missing", SaleStatus.CANCELED)


def test_delete() -> None:
    repo = InMemorySaleRepository()
    repo.create(_sale("s1", "VIN-1"))

    repo.delete("s1")

    assert len(repo) == 0
