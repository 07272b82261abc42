"""
Check sales status - how many sales are pending, completed and canceled,
and whether the inventory service still lists completed vehicles as available.

Pending sales older than a day usually mean a payment webhook never arrived;
completed vehicles still listed upstream mean a status webhook was lost and
needs to be re-sent.
"""

import sys
from datetime import timedelta
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings
from domain.errors import VehicleInventoryError
from domain.sale import SaleStatus
from domain.time import utc_now
from repositories.client import create_supabase_client
from repositories.supabase_sale_repository import SupabaseSaleRepository
from repositories.vehicle_inventory_client import VehicleInventoryClient


def check_sales_status():
    """Print sale counts by status and flag inconsistencies with the inventory service."""

    settings = Settings.from_env()
    repo = SupabaseSaleRepository(
        create_supabase_client(settings.supabase_url or "", settings.supabase_key or "")
    )

    sales = repo.list_sales()
    counts = {status: 0 for status in SaleStatus}
    for sale in sales:
        counts[sale.status] += 1

    print("=" * 50)
    print("SALES STATUS")
    print("=" * 50)
    print(f"Total sales:               {len(sales)}")
    for status in SaleStatus:
        print(f"{status.value.capitalize() + ':':<27}{counts[status]}")
    print("=" * 50)

    stale_cutoff = utc_now() - timedelta(days=1)
    stale = [s for s in sales if s.status is SaleStatus.PENDING and s.sale_date < stale_cutoff]
    if stale:
        print("\nPending for more than a day (payment webhook missing?):")
        print("-" * 50)
        for sale in sorted(stale, key=lambda s: s.sale_date):
            print(f"{sale.sale_id}  VIN {sale.vin}  since {sale.sale_date:%Y-%m-%d %H:%M}")

    print("\nCompleted vehicles still listed as available upstream:")
    print("-" * 50)
    try:
        with VehicleInventoryClient(
            settings.vehicle_service_url, timeout=settings.http_timeout_seconds
        ) as inventory:
            available_ids = {v.id for v in inventory.list_available()}
    except VehicleInventoryError as e:
        print(f"Could not reach inventory service: {e}")
        return

    mismatched = [
        s for s in sales if s.status is SaleStatus.COMPLETED and s.vehicle_id in available_ids
    ]
    for sale in mismatched:
        print(f"{sale.vehicle_id}  VIN {sale.vin}  (sale {sale.sale_id})")
    if not mismatched:
        print("None")
    print("-" * 50)


if __name__ == "__main__":
    check_sales_status()
