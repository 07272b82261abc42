"""
Vehicle API Endpoints.

Browse vehicles currently available for sale.
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_vehicle_service
from api.models import MessageResponse, VehicleListResponse, VehicleResponse
from services.vehicle_service import VehicleService

router = APIRouter()


@router.get(
    "/vehicles/available",
    response_model=VehicleListResponse,
    summary="List Available Vehicles",
    description="List vehicles available for sale, optionally sorted by price.",
)
def list_available_vehicles(
    sort: Optional[Literal["asc", "desc"]] = Query(None, description="Sort by price: 'asc' or 'desc'"),
    service: VehicleService = Depends(get_vehicle_service),
):
    """
    List available vehicles.

    Results come from the availability cache (refreshed every few minutes).
    If the inventory service is down, the last known list is returned.

    **Example usage:**
    - `GET /api/v1/vehicles/available`
    - `GET /api/v1/vehicles/available?sort=asc`
    """
    vehicles = service.list_available(sort)
    return VehicleListResponse(data=[VehicleResponse.from_vehicle(v) for v in vehicles])


@router.delete(
    "/vehicles/cache",
    response_model=MessageResponse,
    summary="Clear Vehicle Cache",
    description="Drop cached availability so the next listing refetches from the inventory service.",
)
def clear_vehicle_cache(service: VehicleService = Depends(get_vehicle_service)):
    service.clear_cache()
    return MessageResponse()
