"""
Sales API Endpoints.

Endpoints for registering sales, confirming payments and querying sale history.
Domain errors propagate to the handlers in api.errors.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_sale_service
from api.models import (
    CreateSaleRequest,
    CreateSaleResponse,
    MessageResponse,
    PaymentWebhookRequest,
    SaleResponse,
)
from services.sale_service import SaleService

router = APIRouter()


@router.post(
    "/sales",
    response_model=CreateSaleResponse,
    summary="Create Sale",
    description="Register a pending sale for an available vehicle.",
)
def create_sale(request: CreateSaleRequest, service: SaleService = Depends(get_sale_service)):
    """
    Register a sale.

    **Process:**
    1. Validates the customer CPF (any punctuation accepted)
    2. Checks the vehicle directly with the inventory service
    3. Rejects sold vehicles and VINs with an active sale
    4. Stores the sale as `pending` until payment is confirmed

    **Example request:**
    ```json
    {
      "vehicleId": "vehicle-1",
      "customerName": "João da Silva",
      "customerCPF": "123.456.789-09",
      "salePrice": "25000.00"
    }
    ```
    """
    sale = service.create_sale(
        vehicle_id=request.vehicle_id,
        customer_name=request.customer_name,
        raw_identity_number=request.customer_cpf,
        price=request.sale_price,
    )
    return CreateSaleResponse(sale_id=sale.sale_id)


@router.get(
    "/sales/sold",
    response_model=List[SaleResponse],
    summary="List Sold Vehicles",
    description="List completed sales, optionally sorted by sale price.",
)
def list_sold_vehicles(
    sort: Optional[Literal["asc", "desc"]] = Query(None, description="Sort by price: 'asc' or 'desc'"),
    service: SaleService = Depends(get_sale_service),
):
    return [SaleResponse.from_sale(s) for s in service.get_all_vehicles_sold(sort)]


@router.get(
    "/sales",
    response_model=List[SaleResponse],
    summary="Sales by CPF",
    description="List every sale for a customer CPF, whatever its status.",
)
def list_sales_by_cpf(
    cpf: str = Query(..., description="Customer CPF in any formatting"),
    service: SaleService = Depends(get_sale_service),
):
    return [SaleResponse.from_sale(s) for s in service.get_sales_by_identity_number(cpf)]


@router.post(
    "/sales/webhook/payment",
    response_model=MessageResponse,
    summary="Payment Webhook",
    description="Confirm or reject payment for a pending sale.",
)
def payment_webhook(request: PaymentWebhookRequest, service: SaleService = Depends(get_sale_service)):
    """
    Apply a payment outcome.

    - `approved`: sale becomes `completed` and the inventory service is told
      the vehicle is sold
    - `rejected`: sale becomes `canceled`, freeing the VIN for a new sale

    A sale that is no longer pending answers 409, so duplicate deliveries
    do not change anything.
    """
    service.process_payment(request.sale_id, request.payment_status)
    return MessageResponse()
