"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.sale import Sale
from domain.vehicle import Vehicle


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Vehicle Models
# ============================================================================

class VehicleResponse(_WireModel):
    """Single available vehicle."""
    id: str
    make: str
    model: str
    year: int
    vin: str
    price: str
    color: str
    status: str

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(**vehicle.to_payload())


class VehicleListResponse(_WireModel):
    """Response for the available-vehicle listing."""
    data: List[VehicleResponse]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": [
                    {
                        "id": "vehicle-1",
                        "make": "Toyota",
                        "model": "Corolla",
                        "year": 2023,
                        "vin": "1HGBH41JXMN109186",
                        "price": "25000.00",
                        "color": "Prata",
                        "status": "available",
                    }
                ]
            }
        }
    )


# ============================================================================
# Sale Models
# ============================================================================

class CreateSaleRequest(_WireModel):
    """Request to register a vehicle sale."""
    vehicle_id: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    customer_cpf: str = Field(..., alias="customerCPF", description="CPF in any formatting")
    sale_price: str = Field(
        ...,
        pattern=r"^\d+(\.\d{1,2})?$",
        description="Decimal number with up to 2 decimal places",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicleId": "vehicle-1",
                "customerName": "João da Silva",
                "customerCPF": "123.456.789-09",
                "salePrice": "25000.00",
            }
        }
    )


class CreateSaleResponse(_WireModel):
    message: str = "ok"
    sale_id: str


class PaymentWebhookRequest(_WireModel):
    """Payment confirmation sent by the payment provider."""
    sale_id: str = Field(..., min_length=1)
    payment_status: Literal["approved", "rejected"]


class SaleResponse(_WireModel):
    """A sale with the customer CPF rendered as XXX.XXX.XXX-XX."""
    id: str
    vehicle_id: str
    customer_name: str
    customer_cpf: str = Field(..., alias="customerCPF")
    make: str
    model: str
    year: int
    vin: str
    color: str
    price: Decimal
    sale_date: datetime
    status: str

    @classmethod
    def from_sale(cls, sale: Sale) -> "SaleResponse":
        return cls(
            id=sale.sale_id,
            vehicle_id=sale.vehicle_id,
            customer_name=sale.customer_name,
            customer_cpf=sale.customer_identity_number.formatted,
            make=sale.make,
            model=sale.model,
            year=sale.year,
            vin=sale.vin,
            color=sale.color,
            price=sale.price,
            sale_date=sale.sale_date,
            status=sale.status.value,
        )


class MessageResponse(BaseModel):
    message: str = "ok"


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    status_code: int
