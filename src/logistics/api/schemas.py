"""Pydantic API schemas for the Logistics domain.

These are the external API contracts, separate from domain commands.
The API layer translates between these schemas and domain commands.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class CreateAccountRequest(BaseModel):
    name: str
    role: str


class PlaceOrderRequest(BaseModel):
    shipper_id: str
    pickup_address: str
    dropoff_address: str
    pickup_start_at: datetime | None = None
    pickup_end_at: datetime | None = None
    dropoff_start_at: datetime | None = None
    dropoff_end_at: datetime | None = None
    total_weight_kg: float | None = None
    notes: str | None = None


class DeliverOrderRequest(BaseModel):
    courier_id: str


class CancelOrderRequest(BaseModel):
    reason: str | None = None


class OfferAssignmentRequest(BaseModel):
    order_id: str
    courier_id: str


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class AccountResponse(BaseModel):
    id: str
    name: str
    role: str
    created_at: datetime | None = None


class OrderResponse(BaseModel):
    id: str
    shipper_id: str
    status: str
    pickup_address: str
    dropoff_address: str
    pickup_start_at: datetime | None = None
    pickup_end_at: datetime | None = None
    dropoff_start_at: datetime | None = None
    dropoff_end_at: datetime | None = None
    total_weight_kg: float
    notes: str | None = None
    created_at: datetime | None = None


class AssignmentResponse(BaseModel):
    id: str
    order_id: str
    courier_id: str
    status: str
    offered_at: datetime | None = None
    responded_at: datetime | None = None


class DeliveryEventResponse(BaseModel):
    id: str
    order_id: str
    courier_id: str | None = None
    event_type: str
    payload: dict[str, Any] | None = None
    occurred_at: datetime | None = None
