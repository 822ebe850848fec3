"""FastAPI routes for the Logistics domain.

Each route translates between Pydantic schemas (external contract) and
Protean commands (internal domain concepts). Reads go straight to the
custom repositories.
"""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from logistics.account.account import Account
from logistics.account.creation import CreateAccount
from logistics.api.schemas import (
    AccountResponse,
    AssignmentResponse,
    CancelOrderRequest,
    CreateAccountRequest,
    DeliverOrderRequest,
    DeliveryEventResponse,
    OfferAssignmentRequest,
    OrderResponse,
    PlaceOrderRequest,
)
from logistics.assignment.acceptance import AcceptAssignment
from logistics.assignment.assignment import Assignment
from logistics.assignment.offer import OfferAssignment
from logistics.assignment.rejection import RejectAssignment
from logistics.delivery_event.delivery_event import DeliveryEvent
from logistics.order.cancellation import CancelOrder
from logistics.order.delivery import DeliverOrder
from logistics.order.order import Order, OrderStatus
from logistics.order.placement import PlaceOrder
from logistics.order.readiness import MarkReadyToShip


# ---------------------------------------------------------------------------
# Representations
# ---------------------------------------------------------------------------
def _account_response(account) -> AccountResponse:
    return AccountResponse(
        id=str(account.id),
        name=account.name,
        role=account.role,
        created_at=account.created_at,
    )


def _order_response(order) -> OrderResponse:
    pickup, dropoff = order.pickup_window, order.dropoff_window
    return OrderResponse(
        id=str(order.id),
        shipper_id=str(order.shipper_id),
        status=order.status,
        pickup_address=order.pickup_address.text,
        dropoff_address=order.dropoff_address.text,
        pickup_start_at=pickup.start_at if pickup else None,
        pickup_end_at=pickup.end_at if pickup else None,
        dropoff_start_at=dropoff.start_at if dropoff else None,
        dropoff_end_at=dropoff.end_at if dropoff else None,
        total_weight_kg=order.total_weight.kilograms if order.total_weight else 0.0,
        notes=order.notes,
        created_at=order.created_at,
    )


def _assignment_response(assignment) -> AssignmentResponse:
    return AssignmentResponse(
        id=str(assignment.id),
        order_id=str(assignment.order_id),
        courier_id=str(assignment.courier_id),
        status=assignment.status,
        offered_at=assignment.offered_at,
        responded_at=assignment.responded_at,
    )


def _event_response(event) -> DeliveryEventResponse:
    return DeliveryEventResponse(
        id=str(event.id),
        order_id=str(event.order_id),
        courier_id=str(event.courier_id) if event.courier_id else None,
        event_type=event.event_type,
        payload=event.payload(),
        occurred_at=event.occurred_at,
    )


# ---------------------------------------------------------------------------
# Account Router
# ---------------------------------------------------------------------------
account_router = APIRouter(prefix="/accounts", tags=["accounts"])


@account_router.post("", status_code=201, response_model=AccountResponse)
async def create_account(body: CreateAccountRequest) -> AccountResponse:
    """Register a shipper or courier account."""
    command = CreateAccount(name=body.name, role=body.role)
    account = current_domain.process(command, asynchronous=False)
    return _account_response(account)


@account_router.get("/{account_id}", response_model=AccountResponse)
async def get_account(account_id: str) -> AccountResponse:
    account = current_domain.repository_for(Account).find_by_id(account_id)
    if account is None:
        raise HTTPException(status_code=404, detail="Account not found")
    return _account_response(account)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest) -> OrderResponse:
    """Place a new delivery order."""
    command = PlaceOrder(
        shipper_id=body.shipper_id,
        pickup_address=body.pickup_address,
        dropoff_address=body.dropoff_address,
        pickup_start_at=body.pickup_start_at,
        pickup_end_at=body.pickup_end_at,
        dropoff_start_at=body.dropoff_start_at,
        dropoff_end_at=body.dropoff_end_at,
        total_weight_kg=body.total_weight_kg,
        notes=body.notes,
    )
    order = current_domain.process(command, asynchronous=False)
    return _order_response(order)


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(shipper_id: str | None = None, status: OrderStatus | None = None) -> list[OrderResponse]:
    """List orders of one shipper, or all orders in one status."""
    repo = current_domain.repository_for(Order)
    if shipper_id:
        orders = repo.find_by_shipper_id(shipper_id)
        if status is not None:
            orders = [o for o in orders if o.status == status.value]
    elif status is not None:
        orders = repo.find_by_status(status)
    else:
        raise HTTPException(status_code=400, detail="Filter by shipper_id or status")
    return [_order_response(o) for o in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).find_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return _order_response(order)


@order_router.get("/{order_id}/events", response_model=list[DeliveryEventResponse])
async def list_order_events(order_id: str) -> list[DeliveryEventResponse]:
    """Delivery events recorded for an order, oldest first."""
    events = current_domain.repository_for(DeliveryEvent).find_by_order_id(order_id)
    return [_event_response(e) for e in events]


@order_router.put("/{order_id}/ready-to-ship", response_model=OrderResponse)
async def mark_ready_to_ship(order_id: str) -> OrderResponse:
    """Mark a placed order as ready to be offered to couriers."""
    order = current_domain.process(MarkReadyToShip(order_id=order_id), asynchronous=False)
    return _order_response(order)


@order_router.put("/{order_id}/deliver", response_model=OrderResponse)
async def deliver_order(order_id: str, body: DeliverOrderRequest) -> OrderResponse:
    """Confirm delivery by the courier holding the accepted assignment."""
    command = DeliverOrder(order_id=order_id, courier_id=body.courier_id)
    order = current_domain.process(command, asynchronous=False)
    return _order_response(order)


@order_router.put("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str, body: CancelOrderRequest) -> OrderResponse:
    """Cancel an order that has not been delivered."""
    command = CancelOrder(order_id=order_id, reason=body.reason)
    order = current_domain.process(command, asynchronous=False)
    return _order_response(order)


# ---------------------------------------------------------------------------
# Assignment Router
# ---------------------------------------------------------------------------
assignment_router = APIRouter(prefix="/assignments", tags=["assignments"])


@assignment_router.post("", status_code=201, response_model=AssignmentResponse)
async def offer_assignment(body: OfferAssignmentRequest) -> AssignmentResponse:
    """Offer a ready-to-ship order to a courier."""
    command = OfferAssignment(order_id=body.order_id, courier_id=body.courier_id)
    assignment = current_domain.process(command, asynchronous=False)
    return _assignment_response(assignment)


@assignment_router.get("", response_model=list[AssignmentResponse])
async def list_assignments(courier_id: str | None = None, order_id: str | None = None) -> list[AssignmentResponse]:
    """List assignments offered to a courier, or made for an order."""
    repo = current_domain.repository_for(Assignment)
    if courier_id:
        assignments = repo.find_by_courier_id(courier_id)
    elif order_id:
        assignments = repo.find_by_order_id(order_id)
    else:
        raise HTTPException(status_code=400, detail="Filter by courier_id or order_id")
    return [_assignment_response(a) for a in assignments]


@assignment_router.put("/{assignment_id}/accept", response_model=AssignmentResponse)
async def accept_assignment(assignment_id: str) -> AssignmentResponse:
    """Courier accepts the offer; the order becomes ASSIGNED."""
    assignment = current_domain.process(AcceptAssignment(assignment_id=assignment_id), asynchronous=False)
    return _assignment_response(assignment)


@assignment_router.put("/{assignment_id}/reject", response_model=AssignmentResponse)
async def reject_assignment(assignment_id: str) -> AssignmentResponse:
    """Courier declines the offer."""
    assignment = current_domain.process(RejectAssignment(assignment_id=assignment_id), asynchronous=False)
    return _assignment_response(assignment)
