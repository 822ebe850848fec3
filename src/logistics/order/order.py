"""Order aggregate (CQRS): a shipper's request to move goods from A to B.

State Machine:
    PLACED → READY_TO_SHIP → ASSIGNED → DELIVERED
    {PLACED, READY_TO_SHIP, ASSIGNED} → CANCELLED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text, ValueObject

from logistics.domain import logistics
from logistics.shared.address import Address
from logistics.shared.time_window import TimeWindow
from logistics.shared.weight import Weight


class OrderStatus(Enum):
    PLACED = "PLACED"
    READY_TO_SHIP = "READY_TO_SHIP"
    ASSIGNED = "ASSIGNED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def can_be_assigned(self) -> bool:
        return self is OrderStatus.READY_TO_SHIP

    @property
    def is_delivered(self) -> bool:
        return self is OrderStatus.DELIVERED

    @property
    def is_cancelled(self) -> bool:
        return self is OrderStatus.CANCELLED


@logistics.aggregate
class Order:
    shipper_id = Identifier(required=True)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PLACED.value,
    )
    pickup_address = ValueObject(Address, required=True)
    dropoff_address = ValueObject(Address, required=True)
    pickup_window = ValueObject(TimeWindow)
    dropoff_window = ValueObject(TimeWindow)
    total_weight = ValueObject(Weight)
    notes = Text()
    created_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        shipper_id: str,
        pickup_address: str,
        dropoff_address: str,
        pickup_start_at: datetime | None = None,
        pickup_end_at: datetime | None = None,
        dropoff_start_at: datetime | None = None,
        dropoff_end_at: datetime | None = None,
        total_weight_kg: float | None = None,
        notes: str | None = None,
    ):
        """Create a new order in PLACED state."""
        return cls(
            shipper_id=shipper_id,
            status=OrderStatus.PLACED.value,
            pickup_address=Address(text=pickup_address),
            dropoff_address=Address(text=dropoff_address),
            pickup_window=TimeWindow(start_at=pickup_start_at, end_at=pickup_end_at),
            dropoff_window=TimeWindow(start_at=dropoff_start_at, end_at=dropoff_end_at),
            total_weight=Weight(kilograms=total_weight_kg if total_weight_kg is not None else 0.0),
            notes=notes,
            created_at=datetime.now(UTC),
        )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def can_be_assigned(self) -> bool:
        return OrderStatus(self.status).can_be_assigned

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def mark_ready_to_ship(self) -> None:
        if OrderStatus(self.status) != OrderStatus.PLACED:
            raise ValidationError({"status": ["Only PLACED orders can be marked ready to ship"]})
        self.status = OrderStatus.READY_TO_SHIP.value

    def assign(self) -> None:
        if not self.can_be_assigned():
            raise ValidationError({"status": ["Only READY_TO_SHIP orders can be assigned"]})
        self.status = OrderStatus.ASSIGNED.value

    def deliver(self) -> None:
        if OrderStatus(self.status) != OrderStatus.ASSIGNED:
            raise ValidationError({"status": ["Only ASSIGNED orders can be delivered"]})
        self.status = OrderStatus.DELIVERED.value

    def cancel(self) -> None:
        """Cancel the order. Re-cancelling is allowed; delivered orders are final."""
        if OrderStatus(self.status).is_delivered:
            raise ValidationError({"status": ["Delivered orders cannot be cancelled"]})
        self.status = OrderStatus.CANCELLED.value
