"""DeliveryEvent aggregate: append-only audit trail of order lifecycle changes."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text

from logistics.domain import logistics


class EventType(Enum):
    ORDER_PLACED = "ORDER_PLACED"
    READY_TO_SHIP = "READY_TO_SHIP"
    ASSIGNED = "ASSIGNED"
    PICKED_UP = "PICKED_UP"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@logistics.aggregate
class DeliveryEvent:
    """A recorded lifecycle transition of an order.

    Events are written once and never changed. The payload is stored as a
    JSON text blob so that each event type can carry its own details.
    """

    order_id = Identifier(required=True)
    courier_id = Identifier()
    event_type = String(required=True, choices=EventType)
    payload_json = Text()
    occurred_at = DateTime()

    @classmethod
    def record(
        cls,
        order_id: str,
        event_type: EventType,
        payload: dict | None = None,
        courier_id: str | None = None,
    ):
        try:
            event_type = EventType(event_type)
        except ValueError:
            raise ValidationError({"event_type": [f"Unknown event type {event_type!r}"]}) from None

        return cls(
            order_id=order_id,
            courier_id=courier_id,
            event_type=event_type.value,
            payload_json=json.dumps(payload) if payload is not None else None,
            occurred_at=datetime.now(UTC),
        )

    def payload(self) -> dict | None:
        """Decoded payload, or None when absent, not valid JSON, or not an object."""
        if not self.payload_json:
            return None
        try:
            payload = json.loads(self.payload_json)
        except json.JSONDecodeError:
            return None
        return payload if isinstance(payload, dict) else None
