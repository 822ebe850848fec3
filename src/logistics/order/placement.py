"""Order placement: command and handler."""

import structlog
from protean import handle
from protean.fields import DateTime, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.domain import logistics
from logistics.order.order import Order

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Order")
class PlaceOrder:
    """Place a new delivery order on behalf of a shipper."""

    shipper_id = Identifier(required=True)
    pickup_address = String(required=True, max_length=500)
    dropoff_address = String(required=True, max_length=500)
    pickup_start_at = DateTime()
    pickup_end_at = DateTime()
    dropoff_start_at = DateTime()
    dropoff_end_at = DateTime()
    total_weight_kg = Float()
    notes = Text()


@logistics.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            shipper_id=command.shipper_id,
            pickup_address=command.pickup_address,
            dropoff_address=command.dropoff_address,
            pickup_start_at=command.pickup_start_at,
            pickup_end_at=command.pickup_end_at,
            dropoff_start_at=command.dropoff_start_at,
            dropoff_end_at=command.dropoff_end_at,
            total_weight_kg=command.total_weight_kg,
            notes=command.notes,
        )
        current_domain.repository_for(Order).add(order)

        current_domain.repository_for(DeliveryEvent).record(
            DeliveryEvent.record(
                order_id=str(order.id),
                event_type=EventType.ORDER_PLACED,
                payload={
                    "shipperId": str(order.shipper_id),
                    "pickupAddress": order.pickup_address.text,
                    "dropoffAddress": order.dropoff_address.text,
                },
            )
        )
        logger.info("Order placed", order_id=str(order.id), shipper_id=str(order.shipper_id))
        return order
