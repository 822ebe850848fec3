"""Order readiness: command and handler.

A shipper marks an order ready to ship once the goods can be collected;
only then can it be offered to couriers.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.domain import logistics
from logistics.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Order")
class MarkReadyToShip:
    order_id = Identifier(required=True)


@logistics.command_handler(part_of=Order)
class MarkReadyToShipHandler:
    @handle(MarkReadyToShip)
    def mark_ready_to_ship(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_ready_to_ship()
        repo.add(order)

        current_domain.repository_for(DeliveryEvent).record(
            DeliveryEvent.record(
                order_id=str(order.id),
                event_type=EventType.READY_TO_SHIP,
                payload={"status": OrderStatus.READY_TO_SHIP.value},
            )
        )
        logger.info("Order ready to ship", order_id=str(order.id))
        return order
